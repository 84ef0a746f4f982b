"""
Scoring collaborator interface.

The engine reports each merge attempt as correct or incorrect; turning
that into points is the collaborator's job.
"""

from .scorer import (
    MergeScorer,
    PointsScorer,
    ScoringConfig,
    ScoreCallback,
    notify_scorer,
)

__all__ = [
    "MergeScorer",
    "PointsScorer",
    "ScoringConfig",
    "ScoreCallback",
    "notify_scorer",
]
