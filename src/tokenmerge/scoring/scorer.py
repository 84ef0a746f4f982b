"""
Module: scoring.scorer

Purpose:
    The narrow scoring interface the merge engine reports to, plus a
    reference points ledger for one tokenization module.

    The engine only says whether a merge attempt was correct. Point values
    belong to the collaborator.

Key Classes:
    - MergeScorer: Abstract collaborator receiving merge results
    - PointsScorer: Module score ledger (+10 correct, -5 incorrect, floor 0)
    - ScoringConfig: Point values for PointsScorer

Used By:
    - engine.session.TokenizationSession.try_merge
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Union

logger = logging.getLogger(__name__)

ScoreCallback = Callable[[bool], None]


class MergeScorer(ABC):
    """
    Receives the result of every merge attempt.

    Called synchronously from try_merge; implementations must not call
    back into the session.
    """

    @abstractmethod
    def on_merge_result(self, correct: bool) -> None:
        """
        Record one merge attempt.

        Args:
            correct: True if a rule matched and the merge was applied
        """


ScorerLike = Union[MergeScorer, ScoreCallback]


def notify_scorer(scorer: Optional[ScorerLike], correct: bool) -> None:
    """Deliver a merge result to a scorer object or plain callback."""
    if scorer is None:
        return
    if isinstance(scorer, MergeScorer):
        scorer.on_merge_result(correct)
    else:
        scorer(correct)


@dataclass(frozen=True)
class ScoringConfig:
    """
    Point values for a module score ledger (immutable).

    Attributes:
        correct_points: Points added for a successful merge
        incorrect_penalty: Points added (<= 0) for a failed attempt
        floor: Lowest score allowed, None for no floor

    Invariants:
        - correct_points > 0
        - incorrect_penalty <= 0
    """

    correct_points: int = 10
    incorrect_penalty: int = -5
    floor: Optional[int] = 0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.correct_points <= 0:
            raise ValueError(f"correct_points must be positive: {self.correct_points}")
        if self.incorrect_penalty > 0:
            raise ValueError(
                f"incorrect_penalty must be zero or negative: {self.incorrect_penalty}"
            )


class PointsScorer(MergeScorer):
    """
    Running score for one module.

    Example:
        >>> scorer = PointsScorer()
        >>> scorer.on_merge_result(True)
        >>> scorer.on_merge_result(False)
        >>> scorer.score
        5
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()
        self.score = 0
        self.correct_count = 0
        self.incorrect_count = 0

    def on_merge_result(self, correct: bool) -> None:
        if correct:
            self.correct_count += 1
            points = self.config.correct_points
        else:
            self.incorrect_count += 1
            points = self.config.incorrect_penalty

        new_score = self.score + points
        if self.config.floor is not None:
            new_score = max(self.config.floor, new_score)
        logger.debug(f"Merge {'correct' if correct else 'incorrect'}: score {self.score} -> {new_score}")
        self.score = new_score

    @property
    def attempts(self) -> int:
        return self.correct_count + self.incorrect_count

    def reset(self) -> None:
        self.score = 0
        self.correct_count = 0
        self.incorrect_count = 0

    def __repr__(self) -> str:
        return f"PointsScorer(score={self.score}, {self.correct_count}/{self.attempts} correct)"
