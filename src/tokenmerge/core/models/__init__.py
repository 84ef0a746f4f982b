"""
Core Models Package

Immutable, validated data models shared by the curriculum and the engine.

All models in this package are frozen dataclasses. Session mutation
happens only in engine.session, which replaces token lists rather than
editing tokens.
"""

from .tokens import Token, TokenId, tokenize
from .rules import MergeRule, join_pattern
from .outcome import MergeOutcome
from .curriculum import Curriculum, CurriculumStep
from .state import SessionState

__all__ = [
    "Token",
    "TokenId",
    "tokenize",
    "MergeRule",
    "join_pattern",
    "MergeOutcome",
    "Curriculum",
    "CurriculumStep",
    "SessionState",
]
