"""
Token Merge Core Package

Shared data models and utilities for the curriculum and the merge engine.

1. **Immutable Data Models**
   - Tokens, rules, steps and outcomes are frozen dataclasses
   - The session replaces its token lists, it never edits a token

2. **Derived Values (Never Stored)**
   - Available rules are recomputed from the step and the token texts
   - Step indices are positional in the curriculum
"""

from .models import (
    Token,
    TokenId,
    tokenize,
    MergeRule,
    MergeOutcome,
    Curriculum,
    CurriculumStep,
    SessionState,
)

__all__ = [
    "Token",
    "TokenId",
    "tokenize",
    "MergeRule",
    "MergeOutcome",
    "Curriculum",
    "CurriculumStep",
    "SessionState",
]
