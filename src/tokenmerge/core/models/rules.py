"""
Module: rules

Purpose:
    Provides the MergeRule dataclass - a production rule that rewrites an
    exact space-joined pattern of token texts into one new token text.

Key Functions:
    - MergeRule.parts: Pattern split into token texts
    - MergeRule.matches(pattern): Exact full-string comparison

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.curriculum: CurriculumStep, Curriculum
    - engine.availability: Availability filter
    - engine.merge: Pattern matching
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

PATTERN_SEPARATOR = " "


@dataclass(frozen=True)
class MergeRule:
    """
    Immutable merge production rule.

    Attributes:
        source: Space-joined token texts the rule consumes (e.g. "ca t")
        target: Text of the token the rule produces (e.g. "cat")
        description: Short label shown with the rule
        explanation: Learner-facing explanation of the merge

    Invariants:
        - source splits on a single space into non-empty parts
        - target is non-empty

    Example:
        >>> rule = MergeRule("c a", "ca", "First two letters", "...")
        >>> rule.parts
        ('c', 'a')
        >>> rule.matches("c a")
        True
    """

    source: str
    target: str
    description: str = ""
    explanation: str = ""

    def __post_init__(self) -> None:
        """Validate rule on construction."""
        if not self.source:
            raise ValueError("Rule source pattern cannot be empty")
        if any(not part for part in self.source.split(PATTERN_SEPARATOR)):
            raise ValueError(
                f"Rule source must be single-space separated token texts: {self.source!r}"
            )
        if not self.target:
            raise ValueError(f"Rule target cannot be empty (source {self.source!r})")

    @property
    def parts(self) -> tuple[str, ...]:
        """Token texts the pattern is made of, in order."""
        return tuple(self.source.split(PATTERN_SEPARATOR))

    def matches(self, pattern: str) -> bool:
        """
        Check for an exact, case-sensitive match against a joined pattern.

        Substrings never match: "a t" does not match a rule for "ca t".
        """
        return self.source == pattern

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"MergeRule({self.source!r} -> {self.target!r})"


def join_pattern(texts: Iterable[str]) -> str:
    """Join token texts with the pattern separator."""
    return PATTERN_SEPARATOR.join(texts)
