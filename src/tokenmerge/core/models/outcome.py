"""
Module: outcome

Purpose:
    Provides MergeOutcome - the result of a merge attempt. A failed match
    is data, not an exception: callers branch on `success`.

Key Functions:
    - MergeOutcome.matched(...): Successful rewrite
    - MergeOutcome.no_match(...): No available rule matched

Dependencies:
    - dataclasses (std)
    - .rules.MergeRule
    - .tokens.Token

Used By:
    - engine.merge.plan_merge
    - engine.session.TokenizationSession.try_merge
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .rules import MergeRule
from .tokens import Token, TokenId


@dataclass(frozen=True)
class MergeOutcome:
    """
    Result of a merge attempt.

    Attributes:
        success: True when an available rule matched the selection
        matched_rule: The rule applied (success only)
        produced: The new token appended to output (success only)
        consumed: Ids of the tokens removed (success only)
        pattern: The candidate pattern that matched (success only)
        tried_patterns: Candidate patterns in the order they were tried
        step_complete: True when the produced token is the step's target word

    Invariants:
        - success implies matched_rule, produced and pattern are set
        - failure implies consumed is empty and nothing was produced

    Example:
        >>> outcome = session.try_merge({c.id, a.id})
        >>> outcome.success, outcome.matched_rule.target
        (True, 'ca')
    """

    success: bool
    matched_rule: Optional[MergeRule] = None
    produced: Optional[Token] = None
    consumed: tuple[TokenId, ...] = ()
    pattern: Optional[str] = None
    tried_patterns: tuple[str, ...] = ()
    step_complete: bool = False

    def __post_init__(self) -> None:
        """Validate outcome on construction."""
        if self.success:
            if self.matched_rule is None or self.produced is None or self.pattern is None:
                raise ValueError("Successful outcome requires rule, produced token and pattern")
        elif self.matched_rule is not None or self.produced is not None or self.consumed:
            raise ValueError("Failed outcome cannot carry merge results")

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def matched(
        cls,
        rule: MergeRule,
        produced: Token,
        consumed: tuple[TokenId, ...],
        pattern: str,
        tried_patterns: tuple[str, ...],
        step_complete: bool = False,
    ) -> MergeOutcome:
        """Create a successful outcome."""
        return cls(
            success=True,
            matched_rule=rule,
            produced=produced,
            consumed=consumed,
            pattern=pattern,
            tried_patterns=tried_patterns,
            step_complete=step_complete,
        )

    @classmethod
    def no_match(cls, tried_patterns: tuple[str, ...] = ()) -> MergeOutcome:
        """Create a failed outcome."""
        return cls(success=False, tried_patterns=tried_patterns)

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        if self.success:
            return f"MergeOutcome(success, {self.pattern!r} -> {self.matched_rule.target!r})"
        return f"MergeOutcome(no match, tried={list(self.tried_patterns)})"
