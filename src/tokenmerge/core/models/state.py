"""
Module: state

Purpose:
    Provides SessionState - an immutable snapshot of a tokenization
    session. The available rules are computed when the snapshot is taken
    and never patched afterwards.

Dependencies:
    - dataclasses (std)
    - .tokens.Token
    - .rules.MergeRule

Used By:
    - engine.session.TokenizationSession.snapshot
"""

from __future__ import annotations

from dataclasses import dataclass

from .rules import MergeRule
from .tokens import Token, TokenId


@dataclass(frozen=True)
class SessionState:
    """
    Snapshot of session state.

    Attributes:
        current_step: Curriculum step index
        input: Tokens still waiting to be merged, in order
        output: Merge results, in order of creation
        available_rules: Rules usable for this exact input/output

    Invariants:
        - No token id appears in both input and output
    """

    current_step: int
    input: tuple[Token, ...]
    output: tuple[Token, ...]
    available_rules: tuple[MergeRule, ...]

    def __post_init__(self) -> None:
        """Validate snapshot on construction."""
        shared = {t.id for t in self.input} & {t.id for t in self.output}
        if shared:
            raise ValueError(f"Token ids shared between input and output: {shared}")

    @property
    def token_ids(self) -> frozenset[TokenId]:
        """All token ids currently in play."""
        return frozenset(t.id for t in self.input + self.output)

    @property
    def input_texts(self) -> tuple[str, ...]:
        return tuple(t.text for t in self.input)

    @property
    def output_texts(self) -> tuple[str, ...]:
        return tuple(t.text for t in self.output)

    @property
    def token_count(self) -> int:
        return len(self.input) + len(self.output)

    def __repr__(self) -> str:
        return (
            f"SessionState(step={self.current_step}, "
            f"input={list(self.input_texts)}, output={list(self.output_texts)}, "
            f"rules={len(self.available_rules)})"
        )
