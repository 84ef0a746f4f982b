"""
Module: tokens

Purpose:
    Provides the Token dataclass - an identity-bearing unit of text.
    Atomic tokens hold a single character; composite tokens hold the
    text produced by a merge.

Key Functions:
    - Token.create(text): Create a token with a fresh identity
    - tokenize(word): One token per character, left to right

Dependencies:
    - dataclasses (std)
    - uuid (std)

Used By:
    - core.models.outcome.MergeOutcome
    - engine.merge: Partitioning and rewriting
    - engine.session.TokenizationSession
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import List

TokenId = uuid.UUID


@dataclass(frozen=True, slots=True)
class Token:
    """
    Immutable unit of text with stable identity.

    Identity is assigned once at creation and never reused, so two tokens
    with the same text are still distinct (e.g. the two "o"s in "book").

    Attributes:
        text: Non-empty token text
        id: Unique identity (uuid4)

    Invariants:
        - text is non-empty
        - id never changes

    Example:
        >>> t = Token.create("ca")
        >>> t.text
        'ca'
        >>> t == Token.create("ca")
        False
    """

    text: str
    id: TokenId = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        """Validate token on construction."""
        if not isinstance(self.text, str) or not self.text:
            raise ValueError(f"Token text must be a non-empty string: {self.text!r}")

    @classmethod
    def create(cls, text: str) -> Token:
        """
        Create a token with a fresh identity.

        Args:
            text: Token text

        Returns:
            New Token
        """
        return cls(text=text)

    @property
    def is_atomic(self) -> bool:
        """True for single-character tokens."""
        return len(self.text) == 1

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Token({self.text!r}, {str(self.id)[:8]})"


def tokenize(word: str) -> List[Token]:
    """
    Split a word into one atomic token per character.

    Args:
        word: Word to decompose

    Returns:
        List of new Tokens in left-to-right order
    """
    return [Token.create(ch) for ch in word]
