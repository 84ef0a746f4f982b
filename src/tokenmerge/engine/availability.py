"""
Module: engine.availability

Purpose:
    Compute which catalog rules are usable right now.

    A rule is available when it belongs to the current step's group and
    every part of its pattern is the text of some token in input or output.
    Only presence counts: multiplicity and order are ignored, so "o o" is
    available as soon as a single "o" exists.

Key Functions:
    - available_rules(): Pure availability filter

Used By:
    - engine.session.TokenizationSession
"""

from __future__ import annotations

from typing import Iterable, Sequence

from tokenmerge.core.models import Curriculum, MergeRule, Token


def token_texts(*sequences: Iterable[Token]) -> frozenset[str]:
    """Set of texts present across the given token sequences."""
    return frozenset(token.text for seq in sequences for token in seq)


def is_rule_available(rule: MergeRule, present: frozenset[str]) -> bool:
    """True if every part of the rule's pattern is present."""
    return all(part in present for part in rule.parts)


def available_rules(
    curriculum: Curriculum,
    step: int,
    input_tokens: Sequence[Token],
    output_tokens: Sequence[Token],
) -> tuple[MergeRule, ...]:
    """
    Filter the current step's rule group by token presence.

    Computed from scratch on every call; there is no cache to go stale.

    Args:
        curriculum: Rule catalog
        step: Current step index
        input_tokens: Current input sequence
        output_tokens: Current output sequence

    Returns:
        Available rules in catalog order

    Raises:
        InvalidStepError: If step is out of range

    Example:
        >>> available_rules(curriculum, 0, tokenize("cat"), [])
        (MergeRule('c a' -> 'ca'),)
    """
    present = token_texts(input_tokens, output_tokens)
    return tuple(
        rule for rule in curriculum.rules_for_step(step)
        if is_rule_available(rule, present)
    )
