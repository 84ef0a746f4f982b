"""
Module: engine.merge

Purpose:
    Match a token selection against the available rules and compute the
    rewrite. Planning never mutates its inputs; the session applies a
    successful plan by swapping in the new sequences in one assignment,
    so a failed attempt leaves nothing behind.

Key Functions:
    - partition_selection(): Split a selection into input/output subsequences
    - candidate_sequences(): Ordered candidates to try
    - find_matching_rule(): First exact rule match across candidates
    - plan_merge(): Full match, returning a MergeOutcome
    - apply_merge(): New (input, output) sequences for a successful outcome

Algorithm:
    1. Partition selected ids into input-order and output-order tokens
       (ids in neither sequence are ignored)
    2. Candidates, tried in fixed priority:
       a. selected input ++ selected output
       b. selected output ++ selected input
    3. Join each non-empty candidate's texts with a single space
    4. The first available rule (catalog order) whose pattern equals the
       joined string wins; candidate (a) is exhausted before (b)
    5. On match: drop the selected tokens, append one new token with the
       rule's target to output

Used By:
    - engine.session.TokenizationSession.try_merge
"""

from __future__ import annotations

import logging
from typing import Collection, List, Optional, Sequence, Tuple

from tokenmerge.core.models import MergeOutcome, MergeRule, Token, TokenId, join_pattern

logger = logging.getLogger(__name__)


def partition_selection(
    selection: Collection[TokenId],
    input_tokens: Sequence[Token],
    output_tokens: Sequence[Token],
) -> Tuple[Tuple[Token, ...], Tuple[Token, ...]]:
    """
    Split a selection into the selected tokens of each sequence.

    Order follows the sequences, not the selection.

    Returns:
        (selected_from_input, selected_from_output)
    """
    selected = set(selection)
    from_input = tuple(t for t in input_tokens if t.id in selected)
    from_output = tuple(t for t in output_tokens if t.id in selected)
    return from_input, from_output


def candidate_sequences(
    from_input: Sequence[Token],
    from_output: Sequence[Token],
) -> List[Tuple[Token, ...]]:
    """Candidates in priority order, empty ones skipped."""
    candidates = [
        tuple(from_input) + tuple(from_output),
        tuple(from_output) + tuple(from_input),
    ]
    return [c for c in candidates if c]


def find_matching_rule(
    candidates: Sequence[Tuple[Token, ...]],
    rules: Sequence[MergeRule],
) -> Optional[Tuple[MergeRule, Tuple[Token, ...], str]]:
    """
    Find the first rule whose pattern exactly equals a candidate.

    Args:
        candidates: Token candidates in priority order
        rules: Available rules in catalog order

    Returns:
        (rule, candidate, pattern) for the first match, or None
    """
    for candidate in candidates:
        pattern = join_pattern(t.text for t in candidate)
        for rule in rules:
            if rule.matches(pattern):
                return rule, candidate, pattern
    return None


def plan_merge(
    selection: Collection[TokenId],
    input_tokens: Sequence[Token],
    output_tokens: Sequence[Token],
    rules: Sequence[MergeRule],
    *,
    target_word: Optional[str] = None,
) -> MergeOutcome:
    """
    Match a selection against the available rules.

    Nothing passed in is modified. Rules outside `rules` can never match,
    whatever the selection's text.

    Args:
        selection: Selected token ids
        input_tokens: Current input sequence
        output_tokens: Current output sequence
        rules: Currently available rules, in catalog order
        target_word: Step word, used to flag a completing merge

    Returns:
        MergeOutcome; on success it carries the new token to append
    """
    from_input, from_output = partition_selection(selection, input_tokens, output_tokens)
    candidates = candidate_sequences(from_input, from_output)
    tried = tuple(dict.fromkeys(join_pattern(t.text for t in c) for c in candidates))

    found = find_matching_rule(candidates, rules)
    if found is None:
        logger.debug(f"No rule matches selection, tried {list(tried)}")
        return MergeOutcome.no_match(tried)

    rule, candidate, pattern = found
    produced = Token.create(rule.target)
    logger.debug(f"Selection {pattern!r} matches {rule!r}")
    return MergeOutcome.matched(
        rule=rule,
        produced=produced,
        consumed=tuple(t.id for t in candidate),
        pattern=pattern,
        tried_patterns=tried,
        step_complete=target_word is not None and produced.text == target_word,
    )


def apply_merge(
    outcome: MergeOutcome,
    input_tokens: Sequence[Token],
    output_tokens: Sequence[Token],
) -> Tuple[List[Token], List[Token]]:
    """
    Build the sequences that follow a successful merge.

    Remaining tokens keep their relative order; the produced token goes
    to the end of output.

    Raises:
        ValueError: If the outcome is not a success
    """
    if not outcome.success:
        raise ValueError("Cannot apply a failed merge outcome")
    consumed = set(outcome.consumed)
    new_input = [t for t in input_tokens if t.id not in consumed]
    new_output = [t for t in output_tokens if t.id not in consumed]
    new_output.append(outcome.produced)
    return new_input, new_output
