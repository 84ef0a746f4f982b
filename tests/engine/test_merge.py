"""
Unit Tests for the Merge Engine

Tests for selection partitioning, candidate ordering and rule matching.
Session-level mutation is covered in test_session.py.
"""

import pytest

from tokenmerge.core.models import MergeOutcome, MergeRule, Token, tokenize
from tokenmerge.engine.merge import (
    apply_merge,
    candidate_sequences,
    find_matching_rule,
    partition_selection,
    plan_merge,
)


@pytest.fixture
def cat_tokens():
    return tokenize("cat")


class TestPartitionSelection:
    """Tests for partition_selection."""

    def test_partition_when_selection_unordered_then_sequence_order_kept(self, cat_tokens):
        c, a, t = cat_tokens
        from_input, from_output = partition_selection([t.id, c.id], cat_tokens, [])
        assert from_input == (c, t)
        assert from_output == ()

    def test_partition_when_unknown_ids_then_ignored(self, cat_tokens):
        stranger = Token.create("z")
        from_input, from_output = partition_selection({stranger.id}, cat_tokens, [])
        assert from_input == () and from_output == ()

    def test_partition_when_both_sequences_then_split(self):
        t = Token.create("t")
        ca = Token.create("ca")
        from_input, from_output = partition_selection({t.id, ca.id}, [t], [ca])
        assert from_input == (t,)
        assert from_output == (ca,)


class TestCandidateSequences:
    """Tests for candidate_sequences."""

    def test_candidates_when_both_sides_then_input_first_then_output_first(self):
        t = Token.create("t")
        ca = Token.create("ca")
        assert candidate_sequences((t,), (ca,)) == [(t, ca), (ca, t)]

    def test_candidates_when_nothing_selected_then_empty(self):
        assert candidate_sequences((), ()) == []


class TestFindMatchingRule:
    """Tests for find_matching_rule."""

    def test_find_when_no_rule_then_none(self, cat_tokens):
        _, a, t = cat_tokens
        assert find_matching_rule([(a, t), (a, t)], [MergeRule("c a", "ca")]) is None

    def test_find_when_both_orders_match_then_input_first_wins(self):
        """The first candidate is exhausted before the second, regardless of catalog order."""
        a = Token.create("a")
        b = Token.create("b")
        rules = [MergeRule("b a", "ba"), MergeRule("a b", "ab")]

        rule, candidate, pattern = find_matching_rule(candidate_sequences((a,), (b,)), rules)

        assert rule.target == "ab"
        assert candidate == (a, b)
        assert pattern == "a b"

    def test_find_when_two_rules_same_pattern_then_catalog_order_wins(self):
        a = Token.create("a")
        b = Token.create("b")
        rules = [MergeRule("a b", "first"), MergeRule("a b", "second")]
        rule, _, _ = find_matching_rule([(a, b)], rules)
        assert rule.target == "first"


class TestPlanMerge:
    """Tests for plan_merge."""

    def test_plan_when_match_then_new_token_and_consumed_ids(self, cat_tokens):
        c, a, t = cat_tokens
        outcome = plan_merge({c.id, a.id}, cat_tokens, [], [MergeRule("c a", "ca")])

        assert outcome.success
        assert outcome.produced.text == "ca"
        assert set(outcome.consumed) == {c.id, a.id}
        assert outcome.produced.id not in {c.id, a.id, t.id}

    def test_plan_when_called_then_inputs_unchanged(self, cat_tokens):
        before = list(cat_tokens)
        c, a, _ = cat_tokens
        plan_merge({c.id, a.id}, cat_tokens, [], [MergeRule("c a", "ca")])
        assert cat_tokens == before

    def test_plan_when_output_first_order_then_second_candidate_matches(self):
        """Output token before input token: 'ca t' found via output ++ input."""
        t = Token.create("t")
        ca = Token.create("ca")
        outcome = plan_merge({t.id, ca.id}, [t], [ca], [MergeRule("ca t", "cat")])

        assert outcome.success
        assert outcome.pattern == "ca t"
        assert outcome.tried_patterns == ("t ca", "ca t")

    def test_plan_when_empty_selection_then_no_match(self, cat_tokens):
        outcome = plan_merge(set(), cat_tokens, [], [MergeRule("c a", "ca")])
        assert outcome == MergeOutcome.no_match(())

    def test_plan_when_rule_not_in_available_list_then_no_match(self, cat_tokens):
        """Only the rules passed in can match."""
        c, a, _ = cat_tokens
        outcome = plan_merge({c.id, a.id}, cat_tokens, [], [])
        assert not outcome.success
        assert outcome.tried_patterns == ("c a",)

    def test_plan_when_target_word_built_then_step_complete(self):
        t = Token.create("t")
        ca = Token.create("ca")
        outcome = plan_merge(
            {t.id, ca.id}, [t], [ca], [MergeRule("ca t", "cat")], target_word="cat"
        )
        assert outcome.step_complete is True


class TestApplyMerge:
    """Tests for apply_merge."""

    def test_apply_when_success_then_removes_consumed_and_appends(self):
        h, a, p1, p2, i = tokenize("happi")
        ness = Token.create("ness")
        inp = [h, a, p1, p2, i]
        outcome = plan_merge({h.id, a.id, p1.id, p2.id}, inp, [ness], [MergeRule("h a p p", "happ")])

        new_input, new_output = apply_merge(outcome, inp, [ness])

        assert new_input == [i]
        assert [tok.text for tok in new_output] == ["ness", "happ"]

    def test_apply_when_failed_outcome_then_raises(self):
        with pytest.raises(ValueError, match="failed merge"):
            apply_merge(MergeOutcome.no_match(), [], [])
