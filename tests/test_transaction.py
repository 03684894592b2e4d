"""Tests for the ItemSet and Transaction data model."""

from __future__ import annotations

import pytest

from msprefixspan import ItemSet, SupportTable, Transaction
from tests.conftest import seq


class TestItemSet:
    def test_duplicates_are_collapsed(self):
        assert len(ItemSet(["a", "a", "b"])) == 2

    def test_minsup_is_lowest_member_threshold(self):
        table = SupportTable({"a": 0.4, "b": 0.2})
        assert ItemSet(["a", "b"]).minsup(table) == 0.2

    def test_prune_and_add_return_new_sets(self):
        items = ItemSet(["a", "b"])
        assert items.prune(lambda item: item == "a") == ItemSet(["a"])
        assert items.add("c") == ItemSet(["a", "b", "c"])
        assert items == ItemSet(["a", "b"])

    def test_repr_is_sorted(self):
        assert repr(ItemSet([30, 10, 20])) == "{10, 20, 30}"


class TestContains:
    def test_positional_subset_matches(self):
        assert seq("abc", "de").contains(seq("a", "d"))

    def test_shorter_prefix_matches(self):
        assert seq("ab", "c", "d").contains(seq("b"))

    def test_same_items_at_other_position_do_not_match(self):
        # b occurs, but at position 1 instead of position 0
        assert not seq("a", "b").contains(seq("b"))
        assert not seq("c", "ab").contains(seq("ab"))

    def test_longer_candidate_does_not_match(self):
        assert not seq("a").contains(seq("a", "b"))

    def test_not_subset_does_not_match(self):
        assert not seq("a", "b").contains(seq("ab"))


class TestTransaction:
    def test_support_computed_from_count_and_pool_size(self):
        transaction = Transaction([["a"]], count=3, size_n=4)
        assert transaction.count == 3
        assert transaction.support == 0.75

    def test_raw_transaction_has_no_support(self):
        transaction = seq("a")
        assert transaction.count == 1
        assert transaction.support is None

    def test_empty_itemset_rejected(self):
        with pytest.raises(ValueError):
            Transaction([["a"], []])

    def test_sizes(self):
        transaction = seq("ab", "c")
        assert transaction.size() == 2
        assert transaction.length() == 3
        assert transaction.unique() == {"a", "b", "c"}
        assert sorted(transaction.all_items()) == ["a", "b", "c"]

    def test_unique_counts_repeated_item_once(self):
        assert seq("a", "ab").unique() == {"a", "b"}

    def test_minsup(self):
        table = SupportTable({"a": 0.4, "b": 0.3, "c": 0.1})
        assert seq("ab", "c").minsup(table) == 0.1
        assert seq("ab").minsup(table) == 0.3

    def test_prune_drops_empty_itemsets(self):
        pruned = seq("ab", "c", "a").prune(lambda item: item != "c")
        assert pruned == seq("ab", "a")

    def test_extend_same_position(self):
        assert seq("a", "b").extend("c", new_itemset=False) == seq("a", "bc")

    def test_extend_new_position(self):
        extended = seq("a").extend("b", new_itemset=True, count=2, size_n=4)
        assert extended == seq("a", "b")
        assert extended.support == 0.5

    def test_repr(self):
        assert repr(Transaction([[10, 40], [90]])) == "<{10, 40}{90}>"

    def test_equal_transactions_hash_equal(self):
        assert hash(seq("ab", "c")) == hash(seq("ba", "c"))
