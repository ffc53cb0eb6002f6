"""Tests for SelectionStore: set semantics, resets and change callbacks."""

import pytest

from artworks_gallery.core.selection_store import SelectionStore


class TestSelectionStoreBasics:
    def test_starts_empty(self, store):
        assert store.count() == 0
        assert len(store) == 0
        assert store.selected_ids() == []

    def test_initial_ids(self):
        store = SelectionStore([3, 1, 3])
        assert store.selected_ids() == [3, 1]

    def test_toggle_adds_then_removes(self, store):
        assert store.toggle(7) is True
        assert 7 in store
        assert store.toggle(7) is False
        assert 7 not in store

    def test_contains(self, store):
        store.add_many([1, 2])
        assert store.contains(1)
        assert not store.contains(3)

    def test_membership_independent_of_type(self, store):
        store.add_many(["a", 1])
        assert "a" in store
        assert 1 in store


class TestSelectionStoreBatch:
    def test_add_many_absorbs_duplicates(self, store):
        added = store.add_many([1, 2, 2, 3])
        assert store.count() == 3
        assert added == frozenset({1, 2, 3})

    def test_add_many_idempotent(self, store):
        store.add_many([1, 2, 3])
        once = store.selected_ids()
        added = store.add_many([1, 2, 3])
        assert store.selected_ids() == once
        assert added == frozenset()

    def test_remove_many_ignores_absent(self, store):
        store.add_many([1, 2, 3])
        removed = store.remove_many([2, 99])
        assert store.selected_ids() == [1, 3]
        assert removed == frozenset({2})

    def test_remove_many_idempotent(self, store):
        store.add_many([1, 2, 3])
        store.remove_many([1])
        store.remove_many([1])
        assert store.selected_ids() == [2, 3]

    @pytest.mark.parametrize("initial", [[], [1, 2], [5, 6, 7], [1, 5]])
    def test_disjoint_batches_commute(self, initial):
        remove, add = [1, 2], [5, 6]
        a = SelectionStore(initial)
        a.remove_many(remove)
        a.add_many(add)
        b = SelectionStore(initial)
        b.add_many(add)
        b.remove_many(remove)
        assert set(a) == set(b)

    def test_clear(self, store):
        store.add_many([1, 2])
        store.clear()
        assert store.count() == 0

    def test_replace_discards_prior_state(self, store):
        store.add_many([1, 2, 3])
        store.replace([3, 4])
        assert store.selected_ids() == [3, 4]


class TestSelectionStoreOrder:
    def test_iteration_is_insertion_order(self, store):
        store.add_many([5, 1, 9])
        store.toggle(3)
        assert list(store) == [5, 1, 9, 3]

    def test_first(self, store):
        store.add_many([5, 1, 9])
        assert store.first(2) == [5, 1]
        assert store.first(10) == [5, 1, 9]
        assert store.first(0) == []

    def test_reselected_id_moves_to_end(self, store):
        store.add_many([1, 2, 3])
        store.toggle(1)
        store.toggle(1)
        assert store.selected_ids() == [2, 3, 1]


class TestSelectionStoreCallbacks:
    def test_callback_receives_delta(self, store):
        events = []
        store.on_change(lambda added, removed: events.append((added, removed)))
        store.add_many([1, 2])
        store.remove_many([1])
        assert events == [
            (frozenset({1, 2}), frozenset()),
            (frozenset(), frozenset({1})),
        ]

    def test_no_callback_without_change(self, store):
        events = []
        store.add_many([1])
        store.on_change(lambda added, removed: events.append((added, removed)))
        store.add_many([1])
        store.remove_many([42])
        assert events == []

    def test_replace_reports_both_sides(self, store):
        store.add_many([1, 2])
        events = []
        store.on_change(lambda added, removed: events.append((added, removed)))
        store.replace([2, 3])
        assert events == [(frozenset({3}), frozenset({1}))]

    def test_change_visible_inside_callback(self, store):
        seen = []
        store.on_change(lambda added, removed: seen.append(store.count()))
        store.add_many([1, 2, 3])
        store.clear()
        assert seen == [3, 0]

    def test_repr(self, store):
        store.add_many([1, 2])
        assert repr(store) == "SelectionStore(selected=2)"
