"""SelectionStore: the authoritative cross-page selection + callback registry."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Iterator


SelectionCallback = Callable[[frozenset, frozenset], Any]


class SelectionStore:
    """Holds the set of selected identifiers and notifies registered callbacks.

    Membership is independent of whether the matching artwork has been
    fetched. Every operation is synchronous and never fails; callbacks
    receive the ``(added, removed)`` delta and run before the call
    returns. Iteration order is insertion order (oldest selection first).
    """

    def __init__(self, ids: Iterable[Hashable] = ()) -> None:
        # dict keys keep insertion order, which gives a stable enumeration
        self._ids: dict[Hashable, None] = dict.fromkeys(ids)
        self._callbacks: list[SelectionCallback] = []

    # --- Queries ---

    def count(self) -> int:
        return len(self._ids)

    def contains(self, item_id: Hashable) -> bool:
        return item_id in self._ids

    def selected_ids(self) -> list:
        """Snapshot of the selected identifiers in iteration order."""
        return list(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __iter__(self) -> Iterator:
        # iterate a snapshot so callbacks may mutate during iteration
        return iter(list(self._ids))

    # --- Commands ---

    def toggle(self, item_id: Hashable) -> bool:
        """Flip membership of ``item_id``. Returns the new membership."""
        if item_id in self._ids:
            del self._ids[item_id]
            self._notify(frozenset(), frozenset([item_id]))
            return False
        self._ids[item_id] = None
        self._notify(frozenset([item_id]), frozenset())
        return True

    def add_many(self, ids: Iterable[Hashable]) -> frozenset:
        """Union ``ids`` into the selection. Returns the ids actually added."""
        added = []
        for item_id in ids:
            if item_id not in self._ids:
                self._ids[item_id] = None
                added.append(item_id)
        delta = frozenset(added)
        self._notify(delta, frozenset())
        return delta

    def remove_many(self, ids: Iterable[Hashable]) -> frozenset:
        """Subtract ``ids`` from the selection. Returns the ids actually removed."""
        removed = []
        for item_id in ids:
            if item_id in self._ids:
                del self._ids[item_id]
                removed.append(item_id)
        delta = frozenset(removed)
        self._notify(frozenset(), delta)
        return delta

    def clear(self) -> None:
        """Empty the selection."""
        removed = frozenset(self._ids)
        self._ids = {}
        self._notify(frozenset(), removed)

    def replace(self, ids: Iterable[Hashable]) -> None:
        """Set membership to exactly ``ids``, discarding prior state."""
        old = self._ids
        self._ids = dict.fromkeys(ids)
        added = frozenset(k for k in self._ids if k not in old)
        removed = frozenset(k for k in old if k not in self._ids)
        self._notify(added, removed)

    def first(self, n: int) -> list:
        """Return up to ``n`` identifiers from the front of the enumeration."""
        out = []
        for item_id in self._ids:
            if len(out) >= n:
                break
            out.append(item_id)
        return out

    # --- Observers ---

    def on_change(self, callback: SelectionCallback) -> None:
        """Register a callback: fn(added, removed)."""
        self._callbacks.append(callback)

    def _notify(self, added: frozenset, removed: frozenset) -> None:
        if not added and not removed:
            return
        for cb in self._callbacks:
            cb(added, removed)

    def __repr__(self) -> str:
        return f"SelectionStore(selected={len(self._ids)})"
