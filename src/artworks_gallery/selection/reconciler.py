"""Reconcile page-local checkbox events with the global selection.

The table widget only knows which rows on the visible page are checked.
These functions translate that page-local view into add/remove operations
on the SelectionStore, leaving every identifier outside the visible page
untouched, so that ``S' = (S - V) | (C & V)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable

from ..core.selection_store import SelectionStore


@dataclass(frozen=True)
class ReconcileResult:
    """Delta applied to the store by one reconciliation."""

    added: tuple = ()
    removed: tuple = ()

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)


@dataclass(frozen=True)
class PageSelectionStatus:
    """How much of the visible page is selected (drives the header checkbox)."""

    selected_on_page: tuple
    page_size: int

    @property
    def all_selected(self) -> bool:
        return self.page_size > 0 and len(self.selected_on_page) == self.page_size

    @property
    def some_selected(self) -> bool:
        return len(self.selected_on_page) > 0

    @property
    def indeterminate(self) -> bool:
        return self.some_selected and not self.all_selected


def reconcile(
    store: SelectionStore,
    visible_ids: Iterable[Hashable],
    checked_ids: Iterable[Hashable],
) -> ReconcileResult:
    """Bring the store into agreement with the rows checked on the visible page.

    Parameters
    ----------
    store : the global selection
    visible_ids : identifiers rendered on the active page, in page order
    checked_ids : identifiers the view reports as checked on that page

    Checked identifiers that are not visible are ignored: only
    ``visible_ids`` bounds what may be added or removed.
    """
    visible = list(dict.fromkeys(visible_ids))
    if not visible:
        return ReconcileResult()
    visible_set = set(visible)
    checked = {i for i in checked_ids if i in visible_set}

    previously_selected = [i for i in visible if i in store]
    deselected = [i for i in previously_selected if i not in checked]
    newly_selected = [i for i in visible if i in checked and i not in store]

    # disjoint by construction, so the order of the two calls is immaterial
    store.remove_many(deselected)
    store.add_many(newly_selected)
    return ReconcileResult(added=tuple(newly_selected), removed=tuple(deselected))


def select_page(store: SelectionStore, visible_ids: Iterable[Hashable]) -> ReconcileResult:
    """Select every row on the visible page."""
    visible = list(visible_ids)
    return reconcile(store, visible, visible)


def deselect_page(store: SelectionStore, visible_ids: Iterable[Hashable]) -> ReconcileResult:
    """Deselect every row on the visible page."""
    return reconcile(store, visible_ids, ())


def page_status(store: SelectionStore, visible_ids: Iterable[Hashable]) -> PageSelectionStatus:
    """Report which visible rows are currently selected."""
    visible = list(dict.fromkeys(visible_ids))
    return PageSelectionStatus(
        selected_on_page=tuple(i for i in visible if i in store),
        page_size=len(visible),
    )
