"""GalleryState: centralized reactive state for the artworks dashboard."""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable

import param
import pandas as pd

from ..core.artwork import DISPLAY_FIELDS
from ..core.page import last_page_index
from ..core.page_cache import PageCache
from ..core.selection_store import SelectionStore
from ..core.validation import SelectionCountError, validate_page_index
from ..display_utils import pluralize_rows
from ..remote.fetcher import FetchError, PageFetcher
from ..selection.range_selector import RangeSelectionResult, RangeSelector
from ..selection import reconciler

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ["id", *DISPLAY_FIELDS]


class GalleryState(param.Parameterized):
    """Centralized reactive state for the gallery.

    Holds the visible page and mirrors the session's SelectionStore into
    params the widgets can watch. The store, page cache and fetcher are
    injected once per session and shared with the RangeSelector.
    """

    # --- Paging ---
    page = param.Integer(default=1, bounds=(1, None))
    page_size = param.Integer(default=10, bounds=(1, None), constant=True)
    total_records = param.Integer(default=0, bounds=(0, None))

    # --- Current page rows (one DataFrame row per artwork) ---
    artworks = param.DataFrame(default=None, allow_None=True)

    # --- Selection mirror (bumped by store callbacks) ---
    selected_count = param.Integer(default=0)
    selection_version = param.Integer(default=0)

    # --- Status ---
    loading = param.Boolean(default=False)
    status_text = param.String(default="")

    def __init__(
        self,
        fetcher: PageFetcher,
        store: SelectionStore | None = None,
        cache: PageCache | None = None,
        **params,
    ):
        params.setdefault("page_size", fetcher.page_size)
        super().__init__(**params)
        self.fetcher = fetcher
        self.store = store if store is not None else SelectionStore()
        self.cache = cache if cache is not None else PageCache()
        self.range_selector = RangeSelector(
            fetcher, self.cache, self.store, page_size=self.page_size,
        )
        self._visible_ids: list = []
        self.artworks = pd.DataFrame(columns=TABLE_COLUMNS)
        self.store.on_change(self._on_store_change)
        self.selected_count = self.store.count()

    # --- Queries ---

    @property
    def visible_ids(self) -> list:
        return list(self._visible_ids)

    @property
    def total_pages(self) -> int:
        return last_page_index(self.total_records, self.page_size)

    def selected_indices(self) -> list[int]:
        """Row positions on the visible page that are selected."""
        return [i for i, item_id in enumerate(self._visible_ids) if item_id in self.store]

    def page_status(self) -> reconciler.PageSelectionStatus:
        return reconciler.page_status(self.store, self._visible_ids)

    def selected_frame(self) -> pd.DataFrame:
        """Cached artworks for every selected id, in selection order."""
        rows = [a.to_dict() for a in self.cache.items_for(self.store.selected_ids())]
        return pd.DataFrame(rows, columns=TABLE_COLUMNS)

    def selection_summary(self) -> str:
        n = self.selected_count
        if n == 0:
            return ""
        return f"{pluralize_rows(n)} selected across all pages"

    # --- Paging commands ---

    async def load_page(self, page_index: int) -> bool:
        """Fetch and display one page. Returns False if the fetch failed.

        On failure the previous page stays on screen and the error is
        shown in the status text.
        """
        validate_page_index(page_index)
        self.loading = True
        try:
            page = await self.fetcher.fetch(page_index)
        except FetchError as e:
            logger.error("Error loading page %d: %s", page_index, e)
            self.status_text = f"Error: {e}"
            return False
        finally:
            self.loading = False

        self.cache.record_page(page)
        self._visible_ids = page.ids
        frame = pd.DataFrame([a.to_dict() for a in page.items], columns=TABLE_COLUMNS)
        self.param.update(
            page=page_index,
            total_records=page.total_records,
            artworks=frame,
            status_text="",
        )
        return True

    async def go_to_page(self, page_index: int) -> bool:
        """Load ``page_index`` clamped to the known page range."""
        upper = max(self.total_pages, 1)
        return await self.load_page(min(max(page_index, 1), upper))

    async def next_page(self) -> bool:
        return await self.go_to_page(self.page + 1)

    async def previous_page(self) -> bool:
        return await self.go_to_page(self.page - 1)

    # --- Selection commands ---

    def handle_table_selection(self, indices: Iterable[int]) -> reconciler.ReconcileResult:
        """Reconcile the table's checked row positions with the store.

        Positions outside the visible page are ignored.
        """
        n = len(self._visible_ids)
        checked = [self._visible_ids[i] for i in indices if 0 <= i < n]
        return reconciler.reconcile(self.store, self._visible_ids, checked)

    def handle_checked_ids(self, checked_ids: Iterable[Hashable]) -> reconciler.ReconcileResult:
        return reconciler.reconcile(self.store, self._visible_ids, checked_ids)

    def toggle(self, item_id: Hashable) -> bool:
        return self.store.toggle(item_id)

    def select_all_current_page(self) -> reconciler.ReconcileResult:
        return reconciler.select_page(self.store, self._visible_ids)

    def deselect_all_current_page(self) -> reconciler.ReconcileResult:
        return reconciler.deselect_page(self.store, self._visible_ids)

    def clear_selection(self) -> None:
        self.store.clear()
        self.status_text = ""

    async def select_rows(self, count: Any, start_page: int | None = None) -> RangeSelectionResult | None:
        """Select ``count`` rows starting at the first row of the current page.

        Returns None (and sets the status text) if the count is rejected.
        """
        start = self.page if start_page is None else start_page
        self.loading = True
        try:
            result = await self.range_selector.select_range(start, count)
        except SelectionCountError as e:
            self.status_text = str(e)
            return None
        finally:
            self.loading = False

        if self.cache.total_records is not None:
            self.total_records = self.cache.total_records
        self.status_text = f"Selected {result.summary()}"
        return result

    def deselect_rows(self, count: Any) -> RangeSelectionResult | None:
        """Deselect ``count`` rows from the current selection."""
        try:
            result = self.range_selector.deselect_range(count)
        except SelectionCountError as e:
            self.status_text = str(e)
            return None
        self.status_text = f"Deselected {result.summary()}"
        return result

    def max_rows(self, mode: str = "select") -> int | None:
        """Upper bound for the row-count popup."""
        if mode == "deselect":
            return self.store.count()
        return self.range_selector.max_selectable()

    # --- Store observer ---

    def _on_store_change(self, added: frozenset, removed: frozenset) -> None:
        self.param.update(
            selected_count=self.store.count(),
            selection_version=self.selection_version + 1,
        )
