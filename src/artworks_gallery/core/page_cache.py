"""PageCache: every artwork fetched so far, keyed by identifier."""

from __future__ import annotations

from typing import Hashable, Iterable

from .artwork import Artwork
from .page import Page, last_page_index


class PageCache:
    """Session-scoped store of fetched artworks.

    The cache never fetches on a miss and never evicts: it grows until
    the session ends. Re-recording an identifier overwrites the previous
    entry (last write wins, no staleness check).
    """

    def __init__(self) -> None:
        self._items: dict[Hashable, Artwork] = {}
        # page index -> ids in page order, as of the latest fetch of that page
        self._page_ids: dict[int, tuple] = {}
        self._total_records: int | None = None

    def record(self, items: Iterable[Artwork]) -> None:
        """Insert or overwrite artworks by id."""
        for item in items:
            self._items[item.id] = item

    def record_page(self, page: Page) -> None:
        """Record a fetched page's items, its id order and the reported total."""
        self.record(page.items)
        self._page_ids[page.index] = tuple(page.ids)
        self._total_records = page.total_records

    def get(self, item_id: Hashable) -> Artwork | None:
        """Return the cached artwork, or None if it was never fetched."""
        return self._items.get(item_id)

    def items_for(self, ids: Iterable[Hashable]) -> list[Artwork]:
        """Cached artworks for ``ids`` in the given order; misses are skipped."""
        return [self._items[i] for i in ids if i in self._items]

    def page_ids(self, page_index: int) -> tuple | None:
        """Ids of a previously fetched page, or None if not fetched."""
        return self._page_ids.get(page_index)

    def seen_ids(self) -> set:
        """Every identifier fetched during the session."""
        return set(self._items)

    @property
    def fetched_pages(self) -> list[int]:
        return sorted(self._page_ids)

    @property
    def total_records(self) -> int | None:
        """Collection size reported by the most recent fetch (None before any)."""
        return self._total_records

    def last_page_index(self, page_size: int) -> int | None:
        """Last 1-based page implied by the most recent total, or None if unknown."""
        if self._total_records is None:
            return None
        return last_page_index(self._total_records, page_size)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __repr__(self) -> str:
        return f"PageCache(items={len(self._items)}, pages={len(self._page_ids)})"
