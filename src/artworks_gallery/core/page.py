"""Page: one fixed-size, order-preserving window of the remote collection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .artwork import Artwork


def last_page_index(total_records: int, page_size: int) -> int:
    """Return the 1-based index of the last page (0 for an empty collection)."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}.")
    return math.ceil(max(total_records, 0) / page_size)


@dataclass(frozen=True)
class Page:
    """A fetched page.

    ``total_records`` is the collection size reported by the source at
    fetch time; it is only authoritative as of this fetch.
    """

    index: int
    size: int
    items: tuple[Artwork, ...] = field(default_factory=tuple)
    total_records: int = 0

    def __len__(self) -> int:
        return len(self.items)

    @property
    def ids(self) -> list:
        """Identifiers of the page's items, in page order."""
        return [item.id for item in self.items]

    @property
    def total_pages(self) -> int:
        return last_page_index(self.total_records, self.size)

    @property
    def is_last(self) -> bool:
        return self.index >= self.total_pages
