"""RangeSelector: select or deselect N rows, fetching pages on demand.

Selecting "the next N rows from page P" may need more rows than the
client has loaded, so the selector walks forward one page at a time
through the fetcher until it has collected N identifiers or the
collection runs out. Pages are fetched strictly in index order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.page_cache import PageCache
from ..core.selection_store import SelectionStore
from ..core.validation import validate_count, validate_page_index, validate_page_size
from ..remote.fetcher import FetchError, PageFetcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RangeSelectionResult:
    """Outcome of a range select/deselect.

    ``ids`` are the identifiers submitted to the store, in page order for
    a select. ``newly_added`` excludes ids that were already selected.
    ``error`` holds the fetch failure that cut the walk short, if any.
    """

    requested: int
    ids: tuple = ()
    newly_added: tuple = ()
    pages_fetched: int = 0
    error: FetchError | None = None

    @property
    def achieved(self) -> int:
        return len(self.ids)

    @property
    def complete(self) -> bool:
        return self.achieved >= self.requested

    @property
    def partial(self) -> bool:
        return not self.complete

    def summary(self) -> str:
        """Human-readable one-liner for status text."""
        if self.complete:
            return f"{self.achieved} of {self.requested} rows"
        reason = "fetch failed" if self.error is not None else "end of collection"
        return f"{self.achieved} of {self.requested} rows ({reason})"


class RangeSelector:
    """Coordinates the fetcher, page cache and selection store.

    Stateless apart from the collaborators it is given: the store and
    cache are shared with the rest of the session.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        cache: PageCache,
        store: SelectionStore,
        page_size: int | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.cache = cache
        self.store = store
        self.page_size = validate_page_size(
            page_size if page_size is not None else fetcher.page_size
        )

    def max_selectable(self) -> int | None:
        """Most recent known collection size, or None before the first fetch."""
        return self.cache.total_records

    async def select_range(self, start_page: int, count: int) -> RangeSelectionResult:
        """Select up to ``count`` rows starting at the first row of ``start_page``.

        Invalid arguments raise before anything is fetched. A fetch failure
        stops the walk: whatever was collected is still selected and the
        failure is reported on the result instead of being raised.
        """
        validate_page_index(start_page)
        validate_count(count, self.max_selectable())

        collected: list = []
        remaining = count
        page_index = start_page
        pages_fetched = 0
        error = None

        while remaining > 0:
            last_page = self.cache.last_page_index(self.page_size)
            if last_page is not None and page_index > last_page:
                break
            try:
                page = await self.fetcher.fetch(page_index)
            except FetchError as e:
                logger.warning(
                    "Range selection stopped at page %d after %d of %d rows: %s",
                    page_index, len(collected), count, e,
                )
                error = e
                break

            self.cache.record_page(page)
            pages_fetched += 1
            if not page.items:
                break

            taken = page.ids[:remaining]
            collected.extend(taken)
            remaining -= len(taken)
            page_index += 1

        newly_added = tuple(i for i in collected if i not in self.store)
        self.store.add_many(collected)

        result = RangeSelectionResult(
            requested=count,
            ids=tuple(collected),
            newly_added=newly_added,
            pages_fetched=pages_fetched,
            error=error,
        )
        if result.partial and error is None:
            logger.info("Range selection from page %d: %s", start_page, result.summary())
        return result

    def deselect_range(self, count: int) -> RangeSelectionResult:
        """Deselect the first ``count`` selected rows in store order.

        No fetching: every selected id was confirmed when it was selected.
        """
        validate_count(count, self.store.count())
        ids = self.store.first(count)
        self.store.remove_many(ids)
        return RangeSelectionResult(requested=count, ids=tuple(ids))
