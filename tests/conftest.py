"""Shared test fixtures for artworks-gallery."""

import pytest

from artworks_gallery.core.artwork import Artwork
from artworks_gallery.core.page import Page
from artworks_gallery.core.page_cache import PageCache
from artworks_gallery.core.selection_store import SelectionStore
from artworks_gallery.remote.fetcher import FetchError
from artworks_gallery.selection.range_selector import RangeSelector


class FakeFetcher:
    """In-memory collection of artworks with ids 1..total.

    ``fail_on`` pages raise FetchError; ``reported_total`` lets a test
    lie about the collection size; ``on_fetch`` runs inside the fetch,
    standing in for whatever else happens while a request is in flight.
    """

    def __init__(self, total=95, page_size=10, fail_on=(), reported_total=None, on_fetch=None):
        self.total = total
        self.page_size = page_size
        self.fail_on = set(fail_on)
        self.reported_total = total if reported_total is None else reported_total
        self.on_fetch = on_fetch
        self.calls = []

    async def fetch(self, page_index):
        self.calls.append(page_index)
        if self.on_fetch is not None:
            self.on_fetch(page_index)
        if page_index in self.fail_on:
            raise FetchError(f"HTTP error 503 fetching page {page_index}", page_index)
        start = (page_index - 1) * self.page_size + 1
        stop = min(start + self.page_size, self.total + 1)
        items = tuple(
            Artwork(id=i, title=f"Artwork {i}", artist_display=f"Artist {i % 7}")
            for i in range(start, stop)
        )
        return Page(
            index=page_index,
            size=self.page_size,
            items=items,
            total_records=self.reported_total,
        )


@pytest.fixture
def make_fetcher():
    """Factory for FakeFetcher with custom collection behaviour."""
    return FakeFetcher


@pytest.fixture
def fetcher():
    """95 artworks, 10 per page (pages 1-10, the last one holding 5)."""
    return FakeFetcher(total=95, page_size=10)


@pytest.fixture
def store():
    return SelectionStore()


@pytest.fixture
def cache():
    return PageCache()


@pytest.fixture
def selector(fetcher, cache, store):
    return RangeSelector(fetcher, cache, store)


@pytest.fixture
def sample_record():
    """A raw API record with every display field present."""
    return {
        "id": 27992,
        "title": "A Sunday on La Grande Jatte, 1884",
        "place_of_origin": "France",
        "artist_display": "Georges Seurat\nFrench, 1859-1891",
        "inscriptions": "Signed lower right: Seurat",
        "date_start": 1884,
        "date_end": 1886,
    }
