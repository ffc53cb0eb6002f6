"""Page fetcher for the Art Institute of Chicago artworks API.

Fetches one page of artworks per call and maps the raw records through
the Artwork default schema, so the rest of the package only ever sees
fully-populated items.
"""

import logging
from typing import Any, Optional, Protocol

import httpx

from ..core.artwork import Artwork, DISPLAY_FIELDS
from ..core.page import Page
from ..core.validation import validate_page_index, validate_page_size

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.artic.edu/api/v1/artworks"
DEFAULT_FIELDS = ("id",) + DISPLAY_FIELDS


class FetchError(Exception):
    """Raised when a page cannot be fetched (network, HTTP status, bad body)."""

    def __init__(self, message: str, page_index: Optional[int] = None):
        super().__init__(message)
        self.page_index = page_index


class PageFetcher(Protocol):
    """Anything that can fetch one 1-based page of artworks."""

    page_size: int

    async def fetch(self, page_index: int) -> Page:
        ...


def parse_page(payload: Any, page_index: int, page_size: int) -> Page:
    """Map an API response body to a Page.

    Records without a usable ``id`` are dropped with a warning. A missing
    ``pagination.total`` is treated as 0; a ``data`` member that is not a
    list raises FetchError.
    """
    if not isinstance(payload, dict):
        raise FetchError(
            f"Unexpected response body for page {page_index}: "
            f"expected an object, got {type(payload).__name__}",
            page_index,
        )

    records = payload.get("data") or []
    if not isinstance(records, list):
        raise FetchError(
            f"Unexpected 'data' for page {page_index}: "
            f"expected a list, got {type(records).__name__}",
            page_index,
        )

    items = []
    for record in records:
        try:
            items.append(Artwork.from_record(record))
        except (KeyError, AttributeError):
            logger.warning("Dropping artwork record without id on page %d: %r", page_index, record)

    pagination = payload.get("pagination") or {}
    total = pagination.get("total") if isinstance(pagination, dict) else pagination
    total = total or 0
    try:
        total = max(int(total), 0)
    except (TypeError, ValueError):
        raise FetchError(f"Invalid pagination total {total!r} on page {page_index}", page_index) from None

    return Page(index=page_index, size=page_size, items=tuple(items), total_records=total)


class ArtworkFetcher:
    """Fetches artwork pages over HTTP.

    Args:
        api_url: Collection endpoint.
        page_size: Fixed number of records per page (``limit`` query param).
        fields: Fields requested from the API.
        timeout: Request timeout in seconds. No retries are attempted.
        transport: Optional httpx transport (used by tests).
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        page_size: int = 10,
        fields: tuple = DEFAULT_FIELDS,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.page_size = validate_page_size(page_size)
        self.fields = tuple(fields)
        self.timeout = timeout
        self._transport = transport

    def _params(self, page_index: int) -> dict:
        return {
            "page": page_index,
            "limit": self.page_size,
            "fields": ",".join(self.fields),
        }

    async def fetch(self, page_index: int) -> Page:
        """Fetch one page.

        Raises:
            FetchError: On transport failure, non-success status, or an
                unparseable response body.
        """
        validate_page_index(page_index)
        logger.debug("Fetching page %d from %s", page_index, self.api_url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.api_url, params=self._params(page_index))
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"HTTP error {e.response.status_code} fetching page {page_index}", page_index
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Request for page {page_index} failed: {e}", page_index) from e
        except ValueError as e:
            raise FetchError(f"Invalid JSON for page {page_index}: {e}", page_index) from e

        return parse_page(payload, page_index, self.page_size)
