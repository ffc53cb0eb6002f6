"""Remote collection access."""

from .fetcher import ArtworkFetcher, FetchError, PageFetcher, parse_page

__all__ = ["ArtworkFetcher", "FetchError", "PageFetcher", "parse_page"]
