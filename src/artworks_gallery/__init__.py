"""artworks-gallery: paginated artwork browsing with a selection that spans pages."""

from ._version import __version__
from .config import GalleryConfig, configure_logging
from .core.artwork import Artwork
from .core.page import Page
from .core.page_cache import PageCache
from .core.selection_store import SelectionStore
from .core.validation import SelectionCountError
from .remote import ArtworkFetcher, FetchError
from .selection import RangeSelectionResult, RangeSelector, reconcile


def explore(config=None, port=0, show=True):
    """Launch the gallery dashboard in a browser.

    Parameters
    ----------
    config : GalleryConfig, optional
        Settings; defaults to ``GalleryConfig.from_env()``.
    port : int
        Port number. 0 = auto-assign.
    show : bool
        Whether to open the browser automatically.
    """
    from .dashboard.app import GalleryApp

    app = GalleryApp(config=config)
    app.serve(port=port, show=show)


__all__ = [
    "__version__",
    "Artwork",
    "ArtworkFetcher",
    "FetchError",
    "GalleryConfig",
    "Page",
    "PageCache",
    "RangeSelectionResult",
    "RangeSelector",
    "SelectionCountError",
    "SelectionStore",
    "configure_logging",
    "explore",
    "reconcile",
]
