"""GalleryApp: assembles the Panel template and serves the dashboard."""

from __future__ import annotations

import logging

import panel as pn

from ..config import GalleryConfig
from ..core.page_cache import PageCache
from ..core.selection_store import SelectionStore
from ..remote.fetcher import PageFetcher
from .state import GalleryState
from .table_pane import ArtworkTable
from .selection_popup import RowSelectionPopup

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Custom CSS
# ---------------------------------------------------------------------------

_GALLERY_CSS = """
:root, :host {
  --design-primary-color: #1a73e8;
  --design-primary-text-color: #ffffff;
  --design-secondary-color: #1557b0;
  --design-background-color: #fafafa;
  --panel-primary-color: #1a73e8;
  --mdc-theme-primary: #1a73e8;
}

/* ---- Pill buttons ---- */
.bk-btn-primary {
  border-radius: 24px !important;
  background-color: #1a73e8 !important;
  border-color: #1a73e8 !important;
  color: #ffffff !important;
  font-weight: 500 !important;
  text-transform: none !important;
}
.bk-btn-primary:hover {
  background-color: #1557b0 !important;
  border-color: #1557b0 !important;
}

/* ---- Outlined danger button (clear selection) ---- */
.bk-btn-danger {
  border-radius: 24px !important;
  background-color: transparent !important;
  border: 1px solid #d93025 !important;
  color: #d93025 !important;
  text-transform: none !important;
}

/* ---- Table ---- */
.tabulator .tabulator-header .tabulator-col {
  font-size: 12px !important;
  font-weight: 500 !important;
}
.tabulator-row.tabulator-selected {
  background-color: #e8f0fe !important;
}

body, .mdc-typography {
  font-family: "Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif !important;
  color: #202124 !important;
}
"""


class GalleryApp:
    """Artworks gallery dashboard.

    Every browser session gets its own SelectionStore, PageCache and
    GalleryState; the fetcher (and its fixed page size) is shared.
    """

    def __init__(
        self,
        config: GalleryConfig | None = None,
        fetcher: PageFetcher | None = None,
    ) -> None:
        self.config = config if config is not None else GalleryConfig.from_env()
        self.fetcher = fetcher if fetcher is not None else self.config.build_fetcher()

        pn.extension("tabulator", sizing_mode="stretch_width")

        # Inject custom CSS and loading spinner color
        pn.config.raw_css.append(_GALLERY_CSS)
        pn.config.loading_color = "#1a73e8"

    def create_state(self) -> GalleryState:
        """Build a fresh session state with its own store and cache."""
        return GalleryState(
            fetcher=self.fetcher,
            store=SelectionStore(),
            cache=PageCache(),
            page_size=self.fetcher.page_size,
        )

    def _build_template(self) -> pn.template.MaterialTemplate:
        """Build the Panel MaterialTemplate layout for one session."""
        state = self.create_state()
        popup = RowSelectionPopup(state)
        table = ArtworkTable(state, on_open_popup=popup.open)

        template = pn.template.MaterialTemplate(
            title="Artworks Gallery",
            header_background="#fafafa",
            header_color="#202124",
        )
        popup.set_template(template)
        template.modal.extend(popup.build_modal_content())
        template.main.append(table.build_panel())

        async def _initial_load():
            await state.load_page(1)

        pn.state.onload(_initial_load)
        return template

    def serve(self, port: int = 0, show: bool = True, **kwargs) -> None:
        """Start the Panel server and optionally open the browser.

        Parameters
        ----------
        port : int
            Port number. 0 = auto-assign.
        show : bool
            Whether to open the browser automatically.
        **kwargs
            Additional keyword arguments passed to pn.serve().
        """
        logger.info("Serving artworks gallery from %s", self.config.api_url)
        pn.serve(
            self._build_template,
            port=port or 0,
            show=show,
            title="Artworks Gallery",
            **kwargs,
        )
