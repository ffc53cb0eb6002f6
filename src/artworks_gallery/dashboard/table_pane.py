"""ArtworkTable: Tabulator page view with checkbox selection and a pager."""

from __future__ import annotations

from typing import Callable

import panel as pn

from ..core.artwork import DISPLAY_FIELDS
from ..display_utils import prettify_name
from .state import GalleryState

# Column widths in px
_COLUMN_WIDTHS = {
    "title": 220,
    "place_of_origin": 150,
    "artist_display": 220,
    "inscriptions": 160,
    "date_start": 100,
    "date_end": 100,
}

_BANNER_STYLES = {
    "background": "#e8f0fe",
    "color": "#1a73e8",
    "border-radius": "10px",
    "padding": "6px 12px",
    "font-size": "13px",
    "font-weight": "500",
}


class ArtworkTable:
    """The visible page of artworks.

    The Tabulator widget only knows about rows on the current page; every
    checkbox change is handed to GalleryState, which reconciles it with
    the cross-page selection. Programmatic updates of the table selection
    are guarded so they are not echoed back as user events.
    """

    def __init__(
        self,
        state: GalleryState,
        on_open_popup: Callable[[], None] | None = None,
    ) -> None:
        self.state = state
        self._on_open_popup = on_open_popup
        self._syncing = False  # Guard flag: suppresses table->state callbacks
        self._build_widgets()
        self._wire_bindings()

    def _build_widgets(self) -> None:
        """Create the table, pager and selection buttons."""
        self.table = pn.widgets.Tabulator(
            self.state.artworks,
            selectable="checkbox",
            show_index=False,
            disabled=True,
            hidden_columns=["id"],
            titles={f: prettify_name(f) for f in DISPLAY_FIELDS},
            widths=_COLUMN_WIDTHS,
            sizing_mode="stretch_width",
            height=420,
        )

        self.first_button = pn.widgets.Button(name="«", width=40)
        self.prev_button = pn.widgets.Button(name="‹", width=40)
        self.next_button = pn.widgets.Button(name="›", width=40)
        self.last_button = pn.widgets.Button(name="»", width=40)
        self.page_label = pn.pane.Markdown("", margin=(8, 10))

        self.select_rows_button = pn.widgets.Button(
            name="Select Rows", button_type="primary", width=120,
        )
        self.select_page_button = pn.widgets.Button(
            name="Select All Current Page", width=180,
        )
        self.deselect_page_button = pn.widgets.Button(
            name="Deselect All Current Page", width=190,
        )
        self.clear_button = pn.widgets.Button(
            name="Clear Selection", button_type="danger", width=130, disabled=True,
        )

        self.banner = pn.pane.Markdown("", styles=_BANNER_STYLES, visible=False)
        self.status_text = pn.pane.Markdown(
            "", styles={"color": "#6b7280", "font-size": "11px", "font-style": "italic"},
            sizing_mode="stretch_width",
        )

    def _wire_bindings(self) -> None:
        """Link widgets to GalleryState."""
        s = self.state

        self.table.param.watch(self._on_table_selection, "selection")

        self.first_button.on_click(self._on_first)
        self.prev_button.on_click(self._on_prev)
        self.next_button.on_click(self._on_next)
        self.last_button.on_click(self._on_last)

        self.select_rows_button.on_click(self._on_select_rows)
        self.select_page_button.on_click(lambda e: s.select_all_current_page())
        self.deselect_page_button.on_click(lambda e: s.deselect_all_current_page())
        self.clear_button.on_click(lambda e: s.clear_selection())

        s.param.watch(self._on_artworks_change, "artworks")
        s.param.watch(self._on_selection_change, "selection_version")
        s.param.watch(lambda e: self._refresh_labels(), ["page", "total_records"])
        s.param.watch(lambda e: setattr(self.status_text, "object", e.new), "status_text")
        s.param.watch(lambda e: setattr(self.table, "loading", e.new), "loading")

    # --- Table <-> state ---

    def _on_table_selection(self, event) -> None:
        """Forward user checkbox changes on the visible page."""
        if self._syncing:
            return
        self.state.handle_table_selection(event.new)

    def _on_artworks_change(self, event) -> None:
        self._syncing = True
        try:
            if event.new is not None:
                self.table.value = event.new
            self.table.selection = self.state.selected_indices()
        finally:
            self._syncing = False
        self._refresh_labels()

    def _on_selection_change(self, event) -> None:
        """Push store changes (range select, clear, ...) into the checkboxes."""
        indices = self.state.selected_indices()
        if sorted(self.table.selection) != indices:
            self._syncing = True
            try:
                self.table.selection = indices
            finally:
                self._syncing = False
        self._refresh_labels()

    def _refresh_labels(self) -> None:
        s = self.state
        total_pages = s.total_pages
        self.page_label.object = (
            f"Page {s.page} of {max(total_pages, 1)} • Total: {s.total_records:,} records"
        )
        self.first_button.disabled = self.prev_button.disabled = s.page <= 1
        self.next_button.disabled = self.last_button.disabled = s.page >= total_pages

        summary = s.selection_summary()
        self.banner.object = summary
        self.banner.visible = bool(summary)
        self.clear_button.disabled = s.selected_count == 0

        status = s.page_status()
        self.select_page_button.disabled = status.all_selected or not s.visible_ids
        self.deselect_page_button.disabled = not status.some_selected

    # --- Pager ---

    async def _on_first(self, event) -> None:
        await self.state.go_to_page(1)

    async def _on_prev(self, event) -> None:
        await self.state.previous_page()

    async def _on_next(self, event) -> None:
        await self.state.next_page()

    async def _on_last(self, event) -> None:
        await self.state.go_to_page(self.state.total_pages)

    def _on_select_rows(self, event) -> None:
        if self._on_open_popup is not None:
            self._on_open_popup()

    def build_panel(self) -> pn.Column:
        """Build the complete table panel."""
        actions = pn.Row(
            self.select_rows_button,
            self.select_page_button,
            self.deselect_page_button,
            self.clear_button,
            sizing_mode="stretch_width",
            margin=(5, 0),
        )
        pager = pn.Row(
            self.first_button, self.prev_button,
            self.page_label,
            self.next_button, self.last_button,
            align="center",
        )
        return pn.Column(
            self.banner,
            actions,
            self.table,
            pager,
            self.status_text,
            sizing_mode="stretch_width",
        )
