"""RowSelectionPopup: modal form for selecting or deselecting N rows."""

from __future__ import annotations

import panel as pn

from .state import GalleryState

MODE_OPTIONS = {"Select": "select", "Deselect": "deselect"}


class RowSelectionPopup:
    """Modal content asking for a row count.

    "Select" walks forward from the current page (fetching pages as
    needed); "Deselect" removes rows from the existing selection. The
    submit button stays disabled while the count is out of range.
    """

    def __init__(self, state: GalleryState) -> None:
        self.state = state
        self._template = None
        self._build_widgets()

    def _build_widgets(self) -> None:
        self.mode_select = pn.widgets.RadioButtonGroup(
            options=MODE_OPTIONS, value="select", button_type="default",
        )
        self.count_input = pn.widgets.IntInput(
            name="Number of rows", value=None, start=1, placeholder="Enter number",
        )
        self.submit_button = pn.widgets.Button(
            name="Submit", button_type="primary", disabled=True, width=100,
        )
        self.cancel_button = pn.widgets.Button(name="Cancel", width=100)
        self.message = pn.pane.Markdown(
            "", styles={"color": "#6b7280", "font-size": "12px"},
        )

        self.mode_select.param.watch(self._on_input_change, "value")
        self.count_input.param.watch(self._on_input_change, "value")
        self.submit_button.on_click(self._on_submit)
        self.cancel_button.on_click(lambda e: self.close())

    def _max_rows(self) -> int | None:
        return self.state.max_rows(self.mode_select.value)

    def is_valid(self, count) -> bool:
        """Mirror of the validation the range selector applies."""
        if count is None or count <= 0:
            return False
        maximum = self._max_rows()
        return maximum is None or count <= maximum

    def _on_input_change(self, event) -> None:
        maximum = self._max_rows()
        self.count_input.placeholder = (
            f"Enter number (1-{maximum})" if maximum is not None else "Enter number"
        )
        self.submit_button.disabled = not self.is_valid(self.count_input.value)

    async def _on_submit(self, event) -> None:
        count = self.count_input.value
        if not self.is_valid(count):
            return
        self.submit_button.disabled = True
        try:
            if self.mode_select.value == "deselect":
                result = self.state.deselect_rows(count)
            else:
                result = await self.state.select_rows(count)
        finally:
            self.submit_button.disabled = not self.is_valid(self.count_input.value)
        self.message.object = self.state.status_text
        if result is not None:
            self.close()

    def set_template(self, template: pn.template.MaterialTemplate) -> None:
        """Set reference to the template so we can open its modal."""
        self._template = template

    def open(self) -> None:
        self.count_input.value = None
        self.message.object = ""
        self._on_input_change(None)
        if self._template is not None:
            self._template.open_modal()

    def close(self) -> None:
        if self._template is not None:
            self._template.close_modal()

    def build_modal_content(self) -> list:
        """Return content to place inside the template modal."""
        return [
            pn.pane.Markdown("## Select Rows", margin=(0, 0, 5, 0)),
            self.mode_select,
            self.count_input,
            pn.Row(self.cancel_button, self.submit_button),
            self.message,
        ]
