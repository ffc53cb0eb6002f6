"""Tests for the ArtworkTable widget bridge and the row selection popup."""

import asyncio

import pytest

from artworks_gallery.dashboard.state import GalleryState
from artworks_gallery.dashboard.table_pane import ArtworkTable
from artworks_gallery.dashboard.selection_popup import RowSelectionPopup


@pytest.fixture
def state(fetcher):
    return GalleryState(fetcher=fetcher)


@pytest.fixture
def table(state):
    t = ArtworkTable(state)
    asyncio.run(state.load_page(1))
    return t


class TestArtworkTable:
    def test_value_follows_page(self, table, state):
        assert len(table.table.value) == 10
        asyncio.run(state.next_page())
        assert list(table.table.value["id"])[:2] == [11, 12]

    def test_titles_prettified(self, table):
        assert table.table.titles["place_of_origin"] == "Place Of Origin"

    def test_checkbox_event_reconciles(self, table, state):
        table.table.selection = [0, 3]
        assert set(state.store) == {1, 4}

    def test_store_change_updates_checkboxes(self, table, state):
        state.store.add_many([2, 5, 70])
        assert sorted(table.table.selection) == [1, 4]

    def test_page_change_restores_checkboxes(self, table, state):
        table.table.selection = [1]
        asyncio.run(state.next_page())
        assert table.table.selection == []
        asyncio.run(state.previous_page())
        assert table.table.selection == [1]
        assert set(state.store) == {2}

    def test_labels(self, table, state):
        assert "Page 1 of 10" in table.page_label.object
        assert table.prev_button.disabled
        assert not table.next_button.disabled
        assert not table.banner.visible

        state.store.add_many([1])
        assert table.banner.visible
        assert table.banner.object == "1 row selected across all pages"
        assert not table.clear_button.disabled


class TestRowSelectionPopup:
    def test_validity_tracks_mode(self, table, state):
        popup = RowSelectionPopup(state)
        assert popup.is_valid(95)
        assert not popup.is_valid(96)
        assert not popup.is_valid(0)
        assert not popup.is_valid(None)

        popup.mode_select.value = "deselect"
        assert not popup.is_valid(1)
        state.store.add_many([1, 2])
        assert popup.is_valid(2)

    def test_submit_button_state(self, table, state):
        popup = RowSelectionPopup(state)
        popup.count_input.value = 5
        assert not popup.submit_button.disabled
        popup.count_input.value = 500
        assert popup.submit_button.disabled

    def test_submit_selects(self, table, state):
        popup = RowSelectionPopup(state)
        popup.count_input.value = 12
        asyncio.run(popup._on_submit(None))
        assert state.selected_count == 12
        assert popup.message.object == "Selected 12 of 12 rows"
