"""Tests for GalleryConfig."""

import pytest

from artworks_gallery.config import GalleryConfig
from artworks_gallery.remote.fetcher import DEFAULT_API_URL, ArtworkFetcher


class TestGalleryConfig:
    def test_defaults(self, monkeypatch):
        for var in ("ARTWORKS_API_URL", "ARTWORKS_PAGE_SIZE", "ARTWORKS_TIMEOUT", "ARTWORKS_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        cfg = GalleryConfig.from_env()
        assert cfg.api_url == DEFAULT_API_URL
        assert cfg.page_size == 10
        assert cfg.timeout == 10.0
        assert cfg.log_level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ARTWORKS_API_URL", "http://localhost:9000/artworks")
        monkeypatch.setenv("ARTWORKS_PAGE_SIZE", "25")
        monkeypatch.setenv("ARTWORKS_TIMEOUT", "2.5")
        monkeypatch.setenv("ARTWORKS_LOG_LEVEL", "debug")
        cfg = GalleryConfig.from_env()
        assert cfg.api_url == "http://localhost:9000/artworks"
        assert cfg.page_size == 25
        assert cfg.timeout == 2.5
        assert cfg.log_level == "DEBUG"

    def test_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv("ARTWORKS_PAGE_SIZE", "25")
        assert GalleryConfig.from_env(page_size=12).page_size == 12

    def test_page_size_fixed_for_session(self):
        cfg = GalleryConfig(page_size=20)
        with pytest.raises(TypeError):
            cfg.page_size = 30
        assert cfg.page_size == 20

    def test_page_size_bounds(self):
        with pytest.raises(ValueError):
            GalleryConfig(page_size=0)

    def test_build_fetcher(self):
        cfg = GalleryConfig(page_size=15, timeout=3.0)
        fetcher = cfg.build_fetcher()
        assert isinstance(fetcher, ArtworkFetcher)
        assert fetcher.page_size == 15
        assert fetcher.timeout == 3.0
        assert fetcher.fields[0] == "id"
