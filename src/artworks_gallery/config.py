"""GalleryConfig: session configuration for the gallery and its fetcher."""

from __future__ import annotations

import logging
import os

import param

from .remote.fetcher import DEFAULT_API_URL, DEFAULT_FIELDS, ArtworkFetcher

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class GalleryConfig(param.Parameterized):
    """Settings shared by the view layer and the range selector.

    ``page_size`` is fixed for the session: it is constant once the
    config object is built.
    """

    api_url = param.String(default=DEFAULT_API_URL)
    page_size = param.Integer(default=10, bounds=(1, 100), constant=True)
    fields = param.List(default=list(DEFAULT_FIELDS), item_type=str)
    timeout = param.Number(default=10.0, bounds=(0, None))
    log_level = param.String(default="INFO")

    @classmethod
    def from_env(cls, **overrides) -> GalleryConfig:
        """Build a config from ARTWORKS_* environment variables.

        Keyword overrides take precedence over the environment.
        """
        params: dict = {}
        if os.environ.get("ARTWORKS_API_URL"):
            params["api_url"] = os.environ["ARTWORKS_API_URL"]
        if os.environ.get("ARTWORKS_PAGE_SIZE"):
            params["page_size"] = int(os.environ["ARTWORKS_PAGE_SIZE"])
        if os.environ.get("ARTWORKS_TIMEOUT"):
            params["timeout"] = float(os.environ["ARTWORKS_TIMEOUT"])
        if os.environ.get("ARTWORKS_LOG_LEVEL"):
            params["log_level"] = os.environ["ARTWORKS_LOG_LEVEL"].upper()
        params.update(overrides)
        return cls(**params)

    def build_fetcher(self, **kwargs) -> ArtworkFetcher:
        """Create an ArtworkFetcher from these settings."""
        return ArtworkFetcher(
            api_url=self.api_url,
            page_size=self.page_size,
            fields=tuple(self.fields),
            timeout=self.timeout,
            **kwargs,
        )


def configure_logging(level: str | int = "INFO") -> None:
    """Install a basic stderr handler for the launcher script."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=_LOG_FORMAT)
