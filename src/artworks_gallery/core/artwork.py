"""Artwork: the immutable item schema applied at the fetch boundary."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Hashable, Mapping

# Named defaults for every display field the remote source may omit.
ARTWORK_DEFAULTS: dict[str, Any] = {
    "title": "Untitled",
    "place_of_origin": "Unknown",
    "artist_display": "Unknown Artist",
    "inscriptions": "None",
    "date_start": 0,
    "date_end": 0,
}

DISPLAY_FIELDS: tuple[str, ...] = tuple(ARTWORK_DEFAULTS)


@dataclass(frozen=True)
class Artwork:
    """One item of the remote collection.

    Only ``id`` matters for selection; the remaining fields are carried
    for display. Instances are fully populated: missing remote fields are
    replaced by ``ARTWORK_DEFAULTS`` in :meth:`from_record`.
    """

    id: Hashable
    title: str = ARTWORK_DEFAULTS["title"]
    place_of_origin: str = ARTWORK_DEFAULTS["place_of_origin"]
    artist_display: str = ARTWORK_DEFAULTS["artist_display"]
    inscriptions: str = ARTWORK_DEFAULTS["inscriptions"]
    date_start: int = ARTWORK_DEFAULTS["date_start"]
    date_end: int = ARTWORK_DEFAULTS["date_end"]

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Artwork:
        """Build an Artwork from a raw API record.

        Absent, ``None`` and empty values fall back to the field default.
        Raises KeyError if the record has no usable ``id`` (a non-empty
        int or str).
        """
        item_id = record.get("id")
        if item_id is None or item_id == "":
            raise KeyError("Artwork record has no 'id'.")
        if isinstance(item_id, bool) or not isinstance(item_id, (int, str)):
            raise KeyError(f"Artwork record has an unusable 'id': {item_id!r}")
        values = {}
        for name, default in ARTWORK_DEFAULTS.items():
            value = record.get(name)
            values[name] = value if value else default
        return cls(id=item_id, **values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (one table row)."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
