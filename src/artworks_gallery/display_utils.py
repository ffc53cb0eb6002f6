"""Column titles and row counts as shown in the gallery."""


def prettify_name(field: str) -> str:
    """Column title for an artwork field: ``place_of_origin`` -> ``Place Of Origin``.

    An ``id`` part is shown as ``ID``.
    """
    return " ".join(
        "ID" if part == "id" else part.capitalize()
        for part in field.split("_") if part
    )


def pluralize_rows(count: int) -> str:
    """Return '1 row' / '12 rows' with thousands separators."""
    return f"{count:,} row{'' if count == 1 else 's'}"
