"""Input validation with clear error messages for selection commands."""

from __future__ import annotations

from typing import Any


class SelectionCountError(ValueError):
    """Raised when a requested select/deselect count is out of range.

    Carries the rejected ``count`` and the ``maximum`` it was checked
    against (``None`` when no upper bound is known yet).
    """

    def __init__(self, message: str, count: Any, maximum: int | None) -> None:
        super().__init__(message)
        self.count = count
        self.maximum = maximum


def validate_count(count: Any, maximum: int | None = None) -> int:
    """Validate a user-supplied row count.

    The count must be a positive integer and must not exceed ``maximum``
    when one is known. Returns the validated count (unchanged).
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise SelectionCountError(
            f"Row count must be a whole number, got {type(count).__name__} {count!r}.",
            count, maximum,
        )
    if count <= 0:
        raise SelectionCountError(
            f"Row count must be at least 1, got {count}.",
            count, maximum,
        )
    if maximum is not None and count > maximum:
        raise SelectionCountError(
            f"Row count {count} exceeds the maximum of {maximum}.",
            count, maximum,
        )
    return count


def validate_page_index(page_index: Any) -> int:
    """Validate a 1-based page index."""
    if isinstance(page_index, bool) or not isinstance(page_index, int):
        raise TypeError(
            f"Page index must be an int, got {type(page_index).__name__}."
        )
    if page_index < 1:
        raise ValueError(
            f"Page index is 1-based; got {page_index}. Use 1 for the first page."
        )
    return page_index


def validate_page_size(page_size: Any) -> int:
    """Validate the fixed page size shared by the view and the range selector."""
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise TypeError(
            f"Page size must be an int, got {type(page_size).__name__}."
        )
    if page_size < 1:
        raise ValueError(f"Page size must be at least 1, got {page_size}.")
    return page_size
