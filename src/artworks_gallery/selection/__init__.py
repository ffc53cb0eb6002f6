"""Cross-page selection coordinators: reconciliation and range selection."""

from .reconciler import (
    PageSelectionStatus,
    ReconcileResult,
    deselect_page,
    page_status,
    reconcile,
    select_page,
)
from .range_selector import RangeSelectionResult, RangeSelector

__all__ = [
    "PageSelectionStatus",
    "ReconcileResult",
    "deselect_page",
    "page_status",
    "reconcile",
    "select_page",
    "RangeSelectionResult",
    "RangeSelector",
]
