"""Formatting, pagination and Qt helpers."""

from mc_gui.utils.formatters import (
    EMPTY_CELL,
    format_cell,
    format_datetime,
    format_label,
    format_range_summary,
    format_rendered,
)
from mc_gui.utils.pagination import PAGE_ELLIPSIS, page_entries, visible_pages

__all__ = [
    "EMPTY_CELL",
    "PAGE_ELLIPSIS",
    "format_cell",
    "format_datetime",
    "format_label",
    "format_range_summary",
    "format_rendered",
    "page_entries",
    "visible_pages",
]
