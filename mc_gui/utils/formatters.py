"""Formatting helpers for GUI display."""

from __future__ import annotations

from datetime import datetime
from typing import Any

EMPTY_CELL = "-"


def format_cell(value: Any) -> str:
    """Format a raw cell value, substituting "-" for every falsy value.

    ``0`` and ``False`` are falsy too and therefore render as "-".
    """
    if not value:
        return EMPTY_CELL
    return str(value)


def format_rendered(value: Any) -> str:
    """Format a renderer result as-is; only None becomes an empty cell."""
    if value is None:
        return ""
    return str(value)


def format_range_summary(first: int, last: int, total: int) -> str:
    """Format the "Showing x to y of z results" pagination summary."""
    return f"Showing {first} to {last} of {total} results"


def format_datetime(value: datetime | str | None) -> str:
    """Format a datetime or ISO-8601 string as a date for table cells."""
    if value is None or value == "":
        return EMPTY_CELL
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    return value.strftime("%Y-%m-%d")


def format_label(value: str | None) -> str:
    """Turn snake_case status codes into title-cased labels."""
    if not value:
        return EMPTY_CELL
    return value.replace("_", " ").title()
