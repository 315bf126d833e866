"""Data types shared by table and filter viewmodels."""

from mc_gui.models.filters import NO_FILTER, FilterChoice, FilterOption
from mc_gui.models.table import (
    CellValue,
    ColumnDefinition,
    DisplayState,
    PaginationMetadata,
    SortDirection,
    SortState,
)

__all__ = [
    "CellValue",
    "ColumnDefinition",
    "DisplayState",
    "FilterChoice",
    "FilterOption",
    "NO_FILTER",
    "PaginationMetadata",
    "SortDirection",
    "SortState",
]
