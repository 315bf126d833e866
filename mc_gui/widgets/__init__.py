"""Reusable Qt widgets."""

from mc_gui.widgets.data_table import DataTable
from mc_gui.widgets.pagination_bar import PaginationBar
from mc_gui.widgets.search_filter_bar import SearchFilterBar

__all__ = [
    "DataTable",
    "PaginationBar",
    "SearchFilterBar",
]
