"""ViewModel for the generic data table."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Callable, Iterable, Mapping, Sequence

from pydantic import ValidationError
from PySide6.QtCore import QObject, Signal

from mc_common.errors import TableContractError, wrap_error
from mc_gui.models import ColumnDefinition, DisplayState, PaginationMetadata, SortState
from mc_gui.utils import format_cell, format_range_summary, format_rendered, page_entries
from mc_gui.utils.pagination import PageEntry

logger = logging.getLogger(__name__)

SORT_INDICATORS = {"asc": "▲", "desc": "▼"}


class TableViewModel(QObject):
    """ViewModel for a sortable, selectable, paginated table.

    Holds sort intent and the selected row identities. Rows are displayed
    in the order they are supplied; a sort change only updates
    ``sort_state`` and emits ``sort_changed`` so the data layer can reorder.
    Selection is keyed by ``get_id`` and is not pruned on page changes.
    """

    # Signals
    data_changed = Signal()
    sort_changed = Signal(object)  # SortState
    selection_changed = Signal(object)  # frozenset[str]
    page_requested = Signal(int)
    row_clicked = Signal(object)  # row

    def __init__(
        self,
        columns: Sequence[ColumnDefinition],
        *,
        get_id: Callable[[Any], str] | None = None,
        selectable: bool = False,
        empty_message: str = "No data available",
        strict: bool = True,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        duplicates = [key for key, n in Counter(c.key for c in columns).items() if n > 1]
        if duplicates:
            raise TableContractError(
                "Column keys must be unique", context={"duplicates": duplicates}
            )
        self._columns: list[ColumnDefinition] = list(columns)
        self._by_key = {column.key: column for column in self._columns}
        self._get_id = get_id
        self._selectable = selectable
        self._empty_message = empty_message
        self._strict = strict

        # State
        self._rows: list[Any] = []
        self._pagination: PaginationMetadata | None = None
        self._loading: bool = False
        self._sort = SortState()
        self._selection: frozenset[str] = frozenset()

    @property
    def columns(self) -> list[ColumnDefinition]:
        return self._columns

    @property
    def rows(self) -> list[Any]:
        """Rows of the current page in display order."""
        return self._rows

    @property
    def pagination(self) -> PaginationMetadata | None:
        return self._pagination

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def selectable(self) -> bool:
        return self._selectable

    @property
    def empty_message(self) -> str:
        return self._empty_message

    @property
    def sort_state(self) -> SortState:
        """Requested sort column and direction."""
        return self._sort

    @property
    def selection(self) -> frozenset[str]:
        """Selected row identities, possibly spanning several pages."""
        return self._selection

    @property
    def display_state(self) -> DisplayState:
        if self._loading:
            return DisplayState.LOADING
        if not self._rows:
            return DisplayState.EMPTY
        return DisplayState.POPULATED

    @property
    def all_selected(self) -> bool:
        """Whether the header "select all" control shows as checked."""
        return bool(self._rows) and len(self._selection) == len(self._rows)

    @property
    def show_pagination(self) -> bool:
        return (
            self.display_state is DisplayState.POPULATED
            and self._pagination is not None
        )

    @property
    def can_go_previous(self) -> bool:
        return self._pagination is not None and self._pagination.page != 1

    @property
    def can_go_next(self) -> bool:
        return (
            self._pagination is not None
            and self._pagination.page != self._pagination.pages
        )

    @property
    def page_entries(self) -> list[PageEntry]:
        """Page numbers and ellipsis markers for the paginator."""
        if self._pagination is None:
            return []
        return page_entries(self._pagination.page, self._pagination.pages)

    @property
    def range_summary(self) -> str:
        if self._pagination is None:
            return ""
        p = self._pagination
        return format_range_summary(p.first_index, p.last_index, p.total)

    # -- data ingestion -------------------------------------------------

    def set_loading(self, loading: bool) -> None:
        """Toggle the loading state; the table body is hidden while loading."""
        if loading == self._loading:
            return
        self._loading = loading
        self.data_changed.emit()

    def set_data(
        self,
        rows: Iterable[Any],
        pagination: PaginationMetadata | Mapping[str, Any] | None = None,
    ) -> None:
        """Replace the displayed rows and pagination metadata.

        Sort and selection state are kept as they are.
        """
        rows = list(rows)
        metadata = self._coerce_pagination(pagination)
        self._check_unique_ids(rows)
        self._rows = rows
        self._pagination = metadata
        self._loading = False
        logger.debug(
            "Table data updated: %d row(s), page %s",
            len(rows),
            metadata.page if metadata else "-",
        )
        self.data_changed.emit()

    def _coerce_pagination(
        self, pagination: PaginationMetadata | Mapping[str, Any] | None
    ) -> PaginationMetadata | None:
        if pagination is None or isinstance(pagination, PaginationMetadata):
            return pagination
        try:
            return PaginationMetadata.model_validate(dict(pagination))
        except ValidationError as exc:
            if not self._strict:
                logger.warning("Accepting invalid pagination metadata: %s", exc)
                return PaginationMetadata.model_construct(**dict(pagination))
            raise wrap_error(
                TableContractError,
                "Invalid pagination metadata",
                context={"pagination": dict(pagination)},
                cause=exc,
            ) from exc

    def _check_unique_ids(self, rows: list[Any]) -> None:
        if self._get_id is None:
            return
        counts = Counter(self._get_id(row) for row in rows)
        duplicates = sorted(row_id for row_id, n in counts.items() if n > 1)
        if not duplicates:
            return
        if self._strict:
            raise TableContractError(
                "Row identities must be unique within a page",
                context={"duplicates": duplicates},
            )
        logger.warning("Duplicate row identities on page: %s", ", ".join(duplicates))

    # -- sorting ----------------------------------------------------------

    def column(self, key: str) -> ColumnDefinition:
        try:
            return self._by_key[key]
        except KeyError as exc:
            raise TableContractError(
                f"Unknown column '{key}'", context={"columns": list(self._by_key)}
            ) from exc

    def toggle_sort(self, key: str) -> SortState:
        """Cycle the requested sort for a column header click."""
        column = self.column(key)
        if not column.sortable:
            return self._sort

        if self._sort.column == key:
            direction = "desc" if self._sort.direction == "asc" else "asc"
            self._sort = SortState(column=key, direction=direction)
        else:
            self._sort = SortState(column=key, direction="asc")
        self.sort_changed.emit(self._sort)
        return self._sort

    def header_label(self, column: ColumnDefinition) -> str:
        """Header text with a direction marker on the active sort column."""
        if column.sortable and self._sort.column == column.key:
            return f"{column.header} {SORT_INDICATORS[self._sort.direction]}"
        return column.header

    # -- selection --------------------------------------------------------

    def row_id(self, row: Any, index: int) -> str:
        """Identity of a row, falling back to its position without get_id."""
        if self._get_id is None:
            return str(index)
        return self._get_id(row)

    def is_selected(self, row: Any) -> bool:
        return self._get_id is not None and self._get_id(row) in self._selection

    def select_all(self) -> None:
        """Select every displayed row, or clear when all are selected.

        The selection is replaced, not extended: identities selected on
        other pages are dropped when this selects the current page.
        """
        if self._get_id is None:
            return
        if len(self._selection) == len(self._rows):
            self._update_selection(frozenset())
        else:
            self._update_selection(frozenset(self._get_id(row) for row in self._rows))

    def toggle_row(self, row: Any) -> None:
        """Add or remove a single row from the selection."""
        if self._get_id is None:
            return
        row_id = self._get_id(row)
        if row_id in self._selection:
            self._update_selection(self._selection - {row_id})
        else:
            self._update_selection(self._selection | {row_id})

    def set_selection(self, ids: Iterable[str]) -> None:
        """Replace the selection programmatically."""
        self._update_selection(frozenset(ids))

    def clear_selection(self) -> None:
        self._update_selection(frozenset())

    def _update_selection(self, selection: frozenset[str]) -> None:
        self._selection = selection
        self.selection_changed.emit(self._selection)

    def activate_row(self, row: Any) -> None:
        """Report a row click that did not originate in the selection cell."""
        self.row_clicked.emit(row)

    # -- navigation -------------------------------------------------------

    def go_to_page(self, page: int) -> None:
        """Ask the host to load ``page``; bounds are the host's concern."""
        self.page_requested.emit(page)

    def go_previous(self) -> None:
        if self.can_go_previous:
            self.go_to_page(self._pagination.page - 1)  # type: ignore[union-attr]

    def go_next(self) -> None:
        if self.can_go_next:
            self.go_to_page(self._pagination.page + 1)  # type: ignore[union-attr]

    # -- cells ------------------------------------------------------------

    def cell_value(self, column: ColumnDefinition, row: Any) -> Any:
        """Renderer output when defined, otherwise the raw value."""
        value = column.value_for(row)
        if column.renderer is not None:
            return column.renderer(value, row)
        return value

    def text_for(self, column: ColumnDefinition, value: Any) -> str:
        """Display text for a value returned by ``cell_value``."""
        if column.renderer is not None:
            return format_rendered(value)
        return format_cell(value)

    def cell_text(self, column: ColumnDefinition, row: Any) -> str:
        """Display text of a cell."""
        return self.text_for(column, self.cell_value(column, row))

    def get_table_rows(self) -> list[list[str]]:
        """Current page formatted as rows of cell text."""
        return [[self.cell_text(col, row) for col in self._columns] for row in self._rows]
