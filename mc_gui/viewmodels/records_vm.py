"""ViewModel for list screens backed by a paginated records endpoint."""

from __future__ import annotations

import csv
import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from PySide6.QtCore import QObject, Signal

from mc_common.errors import MCError, error_to_payload
from mc_gui.models import NO_FILTER, SortState
from mc_gui.services.records_service import RecordQuery
from mc_gui.workers import TaskRunner

if TYPE_CHECKING:
    from mc_gui.services.records_service import RecordPage, RecordsService
    from mc_gui.viewmodels.filter_vm import FilterViewModel
    from mc_gui.viewmodels.table_vm import TableViewModel

logger = logging.getLogger(__name__)


class RecordsScreenViewModel(QObject):
    """ViewModel for a search/filter/table screen.

    Translates committed search text, filter selections, page requests and
    the requested sort into a RecordQuery, fetches the page and hands rows
    and pagination to the table. Fetch failures leave the table's sort and
    selection untouched.
    """

    # Signals
    query_changed = Signal(object)  # RecordQuery
    error_occurred = Signal(str)
    export_requested = Signal()
    exported = Signal(str)  # path

    def __init__(
        self,
        title: str,
        service: "RecordsService",
        table: "TableViewModel",
        filters: "FilterViewModel",
        *,
        page_size: int = 25,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._title = title
        self._service = service
        self._table = table
        self._filters = filters

        # State
        self._query = RecordQuery(limit=page_size, filters=filters.filter_values)
        self._last_error: str = ""
        self._pending: int | None = None

        self._runner = TaskRunner(self)
        self._runner.succeeded.connect(self._on_fetch_succeeded)
        self._runner.failed.connect(self._on_fetch_failed)

        self._filters.search_changed.connect(self._on_search_changed)
        self._filters.filter_changed.connect(self._on_filter_changed)
        self._filters.filters_cleared.connect(self._on_filters_cleared)
        self._filters.set_export_handler(self.export_requested.emit)
        self._table.page_requested.connect(self._on_page_requested)
        self._table.sort_changed.connect(self._on_sort_changed)

    @property
    def title(self) -> str:
        return self._title

    @property
    def table(self) -> "TableViewModel":
        return self._table

    @property
    def filters(self) -> "FilterViewModel":
        return self._filters

    @property
    def query(self) -> RecordQuery:
        """Query used for the most recent fetch."""
        return self._query

    @property
    def last_error(self) -> str:
        return self._last_error

    @property
    def is_busy(self) -> bool:
        """Whether a fetch is still running in a worker thread."""
        return self._runner.is_busy

    def refresh(self) -> None:
        """Fetch the page described by the current query in a worker.

        Only the most recent fetch is applied; results of superseded
        fetches are dropped.
        """
        self._table.set_loading(True)
        query = self._query
        self._pending = self._runner.submit(lambda: self._service.fetch_page(query))

    def shutdown(self) -> None:
        """Wait for in-flight fetches and discard their results."""
        self._pending = None
        self._runner.shutdown()

    def _on_fetch_succeeded(self, token: int, page: "RecordPage") -> None:
        if token != self._pending:
            return
        self._pending = None
        try:
            self._table.set_data(page.rows, page.pagination)
        except Exception as exc:
            self._report(exc)
            return
        self._last_error = ""

    def _on_fetch_failed(self, token: int, exc: object) -> None:
        if token != self._pending:
            return
        self._pending = None
        self._report(exc)

    def _report(self, exc: object) -> None:
        if isinstance(exc, MCError):
            logger.warning("Fetch failed: %s", error_to_payload(exc))
            self._fail(str(exc))
        else:
            logger.error("Unexpected error while fetching %s: %r", self._title, exc)
            self._fail(f"Failed to fetch {self._title.lower()}: {exc}")

    def _fail(self, message: str) -> None:
        self._last_error = message
        self._table.set_loading(False)
        self.error_occurred.emit(message)

    def _apply(self, **changes: Any) -> None:
        self._query = replace(self._query, **changes)
        self.query_changed.emit(self._query)
        self.refresh()

    def _on_search_changed(self, text: str) -> None:
        self._apply(search=text, page=1)

    def _on_filter_changed(self, values: dict[str, str]) -> None:
        self._apply(filters=dict(values), page=1)

    def _on_filters_cleared(self) -> None:
        cleared = {key: NO_FILTER for key in self._query.filters}
        self._apply(search="", filters=cleared, page=1)

    def _on_page_requested(self, page: int) -> None:
        self._apply(page=page)

    def _on_sort_changed(self, sort: SortState) -> None:
        self._apply(sort_by=sort.column, sort_order=sort.direction)

    def export_csv(self, path: Path) -> int:
        """Write the current page as CSV. Returns the number of rows written."""
        columns = self._table.columns
        rows = self._table.get_table_rows()
        with path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerow([column.header for column in columns])
            writer.writerows(rows)
        logger.info("Exported %d row(s) to %s", len(rows), path)
        self.exported.emit(str(path))
        return len(rows)
