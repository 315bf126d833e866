"""List screen combining the search/filter bar and the data table."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtWidgets import QFileDialog, QLabel, QVBoxLayout, QWidget

from mc_gui.utils.qt import set_widget_role
from mc_gui.widgets import DataTable, SearchFilterBar

if TYPE_CHECKING:
    from mc_gui.viewmodels.records_vm import RecordsScreenViewModel


class RecordsView(QWidget):
    """View for a searchable, filterable, paginated record list."""

    def __init__(
        self,
        viewmodel: "RecordsScreenViewModel",
        parent: QWidget | None = None,
        *,
        load_on_show: bool = True,
    ) -> None:
        super().__init__(parent)
        self._vm = viewmodel

        self._setup_ui()
        self._connect_signals()
        if load_on_show:
            self._vm.refresh()

    @property
    def search_bar(self) -> SearchFilterBar:
        return self._search_bar

    @property
    def data_table(self) -> DataTable:
        return self._data_table

    @property
    def status_label(self) -> QLabel:
        return self._status_label

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        title = QLabel(self._vm.title)
        title.setProperty("role", "title")
        layout.addWidget(title)

        self._search_bar = SearchFilterBar(
            self._vm.filters,
            placeholder=f"Search {self._vm.title.lower()}...",
        )
        layout.addWidget(self._search_bar)

        self._data_table = DataTable(self._vm.table)
        layout.addWidget(self._data_table, 1)

        self._status_label = QLabel("")
        set_widget_role(self._status_label, "muted")
        layout.addWidget(self._status_label)

    def _connect_signals(self) -> None:
        self._vm.error_occurred.connect(self._on_error)
        self._vm.table.data_changed.connect(self._on_data_changed)
        self._vm.export_requested.connect(self._on_export)
        self._vm.exported.connect(self._on_exported)

    def _on_data_changed(self) -> None:
        if self._vm.table.loading or self._vm.last_error:
            return
        self._status_label.setText("")
        set_widget_role(self._status_label, "muted")

    def _on_error(self, message: str) -> None:
        self._status_label.setText(message)
        set_widget_role(self._status_label, "status-error")

    def _on_export(self) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self,
            f"Export {self._vm.title}",
            f"{self._vm.title.lower()}.csv",
            "CSV files (*.csv)",
        )
        if path:
            self._vm.export_csv(Path(path))

    def _on_exported(self, path: str) -> None:
        self._status_label.setText(f"Exported to {path}")
        set_widget_role(self._status_label, "status-success")

    def closeEvent(self, event: object) -> None:
        """Stop the pending search commit and fetches before the view goes away."""
        self._vm.filters.teardown()
        self._vm.shutdown()
        super().closeEvent(event)  # type: ignore[arg-type]
