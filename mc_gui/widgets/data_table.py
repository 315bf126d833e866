"""Data table widget bound to a TableViewModel."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QHeaderView,
    QLabel,
    QProgressBar,
    QStackedWidget,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from mc_gui.models import DisplayState
from mc_gui.utils.qt import set_widget_role
from mc_gui.widgets.pagination_bar import PaginationBar

if TYPE_CHECKING:
    from mc_gui.viewmodels.table_vm import TableViewModel

STYLE_CLASS_ROLE = Qt.ItemDataRole.UserRole + 1


class DataTable(QWidget):
    """Table with loading/empty states, row selection and pagination.

    When the table is selectable the first column holds the selection
    check cells. A click there only toggles selection; clicks on any other
    cell only report the row as clicked.
    """

    def __init__(
        self,
        viewmodel: "TableViewModel",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._vm = viewmodel
        self._offset = 1 if viewmodel.selectable else 0

        self._setup_ui()
        self._connect_signals()
        self._refresh()

    @property
    def stack(self) -> QStackedWidget:
        return self._stack

    @property
    def table(self) -> QTableWidget:
        return self._table

    @property
    def pagination_bar(self) -> PaginationBar:
        return self._pagination

    @property
    def select_all_checkbox(self) -> QCheckBox:
        return self._select_all

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._stack = QStackedWidget()

        # Loading page
        loading = QWidget()
        loading_layout = QVBoxLayout(loading)
        spinner = QProgressBar()
        spinner.setRange(0, 0)
        spinner.setTextVisible(False)
        loading_layout.addStretch()
        loading_layout.addWidget(spinner)
        loading_label = QLabel("Loading data...")
        loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        set_widget_role(loading_label, "muted")
        loading_layout.addWidget(loading_label)
        loading_layout.addStretch()

        # Empty page
        self._empty_label = QLabel(self._vm.empty_message)
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        set_widget_role(self._empty_label, "muted")

        # Populated page
        populated = QWidget()
        populated_layout = QVBoxLayout(populated)
        populated_layout.setContentsMargins(0, 0, 0, 0)

        self._select_all = QCheckBox("Select all")
        self._select_all.setVisible(self._vm.selectable)
        self._select_all.clicked.connect(self._on_select_all_clicked)
        populated_layout.addWidget(self._select_all)

        self._table = QTableWidget()
        self._table.setColumnCount(len(self._vm.columns) + self._offset)
        self._table.setSelectionMode(QTableWidget.SelectionMode.NoSelection)
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._table.verticalHeader().setVisible(False)
        self._table.setAlternatingRowColors(True)
        self._table.setShowGrid(False)
        header = self._table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        header.setSectionsClickable(True)
        populated_layout.addWidget(self._table, 1)

        self._pagination = PaginationBar()
        populated_layout.addWidget(self._pagination)

        self._stack.addWidget(loading)
        self._stack.addWidget(self._empty_label)
        self._stack.addWidget(populated)
        self._pages = {
            DisplayState.LOADING: loading,
            DisplayState.EMPTY: self._empty_label,
            DisplayState.POPULATED: populated,
        }
        layout.addWidget(self._stack)

    def _connect_signals(self) -> None:
        self._vm.data_changed.connect(self._refresh)
        self._vm.sort_changed.connect(self._refresh_headers)
        self._vm.selection_changed.connect(self._refresh_selection)
        self._table.horizontalHeader().sectionClicked.connect(self._on_header_clicked)
        self._table.cellClicked.connect(self._on_cell_clicked)
        self._pagination.page_clicked.connect(self._vm.go_to_page)
        self._pagination.previous_clicked.connect(self._vm.go_previous)
        self._pagination.next_clicked.connect(self._vm.go_next)

    def _refresh(self) -> None:
        state = self._vm.display_state
        self._stack.setCurrentWidget(self._pages[state])
        if state is not DisplayState.POPULATED:
            return
        self._refresh_headers()
        self._populate_rows()
        self._refresh_selection()
        self._refresh_pagination()

    def _refresh_headers(self) -> None:
        labels = [""] if self._offset else []
        labels.extend(self._vm.header_label(column) for column in self._vm.columns)
        self._table.setHorizontalHeaderLabels(labels)

    def _populate_rows(self) -> None:
        rows = self._vm.rows
        self._table.clearContents()
        self._table.setRowCount(len(rows))
        for i, row in enumerate(rows):
            if self._offset:
                check = QTableWidgetItem()
                check.setFlags(Qt.ItemFlag.ItemIsEnabled)
                check.setData(Qt.ItemDataRole.UserRole, self._vm.row_id(row, i))
                self._table.setItem(i, 0, check)
            for j, column in enumerate(self._vm.columns):
                value = self._vm.cell_value(column, row)
                if isinstance(value, QWidget):
                    self._table.setCellWidget(i, j + self._offset, value)
                    continue
                item = QTableWidgetItem(self._vm.text_for(column, value))
                if column.style_class:
                    item.setData(STYLE_CLASS_ROLE, column.style_class)
                self._table.setItem(i, j + self._offset, item)

    def _refresh_selection(self) -> None:
        self._select_all.setChecked(self._vm.all_selected)
        if not self._offset:
            return
        for i, row in enumerate(self._vm.rows):
            item = self._table.item(i, 0)
            if item is None:
                continue
            state = (
                Qt.CheckState.Checked
                if self._vm.is_selected(row)
                else Qt.CheckState.Unchecked
            )
            item.setCheckState(state)

    def _refresh_pagination(self) -> None:
        pagination = self._vm.pagination
        self._pagination.setVisible(self._vm.show_pagination)
        if pagination is None:
            return
        self._pagination.set_state(
            self._vm.range_summary,
            self._vm.page_entries,
            pagination.page,
            can_previous=self._vm.can_go_previous,
            can_next=self._vm.can_go_next,
        )

    def _on_select_all_clicked(self) -> None:
        self._vm.select_all()

    def _on_header_clicked(self, section: int) -> None:
        index = section - self._offset
        if index < 0:
            return
        self._vm.toggle_sort(self._vm.columns[index].key)

    def _on_cell_clicked(self, row_index: int, column_index: int) -> None:
        rows = self._vm.rows
        if not 0 <= row_index < len(rows):
            return
        row = rows[row_index]
        if self._offset and column_index == 0:
            self._vm.toggle_row(row)
        else:
            self._vm.activate_row(row)
