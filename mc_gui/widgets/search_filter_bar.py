"""Search box, filter drop-downs, clear and export controls."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLineEdit, QPushButton, QWidget

from mc_gui.models import NO_FILTER

if TYPE_CHECKING:
    from mc_gui.viewmodels.filter_vm import FilterViewModel


class SearchFilterBar(QWidget):
    """Widget bound to a FilterViewModel."""

    def __init__(
        self,
        viewmodel: "FilterViewModel",
        parent: QWidget | None = None,
        *,
        placeholder: str = "Search...",
    ) -> None:
        super().__init__(parent)
        self._vm = viewmodel

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._search = QLineEdit()
        self._search.setPlaceholderText(placeholder)
        self._search.setText(viewmodel.raw_search)
        # textEdited only fires for user input, not for setText().
        self._search.textEdited.connect(self._vm.on_search_keystroke)
        layout.addWidget(self._search, 1)

        self._combos: dict[str, QComboBox] = {}
        for option in viewmodel.filters:
            combo = QComboBox()
            combo.addItem(option.label, NO_FILTER)
            for choice in option.options:
                combo.addItem(choice.label, choice.value)
            combo.activated.connect(
                lambda index, key=option.key, box=combo: self._vm.on_filter_select(
                    key, box.itemData(index)
                )
            )
            self._combos[option.key] = combo
            layout.addWidget(combo)

        self._clear_btn = QPushButton("Clear")
        self._clear_btn.clicked.connect(self._vm.clear_all)
        layout.addWidget(self._clear_btn)

        self._export_btn: QPushButton | None = None
        if viewmodel.export_available:
            self._export_btn = QPushButton("Export")
            self._export_btn.clicked.connect(self._vm.request_export)
            layout.addWidget(self._export_btn)

        self._vm.values_changed.connect(self._sync)
        self._sync()

    @property
    def search_edit(self) -> QLineEdit:
        return self._search

    @property
    def combos(self) -> dict[str, QComboBox]:
        return self._combos

    @property
    def clear_button(self) -> QPushButton:
        return self._clear_btn

    @property
    def export_button(self) -> QPushButton | None:
        return self._export_btn

    def _sync(self) -> None:
        """Reflect viewmodel values without feeding them back as input."""
        if self._search.text() != self._vm.raw_search:
            self._search.setText(self._vm.raw_search)
        values = self._vm.filter_values
        for key, combo in self._combos.items():
            index = combo.findData(values.get(key, NO_FILTER))
            combo.setCurrentIndex(max(index, 0))
        self._clear_btn.setVisible(self._vm.can_clear)
