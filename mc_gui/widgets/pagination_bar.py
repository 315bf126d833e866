"""Pagination bar with compressed page buttons."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from mc_gui.utils.pagination import PageEntry
from mc_gui.utils.qt import clear_layout, set_widget_role


class PaginationBar(QWidget):
    """Range summary, previous/next controls and page number buttons."""

    page_clicked = Signal(int)
    previous_clicked = Signal()
    next_clicked = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._summary = QLabel("")
        set_widget_role(self._summary, "muted")
        layout.addWidget(self._summary)
        layout.addStretch()

        self._prev_btn = QPushButton("‹")
        self._prev_btn.setToolTip("Previous page")
        self._prev_btn.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self._prev_btn)

        self._pages_layout = QHBoxLayout()
        self._pages_layout.setSpacing(4)
        layout.addLayout(self._pages_layout)

        self._next_btn = QPushButton("›")
        self._next_btn.setToolTip("Next page")
        self._next_btn.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self._next_btn)

        self._page_buttons: dict[int, QPushButton] = {}

    @property
    def previous_button(self) -> QPushButton:
        return self._prev_btn

    @property
    def next_button(self) -> QPushButton:
        return self._next_btn

    @property
    def page_buttons(self) -> dict[int, QPushButton]:
        """Page number -> button currently rendered."""
        return self._page_buttons

    def set_state(
        self,
        summary: str,
        entries: Sequence[PageEntry],
        current: int,
        *,
        can_previous: bool,
        can_next: bool,
    ) -> None:
        """Rebuild the page buttons and update control states."""
        self._summary.setText(summary)
        self._prev_btn.setEnabled(can_previous)
        self._next_btn.setEnabled(can_next)

        clear_layout(self._pages_layout)
        self._page_buttons = {}
        for entry in entries:
            if isinstance(entry, str):
                marker = QLabel(entry)
                set_widget_role(marker, "muted")
                self._pages_layout.addWidget(marker)
                continue
            button = QPushButton(str(entry))
            button.setCheckable(True)
            button.setChecked(entry == current)
            button.clicked.connect(
                lambda _checked=False, page=entry: self.page_clicked.emit(page)
            )
            self._pages_layout.addWidget(button)
            self._page_buttons[entry] = button
