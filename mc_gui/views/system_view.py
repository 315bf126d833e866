"""System monitoring view: health checks, queues and maintenance actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from mc_gui.utils import format_label
from mc_gui.utils.qt import set_widget_role
from mc_gui.widgets import DataTable

if TYPE_CHECKING:
    from mc_gui.viewmodels.system_vm import SystemViewModel

_STATUS_ROLES = {
    "healthy": "status-success",
    "degraded": "status-warning",
    "critical": "status-error",
}


class SystemView(QWidget):
    """View for backend health and maintenance actions."""

    def __init__(
        self,
        viewmodel: "SystemViewModel",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._vm = viewmodel

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        title = QLabel("System")
        title.setProperty("role", "title")
        layout.addWidget(title)

        header = QHBoxLayout()
        self._overall = QLabel("Status: -")
        header.addWidget(self._overall)
        header.addStretch()
        refresh_btn = QPushButton("Refresh")
        refresh_btn.clicked.connect(self._vm.refresh)
        header.addWidget(refresh_btn)
        layout.addLayout(header)

        health_group = QGroupBox("Health Checks")
        health_layout = QVBoxLayout(health_group)
        health_layout.addWidget(DataTable(self._vm.health_table))
        layout.addWidget(health_group, 1)

        queue_group = QGroupBox("Queues")
        queue_layout = QVBoxLayout(queue_group)
        queue_layout.addWidget(DataTable(self._vm.queue_table))
        layout.addWidget(queue_group, 1)

        actions = QHBoxLayout()
        for label, slot in (
            ("Clear Cache", self._vm.clear_cache),
            ("Test KCB", self._vm.test_kcb),
            ("Test SMS", self._vm.test_sms),
            ("Test Email", self._vm.test_email),
        ):
            button = QPushButton(label)
            button.clicked.connect(lambda _checked=False, action=slot: action())
            actions.addWidget(button)
        actions.addStretch()
        layout.addLayout(actions)

        self._status_label = QLabel("")
        set_widget_role(self._status_label, "muted")
        layout.addWidget(self._status_label)

    def _connect_signals(self) -> None:
        self._vm.status_changed.connect(self._on_status_changed)
        self._vm.action_finished.connect(self._on_action_finished)
        self._vm.error_occurred.connect(self._on_error)

    def _on_status_changed(self, status: str) -> None:
        self._overall.setText(f"Status: {format_label(status)}")
        set_widget_role(self._overall, _STATUS_ROLES.get(status, "muted"))

    def _on_action_finished(self, name: str, ok: bool, message: str) -> None:
        self._status_label.setText(f"{name}: {message}")
        set_widget_role(self._status_label, "status-success" if ok else "status-error")

    def _on_error(self, message: str) -> None:
        self._status_label.setText(message)
        set_widget_role(self._status_label, "status-error")

    def closeEvent(self, event: object) -> None:
        """Wait for running workers before the view goes away."""
        self._vm.shutdown()
        super().closeEvent(event)  # type: ignore[arg-type]
