"""ViewModel for the system monitoring screen."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from PySide6.QtCore import QObject, Signal

from mc_common.errors import BackendRequestError
from mc_gui.models import ColumnDefinition
from mc_gui.utils import format_label
from mc_gui.viewmodels.table_vm import TableViewModel
from mc_gui.workers import TaskRunner

if TYPE_CHECKING:
    from mc_gui.services.system_service import SystemService

logger = logging.getLogger(__name__)

HEALTH_COLUMNS: list[ColumnDefinition[dict]] = [
    ColumnDefinition(key="service", header="Service", renderer=lambda v, _r: format_label(v)),
    ColumnDefinition(key="status", header="Status", renderer=lambda v, _r: format_label(v)),
    ColumnDefinition(
        key="response_time",
        header="Response (ms)",
        renderer=lambda v, _r: "" if v is None else v,
    ),
]

QUEUE_COLUMNS: list[ColumnDefinition[dict]] = [
    ColumnDefinition(key="queue", header="Queue", renderer=lambda v, _r: format_label(v)),
    ColumnDefinition(key="waiting", header="Waiting", renderer=lambda v, _r: v),
    ColumnDefinition(key="active", header="Active", renderer=lambda v, _r: v),
    ColumnDefinition(key="completed", header="Completed", renderer=lambda v, _r: v),
    ColumnDefinition(key="failed", header="Failed", renderer=lambda v, _r: v),
]


def health_rows(health: dict[str, Any]) -> list[dict[str, Any]]:
    """Flatten the ``services`` block of a health snapshot into table rows."""
    rows = []
    for name, check in (health.get("services") or {}).items():
        check = check or {}
        rows.append(
            {
                "service": name,
                "status": check.get("status"),
                "response_time": check.get("responseTime"),
            }
        )
    return rows


def queue_rows(stats: dict[str, Any]) -> list[dict[str, Any]]:
    """One row per queue, skipping the snapshot timestamp."""
    return [
        {"queue": name, **counts}
        for name, counts in stats.items()
        if isinstance(counts, dict)
    ]


class SystemViewModel(QObject):
    """ViewModel for health checks, queue counters and maintenance actions."""

    # Signals
    status_changed = Signal(str)  # overall health status
    action_finished = Signal(str, bool, str)  # action, ok, message
    error_occurred = Signal(str)

    def __init__(self, system_service: "SystemService", parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._system = system_service
        self._overall_status = ""
        self.health_table = TableViewModel(
            HEALTH_COLUMNS,
            get_id=lambda row: row["service"],
            empty_message="No health checks reported",
            parent=self,
        )
        self.queue_table = TableViewModel(
            QUEUE_COLUMNS,
            get_id=lambda row: row["queue"],
            empty_message="No queues reported",
            parent=self,
        )

        # Workers
        self._pending_status: int | None = None
        self._actions: dict[int, str] = {}
        self._status_runner = TaskRunner(self)
        self._status_runner.succeeded.connect(self._on_status_loaded)
        self._status_runner.failed.connect(self._on_status_error)
        self._action_runner = TaskRunner(self)
        self._action_runner.succeeded.connect(self._on_action_done)
        self._action_runner.failed.connect(self._on_action_error)

    @property
    def overall_status(self) -> str:
        return self._overall_status

    @property
    def is_busy(self) -> bool:
        return self._status_runner.is_busy or self._action_runner.is_busy

    def refresh(self) -> None:
        """Reload health checks and queue counters in a worker."""
        self.health_table.set_loading(True)
        self.queue_table.set_loading(True)
        self._pending_status = self._status_runner.submit(
            lambda: (self._system.get_health(), self._system.get_queue_stats())
        )

    def _on_status_loaded(self, token: int, result: tuple[Any, Any]) -> None:
        if token != self._pending_status:
            return
        self._pending_status = None
        health, queues = result
        try:
            if not isinstance(health, dict) or not isinstance(queues, dict):
                raise BackendRequestError(
                    "Unexpected system status payload",
                    context={
                        "health": type(health).__name__,
                        "queues": type(queues).__name__,
                    },
                )
            self.health_table.set_data(health_rows(health))
            self.queue_table.set_data(queue_rows(queues))
        except Exception as exc:
            self._status_failed(exc)
            return
        self._overall_status = str(health.get("status", "unknown"))
        self.status_changed.emit(self._overall_status)

    def _on_status_error(self, token: int, exc: object) -> None:
        if token != self._pending_status:
            return
        self._pending_status = None
        self._status_failed(exc)

    def _status_failed(self, exc: object) -> None:
        logger.warning("System refresh failed: %r", exc)
        self.health_table.set_loading(False)
        self.queue_table.set_loading(False)
        self.error_occurred.emit(f"Failed to load system status: {exc}")

    def clear_cache(self) -> None:
        self._run_action("Clear cache", self._system.clear_cache)

    def test_kcb(self) -> None:
        self._run_action("KCB connection", self._system.test_kcb_connection)

    def test_sms(self, phone: str | None = None) -> None:
        self._run_action("SMS service", lambda: self._system.test_sms_service(phone))

    def test_email(self, email: str | None = None) -> None:
        self._run_action("Email service", lambda: self._system.test_email_service(email))

    def _run_action(self, name: str, action: Callable[[], Any]) -> None:
        token = self._action_runner.submit(action)
        self._actions[token] = name

    def _on_action_done(self, token: int, result: object) -> None:
        name = self._actions.pop(token, None)
        if name is None:
            return
        message = str(result.get("message", "OK")) if isinstance(result, dict) else "OK"
        self.action_finished.emit(name, True, message)

    def _on_action_error(self, token: int, exc: object) -> None:
        name = self._actions.pop(token, None)
        if name is None:
            return
        logger.warning("%s failed: %r", name, exc)
        self.action_finished.emit(name, False, str(exc))

    def shutdown(self) -> None:
        """Wait for running workers and discard their results."""
        self._pending_status = None
        self._actions.clear()
        self._status_runner.shutdown()
        self._action_runner.shutdown()
