"""Cancel-and-replace timer for debouncing rapidly changing values."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QObject, QTimer, Signal


class DebounceTimer(QObject):
    """Single-shot timer that only delivers the most recently scheduled value.

    Every ``schedule`` call restarts the quiet window and replaces the
    pending value; a replaced or cancelled value is never delivered.
    """

    fired = Signal(object)

    def __init__(self, interval_ms: int, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._pending: Any = None
        self._has_pending = False
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    @property
    def is_pending(self) -> bool:
        """Whether a value is waiting for its quiet window to close."""
        return self._has_pending

    @property
    def pending_value(self) -> Any:
        return self._pending

    def schedule(self, value: Any) -> None:
        """Replace any pending value and restart the quiet window."""
        self._pending = value
        self._has_pending = True
        # QTimer.start() on an active timer stops and restarts it.
        self._timer.start()

    def cancel(self) -> bool:
        """Drop the pending value. Returns True if one was pending."""
        was_pending = self._has_pending
        self._timer.stop()
        self._pending = None
        self._has_pending = False
        return was_pending

    def _on_timeout(self) -> None:
        if not self._has_pending:
            return
        value = self._pending
        self._pending = None
        self._has_pending = False
        self.fired.emit(value)
