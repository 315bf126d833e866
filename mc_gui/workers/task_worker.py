"""QThread worker for running backend calls off the GUI thread."""

from __future__ import annotations

import itertools
import logging
from typing import Any, Callable

from PySide6.QtCore import QObject, QThread, Signal

logger = logging.getLogger(__name__)

_tokens = itertools.count(1)


class TaskWorkerSignals(QObject):
    """Signals emitted by TaskWorker."""

    finished = Signal(int, object)  # token, result
    failed = Signal(int, object)  # token, exception


class TaskWorker(QObject):
    """Worker that runs one callable in a separate thread."""

    def __init__(self, task: Callable[[], Any], parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._task = task
        self._thread: QThread | None = None
        self.token = next(_tokens)

        self.signals = TaskWorkerSignals()

    def start(self) -> None:
        """Start the worker in a new thread."""
        if self._thread is not None:
            return
        self._thread = QThread()
        self.moveToThread(self._thread)
        self._thread.started.connect(self._run)
        self._thread.start()

    def _run(self) -> None:
        """Execute the task in the worker thread."""
        try:
            result = self._task()
        except Exception as exc:
            self.signals.failed.emit(self.token, exc)
        else:
            self.signals.finished.emit(self.token, result)
        finally:
            if self._thread is not None:
                self._thread.quit()

    def wait(self) -> None:
        """Block until the thread has stopped; call from the owning thread."""
        if self._thread is not None:
            self._thread.wait()

    def is_running(self) -> bool:
        """Check if the worker is currently running."""
        return self._thread is not None and self._thread.isRunning()


class TaskRunner(QObject):
    """Starts TaskWorkers and keeps each alive until its thread has stopped.

    Results are re-emitted on the thread that owns the runner, tagged with
    the token returned by ``submit``.
    """

    succeeded = Signal(int, object)  # token, result
    failed = Signal(int, object)  # token, exception

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._workers: dict[int, TaskWorker] = {}

    @property
    def is_busy(self) -> bool:
        return bool(self._workers)

    def submit(self, task: Callable[[], Any]) -> int:
        worker = TaskWorker(task)
        worker.signals.finished.connect(self._on_finished)
        worker.signals.failed.connect(self._on_failed)
        self._workers[worker.token] = worker
        worker.start()
        return worker.token

    def _release(self, token: int) -> bool:
        worker = self._workers.pop(token, None)
        if worker is None:
            return False
        worker.wait()
        return True

    def _on_finished(self, token: int, result: object) -> None:
        if self._release(token):
            self.succeeded.emit(token, result)

    def _on_failed(self, token: int, exc: object) -> None:
        if self._release(token):
            self.failed.emit(token, exc)

    def shutdown(self) -> None:
        """Wait for running workers and drop their pending results."""
        workers, self._workers = self._workers, {}
        for worker in workers.values():
            worker.wait()
        if workers:
            logger.debug("Discarded %d pending task(s)", len(workers))
