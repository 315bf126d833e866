"""QThread workers for backend calls."""

from mc_gui.workers.task_worker import TaskRunner, TaskWorker, TaskWorkerSignals

__all__ = ["TaskRunner", "TaskWorker", "TaskWorkerSignals"]
