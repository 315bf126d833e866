"""Tests for the QThread task runner."""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

import pytest

pytestmark = [pytest.mark.unit_gui, pytest.mark.usefixtures("qapp")]


def test_task_runs_off_the_calling_thread(wait_until) -> None:
    from mc_gui.workers import TaskRunner

    runner = TaskRunner()
    succeeded = MagicMock()
    runner.succeeded.connect(succeeded)
    caller = threading.get_ident()

    token = runner.submit(threading.get_ident)
    wait_until(lambda: not runner.is_busy)

    succeeded.assert_called_once()
    result_token, worker_ident = succeeded.call_args.args
    assert result_token == token
    assert worker_ident != caller


def test_exceptions_are_delivered_as_failures(wait_until) -> None:
    from mc_gui.workers import TaskRunner

    runner = TaskRunner()
    failed = MagicMock()
    runner.failed.connect(failed)

    def boom() -> None:
        raise ValueError("bad payload")

    token = runner.submit(boom)
    wait_until(lambda: not runner.is_busy)

    result_token, exc = failed.call_args.args
    assert result_token == token
    assert isinstance(exc, ValueError)
    assert str(exc) == "bad payload"


def test_tokens_are_unique() -> None:
    from mc_gui.workers import TaskRunner

    runner = TaskRunner()
    tokens = {runner.submit(lambda: None) for _ in range(3)}
    runner.shutdown()

    assert len(tokens) == 3
    assert runner.is_busy is False
