"""Tests for the cancel-and-replace debounce timer."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from PySide6.QtTest import QTest

from mc_gui.utils.debounce import DebounceTimer

pytestmark = [pytest.mark.unit_gui, pytest.mark.usefixtures("qapp")]


def test_only_latest_value_fires() -> None:
    timer = DebounceTimer(50)
    fired = MagicMock()
    timer.fired.connect(fired)

    timer.schedule("a")
    timer.schedule("ab")
    assert timer.is_pending is True
    assert timer.pending_value == "ab"

    QTest.qWait(200)

    fired.assert_called_once_with("ab")
    assert timer.is_pending is False


def test_cancel_drops_pending_value() -> None:
    timer = DebounceTimer(50)
    fired = MagicMock()
    timer.fired.connect(fired)

    timer.schedule("a")
    assert timer.cancel() is True
    assert timer.cancel() is False

    QTest.qWait(150)

    fired.assert_not_called()


def test_values_fire_in_window_order() -> None:
    timer = DebounceTimer(30)
    seen: list[str] = []
    timer.fired.connect(seen.append)

    timer.schedule("first")
    QTest.qWait(150)
    timer.schedule("second")
    QTest.qWait(150)

    assert seen == ["first", "second"]
    assert timer.interval_ms == 30
