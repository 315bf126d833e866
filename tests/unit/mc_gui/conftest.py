"""Pytest configuration for mc_gui tests."""

import os
from pathlib import Path

import pytest

from tests.helpers.optional_imports import module_available

HAS_PYSIDE6 = module_available("PySide6")

# Skip collection of Qt-dependent test files if PySide6 is missing.
QT_FREE_TESTS = {"test_pagination.py", "test_formatters.py", "test_table_models.py"}

if not HAS_PYSIDE6:
    collect_ignore = [
        path.name
        for path in Path(__file__).parent.glob("test_*.py")
        if path.name not in QT_FREE_TESTS
    ]


@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication on the offscreen platform."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def wait_until(qapp):
    """Process Qt events until ``predicate`` holds or ``timeout_ms`` elapses."""
    from PySide6.QtTest import QTest

    def _wait(predicate, timeout_ms: int = 3000) -> None:
        waited = 0
        while not predicate():
            if waited >= timeout_ms:
                raise AssertionError(f"Condition not met within {timeout_ms} ms")
            QTest.qWait(10)
            waited += 10

    return _wait
