"""Qt helper utilities."""

from __future__ import annotations

from PySide6.QtWidgets import QLayout, QWidget


def clear_layout(layout: QLayout) -> None:
    """Remove and schedule deletion of every widget, nested layouts included.

    Widgets are detached at once so ``findChildren`` no longer sees them,
    then deleted when control returns to the event loop.
    """
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.setParent(None)
            widget.deleteLater()
            continue
        child = item.layout()
        if child is not None:
            clear_layout(child)


def set_widget_role(widget: QWidget, role: str | None) -> None:
    """Set the ``role`` property used by stylesheets and re-polish on change."""
    if widget.property("role") == role:
        return
    widget.setProperty("role", role)
    style = widget.style()
    style.unpolish(widget)
    style.polish(widget)
