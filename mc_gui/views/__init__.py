"""Screen-level views."""

from mc_gui.views.records_view import RecordsView
from mc_gui.views.system_view import SystemView

__all__ = ["RecordsView", "SystemView"]
