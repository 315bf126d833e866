"""ViewModels exposing Qt signals for views."""

from mc_gui.viewmodels.table_vm import TableViewModel
from mc_gui.viewmodels.filter_vm import FilterViewModel
from mc_gui.viewmodels.records_vm import RecordsScreenViewModel
from mc_gui.viewmodels.members_vm import build_members_viewmodel
from mc_gui.viewmodels.system_vm import SystemViewModel

__all__ = [
    "TableViewModel",
    "FilterViewModel",
    "RecordsScreenViewModel",
    "SystemViewModel",
    "build_members_viewmodel",
]
