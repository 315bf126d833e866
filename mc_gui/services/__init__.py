"""Backend services used by GUI screens."""

from mc_gui.services.api_client import ApiClient
from mc_gui.services.records_service import RecordPage, RecordQuery, RecordsService
from mc_gui.services.system_service import SystemService

__all__ = [
    "ApiClient",
    "RecordPage",
    "RecordQuery",
    "RecordsService",
    "SystemService",
]
