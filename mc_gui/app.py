"""Application setup and global services."""

from __future__ import annotations

from mc_common.config import DashboardSettings, load_settings
from mc_gui.services.api_client import ApiClient
from mc_gui.services.records_service import RecordsService
from mc_gui.services.system_service import SystemService
from mc_gui.windows.main_window import MainWindow


class ServiceContainer:
    """Container for all GUI services (dependency injection)."""

    def __init__(self, settings: DashboardSettings | None = None) -> None:
        self._settings = settings
        self._api_client: ApiClient | None = None
        self._members_service: RecordsService | None = None
        self._system_service: SystemService | None = None

    @property
    def settings(self) -> DashboardSettings:
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    @property
    def api_client(self) -> ApiClient:
        if self._api_client is None:
            self._api_client = ApiClient(
                self.settings.api_url,
                token=self.settings.api_token,
                timeout_seconds=self.settings.request_timeout,
            )
        return self._api_client

    @property
    def members_service(self) -> RecordsService:
        if self._members_service is None:
            self._members_service = RecordsService(
                self.api_client, "/members", "members"
            )
        return self._members_service

    @property
    def system_service(self) -> SystemService:
        if self._system_service is None:
            self._system_service = SystemService(self.api_client)
        return self._system_service


def create_app(settings: DashboardSettings | None = None) -> MainWindow:
    """Create and wire up the main application window."""
    services = ServiceContainer(settings)
    return MainWindow(services)
