"""System monitoring endpoints of the backend."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mc_gui.services.api_client import ApiClient


class SystemService:
    """Health, metrics and maintenance actions under ``/system``."""

    def __init__(self, client: "ApiClient") -> None:
        self._client = client

    def get_health(self) -> dict[str, Any]:
        """Overall status and per-service health checks."""
        return self._client.get("/system/health")

    def get_metrics(self) -> dict[str, Any]:
        """CPU, memory, process and queue metrics."""
        return self._client.get("/system/metrics")

    def get_database_stats(self) -> dict[str, Any]:
        return self._client.get("/system/database")

    def get_queue_stats(self) -> dict[str, Any]:
        return self._client.get("/system/queues")

    def get_application_metrics(self) -> dict[str, Any]:
        return self._client.get("/system/application")

    def clear_cache(self) -> dict[str, Any]:
        return self._client.post("/system/cache/clear")

    def test_kcb_connection(self) -> dict[str, Any]:
        return self._client.post("/system/test/kcb")

    def test_sms_service(self, phone: str | None = None) -> dict[str, Any]:
        """Send a test SMS, to ``phone`` or the backend default."""
        return self._client.post("/system/test/sms", {"phone": phone})

    def test_email_service(self, email: str | None = None) -> dict[str, Any]:
        """Send a test email, to ``email`` or the backend default."""
        return self._client.post("/system/test/email", {"email": email})
