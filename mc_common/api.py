"""Public API surface for mc_common."""

from mc_common.config import DashboardSettings, load_settings
from mc_common.errors import MCError
from mc_common.logging import configure_logging

__all__ = ["configure_logging", "DashboardSettings", "load_settings", "MCError"]
