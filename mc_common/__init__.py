"""Shared helpers for microcover-admin."""

from mc_common.api import DashboardSettings, MCError, configure_logging, load_settings

__all__ = ["configure_logging", "DashboardSettings", "load_settings", "MCError"]
