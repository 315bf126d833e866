"""Configuration helpers for mc_common."""

from .env import parse_bool_env, parse_float_env, parse_int_env
from .settings import DashboardSettings, load_settings

__all__ = [
    "DashboardSettings",
    "load_settings",
    "parse_bool_env",
    "parse_float_env",
    "parse_int_env",
]
