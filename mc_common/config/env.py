"""Parsing of MC_* environment variable values.

Each parser returns None when the variable is unset or its value cannot be
interpreted; the caller decides whether that is an error or a fallback.
"""

from __future__ import annotations

import math

_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def parse_bool_env(value: str | None) -> bool | None:
    """Parse an on/off switch such as MC_LOG_JSON or MC_STRICT_CONTRACTS.

    Accepts 1/0, true/false, yes/no and on/off in any case. Anything else
    is reported as None instead of being read as False.
    """
    if value is None:
        return None
    token = value.strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


def parse_int_env(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_float_env(value: str | None) -> float | None:
    """Parse a finite float; "nan" and "inf" are rejected."""
    if value is None:
        return None
    try:
        parsed = float(value.strip())
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None
