"""Dashboard settings resolved from the environment."""

from __future__ import annotations

import os
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mc_common.config.env import parse_bool_env, parse_float_env, parse_int_env
from mc_common.errors import ConfigurationError

DEFAULT_API_URL = "http://localhost:5000/api"


class DashboardSettings(BaseModel):
    """Runtime settings for the admin dashboard."""

    api_url: str = Field(default=DEFAULT_API_URL)
    api_token: str | None = None
    request_timeout: float = Field(default=10.0, gt=0)
    page_size: int = Field(default=25, gt=0)
    search_debounce_ms: int = Field(default=300, ge=0)
    strict_contracts: bool = True

    model_config = ConfigDict(extra="forbid", frozen=True)


# env var -> (field name, parser)
_ENV_FIELDS: dict[str, tuple[str, Callable[[str | None], Any]]] = {
    "MC_API_URL": ("api_url", lambda value: value),
    "MC_API_TOKEN": ("api_token", lambda value: value or None),
    "MC_REQUEST_TIMEOUT": ("request_timeout", parse_float_env),
    "MC_PAGE_SIZE": ("page_size", parse_int_env),
    "MC_SEARCH_DEBOUNCE_MS": ("search_debounce_ms", parse_int_env),
    "MC_STRICT_CONTRACTS": ("strict_contracts", parse_bool_env),
}


def load_settings(environ: Mapping[str, str] | None = None) -> DashboardSettings:
    """Build settings from MC_* environment variables.

    Unset variables keep their defaults; values that are set but cannot be
    parsed or validated raise ConfigurationError.
    """
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for env_key, (field, parser) in _ENV_FIELDS.items():
        raw = env.get(env_key)
        if raw is None:
            continue
        parsed = parser(raw)
        if parsed is None and field != "api_token":
            raise ConfigurationError(
                f"Invalid value for {env_key}",
                context={"variable": env_key, "value": raw},
            )
        values[field] = parsed
    try:
        return DashboardSettings(**values)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid dashboard settings",
            context={"errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc
