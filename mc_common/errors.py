"""Shared error taxonomy for microcover-admin."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class MCError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class TableContractError(MCError):
    """Caller supplied table data that breaks the table contract."""


class FilterContractError(MCError):
    """Caller supplied filter definitions or values that do not match."""


class BackendRequestError(MCError):
    """Failure talking to the REST backend or decoding its payload."""

    @property
    def status(self) -> int | None:
        """HTTP status of the failed response, if one was received."""
        status = self.context.get("status")
        return status if isinstance(status, int) else None

    @property
    def retryable(self) -> bool:
        """5xx responses and connection failures may succeed on retry."""
        if self.status is not None:
            return self.status >= 500
        return "reason" in self.context


class ConfigurationError(MCError):
    """Failure due to invalid configuration."""


T = TypeVar("T", bound=MCError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed MCError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: MCError) -> dict[str, Any]:
    """Convert an MCError to a flat payload for status displays and logs."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
