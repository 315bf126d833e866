"""Paginated record listing against the REST backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from mc_common.errors import BackendRequestError
from mc_gui.models import NO_FILTER, PaginationMetadata, SortDirection

if TYPE_CHECKING:
    from mc_gui.services.api_client import ApiClient


@dataclass
class RecordQuery:
    """Query parameters a list screen sends to the backend."""

    page: int = 1
    limit: int = 25
    search: str = ""
    filters: dict[str, str] = field(default_factory=dict)
    sort_by: str | None = None
    sort_order: SortDirection = "desc"

    def to_params(self) -> dict[str, Any]:
        """Flatten into query parameters, dropping empty search and filters."""
        params: dict[str, Any] = {"page": self.page, "limit": self.limit}
        if self.search:
            params["search"] = self.search
        for key, value in self.filters.items():
            if value != NO_FILTER:
                params[key] = value
        if self.sort_by:
            params["sort_by"] = self.sort_by
            params["sort_order"] = self.sort_order.upper()
        return params


@dataclass(frozen=True)
class RecordPage:
    """One page of records plus its pagination metadata."""

    rows: list[dict[str, Any]]
    pagination: PaginationMetadata


class RecordsService:
    """Fetch pages of a record collection such as ``/members``."""

    def __init__(
        self,
        client: "ApiClient",
        endpoint: str,
        collection_key: str,
    ) -> None:
        self._client = client
        self._endpoint = endpoint
        self._collection_key = collection_key

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def fetch_page(self, query: RecordQuery) -> RecordPage:
        """Fetch one page; malformed payloads raise BackendRequestError."""
        payload = self._client.get(self._endpoint, query.to_params())
        context = {"endpoint": self._endpoint}
        if not isinstance(payload, dict):
            raise BackendRequestError("Unexpected response payload", context=context)

        rows = payload.get(self._collection_key)
        if not isinstance(rows, list):
            raise BackendRequestError(
                f"Response is missing '{self._collection_key}'", context=context
            )
        try:
            pagination = PaginationMetadata.model_validate(payload.get("pagination"))
        except ValidationError as exc:
            raise BackendRequestError(
                "Response has invalid pagination", context=context, cause=exc
            ) from exc
        return RecordPage(rows=rows, pagination=pagination)
