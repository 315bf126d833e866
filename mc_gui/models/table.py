"""Column, sort and pagination types for the data table."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

RowT = TypeVar("RowT")

SortDirection = Literal["asc", "desc"]

# Raw cell values arrive untyped from the backend.
CellValue = str | int | float | bool | None


@dataclass(frozen=True)
class ColumnDefinition(Generic[RowT]):
    """Describe one table column.

    ``key`` identifies the column in sort state and, when no accessor is
    given, is also used to read the value from the row (mapping key first,
    then attribute).
    """

    key: str
    header: str
    accessor: Callable[[RowT], Any] | None = None
    sortable: bool = False
    renderer: Callable[[Any, RowT], Any] | None = None
    style_class: str | None = None

    def value_for(self, row: RowT) -> Any:
        """Extract the raw cell value for this column."""
        if self.accessor is not None:
            return self.accessor(row)
        if isinstance(row, dict):
            return row.get(self.key)
        return getattr(row, self.key, None)


@dataclass(frozen=True)
class SortState:
    """Requested sort; rows are never reordered by the table itself."""

    column: str | None = None
    direction: SortDirection = "asc"

    @property
    def is_active(self) -> bool:
        return self.column is not None


class DisplayState(str, Enum):
    """Mutually exclusive rendering states of a table."""

    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"


class PaginationMetadata(BaseModel):
    """Server-reported pagination counts for the current result set."""

    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(gt=0)
    pages: int = Field(ge=0)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="after")
    def _check_consistency(self) -> "PaginationMetadata":
        expected = math.ceil(self.total / self.limit)
        if self.pages != expected:
            raise ValueError(
                f"pages={self.pages} does not match ceil(total/limit)={expected}"
            )
        if self.pages > 0 and self.page > self.pages:
            raise ValueError(f"page {self.page} is outside [1, {self.pages}]")
        return self

    @property
    def first_index(self) -> int:
        """1-based index of the first row on this page."""
        return (self.page - 1) * self.limit + 1

    @property
    def last_index(self) -> int:
        """1-based index of the last row on this page."""
        return min(self.page * self.limit, self.total)

    @classmethod
    def for_total(cls, total: int, page: int, limit: int) -> "PaginationMetadata":
        """Build metadata computing ``pages`` from ``total`` and ``limit``."""
        return cls(total=total, page=page, limit=limit, pages=math.ceil(total / limit))
