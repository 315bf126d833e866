"""Tests for table and filter data types."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from mc_gui.models import (
    ColumnDefinition,
    FilterChoice,
    FilterOption,
    PaginationMetadata,
    SortState,
)

pytestmark = pytest.mark.unit_gui


@dataclass
class Payment:
    reference: str
    amount: int


def test_column_reads_mapping_key() -> None:
    column = ColumnDefinition(key="name", header="Name")
    assert column.value_for({"name": "Jane"}) == "Jane"
    assert column.value_for({}) is None


def test_column_reads_attribute() -> None:
    column = ColumnDefinition(key="amount", header="Amount")
    assert column.value_for(Payment("ref-1", 300)) == 300


def test_column_accessor_wins_over_key() -> None:
    column = ColumnDefinition(
        key="agent", header="Agent", accessor=lambda row: row["agent"]["name"]
    )
    assert column.value_for({"agent": {"name": "Otieno"}}) == "Otieno"


def test_default_sort_state_is_inactive() -> None:
    state = SortState()
    assert state.column is None
    assert state.direction == "asc"
    assert state.is_active is False


def test_pagination_indices() -> None:
    meta = PaginationMetadata(total=25, page=3, limit=10, pages=3)
    assert meta.first_index == 21
    assert meta.last_index == 25


def test_pagination_for_total_computes_pages() -> None:
    assert PaginationMetadata.for_total(25, 1, 10).pages == 3
    assert PaginationMetadata.for_total(0, 1, 25).pages == 0


@pytest.mark.parametrize(
    "fields",
    [
        {"total": -1, "page": 1, "limit": 10, "pages": 0},
        {"total": 10, "page": 0, "limit": 10, "pages": 1},
        {"total": 10, "page": 1, "limit": 0, "pages": 1},
        {"total": 25, "page": 1, "limit": 10, "pages": 2},
        {"total": 25, "page": 4, "limit": 10, "pages": 3},
    ],
)
def test_pagination_rejects_contract_violations(fields: dict[str, int]) -> None:
    with pytest.raises(ValidationError):
        PaginationMetadata(**fields)


def test_empty_result_allows_page_one() -> None:
    meta = PaginationMetadata(total=0, page=1, limit=25, pages=0)
    assert meta.pages == 0


def test_filter_option_accepts_known_values_and_blank() -> None:
    option = FilterOption(
        key="kyc_status",
        label="All statuses",
        options=[FilterChoice(value="approved", label="Approved")],
    )
    assert option.accepts("approved") is True
    assert option.accepts("") is True
    assert option.accepts("flagged") is False
