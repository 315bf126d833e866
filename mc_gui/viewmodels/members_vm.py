"""Members management screen definition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mc_gui.models import ColumnDefinition, FilterChoice, FilterOption
from mc_gui.utils import format_datetime, format_label
from mc_gui.viewmodels.filter_vm import FilterViewModel
from mc_gui.viewmodels.records_vm import RecordsScreenViewModel
from mc_gui.viewmodels.table_vm import TableViewModel

if TYPE_CHECKING:
    from mc_common.config import DashboardSettings
    from mc_gui.services.records_service import RecordsService

KYC_STATUSES = ["pending", "under_review", "approved", "rejected", "flagged"]

MEMBER_COLUMNS: list[ColumnDefinition[dict]] = [
    ColumnDefinition(key="full_name", header="Name", sortable=True),
    ColumnDefinition(key="account_number", header="Account"),
    ColumnDefinition(key="phone", header="Phone"),
    ColumnDefinition(
        key="agent",
        header="Agent",
        accessor=lambda row: (row.get("agent") or {}).get("full_name"),
    ),
    ColumnDefinition(
        key="kyc_status",
        header="KYC Status",
        sortable=True,
        renderer=lambda value, _row: format_label(value),
        style_class="status",
    ),
    ColumnDefinition(
        key="created_at",
        header="Registered",
        sortable=True,
        renderer=lambda value, _row: format_datetime(value),
    ),
]

MEMBER_FILTERS = [
    FilterOption(
        key="kyc_status",
        label="All KYC statuses",
        options=tuple(
            FilterChoice(value=status, label=format_label(status))
            for status in KYC_STATUSES
        ),
    ),
]


def build_members_viewmodel(
    service: "RecordsService",
    settings: "DashboardSettings",
) -> RecordsScreenViewModel:
    """Assemble table, filters and host viewmodels for the members screen."""
    table = TableViewModel(
        MEMBER_COLUMNS,
        get_id=lambda row: str(row["id"]),
        selectable=True,
        empty_message="No members found",
        strict=settings.strict_contracts,
    )
    filters = FilterViewModel(
        MEMBER_FILTERS,
        debounce_ms=settings.search_debounce_ms,
        strict=settings.strict_contracts,
    )
    return RecordsScreenViewModel(
        "Members",
        service,
        table,
        filters,
        page_size=settings.page_size,
    )
