"""ViewModel for the search and filter bar."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping

from PySide6.QtCore import QObject, Signal

from mc_common.errors import FilterContractError
from mc_gui.models import NO_FILTER, FilterOption
from mc_gui.utils.debounce import DebounceTimer

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 300


class FilterViewModel(QObject):
    """ViewModel coordinating free-text search and discrete filters.

    Keystrokes update ``raw_search`` at once and are committed through
    ``search_changed`` only after ``debounce_ms`` without further input.
    Filter selections are merged and reported immediately.
    """

    # Signals
    search_changed = Signal(str)  # committed search text
    filter_changed = Signal(dict)  # full merged filter mapping
    filters_cleared = Signal()
    values_changed = Signal()  # raw search or filter values changed

    def __init__(
        self,
        filters: Iterable[FilterOption] = (),
        filter_values: Mapping[str, str] | None = None,
        *,
        search_value: str = "",
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        on_export: Callable[[], None] | None = None,
        strict: bool = True,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._filters: dict[str, FilterOption] = {f.key: f for f in filters}
        self._strict = strict

        if filter_values is None:
            self._values = {key: NO_FILTER for key in self._filters}
        else:
            missing = [key for key in self._filters if key not in filter_values]
            if missing:
                raise FilterContractError(
                    "Filter values missing for declared filters",
                    context={"missing": missing},
                )
            self._values = dict(filter_values)

        self._raw = search_value
        self._committed = search_value
        self._on_export = on_export
        self._torn_down = False

        self._debounce = DebounceTimer(debounce_ms, self)
        self._debounce.fired.connect(self._commit_search)

    @property
    def filters(self) -> list[FilterOption]:
        return list(self._filters.values())

    @property
    def filter_values(self) -> dict[str, str]:
        """Copy of the current filter mapping."""
        return dict(self._values)

    @property
    def raw_search(self) -> str:
        """Search text as typed, updated on every keystroke."""
        return self._raw

    @property
    def committed_search(self) -> str:
        """Search text last delivered to the host."""
        return self._committed

    @property
    def debounce_ms(self) -> int:
        return self._debounce.interval_ms

    @property
    def search_pending(self) -> bool:
        return self._debounce.is_pending

    @property
    def has_active_filters(self) -> bool:
        """True when any discrete filter is set; search text does not count."""
        return any(value != NO_FILTER for value in self._values.values())

    @property
    def can_clear(self) -> bool:
        return self.has_active_filters or self._raw != ""

    @property
    def export_available(self) -> bool:
        return self._on_export is not None

    def on_search_keystroke(self, text: str) -> None:
        """Record a keystroke and restart the debounce window."""
        if self._torn_down:
            logger.debug("Ignoring keystroke after teardown")
            return
        self._raw = text
        self._debounce.schedule(text)
        self.values_changed.emit()

    def _commit_search(self, text: str) -> None:
        self._committed = text
        logger.debug("Search committed: %r", text)
        self.search_changed.emit(text)

    def on_filter_select(self, key: str, value: str) -> None:
        """Merge one filter selection and notify the host immediately."""
        option = self._filters.get(key)
        if option is None:
            raise FilterContractError(
                f"Unknown filter '{key}'", context={"filters": list(self._filters)}
            )
        if self._strict and not option.accepts(value):
            raise FilterContractError(
                f"Value '{value}' is not an option of filter '{key}'",
                context={"options": [opt.value for opt in option.options]},
            )
        self._values = {**self._values, key: value}
        self.values_changed.emit()
        self.filter_changed.emit(self.filter_values)

    def set_filter_values(self, values: Mapping[str, str]) -> None:
        """Apply filter values pushed by the host without notifying it back."""
        unknown = [key for key in values if key not in self._filters]
        if unknown:
            raise FilterContractError(
                "Filter values reference undeclared filters",
                context={"unknown": unknown},
            )
        self._values = {**self._values, **values}
        self.values_changed.emit()

    def clear_all(self) -> None:
        """Reset search and filters at once, bypassing the debounce window."""
        self._debounce.cancel()
        self._raw = ""
        self._committed = ""
        self._values = {key: NO_FILTER for key in self._values}
        self.values_changed.emit()
        self.filters_cleared.emit()

    def set_export_handler(self, handler: Callable[[], None] | None) -> None:
        self._on_export = handler

    def request_export(self) -> None:
        if self._on_export is None:
            return
        self._on_export()

    def teardown(self) -> None:
        """Cancel any pending commit; the consumer is going away."""
        if self._debounce.cancel():
            logger.debug("Dropped pending search on teardown")
        self._torn_down = True
