"""Filter definitions for the search/filter bar."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

NO_FILTER = ""


class FilterChoice(BaseModel):
    """A selectable value of a filter dimension."""

    value: str
    label: str

    model_config = ConfigDict(frozen=True)


class FilterOption(BaseModel):
    """A filter dimension rendered as a drop-down."""

    key: str = Field(min_length=1)
    label: str
    options: tuple[FilterChoice, ...] = ()

    model_config = ConfigDict(frozen=True)

    def accepts(self, value: str) -> bool:
        """Whether ``value`` is "no filter" or one of the options."""
        return value == NO_FILTER or any(opt.value == value for opt in self.options)
