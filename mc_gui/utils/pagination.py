"""Compressed page-number rendering for the pagination bar."""

from __future__ import annotations

from typing import Final

PAGE_ELLIPSIS: Final[str] = "…"

PageEntry = int | str


def visible_pages(current: int, pages: int) -> list[int]:
    """Return the first page, the last page and the neighbours of ``current``."""
    candidates = {1, pages, current - 1, current, current + 1}
    return sorted(page for page in candidates if 1 <= page <= pages)


def page_entries(current: int, pages: int) -> list[PageEntry]:
    """Return page numbers with each gap collapsed into one ellipsis.

    >>> page_entries(5, 10)
    [1, '…', 4, 5, 6, '…', 10]
    """
    entries: list[PageEntry] = []
    previous: int | None = None
    for page in visible_pages(current, pages):
        if previous is not None and page != previous + 1:
            entries.append(PAGE_ELLIPSIS)
        entries.append(page)
        previous = page
    return entries
