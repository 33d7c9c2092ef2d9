"""Paging through the project catalogue with a remembered search query."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .client import Project

ITEMS_PER_PAGE = 7

FetchFunction = Callable[[str, int, int], Sequence[Project]]


@dataclass(frozen=True)
class Page:
    """One fetched page of projects.

    ``focus`` is the index of the card that should receive focus, or None
    when the search bar should be focused instead.
    """

    projects: list[Project]
    offset: int
    number: int
    total_pages: int | None
    focus: int | None = None

    @property
    def label(self) -> str:
        total = "?" if self.total_pages is None else str(self.total_pages)
        return f"Page {self.number} / {total}"


class Pager:
    """Keeps track of the current offset, search query and known page count.

    *fetch* is called as ``fetch(query, limit, offset)`` and returns the
    projects of one page.
    """

    def __init__(self, fetch: FetchFunction, page_size: int = ITEMS_PER_PAGE) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._fetch = fetch
        self.page_size = page_size
        self.query = ""
        self.offset = 0
        self.total_pages: int | None = None
        self.end_of_list_reached = False
        self.is_fetching = False
        self.current_page: Page | None = None

    def fetch_page(self, offset: int, focus_last: bool = False) -> Page | None:
        """Fetch the page starting at *offset*.

        Returns None without fetching when a fetch is already in progress.
        """
        if self.is_fetching:
            return None
        self.is_fetching = True
        try:
            self.offset = offset
            projects = list(self._fetch(self.query, self.page_size, offset))
        finally:
            self.is_fetching = False

        number = offset // self.page_size + 1
        if len(projects) < self.page_size:
            self.end_of_list_reached = True
            self.total_pages = number
        else:
            self.end_of_list_reached = False

        focus = len(projects) - 1 if projects and focus_last else None
        page = Page(
            projects=projects,
            offset=offset,
            number=number,
            total_pages=self.total_pages,
            focus=focus,
        )
        self.current_page = page
        return page

    def next_page(self) -> Page | None:
        """Move one page forward; None when already at the end or busy."""
        if self.is_fetching or self.end_of_list_reached:
            return None
        self.offset += self.page_size
        return self.fetch_page(self.offset, focus_last=False)

    def previous_page(self) -> Page | None:
        """Move one page back, focusing its last card; None on the first page."""
        if self.is_fetching or self.offset == 0:
            return None
        self.offset = max(0, self.offset - self.page_size)
        return self.fetch_page(self.offset, focus_last=True)

    def new_search(self, query: str | None) -> Page | None:
        """Start over from the first page with a new search query."""
        self.query = query or ""
        self.offset = 0
        self.total_pages = None
        return self.fetch_page(self.offset, focus_last=False)

    def page_label(self) -> str:
        """Text such as ``Page 2 / ?`` describing the current position."""
        number = self.offset // self.page_size + 1
        total = "?" if self.total_pages is None else str(self.total_pages)
        return f"Page {number} / {total}"