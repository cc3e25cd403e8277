"""Pagination stage for list views.

Slices an ordered dataset into one page and derives the page count. Pages
are 1-indexed. A page past the end yields an empty window; keeping the page
inside ``[1, total_pages]`` is the caller's job (see `clamp_page`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple

from config.settings import DEFAULT_PAGE_SIZE

from .table_errors import ConfigError

__all__ = ["PaginationState", "PaginationResult", "paginate", "total_pages_for", "clamp_page"]


@dataclass(frozen=True)
class PaginationState:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class PaginationResult:
    rows: Tuple[Any, ...]
    total_pages: int
    current_page: int
    page_size: int
    total_items: int

    @property
    def start_item(self) -> int:
        """1-based position of the first row in the window (0 when empty)."""
        if not self.rows:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def end_item(self) -> int:
        if not self.rows:
            return 0
        return self.start_item + len(self.rows) - 1

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def page_numbers(self) -> list[int]:
        return list(range(1, self.total_pages + 1))


def total_pages_for(count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ConfigError(f"page_size must be positive, got {page_size}")
    return -(-count // page_size)


def clamp_page(page: int, total_pages: int) -> int:
    """Return ``page`` forced into ``[1, total_pages]`` (1 when there are no pages)."""
    return min(max(page, 1), max(total_pages, 1))


def paginate(dataset: Iterable[Any], state: PaginationState) -> PaginationResult:
    """Return the rows of ``state.page`` plus page metadata.

    Raises:
        ConfigError: ``page_size`` or ``page`` is not a positive integer.
    """
    if state.page < 1:
        raise ConfigError(f"page must be a positive integer, got {state.page}")
    rows: Sequence[Any] = dataset if isinstance(dataset, (list, tuple)) else list(dataset)
    total = total_pages_for(len(rows), state.page_size)
    start = (state.page - 1) * state.page_size
    window = tuple(rows[start : start + state.page_size])
    return PaginationResult(
        rows=window,
        total_pages=total,
        current_page=state.page,
        page_size=state.page_size,
        total_items=len(rows),
    )
