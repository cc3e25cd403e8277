"""Stateful list ViewModel driving one administrative list view.

Owns the UI state the table engine never stores (filter text, sort
directive, current page, page size, column filters) and re-runs
`compute_view` on every change.

Policies:
 - Page clamping: after each recomputation a page outside
   ``[1, max(total_pages, 1)]`` is clamped and the view recomputed once, so
   a shrinking filter result never leaves the list on a blank page.
 - Failures: a state change whose recomputation raises is not committed;
   the previous state and view model stay in effect.
 - Sorting: header requests cycle ascending -> descending -> none; requests
   for unknown or non-sortable columns are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from config.settings import DEFAULT_PAGE_SIZE
from gui.services.pagination import PaginationState, clamp_page
from gui.services.settings_service import SettingsService
from gui.services.table_errors import TableEngineError
from gui.services.table_schema import ColumnDescriptor
from gui.services.table_sort import SortDirection, SortDirective, next_sort_directive
from gui.viewmodels.table_viewmodel import TableViewModel, compute_view

__all__ = ["ListViewModel", "ListViewState"]

log = logging.getLogger(__name__)

_SORT_GLYPHS = {SortDirection.ASCENDING: "▲", SortDirection.DESCENDING: "▼"}


@dataclass(frozen=True)
class ListViewState:
    filter_text: str = ""
    sort: Optional[SortDirective] = None
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    column_filters: Mapping[str, Any] = field(default_factory=dict)

    def pagination(self) -> PaginationState:
        return PaginationState(page=self.page, page_size=self.page_size)


class ListViewModel:
    def __init__(
        self,
        schema: Sequence[ColumnDescriptor],
        records: Iterable[Any] = (),
        *,
        searchable_fields: Sequence[str] | None = None,
        page_size: int | None = None,
        settings: SettingsService | None = None,
    ):
        self._schema = tuple(schema)
        self._columns: Dict[str, ColumnDescriptor] = {c.key: c for c in self._schema}
        self._records: List[Any] = list(records)
        self._searchable = list(searchable_fields) if searchable_fields is not None else None
        self._settings = settings or SettingsService.instance
        size = page_size if page_size is not None else self._settings.default_page_size
        self._state = ListViewState(page_size=size)
        self._view: TableViewModel | None = None
        self._apply(self._state)

    # Accessors --------------------------------------------------------
    @property
    def state(self) -> ListViewState:
        return self._state

    @property
    def view(self) -> TableViewModel:
        assert self._view is not None
        return self._view

    @property
    def schema(self) -> tuple[ColumnDescriptor, ...]:
        return self._schema

    def summary_text(self) -> str:
        return self.view.summary_text()

    def sort_indicator(self, key: str) -> str:
        sort = self._state.sort
        if sort is None or sort.key != key:
            return ""
        return _SORT_GLYPHS.get(sort.direction, "")

    # State changes ----------------------------------------------------
    def refresh(self) -> TableViewModel:
        return self._apply(self._state)

    def set_records(self, records: Iterable[Any]) -> TableViewModel:
        previous = self._records
        self._records = list(records)
        try:
            return self._apply(self._state)
        except Exception:
            self._records = previous
            raise

    def set_filter_text(self, text: str) -> TableViewModel:
        text = (text or "").strip()
        if text == self._state.filter_text:
            return self.view
        page = 1 if self._settings.reset_page_on_filter_change else self._state.page
        return self._apply(replace(self._state, filter_text=text, page=page))

    def set_column_filter(self, key: str, criterion: Any) -> TableViewModel:
        """Restrict ``key`` to a literal value or predicate; ``None`` clears it."""
        filters = dict(self._state.column_filters)
        if criterion is None:
            filters.pop(key, None)
        else:
            filters[key] = criterion
        return self._apply(replace(self._state, column_filters=filters))

    def request_sort(self, key: str) -> bool:
        col = self._columns.get(key)
        if col is None or not col.sortable:
            log.debug("ignoring sort request for non-sortable column %r", key)
            return False
        self._apply(replace(self._state, sort=next_sort_directive(self._state.sort, key)))
        return True

    def go_to_page(self, page: int) -> TableViewModel:
        return self._apply(replace(self._state, page=page))

    def next_page(self) -> TableViewModel:
        if not self.view.pagination.has_next:
            return self.view
        return self.go_to_page(self._state.page + 1)

    def previous_page(self) -> TableViewModel:
        if not self.view.pagination.has_previous:
            return self.view
        return self.go_to_page(self._state.page - 1)

    def set_page_size(self, page_size: int) -> TableViewModel:
        return self._apply(replace(self._state, page_size=page_size))

    # Internal ---------------------------------------------------------
    def _compute(self, state: ListViewState) -> TableViewModel:
        return compute_view(
            self._records,
            self._schema,
            state.filter_text,
            state.sort,
            state.pagination(),
            searchable_fields=self._searchable,
            column_filters=state.column_filters,
        )

    def _apply(self, state: ListViewState) -> TableViewModel:
        try:
            view = self._compute(state)
            clamped = clamp_page(state.page, view.pagination.total_pages)
            if clamped != state.page:
                log.info(
                    "page %d out of range (%d pages); clamping to %d",
                    state.page,
                    view.pagination.total_pages,
                    clamped,
                )
                state = replace(state, page=clamped)
                view = self._compute(state)
        except TableEngineError as exc:
            log.warning("rejected list state change: %s", exc)
            raise
        self._state = state
        self._view = view
        return view
