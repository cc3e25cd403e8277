"""Table view model assembly (filter -> sort -> paginate -> assemble).

`compute_view` is the single call a list view makes on every state change.
It keeps no state: filter text, sort directive and pagination cursor are
passed in each time and a fresh immutable `TableViewModel` comes back.

Design:
 - Each stage lives in `gui.services` as a pure function and is testable alone.
 - Cells are produced by the column's render transform; the record reference
   travels with its cells so row actions can target the right record.
 - Rendered cell values are opaque here (text, badge descriptor, RowAction ...).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple

from gui.services.pagination import PaginationResult, PaginationState, paginate
from gui.services.table_filter import apply_column_filters, filter_rows
from gui.services.table_schema import ColumnDescriptor, resolve_field, schema_keys
from gui.services.table_sort import SortDirective, sort_rows

__all__ = [
    "TableRow",
    "PaginationInfo",
    "TableViewModel",
    "render_cell",
    "assemble",
    "compute_view",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableRow:
    record: Any
    cells: Tuple[Any, ...]


@dataclass(frozen=True)
class PaginationInfo:
    current_page: int
    total_pages: int
    total_items: int = 0
    start_item: int = 0
    end_item: int = 0

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


@dataclass(frozen=True)
class TableViewModel:
    headers: Tuple[ColumnDescriptor, ...]
    rows: Tuple[TableRow, ...]
    pagination: PaginationInfo

    def header_labels(self) -> list[str]:
        return [h.label for h in self.headers]

    def records(self) -> list[Any]:
        return [r.record for r in self.rows]

    def summary_text(self) -> str:
        p = self.pagination
        if p.total_items == 0:
            return "No results"
        if not self.rows:
            return f"No rows on page {p.current_page} ({p.total_items} results)"
        return f"Showing {p.start_item} to {p.end_item} of {p.total_items} results"


def render_cell(col: ColumnDescriptor, record: Any) -> Any:
    if col.render is not None:
        return col.render(record)
    value = resolve_field(record, col.key)
    return "" if value is None else str(value)


def assemble(
    columns: Sequence[ColumnDescriptor], rows: Iterable[Any], pagination: PaginationResult
) -> TableViewModel:
    headers = tuple(columns)
    table_rows = tuple(
        TableRow(record=r, cells=tuple(render_cell(c, r) for c in headers)) for r in rows
    )
    info = PaginationInfo(
        current_page=pagination.current_page,
        total_pages=pagination.total_pages,
        total_items=pagination.total_items,
        start_item=pagination.start_item,
        end_item=pagination.end_item,
    )
    return TableViewModel(headers=headers, rows=table_rows, pagination=info)


def compute_view(
    dataset: Iterable[Any],
    schema: Sequence[ColumnDescriptor],
    filter_text: str = "",
    sort_directive: Optional[SortDirective] = None,
    pagination_state: PaginationState | None = None,
    *,
    searchable_fields: Sequence[str] | None = None,
    column_filters: Mapping[str, Any] | None = None,
) -> TableViewModel:
    """Run the full pipeline and return the view model for one render cycle.

    ``searchable_fields`` defaults to every column key of ``schema``.
    Errors from any stage propagate; nothing partial is returned.
    """
    state = pagination_state or PaginationState()
    fields = list(searchable_fields) if searchable_fields is not None else schema_keys(schema)
    rows = apply_column_filters(dataset, column_filters)
    rows = filter_rows(rows, filter_text, fields)
    rows = sort_rows(rows, sort_directive)
    page = paginate(rows, state)
    log.debug(
        "computed view: %d matching, page %d/%d, %d visible",
        page.total_items,
        page.current_page,
        page.total_pages,
        len(page.rows),
    )
    return assemble(schema, page.rows, page)
