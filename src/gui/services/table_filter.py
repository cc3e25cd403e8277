"""Filter stage for list views.

Global text filtering keeps a record when ANY searchable string field
contains the filter text, compared case-insensitively. Column filters
restrict individual fields to a literal value or a predicate and run before
the global text filter.

Both functions are stable and never mutate their input.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Mapping, Sequence, TypeVar

from .table_schema import resolve_field

__all__ = ["filter_rows", "apply_column_filters", "record_matches"]

T = TypeVar("T")
ColumnFilter = Any  # literal value or Callable[[value], bool]


def record_matches(record: Any, needle: str, searchable_fields: Sequence[str]) -> bool:
    """Return True if any string-valued searchable field contains ``needle``.

    ``needle`` must already be casefolded.
    """
    for key in searchable_fields:
        value = resolve_field(record, key)
        if isinstance(value, str) and needle in value.casefold():
            return True
    return False


def filter_rows(dataset: Iterable[T], filter_text: str, searchable_fields: Sequence[str]) -> List[T]:
    rows = list(dataset)
    if not filter_text:
        return rows
    needle = filter_text.casefold()
    return [r for r in rows if record_matches(r, needle, searchable_fields)]


def _column_test(criterion: ColumnFilter) -> Callable[[Any], bool]:
    if callable(criterion):
        return criterion
    return lambda value: value == criterion


def apply_column_filters(dataset: Iterable[T], column_filters: Mapping[str, ColumnFilter] | None) -> List[T]:
    rows = list(dataset)
    if not column_filters:
        return rows
    tests = [(key, _column_test(c)) for key, c in column_filters.items() if c is not None]
    if not tests:
        return rows
    return [r for r in rows if all(test(resolve_field(r, key)) for key, test in tests)]
