"""Single-key sorting for tabular view models.

`sort_rows` orders records by one field using the natural ordering of its
values. Sorting is stable in both directions: descending passes
``reverse=True`` to ``sorted`` which inverts the comparison while keeping
equal records in their incoming order.

`next_sort_directive` implements the header-click cycle used by the list
views: ascending -> descending -> none -> ascending on the same key.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Real
from operator import itemgetter
from typing import Any, Iterable, List, Optional, Tuple, TypeVar

from .table_schema import resolve_field

__all__ = ["SortDirection", "SortDirective", "sort_rows", "next_sort_directive"]

T = TypeVar("T")


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"
    NONE = "none"


@dataclass(frozen=True)
class SortDirective:
    key: str
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def active(self) -> bool:
        return self.direction is not SortDirection.NONE


def _mixed_key(value: Any) -> Tuple[int, Any]:
    # Numbers, then strings, then everything else by text
    if isinstance(value, Real):
        return (0, value)
    if isinstance(value, str):
        return (1, value)
    return (2, str(value))


def sort_rows(dataset: Iterable[T], directive: Optional[SortDirective]) -> List[T]:
    rows = list(dataset)
    if directive is None or not directive.active:
        return rows
    present: List[Tuple[Any, T]] = []
    missing: List[T] = []
    for r in rows:
        value = resolve_field(r, directive.key)
        # NaN compares false both ways; rank it with missing values
        if value is None or (isinstance(value, float) and value != value):
            missing.append(r)
        else:
            present.append((value, r))
    reverse = directive.direction is SortDirection.DESCENDING
    try:
        ordered = sorted(present, key=itemgetter(0), reverse=reverse)
    except TypeError:
        # Heterogeneous column; fall back to a ranked key
        ordered = sorted(present, key=lambda p: _mixed_key(p[0]), reverse=reverse)
    # Missing values trail in both directions
    return [r for _, r in ordered] + missing


def next_sort_directive(current: Optional[SortDirective], key: str) -> SortDirective:
    """Return the directive following a sort request on ``key``.

    A request on a different key (or with no current directive) always starts
    at ascending; the directive is replaced wholesale, never merged.
    """
    if current is None or current.key != key:
        return SortDirective(key, SortDirection.ASCENDING)
    if current.direction is SortDirection.ASCENDING:
        return SortDirective(key, SortDirection.DESCENDING)
    if current.direction is SortDirection.DESCENDING:
        return SortDirective(key, SortDirection.NONE)
    return SortDirective(key, SortDirection.ASCENDING)
