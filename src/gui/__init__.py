"""Admin list views public API.

Curated, intentionally small surface for callers (views, tests) to drive the
tabular view engine without depending on deep internal module paths.

Design Principles:
- Engine entry points are pure functions; callers own all UI state.
- Avoid side-effect heavy imports (no PyQt import, no QApplication creation).
  Widgets live under `gui.views` and are imported explicitly.
"""

from __future__ import annotations

from .services.table_errors import (  # noqa: F401
    TableEngineError,
    SchemaError,
    ConfigError,
)
from .services.table_schema import (  # noqa: F401
    ColumnDeclaration,
    ColumnDescriptor,
    build_schema,
    column,
)
from .services.table_sort import (  # noqa: F401
    SortDirection,
    SortDirective,
    next_sort_directive,
)
from .services.pagination import PaginationState, clamp_page  # noqa: F401
from .viewmodels.table_viewmodel import (  # noqa: F401
    PaginationInfo,
    TableRow,
    TableViewModel,
    compute_view,
)

__all__ = [
    "TableEngineError",
    "SchemaError",
    "ConfigError",
    "ColumnDeclaration",
    "ColumnDescriptor",
    "build_schema",
    "column",
    "SortDirection",
    "SortDirective",
    "next_sort_directive",
    "PaginationState",
    "clamp_page",
    "PaginationInfo",
    "TableRow",
    "TableViewModel",
    "compute_view",
]
