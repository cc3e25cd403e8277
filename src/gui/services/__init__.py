"""Service layer: the pure stages of the tabular view engine.

Responsibilities:
 - Column schema construction and validation (`table_schema`)
 - Global text and column filtering (`table_filter`)
 - Stable single-key sorting and the tri-state sort toggle (`table_sort`)
 - Page slicing and page count (`pagination`)
 - Runtime list settings (`settings_service`)
"""

from .table_errors import TableEngineError, SchemaError, ConfigError  # noqa: F401
from .table_schema import build_schema, column, resolve_field  # noqa: F401
from .table_filter import filter_rows, apply_column_filters  # noqa: F401
from .table_sort import SortDirection, SortDirective, sort_rows, next_sort_directive  # noqa: F401
from .pagination import PaginationState, PaginationResult, paginate, clamp_page  # noqa: F401

__all__ = [
    "TableEngineError",
    "SchemaError",
    "ConfigError",
    "build_schema",
    "column",
    "resolve_field",
    "filter_rows",
    "apply_column_filters",
    "SortDirection",
    "SortDirective",
    "sort_rows",
    "next_sort_directive",
    "PaginationState",
    "PaginationResult",
    "paginate",
    "clamp_page",
]
