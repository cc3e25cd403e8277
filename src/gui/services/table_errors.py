"""Error taxonomy for the tabular view engine.

Both errors are deterministic input-validation failures: they are raised
synchronously to the caller and never retried.
"""

from __future__ import annotations

__all__ = ["TableEngineError", "SchemaError", "ConfigError"]


class TableEngineError(Exception):
    """Base class for errors raised by the table engine."""


class SchemaError(TableEngineError):
    """Raised when a column schema cannot be built (duplicate or unresolvable key)."""


class ConfigError(TableEngineError):
    """Raised for invalid pagination configuration (non-positive page size or page)."""
