"""Column schema builder for list views.

A schema is an ordered tuple of `ColumnDescriptor` objects. Declaration order
is significant: it fixes both header order and per-row cell order.

Usage:
    schema = build_schema([
        column("name", "Name", sortable=True),
        column("email", "E-mail"),
        column("id", "Actions", render=lambda u: RowAction("reactivate", "Reactivate")),
    ])

Field accessors are plain string keys. Mappings resolve by item lookup, any
other record by attribute lookup; dotted paths walk nested values.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Tuple, Union

from .table_errors import SchemaError

__all__ = [
    "RenderFunc",
    "ColumnDeclaration",
    "ColumnDescriptor",
    "column",
    "build_schema",
    "resolve_field",
    "schema_keys",
]

RenderFunc = Callable[[Any], Any]


@dataclass(frozen=True)
class ColumnDeclaration:
    key: str
    label: str
    render: Optional[RenderFunc] = None
    sortable: bool = False


@dataclass(frozen=True)
class ColumnDescriptor:
    """Validated column entry of a schema."""

    key: str
    label: str
    render: Optional[RenderFunc] = None
    sortable: bool = False


def column(
    key: str, label: str, *, render: Optional[RenderFunc] = None, sortable: bool = False
) -> ColumnDeclaration:
    return ColumnDeclaration(key=key, label=label, render=render, sortable=sortable)


def resolve_field(record: Any, key: str) -> Any:
    """Return the value at ``key`` on ``record`` or None when any segment is missing."""
    value = record
    for part in key.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


def _declared_fields(record_type: type) -> set[str] | None:
    if dataclasses.is_dataclass(record_type):
        return {f.name for f in dataclasses.fields(record_type)}
    fields: set[str] = set()
    for klass in getattr(record_type, "__mro__", (record_type,)):
        fields.update(getattr(klass, "__annotations__", {}))
    return fields or None


def _coerce(decl: Union[ColumnDeclaration, Mapping[str, Any]], position: int) -> ColumnDeclaration:
    if isinstance(decl, ColumnDeclaration):
        return decl
    if isinstance(decl, Mapping):
        unknown = set(decl) - {"key", "label", "render", "sortable"}
        if unknown:
            raise SchemaError(
                f"Column #{position} has unknown attribute(s): {', '.join(sorted(unknown))}"
            )
        return ColumnDeclaration(
            key=decl.get("key"),  # type: ignore[arg-type]
            label=decl.get("label"),  # type: ignore[arg-type]
            render=decl.get("render"),
            sortable=bool(decl.get("sortable", False)),
        )
    raise SchemaError(f"Column #{position} must be a ColumnDeclaration or mapping, got {decl!r}")


def build_schema(
    declarations: Iterable[Union[ColumnDeclaration, Mapping[str, Any]]],
    *,
    record_type: type | None = None,
) -> Tuple[ColumnDescriptor, ...]:
    """Validate column declarations and return them as an ordered schema.

    Args:
        declarations: columns in display order.
        record_type: optional record class (dataclass or annotated class). When
            given, every key's first path segment must be one of its fields.

    Raises:
        SchemaError: duplicate, empty or unresolvable key, non-string label,
            non-callable render transform.
    """
    known_fields = _declared_fields(record_type) if record_type is not None else None
    seen: set[str] = set()
    schema: list[ColumnDescriptor] = []
    for position, raw in enumerate(declarations):
        decl = _coerce(raw, position)
        if not isinstance(decl.key, str) or not decl.key.strip():
            raise SchemaError(f"Column #{position} has an empty or non-string key: {decl.key!r}")
        if decl.key in seen:
            raise SchemaError(f"Duplicate column key '{decl.key}'")
        if not isinstance(decl.label, str):
            raise SchemaError(f"Column '{decl.key}' label must be a string")
        if decl.render is not None and not callable(decl.render):
            raise SchemaError(f"Column '{decl.key}' render transform is not callable")
        if known_fields is not None and decl.key.split(".")[0] not in known_fields:
            raise SchemaError(
                f"Column key '{decl.key}' does not resolve against {record_type.__name__}"
            )
        seen.add(decl.key)
        schema.append(
            ColumnDescriptor(
                key=decl.key, label=decl.label, render=decl.render, sortable=bool(decl.sortable)
            )
        )
    return tuple(schema)


def schema_keys(schema: Sequence[ColumnDescriptor]) -> list[str]:
    return [c.key for c in schema]
