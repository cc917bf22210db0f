from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shared.data_table.columns import Column

_MISSING = object()


def resolve_path(row: Any, path: str) -> Any:
    """Resolve a dotted field path such as ``"guest.name"`` against a row.

    Returns ``None`` as soon as a segment is missing instead of raising.
    """
    current = row
    for part in path.split("."):
        if current is None:
            return None
        current = _resolve_segment(current, part)
        if current is _MISSING:
            return None
    return current


def _resolve_segment(current: Any, part: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(part, _MISSING)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        try:
            index = int(part)
        except ValueError:
            return _MISSING
        if -len(current) <= index < len(current):
            return current[index]
        return _MISSING
    return getattr(current, part, _MISSING)


def column_value(row: Any, column: Column) -> Any:
    if column.accessor is not None:
        return column.accessor(row)
    return resolve_path(row, column.key)


def value_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def search_text(value: Any) -> str:
    """Stringify a cell value for case-insensitive substring matching."""
    return value_string(value).casefold()
