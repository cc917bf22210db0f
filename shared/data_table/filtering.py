from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from shared.data_table.columns import Column, columns_by_key, searchable_columns
from shared.data_table.values import column_value, resolve_path, search_text

T = TypeVar("T")


def matches_global_search(row: Any, columns: Iterable[Column], needle: str) -> bool:
    return any(needle in search_text(column_value(row, column)) for column in columns)


def apply_filters(
    rows: Sequence[T],
    columns: Sequence[Column],
    global_search: str = "",
    column_filters: Mapping[str, str] | None = None,
) -> list[T]:
    """Keep rows matching the global search and every active column filter.

    Relative order of the surviving rows is preserved and the input is never
    modified. Filter keys that are not in ``columns`` are resolved as paths.
    """
    result = list(rows)

    if global_search:
        needle = global_search.casefold()
        targets = searchable_columns(columns)
        result = [row for row in result if matches_global_search(row, targets, needle)]

    known = columns_by_key(columns)
    for key, raw_value in (column_filters or {}).items():
        if not raw_value:
            continue
        needle = raw_value.casefold()
        column = known.get(key)
        if column is not None:
            result = [row for row in result if needle in search_text(column_value(row, column))]
        else:
            result = [row for row in result if needle in search_text(resolve_path(row, key))]

    return result
