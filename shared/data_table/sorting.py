from __future__ import annotations

import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any, TypeVar

from shared.data_table.columns import Column, columns_by_key
from shared.data_table.values import column_value, resolve_path, value_string

T = TypeVar("T")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
    NONE = "none"


@dataclass(frozen=True)
class SortState:
    column: str | None = None
    direction: SortDirection = SortDirection.NONE

    @property
    def is_active(self) -> bool:
        return self.column is not None and self.direction is not SortDirection.NONE


UNSORTED = SortState()


def next_sort(current: SortState, column: str) -> SortState:
    """Advance the header click cycle: unsorted -> asc -> desc -> unsorted.

    Clicking a column other than the active one always starts it at asc.
    """
    if current.column != column or current.direction is SortDirection.NONE:
        return SortState(column=column, direction=SortDirection.ASC)
    if current.direction is SortDirection.ASC:
        return SortState(column=column, direction=SortDirection.DESC)
    return UNSORTED


def collation_key(text: str) -> tuple[str, str, tuple[int, ...]]:
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    case_marks = tuple(1 if ch.isupper() else 0 for ch in stripped)
    return stripped.casefold(), decomposed.casefold(), case_marks


def compare_text(left: str, right: str) -> int:
    left_key = collation_key(left)
    right_key = collation_key(right)
    if left_key == right_key:
        return 0 if left == right else (-1 if left < right else 1)
    return -1 if left_key < right_key else 1


def compare_values(left: Any, right: Any) -> int:
    """Ascending comparison of two cell values with ``None`` always last."""
    if left is right or left == right:
        return 0
    if left is None:
        return 1
    if right is None:
        return -1
    return _compare_present(left, right)


def _compare_present(left: Any, right: Any) -> int:
    if isinstance(left, str):
        return compare_text(left, right if isinstance(right, str) else value_string(right))
    try:
        return -1 if left < right else 1
    except TypeError:
        return 1


def sort_rows(rows: Sequence[T], sort: SortState, columns: Sequence[Column] = ()) -> list[T]:
    if not sort.is_active:
        return list(rows)

    column = columns_by_key(columns).get(sort.column or "")
    sign = -1 if sort.direction is SortDirection.DESC else 1

    def _value(row: T) -> Any:
        if column is not None:
            return column_value(row, column)
        return resolve_path(row, sort.column or "")

    def _compare(left: tuple[Any, T], right: tuple[Any, T]) -> int:
        left_value, right_value = left[0], right[0]
        result = compare_values(left_value, right_value)
        if left_value is None or right_value is None:
            return result
        return sign * result

    decorated = [(_value(row), row) for row in rows]
    decorated.sort(key=cmp_to_key(_compare))
    return [row for _, row in decorated]
