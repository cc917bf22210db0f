from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

Accessor = Callable[[Any], Any]
Renderer = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class Column:
    key: str
    header: str
    sortable: bool = True
    searchable: bool = True
    render: Renderer | None = None
    accessor: Accessor | None = None


def columns_by_key(columns: Iterable[Column]) -> dict[str, Column]:
    return {column.key: column for column in columns}


def searchable_columns(columns: Iterable[Column]) -> list[Column]:
    return [column for column in columns if column.searchable]
