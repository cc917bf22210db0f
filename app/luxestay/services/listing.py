from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from fastapi import Query
from pydantic import BaseModel

from app.luxestay.core.config import settings
from app.luxestay.core.logging import log_json
from shared.data_table import (
    UNSORTED,
    Column,
    SortDirection,
    SortState,
    apply_filters,
    paginate,
    resolve_path,
    search_text,
    sort_rows,
    total_pages,
)

logger = logging.getLogger("luxestay.listing")


@dataclass(frozen=True)
class ListParams:
    page: int = 1
    page_size: int = settings.DEFAULT_PAGE_SIZE
    search: str | None = None
    sort_by: str | None = None
    sort_order: Literal["asc", "desc"] = "asc"

    @property
    def sort(self) -> SortState:
        if not self.sort_by:
            return UNSORTED
        return SortState(column=self.sort_by, direction=SortDirection(self.sort_order))


def list_params(
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize"),
    search: str | None = Query(default=None),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query(default="asc", alias="sortOrder"),
) -> ListParams:
    return ListParams(page=page, page_size=page_size, search=search, sort_by=sort_by, sort_order=sort_order)


def match_exact(rows: Iterable[dict[str, Any]], filters: Mapping[str, str | None]) -> list[dict[str, Any]]:
    active = {key: value.casefold() for key, value in filters.items() if value}
    return [
        row
        for row in rows
        if all(search_text(resolve_path(row, key)) == value for key, value in active.items())
    ]


def build_listing(
    resource: str,
    records: Iterable[BaseModel],
    columns: Sequence[Column],
    params: ListParams,
    *,
    exact_filters: Mapping[str, str | None] | None = None,
) -> dict[str, Any]:
    rows = [record.model_dump(by_alias=True) for record in records]
    if exact_filters:
        rows = match_exact(rows, exact_filters)
    filtered = apply_filters(rows, columns, params.search or "")
    ordered = sort_rows(filtered, params.sort, columns)
    items = paginate(ordered, params.page, params.page_size)
    log_json(
        logger,
        {
            "event": "listing",
            "resource": resource,
            "search": params.search,
            "sort_by": params.sort_by,
            "sort_order": params.sort_order,
            "page": params.page,
            "page_size": params.page_size,
            "total_items": len(ordered),
        },
    )
    return {
        "items": items,
        "totalItems": len(ordered),
        "totalPages": total_pages(len(ordered), params.page_size),
        "currentPage": params.page,
        "pageSize": params.page_size,
    }
