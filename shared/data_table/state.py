from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from shared.data_table.pagination import DEFAULT_PAGE_SIZE, DEFAULT_PAGE_SIZE_OPTIONS, clamp_page
from shared.data_table.sorting import UNSORTED, SortState, next_sort


@dataclass(frozen=True)
class TableState:
    global_search: str = ""
    column_filters: dict[str, str] = field(default_factory=dict)
    sort: SortState = UNSORTED
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    page_size_options: tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS
    show_filters: bool = False


@dataclass(frozen=True)
class SetGlobalSearch:
    text: str


@dataclass(frozen=True)
class SetColumnFilter:
    key: str
    value: str


@dataclass(frozen=True)
class ToggleSort:
    column: str


@dataclass(frozen=True)
class GotoPage:
    page: int


@dataclass(frozen=True)
class FirstPage:
    pass


@dataclass(frozen=True)
class PrevPage:
    pass


@dataclass(frozen=True)
class NextPage:
    pass


@dataclass(frozen=True)
class LastPage:
    pass


@dataclass(frozen=True)
class SetPageSize:
    page_size: int


@dataclass(frozen=True)
class ToggleFilters:
    pass


@dataclass(frozen=True)
class ResetFilters:
    """Clear search and column filters, keep the active sort."""


@dataclass(frozen=True)
class ResetView:
    """Clear search, column filters and sort (the dashboard "Clear" button)."""


TableAction = Union[
    SetGlobalSearch,
    SetColumnFilter,
    ToggleSort,
    GotoPage,
    FirstPage,
    PrevPage,
    NextPage,
    LastPage,
    SetPageSize,
    ToggleFilters,
    ResetFilters,
    ResetView,
]


def initial_state(
    page_size: int = DEFAULT_PAGE_SIZE,
    page_size_options: tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS,
) -> TableState:
    return TableState(page_size=max(1, page_size), page_size_options=tuple(page_size_options))


def has_active_filters(state: TableState) -> bool:
    return bool(state.global_search) or any(state.column_filters.values())


def reduce(state: TableState, action: TableAction, *, total_pages: int = 0) -> TableState:
    """Pure transition function for table state.

    ``total_pages`` is the page count of the currently filtered rows and is
    only used to clamp page navigation.
    """
    if isinstance(action, SetGlobalSearch):
        return replace(state, global_search=action.text, page=1)
    if isinstance(action, SetColumnFilter):
        filters = dict(state.column_filters)
        if action.value:
            filters[action.key] = action.value
        else:
            filters.pop(action.key, None)
        return replace(state, column_filters=filters, page=1)
    if isinstance(action, ToggleSort):
        return replace(state, sort=next_sort(state.sort, action.column))
    if isinstance(action, GotoPage):
        return replace(state, page=clamp_page(action.page, total_pages))
    if isinstance(action, FirstPage):
        return replace(state, page=1)
    if isinstance(action, PrevPage):
        return replace(state, page=clamp_page(state.page - 1, total_pages))
    if isinstance(action, NextPage):
        return replace(state, page=clamp_page(state.page + 1, total_pages))
    if isinstance(action, LastPage):
        return replace(state, page=clamp_page(total_pages, total_pages))
    if isinstance(action, SetPageSize):
        if action.page_size < 1:
            return state
        return replace(state, page_size=action.page_size, page=1)
    if isinstance(action, ToggleFilters):
        return replace(state, show_filters=not state.show_filters)
    if isinstance(action, ResetFilters):
        return replace(state, global_search="", column_filters={}, page=1)
    if isinstance(action, ResetView):
        return replace(state, global_search="", column_filters={}, sort=UNSORTED, page=1)
    return state
