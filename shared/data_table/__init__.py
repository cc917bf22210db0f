from .columns import Column
from .filtering import apply_filters
from .pagination import DEFAULT_PAGE_SIZE, DEFAULT_PAGE_SIZE_OPTIONS, clamp_page, paginate, total_pages
from .sorting import UNSORTED, SortDirection, SortState, compare_values, next_sort, sort_rows
from .state import (
    FirstPage,
    GotoPage,
    LastPage,
    NextPage,
    PrevPage,
    ResetFilters,
    ResetView,
    SetColumnFilter,
    SetGlobalSearch,
    SetPageSize,
    TableAction,
    TableState,
    ToggleFilters,
    ToggleSort,
    has_active_filters,
    initial_state,
    reduce,
)
from .table import DataTable, TableView
from .values import column_value, resolve_path, search_text, value_string

__all__ = [
    "Column",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_PAGE_SIZE_OPTIONS",
    "DataTable",
    "FirstPage",
    "GotoPage",
    "LastPage",
    "NextPage",
    "PrevPage",
    "ResetFilters",
    "ResetView",
    "SetColumnFilter",
    "SetGlobalSearch",
    "SetPageSize",
    "SortDirection",
    "SortState",
    "TableAction",
    "TableState",
    "TableView",
    "ToggleFilters",
    "ToggleSort",
    "UNSORTED",
    "apply_filters",
    "clamp_page",
    "column_value",
    "compare_values",
    "has_active_filters",
    "initial_state",
    "next_sort",
    "paginate",
    "reduce",
    "resolve_path",
    "search_text",
    "sort_rows",
    "total_pages",
    "value_string",
]
