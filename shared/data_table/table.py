from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from shared.data_table.columns import Column
from shared.data_table.filtering import apply_filters
from shared.data_table.pagination import DEFAULT_PAGE_SIZE, DEFAULT_PAGE_SIZE_OPTIONS, clamp_page, paginate, total_pages
from shared.data_table.sorting import SortState, sort_rows
from shared.data_table.state import (
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
from shared.data_table.values import column_value

RowActions = Callable[[Any], Any]
RowClickHandler = Callable[[Any], None]


@dataclass(frozen=True)
class TableView:
    rows: list[Any]
    filtered_count: int
    total_count: int
    page: int
    total_pages: int
    page_size: int
    sort: SortState
    global_search: str
    column_filters: dict[str, str] = field(default_factory=dict)
    loading: bool = False
    empty_message: str = "No data found"
    has_active_filters: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.loading and not self.rows

    @property
    def summary(self) -> str:
        text = f"Showing {len(self.rows)} of {self.filtered_count} results"
        if self.has_active_filters:
            text += f" (filtered from {self.total_count})"
        return text

    @property
    def can_go_back(self) -> bool:
        return self.page > 1

    @property
    def can_go_forward(self) -> bool:
        return self.page < self.total_pages


class DataTable:
    """Client-side table over an in-memory row list.

    Rows flow through filter -> sort -> paginate every time the view is
    derived. Intermediate results are memoized on the inputs they depend on.
    """

    def __init__(
        self,
        columns: Sequence[Column],
        rows: Iterable[Any] = (),
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_size_options: Sequence[int] = DEFAULT_PAGE_SIZE_OPTIONS,
        empty_message: str = "No data found",
        loading: bool = False,
        actions: RowActions | None = None,
        actions_header: str = "Actions",
        on_row_click: RowClickHandler | None = None,
    ) -> None:
        self.columns = list(columns)
        self.empty_message = empty_message
        self.actions = actions
        self.actions_header = actions_header
        self.on_row_click = on_row_click
        self.loading = loading
        self.state = initial_state(page_size=page_size, page_size_options=tuple(page_size_options))
        self._rows: list[Any] = list(rows)
        self._rows_version = 0
        self._filtered_key: tuple[Any, ...] | None = None
        self._filtered: list[Any] = []
        self._sorted_key: tuple[Any, ...] | None = None
        self._sorted: list[Any] = []

    @property
    def rows(self) -> list[Any]:
        return list(self._rows)

    def set_rows(self, rows: Iterable[Any]) -> TableView:
        self._rows = list(rows)
        self._rows_version += 1
        pages = total_pages(len(self._filtered_rows()), self.state.page_size)
        if clamp_page(self.state.page, pages) != self.state.page:
            self.state = reduce(self.state, GotoPage(self.state.page), total_pages=pages)
        return self.view()

    def set_loading(self, loading: bool) -> TableView:
        self.loading = loading
        return self.view()

    def dispatch(self, action: TableAction) -> TableView:
        pages = total_pages(len(self._filtered_rows()), self.state.page_size)
        self.state = reduce(self.state, action, total_pages=pages)
        return self.view()

    def search(self, text: str) -> TableView:
        return self.dispatch(SetGlobalSearch(text))

    def filter_column(self, key: str, value: str) -> TableView:
        return self.dispatch(SetColumnFilter(key, value))

    def toggle_sort(self, column: str) -> TableView:
        target = next((item for item in self.columns if item.key == column), None)
        if target is not None and not target.sortable:
            return self.view()
        return self.dispatch(ToggleSort(column))

    def goto_page(self, page: int) -> TableView:
        return self.dispatch(GotoPage(page))

    def first_page(self) -> TableView:
        return self.dispatch(FirstPage())

    def prev_page(self) -> TableView:
        return self.dispatch(PrevPage())

    def next_page(self) -> TableView:
        return self.dispatch(NextPage())

    def last_page(self) -> TableView:
        return self.dispatch(LastPage())

    def set_page_size(self, page_size: int) -> TableView:
        return self.dispatch(SetPageSize(page_size))

    def toggle_filters(self) -> TableView:
        return self.dispatch(ToggleFilters())

    def reset_filters(self) -> TableView:
        return self.dispatch(ResetFilters())

    def reset_view(self) -> TableView:
        return self.dispatch(ResetView())

    def sorted_rows(self) -> list[Any]:
        return list(self._sorted_rows())

    def view(self) -> TableView:
        state: TableState = self.state
        active = has_active_filters(state)
        if self.loading:
            return TableView(
                rows=[],
                filtered_count=0,
                total_count=len(self._rows),
                page=state.page,
                total_pages=0,
                page_size=state.page_size,
                sort=state.sort,
                global_search=state.global_search,
                column_filters=dict(state.column_filters),
                loading=True,
                empty_message=self.empty_message,
                has_active_filters=active,
            )

        ordered = self._sorted_rows()
        return TableView(
            rows=paginate(ordered, state.page, state.page_size),
            filtered_count=len(ordered),
            total_count=len(self._rows),
            page=state.page,
            total_pages=total_pages(len(ordered), state.page_size),
            page_size=state.page_size,
            sort=state.sort,
            global_search=state.global_search,
            column_filters=dict(state.column_filters),
            loading=False,
            empty_message=self.empty_message,
            has_active_filters=active,
        )

    def cells(self, row: Any) -> list[Any]:
        values = []
        for column in self.columns:
            value = column_value(row, column)
            values.append(column.render(value, row) if column.render is not None else value)
        return values

    def row_actions(self, row: Any) -> Any:
        if self.actions is None:
            return None
        return self.actions(row)

    def click_row(self, row: Any) -> None:
        if self.on_row_click is not None:
            self.on_row_click(row)

    def _filtered_rows(self) -> list[Any]:
        state = self.state
        key = (self._rows_version, state.global_search, tuple(sorted(state.column_filters.items())))
        if key != self._filtered_key:
            self._filtered = apply_filters(self._rows, self.columns, state.global_search, state.column_filters)
            self._filtered_key = key
        return self._filtered

    def _sorted_rows(self) -> list[Any]:
        filtered = self._filtered_rows()
        key = (self._filtered_key, self.state.sort)
        if key != self._sorted_key:
            self._sorted = sort_rows(filtered, self.state.sort, self.columns)
            self._sorted_key = key
        return self._sorted
