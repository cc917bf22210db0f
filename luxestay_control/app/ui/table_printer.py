from __future__ import annotations

from typing import Any

from shared.data_table import DataTable, SortDirection, TableView, value_string

EMPTY_VALUE = "—"
SORT_MARKERS = {SortDirection.ASC: " ▲", SortDirection.DESC: " ▼"}


def display_value(value: Any) -> str:
    text = value_string(value).strip()
    return text or EMPTY_VALUE


def header_label(view: TableView, key: str, header: str) -> str:
    if view.sort.column == key:
        return header + SORT_MARKERS.get(view.sort.direction, "")
    return header


def render_table(title: str, table: DataTable, view: TableView | None = None) -> list[str]:
    view = view or table.view()
    lines = [title]

    headers = [header_label(view, column.key, column.header) for column in table.columns]
    if table.actions is not None:
        headers.append(table.actions_header)
    body = [[display_value(cell) for cell in table.cells(row)] for row in view.rows]
    if table.actions is not None:
        for cells, row in zip(body, view.rows):
            actions = table.row_actions(row) or []
            cells.append(", ".join(actions) if isinstance(actions, (list, tuple)) else display_value(actions))

    # row numbers are 1-based within the current page
    headers.insert(0, "#")
    for index, cells in enumerate(body, start=1):
        cells.insert(0, str(index))

    widths = [len(header) for header in headers]
    for cells in body:
        widths = [max(width, len(cell)) for width, cell in zip(widths, cells)]

    if table.state.show_filters:
        lines.append(_filters_line(table, view))

    lines.append(" | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers)).rstrip())
    lines.append("-+-".join("-" * width for width in widths))

    if view.loading:
        lines.append("Loading...")
        return lines
    if view.is_empty:
        lines.append(f"({view.empty_message})")
    for cells in body:
        lines.append(" | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(cells)).rstrip())

    lines.append(view.summary)
    lines.append(f"Page {view.page} of {max(view.total_pages, 1)} · {view.page_size} per page")
    return lines


def _filters_line(table: DataTable, view: TableView) -> str:
    parts = []
    for column in table.columns:
        if not column.searchable:
            continue
        parts.append(f"{column.key}=[{view.column_filters.get(column.key, '')}]")
    search = f'search="{view.global_search}"'
    return "Filters: " + " ".join([search, *parts])


def print_table(title: str, table: DataTable) -> None:
    for line in render_table(title, table):
        print(line)
