from __future__ import annotations

from collections.abc import Callable
from typing import Any

from luxestay_control.app.export.csv_exporter import export_current_view
from luxestay_control.app.infrastructure.errors.error_mapper import ErrorMapper
from luxestay_control.app.infrastructure.logging.logger import get_logger, log_action
from luxestay_control.app.modules import Clients, ModuleDefinition
from luxestay_control.app.ui.components.error_banner import ErrorBanner
from luxestay_control.app.ui.table_printer import display_value, render_table
from luxestay_control.clients.luxestay_sdk.errors import ApiError
from shared.data_table import DataTable

HELP_TEXT = (
    "Commands: n next | p prev | a first | l last | g <page> | z <size> | s <column> sort | "
    "q <text> search | f <column>=<value> filter | t toggle filters | c clear | "
    "o <row> open | do <row> <action> | x export | r reload | b back"
)

logger = get_logger("luxestay_control.listing")


class ListingConsole:
    """Interactive loop over one module listing.

    Rows are fetched once through the SDK and every navigation command
    runs against the in-memory table.
    """

    def __init__(
        self,
        module: ModuleDefinition,
        clients: Clients,
        *,
        page_size: int = 10,
        export_dir: str = "out/exports",
        server_filters: dict[str, Any] | None = None,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self.module = module
        self.clients = clients
        self.export_dir = export_dir
        self.server_filters = dict(server_filters or {})
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.error: dict[str, Any] | None = None
        self.table = DataTable(
            module.columns,
            page_size=page_size,
            empty_message=module.empty_message,
            actions=module.actions,
        )

    def load(self) -> bool:
        self.table.set_loading(True)
        self.output_fn(f"Loading {self.module.name}...")
        try:
            rows = self.module.fetch(self.clients, self.server_filters)
        except ApiError as error:
            self.error = ErrorMapper.to_payload(error)
            self.table.set_rows([])
            log_action(logger, self.module.name, "fetch", "error", code=error.code, trace_id=error.trace_id)
            return False
        finally:
            self.table.set_loading(False)
        self.error = None
        self.table.set_rows(rows)
        log_action(logger, self.module.name, "fetch", "success", rows=len(rows))
        return True

    def render(self) -> None:
        if self.error is not None:
            self.output_fn(ErrorBanner.render(self.error))
            return
        for line in render_table(self.module.title, self.table):
            self.output_fn(line)

    def run(self) -> None:
        self.load()
        while True:
            self.render()
            self.output_fn(HELP_TEXT)
            raw = self.input_fn("> ").strip()
            if raw in {"b", "back", "exit", "quit"}:
                return
            self.handle(raw)

    def handle(self, raw: str) -> None:
        command, _, argument = raw.partition(" ")
        argument = argument.strip()
        table = self.table
        if command == "n":
            if table.view().can_go_forward:
                table.next_page()
            else:
                self.output_fn(ErrorBanner.render("Already on the last page."))
        elif command == "p":
            if table.view().can_go_back:
                table.prev_page()
            else:
                self.output_fn(ErrorBanner.render("Already on the first page."))
        elif command == "a":
            table.first_page()
        elif command == "l":
            table.last_page()
        elif command == "g":
            number = _to_int(argument)
            if number is None:
                self.output_fn(ErrorBanner.render("Page must be a number."))
            else:
                table.goto_page(number)
        elif command == "z":
            size = _to_int(argument)
            if size not in table.state.page_size_options:
                options = ", ".join(str(option) for option in table.state.page_size_options)
                self.output_fn(ErrorBanner.render(f"Page size must be one of {options}."))
            else:
                table.set_page_size(size)
        elif command == "s":
            self._toggle_sort(argument)
        elif command == "q":
            table.search(argument)
        elif command == "f":
            key, _, value = argument.partition("=")
            if not key.strip():
                self.output_fn(ErrorBanner.render("Use f <column>=<value>."))
            else:
                table.filter_column(key.strip(), value.strip())
        elif command == "t":
            table.toggle_filters()
        elif command == "c":
            table.reset_view()
        elif command == "o":
            self._open_row(argument)
        elif command == "do":
            self._perform(argument)
        elif command == "x":
            self.export()
        elif command == "r":
            self.load()
        elif command:
            self.output_fn(ErrorBanner.render(f"Unknown command: {command}"))

    def export(self) -> str:
        path = export_current_view(module=self.module.name, table=self.table, output_dir=self.export_dir)
        log_action(logger, self.module.name, "export", "success", path=str(path), rows=len(self.table.sorted_rows()))
        self.output_fn(f"Exported to {path}")
        return str(path)

    def _toggle_sort(self, argument: str) -> None:
        column = next(
            (
                item
                for item in self.module.columns
                if argument == item.key or argument.lower() == item.header.lower()
            ),
            None,
        )
        if column is None:
            self.output_fn(ErrorBanner.render(f"Unknown column: {argument}"))
            return
        if not column.sortable:
            self.output_fn(ErrorBanner.render(f"Column {column.header} is not sortable."))
            return
        self.table.toggle_sort(column.key)

    def _row_at(self, argument: str) -> dict[str, Any] | None:
        rows = self.table.view().rows
        index = _to_int(argument)
        if index is None or not 1 <= index <= len(rows):
            self.output_fn(ErrorBanner.render(f"Row must be between 1 and {len(rows)}."))
            return None
        return rows[index - 1]

    def _open_row(self, argument: str) -> None:
        row = self._row_at(argument)
        if row is None:
            return
        self.table.click_row(row)
        for key, value in row.items():
            self.output_fn(f"{key}: {display_value(value)}")

    def _perform(self, argument: str) -> None:
        row_arg, _, action = argument.partition(" ")
        action = action.strip()
        if self.module.perform is None:
            self.output_fn(ErrorBanner.render(f"{self.module.title} has no row actions."))
            return
        row = self._row_at(row_arg)
        if row is None:
            return
        allowed = self.table.row_actions(row) or []
        if action not in allowed:
            self.output_fn(ErrorBanner.render(f"Action must be one of: {', '.join(allowed) or 'none'}."))
            return
        try:
            updated = self.module.perform(self.clients, row, action)
        except ApiError as error:
            self.output_fn(ErrorBanner.render(ErrorMapper.to_payload(error)))
            log_action(logger, self.module.name, action, "error", code=error.code, trace_id=error.trace_id)
            return
        log_action(logger, self.module.name, action, "success", id=updated.get("id"))
        self.output_fn(f"{action}: {updated.get('id')} is now {updated.get('status')}")
        self.load()


def _to_int(value: str) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
