from __future__ import annotations

import argparse
from collections.abc import Sequence
from datetime import date

from luxestay_control.app.config import AppConfig
from luxestay_control.app.export.csv_exporter import export_current_view
from luxestay_control.app.infrastructure.errors.error_mapper import ErrorMapper
from luxestay_control.app.infrastructure.logging.logger import get_logger, log_action
from luxestay_control.app.listing_console import ListingConsole
from luxestay_control.app.modules import MODULES, Clients
from luxestay_control.app.ui.components.error_banner import ErrorBanner
from luxestay_control.app.ui.forms import map_api_validation_errors, validate_booking_form
from luxestay_control.app.ui.table_printer import print_table
from luxestay_control.clients.luxestay_sdk import ApiError, HttpClient
from shared.data_table import DataTable, SortDirection

logger = get_logger("luxestay_control")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="luxestay-control", description="LuxeStay hotel dashboard console")
    parser.add_argument("--env-file", default=".env")
    commands = parser.add_subparsers(dest="command", required=True)

    list_parser = commands.add_parser("list", help="render one page of a listing")
    list_parser.add_argument("module", choices=sorted(MODULES))
    list_parser.add_argument("--search", default="")
    list_parser.add_argument("--filter", action="append", default=[], metavar="KEY=VALUE")
    list_parser.add_argument("--sort")
    list_parser.add_argument("--desc", action="store_true")
    list_parser.add_argument("--page", type=int, default=1)
    list_parser.add_argument("--page-size", type=int)
    _add_server_filter_arguments(list_parser)
    list_parser.add_argument("--export", action="store_true", help="write the filtered rows to CSV")

    browse_parser = commands.add_parser("browse", help="interactive listing")
    browse_parser.add_argument("module", choices=sorted(MODULES))
    _add_server_filter_arguments(browse_parser)

    book_parser = commands.add_parser("book", help="create a booking")
    book_parser.add_argument("--guest", required=True)
    book_parser.add_argument("--room", required=True)
    book_parser.add_argument("--check-in", required=True)
    book_parser.add_argument("--check-out", required=True)
    book_parser.add_argument("--paid", default="0")

    commands.add_parser("health", help="check API connectivity")
    return parser


def _add_server_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--status", help="server-side status filter")
    parser.add_argument("--date-from", type=date.fromisoformat, help="bookings checking in on or after (YYYY-MM-DD)")
    parser.add_argument("--date-to", type=date.fromisoformat, help="bookings checking in on or before (YYYY-MM-DD)")


def _server_filters(module_name: str, args: argparse.Namespace) -> dict[str, str]:
    candidates = {
        "status": args.status,
        "date_from": args.date_from.isoformat() if args.date_from else None,
        "date_to": args.date_to.isoformat() if args.date_to else None,
    }
    supported = MODULES[module_name].server_filters
    return {key: value for key, value in candidates.items() if value and key in supported}


def run_list(args: argparse.Namespace, config: AppConfig, clients: Clients) -> int:
    module = MODULES[args.module]
    try:
        rows = module.fetch(clients, _server_filters(args.module, args))
    except ApiError as error:
        ErrorBanner.show(ErrorMapper.to_payload(error))
        log_action(logger, module.name, "fetch", "error", code=error.code, trace_id=error.trace_id)
        return 1

    table = DataTable(
        module.columns,
        rows,
        page_size=args.page_size or config.page_size,
        empty_message=module.empty_message,
        actions=module.actions,
    )
    if args.search:
        table.search(args.search)
    for item in args.filter:
        key, _, value = item.partition("=")
        table.filter_column(key.strip(), value.strip())
    if args.sort:
        table.toggle_sort(args.sort)
        if args.desc and table.state.sort.direction is SortDirection.ASC:
            table.toggle_sort(args.sort)
    table.goto_page(args.page)
    print_table(module.title, table)
    log_action(logger, module.name, "fetch", "success", rows=len(rows))

    if args.export:
        path = export_current_view(module=module.name, table=table, output_dir=config.export_dir)
        log_action(logger, module.name, "export", "success", path=str(path))
        print(f"Exported to {path}")
    return 0


def run_browse(args: argparse.Namespace, config: AppConfig, clients: Clients) -> int:
    console = ListingConsole(
        MODULES[args.module],
        clients,
        page_size=config.page_size,
        export_dir=config.export_dir,
        server_filters=_server_filters(args.module, args),
    )
    console.run()
    return 0


def run_book(args: argparse.Namespace, clients: Clients, today: date | None = None) -> int:
    result = validate_booking_form(
        args.guest,
        args.room,
        args.check_in,
        args.check_out,
        args.paid,
        today=today or date.today(),
    )
    for notice in result.notices:
        print(notice)
    if not result.is_valid:
        for field_name, message in result.field_errors.items():
            ErrorBanner.show(f"{field_name}: {message}")
        return 2

    values = result.values
    try:
        booking = clients.bookings.create_booking(
            guest_id=values["guest_id"],
            room_id=values["room_id"],
            check_in=values["check_in"],
            check_out=values["check_out"],
            paid_amount=values["paid_amount"],
        )
    except ApiError as error:
        ErrorBanner.show(ErrorMapper.to_payload(error))
        for field_name, message in map_api_validation_errors(error.details).items():
            print(f"  {field_name}: {message}")
        log_action(logger, "bookings", "create", "error", code=error.code, trace_id=error.trace_id)
        return 1

    log_action(logger, "bookings", "create", "success", id=booking.get("id"))
    print(
        f"Booking {booking.get('id')} confirmed for {booking.get('guestName')} "
        f"in room {booking.get('roomNumber')} ({booking.get('checkIn')} → {booking.get('checkOut')})"
    )
    return 0


def run_health(clients: Clients) -> int:
    try:
        payload = clients.http.request("GET", "/health")
    except ApiError as error:
        ErrorBanner.show(ErrorMapper.to_payload(error))
        return 1
    print(f"API status: {payload.get('status')} (trace_id={payload.get('trace_id') or 'n/a'})")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = AppConfig.from_env(args.env_file)
    except ValueError as error:
        ErrorBanner.show(str(error))
        return 2
    clients = Clients.from_http(HttpClient(config.sdk_config()))

    if args.command == "list":
        return run_list(args, config, clients)
    if args.command == "browse":
        return run_browse(args, config, clients)
    if args.command == "book":
        return run_book(args, clients)
    return run_health(clients)


if __name__ == "__main__":
    raise SystemExit(main())
