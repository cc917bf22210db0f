from datetime import date

import pytest

from luxestay_control.app.config import AppConfig
from luxestay_control.app.main import _server_filters, build_parser, main, run_book, run_health, run_list

TODAY = date(2024, 1, 16)


def test_list_command_renders_one_page(api_clients, capsys, tmp_path):
    args = build_parser().parse_args(
        ["list", "rooms", "--sort", "price", "--desc", "--page-size", "5", "--page", "2", "--export"]
    )

    code = run_list(args, AppConfig(export_dir=str(tmp_path)), api_clients)

    out = capsys.readouterr().out
    assert code == 0
    assert "Price ▼" in out
    assert "Page 2 of 2 · 5 per page" in out
    assert "Showing 4 of 9 results" in out
    assert "Exported to" in out
    assert len(list(tmp_path.glob("rooms_*.csv"))) == 1


def test_list_command_with_filters(api_clients, capsys):
    args = build_parser().parse_args(["list", "rooms", "--status", "available", "--filter", "floor=2", "--search", "deluxe"])

    run_list(args, AppConfig(), api_clients)

    assert "Showing 2 of 2 results (filtered from 7)" in capsys.readouterr().out


def test_list_bookings_by_check_in_window(api_clients, capsys):
    args = build_parser().parse_args(["list", "bookings", "--date-from", "2024-01-20", "--date-to", "2024-01-21"])

    run_list(args, AppConfig(), api_clients)

    out = capsys.readouterr().out
    assert "Showing 1 of 1 results" in out
    assert "b2" in out
    assert "b3" not in out


def test_date_window_is_ignored_for_modules_without_it():
    args = build_parser().parse_args(["list", "rooms", "--status", "available", "--date-from", "2024-01-20"])

    assert _server_filters("rooms", args) == {"status": "available"}


def test_date_window_must_be_iso():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["list", "bookings", "--date-from", "20/01/2024"])


def test_book_command_clamps_and_creates(api_clients, capsys, store):
    args = build_parser().parse_args(
        ["book", "--guest", "g1", "--room", "r5", "--check-in", "2024-01-10", "--check-out", "2024-01-18"]
    )

    code = run_book(args, api_clients, today=TODAY)

    out = capsys.readouterr().out
    assert code == 0
    assert "Check-in moved to 2024-01-16" in out
    assert "confirmed for James Wilson in room 301" in out
    assert len(store.bookings) == 4
    assert store.bookings[-1].total_amount == 900


def test_book_command_surfaces_api_validation(api_clients, capsys):
    args = build_parser().parse_args(
        ["book", "--guest", "g404", "--room", "r1", "--check-in", "2024-01-20", "--check-out", "2024-01-21"]
    )

    code = run_book(args, api_clients, today=TODAY)

    out = capsys.readouterr().out
    assert code == 1
    assert "code=VALIDATION_ERROR" in out
    assert "guestId: Unknown guest." in out


def test_book_command_rejects_bad_form(api_clients, capsys):
    args = build_parser().parse_args(["book", "--guest", "g1", "--room", "r1", "--check-in", "soon", "--check-out", "later"])

    assert run_book(args, api_clients, today=TODAY) == 2
    assert "checkIn" in capsys.readouterr().out


def test_health_command(api_clients, capsys):
    assert run_health(api_clients) == 0
    assert "API status: ok" in capsys.readouterr().out


def test_main_reports_bad_configuration(monkeypatch, capsys):
    monkeypatch.setenv("LUXESTAY_PAGE_SIZE", "3")

    assert main(["--env-file", ".missing-env", "health"]) == 2
    assert "LUXESTAY_PAGE_SIZE" in capsys.readouterr().out


def test_unknown_module_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["list", "spa"])
