import httpx

from luxestay_control.app.listing_console import ListingConsole
from luxestay_control.app.modules import MODULES, Clients
from luxestay_control.clients.luxestay_sdk import HttpClient, SDKConfig


def _console(module, clients, commands, tmp_path, page_size=5):
    pending = iter(commands)
    output: list[str] = []
    console = ListingConsole(
        MODULES[module],
        clients,
        page_size=page_size,
        export_dir=str(tmp_path),
        input_fn=lambda prompt: next(pending),
        output_fn=output.append,
    )
    return console, output


def test_browse_rooms(api_clients, tmp_path):
    console, output = _console(
        "rooms",
        api_clients,
        ["s price", "s Price", "n", "q suite", "z 20", "x", "b"],
        tmp_path,
    )

    console.run()

    state = console.table.state
    assert state.global_search == "suite"
    assert state.page_size == 20
    assert state.page == 1
    assert state.sort.column == "price"
    assert state.sort.direction.value == "desc"
    assert "Showing 5 of 9 results" in output
    assert "Page 2 of 2 · 5 per page" in output
    assert "Showing 3 of 3 results (filtered from 9)" in output
    exports = list(tmp_path.glob("rooms_*.csv"))
    assert len(exports) == 1
    assert len(exports[0].read_text(encoding="utf-8-sig").splitlines()) == 8


def test_invalid_commands_show_banners(api_clients, tmp_path):
    console, output = _console("rooms", api_clients, ["z 7", "g x", "s nope", "o 99", "wat", "b"], tmp_path)

    console.run()

    banners = [line for line in output if line.startswith("[ERROR]")]
    assert len(banners) == 5
    assert console.table.state.page_size == 5


def test_column_filter_and_clear(api_clients, tmp_path):
    console, output = _console("rooms", api_clients, ["f hotelName=mountain", "t", "c", "b"], tmp_path)

    console.run()

    assert "Showing 1 of 1 results (filtered from 9)" in output
    assert any(line.startswith("Filters:") for line in output)
    assert console.table.state.column_filters == {}


def test_booking_row_actions(api_clients, store, tmp_path):
    console, output = _console("bookings", api_clients, ["do 2 check-in", "do 3 nap", "o 1", "b"], tmp_path)

    console.run()

    assert "check-in: b2 is now checked-in" in output
    assert store.get_booking("b2").status == "checked-in"
    assert "[ERROR] code=UI_VALIDATION message=Action must be one of: check-in, cancel. trace_id=n/a" in output
    assert "id: b1" in output


def test_fetch_error_replaces_the_listing(tmp_path):
    def offline(method, url, **kwargs):
        raise httpx.ConnectError("refused")

    clients = Clients.from_http(HttpClient(SDKConfig(retry_max_attempts=1, retry_backoff_ms=0), transport=offline))
    console, output = _console("guests", clients, ["r", "b"], tmp_path)

    console.run()

    banners = [line for line in output if line.startswith("[ERROR]")]
    assert len(banners) == 2
    assert "code=NETWORK_ERROR" in banners[0]
    assert not any(line.startswith("Showing") for line in output)


def test_paging_past_either_edge_shows_a_banner(api_clients, tmp_path):
    console, output = _console("rooms", api_clients, ["p", "n", "n", "b"], tmp_path)

    console.run()

    assert "[ERROR] code=UI_VALIDATION message=Already on the first page. trace_id=n/a" in output
    assert "[ERROR] code=UI_VALIDATION message=Already on the last page. trace_id=n/a" in output
    assert console.table.state.page == 2
