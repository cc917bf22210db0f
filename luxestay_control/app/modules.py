from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from luxestay_control.clients.luxestay_sdk import BookingsClient, GuestsClient, HttpClient, RoomsClient
from shared.data_table import Column


@dataclass
class Clients:
    http: HttpClient
    rooms: RoomsClient
    guests: GuestsClient
    bookings: BookingsClient

    @classmethod
    def from_http(cls, http_client: HttpClient) -> "Clients":
        return cls(
            http=http_client,
            rooms=RoomsClient(http_client),
            guests=GuestsClient(http_client),
            bookings=BookingsClient(http_client),
        )


def format_currency(value: Any, row: Any = None) -> str:
    if value is None:
        return ""
    return f"${float(value):,.0f}"


def format_status(value: Any, row: Any = None) -> str:
    return str(value or "").replace("-", " ").title()


def booking_balance(row: dict[str, Any]) -> float | None:
    total = row.get("totalAmount")
    paid = row.get("paidAmount")
    if total is None or paid is None:
        return None
    return float(total) - float(paid)


ROOM_COLUMNS = [
    Column("roomNumber", "Room"),
    Column("categoryName", "Category"),
    Column("hotelName", "Hotel"),
    Column("floor", "Floor"),
    Column("status", "Status", render=format_status),
    Column("price", "Price", render=format_currency),
]

GUEST_COLUMNS = [
    Column("name", "Guest"),
    Column("email", "Email"),
    Column("phone", "Phone"),
    Column("idType", "ID Type"),
    Column("totalStays", "Stays"),
    Column("totalSpent", "Spent", render=format_currency),
]

BOOKING_COLUMNS = [
    Column("id", "Booking"),
    Column("guestName", "Guest"),
    Column("roomNumber", "Room"),
    Column("checkIn", "Check-in"),
    Column("checkOut", "Check-out"),
    Column("status", "Status", render=format_status),
    Column("totalAmount", "Total", render=format_currency),
    Column("balance", "Balance", searchable=False, render=format_currency, accessor=booking_balance),
]

# booking status -> console actions available on that row
BOOKING_ACTIONS = {
    "confirmed": ["check-in", "cancel"],
    "checked-in": ["check-out"],
}


def booking_actions(row: dict[str, Any]) -> list[str]:
    return list(BOOKING_ACTIONS.get(str(row.get("status")), []))


def perform_booking_action(clients: Clients, row: dict[str, Any], action: str) -> dict[str, Any]:
    handlers = {
        "check-in": clients.bookings.check_in,
        "check-out": clients.bookings.check_out,
        "cancel": clients.bookings.cancel,
    }
    return handlers[action](str(row.get("id")))


@dataclass(frozen=True)
class ModuleDefinition:
    name: str
    title: str
    columns: list[Column]
    fetch: Callable[[Clients, dict[str, Any]], list[dict[str, Any]]]
    empty_message: str = "No data found"
    actions: Callable[[dict[str, Any]], list[str]] | None = None
    perform: Callable[[Clients, dict[str, Any], str], dict[str, Any]] | None = None
    server_filters: tuple[str, ...] = field(default=())


def _fetch_rooms(clients: Clients, filters: dict[str, Any]) -> list[dict[str, Any]]:
    return clients.rooms.fetch_all_rows(**filters)


def _fetch_guests(clients: Clients, filters: dict[str, Any]) -> list[dict[str, Any]]:
    return clients.guests.fetch_all_rows(**filters)


def _fetch_bookings(clients: Clients, filters: dict[str, Any]) -> list[dict[str, Any]]:
    return clients.bookings.fetch_all_rows(**filters)


MODULES: dict[str, ModuleDefinition] = {
    "rooms": ModuleDefinition(
        name="rooms",
        title="Rooms",
        columns=ROOM_COLUMNS,
        fetch=_fetch_rooms,
        empty_message="No rooms found",
        server_filters=("status",),
    ),
    "guests": ModuleDefinition(
        name="guests",
        title="Guests",
        columns=GUEST_COLUMNS,
        fetch=_fetch_guests,
        empty_message="No guests found",
    ),
    "bookings": ModuleDefinition(
        name="bookings",
        title="Bookings",
        columns=BOOKING_COLUMNS,
        fetch=_fetch_bookings,
        empty_message="No bookings found",
        actions=booking_actions,
        perform=perform_booking_action,
        server_filters=("status", "date_from", "date_to"),
    ),
}
