from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date

from app.luxestay.schemas.bookings import Booking, BookingStatus
from app.luxestay.schemas.guests import Guest
from app.luxestay.schemas.rooms import Room

HOTELS = {
    "h1": "LuxeStay Grand Palace",
    "h2": "LuxeStay Marina Bay",
    "h3": "LuxeStay Mountain Retreat",
}

ROOM_CATEGORIES = {
    "rc1": "Standard Room",
    "rc2": "Deluxe Room",
    "rc3": "Executive Suite",
    "rc4": "Presidential Suite",
}

_ROOM_SEED = [
    ("r1", "h1", "rc1", "101", 1, "available", 150, False),
    ("r2", "h1", "rc1", "102", 1, "occupied", 150, False),
    ("r3", "h1", "rc2", "201", 2, "available", 280, True),
    ("r4", "h1", "rc2", "202", 2, "reserved", 280, False),
    ("r5", "h1", "rc3", "301", 3, "available", 450, True),
    ("r6", "h1", "rc4", "401", 4, "available", 850, True),
    ("r7", "h2", "rc1", "101", 1, "available", 180, False),
    ("r8", "h2", "rc2", "201", 2, "available", 320, True),
    ("r9", "h3", "rc3", "201", 2, "available", 520, False),
]

_GUEST_SEED = [
    ("g1", "James Wilson", "james@email.com", "+1 555-0101", "Passport", "AB123456", "123 Main St, NY", 5, 4500),
    ("g2", "Sarah Johnson", "sarah@email.com", "+1 555-0102", "Driver License", "DL789012", "456 Oak Ave, LA", 3, 2800),
    ("g3", "Michael Chen", "michael@email.com", "+1 555-0103", "Passport", "CD345678", "789 Pine Rd, SF", 8, 12500),
]

_BOOKING_SEED = [
    ("b1", "g1", "r2", "2024-01-15", "2024-01-18", "checked-in", 450, 450, "2024-01-10"),
    ("b2", "g2", "r4", "2024-01-20", "2024-01-25", "confirmed", 1400, 700, "2024-01-12"),
    ("b3", "g3", "r5", "2024-01-22", "2024-01-24", "confirmed", 900, 900, "2024-01-14"),
]

# status -> statuses it may move to
BOOKING_TRANSITIONS: dict[str, set[str]] = {
    "confirmed": {"checked-in", "cancelled"},
    "checked-in": {"checked-out"},
    "checked-out": set(),
    "cancelled": set(),
}


@dataclass
class MockStore:
    """In-memory fixture store standing in for the hotel database."""

    rooms: list[Room] = field(default_factory=list)
    guests: list[Guest] = field(default_factory=list)
    bookings: list[Booking] = field(default_factory=list)

    @classmethod
    def seeded(cls) -> "MockStore":
        store = cls()
        store.rooms = [
            Room(
                id=room_id,
                hotel_id=hotel_id,
                category_id=category_id,
                room_number=number,
                floor=floor,
                status=status,
                price=price,
                is_promoted=promoted,
                category_name=ROOM_CATEGORIES.get(category_id),
                hotel_name=HOTELS.get(hotel_id),
            )
            for room_id, hotel_id, category_id, number, floor, status, price, promoted in _ROOM_SEED
        ]
        store.guests = [
            Guest(
                id=guest_id,
                hotel_id="h1",
                name=name,
                email=email,
                phone=phone,
                id_type=id_type,
                id_number=id_number,
                address=address,
                total_stays=stays,
                total_spent=spent,
            )
            for guest_id, name, email, phone, id_type, id_number, address, stays, spent in _GUEST_SEED
        ]
        for booking_id, guest_id, room_id, check_in, check_out, status, total, paid, created in _BOOKING_SEED:
            store.bookings.append(
                store._join_booking(
                    booking_id=booking_id,
                    guest_id=guest_id,
                    room_id=room_id,
                    check_in=date.fromisoformat(check_in),
                    check_out=date.fromisoformat(check_out),
                    status=status,
                    total_amount=total,
                    paid_amount=paid,
                    created_at=date.fromisoformat(created),
                )
            )
        return store

    def get_room(self, room_id: str) -> Room | None:
        return next((room for room in self.rooms if room.id == room_id), None)

    def get_guest(self, guest_id: str) -> Guest | None:
        return next((guest for guest in self.guests if guest.id == guest_id), None)

    def get_booking(self, booking_id: str) -> Booking | None:
        return next((booking for booking in self.bookings if booking.id == booking_id), None)

    def create_booking(
        self,
        *,
        guest_id: str,
        room_id: str,
        check_in: date,
        check_out: date,
        paid_amount: float,
        today: date,
    ) -> Booking:
        room = self.get_room(room_id)
        nights = max(1, (check_out - check_in).days)
        booking = self._join_booking(
            booking_id=f"b-{uuid.uuid4().hex[:8]}",
            guest_id=guest_id,
            room_id=room_id,
            check_in=check_in,
            check_out=check_out,
            status="confirmed",
            total_amount=(room.price if room else 0) * nights,
            paid_amount=paid_amount,
            created_at=today,
        )
        self.bookings.append(booking)
        return booking

    def update_booking_status(self, booking_id: str, status: BookingStatus, *, today: date) -> Booking | None:
        for index, booking in enumerate(self.bookings):
            if booking.id == booking_id:
                updated = booking.model_copy(update={"status": status, "updated_at": today})
                self.bookings[index] = updated
                return updated
        return None

    def _join_booking(
        self,
        *,
        booking_id: str,
        guest_id: str,
        room_id: str,
        check_in: date,
        check_out: date,
        status: str,
        total_amount: float,
        paid_amount: float,
        created_at: date,
    ) -> Booking:
        guest = self.get_guest(guest_id)
        room = self.get_room(room_id)
        hotel_id = room.hotel_id if room else "h1"
        return Booking(
            id=booking_id,
            guest_id=guest_id,
            room_id=room_id,
            hotel_id=hotel_id,
            check_in=check_in,
            check_out=check_out,
            status=status,
            total_amount=total_amount,
            paid_amount=paid_amount,
            created_at=created_at,
            updated_at=created_at,
            guest_name=guest.name if guest else None,
            guest_email=guest.email if guest else None,
            room_number=room.room_number if room else None,
            hotel_name=HOTELS.get(hotel_id),
        )


_store = MockStore.seeded()


def get_store() -> MockStore:
    return _store


def get_today() -> date:
    return date.today()
