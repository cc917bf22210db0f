from __future__ import annotations

from datetime import date
from typing import Any

from luxestay_control.clients.luxestay_sdk.listing import ListingClient
from luxestay_control.clients.luxestay_sdk.normalizers import unwrap_record


class BookingsClient(ListingClient):
    resource = "bookings"

    def list_bookings(
        self,
        page: int | None = None,
        page_size: int | None = None,
        search: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        status: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> dict[str, Any]:
        return self._list(
            page=page,
            page_size=page_size,
            search=search,
            sort_by=sort_by,
            sort_order=sort_order,
            status=status,
            date_from=date_from.isoformat() if date_from else None,
            date_to=date_to.isoformat() if date_to else None,
        )

    def get_booking(self, booking_id: str) -> dict[str, Any]:
        return unwrap_record(self.http_client.request("GET", f"{self.path}/{booking_id}"))

    def create_booking(
        self,
        *,
        guest_id: str,
        room_id: str,
        check_in: date,
        check_out: date,
        paid_amount: float = 0,
    ) -> dict[str, Any]:
        payload = {
            "guestId": guest_id,
            "roomId": room_id,
            "checkIn": check_in.isoformat(),
            "checkOut": check_out.isoformat(),
            "paidAmount": paid_amount,
        }
        return unwrap_record(self.http_client.request("POST", self.path, json_body=payload))

    def check_in(self, booking_id: str) -> dict[str, Any]:
        return self._transition(booking_id, "check-in")

    def check_out(self, booking_id: str) -> dict[str, Any]:
        return self._transition(booking_id, "check-out")

    def cancel(self, booking_id: str) -> dict[str, Any]:
        return self._transition(booking_id, "cancel")

    def _transition(self, booking_id: str, action: str) -> dict[str, Any]:
        return unwrap_record(self.http_client.request("PUT", f"{self.path}/{booking_id}/{action}"))
