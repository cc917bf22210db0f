from datetime import date
from typing import Literal

from pydantic import Field

from app.luxestay.schemas.common import CamelModel

BookingStatus = Literal["confirmed", "checked-in", "checked-out", "cancelled"]


class Booking(CamelModel):
    id: str
    guest_id: str
    room_id: str
    hotel_id: str
    check_in: date
    check_out: date
    status: BookingStatus
    total_amount: float
    paid_amount: float
    created_at: date
    updated_at: date
    guest_name: str | None = None
    guest_email: str | None = None
    room_number: str | None = None
    hotel_name: str | None = None


class BookingCreateRequest(CamelModel):
    guest_id: str = Field(..., min_length=1)
    room_id: str = Field(..., min_length=1)
    check_in: date
    check_out: date
    paid_amount: float = Field(default=0, ge=0)
