from datetime import date

from fastapi import APIRouter, Depends, Query, status

from app.luxestay.core.error_catalog import AppError, ErrorCatalog
from app.luxestay.repos.mock_store import BOOKING_TRANSITIONS, MockStore, get_store, get_today
from app.luxestay.schemas.bookings import Booking, BookingCreateRequest, BookingStatus
from app.luxestay.schemas.common import ApiErrorResponse, ApiResponse, PaginatedData
from app.luxestay.services.listing import ListParams, build_listing, list_params
from shared.booking_dates import validate_stay
from shared.data_table import Column

router = APIRouter(
    responses={404: {"model": ApiErrorResponse}, 409: {"model": ApiErrorResponse}, 422: {"model": ApiErrorResponse}}
)

BOOKING_COLUMNS = [
    Column("id", "Booking"),
    Column("guestName", "Guest"),
    Column("roomNumber", "Room"),
    Column("checkIn", "Check-in"),
    Column("checkOut", "Check-out"),
    Column("status", "Status"),
    Column("totalAmount", "Total"),
    Column("paidAmount", "Paid"),
]


def _require_booking(store: MockStore, booking_id: str) -> Booking:
    booking = store.get_booking(booking_id)
    if booking is None:
        raise AppError(ErrorCatalog.NOT_FOUND, details={"resource": "booking", "id": booking_id})
    return booking


def _transition(store: MockStore, booking_id: str, target: BookingStatus, today: date) -> Booking:
    booking = _require_booking(store, booking_id)
    if target not in BOOKING_TRANSITIONS.get(booking.status, set()):
        raise AppError(
            ErrorCatalog.INVALID_STATE,
            details={"id": booking_id, "from": booking.status, "to": target},
        )
    return store.update_booking_status(booking_id, target, today=today)


@router.get("/bookings", response_model=ApiResponse[PaginatedData[Booking]])
async def list_bookings(
    params: ListParams = Depends(list_params),
    booking_status: str | None = Query(default=None, alias="status"),
    date_from: date | None = Query(default=None, alias="dateFrom"),
    date_to: date | None = Query(default=None, alias="dateTo"),
    store: MockStore = Depends(get_store),
):
    records = [
        booking
        for booking in store.bookings
        if (date_from is None or booking.check_in >= date_from) and (date_to is None or booking.check_in <= date_to)
    ]
    data = build_listing("bookings", records, BOOKING_COLUMNS, params, exact_filters={"status": booking_status})
    return {"success": True, "data": data, "message": "Bookings retrieved successfully", "status": 200}


@router.get("/bookings/{booking_id}", response_model=ApiResponse[Booking])
async def get_booking(booking_id: str, store: MockStore = Depends(get_store)):
    booking = _require_booking(store, booking_id)
    return {"success": True, "data": booking, "message": "Booking retrieved successfully", "status": 200}


@router.post("/bookings", response_model=ApiResponse[Booking], status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingCreateRequest,
    store: MockStore = Depends(get_store),
    today: date = Depends(get_today),
):
    errors = validate_stay(payload.check_in, payload.check_out, today=today)
    if store.get_guest(payload.guest_id) is None:
        errors["guestId"] = "Unknown guest."
    if store.get_room(payload.room_id) is None:
        errors["roomId"] = "Unknown room."
    if errors:
        raise AppError(
            ErrorCatalog.VALIDATION_ERROR,
            details={"errors": [{"field": field, "message": message} for field, message in errors.items()]},
        )
    booking = store.create_booking(
        guest_id=payload.guest_id,
        room_id=payload.room_id,
        check_in=payload.check_in,
        check_out=payload.check_out,
        paid_amount=payload.paid_amount,
        today=today,
    )
    return {"success": True, "data": booking, "message": "Booking created successfully", "status": 201}


@router.put("/bookings/{booking_id}/check-in", response_model=ApiResponse[Booking])
async def check_in_booking(
    booking_id: str,
    store: MockStore = Depends(get_store),
    today: date = Depends(get_today),
):
    booking = _transition(store, booking_id, "checked-in", today)
    return {"success": True, "data": booking, "message": "Guest checked in", "status": 200}


@router.put("/bookings/{booking_id}/check-out", response_model=ApiResponse[Booking])
async def check_out_booking(
    booking_id: str,
    store: MockStore = Depends(get_store),
    today: date = Depends(get_today),
):
    booking = _transition(store, booking_id, "checked-out", today)
    return {"success": True, "data": booking, "message": "Guest checked out", "status": 200}


@router.put("/bookings/{booking_id}/cancel", response_model=ApiResponse[Booking])
async def cancel_booking(
    booking_id: str,
    store: MockStore = Depends(get_store),
    today: date = Depends(get_today),
):
    booking = _transition(store, booking_id, "cancelled", today)
    return {"success": True, "data": booking, "message": "Booking cancelled", "status": 200}
