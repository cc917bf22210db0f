from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from shared.booking_dates import StayDates, clamp_stay, parse_iso_date


@dataclass
class FormResult:
    values: dict[str, Any]
    field_errors: dict[str, str]
    notices: list[str] = field(default_factory=list)

    @property
    def first_invalid_field(self) -> str | None:
        return next(iter(self.field_errors), None)

    @property
    def is_valid(self) -> bool:
        return len(self.field_errors) == 0


def _normalize_required_text(value: str | None) -> str:
    return (value or "").strip()


def _parse_date_field(raw: str | None, name: str, field_errors: dict[str, str]) -> date | None:
    try:
        return parse_iso_date(raw)
    except ValueError:
        field_errors[name] = "Use the YYYY-MM-DD format."
        return None


def validate_booking_form(
    guest_id: str | None,
    room_id: str | None,
    check_in: str | None,
    check_out: str | None,
    paid_amount: str | None,
    *,
    today: date,
) -> FormResult:
    """Validate the new-booking form.

    Dates are clamped like the date picker clamps them: a past check-in moves
    to ``today`` and a check-out before check-in moves to check-in. Every
    adjustment is reported in ``notices``.
    """
    field_errors: dict[str, str] = {}
    notices: list[str] = []
    normalized_guest = _normalize_required_text(guest_id)
    normalized_room = _normalize_required_text(room_id)
    if not normalized_guest:
        field_errors["guestId"] = "Guest is required."
    if not normalized_room:
        field_errors["roomId"] = "Room is required."

    raw_check_in = _parse_date_field(check_in, "checkIn", field_errors)
    raw_check_out = _parse_date_field(check_out, "checkOut", field_errors)
    stay: StayDates = clamp_stay(raw_check_in, raw_check_out, today=today)
    if stay.check_in != raw_check_in:
        notices.append(f"Check-in moved to {stay.check_in.isoformat()} (cannot be in the past).")
    if stay.check_out != raw_check_out:
        notices.append(f"Check-out moved to {stay.check_out.isoformat()} (cannot be before check-in).")
    if stay.check_in is None and "checkIn" not in field_errors:
        field_errors["checkIn"] = "Check-in date is required."
    if stay.check_out is None and "checkOut" not in field_errors:
        field_errors["checkOut"] = "Check-out date is required."

    amount = 0.0
    raw_amount = _normalize_required_text(paid_amount)
    if raw_amount:
        try:
            amount = float(raw_amount)
        except ValueError:
            field_errors["paidAmount"] = "Paid amount must be a number."
        else:
            if amount < 0:
                field_errors["paidAmount"] = "Paid amount cannot be negative."

    return FormResult(
        values={
            "guest_id": normalized_guest,
            "room_id": normalized_room,
            "check_in": stay.check_in,
            "check_out": stay.check_out,
            "paid_amount": amount,
        },
        field_errors=field_errors,
        notices=notices,
    )


def map_api_validation_errors(error_details: Any) -> dict[str, str]:
    if not error_details:
        return {}

    items = error_details.get("errors") if isinstance(error_details, dict) else error_details
    mapped: dict[str, str] = {}
    if isinstance(items, dict):
        return {str(key): str(value) for key, value in items.items()}
    if isinstance(items, list):
        for item in items:
            if not isinstance(item, dict):
                continue
            field_name = item.get("field") or item.get("loc")
            message = item.get("message") or item.get("msg")
            if isinstance(field_name, list):
                field_name = field_name[-1] if field_name else None
            if field_name and message:
                mapped[str(field_name)] = str(message)
    return mapped
