from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class StayDates:
    check_in: date | None
    check_out: date | None

    @property
    def nights(self) -> int | None:
        if self.check_in is None or self.check_out is None:
            return None
        return (self.check_out - self.check_in).days


def parse_iso_date(value: str | date | None) -> date | None:
    if value is None or isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return None
    return date.fromisoformat(text[:10])


def clamp_stay(check_in: date | None, check_out: date | None, *, today: date) -> StayDates:
    """Keep a check-in/check-out pair consistent the way the booking picker does.

    Check-in may not fall before ``today`` and check-out may not fall before
    check-in. Missing values stay missing.
    """
    if check_in is not None and check_in < today:
        check_in = today
    floor = check_in or today
    if check_out is not None and check_out < floor:
        check_out = floor
    return StayDates(check_in=check_in, check_out=check_out)


def validate_stay(check_in: date, check_out: date, *, today: date) -> dict[str, str]:
    errors: dict[str, str] = {}
    if check_in < today:
        errors["checkIn"] = "Check-in date cannot be in the past."
    if check_out < check_in:
        errors["checkOut"] = "Check-out date cannot be before check-in."
    return errors
