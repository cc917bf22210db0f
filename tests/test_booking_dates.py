from datetime import date

import pytest

from shared.booking_dates import StayDates, clamp_stay, parse_iso_date, validate_stay

TODAY = date(2024, 1, 16)


def test_past_check_in_moves_to_today():
    stay = clamp_stay(date(2024, 1, 10), date(2024, 1, 20), today=TODAY)

    assert stay == StayDates(TODAY, date(2024, 1, 20))


def test_check_out_before_check_in_moves_to_check_in():
    stay = clamp_stay(date(2024, 1, 20), date(2024, 1, 18), today=TODAY)

    assert stay.check_out == date(2024, 1, 20)
    assert stay.nights == 0


def test_check_out_alone_cannot_precede_today():
    stay = clamp_stay(None, date(2024, 1, 1), today=TODAY)

    assert stay.check_in is None
    assert stay.check_out == TODAY
    assert stay.nights is None


def test_valid_range_is_left_alone():
    stay = clamp_stay(date(2024, 1, 20), date(2024, 1, 25), today=TODAY)

    assert stay.nights == 5


def test_validate_reports_each_broken_rule():
    assert validate_stay(date(2024, 1, 20), date(2024, 1, 22), today=TODAY) == {}
    assert set(validate_stay(date(2024, 1, 15), date(2024, 1, 22), today=TODAY)) == {"checkIn"}
    assert set(validate_stay(date(2024, 1, 20), date(2024, 1, 19), today=TODAY)) == {"checkOut"}


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("2024-01-20", date(2024, 1, 20)), ("2024-01-20T10:00:00Z", date(2024, 1, 20)), ("  ", None), (None, None)],
)
def test_parse_iso_date(raw, expected):
    assert parse_iso_date(raw) == expected


def test_parse_iso_date_rejects_garbage():
    with pytest.raises(ValueError):
        parse_iso_date("20/01/2024")
