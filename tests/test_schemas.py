from datetime import datetime

import pytest
from pydantic import ValidationError

from schemas import BookingCreate, BookingUpdate


def test_booking_create_from_camel_case():
    data = BookingCreate.model_validate({
        "parkingId": 1,
        "startDate": "2030-01-01T10:00:00",
        "endDate": "2030-01-01T12:00:00",
    })

    assert data.parking_id == 1
    assert data.start_date == datetime(2030, 1, 1, 10)
    assert data.end_date == datetime(2030, 1, 1, 12)


def test_aware_times_become_naive_utc():
    data = BookingUpdate.model_validate({
        "startDate": "2030-01-01T10:00:00Z",
        "endDate": "2030-01-01T12:00:00-03:00",
    })

    assert data.start_date == datetime(2030, 1, 1, 10)
    assert data.end_date == datetime(2030, 1, 1, 15)
    assert data.end_date.tzinfo is None


@pytest.mark.parametrize(
    "start, end",
    [
        ("2030-01-01T12:00:00", "2030-01-01T10:00:00"),
        ("2030-01-01T12:00:00", "2030-01-01T12:00:00"),
    ],
)
def test_start_must_precede_end(start, end):
    with pytest.raises(ValidationError):
        BookingUpdate.model_validate({"startDate": start, "endDate": end})


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"invalid_data": 0.0},
        {"parkingId": "first", "startDate": "2030-01-01T10:00:00", "endDate": "2030-01-01T12:00:00"},
        {"parkingId": 1, "startDate": "tomorrow", "endDate": "2030-01-01T12:00:00"},
    ],
)
def test_booking_create_rejects_bad_payload(payload):
    with pytest.raises(ValidationError):
        BookingCreate.model_validate(payload)
