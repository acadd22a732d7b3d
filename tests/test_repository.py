from datetime import datetime

import pytest
from sqlalchemy.exc import SQLAlchemyError

from conftest import PARKING_1, STANDARD_ID_2
from errors import PersistenceError
from repository import BookingRepository


def connection_lost(*args, **kwargs):
    raise SQLAlchemyError("connection lost")


@pytest.mark.parametrize(
    "read",
    [
        lambda repo: repo.find_booking_by_id(1),
        lambda repo: repo.find_booking_by_id(1, owner_id=STANDARD_ID_2),
        lambda repo: repo.find_overlapping(PARKING_1, datetime(2030, 1, 1), datetime(2030, 1, 2)),
        lambda repo: repo.find_user_by_id(STANDARD_ID_2),
    ],
)
def test_failed_read_raises_persistence_error(db, monkeypatch, read):
    monkeypatch.setattr(db, "execute", connection_lost)
    monkeypatch.setattr(db, "get", connection_lost)

    with pytest.raises(PersistenceError):
        read(BookingRepository(db))


def test_failed_write_raises_persistence_error(db, monkeypatch):
    monkeypatch.setattr(db, "execute", connection_lost)

    with pytest.raises(PersistenceError):
        BookingRepository(db).update_booking_times(1, datetime(2030, 1, 1), datetime(2030, 1, 2))
