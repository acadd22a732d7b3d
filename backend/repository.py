import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from errors import PersistenceError
from models import Booking, User

logger = logging.getLogger(__name__)


class BookingRepository:
    """Queries over users, parkings and bookings for one session."""

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, exc: SQLAlchemyError):
        self.db.rollback()
        logger.exception("Failed to %s: %s", action, exc)
        return PersistenceError()

    def insert_booking(
        self, owner_id: int, parking_id: int, start: datetime, end: datetime
    ) -> Booking:
        booking = Booking(
            owner_id=owner_id,
            parking_id=parking_id,
            start_date=start,
            end_date=end,
        )
        try:
            self.db.add(booking)
            self.db.commit()
            self.db.refresh(booking)
        except SQLAlchemyError as e:
            raise self._fail("insert booking", e) from e
        return booking

    def find_booking_by_id(
        self, booking_id: int, owner_id: Optional[int] = None
    ) -> Optional[Booking]:
        query = (
            select(Booking)
            .options(joinedload(Booking.user), joinedload(Booking.parking))
            .where(Booking.id == booking_id)
        )
        if owner_id is not None:
            query = query.where(Booking.owner_id == owner_id)
        try:
            return self.db.execute(query.limit(1)).scalars().first()
        except SQLAlchemyError as e:
            raise self._fail("find booking", e) from e

    def update_booking_times(
        self, booking_id: int, start: datetime, end: datetime
    ) -> None:
        try:
            self.db.execute(
                update(Booking)
                .where(Booking.id == booking_id)
                .values(start_date=start, end_date=end)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("update booking", e) from e
        # identity map still holds the old times
        self.db.expire_all()

    def delete_booking(self, booking_id: int) -> None:
        try:
            self.db.execute(delete(Booking).where(Booking.id == booking_id))
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete booking", e) from e
        self.db.expire_all()

    def find_overlapping(
        self,
        parking_id: int,
        start: datetime,
        end: datetime,
        exclude_id: Optional[int] = None,
    ) -> List[Booking]:
        # closed intervals: a booking ending at 10:00 collides with one starting at 10:00
        query = select(Booking).where(
            Booking.parking_id == parking_id,
            Booking.start_date <= end,
            Booking.end_date >= start,
        )
        if exclude_id is not None:
            query = query.where(Booking.id != exclude_id)
        try:
            return list(self.db.execute(query).scalars().all())
        except SQLAlchemyError as e:
            raise self._fail("find overlapping bookings", e) from e

    def find_user_by_id(self, user_id: int) -> Optional[User]:
        try:
            return self.db.get(User, user_id)
        except SQLAlchemyError as e:
            raise self._fail("find user", e) from e
