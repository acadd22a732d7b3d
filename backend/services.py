import logging
from datetime import datetime

from errors import ConflictError, NotFoundError
from models import Booking, User
from repository import BookingRepository

logger = logging.getLogger(__name__)

BOOKING_CONFLICT = "Unable to book"
PARKING_NOT_ATTACHED = "Unable to update, parking not attached"
INVALID_TIMEFRAME = "Unable to update booking, invalid timeframe"


class BookingService:
    """Overlap and ownership rules for bookings.

    Admins see and change every booking. A standard user only reaches the
    bookings they created; anyone else's booking looks exactly like a
    missing one.
    """

    def __init__(self, repository: BookingRepository):
        self.repository = repository

    def create(
        self, user_id: int, parking_id: int, start: datetime, end: datetime
    ) -> Booking:
        overlapping = self.repository.find_overlapping(parking_id, start, end)
        if overlapping:
            logger.warning(
                "Parking %s already booked between %s and %s (%d bookings)",
                parking_id, start, end, len(overlapping),
            )
            raise ConflictError(BOOKING_CONFLICT)

        booking = self.repository.insert_booking(user_id, parking_id, start, end)
        logger.info("User %s booked parking %s as booking %s", user_id, parking_id, booking.id)
        return booking

    def get_by_id(self, user: User, booking_id: int) -> Booking:
        if user.is_admin:
            booking = self.repository.find_booking_by_id(booking_id)
        else:
            booking = self.repository.find_booking_by_id(booking_id, owner_id=user.id)

        if booking is None:
            raise NotFoundError()
        return booking

    def delete_by_id(self, user: User, booking_id: int) -> None:
        booking = self.get_by_id(user, booking_id)
        self.repository.delete_booking(booking.id)
        logger.info("User %s deleted booking %s", user.id, booking.id)

    def update(
        self, user: User, booking_id: int, start: datetime, end: datetime
    ) -> None:
        booking = self.get_by_id(user, booking_id)
        if booking.parking is None:
            raise ConflictError(PARKING_NOT_ATTACHED)

        overlapping = self.repository.find_overlapping(
            booking.parking.id, start, end, exclude_id=booking.id
        )
        if overlapping:
            logger.warning(
                "Booking %s can't move to %s - %s, parking %s is taken",
                booking.id, start, end, booking.parking.id,
            )
            raise ConflictError(INVALID_TIMEFRAME)

        self.repository.update_booking_times(booking.id, start, end)
        logger.info("User %s moved booking %s to %s - %s", user.id, booking.id, start, end)
