class BookingAPIError(Exception):
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthError(BookingAPIError):
    default_message = "Forbidden"


class NotFoundError(BookingAPIError):
    default_message = "Not Found"


class ConflictError(BookingAPIError):
    default_message = "Unprocessable Entity"


class InternalError(BookingAPIError):
    default_message = "Internal Server Error"


class PersistenceError(InternalError):
    """A statement failed in the database (constraint violation, lost connection...)."""
