"""Domain errors raised by the booking services.

Each error carries the HTTP status it maps to; the handlers in
``app.core.exception_handlers`` turn them into ``{"detail": ...}`` responses.
"""


class BookingError(Exception):
    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgument(BookingError, ValueError):
    """Non-positive or non-numeric input. Also a ValueError so pydantic validators can raise it."""
    status_code = 400


class OutOfBounds(BookingError):
    status_code = 400


class SeatAlreadyBooked(BookingError):
    status_code = 409


class HallUnavailable(BookingError):
    status_code = 409


class NotFoundError(BookingError):
    status_code = 404


class SessionNotFound(NotFoundError):
    pass


class HallNotFound(NotFoundError):
    pass


class MovieNotFound(NotFoundError):
    pass


class TicketNotFound(NotFoundError):
    pass


class StoreUnavailable(BookingError):
    status_code = 503


class TicketNotCancellable(BookingError):
    status_code = 409
