import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import (
    HallNotFound,
    HallUnavailable,
    OutOfBounds,
    SeatAlreadyBooked,
    SessionNotFound,
    TicketNotCancellable,
    TicketNotFound,
)
from app.models.hall import Hall
from app.models.ticket import Ticket, TicketStatus
from app.repositories.session_repository import SessionRepository
from app.repositories.ticket_repository import TicketRepository
from app.services.availability import BookingAvailabilityChecker
from app.services.seat_map import to_row_and_seat

logger = logging.getLogger(__name__)


class TicketBookingWorkflow:
    """
    Reserves seats for a session.

    A booking attempt runs hall bounds validation, then the availability
    check, then creates a ``Booked`` ticket. The check and the insert are not
    atomic; the partial unique index on booked seats rejects the loser of a
    concurrent race, and that rejection is reported as ``SeatAlreadyBooked``.
    """

    def __init__(
        self,
        sessions: SessionRepository,
        tickets: TicketRepository,
        availability: Optional[BookingAvailabilityChecker] = None,
    ):
        self.sessions = sessions
        self.tickets = tickets
        self.availability = availability or BookingAvailabilityChecker(tickets)

    # -----------------------------------------------------------------------
    # Steps
    # -----------------------------------------------------------------------

    def _load_hall(self, session_id: int) -> Hall:
        session = self.sessions.get_session(session_id)
        if not session:
            raise SessionNotFound(f"Session not found, ID: {session_id}")

        hall = self.sessions.get_hall_for_session(session_id)
        if not hall:
            raise HallNotFound(f"Hall not found for session {session_id}")
        return hall

    @staticmethod
    def _validate_hall_bounds(hall: Hall, row: int, seat: int) -> None:
        if row < 1 or row > hall.rows_count or seat < 1 or seat > hall.seats_per_row:
            raise OutOfBounds(
                f"Seat ({row}, {seat}) is outside hall '{hall.name}' "
                f"({hall.rows_count} rows x {hall.seats_per_row} seats)"
            )

    def _check_availability(self, session_id: int, row: int, seat: int) -> None:
        if not self.availability.is_seat_available(session_id, row, seat):
            raise SeatAlreadyBooked(
                f"Row {row}, seat {seat} is already booked. Please select another seat."
            )

    # -----------------------------------------------------------------------
    # Operations
    # -----------------------------------------------------------------------

    def book_seat(self, session_id: int, user_id: int, row: int, seat: int) -> Ticket:
        logger.info(
            "Booking row %s, seat %s in session %s for user %s",
            row, seat, session_id, user_id,
        )
        hall = self._load_hall(session_id)
        if not hall.can_book_seats:
            raise HallUnavailable(f"Hall '{hall.name}' is not accepting bookings")

        try:
            self._validate_hall_bounds(hall, row, seat)
            self._check_availability(session_id, row, seat)
        except (OutOfBounds, SeatAlreadyBooked) as exc:
            logger.warning("Booking rejected for session %s: %s", session_id, exc.message)
            raise

        try:
            ticket = self.tickets.create_ticket(
                session_id=session_id,
                user_id=user_id,
                row=row,
                seat=seat,
                booking_time=datetime.now(timezone.utc),
                status=TicketStatus.booked,
            )
        except IntegrityError as exc:
            logger.warning(
                "Concurrent booking detected for session %s, row %s, seat %s",
                session_id, row, seat,
            )
            raise SeatAlreadyBooked(
                f"Row {row}, seat {seat} is already booked. Please select another seat."
            ) from exc

        logger.info("Ticket %s booked for user %s", ticket.id, user_id)
        return ticket

    def book_global_seat(self, session_id: int, user_id: int, global_seat_number: int) -> Ticket:
        """Book by linear seat number, as picked on the hall plan."""
        hall = self._load_hall(session_id)
        row, seat = to_row_and_seat(global_seat_number, hall.seats_per_row)
        return self.book_seat(session_id, user_id, row, seat)

    def edit_ticket(
        self,
        ticket_id: int,
        row: int,
        seat: int,
        status: Optional[TicketStatus] = None,
    ) -> Ticket:
        """Reassign a ticket's seat. Unchanged seats skip the bounds and availability checks."""
        ticket = self.tickets.get(ticket_id)
        if not ticket:
            raise TicketNotFound(f"Ticket not found, ID: {ticket_id}")

        logger.info("Updating ticket %s to row %s, seat %s", ticket_id, row, seat)

        if (ticket.row_number, ticket.seat_number) != (row, seat):
            hall = self._load_hall(ticket.session_id)
            self._validate_hall_bounds(hall, row, seat)
            self._check_availability(ticket.session_id, row, seat)

        ticket.row_number = row
        ticket.seat_number = seat
        if status is not None:
            ticket.status = status

        try:
            return self.tickets.save(ticket)
        except IntegrityError as exc:
            raise SeatAlreadyBooked(
                f"Row {row}, seat {seat} is already booked. Please select another seat."
            ) from exc

    def cancel_ticket(self, ticket_id: int, user_id: Optional[int] = None) -> Ticket:
        """Cancel a ticket, freeing its seat. ``user_id`` restricts to the owner."""
        ticket = self.tickets.get(ticket_id)
        if not ticket or (user_id is not None and ticket.user_id != user_id):
            raise TicketNotFound(f"Ticket not found, ID: {ticket_id}")

        if ticket.status != TicketStatus.booked:
            raise TicketNotCancellable(
                f"Only booked tickets can be cancelled (current status: '{ticket.status.value}')"
            )

        logger.info("Cancelling ticket %s", ticket_id)
        ticket.status = TicketStatus.cancelled
        return self.tickets.save(ticket)

    def delete_ticket(self, ticket_id: int) -> None:
        ticket = self.tickets.get(ticket_id)
        if not ticket:
            raise TicketNotFound(f"Ticket not found, ID: {ticket_id}")

        logger.info("Deleting ticket %s", ticket_id)
        self.tickets.delete(ticket)
