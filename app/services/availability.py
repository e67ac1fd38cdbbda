import logging
from collections import Counter
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import InvalidArgument, StoreUnavailable
from app.repositories.ticket_repository import TicketRepository
from app.services.seat_map import available_seats_in_row, rows_with_capacity

logger = logging.getLogger(__name__)


def _require_positive(**values: int) -> None:
    for name, value in values.items():
        if value <= 0:
            raise InvalidArgument(f"{name} must be greater than 0")


class BookingAvailabilityChecker:
    """Answers seat and row availability questions from persisted tickets.

    Only tickets with status ``Booked`` occupy a seat; pending and cancelled
    tickets are ignored.
    """

    def __init__(self, tickets: TicketRepository):
        self.tickets = tickets

    def is_seat_available(self, session_id: int, row: int, seat: int) -> bool:
        _require_positive(session_id=session_id, row=row, seat=seat)
        logger.info(
            "Checking seat availability for session %s, row %s, seat %s",
            session_id, row, seat,
        )
        try:
            booked = self.tickets.get_booked_tickets(session_id, row=row)
        except SQLAlchemyError as exc:
            logger.exception("Ticket lookup failed for session %s", session_id)
            raise StoreUnavailable("Seat availability could not be checked") from exc

        is_booked = any(t.seat_number == seat for t in booked)
        logger.info(
            "Seat in session %s, row %s, seat %s is %s",
            session_id, row, seat, "booked" if is_booked else "available",
        )
        return not is_booked

    def available_seats_for_row(self, session_id: int, row: int, seats_per_row: int) -> List[int]:
        _require_positive(session_id=session_id, row=row, seats_per_row=seats_per_row)
        try:
            booked = self.tickets.get_booked_tickets(session_id, row=row)
        except SQLAlchemyError as exc:
            logger.exception("Ticket lookup failed for session %s", session_id)
            raise StoreUnavailable("Available seats could not be loaded") from exc

        seats = available_seats_in_row((t.seat_number for t in booked), seats_per_row)
        logger.info(
            "Found %d available seats for session %s, row %s",
            len(seats), session_id, row,
        )
        return seats

    def rows_with_available_seats(self, session_id: int, total_rows: int, seats_per_row: int) -> List[int]:
        """
        Rows that still have at least one free seat.

        A failed ticket lookup returns every row instead of raising, so a
        store outage never blocks the seat picker. The booking itself is
        still guarded by the unique seat index.
        """
        _require_positive(session_id=session_id, total_rows=total_rows, seats_per_row=seats_per_row)
        all_rows = list(range(1, total_rows + 1))

        try:
            booked = self.tickets.get_booked_tickets(session_id)
        except SQLAlchemyError:
            logger.exception(
                "Ticket lookup failed for session %s, returning all %d rows",
                session_id, total_rows,
            )
            return all_rows

        if not booked:
            logger.info("No booked tickets for session %s, all rows available", session_id)
            return all_rows

        counts = Counter(t.row_number for t in booked)
        rows = rows_with_capacity(counts, total_rows, seats_per_row)
        logger.info("Session %s has %d of %d rows with free seats", session_id, len(rows), total_rows)
        return rows
