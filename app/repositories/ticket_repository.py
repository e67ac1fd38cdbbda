from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.models.movie_session import MovieSession
from app.models.ticket import Ticket, TicketStatus


class TicketRepository:
    """Ticket store backed by the ORM session."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, ticket_id: int) -> Optional[Ticket]:
        return self.db.query(Ticket).filter(Ticket.id == ticket_id).first()

    def get_with_details(self, ticket_id: int) -> Optional[Ticket]:
        return (
            self.db.query(Ticket)
            .options(
                joinedload(Ticket.session).joinedload(MovieSession.movie),
                joinedload(Ticket.session).joinedload(MovieSession.hall),
                joinedload(Ticket.user),
            )
            .filter(Ticket.id == ticket_id)
            .first()
        )

    def get_booked_tickets(self, session_id: int, row: Optional[int] = None) -> List[Ticket]:
        query = self.db.query(Ticket).filter(
            Ticket.session_id == session_id,
            Ticket.status == TicketStatus.booked,
        )
        if row is not None:
            query = query.filter(Ticket.row_number == row)
        return query.all()

    def get_user_tickets(self, user_id: int) -> List[Ticket]:
        return (
            self.db.query(Ticket)
            .options(
                joinedload(Ticket.session).joinedload(MovieSession.movie),
                joinedload(Ticket.session).joinedload(MovieSession.hall),
            )
            .filter(Ticket.user_id == user_id)
            .order_by(Ticket.booking_time.desc())
            .all()
        )

    def list_tickets(
        self,
        page: int,
        limit: int,
        session_id: Optional[int] = None,
        status: Optional[TicketStatus] = None,
    ) -> Tuple[List[Ticket], int]:
        query = self.db.query(Ticket).options(
            joinedload(Ticket.session).joinedload(MovieSession.movie),
            joinedload(Ticket.user),
        )
        if session_id is not None:
            query = query.filter(Ticket.session_id == session_id)
        if status is not None:
            query = query.filter(Ticket.status == status)

        total = query.count()
        tickets = (
            query.order_by(Ticket.booking_time.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return tickets, total

    def create_ticket(
        self,
        session_id: int,
        user_id: int,
        row: int,
        seat: int,
        booking_time: datetime,
        status: TicketStatus = TicketStatus.booked,
    ) -> Ticket:
        """Insert a ticket. Raises IntegrityError if the seat is already booked."""
        ticket = Ticket(
            session_id=session_id,
            user_id=user_id,
            row_number=row,
            seat_number=seat,
            booking_time=booking_time,
            status=status,
        )
        self.db.add(ticket)
        return self.save(ticket)

    def save(self, ticket: Ticket) -> Ticket:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(ticket)
        return ticket

    def delete(self, ticket: Ticket) -> None:
        self.db.delete(ticket)
        self.db.commit()
