from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user, get_booking_workflow
from app.models.user import User
from app.repositories.ticket_repository import TicketRepository
from app.services.booking import TicketBookingWorkflow
from app.schemas.ticket import (
    TicketCreate,
    Ticket as TicketSchema,
    TicketWithSession,
)

router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.post("/", response_model=TicketSchema, status_code=status.HTTP_201_CREATED)
def book_ticket(
    data: TicketCreate,
    current_user: User = Depends(get_current_user),
    workflow: TicketBookingWorkflow = Depends(get_booking_workflow),
):
    """
    Book a single seat for a session.

    Either pass `row_number` + `seat_number`, or a `global_seat_number`
    counted left to right, front to back across the hall.
    """
    if data.global_seat_number is not None:
        return workflow.book_global_seat(data.session_id, current_user.id, data.global_seat_number)
    return workflow.book_seat(data.session_id, current_user.id, data.row_number, data.seat_number)


@router.get("/me", response_model=List[TicketWithSession])
def list_my_tickets(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Return the authenticated user's tickets, newest first."""
    return TicketRepository(db).get_user_tickets(current_user.id)


@router.patch("/{ticket_id}/cancel", response_model=TicketSchema)
def cancel_ticket(
    ticket_id: int,
    current_user: User = Depends(get_current_user),
    workflow: TicketBookingWorkflow = Depends(get_booking_workflow),
):
    """Cancel one of your booked tickets. The seat becomes available again."""
    return workflow.cancel_ticket(ticket_id, user_id=current_user.id)
