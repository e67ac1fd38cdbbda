from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user, get_booking_workflow
from app.models.user import User
from app.models.ticket import TicketStatus
from app.repositories.ticket_repository import TicketRepository
from app.services.booking import TicketBookingWorkflow
from app.schemas.ticket import AdminTicket, TicketUpdate, Ticket as TicketSchema
from app.schemas.common import PaginatedResponse, total_pages

router = APIRouter(prefix="/admin/tickets", tags=["Admin - Tickets"])


@router.get("/", response_model=PaginatedResponse[AdminTicket])
def list_all_tickets(
    session_id: Optional[int] = Query(None),
    status: Optional[TicketStatus] = Query(None, description="Booked, Pending or Cancelled"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """All tickets, newest first."""
    tickets, total = TicketRepository(db).list_tickets(page, limit, session_id=session_id, status=status)
    return PaginatedResponse(
        data=[AdminTicket.model_validate(t) for t in tickets],
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit),
    )


@router.get("/{ticket_id}", response_model=AdminTicket)
def get_ticket(
    ticket_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    ticket = TicketRepository(db).get_with_details(ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return ticket


@router.patch("/{ticket_id}", response_model=TicketSchema)
def update_ticket(
    ticket_id: int,
    data: TicketUpdate,
    workflow: TicketBookingWorkflow = Depends(get_booking_workflow),
    current_user: User = Depends(get_current_admin_user),
):
    """
    Reassign a ticket's seat or correct its status.
    The new seat is validated against the hall only when it differs from the current one.
    """
    return workflow.edit_ticket(ticket_id, data.row_number, data.seat_number, status=data.status)


@router.delete("/{ticket_id}", status_code=status.HTTP_200_OK)
def delete_ticket(
    ticket_id: int,
    workflow: TicketBookingWorkflow = Depends(get_booking_workflow),
    current_user: User = Depends(get_current_admin_user),
):
    workflow.delete_ticket(ticket_id)
    return {"id": ticket_id, "deleted": True}
