from typing import List, Optional
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.core.exceptions import OutOfBounds
from app.api.deps import get_availability_checker
from app.repositories.session_repository import SessionRepository
from app.repositories.ticket_repository import TicketRepository
from app.services.availability import BookingAvailabilityChecker
from app.services.seat_map import to_global_seat_number
from app.schemas.hall import HallSummary
from app.schemas.movie_session import (
    MovieSession as MovieSessionSchema,
    SeatMapResponse,
    BookedSeat,
    RowAvailabilityResponse,
    SeatAvailabilityResponse,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_session(db: Session, session_id: int):
    session = SessionRepository(db).get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    if not session.hall:
        raise HTTPException(status_code=404, detail="Hall data not found")
    return session


# ---------------------------------------------------------------------------
# Public: session listing
# ---------------------------------------------------------------------------


@router.get("/", response_model=List[MovieSessionSchema])
def list_sessions(
    start_date: Optional[date] = Query(None, description="Sessions starting on or after this date"),
    end_date: Optional[date] = Query(None, description="Sessions ending on or before this date"),
    genre_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
):
    """Return sessions ordered by start time, optionally filtered by date range and genre."""
    return SessionRepository(db).filter_sessions(start_date, end_date, genre_id)


@router.get("/{session_id}", response_model=MovieSessionSchema)
def get_session(session_id: int, db: Session = Depends(get_db)):
    return _load_session(db, session_id)


# ---------------------------------------------------------------------------
# Public: seat map (seat selection screen)
# ---------------------------------------------------------------------------


@router.get("/{session_id}/seat-map", response_model=SeatMapResponse)
def get_seat_map(
    session_id: int,
    db: Session = Depends(get_db),
    checker: BookingAvailabilityChecker = Depends(get_availability_checker),
):
    """
    Booked seats and the rows that still have capacity.
    Does not require authentication; anyone can view availability.
    """
    session = _load_session(db, session_id)
    hall = session.hall

    booked = TicketRepository(db).get_booked_tickets(session_id)
    booked_seats = sorted(
        (
            BookedSeat(
                row=t.row_number,
                seat=t.seat_number,
                # Tickets left outside the grid by a hall resize have no linear number
                global_seat_number=(
                    to_global_seat_number(t.row_number, t.seat_number, hall.seats_per_row)
                    if t.row_number <= hall.rows_count and t.seat_number <= hall.seats_per_row
                    else None
                ),
            )
            for t in booked
        ),
        key=lambda s: (s.row, s.seat),
    )
    available_rows = checker.rows_with_available_seats(session_id, hall.rows_count, hall.seats_per_row)

    return SeatMapResponse(
        session_id=session_id,
        hall=HallSummary.model_validate(hall),
        total_seats=hall.rows_count * hall.seats_per_row,
        booked_seats=booked_seats,
        available_rows=available_rows,
    )


@router.get("/{session_id}/rows/{row}/available-seats", response_model=RowAvailabilityResponse)
def list_available_seats_in_row(
    session_id: int,
    row: int,
    seats_per_row: Optional[int] = Query(None, description="Defaults to the hall's row width"),
    db: Session = Depends(get_db),
    checker: BookingAvailabilityChecker = Depends(get_availability_checker),
):
    hall = _load_session(db, session_id).hall
    if seats_per_row is None:
        seats_per_row = hall.seats_per_row
    if row > hall.rows_count:
        raise OutOfBounds(f"Row {row} is outside hall '{hall.name}' ({hall.rows_count} rows)")

    seats = checker.available_seats_for_row(session_id, row, seats_per_row)
    return RowAvailabilityResponse(session_id=session_id, row=row, available_seats=seats)


@router.get("/{session_id}/seats/{row}/{seat}/availability", response_model=SeatAvailabilityResponse)
def check_seat_available(
    session_id: int,
    row: int,
    seat: int,
    checker: BookingAvailabilityChecker = Depends(get_availability_checker),
):
    return SeatAvailabilityResponse(
        session_id=session_id,
        row=row,
        seat=seat,
        is_available=checker.is_seat_available(session_id, row, seat),
    )
