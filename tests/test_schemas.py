import pytest
from pydantic import ValidationError

from app.models.ticket import TicketStatus
from app.schemas.hall import HallCreate
from app.schemas.ticket import TicketCreate, TicketUpdate


def test_hall_capacity_defaults_to_grid_size():
    hall = HallCreate(name="Red", rows_count=5, seats_per_row=10)
    assert hall.capacity == 50


def test_hall_rejects_empty_grid():
    with pytest.raises(ValidationError):
        HallCreate(name="Red", rows_count=0, seats_per_row=10)


def test_ticket_seat_number_parsed_from_numeric_string():
    ticket = TicketCreate(session_id=1, row_number=2, seat_number="7")
    assert ticket.seat_number == 7


def test_ticket_seat_number_rejects_non_numeric():
    with pytest.raises(ValidationError):
        TicketCreate(session_id=1, row_number=2, seat_number="7A")


def test_ticket_accepts_global_seat_number_alone():
    ticket = TicketCreate(session_id=1, global_seat_number="25")
    assert ticket.global_seat_number == 25
    assert ticket.row_number is None


@pytest.mark.parametrize(
    "payload",
    [
        {"session_id": 1},
        {"session_id": 1, "row_number": 1},
        {"session_id": 1, "row_number": 1, "seat_number": 1, "global_seat_number": 1},
    ],
)
def test_ticket_requires_exactly_one_seat_selection(payload):
    with pytest.raises(ValidationError):
        TicketCreate(**payload)


def test_ticket_update_accepts_status_value():
    update = TicketUpdate(row_number=1, seat_number="3", status="Cancelled")
    assert update.status is TicketStatus.cancelled
    assert update.seat_number == 3
