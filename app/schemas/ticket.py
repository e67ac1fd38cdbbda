from typing import Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime

from app.models.ticket import TicketStatus
from app.schemas.movie_session import MovieSession as MovieSessionSchema
from app.schemas.user import UserSummary
from app.services.seat_map import parse_seat_number


# Ticket: Create (POST /tickets).
# Either row_number + seat_number, or global_seat_number as picked on the hall plan.
class TicketCreate(BaseModel):
    session_id: int = Field(gt=0)
    row_number: Optional[int] = None
    seat_number: Optional[int] = None
    global_seat_number: Optional[int] = None

    @field_validator("seat_number", "global_seat_number", mode="before")
    @classmethod
    def parse_numeric_string(cls, v: Union[str, int, None]):
        if v is None or v == "":
            return None
        return parse_seat_number(v)

    @model_validator(mode="after")
    def check_seat_selection(self):
        by_position = self.row_number is not None and self.seat_number is not None
        if by_position == (self.global_seat_number is not None):
            raise ValueError(
                "Provide either row_number and seat_number, or global_seat_number"
            )
        return self


# Ticket: Update (admin PATCH /admin/tickets/{id})
class TicketUpdate(BaseModel):
    row_number: int
    seat_number: int
    status: Optional[TicketStatus] = None

    @field_validator("seat_number", mode="before")
    @classmethod
    def parse_numeric_string(cls, v):
        return parse_seat_number(v)


# Ticket: DB response
class Ticket(BaseModel):
    id: int
    session_id: int
    user_id: int
    row_number: int
    seat_number: int
    booking_time: datetime
    status: TicketStatus

    class Config:
        from_attributes = True


# Ticket with session details: used in GET /tickets/me
class TicketWithSession(Ticket):
    session: Optional[MovieSessionSchema] = None

    class Config:
        from_attributes = True


# Ticket: Admin view (GET /admin/tickets, includes user info)
class AdminTicket(TicketWithSession):
    user: Optional[UserSummary] = None

    class Config:
        from_attributes = True
