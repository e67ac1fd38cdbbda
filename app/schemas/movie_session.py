from typing import Optional, List
from pydantic import BaseModel, Field, field_validator
from decimal import Decimal
from datetime import datetime, timezone

from app.schemas.hall import HallSummary
from app.schemas.movie import MovieSummary


def _to_naive_utc(value: datetime) -> datetime:
    # Session times are stored timezone-naive, in UTC
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# Session: Create (POST /admin/sessions). end_time is derived from the movie duration.
class MovieSessionCreate(BaseModel):
    movie_id: int
    hall_id: int
    start_time: datetime
    price: Decimal = Field(gt=0)

    @field_validator("start_time")
    @classmethod
    def normalize_start_time(cls, v):
        return _to_naive_utc(v)


# Session: Update (PATCH /admin/sessions/{id})
class MovieSessionUpdate(BaseModel):
    movie_id: Optional[int] = None
    hall_id: Optional[int] = None
    start_time: Optional[datetime] = None
    price: Optional[Decimal] = Field(default=None, gt=0)

    @field_validator("start_time")
    @classmethod
    def normalize_start_time(cls, v):
        return _to_naive_utc(v) if v is not None else v


# Session: DB response
class MovieSession(BaseModel):
    id: int
    movie_id: int
    hall_id: int
    start_time: datetime
    end_time: datetime
    price: Decimal
    movie: Optional[MovieSummary] = None
    hall: Optional[HallSummary] = None

    class Config:
        from_attributes = True


# --- Seat map (seat selection screen) ---

class BookedSeat(BaseModel):
    row: int
    seat: int
    global_seat_number: Optional[int] = None


class SeatMapResponse(BaseModel):
    session_id: int
    hall: HallSummary
    total_seats: int
    booked_seats: List[BookedSeat]
    available_rows: List[int]


class RowAvailabilityResponse(BaseModel):
    session_id: int
    row: int
    available_seats: List[int]


class SeatAvailabilityResponse(BaseModel):
    session_id: int
    row: int
    seat: int
    is_available: bool
