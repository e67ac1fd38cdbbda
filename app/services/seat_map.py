"""
Coordinate transforms over a rectangular seat grid.

A hall is ``rows_count`` rows of ``seats_per_row`` seats. Seats can be
addressed either as ``(row, seat)`` pairs or by a 1-based global seat number
that runs left to right, front to back.
"""
from collections.abc import Iterable, Mapping
from typing import List, Tuple, Union

from app.core.exceptions import InvalidArgument


def _require_positive(name: str, value: int) -> None:
    if value <= 0:
        raise InvalidArgument(f"{name} must be greater than 0")


def to_row_and_seat(global_seat_number: int, seats_per_row: int) -> Tuple[int, int]:
    """Convert a 1-based global seat number into ``(row, seat_in_row)``."""
    _require_positive("seats_per_row", seats_per_row)
    _require_positive("global_seat_number", global_seat_number)

    row = (global_seat_number - 1) // seats_per_row + 1
    seat = (global_seat_number - 1) % seats_per_row + 1
    return row, seat


def to_global_seat_number(row: int, seat: int, seats_per_row: int) -> int:
    """Inverse of :func:`to_row_and_seat`."""
    _require_positive("seats_per_row", seats_per_row)
    _require_positive("row", row)
    _require_positive("seat", seat)
    if seat > seats_per_row:
        raise InvalidArgument(f"seat {seat} exceeds seats_per_row {seats_per_row}")
    return (row - 1) * seats_per_row + seat


def available_seats_in_row(booked_seat_numbers: Iterable[int], seats_per_row: int) -> List[int]:
    """Seats ``1..seats_per_row`` that are not booked, ascending."""
    booked = set(booked_seat_numbers)
    return [seat for seat in range(1, seats_per_row + 1) if seat not in booked]


def rows_with_capacity(
    booked_counts_by_row: Mapping[int, int],
    total_rows: int,
    seats_per_row: int,
) -> List[int]:
    """Rows ``1..total_rows`` with at least one free seat, ascending."""
    return [
        row
        for row in range(1, total_rows + 1)
        if booked_counts_by_row.get(row, 0) < seats_per_row
    ]


def parse_seat_number(value: Union[str, int]) -> int:
    """Parse a seat number received as text (``"7"``) into an int."""
    if isinstance(value, bool):
        raise InvalidArgument("Seat number must be numeric")
    if isinstance(value, int):
        seat = value
    else:
        text = str(value).strip()
        if not text.isdigit():
            raise InvalidArgument(f"Seat number must be numeric, got {value!r}")
        seat = int(text)
    _require_positive("seat_number", seat)
    return seat
