import pytest

from app.core.exceptions import InvalidArgument
from app.services.seat_map import (
    available_seats_in_row,
    parse_seat_number,
    rows_with_capacity,
    to_global_seat_number,
    to_row_and_seat,
)


@pytest.mark.parametrize(
    "global_seat, seats_per_row, expected",
    [
        (1, 10, (1, 1)),
        (10, 10, (1, 10)),
        (11, 10, (2, 1)),
        (25, 10, (3, 5)),
        (7, 1, (7, 1)),
    ],
)
def test_to_row_and_seat(global_seat, seats_per_row, expected):
    assert to_row_and_seat(global_seat, seats_per_row) == expected


@pytest.mark.parametrize("seats_per_row", [1, 3, 10, 17])
def test_to_row_and_seat_round_trip_law(seats_per_row):
    for n in range(1, 5 * seats_per_row + 1):
        row, seat = to_row_and_seat(n, seats_per_row)
        assert 1 <= seat <= seats_per_row
        assert n == (row - 1) * seats_per_row + seat


def test_to_row_and_seat_is_a_bijection_over_the_hall():
    rows, width = 4, 6
    positions = [to_row_and_seat(n, width) for n in range(1, rows * width + 1)]
    assert len(set(positions)) == rows * width
    assert set(positions) == {(r, s) for r in range(1, rows + 1) for s in range(1, width + 1)}
    assert all(to_global_seat_number(r, s, width) == n for n, (r, s) in enumerate(positions, start=1))


@pytest.mark.parametrize("global_seat, seats_per_row", [(0, 10), (-3, 10), (5, 0), (5, -1)])
def test_to_row_and_seat_rejects_non_positive_input(global_seat, seats_per_row):
    with pytest.raises(InvalidArgument):
        to_row_and_seat(global_seat, seats_per_row)


def test_to_global_seat_number_rejects_seat_past_row_width():
    with pytest.raises(InvalidArgument):
        to_global_seat_number(1, 11, 10)


def test_available_seats_in_empty_row():
    assert available_seats_in_row([], 5) == [1, 2, 3, 4, 5]


def test_available_seats_in_full_row():
    assert available_seats_in_row(range(1, 6), 5) == []


def test_available_seats_are_ascending_without_booked():
    assert available_seats_in_row([4, 1, 4], 6) == [2, 3, 5, 6]


def test_rows_with_capacity_excludes_full_rows():
    assert rows_with_capacity({3: 10, 1: 9}, total_rows=5, seats_per_row=10) == [1, 2, 4, 5]


def test_rows_with_capacity_never_includes_full_row():
    counts = {row: 4 for row in range(1, 4)}
    assert rows_with_capacity(counts, total_rows=3, seats_per_row=4) == []


@pytest.mark.parametrize("value, expected", [("7", 7), (" 12 ", 12), (3, 3)])
def test_parse_seat_number(value, expected):
    assert parse_seat_number(value) == expected


@pytest.mark.parametrize("value", ["", "A1", "-2", "0", "1.5", True])
def test_parse_seat_number_rejects_invalid(value):
    with pytest.raises(InvalidArgument):
        parse_seat_number(value)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        parse_seat_number("x")
