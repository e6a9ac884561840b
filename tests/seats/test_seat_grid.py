from __future__ import annotations

from classroom_attendance.seats.grid import SeatGridModel, is_occupied, is_own_seat
from classroom_attendance.seats.model import Seat, SeatCoordinate


def seat(seat_id: int, row: int, column: int, occupant=None) -> Seat:
    return Seat(seat_id=seat_id, section_id=1, coordinate=SeatCoordinate(row=row, column=column), occupant_id=occupant)


def test_occupancy_queries():
    grid = SeatGridModel([seat(1, 0, 0, occupant=5), seat(2, 1, 2, occupant=7), seat(3, 2, 2)])

    assert is_occupied(grid, 0, 0) is True
    assert is_occupied(grid, 1, 2) is True
    assert is_occupied(grid, 2, 2) is False  # seat record without occupant
    assert is_occupied(grid, 6, 3) is False  # no seat record

    assert is_own_seat(grid, 0, 0, 5) is True
    assert is_own_seat(grid, 0, 0, 7) is False
    assert is_own_seat(grid, 2, 2, 5) is False


def test_seat_of_and_free_coordinates():
    grid = SeatGridModel([seat(1, 0, 0, occupant=5)], rows=2, columns=2)

    assert grid.seat_of(5).seat_id == 1
    assert grid.seat_of(6) is None
    assert grid.free_coordinates() == [
        SeatCoordinate(0, 1),
        SeatCoordinate(1, 0),
        SeatCoordinate(1, 1),
    ]


def test_occupied_record_wins_over_empty_duplicate():
    grid = SeatGridModel([seat(-1, 0, 0), seat(10, 0, 0, occupant=3)])
    assert grid.seat_at(0, 0).seat_id == 10


def test_contains_uses_grid_shape():
    grid = SeatGridModel(rows=5, columns=6)
    assert grid.contains(SeatCoordinate(4, 5)) is True
    assert grid.contains(SeatCoordinate(5, 0)) is False
    assert grid.contains(SeatCoordinate(0, -1)) is False
    assert len(list(grid.coordinates())) == 30
