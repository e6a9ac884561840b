"""Seat grid: display labels and occupancy queries.

Labels are a zone letter plus the 1-based row: column 0 is the window side
(``W``), columns 1 and 2 the center (``C``), column 3 the aisle (``A``).
Any other column renders as ``X`` and cannot be parsed back.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from ..core.constants import DISPLAY_GRID_COLUMNS, DISPLAY_GRID_ROWS
from .model import Seat, SeatCoordinate, SeatPlanSnapshot

_ZONE_BY_COLUMN = {0: "W", 1: "C", 2: "C", 3: "A"}
UNKNOWN_ZONE = "X"


def to_display_id(coordinate: SeatCoordinate) -> str:
    zone = _ZONE_BY_COLUMN.get(coordinate.column, UNKNOWN_ZONE)
    return f"{zone}{coordinate.row + 1}"


def from_display_id(display_id: str) -> Optional[SeatCoordinate]:
    """Parse a label such as ``W1`` back to a coordinate, or ``None``.

    ``C`` labels are ambiguous between columns 1 and 2. Column 1 is chosen
    only when the label is longer than two characters and its first digit is
    even; every other ``C`` label maps to column 2. Kept as-is for
    compatibility with labels already stored by clients.
    """

    if not isinstance(display_id, str) or len(display_id) < 2:
        return None

    zone = display_id[0].upper()
    suffix = display_id[1:]
    if not (suffix.isascii() and suffix.isdigit()):
        return None

    if zone == "W":
        column = 0
    elif zone == "C":
        column = 1 if len(display_id) > 2 and int(display_id[1]) % 2 == 0 else 2
    elif zone == "A":
        column = 3
    else:
        return None

    row = int(suffix) - 1
    if not 0 <= row < DISPLAY_GRID_ROWS:
        return None
    return SeatCoordinate(row=row, column=column)


class SeatGridModel:
    """Occupancy view over a set of seats laid out on a ``rows x columns`` grid."""

    def __init__(
        self,
        seats: Iterable[Seat] = (),
        *,
        rows: int = DISPLAY_GRID_ROWS,
        columns: int = DISPLAY_GRID_COLUMNS,
    ):
        self._rows = int(rows)
        self._columns = int(columns)
        self._by_coordinate: Dict[SeatCoordinate, Seat] = {}
        for seat in seats:
            existing = self._by_coordinate.get(seat.coordinate)
            # An occupied record wins over an empty one at the same position.
            if existing is None or (seat.is_taken and not existing.is_taken):
                self._by_coordinate[seat.coordinate] = seat

    @classmethod
    def from_snapshot(cls, snapshot: SeatPlanSnapshot, *, rows: int, columns: int) -> "SeatGridModel":
        return cls(snapshot.seats, rows=rows, columns=columns)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def seats(self) -> List[Seat]:
        return sorted(self._by_coordinate.values(), key=lambda s: s.coordinate)

    def contains(self, coordinate: SeatCoordinate) -> bool:
        return 0 <= coordinate.row < self._rows and 0 <= coordinate.column < self._columns

    def coordinates(self) -> Iterator[SeatCoordinate]:
        for row in range(self._rows):
            for column in range(self._columns):
                yield SeatCoordinate(row=row, column=column)

    def seat_at(self, row: int, column: int) -> Optional[Seat]:
        return self._by_coordinate.get(SeatCoordinate(row=row, column=column))

    def is_occupied(self, row: int, column: int) -> bool:
        seat = self.seat_at(row, column)
        return seat is not None and seat.is_taken

    def is_own_seat(self, row: int, column: int, student_id: int) -> bool:
        seat = self.seat_at(row, column)
        return seat is not None and seat.occupant_id is not None and seat.occupant_id == student_id

    def seat_of(self, student_id: int) -> Optional[Seat]:
        for seat in self._by_coordinate.values():
            if seat.occupant_id == student_id:
                return seat
        return None

    def free_coordinates(self) -> List[SeatCoordinate]:
        return [c for c in self.coordinates() if not self.is_occupied(c.row, c.column)]


def is_occupied(grid: SeatGridModel, row: int, column: int) -> bool:
    return grid.is_occupied(row, column)


def is_own_seat(grid: SeatGridModel, row: int, column: int, student_id: int) -> bool:
    return grid.is_own_seat(row, column, student_id)
