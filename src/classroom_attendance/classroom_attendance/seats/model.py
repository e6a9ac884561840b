from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.enums import SeatPlanOrigin


@dataclass(frozen=True, order=True)
class SeatCoordinate:
    row: int
    column: int


@dataclass(frozen=True)
class Seat:
    """A seat of a section's seat plan.

    A negative ``seat_id`` marks a placeholder synthesized when the real seat
    listing was unreadable; it only carries the grid shape.
    """

    seat_id: int
    section_id: int
    coordinate: SeatCoordinate
    occupant_id: Optional[int] = None

    @property
    def row(self) -> int:
        return self.coordinate.row

    @property
    def column(self) -> int:
        return self.coordinate.column

    @property
    def is_taken(self) -> bool:
        return self.occupant_id is not None

    @property
    def is_placeholder(self) -> bool:
        return self.seat_id < 0


@dataclass(frozen=True)
class SeatPlanSnapshot:
    """All seats of one section at one point in time."""

    section_id: int
    seats: Tuple[Seat, ...]
    origin: SeatPlanOrigin = SeatPlanOrigin.PRIMARY

    @property
    def is_synthetic(self) -> bool:
        return self.origin == SeatPlanOrigin.FALLBACK

    @property
    def occupied_count(self) -> int:
        return sum(1 for s in self.seats if s.is_taken)
