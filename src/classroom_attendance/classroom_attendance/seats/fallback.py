from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..core.constants import DEFAULT_SEAT_PROBE_LIMIT, FALLBACK_GRID_COLUMNS, FALLBACK_GRID_ROWS
from ..core.enums import SeatPlanOrigin
from .model import Seat, SeatCoordinate, SeatPlanSnapshot
from .repository import SeatLookup

logger = logging.getLogger(__name__)


def placeholder_seat_id(row: int, column: int) -> int:
    return -(row * 10 + column + 1)


class FallbackReconstructor:
    """Rebuild a displayable seat plan from per-student seat lookups.

    Used when the section seat listings are not readable by the caller. The
    result always has ``rows x columns`` seats: real seats found by probing
    keep their ids, every other position gets an empty placeholder with a
    negative id. Probe failures are ignored.
    """

    def __init__(
        self,
        seats: SeatLookup,
        *,
        rows: int = FALLBACK_GRID_ROWS,
        columns: int = FALLBACK_GRID_COLUMNS,
        probe_limit: int = DEFAULT_SEAT_PROBE_LIMIT,
    ):
        self._seats = seats
        self._rows = int(rows)
        self._columns = int(columns)
        self._probe_limit = int(probe_limit)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def candidates(self, *, requester_id: Optional[int], enrollment_count: int) -> List[int]:
        budget = max(0, int(enrollment_count))
        pool = [i for i in range(1, self._probe_limit + 1) if i != requester_id]
        return pool[:budget]

    def _probe(self, *, section_id: int, student_id: int) -> Optional[Seat]:
        try:
            return self._seats.get_for_student(section_id=section_id, student_id=student_id)
        except Exception as e:
            logger.debug("Seat probe for student %s in section %s failed: %s", student_id, section_id, e)
            return None

    def reconstruct(
        self,
        *,
        section_id: int,
        requester_id: Optional[int],
        enrollment_count: int,
    ) -> SeatPlanSnapshot:
        found: Dict[SeatCoordinate, Seat] = {}

        own = self._probe(section_id=section_id, student_id=requester_id) if requester_id else None
        if own:
            found[own.coordinate] = own

        for student_id in self.candidates(requester_id=requester_id, enrollment_count=enrollment_count):
            seat = self._probe(section_id=section_id, student_id=student_id)
            if not seat:
                continue
            existing = found.get(seat.coordinate)
            # Keep the result independent of probe order when two lookups claim one position.
            if existing is None or (existing is not own and seat.seat_id < existing.seat_id):
                found[seat.coordinate] = seat

        seats = []
        for row in range(self._rows):
            for column in range(self._columns):
                coordinate = SeatCoordinate(row=row, column=column)
                seat = found.pop(coordinate, None)
                if seat is None:
                    seat = Seat(
                        seat_id=placeholder_seat_id(row, column),
                        section_id=section_id,
                        coordinate=coordinate,
                    )
                seats.append(seat)

        if found:
            logger.debug("Dropped %d probed seats outside the %dx%d grid", len(found), self._rows, self._columns)

        logger.warning(
            "Seat plan for section %s rebuilt from %d probed seats",
            section_id,
            sum(1 for s in seats if not s.is_placeholder),
        )
        return SeatPlanSnapshot(section_id=section_id, seats=tuple(seats), origin=SeatPlanOrigin.FALLBACK)
