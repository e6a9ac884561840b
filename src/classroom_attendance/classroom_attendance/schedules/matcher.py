from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Optional, Union

from ..core.constants import DEFAULT_BUFFER_MINUTES
from ..core.exceptions import ParseFailure, ValidationError
from .model import ScheduleEntry, TimeOfDay
from .parsing import find_time_range, parse_time_ampm, schedule_entry_from_record, segments_for_day

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EligibilityQuery:
    """The moment a check-in is attempted, plus the pre-class grace buffer."""

    day_of_week: int
    time: TimeOfDay
    buffer_minutes: int = DEFAULT_BUFFER_MINUTES

    def __post_init__(self) -> None:
        if not 1 <= int(self.day_of_week) <= 7:
            raise ValidationError(f"Invalid day of week: {self.day_of_week}")
        if int(self.buffer_minutes) < 0:
            raise ValidationError("Buffer minutes must not be negative")

    @classmethod
    def at(cls, moment: datetime, *, buffer_minutes: int = DEFAULT_BUFFER_MINUTES) -> "EligibilityQuery":
        return cls(
            day_of_week=moment.isoweekday(),
            time=TimeOfDay(moment.hour, moment.minute),
            buffer_minutes=buffer_minutes,
        )


ScheduleSource = Union[str, Iterable[Any], None]


def _within(start: TimeOfDay, end: TimeOfDay, query: EligibilityQuery) -> bool:
    # Buffered start may fall before midnight; compare on total minutes without wrapping.
    buffered_start = start.total_minutes - int(query.buffer_minutes)
    return buffered_start <= query.time.total_minutes <= end.total_minutes


class ScheduleWindowMatcher:
    """Decide whether "now" falls inside a class's attendance-eligible window.

    Structured entries are tried first; a legacy formatted schedule string is
    the fallback. Malformed entries are skipped, never raised.
    """

    def __init__(self, *, buffer_minutes: int = DEFAULT_BUFFER_MINUTES):
        self._buffer_minutes = int(buffer_minutes)

    @property
    def buffer_minutes(self) -> int:
        return self._buffer_minutes

    def query_for(self, moment: datetime) -> EligibilityQuery:
        return EligibilityQuery.at(moment, buffer_minutes=self._buffer_minutes)

    def is_within_window(
        self,
        entries: ScheduleSource,
        query: EligibilityQuery,
        *,
        legacy_schedule: Optional[str] = None,
    ) -> bool:
        if isinstance(entries, str):
            legacy_schedule = legacy_schedule or entries
            entries = None

        for raw in entries or ():
            if self.entry_matches(raw, query):
                return True

        if isinstance(legacy_schedule, str) and legacy_schedule.strip():
            return self.legacy_matches(legacy_schedule, query)
        return False

    def entry_matches(self, raw: Any, query: EligibilityQuery) -> bool:
        try:
            entry = schedule_entry_from_record(raw)
        except (ParseFailure, ValueError, TypeError, OverflowError) as e:
            logger.debug("Skipping schedule entry %r: %s", raw, e)
            return False

        if not entry.is_valid:
            logger.debug("Skipping schedule entry with start >= end: %s", entry)
            return False

        return entry.day_of_week == query.day_of_week and _within(entry.start_time, entry.end_time, query)

    def legacy_matches(self, schedule: str, query: EligibilityQuery) -> bool:
        for segment in segments_for_day(schedule, query.day_of_week):
            found = find_time_range(segment)
            if not found:
                continue
            try:
                start, end = parse_time_ampm(found[0]), parse_time_ampm(found[1])
            except ParseFailure as e:
                logger.debug("Skipping legacy segment %r: %s", segment, e)
                continue
            if _within(start, end, query):
                return True
        return False


def is_within_window(
    entries: ScheduleSource,
    query: EligibilityQuery,
    *,
    legacy_schedule: Optional[str] = None,
) -> bool:
    """Module-level shortcut for :meth:`ScheduleWindowMatcher.is_within_window`."""

    matcher = ScheduleWindowMatcher(buffer_minutes=query.buffer_minutes)
    return matcher.is_within_window(entries, query, legacy_schedule=legacy_schedule)
