from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import Clock, SystemClock
from ..common.validators import require_positive_id
from ..core.exceptions import LookupFailure, ValidationError
from .matcher import ScheduleWindowMatcher
from .model import ScheduleEntry, Section
from .parsing import format_schedule_string
from .repository import ScheduleRepository, SectionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EligibilityResult:
    section_id: int
    section_name: str
    eligible: bool
    checked_at: datetime
    buffer_minutes: int
    schedule: str


class EligibilityService:
    """Answer "can a student check in to this section right now?"."""

    def __init__(
        self,
        sections: SectionRepository,
        schedules: ScheduleRepository,
        *,
        matcher: ScheduleWindowMatcher | None = None,
        clock: Clock | None = None,
    ):
        self._sections = sections
        self._schedules = schedules
        self._matcher = matcher or ScheduleWindowMatcher()
        self._clock = clock or SystemClock()

    def get_section(self, section_id: int) -> Section:
        section = self._sections.get_by_id(require_positive_id(section_id, "Section"))
        if not section:
            raise ValidationError("Section not found")
        return section

    def entries_for(self, section: Section) -> Sequence[ScheduleEntry]:
        # A failed schedule fetch falls back to the section's legacy schedule string.
        try:
            return list(self._schedules.list_for_section(section.section_id))
        except LookupFailure as e:
            logger.warning("Schedules for section %s unavailable, using legacy string: %s", section.section_id, e)
            return []

    def check(self, section_id: int, *, now: Optional[datetime] = None) -> EligibilityResult:
        now = now or self._clock.now()
        section = self.get_section(section_id)
        entries = self.entries_for(section)

        query = self._matcher.query_for(now)
        eligible = self._matcher.is_within_window(entries, query, legacy_schedule=section.schedule)
        logger.debug("Eligibility for section %s at %s: %s", section.section_id, now, eligible)

        return EligibilityResult(
            section_id=section.section_id,
            section_name=section.display_name,
            eligible=eligible,
            checked_at=now,
            buffer_minutes=query.buffer_minutes,
            schedule=format_schedule_string(entries) or (section.schedule or ""),
        )
