from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ScheduleEntry, Section


class SectionRepository(Protocol):
    def get_by_id(self, section_id: int) -> Optional[Section]:
        raise NotImplementedError


class ScheduleRepository(Protocol):
    def list_for_section(self, section_id: int) -> Sequence[ScheduleEntry]:
        """Structured schedule entries of a section (may be empty)."""

        raise NotImplementedError
