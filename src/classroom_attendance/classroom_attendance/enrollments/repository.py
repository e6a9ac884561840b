from __future__ import annotations

from typing import Protocol, Sequence


class EnrollmentRepository(Protocol):
    def list_section_ids_for_student(self, student_id: int) -> Sequence[int]:
        """Sections the student is enrolled in.

        Raises LookupFailure when enrollment data cannot be read.
        """

        raise NotImplementedError
