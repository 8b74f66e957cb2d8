# models/student.py

"""
Represents a student at an institution.

Extends `Person` with the student's offering history (`course_list`) and transcript.
Credits and GPA are never stored; both are recomputed on every access from the
offerings in `course_list`, pulling the student's grade from each offering.

Includes functionality for:
- Summing credits over the offering history (repeated offerings count again)
- Computing a credit-weighted GPA over validly graded offerings
- Listing transcript keys, most recent academic period first

Notes:
- `course_list` is appended to by `CourseOffering.register_students()`.
- `transcript` is written by `CourseOffering.submit_grade()`.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

import core.formatters as formatters
from core.config import GRADE_POINTS
from models.person import Person
from models.types import EntityKind, TranscriptKey

if TYPE_CHECKING:
    from models.course_offering import CourseOffering
    from models.institution import Institution


class Student(Person):

    kind = EntityKind.STUDENT

    def __init__(
        self,
        last_name: str,
        first_name: str,
        school: Institution,
        date_of_birth: datetime.date | str,
        username: str,
    ):
        super().__init__(
            last_name, first_name, school, date_of_birth, username, "student"
        )
        self._course_list: list[CourseOffering] = []
        self._transcript: dict[TranscriptKey, str] = {}

    # === properties ===

    @property
    def course_list(self) -> list[CourseOffering]:
        return self._course_list

    @property
    def transcript(self) -> dict[TranscriptKey, str]:
        return self._transcript

    @property
    def credits(self) -> int:
        return sum(offering.course.credits for offering in self._course_list)

    @property
    def gpa(self) -> float:
        earned_points = 0.0
        available_credits = 0

        for offering in self._course_list:
            grade = offering.get_grade(self)

            if grade is not None and grade in GRADE_POINTS:
                earned_points += GRADE_POINTS[grade] * offering.course.credits
                available_credits += offering.course.credits

        return earned_points / available_credits if available_credits else 0

    # === data accessors ===

    def list_courses(self) -> list[TranscriptKey]:
        return sorted(
            self._transcript, key=lambda key: key.period_sort_key, reverse=True
        )

    # === data manipulators ===

    def record_offering(self, offering: CourseOffering) -> None:
        self._course_list.append(offering)

    def record_grade(self, key: TranscriptKey, grade: str) -> None:
        self._transcript[key] = grade

    # === dunder methods ===

    def _display_lines(self) -> list[str]:
        return super()._display_lines() + [
            f"GPA: {formatters.format_gpa(self.gpa)}",
            f"Credits: {self.credits}",
        ]
