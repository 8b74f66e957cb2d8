# models/instructor.py

"""
Represents an instructor at an institution.

Extends `Person` with the list of offerings the instructor has been assigned to teach.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from models.person import Person
from models.types import EntityKind

if TYPE_CHECKING:
    from models.course_offering import CourseOffering
    from models.institution import Institution


class Instructor(Person):

    kind = EntityKind.INSTRUCTOR

    def __init__(
        self,
        last_name: str,
        first_name: str,
        school: Institution,
        date_of_birth: datetime.date | str,
        username: str,
    ):
        super().__init__(
            last_name, first_name, school, date_of_birth, username, "instructor"
        )
        self._course_list: list[CourseOffering] = []

    # === properties ===

    @property
    def course_list(self) -> list[CourseOffering]:
        return self._course_list

    # === data manipulators ===

    def add_offering(self, offering: CourseOffering) -> None:
        self._course_list.append(offering)

    # === dunder methods ===

    def _display_lines(self) -> list[str]:
        return super()._display_lines() + [
            f"Courses Taught: {len(self._course_list)}",
        ]
