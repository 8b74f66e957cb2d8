# models/course_offering.py

"""
Represents a scheduled offering of a `Course`: one section in a given year and quarter.

A `CourseOffering` owns its roster (`registered_students`) and its grade map, which is
keyed by student username. Offerings are located by the Institution through their
composite `OfferingKey`, not by object identity.

Includes functionality for:
- Registering students onto the roster
- Submitting and looking up letter grades
- Matching a (department, number, section, year, quarter) request

Notes:
- `register_students()` does not de-duplicate; the Institution is responsible for that.
- Grade submission is a soft-failure operation and always returns a `Response`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

import core.formatters as formatters
from core.config import INVALID_GRADE_MESSAGE, VALID_GRADES
from core.response import ErrorCode, Response
from models.course import Course
from models.types import EntityKind, OfferingKey, TranscriptKey, is_kind

if TYPE_CHECKING:
    from models.instructor import Instructor
    from models.student import Student

logger = logging.getLogger(__name__)


class CourseOffering:

    kind = EntityKind.COURSE_OFFERING

    def __init__(
        self,
        course: Course,
        section_number: str,
        year: str,
        quarter: str,
        instructor: Instructor | None = None,
    ):
        self._course = course
        self._section_number = section_number
        self._year = year
        self._quarter = quarter
        self.instructor: Instructor | None = instructor
        self._registered_students: list[Student] = []
        self._grades: dict[str, str] = {}

    # === properties ===

    @property
    def course(self) -> Course:
        return self._course

    @property
    def section_number(self) -> str:
        return self._section_number

    @property
    def year(self) -> str:
        return self._year

    @property
    def quarter(self) -> str:
        return self._quarter

    @property
    def registered_students(self) -> list[Student]:
        return self._registered_students

    @property
    def grades(self) -> dict[str, str]:
        return self._grades

    @property
    def key(self) -> OfferingKey:
        return OfferingKey(
            department=self._course.department,
            number=self._course.number,
            year=self._year,
            quarter=self._quarter,
            section_number=self._section_number,
        )

    @property
    def transcript_key(self) -> TranscriptKey:
        return TranscriptKey(
            course_number=self._course.number,
            section_number=self._section_number,
            year=self._year,
            quarter=self._quarter,
            department=self._course.department,
        )

    # === data accessors ===

    def matches(
        self,
        department: str,
        number: str,
        section_number: str,
        year: str,
        quarter: str,
    ) -> bool:
        return self.key == OfferingKey(department, number, year, quarter, section_number)

    def get_students(self) -> list[Student]:
        return self._registered_students

    def is_registered(self, student: Student) -> bool:
        # identity, not equality: the roster holds the shared Student objects
        return any(s is student for s in self._registered_students)

    def get_grade(self, student: Student | str) -> str | None:
        username = student if isinstance(student, str) else student.username
        return self._grades.get(username)

    # === data manipulators ===

    def register_students(self, students: Iterable[Student]) -> None:
        """
        Appends students to the roster and records this offering in each student's history.

        Args:
            students (Iterable[Student]): The students to register.

        Raises:
            ValueError: If any entry is not a `Student` with a non-empty username. Entries are
                validated before any mutation, so a bad entry leaves the roster untouched.

        Notes:
            - Duplicates are not suppressed here; `Institution.register_student_for_course()` checks the roster first.
        """
        students = list(students)

        for student in students:
            CourseOffering.validate_student_entry(student)

        for student in students:
            self._registered_students.append(student)
            student.record_offering(self)

        logger.debug("Registered %d student(s) in %s", len(students), self)

    def submit_grade(self, student: Student, grade: str) -> Response:
        """
        Records a letter grade for a student registered in this offering.

        Args:
            student (Student): The student being graded.
            grade (str): A symbol from the grade scale (A+ through F).

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the grade was recorded.
                    - False if the target is not a student, the grade is not on the scale, or the student is not registered.
                - detail (str | None):
                    - On success, the recorded grade symbol.
                    - On failure, "Please enter a valid grade" or a not-registered message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_GRADE` if the target is not a student or the symbol is invalid.
                    - `ErrorCode.NOT_REGISTERED` if the student is not on the roster.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "grade" (str): The recorded grade symbol.
                    - On failure:
                        - None

        Notes:
            - On success, both `grades` and the student's transcript are updated.
            - On failure, no state changes.
        """
        if not is_kind(student, EntityKind.STUDENT) or grade not in VALID_GRADES:
            logger.info("Rejected grade %r for %s", grade, self)
            return Response.fail(
                detail=INVALID_GRADE_MESSAGE,
                error=ErrorCode.INVALID_GRADE,
            )

        if not self.is_registered(student):
            logger.info("Rejected grade for unregistered student %s", student.username)
            return Response.fail(
                detail=f"{student.full_name} is not registered in {self}",
                error=ErrorCode.NOT_REGISTERED,
            )

        self._grades[student.username] = grade
        student.record_grade(self.transcript_key, grade)

        return Response.succeed(
            detail=grade,
            data={
                "grade": grade,
            },
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"CourseOffering({self._course.name}, {self._section_number}, {self._year}, {self._quarter})"

    def __str__(self) -> str:
        course = self._course
        text = (
            f"{course.name} {course.department}-{course.number}-{self._section_number} "
            f"({formatters.format_term(self._quarter, self._year)})"
        )
        if self.instructor is not None:
            text += f", taught by {self.instructor.full_name}"
        return text

    # === data validators ===

    @staticmethod
    def validate_student_entry(student: Any) -> None:
        """
        Validates that a roster entry has the shape needed for later grade lookups.

        Raises:
            ValueError: If the entry is not tagged as a student or has no username.
        """
        if not is_kind(student, EntityKind.STUDENT) or not getattr(
            student, "username", None
        ):
            raise ValueError(
                f"Invalid input. Only students with a username can be registered, got {student!r}."
            )
