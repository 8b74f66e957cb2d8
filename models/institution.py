# models/institution.py

"""
The Institution model is the central data object of the program and the single owner of all records.

Students and Instructors are indexed by username, Courses by name in the catalog, and
CourseOfferings by course name in the schedule. Every cross-entity operation (enrollment,
registration, instructor assignment, grading) goes through the Institution, which resolves
the target `CourseOffering` by its composite key and then delegates the mutation.

Two failure styles are used, matching the rest of the models:
- Passing the wrong kind of entity to a mutator is a programming error and raises `TypeError`.
- Business-rule violations (duplicates, missing records, invalid grades) return a failed
  `Response` and leave state unchanged.

Listing methods are read-only and return rendered text blocks for display.
"""

from __future__ import annotations

import logging

import core.formatters as formatters
from core.response import ErrorCode, Response
from models.course import Course
from models.course_offering import CourseOffering
from models.instructor import Instructor
from models.student import Student
from models.types import EntityKind, is_kind, require_kind

logger = logging.getLogger(__name__)


class Institution:

    def __init__(self, name: str, domain: str):
        self._name = name
        self._domain = domain
        self._students: dict[str, Student] = {}
        self._faculty: dict[str, Instructor] = {}
        self._catalog: dict[str, Course] = {}
        self._schedule: dict[str, list[CourseOffering]] = {}

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def domain(self) -> str:
        return self._domain

    # --- core data structures ---

    @property
    def students(self) -> dict[str, Student]:
        return self._students

    @property
    def faculty(self) -> dict[str, Instructor]:
        return self._faculty

    @property
    def catalog(self) -> dict[str, Course]:
        return self._catalog

    @property
    def schedule(self) -> dict[str, list[CourseOffering]]:
        return self._schedule

    # === data accessors ===

    def find_course_offering(
        self,
        course_name: str,
        department: str,
        number: str,
        section_number: str,
        year: str,
        quarter: str,
    ) -> Response:
        """
        Locates a scheduled `CourseOffering` by course name and composite key.

        Args:
            course_name (str): The catalog name, used to select the schedule bucket.
            department (str): The course department.
            number (str): The course number.
            section_number (str): The section number.
            year (str): The academic year.
            quarter (str): The term within the year.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a matching offering is scheduled.
                    - False if the course name has no schedule entry, or no offering under it matches.
                - detail (str | None):
                    - On failure, a human-readable description of what was missing.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` on failure.
                - status_code (int | None):
                    - 200 on success
                    - 404 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (CourseOffering): The first matching offering.
                    - On failure:
                        - "schedule_found" (bool): Whether the course name had a schedule entry.

        Notes:
            - This method is read-only.
            - Offerings are scanned in scheduling order; the first match wins.
        """
        offerings = self._schedule.get(course_name)

        if not offerings:
            return Response.fail(
                detail="Course not found. Please create a course and course offering.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
                data={
                    "schedule_found": False,
                },
            )

        for offering in offerings:
            if offering.matches(department, number, section_number, year, quarter):
                return Response.succeed(
                    data={
                        "record": offering,
                    },
                )

        return Response.fail(
            detail="Matching course offering not found.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
            data={
                "schedule_found": True,
            },
        )

    def get_offerings_for_term(
        self, year: str, quarter: str, department: str | None = None
    ) -> list[CourseOffering]:
        return [
            offering
            for offerings in self._schedule.values()
            for offering in offerings
            if offering.year == year
            and offering.quarter == quarter
            and (not department or offering.course.department == department)
        ]

    # === data manipulators ===

    # --- people ---

    def enroll_student(self, student: Student) -> Response:
        """
        Adds a `Student` to the institution, keyed by username.

        Returns:
            Response: succeeds with "record" in data, or fails with `ErrorCode.DUPLICATE_RECORD`
            (status 409) if the username is already enrolled.

        Raises:
            TypeError: If `student` is not a `Student`.
        """
        require_kind(student, EntityKind.STUDENT, "Only accepts student object")

        if student.username in self._students:
            detail = f"{student.full_name} is already enrolled!"
            logger.info(detail)
            return Response.fail(
                detail=detail,
                error=ErrorCode.DUPLICATE_RECORD,
                status_code=409,
            )

        self._students[student.username] = student
        logger.info("Enrolled student %s at %s", student.username, self._name)

        return Response.succeed(
            detail=f"{student.full_name} successfully enrolled at {self._name}.",
            data={
                "record": student,
            },
        )

    def hire_instructor(self, instructor: Instructor) -> Response:
        """
        Adds an `Instructor` to the faculty, keyed by username.

        Returns:
            Response: succeeds with "record" in data, or fails with `ErrorCode.DUPLICATE_RECORD`
            (status 409) if the username is already on the faculty.

        Raises:
            TypeError: If `instructor` is not an `Instructor`.
        """
        require_kind(instructor, EntityKind.INSTRUCTOR, "Only accepts instructor object")

        if instructor.username in self._faculty:
            detail = f"{instructor.full_name} already works at this institution!"
            logger.info(detail)
            return Response.fail(
                detail=detail,
                error=ErrorCode.DUPLICATE_RECORD,
                status_code=409,
            )

        self._faculty[instructor.username] = instructor
        logger.info("Hired instructor %s at %s", instructor.username, self._name)

        return Response.succeed(
            detail=f"{instructor.full_name} successfully hired at {self._name}.",
            data={
                "record": instructor,
            },
        )

    # --- catalog and schedule ---

    def add_course(self, course: Course) -> Response:
        """
        Adds a `Course` to the catalog, keyed by course name.

        Args:
            course (Course): The catalog entry to add.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the course was added.
                    - False if a course with the same name is already in the catalog.
                - detail (str | None):
                    - On failure, "Course has already been added".
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.DUPLICATE_RECORD` if the name is taken.
                - status_code (int | None):
                    - 200 on success
                    - 409 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Course): The added course.
                    - On failure:
                        - None

        Raises:
            TypeError: If `course` is not a `Course`.

        Notes:
            - A duplicate never replaces the existing catalog entry.
        """
        require_kind(course, EntityKind.COURSE, "Only accepts course object as argument")

        if course.name in self._catalog:
            logger.info("Course %r is already in the catalog", course.name)
            return Response.fail(
                detail="Course has already been added",
                error=ErrorCode.DUPLICATE_RECORD,
                status_code=409,
            )

        self._catalog[course.name] = course
        logger.info("Added course %r to the catalog", course.name)

        return Response.succeed(
            detail=f"{course.name} successfully added to the catalog.",
            data={
                "record": course,
            },
        )

    def add_course_offering(self, offering: CourseOffering) -> Response:
        """
        Adds a `CourseOffering` to the schedule under its course's name.

        Args:
            offering (CourseOffering): The offering to schedule.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the offering was scheduled.
                    - False if the offering's course is not in the catalog.
                - detail (str | None):
                    - On failure, "Please create a course before creating course offering".
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the course is missing from the catalog.
                - status_code (int | None):
                    - 200 on success
                    - 404 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (CourseOffering): The scheduled offering.
                    - On failure:
                        - None

        Raises:
            TypeError: If `offering` is not a `CourseOffering`.
        """
        require_kind(
            offering,
            EntityKind.COURSE_OFFERING,
            "Only accepts course offering as argument",
        )

        course_name = offering.course.name

        if course_name not in self._catalog:
            logger.info("Cannot schedule %s: course is not in the catalog", offering)
            return Response.fail(
                detail="Please create a course before creating course offering",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        self._schedule.setdefault(course_name, []).append(offering)
        logger.info("Scheduled %s", offering)

        return Response.succeed(
            detail=f"{offering} successfully added to the schedule.",
            data={
                "record": offering,
            },
        )

    # --- registration and assignment ---

    def register_student_for_course(
        self,
        student: Student,
        course_name: str,
        department: str,
        number: str,
        section_number: str,
        year: str,
        quarter: str,
    ) -> Response:
        """
        Registers an enrolled student into the scheduled offering matching the composite key.

        Args:
            student (Student): The student to register.
            course_name (str): The catalog name of the course.
            department (str): The course department.
            number (str): The course number.
            section_number (str): The section number.
            year (str): The academic year.
            quarter (str): The term within the year.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added to the roster.
                    - False if no offering matches, the student is not enrolled, or is already registered.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no scheduled offering matches.
                    - `ErrorCode.NOT_ENROLLED` if the student is not enrolled at the institution.
                    - `ErrorCode.ALREADY_REGISTERED` if the student is already on the roster.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no offering matches
                    - 400 or 409 on other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (CourseOffering): The offering the student joined.
                    - On failure:
                        - None

        Notes:
            - A missing offering is a silent no-op: it is logged at DEBUG only.
            - Anything other than a `Student` fails as not enrolled, even if its username matches.
            - On success, the offering is also appended to the student's `course_list`.
        """
        offering_response = self.find_course_offering(
            course_name, department, number, section_number, year, quarter
        )

        if not offering_response.success:
            logger.debug(
                "No offering for registration request %s %s-%s-%s (%s %s)",
                course_name,
                department,
                number,
                section_number,
                quarter,
                year,
            )
            return Response.fail(
                detail=offering_response.detail,
                error=offering_response.error,
                status_code=offering_response.status_code,
            )

        offering = offering_response.data["record"]

        if (
            not is_kind(student, EntityKind.STUDENT)
            or student.username not in self._students
        ):
            logger.debug("Registration skipped: %r is not enrolled", student)
            return Response.fail(
                detail=f"Student is not enrolled at {self._name}.",
                error=ErrorCode.NOT_ENROLLED,
            )

        if offering.is_registered(student):
            detail = f"{student.full_name} is already enrolled in this course"
            logger.info(detail)
            return Response.fail(
                detail=detail,
                error=ErrorCode.ALREADY_REGISTERED,
                status_code=409,
            )

        offering.register_students([student])
        logger.info("Registered %s in %s", student.username, offering)

        return Response.succeed(
            detail=f"{student.full_name} has been registered in {offering}",
            data={
                "record": offering,
            },
        )

    def assign_instructor(
        self,
        instructor: Instructor,
        course_name: str,
        department: str,
        number: str,
        section_number: str,
        year: str,
        quarter: str,
    ) -> Response:
        """
        Assigns an instructor to the scheduled offering matching the composite key.

        Returns:
            Response: succeeds with the offering as "record", or fails with
            `ErrorCode.NOT_FOUND` (no schedule entry, or no matching offering) or
            `ErrorCode.ALREADY_ASSIGNED` (the instructor already teaches it).

        Raises:
            TypeError: If `instructor` is not an `Instructor`.

        Notes:
            - Only the first matching offering is assigned, even if the key is duplicated.
            - Not-found failures are logged at WARNING, unlike registration.
        """
        require_kind(instructor, EntityKind.INSTRUCTOR, "Only accepts instructor object")

        offering_response = self.find_course_offering(
            course_name, department, number, section_number, year, quarter
        )

        if not offering_response.success:
            logger.warning(offering_response.detail)
            return offering_response

        offering = offering_response.data["record"]

        if offering.instructor is instructor:
            detail = f"{instructor.full_name} is already teaching this course"
            logger.info(detail)
            return Response.fail(
                detail=detail,
                error=ErrorCode.ALREADY_ASSIGNED,
                status_code=409,
            )

        offering.instructor = instructor
        instructor.add_offering(offering)

        detail = f"{instructor.full_name} has been assigned to teach {offering}"
        logger.info(detail)

        return Response.succeed(
            detail=detail,
            data={
                "record": offering,
            },
        )

    # --- grading ---

    def submit_grade(
        self,
        student: Student,
        grade: str,
        course_name: str,
        department: str,
        number: str,
        section_number: str,
        year: str,
        quarter: str,
    ) -> Response:
        """
        Resolves the offering by composite key and delegates to `CourseOffering.submit_grade()`.

        Returns:
            Response: The offering's grading response, or the `ErrorCode.NOT_FOUND` failure
            from `find_course_offering()`.
        """
        offering_response = self.find_course_offering(
            course_name, department, number, section_number, year, quarter
        )

        if not offering_response.success:
            return offering_response

        return offering_response.data["record"].submit_grade(student, grade)

    # === listing ===

    def list_students(self) -> str:
        return formatters.format_listing(
            f"Enrolled Students ({self._name})",
            sorted(student.sort_name for student in self._students.values()),
        )

    def list_instructors(self) -> str:
        return formatters.format_listing(
            f"Instructor List ({self._name})",
            sorted(instructor.sort_name for instructor in self._faculty.values()),
        )

    def list_course_catalog(self) -> str:
        return formatters.format_listing(
            f"Course Catalog ({self._name})",
            (str(course) for course in self._catalog.values()),
        )

    def list_course_schedule(
        self, year: str, quarter: str, department: str | None = None
    ) -> str:
        prefix = f"{department}, " if department else ""
        title = f"Course Schedule ({prefix}{formatters.format_term(quarter, year)})"

        offerings = self.get_offerings_for_term(year, quarter, department)

        if not offerings:
            return formatters.format_listing(
                title, ["No offerings during this semester"]
            )

        return formatters.format_listing(title, (str(o) for o in offerings))

    def list_registered_students(
        self,
        course_name: str,
        department: str,
        number: str,
        section_number: str,
        year: str,
        quarter: str,
    ) -> str:
        offering_response = self.find_course_offering(
            course_name, department, number, section_number, year, quarter
        )

        if not offering_response.success:
            return ""

        offering = offering_response.data["record"]

        return formatters.format_listing(
            f"Registered Students List ({offering})",
            sorted(student.sort_name for student in offering.get_students()),
            width=60,
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Institution({self._name}, {self._domain})"

    def __str__(self) -> str:
        return f"{self._name} ({self._domain})"
