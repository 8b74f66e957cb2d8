# cli/menus/registration_menu.py

"""
Registration and Grading menu for the Registrar CLI.

This module drives the operations that tie people to scheduled offerings:
- Registering an enrolled student for an offering
- Assigning an instructor to teach an offering
- Submitting a letter grade for a registered student
- Viewing an offering's roster and a student's academic record

Offerings are identified by the full composite key (course name, department, number, section, year, quarter),
which is passed through to the `Institution` lookup unchanged.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal, OfferingRequest
from core.config import VALID_GRADES
from models.institution import Institution
from models.instructor import Instructor
from models.student import Student


def run(institution: Institution) -> None:
    """
    Top-level loop with dispatch for the Registration and Grading menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Registration and Grading")
    options = [
        ("Register Student for Course", register_student),
        ("Assign Instructor to Course", assign_instructor),
        ("Submit Grade", submit_grade),
        ("View Registered Students", view_registered_students),
        ("View Student Record", view_student_record),
    ]
    zero_option = "Return to Start menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(institution)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Start menu")


# === registration ===


def register_student(institution: Institution) -> None:
    student = helpers.find_student_from_list(institution)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    request = helpers.prompt_offering_request()

    if request is MenuSignal.CANCEL:
        return
    request = cast(OfferingRequest, request)

    helpers.display_response(
        institution.register_student_for_course(student, *request)
    )


def assign_instructor(institution: Institution) -> None:
    instructor = helpers.find_instructor_from_list(institution)

    if instructor is MenuSignal.CANCEL:
        return
    instructor = cast(Instructor, instructor)

    request = helpers.prompt_offering_request()

    if request is MenuSignal.CANCEL:
        return
    request = cast(OfferingRequest, request)

    helpers.display_response(institution.assign_instructor(instructor, *request))


# === grading ===


def submit_grade(institution: Institution) -> None:
    """
    Prompts for a student, an offering, and a letter grade, then records the grade.

    Notes:
        - Grades are uppercased before submission, so "b+" is accepted as "B+".
        - An unrecognized grade re-prompts locally instead of round-tripping through the model.
    """
    student = helpers.find_student_from_list(institution)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    request = helpers.prompt_offering_request()

    if request is MenuSignal.CANCEL:
        return
    request = cast(OfferingRequest, request)

    while True:
        grade = helpers.prompt_user_input_or_cancel(
            "Enter the letter grade (e.g. A-, leave blank to cancel):"
        )

        if grade is MenuSignal.CANCEL:
            return
        grade = cast(str, grade).upper()

        if grade not in VALID_GRADES:
            print(f"\nValid grades: {', '.join(sorted(VALID_GRADES))}")
            continue

        break

    helpers.display_response(institution.submit_grade(student, grade, *request))


# === view ===


def view_registered_students(institution: Institution) -> None:
    request = helpers.prompt_offering_request()

    if request is MenuSignal.CANCEL:
        return
    request = cast(OfferingRequest, request)

    listing = institution.list_registered_students(*request)

    if listing:
        print(f"\n{listing}")
    else:
        helpers.display_response_failure(institution.find_course_offering(*request))


def view_student_record(institution: Institution) -> None:
    student = helpers.find_student_from_list(institution)

    if student is MenuSignal.CANCEL:
        return

    print(f"\n{model_formatters.format_student_record(cast(Student, student))}")
