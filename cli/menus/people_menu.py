# cli/menus/people_menu.py

"""
People menu for the Registrar CLI.

Enrolls students and hires instructors, and lists both rosters.
"""

from typing import Callable, cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.response import Response
from models.institution import Institution
from models.instructor import Instructor
from models.person import Person
from models.student import Student


def run(institution: Institution) -> None:
    """
    Top-level loop with dispatch for the People menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("People")
    options = [
        ("Enroll Student", enroll_student),
        ("Hire Instructor", hire_instructor),
        ("View Students", view_students),
        ("View Instructors", view_instructors),
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


# === add people ===


def enroll_student(institution: Institution) -> None:
    add_person(institution, "student", Student, institution.enroll_student)


def hire_instructor(institution: Institution) -> None:
    add_person(institution, "instructor", Instructor, institution.hire_instructor)


def add_person(
    institution: Institution,
    label: str,
    person_class: type[Student] | type[Instructor],
    add_to_institution: Callable[[Person], Response],
) -> None:
    """
    Shared prompt loop for enrolling students and hiring instructors.

    Args:
        institution (Institution): The active `Institution`.
        label (str): "student" or "instructor", used in prompts.
        person_class: The class to construct from the collected fields.
        add_to_institution (Callable[[Person], Response]): The `Institution` method that files the new record.

    Notes:
        - A birth date the model rejects re-prompts the whole record.
        - Duplicate usernames are reported by the `Institution` and end the flow.
    """
    while True:
        fields = helpers.prompt_fields_or_cancel(
            [
                f"the {label}'s last name",
                f"the {label}'s first name",
                "the date of birth (MM/DD/YYYY)",
                "the username",
            ]
        )

        if fields is MenuSignal.CANCEL:
            return
        last_name, first_name, date_of_birth, username = cast(list[str], fields)

        try:
            person = person_class(
                last_name, first_name, institution, date_of_birth, username
            )

        except (TypeError, ValueError) as e:
            print(f"\nCould not create {label}: {e}")
            continue

        print(f"\n{person}")

        if not helpers.confirm_action(f"Add this {label}?"):
            print(f"\nNew {label} discarded.")
            return

        helpers.display_response(add_to_institution(person))
        return


# === view ===


def view_students(institution: Institution) -> None:
    print(f"\n{institution.list_students()}")


def view_instructors(institution: Institution) -> None:
    print(f"\n{institution.list_instructors()}")
