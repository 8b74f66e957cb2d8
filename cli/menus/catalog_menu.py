# cli/menus/catalog_menu.py

"""
Course Catalog menu for the Registrar CLI.

This module covers the catalog side of an `Institution`:
- Adding courses to the catalog
- Scheduling course offerings for a course already in the catalog
- Viewing the catalog and the schedule for a term

Validation errors raised by the model constructors are reported and the prompt is repeated.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.course import Course
from models.course_offering import CourseOffering
from models.institution import Institution


def run(institution: Institution) -> None:
    """
    Top-level loop with dispatch for the Course Catalog menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Course Catalog")
    options = [
        ("Add Course", add_course),
        ("Add Course Offering", add_course_offering),
        ("View Course Catalog", view_catalog),
        ("View Course Schedule", view_schedule),
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


# === add course ===


def add_course(institution: Institution) -> None:
    """
    Prompts for the course fields and adds the resulting `Course` to the catalog.

    Notes:
        - Credits must be a positive whole number; invalid input re-prompts.
        - Duplicate course names are rejected by `Institution.add_course()`.
    """
    while True:
        fields = helpers.prompt_fields_or_cancel(
            ["the department", "the course number", "the course name", "the credits"]
        )

        if fields is MenuSignal.CANCEL:
            return
        department, number, name, credits_input = cast(list[str], fields)

        try:
            course = Course(department, number, name, int(credits_input))

        except (TypeError, ValueError) as e:
            print(f"\nCould not create course: {e}")
            continue

        print(f"\n{model_formatters.format_course_multiline(course)}")

        if not helpers.confirm_action("Add this course to the catalog?"):
            print("\nCourse discarded.")
            return

        helpers.display_response(institution.add_course(course))
        return


# === add course offering ===


def add_course_offering(institution: Institution) -> None:
    course = helpers.prompt_selection_from_list(
        list(institution.catalog.values()),
        "Course Catalog",
        lambda x: x.name,
        model_formatters.format_course_oneline,
    )

    if course is None:
        return

    fields = helpers.prompt_fields_or_cancel(
        ["the section number", "the year (e.g. 2024)", "the quarter (e.g. 1)"]
    )

    if fields is MenuSignal.CANCEL:
        return
    section_number, year, quarter = cast(list[str], fields)

    offering = CourseOffering(course, section_number, year, quarter)

    print(f"\n{model_formatters.format_offering_multiline(offering)}")

    if not helpers.confirm_action("Add this offering to the schedule?"):
        print("\nOffering discarded.")
        return

    helpers.display_response(institution.add_course_offering(offering))


# === view ===


def view_catalog(institution: Institution) -> None:
    print(f"\n{institution.list_course_catalog()}")


def view_schedule(institution: Institution) -> None:
    fields = helpers.prompt_fields_or_cancel(
        ["the year (e.g. 2024)", "the quarter (e.g. 1)"]
    )

    if fields is MenuSignal.CANCEL:
        return
    year, quarter = cast(list[str], fields)

    department = helpers.prompt_user_input_or_none(
        "Enter a department to filter by (leave blank for all):"
    )

    print(f"\n{institution.list_course_schedule(year, quarter, department)}")
