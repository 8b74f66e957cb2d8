# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Registrar application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for user input, including the composite key that identifies a course offering
- Handling user selections and confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, NamedTuple, TypeVar

import cli.model_formatters as model_formatters
import core.formatters as formatters
from core.response import Response
from models.institution import Institution
from models.instructor import Instructor
from models.student import Student

T = TypeVar("T")


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


class OfferingRequest(NamedTuple):
    course_name: str
    department: str
    number: str
    section_number: str
    year: str
    quarter: str


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # casts choice to int and adjusts for zero-index, retrieves action from tuple
            return options[int(choice) - 1][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_response(response: Response) -> None:
    if response.success:
        print(f"\n{response.detail}")
    else:
        display_response_failure(response)


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


# === prompt user input methods ===


# Prompt Helpers
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n):").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_fields_or_cancel(labels: Iterable[str]) -> list[str] | MenuSignal:
    """
    Prompts for several required text fields in order.

    Returns:
        The entered values, or `MenuSignal.CANCEL` as soon as any field is left blank.
    """
    values = []

    for label in labels:
        value = prompt_user_input_or_cancel(f"Enter {label} (leave blank to cancel):")

        if value is MenuSignal.CANCEL:
            return MenuSignal.CANCEL

        values.append(value)

    return values


def prompt_offering_request() -> OfferingRequest | MenuSignal:
    fields = prompt_fields_or_cancel(
        [
            "the course name",
            "the department",
            "the course number",
            "the section number",
            "the year (e.g. 2024)",
            "the quarter (e.g. 1)",
        ]
    )

    if fields is MenuSignal.CANCEL:
        return MenuSignal.CANCEL

    return OfferingRequest(*fields)


# === finder and select methods ===


def prompt_selection_from_list(
    list_data: list[T],
    list_description: str,
    sort_key: Callable[[T], Any] = lambda x: x,
    formatter: Callable[[T], str] = lambda x: str(x),
) -> T | None:
    """
    Prompts the user to select an item from a list of records.

    Args:
        list_data (list[T]): The records to choose from.
        list_description (str): A short description used in prompts and headings (e.g. "students").
        sort_key (Callable[[T], Any], optional): Sort function for ordering the list. Defaults to identity.
        formatter (Callable[[T], str], optional): Function to convert each record to a display string. Defaults to str().

    Returns:
        T: The selected record if a valid index is chosen.
        None: If the list is empty or the user cancels with "0".
    """
    if not list_data:
        print(f"\nThere are no {list_description.lower()}.")
        return None

    sorted_list = sorted(list_data, key=sort_key)

    while True:
        print(f"\n{formatters.format_banner_text(list_description)}")

        display_results(sorted_list, True, formatter)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return None

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return sorted_list[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


def find_student_from_list(institution: Institution) -> Student | MenuSignal:
    student = prompt_selection_from_list(
        list(institution.students.values()),
        "Enrolled Students",
        lambda x: x.sort_name,
        model_formatters.format_person_oneline,
    )

    return MenuSignal.CANCEL if student is None else student


def find_instructor_from_list(institution: Institution) -> Instructor | MenuSignal:
    instructor = prompt_selection_from_list(
        list(institution.faculty.values()),
        "Faculty",
        lambda x: x.sort_name,
        model_formatters.format_person_oneline,
    )

    return MenuSignal.CANCEL if instructor is None else instructor
