# cli/main.py

"""
Start Menu for the Registrar CLI.

Configures logging, sets up the `Institution` for the session, and dispatches to the Catalog, People, and Registration menus.
"""

import logging
import os
from typing import cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import catalog_menu, people_menu, registration_menu
from core.config import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR
from models.institution import Institution


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Start menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    configure_logging()

    institution = create_institution()

    if institution is None:
        exit_program()

    title = formatters.format_banner_text(f"REGISTRAR: {institution.name}")
    options = [
        ("Course Catalog", catalog_menu.run),
        ("People", people_menu.run),
        ("Registration and Grading", registration_menu.run),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            menu_response(institution)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()

    # unknown names map back to a "Level ..." string rather than an int
    if not isinstance(logging.getLevelName(level), int):
        level = DEFAULT_LOG_LEVEL

    logging.basicConfig(format=LOG_FORMAT, level=level)


def create_institution() -> Institution | None:
    """
    Prompts for the institution name and email domain.

    Returns:
        Institution: The new `Institution` for this session.
        None: If the user cancels either prompt.
    """
    name = helpers.prompt_user_input_or_cancel(
        "Enter the institution name (e.g. Quinnipiac University, leave blank to cancel):"
    )

    if name is MenuSignal.CANCEL:
        return None
    name = cast(str, name)

    domain = helpers.prompt_user_input_or_cancel(
        "Enter the email domain (e.g. quinnipiac.edu, leave blank to cancel):"
    )

    if domain is MenuSignal.CANCEL:
        return None
    domain = cast(str, domain)

    return Institution(name, domain)


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
