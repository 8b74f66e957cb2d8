# models/person.py

"""
Represents a person affiliated with an institution.

`Person` holds the identity fields shared by every role: name, school, birth date,
username, and an affiliation tag. The email address is derived from the username
and the school's domain rather than stored.

`Student` and `Instructor` extend `Person` with role-specific collections. A plain
`Person` carries `EntityKind.PERSON` regardless of its affiliation string, so it is
never accepted where a student or instructor is required.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

import core.formatters as formatters
from core.config import BIRTH_DATE_INPUT_FORMAT
from models.types import EntityKind

if TYPE_CHECKING:
    from models.institution import Institution


class Person:

    kind = EntityKind.PERSON

    def __init__(
        self,
        last_name: str,
        first_name: str,
        school: Institution,
        date_of_birth: datetime.date | str,
        username: str,
        affiliation: str,
    ):
        self._last_name: str = last_name
        self._first_name: str = first_name
        self._school: Institution = school
        self._date_of_birth: datetime.date = Person.validate_birth_date_input(
            date_of_birth
        )
        self._username: str = username
        self._affiliation: str = affiliation

    # === properties ===

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def full_name(self) -> str:
        return formatters.format_full_name(self._first_name, self._last_name)

    @property
    def sort_name(self) -> str:
        return formatters.format_sort_name(self._first_name, self._last_name)

    @property
    def school(self) -> Institution:
        return self._school

    @property
    def date_of_birth(self) -> datetime.date:
        return self._date_of_birth

    @property
    def username(self) -> str:
        return self._username

    @property
    def affiliation(self) -> str:
        return self._affiliation

    @property
    def email(self) -> str:
        return f"{self._username}@{self._school.domain}"

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._last_name}, {self._first_name}, {self._username})"

    def __str__(self) -> str:
        return "\n".join(self._display_lines())

    def _display_lines(self) -> list[str]:
        return [
            f"Name: {self.full_name}",
            f"School: {self._school.name}",
            f"DOB: {formatters.format_birth_date(self._date_of_birth)}",
            f"Username: {self._username}",
            f"Email: {self.email}",
            f"Affiliation: {self._affiliation}",
        ]

    # === data validators ===

    @staticmethod
    def validate_birth_date_input(date_of_birth: datetime.date | str) -> datetime.date:
        """
        Validates and normalizes a birth date.

        Accepts either a `datetime.date` (a `datetime.datetime` is truncated to its date)
        or a string in `M/D/YYYY` form, such as "1/1/2001".

        Args:
            date_of_birth: The birth date as a date object or string.

        Returns:
            The birth date as a `datetime.date`.

        Raises:
            ValueError: If the string cannot be parsed, or the input is neither a date nor a string.
        """
        if isinstance(date_of_birth, datetime.datetime):
            return date_of_birth.date()

        if isinstance(date_of_birth, datetime.date):
            return date_of_birth

        if isinstance(date_of_birth, str):
            try:
                return datetime.datetime.strptime(
                    date_of_birth.strip(), BIRTH_DATE_INPUT_FORMAT
                ).date()
            except ValueError:
                raise ValueError(
                    f"Invalid input. Birth date must use M/D/YYYY, got '{date_of_birth}'."
                )

        raise ValueError(
            f"Invalid input. Birth date must be a date or string, got {type(date_of_birth).__name__}."
        )
