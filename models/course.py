# models/course.py

"""
Represents a catalog entry: a course that may be scheduled as one or more offerings.

A `Course` is immutable once created. Its `name` is the key used by the
Institution's catalog and schedule, while `department` and `number` form part
of the composite key used to locate a specific `CourseOffering`.
"""

from __future__ import annotations

from models.types import EntityKind


class Course:

    kind = EntityKind.COURSE

    def __init__(
        self,
        department: str,
        number: str,
        name: str,
        credits: int,
    ):
        self._department = department
        self._number = number
        self._name = name
        self._credits = Course.validate_credits_input(credits)

    # === properties ===

    @property
    def department(self) -> str:
        return self._department

    @property
    def number(self) -> str:
        return self._number

    @property
    def name(self) -> str:
        return self._name

    @property
    def credits(self) -> int:
        return self._credits

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Course({self._department}, {self._number}, {self._name}, {self._credits})"

    def __str__(self) -> str:
        return f"{self._department}-{self._number}: {self._name} ({self._credits} credits)"

    # === data validators ===

    @staticmethod
    def validate_credits_input(credits: int) -> int:
        """
        Validates the credit weight of a course.

        Args:
            credits: The proposed credit weight.

        Returns:
            The credit weight, unchanged.

        Raises:
            ValueError: If `credits` is not a positive integer (booleans are rejected).
        """
        if isinstance(credits, bool) or not isinstance(credits, int) or credits <= 0:
            raise ValueError(
                f"Invalid input. Course credits must be a positive integer, got {credits!r}."
            )
        return credits
