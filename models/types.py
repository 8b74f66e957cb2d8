# models/types.py

"""
Holds the entity-kind tags and composite key types shared by the models.

`EntityKind` is the discriminant every model class carries as a class attribute.
`require_kind()` gates institution-level operations on that tag, so a wrong-kind
argument is rejected explicitly rather than by whatever attribute access fails first.

`OfferingKey` and `TranscriptKey` replace string-concatenated keys with named tuples.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple


class EntityKind(str, Enum):
    COURSE = "course"
    COURSE_OFFERING = "course_offering"
    PERSON = "person"
    STUDENT = "student"
    INSTRUCTOR = "instructor"


def kind_of(entity: Any) -> EntityKind | None:
    kind = getattr(entity, "kind", None)
    return kind if isinstance(kind, EntityKind) else None


def is_kind(entity: Any, kind: EntityKind) -> bool:
    return kind_of(entity) is kind


def require_kind(entity: Any, kind: EntityKind, message: str) -> None:
    """
    Validates that an entity carries the expected `EntityKind` tag.

    Args:
        entity (Any): The object under test.
        kind (EntityKind): The required tag.
        message (str): The error message used if the check fails.

    Raises:
        TypeError: If the entity is untagged or carries a different tag.
    """
    if not is_kind(entity, kind):
        raise TypeError(message)


def _period_rank(value: str) -> tuple[int, int, str]:
    # numeric years/quarters compare as numbers, anything else falls back to text
    return (0, int(value), "") if value.isdecimal() else (1, 0, value)


class OfferingKey(NamedTuple):
    department: str
    number: str
    year: str
    quarter: str
    section_number: str


class TranscriptKey(NamedTuple):
    course_number: str
    section_number: str
    year: str
    quarter: str
    department: str = ""

    @property
    def period_sort_key(self) -> tuple:
        return (_period_rank(self.year), _period_rank(self.quarter))

    def __str__(self) -> str:
        return f"{self.course_number}-{self.section_number}-{self.year}-{self.quarter}"
