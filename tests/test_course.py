# tests/test_course.py

import pytest

from models.course import Course
from models.types import EntityKind


def test_course_properties(sample_course):
    assert sample_course.department == "Software Engineering"
    assert sample_course.number == "SER330"
    assert sample_course.name == "Software QA"
    assert sample_course.credits == 3
    assert sample_course.kind is EntityKind.COURSE


def test_course_to_str(sample_course):
    assert str(sample_course) == "Software Engineering-SER330: Software QA (3 credits)"


def test_course_is_immutable(sample_course):
    with pytest.raises(AttributeError):
        sample_course.credits = 4


@pytest.mark.parametrize("credits", [0, -3, 2.5, "3", True])
def test_course_rejects_invalid_credits(credits):
    with pytest.raises(ValueError):
        Course("CS", "101", "Intro", credits)
