# tests/test_person.py

import datetime

import pytest

from models.person import Person
from models.types import EntityKind


def test_person_properties(sample_person, sample_institution):
    assert sample_person.last_name == "Doe"
    assert sample_person.first_name == "John"
    assert sample_person.school is sample_institution
    assert sample_person.date_of_birth == datetime.date(2000, 1, 1)
    assert sample_person.username == "jdoe"
    assert sample_person.affiliation == "student"
    assert sample_person.full_name == "John Doe"
    assert sample_person.sort_name == "Doe, John"


def test_person_email_is_derived_from_school_domain(sample_person):
    assert sample_person.email == "jdoe@test.edu"


def test_person_to_str(sample_person):
    output = str(sample_person)

    assert "John Doe" in output
    assert "School: Test University" in output
    assert "DOB: Jan 1, 2000" in output
    assert "Username: jdoe" in output
    assert "Email: jdoe@test.edu" in output
    assert "Affiliation: student" in output


def test_person_kind_ignores_affiliation(sample_person):
    assert sample_person.kind is EntityKind.PERSON


def test_person_accepts_date_objects(sample_institution):
    person = Person(
        "Doe",
        "John",
        sample_institution,
        datetime.datetime(1999, 12, 31, 8, 30),
        "jdoe",
        "staff",
    )

    assert person.date_of_birth == datetime.date(1999, 12, 31)


@pytest.mark.parametrize("birth_date", ["2000-01-01", "13/1/2000", "", None])
def test_person_rejects_invalid_birth_date(sample_institution, birth_date):
    with pytest.raises(ValueError):
        Person("Doe", "John", sample_institution, birth_date, "jdoe", "student")


def test_instructor_properties(sample_instructor):
    assert sample_instructor.affiliation == "instructor"
    assert sample_instructor.kind is EntityKind.INSTRUCTOR
    assert sample_instructor.course_list == []
    assert sample_instructor.email == "dnicolini@test.edu"


def test_instructor_to_str(sample_instructor, sample_offering):
    sample_instructor.add_offering(sample_offering)
    output = str(sample_instructor)

    assert "Dylan Nicolini" in output
    assert "Affiliation: instructor" in output
    assert "Courses Taught: 1" in output
