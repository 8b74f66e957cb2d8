# tests/conftest.py

import pytest

from models.course import Course
from models.course_offering import CourseOffering
from models.institution import Institution
from models.instructor import Instructor
from models.person import Person
from models.student import Student


@pytest.fixture
def sample_institution():
    return Institution("Test University", "test.edu")


@pytest.fixture
def sample_course():
    return Course("Software Engineering", "SER330", "Software QA", 3)


@pytest.fixture
def sample_math_course():
    return Course("Math", "MATH101", "Calculus", 4)


@pytest.fixture
def sample_offering(sample_course):
    return CourseOffering(sample_course, "01", "2024", "1")


@pytest.fixture
def sample_math_offering(sample_math_course):
    return CourseOffering(sample_math_course, "02", "2024", "1")


@pytest.fixture
def sample_student(sample_institution):
    return Student("Doe", "Jane", sample_institution, "1/1/2001", "jdoe")


@pytest.fixture
def sample_instructor(sample_institution):
    return Instructor("Nicolini", "Dylan", sample_institution, "1/1/1980", "dnicolini")


@pytest.fixture
def sample_person(sample_institution):
    return Person("Doe", "John", sample_institution, "1/1/2000", "jdoe", "student")


@pytest.fixture
def scheduled_institution(sample_institution, sample_course, sample_offering):
    sample_institution.add_course(sample_course)
    sample_institution.add_course_offering(sample_offering)
    return sample_institution


# positional request keys for the scheduled Software QA section
@pytest.fixture
def sample_offering_request():
    return ("Software QA", "Software Engineering", "SER330", "01", "2024", "1")
