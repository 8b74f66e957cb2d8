# cli/model_formatters.py

# anything that renders domain objects for the terminal
from textwrap import dedent

import core.formatters as formatters
from models.course import Course
from models.course_offering import CourseOffering
from models.person import Person
from models.student import Student

# === person formatters ===


def format_person_oneline(person: Person) -> str:
    return f"{person.sort_name:<25} | {person.username:<12} | {person.email}"


def format_student_record(student: Student) -> str:
    transcript_lines = [
        f"... {str(key):<25} {student.transcript[key]}"
        for key in student.list_courses()
    ] or ["... [NO GRADES RECORDED]"]

    return "\n".join(
        [
            formatters.format_banner_text(student.full_name),
            str(student),
            formatters.format_heading("Transcript"),
            *transcript_lines,
        ]
    )


# === course formatters ===


def format_course_oneline(course: Course) -> str:
    return f"{course.name:<25} | {course.department}-{course.number} | {course.credits} cr"


def format_course_multiline(course: Course) -> str:
    return dedent(
        f"""\
        Course:
        ... Name: {course.name}
        ... Department: {course.department}
        ... Number: {course.number}
        ... Credits: {course.credits}"""
    )


# === offering formatters ===


def format_offering_multiline(offering: CourseOffering) -> str:
    instructor = (
        offering.instructor.full_name if offering.instructor else "[UNASSIGNED]"
    )

    return dedent(
        f"""\
        Course Offering:
        ... Course: {offering.course.name}
        ... Section: {offering.section_number}
        ... Term: {formatters.format_term(offering.quarter, offering.year)}
        ... Instructor: {instructor}
        ... Registered: {len(offering.registered_students)}"""
    )
