# tests/test_menu_helpers.py

from collections.abc import Iterator

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
from cli.menu_helpers import MenuSignal, OfferingRequest
from core.response import ErrorCode, Response


def feed_input(monkeypatch, answers: list[str]) -> None:
    answer_iter: Iterator[str] = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt: next(answer_iter))


# --- menus ---


def test_display_menu_returns_selected_action(monkeypatch, capsys):
    def action():
        pass

    feed_input(monkeypatch, ["7", "x", "1"])

    assert helpers.display_menu("Title", [("Do it", action)]) is action
    assert capsys.readouterr().out.count("Invalid selection") == 2


def test_display_menu_zero_exits(monkeypatch):
    feed_input(monkeypatch, ["0"])

    assert helpers.display_menu("Title", [("Do it", print)]) is MenuSignal.EXIT


def test_confirm_action(monkeypatch):
    feed_input(monkeypatch, ["maybe", "YES"])
    assert helpers.confirm_action("Continue?")

    feed_input(monkeypatch, ["n"])
    assert not helpers.confirm_action("Continue?")


# --- prompts ---


def test_prompt_input_variants_on_blank(monkeypatch):
    feed_input(monkeypatch, ["   ", ""])

    assert helpers.prompt_user_input_or_cancel("Name:") is MenuSignal.CANCEL
    assert helpers.prompt_user_input_or_none("Name:") is None


def test_prompt_offering_request(monkeypatch):
    feed_input(
        monkeypatch,
        ["Software QA", "Software Engineering", "SER330", "01", "2024", "1"],
    )

    assert helpers.prompt_offering_request() == OfferingRequest(
        "Software QA", "Software Engineering", "SER330", "01", "2024", "1"
    )


def test_prompt_offering_request_cancels_midway(monkeypatch):
    feed_input(monkeypatch, ["Software QA", "Software Engineering", ""])

    assert helpers.prompt_offering_request() is MenuSignal.CANCEL


def test_offering_request_feeds_institution_lookup(
    monkeypatch, scheduled_institution, sample_offering
):
    feed_input(
        monkeypatch,
        ["Software QA", "Software Engineering", "SER330", "01", "2024", "1"],
    )
    request = helpers.prompt_offering_request()

    response = scheduled_institution.find_course_offering(*request)

    assert response.data["record"] is sample_offering


# --- selection ---


def test_find_student_from_list(
    monkeypatch, sample_institution, sample_student, capsys
):
    sample_institution.enroll_student(sample_student)
    feed_input(monkeypatch, ["5", "1"])

    assert helpers.find_student_from_list(sample_institution) is sample_student
    assert model_formatters.format_person_oneline(sample_student) in (
        capsys.readouterr().out
    )


def test_find_student_from_empty_list(sample_institution, capsys):
    assert helpers.find_student_from_list(sample_institution) is MenuSignal.CANCEL
    assert "There are no enrolled students." in capsys.readouterr().out


def test_find_instructor_cancel(monkeypatch, sample_institution, sample_instructor):
    sample_institution.hire_instructor(sample_instructor)
    feed_input(monkeypatch, ["0"])

    assert helpers.find_instructor_from_list(sample_institution) is MenuSignal.CANCEL


# --- response display ---


def test_display_response_failure(capsys):
    helpers.display_response_failure(
        Response.fail(detail="Please enter a valid grade", error=ErrorCode.INVALID_GRADE)
    )

    assert "[ERROR: INVALID_GRADE] Please enter a valid grade" in (
        capsys.readouterr().out
    )


def test_display_response_success(capsys):
    helpers.display_response(Response.succeed(detail="Jane Doe has been enrolled"))

    assert capsys.readouterr().out == "\nJane Doe has been enrolled\n"


# --- record formatting ---


def test_format_student_record_lists_transcript(sample_student, sample_offering):
    sample_offering.register_students([sample_student])
    sample_offering.submit_grade(sample_student, "A")

    record = model_formatters.format_student_record(sample_student)

    assert "SER330-01-2024-1" in record
    assert "GPA: 4.00" in record


def test_format_student_record_without_grades(sample_student):
    assert "[NO GRADES RECORDED]" in model_formatters.format_student_record(
        sample_student
    )
