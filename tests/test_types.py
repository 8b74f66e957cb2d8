# tests/test_types.py

import pytest

from models.types import EntityKind, TranscriptKey, is_kind, kind_of, require_kind


def test_kind_tags(sample_course, sample_offering, sample_person, sample_student):
    assert kind_of(sample_course) is EntityKind.COURSE
    assert kind_of(sample_offering) is EntityKind.COURSE_OFFERING
    assert kind_of(sample_person) is EntityKind.PERSON
    assert kind_of(sample_student) is EntityKind.STUDENT


def test_untagged_objects_have_no_kind():
    assert kind_of("jdoe") is None
    assert kind_of(object()) is None
    assert not is_kind(None, EntityKind.STUDENT)


def test_student_is_not_tagged_as_person(sample_student):
    assert not is_kind(sample_student, EntityKind.PERSON)


def test_require_kind_raises_type_error(sample_instructor):
    with pytest.raises(TypeError, match="Only accepts student object"):
        require_kind(sample_instructor, EntityKind.STUDENT, "Only accepts student object")


def test_transcript_key_period_ordering_is_numeric():
    earlier = TranscriptKey("CS110", "01", "2024", "2")
    later = TranscriptKey("CS110", "01", "2024", "10")

    assert later.period_sort_key > earlier.period_sort_key
    assert str(later) == "CS110-01-2024-10"


def test_transcript_key_non_decimal_digits_sort_as_text():
    numeric = TranscriptKey("CS110", "01", "2024", "3")
    superscript = TranscriptKey("CS110", "01", "2024", "²")

    assert superscript.period_sort_key > numeric.period_sort_key
