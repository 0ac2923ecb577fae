# tests/test_student.py

import math

import pytest

from models.student import Student


def test_student_defaults():
    student = Student("s1", "Ana")

    assert student.id == "s1"
    assert student.name == "Ana"
    assert student.marks == {}
    assert not student.has_marks


def test_student_blank_name_defaults_to_unknown():
    assert Student("s1", "").name == "Unknown"
    assert Student("s1", "   ").name == "Unknown"


def test_student_to_str(sample_student):
    assert sample_student.__str__() == "STUDENT: Ana - (ID: s1)"


# === marks ===


def test_set_mark_preserves_insertion_order(sample_student):
    sample_student.set_mark("Art", 50.0)

    assert sample_student.subjects == ["Math", "Sci", "Art"]


def test_set_mark_overwrites_in_place(sample_student):
    sample_student.set_mark("Math", 40.0)

    assert sample_student.subjects == ["Math", "Sci"]
    assert sample_student.mark_for("Math") == 40.0


def test_set_mark_accepts_bounds():
    student = Student("s1", "Ana")
    student.set_mark("Low", 0)
    student.set_mark("High", 100)

    assert student.marks == {"Low": 0.0, "High": 100.0}


@pytest.mark.parametrize("mark", [-0.01, 100.01, math.nan, math.inf])
def test_set_mark_rejects_invalid(mark):
    student = Student("s1", "Ana")

    with pytest.raises(ValueError):
        student.set_mark("Math", mark)

    assert not student.has_marks


def test_set_mark_rejects_blank_subject():
    with pytest.raises(ValueError):
        Student("s1", "Ana").set_mark("  ", 50.0)


def test_marks_property_is_a_copy(sample_student):
    marks = sample_student.marks
    marks["Math"] = 0.0

    assert sample_student.mark_for("Math") == 95.0


def test_mark_for_missing_subject(sample_student):
    assert sample_student.mark_for("Art") is None


# === statistics ===


def test_statistics_without_marks():
    student = Student("s1", "Ana")

    assert student.total() == 0
    assert student.average() == 0
    assert student.grade() == "F"


def test_statistics_with_marks(sample_student):
    assert sample_student.total() == 180.0
    assert sample_student.average() == 90.0
    assert sample_student.grade() == "A+"


def test_average_equals_total_over_count():
    student = Student("s1", "Ana")
    student.set_mark("A", 33.0)
    student.set_mark("B", 67.5)
    student.set_mark("C", 12.25)

    assert student.average() == pytest.approx(student.total() / 3)
