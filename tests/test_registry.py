# tests/test_registry.py

from core.response import ErrorCode


def test_add_student(sample_registry):
    response = sample_registry.add_student("s1", "Ana")

    assert response.success
    assert response.detail == "Student added: s1 - Ana"
    assert "s1" in sample_registry
    assert response.record in sample_registry.students.values()


def test_add_student_trims_input(sample_registry):
    response = sample_registry.add_student("  s1  ", "  Ana ")

    student = response.record
    assert student.id == "s1"
    assert student.name == "Ana"


def test_add_student_blank_name(sample_registry):
    response = sample_registry.add_student("s1", "   ")

    assert response.success
    assert response.record.name == "Unknown"


def test_add_student_empty_id(sample_registry):
    response = sample_registry.add_student("   ", "Ana")

    assert not response.success
    assert response.error is ErrorCode.EMPTY_ID
    assert sample_registry.is_empty


def test_add_student_duplicate_id(sample_registry):
    original = sample_registry.add_student("s1", "Ana").record
    original.set_mark("Math", 70.0)

    response = sample_registry.add_student("s1", "Leo")

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_ID
    assert len(sample_registry) == 1
    assert sample_registry.students["s1"] is original
    assert original.name == "Ana"
    assert original.marks == {"Math": 70.0}


def test_find_student_by_id(populated_registry):
    response = populated_registry.find_student_by_id("S2")

    assert response.success
    assert response.record.name == "Second"


def test_find_student_by_id_not_found(populated_registry):
    response = populated_registry.find_student_by_id("S9")

    assert not response.success
    assert response.error is ErrorCode.STUDENT_NOT_FOUND
    assert response.status_code == 404
    assert response.record is None


def test_list_students_in_insertion_order(sample_registry):
    for id in ["b", "a", "c"]:
        sample_registry.add_student(id, id.upper())

    assert [s.id for s in sample_registry.list_students()] == ["b", "a", "c"]
    assert [s.id for s in sample_registry] == ["b", "a", "c"]
