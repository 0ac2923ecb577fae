# tests/test_response.py

import pytest

from core.response import ErrorCode, Response


def test_succeed():
    response = Response.succeed(detail="done", data={"x": 1})

    assert response.success
    assert response.error is None
    assert response.status_code == 200
    assert response.data == {"x": 1}
    assert response.record is None
    assert str(response) == "Success: done"


def test_succeed_with_record(sample_student):
    response = Response.succeed(data={"record": sample_student})

    assert response.record is sample_student


def test_fail():
    response = Response.fail(detail="Student not found.", error=ErrorCode.STUDENT_NOT_FOUND)

    assert not response.success
    assert response.data == {}
    assert response.status_code == 404
    assert str(response) == "Error: STUDENT_NOT_FOUND - Student not found."


@pytest.mark.parametrize(
    "error, expected",
    [
        (ErrorCode.EMPTY_ID, 400),
        (ErrorCode.DUPLICATE_ID, 400),
        (ErrorCode.INVALID_NUMBER, 400),
        (ErrorCode.STUDENT_NOT_FOUND, 404),
        (ErrorCode.IO_ERROR, 500),
        (ErrorCode.INTERNAL_ERROR, 500),
    ],
)
def test_fail_status_follows_error_code(error, expected):
    assert Response.fail(detail="x", error=error).status_code == expected


def test_data_is_copied():
    payload = {"rows": 1}
    response = Response.succeed(data=payload)
    payload["rows"] = 2

    assert response.data == {"rows": 1}
