# models/registry.py

"""
The StudentRegistry is the central data object of the program and the "source of truth" for all student records.

Students are stored in a dictionary keyed by identifier. Insertion order is preserved and determines
the order of full reports and of rows in the exported CSV.

Provides functions for adding and finding students, as well as a validator for unique identifiers.
Records live for the duration of the process; there is no removal and no persistence beyond CSV export.
"""

from __future__ import annotations

import logging
from typing import Iterator

from core.response import ErrorCode, Response
from core.validators import normalize_student_id, normalize_student_name
from models.student import Student

logger = logging.getLogger(__name__)


class StudentRegistry:

    def __init__(self):
        self._students: dict[str, Student] = {}

    # === properties ===

    @property
    def students(self) -> dict[str, Student]:
        return self._students

    @property
    def is_empty(self) -> bool:
        return not self._students

    # === data accessors ===

    def list_students(self) -> list[Student]:
        return list(self._students.values())

    def find_student_by_id(self, id: str) -> Response:
        """
        Finds a `Student` object by identifier within `registry.students`.

        Args:
            id (str): The identifier of the `Student` object. Surrounding whitespace is ignored.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` object was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | None):
                    - `ErrorCode.STUDENT_NOT_FOUND` if no match is found.
                - status_code (int):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched `Student` object.

        Notes:
            - This method is read-only and does not raise.
        """
        student = self._students.get(normalize_student_id(id))

        if student is None:
            return Response.fail(
                detail="Student not found.",
                error=ErrorCode.STUDENT_NOT_FOUND,
            )

        return Response.succeed(
            data={
                "record": student,
            },
        )

    # === data manipulators ===

    def add_student(self, id: str, name: str) -> Response:
        """
        Creates a new `Student` and adds it to the `registry.students` dictionary.

        Args:
            id (str): The identifier for the new student. Surrounding whitespace is trimmed.
            name (str): The display name. Trimmed, and replaced by "Unknown" if blank.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` object was created and added.
                    - False if the identifier is blank, already registered, or unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a confirmation message naming the student.
                - error (ErrorCode | None):
                    - `ErrorCode.EMPTY_ID` if the identifier is blank.
                    - `ErrorCode.DUPLICATE_ID` if the identifier is already registered.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int):
                    - 200 on success
                    - 400 for a blank or duplicate identifier
                    - 500 for unexpected errors
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student` object.

        Notes:
            - This method mutates registry state only when successful; a rejected add leaves existing records untouched.
        """
        id = normalize_student_id(id)

        if not id:
            logger.debug("Rejected student with empty id")
            return Response.fail(
                detail="ID cannot be empty.",
                error=ErrorCode.EMPTY_ID,
            )

        try:
            self.require_unique_student_id(id)

            student = Student(id, normalize_student_name(name))
            self._students[student.id] = student

        except ValueError as e:
            logger.debug("Rejected duplicate student id %r", id)
            return Response.fail(
                detail=str(e),
                error=ErrorCode.DUPLICATE_ID,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.debug("Added student %r (%s)", student.id, student.name)

            return Response.succeed(
                detail=f"Student added: {student.id} - {student.name}",
                data={
                    "record": student,
                },
            )

    # === data validators ===

    def require_unique_student_id(self, id: str) -> None:
        """
        Validates that no existing student uses the given identifier.

        Args:
            id (str): The identifier to validate for uniqueness.

        Raises:
            ValueError: If a student with the same identifier already exists.
        """
        if normalize_student_id(id) in self._students:
            raise ValueError("Student ID already exists.")

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, id: object) -> bool:
        return isinstance(id, str) and normalize_student_id(id) in self._students

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students.values())
