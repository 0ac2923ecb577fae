# models/student.py

"""
Represents a student and the marks recorded for them.

Stores an immutable identifier, a display name, and an ordered mapping of subject name to mark.
Subjects keep the order in which they were first recorded; setting a mark for an existing subject
overwrites it in place.

Includes functionality for:
- Recording and overwriting marks by subject
- Computing the total, average, and letter grade of recorded marks
- Validating that a mark lies within the allowed range
"""

from __future__ import annotations

import math

from core.grading import to_letter_grade
from core.validators import DEFAULT_NAME, MAX_MARK, MIN_MARK


class Student:

    def __init__(self, id: str, name: str):
        self._id: str = id
        self._name: str = name if name.strip() else DEFAULT_NAME
        self._marks: dict[str, float] = {}

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def marks(self) -> dict[str, float]:
        return self._marks.copy()

    @property
    def subjects(self) -> list[str]:
        return list(self._marks)

    @property
    def has_marks(self) -> bool:
        return bool(self._marks)

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._marks})"

    def __str__(self) -> str:
        return f"STUDENT: {self._name} - (ID: {self._id})"

    # === data accessors ===

    def mark_for(self, subject: str) -> float | None:
        return self._marks.get(subject)

    def total(self) -> float:
        return sum(self._marks.values())

    def average(self) -> float:
        if not self._marks:
            return 0.0

        return self.total() / len(self._marks)

    def grade(self) -> str:
        return to_letter_grade(self.average())

    # === data manipulators ===

    def set_mark(self, subject: str, mark: float) -> None:
        """
        Records a mark for a subject, overwriting any previous mark for the same subject.

        Args:
            subject (str): The subject name. Expected to be trimmed and non-empty.
            mark (float): The mark to record.

        Raises:
            ValueError: If the subject is blank or the mark is outside the allowed range.
        """
        if not subject.strip():
            raise ValueError("Subject name cannot be empty.")

        self._marks[subject] = Student.validate_mark(mark)

    # === data validators ===

    @staticmethod
    def validate_mark(mark: float) -> float:
        """
        Validates that a mark is a finite number between 0 and 100, inclusive.

        Args:
            mark (float): The mark to validate.

        Returns:
            The mark as a float.

        Raises:
            ValueError: If the mark is not finite or lies outside the allowed range.
        """
        mark = float(mark)
        if not math.isfinite(mark) or mark < MIN_MARK or mark > MAX_MARK:
            raise ValueError(
                f"Invalid mark: {mark}. Mark must be between {MIN_MARK:g} and {MAX_MARK:g}."
            )
        return mark
