# models/exporter.py

"""
CSV export for the student registry.

Produces one header row and one row per student, in registry order:

    ID, Name, <subject columns...>, Total, Average, Grade

Subject columns are the union of every student's subjects, ordered by first occurrence while walking the
registry in insertion order. Students without a mark for a column get an empty field there.
All numbers are written with two fraction digits and "." as the decimal separator.
"""

from __future__ import annotations

import csv
import logging
from typing import Iterable

import core.formatters as formatters
from core.response import ErrorCode, Response
from models.registry import StudentRegistry
from models.student import Student

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "student_report.csv"


def collect_subjects(students: Iterable[Student]) -> list[str]:
    # dict keeps first-seen order and drops repeats
    subjects: dict[str, None] = {}

    for student in students:
        for subject in student.subjects:
            subjects.setdefault(subject, None)

    return list(subjects)


def build_header(subjects: list[str]) -> list[str]:
    return ["ID", "Name", *subjects, "Total", "Average", "Grade"]


def build_row(student: Student, subjects: list[str]) -> list[str]:
    row = [student.id, student.name]

    for subject in subjects:
        mark = student.mark_for(subject)
        row.append("" if mark is None else formatters.format_decimal(mark))

    row.append(formatters.format_decimal(student.total()))
    row.append(formatters.format_decimal(student.average()))
    row.append(student.grade())

    return row


def export_csv(
    registry: StudentRegistry, path: str = DEFAULT_EXPORT_FILENAME
) -> Response:
    """
    Writes every student in the registry to a CSV file.

    Args:
        registry (StudentRegistry): The registry to export.
        path (str, optional): The destination file path. Defaults to `DEFAULT_EXPORT_FILENAME` in the working directory.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the file was written completely.
                - False if the destination could not be opened or written.
            - detail (str | None):
                - On success, "Exported to: <path>".
                - On failure, a description including the underlying cause.
            - error (ErrorCode | None):
                - `ErrorCode.IO_ERROR` if OSError raised.
                - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
            - status_code (int):
                - 200 on success
                - 500 on failure
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "path" (str): The path written to.
                    - "rows" (int): The number of student rows written.

    Notes:
        - This method is read-only with respect to the registry.
        - Existing files at `path` are overwritten.
        - The file handle is closed on every path; a failure midway may leave a partial file behind.
        - An empty registry produces a header-only file.
    """
    students = registry.list_students()
    subjects = collect_subjects(students)

    logger.debug("Exporting %d students with subject columns %s", len(students), subjects)

    try:
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")

            writer.writerow(build_header(subjects))

            for student in students:
                writer.writerow(build_row(student, subjects))

    except OSError as e:
        logger.error("Failed to write CSV to %s: %s", path, e)
        return Response.fail(
            detail=f"Failed to write CSV: {e}",
            error=ErrorCode.IO_ERROR,
        )

    except Exception as e:
        logger.error("Unexpected error writing CSV to %s: %s", path, e)
        return Response.fail(
            detail=f"Unexpected error: {e}",
            error=ErrorCode.INTERNAL_ERROR,
        )

    else:
        logger.info("Exported %d students to %s", len(students), path)

        return Response.succeed(
            detail=f"Exported to: {path}",
            data={
                "path": path,
                "rows": len(students),
            },
        )
