# cli/model_formatters.py

# anything that renders domain objects as text

import core.formatters as formatters
from models.student import Student

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    return f"{student.id} -> {student.name}"


def format_report(student: Student) -> str:
    """
    Renders a report of a student's marks, total, average, and letter grade.

    Args:
        student (Student): The student to report on.

    Returns:
        A multi-line string. Subjects are listed in the order their marks were first recorded.
        A student without marks gets a single "No marks recorded." line below the header.
    """
    lines = [f"Report for: {student.name} (ID: {student.id})"]

    if not student.has_marks:
        lines.append("No marks recorded.")
        return "\n".join(lines)

    rule = formatters.format_rule()

    lines.append(f"{'Subject':<20} {'Mark':>8}")
    lines.append(rule)

    for subject, mark in student.marks.items():
        lines.append(f"{subject:<20} {formatters.format_decimal(mark):>8}")

    lines.append(rule)
    lines.append(f"Total: {formatters.format_decimal(student.total())}")
    lines.append(f"Average: {formatters.format_decimal(student.average())}")
    lines.append(f"Grade: {student.grade()}")

    return "\n".join(lines)
