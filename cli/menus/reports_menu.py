# cli/menus/reports_menu.py

"""
Report actions for the Grade Calculator CLI.

Provides printing of a single student's report, printing of every student's report in registry order,
and export of all students to a CSV file.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.app_context import AppContext
from cli.menu_helpers import MenuSignal
from models.exporter import export_csv
from models.student import Student


def report_student(context: AppContext) -> None:
    student = helpers.find_student_from_list(context)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    print(f"\n{model_formatters.format_report(student)}")


def report_all_students(context: AppContext) -> None:
    if context.registry.is_empty:
        print("\nNo students available.")
        return

    separator = formatters.format_rule(37)

    for student in context.registry:
        print(f"\n{model_formatters.format_report(student)}")
        print(separator)


def export_report(context: AppContext) -> None:
    """
    Exports every student to CSV at `context.export_path` and reports the outcome.

    Args:
        context (AppContext): The active session.

    Notes:
        - Nothing is written when the registry is empty.
        - A failed write is reported and leaves the registry untouched.
    """
    if context.registry.is_empty:
        print("\nNo students to export.")
        return

    export_response = export_csv(context.registry, context.export_path)

    if not export_response.success:
        helpers.display_response_failure(export_response)
        return

    print(f"\n{export_response.detail}")
