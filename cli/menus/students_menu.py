# cli/menus/students_menu.py

"""
Student actions for the Grade Calculator CLI.

This module defines the interface for managing `Student` records, including:
- Adding new students
- Adding or editing marks for an existing student

All operations are routed through the `StudentRegistry` API for consistency and validation.
Invalid input is reported to the console and never leaves a partial record behind.
"""

from typing import cast

import cli.menu_helpers as helpers
from cli.app_context import AppContext
from cli.menu_helpers import MenuSignal
from models.student import Student


# === add student ===


def add_student(context: AppContext) -> None:
    """
    Prompts for an identifier and a name, then adds a new `Student` to the registry.

    Args:
        context (AppContext): The active session.

    Notes:
        - The identifier is checked before the name is requested; a blank or duplicate identifier abandons the operation.
        - A blank name is recorded as "Unknown".
    """
    registry = context.registry

    id = helpers.prompt_user_input("Enter student id:", context.read_line)

    if not id:
        print("\nID cannot be empty.")
        return

    if id in registry:
        print("\nStudent ID already exists.")
        return

    name = helpers.prompt_user_input("Enter student name:", context.read_line)

    registry_response = registry.add_student(id, name)

    if not registry_response.success:
        helpers.display_response_failure(registry_response)
        return

    print(f"\n{registry_response.detail}")


# === edit marks ===


def edit_marks(context: AppContext) -> None:
    """
    Selects a student, then loops prompts for subject names and marks until a blank subject is entered.

    Args:
        context (AppContext): The active session.

    Notes:
        - Each mark is re-prompted until a valid number between 0 and 100 is entered.
        - Entering a subject that already has a mark overwrites it.
    """
    student = helpers.find_student_from_list(context)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    print("\nEnter subject name (or leave blank to finish).")

    while True:
        subject = helpers.prompt_user_input_or_cancel("Subject:", context.read_line)

        if subject is MenuSignal.CANCEL:
            break
        subject = cast(str, subject)

        mark = helpers.prompt_mark_input(subject, context.read_line)

        student.set_mark(subject, mark)

        print(f"Saved: {subject} -> {mark}")
