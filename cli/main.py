# cli/main.py

"""
Main Menu for the Grade Calculator CLI.

Provides the top-level command loop dispatching to the student and report actions,
and the `main()` entry point that configures logging and starts a new session.
"""

import logging

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.app_context import AppContext
from cli.menu_helpers import MenuSignal
from cli.menus import reports_menu, students_menu

LOG_LEVEL = logging.WARNING


def run_cli(context: AppContext) -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Args:
        context (AppContext): The active session, passed to every menu action.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - The loop only ends when the user selects the exit option.
    """
    helpers.display_banner("STUDENT GRADE CALCULATOR")

    title = formatters.format_banner_text("Main Menu")
    options = [
        ("Add student", students_menu.add_student),
        ("Add / Edit marks for a student", students_menu.edit_marks),
        ("Print report for a student", reports_menu.report_student),
        ("Print report for all students", reports_menu.report_all_students),
        ("Export all reports to CSV", reports_menu.export_report),
    ]
    zero_option = "Exit"

    while True:
        menu_response = helpers.display_menu(
            title, options, zero_option, context.read_line
        )

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(context)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    exit_program()


def exit_program() -> None:
    exit_banner = formatters.format_banner_text("Goodbye!")
    print(f"\n{exit_banner}\n")


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        run_cli(AppContext())

    except (KeyboardInterrupt, EOFError):
        print("\nInput closed. Exiting.")


if __name__ == "__main__":
    main()
