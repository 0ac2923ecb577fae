# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Grade Calculator application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling student selection
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
Every prompt reads exactly one line through the `read_line` callable it is given, trimmed of surrounding whitespace.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.app_context import AppContext
from core.response import Response
from core.validators import parse_mark
from models.student import Student


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
    read_line: Callable[[str], str] = input,
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "exit" option. Defaults to "Return".
        read_line (Callable[[str], str], optional): Source of input lines. Defaults to `input`.

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:", read_line)

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError(index)

            # retrieves action from tuple
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


# === prompt user input methods ===


# Prompt Helpers
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
# - `prompt_mark_input()` loops until a valid mark is entered. There is no retry limit.


def prompt_user_input(prompt: str, read_line: Callable[[str], str] = input) -> str:
    return read_line(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(
    prompt: str, read_line: Callable[[str], str] = input
) -> str | MenuSignal:
    response = prompt_user_input(prompt, read_line)
    return MenuSignal.CANCEL if response == "" else response


def prompt_mark_input(subject: str, read_line: Callable[[str], str] = input) -> float:
    while True:
        parse_response = parse_mark(
            prompt_user_input(f"Mark for {subject} (0-100):", read_line)
        )

        if parse_response.success:
            return parse_response.data["mark"]

        print(parse_response.detail)


# === finder and select methods ===


def find_student_from_list(context: AppContext) -> Student | MenuSignal:
    """
    Lists every registered student and prompts the user to select one by identifier.

    Args:
        context (AppContext): The active session.

    Returns:
        The selected `Student` object, or `MenuSignal.CANCEL` if there are no students or no match is found.
    """
    registry = context.registry

    if registry.is_empty:
        print("\nNo students found. Add a student first.")
        return MenuSignal.CANCEL

    print("\nAvailable students:")
    display_results(registry, formatter=model_formatters.format_student_oneline)

    id = prompt_user_input("Enter student id:", context.read_line)

    registry_response = registry.find_student_by_id(id)

    if not registry_response.success:
        print(f"\n{registry_response.detail}")
        return MenuSignal.CANCEL

    return registry_response.record


# === often used messages ===


def display_banner(title: str) -> None:
    print(f"\n{formatters.format_banner_text(title)}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
