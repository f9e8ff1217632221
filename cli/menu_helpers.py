# cli/menu_helpers.py

"""
Helper functions for terminal interaction in the roster CLI.

This module provides utilities for:
- Prompting for a line of operator input
- Clearing the screen between renders
- Displaying standard system messages and error feedback
"""

from enum import Enum

import core.formatters as formatters
from core.response import Response


class MenuSignal(Enum):
    EXIT = "EXIT"


CLEAR_SCREEN = "\033[2J\033[H"


def prompt_user_input(prompt: str) -> str | MenuSignal:
    """
    Reads one line of operator input.

    Returns:
        The raw line (whitespace is preserved so search text keeps its spaces).
        MenuSignal.EXIT: If input is closed (EOF) or interrupted.
    """
    try:
        return input(f"\n{prompt}\n  >> ")

    except (EOFError, KeyboardInterrupt):
        return MenuSignal.EXIT


def clear_screen(enabled: bool = True) -> None:
    if enabled:
        print(CLEAR_SCREEN, end="")


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


def exit_banner() -> None:
    banner = formatters.format_banner_text("Exiting Roster")
    print(f"\n{banner}\n")
