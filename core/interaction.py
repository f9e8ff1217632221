# core/interaction.py

"""
Interaction states and the operator command surface.

The interaction state is a single tagged union:
- `CommandMode`: the default; navigate, reshuffle, or start a search.
- `SearchingMode`: the query box is active and typed characters edit it.
- `StudentModal`: one student's frozen snapshot is on screen. It carries the mode to return
  to, so leaving the modal never has to work out where it came from.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from models.student import Student


class Mode(str, Enum):
    COMMAND = "Command"
    SEARCHING = "Searching"
    STUDENT = "Student"


class Action(str, Enum):
    QUIT = "quit"
    RESHUFFLE = "reshuffle"
    BEGIN_SEARCH = "begin-search"
    NAVIGATE_UP = "navigate-up"
    NAVIGATE_DOWN = "navigate-down"
    CONFIRM_SELECTION = "confirm-selection"
    ESCAPE = "escape"
    INSERT_CHAR = "insert-char"
    BACKSPACE = "backspace"
    CURSOR_LEFT = "cursor-left"
    CURSOR_RIGHT = "cursor-right"
    ANSWER = "answer"
    ABSENT = "absent"
    DEFER = "defer"


@dataclass(frozen=True)
class InputEvent:
    """One operator command. `char` is only set for `Action.INSERT_CHAR`."""

    action: Action
    char: str | None = None


@dataclass(frozen=True)
class CommandMode:
    pass


@dataclass(frozen=True)
class SearchingMode:
    pass


@dataclass(frozen=True)
class StudentModal:
    return_to: CommandMode | SearchingMode
    snapshot: Student


InteractionState = CommandMode | SearchingMode | StudentModal


LEGAL_ACTIONS: dict[Mode, frozenset[Action]] = {
    Mode.COMMAND: frozenset(
        {
            Action.QUIT,
            Action.RESHUFFLE,
            Action.BEGIN_SEARCH,
            Action.NAVIGATE_UP,
            Action.NAVIGATE_DOWN,
            Action.CONFIRM_SELECTION,
        }
    ),
    Mode.SEARCHING: frozenset(
        {
            Action.CONFIRM_SELECTION,
            Action.NAVIGATE_UP,
            Action.NAVIGATE_DOWN,
            Action.INSERT_CHAR,
            Action.BACKSPACE,
            Action.CURSOR_LEFT,
            Action.CURSOR_RIGHT,
            Action.ESCAPE,
        }
    ),
    Mode.STUDENT: frozenset(
        {
            Action.ANSWER,
            Action.ABSENT,
            Action.DEFER,
            Action.ESCAPE,
        }
    ),
}


def mode_of(state: InteractionState) -> Mode:
    if isinstance(state, StudentModal):
        return Mode.STUDENT

    if isinstance(state, SearchingMode):
        return Mode.SEARCHING

    return Mode.COMMAND


def is_legal(state: InteractionState, action: Action) -> bool:
    return action in LEGAL_ACTIONS[mode_of(state)]
