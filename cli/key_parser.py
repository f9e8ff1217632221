# cli/key_parser.py

"""
Line-oriented input source for the roster CLI.

Each line the operator enters is translated into zero or more `InputEvent`s, depending on the
current mode. An empty line confirms the selection. Unrecognized tokens produce no events.

Command mode, one token per line:
    q              quit
    r              reshuffle the weighted order
    s or /         start searching; "/text" also types "text" into the query
    k, up, ^p      move the selection up
    j, down, ^n    move the selection down

Searching mode:
    :esc           leave search and clear the query
    :up, :down     move the selection
    :left, :right  move the query cursor
    :bs            delete the character left of the cursor
    anything else  typed into the query, one character at a time

Student mode:
    a              answered
    n              absent or no answer
    d              deferred
    esc or :esc    close the card without recording anything
"""

from core.interaction import Action, InputEvent, Mode

COMMAND_TOKENS: dict[str, Action] = {
    "q": Action.QUIT,
    "r": Action.RESHUFFLE,
    "s": Action.BEGIN_SEARCH,
    "/": Action.BEGIN_SEARCH,
    "k": Action.NAVIGATE_UP,
    "up": Action.NAVIGATE_UP,
    "^p": Action.NAVIGATE_UP,
    "j": Action.NAVIGATE_DOWN,
    "down": Action.NAVIGATE_DOWN,
    "^n": Action.NAVIGATE_DOWN,
}

SEARCH_TOKENS: dict[str, Action] = {
    ":esc": Action.ESCAPE,
    ":up": Action.NAVIGATE_UP,
    ":down": Action.NAVIGATE_DOWN,
    ":left": Action.CURSOR_LEFT,
    ":right": Action.CURSOR_RIGHT,
    ":bs": Action.BACKSPACE,
}

STUDENT_TOKENS: dict[str, Action] = {
    "a": Action.ANSWER,
    "n": Action.ABSENT,
    "d": Action.DEFER,
    "esc": Action.ESCAPE,
    ":esc": Action.ESCAPE,
}


def typed_text(text: str) -> list[InputEvent]:
    return [InputEvent(Action.INSERT_CHAR, char) for char in text]


def parse_line(line: str, mode: Mode) -> list[InputEvent]:
    """
    Translates one line of operator input into events for `mode`.

    Args:
        line (str): The raw line, without the trailing newline.
        mode (Mode): The session's current mode.

    Returns:
        A list of events, possibly empty.
    """
    if mode is Mode.SEARCHING:
        # query text keeps its spaces
        token = line.rstrip("\r\n")

        if token == "":
            return [InputEvent(Action.CONFIRM_SELECTION)]

        if token.strip() in SEARCH_TOKENS:
            return [InputEvent(SEARCH_TOKENS[token.strip()])]

        return typed_text(token)

    token = line.strip()

    if token == "":
        if mode is Mode.COMMAND:
            return [InputEvent(Action.CONFIRM_SELECTION)]
        return []

    if mode is Mode.STUDENT:
        action = STUDENT_TOKENS.get(token.lower())
        return [InputEvent(action)] if action else []

    if token.startswith("/") and len(token) > 1:
        return [InputEvent(Action.BEGIN_SEARCH)] + typed_text(token[1:])

    action = COMMAND_TOKENS.get(token.lower())
    return [InputEvent(action)] if action else []
