# cli/roster_view.py

"""
Renders a `RosterSession` as plain terminal text.

The view only reads session state: the help line for the current mode, the query box, the
numbered student list with the selection marked, and the Student card while one is open.
"""

import cli.model_formatters as model_formatters
import core.formatters as formatters
from core.interaction import Mode
from core.roster_session import RosterSession

HELP_TEXT: dict[Mode, list[tuple[str, str]]] = {
    Mode.COMMAND: [
        ("q", "quit"),
        ("r", "randomize (biased)"),
        ("s", "search"),
        ("k/j", "navigate students"),
        ("Enter", "select a student"),
    ],
    Mode.SEARCHING: [
        ("text", "type into the query"),
        (":esc", "go back"),
        ("Enter", "select a student"),
        (":up/:down", "navigate students"),
        (":left/:right/:bs", "edit the query"),
    ],
    Mode.STUDENT: [
        ("esc", "go back"),
        ("a", "answer"),
        ("n", "absent or no answer"),
        ("d", "defer"),
    ],
}


def render_help(session: RosterSession) -> str:
    return formatters.format_key_help(HELP_TEXT[session.mode])


def render_query(session: RosterSession) -> str:
    if session.mode is Mode.SEARCHING:
        body = formatters.format_text_with_caret(session.query, session.query_cursor)
    else:
        body = session.query

    return formatters.format_boxed_text("Query", body)


def render_students(session: RosterSession) -> str:
    students = session.visible_students()

    if not students:
        return "  (no matching students)"

    lines = [
        model_formatters.format_student_oneline(student, i == session.selection)
        for i, student in enumerate(students)
    ]

    return "\n".join(lines)


def render_student_card(session: RosterSession) -> str | None:
    snapshot = session.snapshot
    if snapshot is None:
        return None

    banner = formatters.format_banner_text("Student")
    return f"{banner}\n{model_formatters.format_student_multiline(snapshot)}"


def render(session: RosterSession) -> str:
    sections = [render_help(session), render_query(session)]

    card = render_student_card(session)
    if card is not None:
        sections.append(card)
    else:
        sections.append(render_students(session))

    return "\n\n".join(sections)
