# cli/model_formatters.py

# anything that renders domain objects for the terminal
from textwrap import dedent

from core.constants import ANSWER_MARKER, TIER_MARKERS
from models.student import Student

# === student formatters ===


def format_student_oneline(student: Student, selected: bool = False) -> str:
    pointer = ">>" if selected else "  "

    return f"{pointer} {student}"


def format_student_multiline(student: Student) -> str:
    flames = ANSWER_MARKER * student.answered_today or "-"

    return dedent(
        f"""\
        {TIER_MARKERS[student.tier]} {student.name}
        ... Key: {student.key}
        ... Participation: {student.participation_score}
        ... Answered Today: {flames}
        ... Deferrals: {student.deferrals}
        ... Absences: {student.absences}"""
    )
