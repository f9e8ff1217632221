# models/student.py

"""
Represents a student on the participation roster.

Stores identifying information (a unique key, usually an email address, and a display name)
along with the participation statistics that drive the weighted call order.

Includes functionality for:
- Parsing a raw seed record into a `Student`
- Taking an independent snapshot for the Student-mode card
- Recording an answered question
- Serializing the persistent fields to a dictionary

`answered_today` and `tier` are session-scoped. They start at zero on every load and are
never written out by `to_dict()`.
"""

from __future__ import annotations

import copy

from core.constants import (
    ABSENCES_COLUMN,
    ANSWER_MARKER,
    DEFERRALS_COLUMN,
    KEY_COLUMN,
    NAME_COLUMN,
    REQUIRED_COLUMNS,
    SCORE_COLUMN,
    TIER_MARKERS,
)
from core.errors import MalformedRowError, MissingFieldError


class Student:

    def __init__(
        self,
        key: str,
        name: str,
        participation_score: int = 0,
        deferrals: int = 0,
        absences: int = 0,
    ):
        self._key: str = key
        self._name: str = name
        self._participation_score: int = participation_score
        self._deferrals: int = deferrals
        self._absences: int = absences
        self._answered_today: int = 0
        self._tier: int = 0

    # === properties ===

    @property
    def key(self) -> str:
        return self._key

    @property
    def name(self) -> str:
        return self._name

    @property
    def participation_score(self) -> int:
        return self._participation_score

    @property
    def deferrals(self) -> int:
        return self._deferrals

    @property
    def absences(self) -> int:
        return self._absences

    @property
    def answered_today(self) -> int:
        return self._answered_today

    @property
    def tier(self) -> int:
        return self._tier

    @tier.setter
    def tier(self, tier: int) -> None:
        self._tier = tier

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            NAME_COLUMN: self._name,
            KEY_COLUMN: self._key,
            SCORE_COLUMN: self._participation_score,
            DEFERRALS_COLUMN: self._deferrals,
            ABSENCES_COLUMN: self._absences,
        }

    @classmethod
    def from_row(cls, row: dict[str, str], position: int) -> Student:
        """
        Builds a `Student` from one raw seed record.

        Args:
            row (dict[str, str]): Column name to raw field text. Extra columns are ignored.
            position (int): The 1-based record position, used in error messages.

        Returns:
            A new `Student` with trimmed text fields and parsed counters.

        Raises:
            MissingFieldError: If a required column is missing.
            MalformedRowError: If the key is blank or a numeric field is not a non-negative
                integer.
        """
        for column in REQUIRED_COLUMNS:
            if row.get(column) is None:
                raise MissingFieldError(position, column)

        key = row[KEY_COLUMN].strip()
        if not key:
            raise MalformedRowError(position, "student key is empty", KEY_COLUMN)

        return cls(
            key=key,
            name=row[NAME_COLUMN].strip(),
            participation_score=cls.parse_count(row, SCORE_COLUMN, position),
            deferrals=cls.parse_count(row, DEFERRALS_COLUMN, position),
            absences=cls.parse_count(row, ABSENCES_COLUMN, position),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._key}, {self._name}, {self._participation_score}, {self._deferrals}, {self._absences})"

    def __str__(self) -> str:
        flames = ANSWER_MARKER * self._answered_today
        return f"{TIER_MARKERS[self._tier]}{self._participation_score:>3} {flames} {self._name}"

    # === data manipulators ===

    def record_answer(self) -> None:
        self._participation_score += 1
        self._answered_today += 1

    def snapshot(self) -> Student:
        return copy.copy(self)

    # === data validators ===

    @staticmethod
    def parse_count(row: dict[str, str], column: str, position: int) -> int:
        """
        Parses a non-negative integer counter from a raw field.

        Args:
            row (dict[str, str]): The raw seed record.
            column (str): The column to parse.
            position (int): The 1-based record position, used in error messages.

        Returns:
            The parsed integer.

        Raises:
            MalformedRowError: If the field is not an integer or is negative.
        """
        raw = row[column].strip()
        try:
            value = int(raw)
        except ValueError:
            raise MalformedRowError(
                position, f"field '{column}' is not an integer: {raw!r}", column
            ) from None

        if value < 0:
            raise MalformedRowError(
                position, f"field '{column}' must not be negative: {value}", column
            )

        return value
