# models/roster.py

"""
The Roster is the registry of students and the single source of truth for all statistics.

Students are keyed by their unique key and created only at load time. Nothing is ever removed
during a session. Order, view, and selection only ever hold keys, and every one of those keys
must resolve here; `require()` turns a dangling key into a `RosterConsistencyError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from core.errors import MalformedRowError, MissingFieldError, RosterConsistencyError
from core.response import ErrorCode, Response
from core.seed_reader import open_seed_file
from models.student import Student

logger = logging.getLogger(__name__)


class Roster:

    def __init__(self, students: dict[str, Student] | None = None):
        self._students: dict[str, Student] = students or {}

    # === properties ===

    @property
    def students(self) -> dict[str, Student]:
        return self._students

    # === public classmethods ===

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[int, dict[str, str]]]) -> Roster:
        """
        Builds a `Roster` from raw seed records.

        Args:
            rows (Iterable[tuple[int, dict[str, str]]]): `(position, record)` pairs.

        Returns:
            A new `Roster`. Duplicate keys overwrite earlier records, so the last row wins.

        Raises:
            MalformedRowError: If any record cannot be parsed. The whole load fails.
        """
        roster = cls()

        for position, row in rows:
            student = Student.from_row(row, position)

            if student.key in roster._students:
                logger.debug(
                    "Record %d overwrites duplicate key %s", position, student.key
                )

            roster._students[student.key] = student

        return roster

    @classmethod
    def load(cls, path: str) -> Response:
        """
        Loads a `Roster` from a tab-delimited seed file.

        Args:
            path (str): The path to the seed file.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every record was parsed.
                    - False if the file is unreadable or any record is malformed.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the file cannot be opened or read.
                    - `ErrorCode.INVALID_INPUT` if the file is not valid UTF-8 text.
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if a record lacks a required column.
                    - `ErrorCode.MALFORMED_ROW` if a record fails to parse.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "roster" (Roster): The loaded `Roster`.
                    - On failure:
                        - None
        """
        try:
            roster = cls.from_rows(open_seed_file(path))

        except UnicodeDecodeError as e:
            logger.warning("Roster file %s is not valid UTF-8: %s", path, e)
            return Response.fail(
                detail=f"Roster file is not valid UTF-8 text: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except OSError as e:
            logger.warning("Could not read roster file %s: %s", path, e)
            return Response.fail(
                detail=f"Could not read roster file: {e}",
                error=ErrorCode.NOT_FOUND,
            )

        except MissingFieldError as e:
            logger.warning("Roster file %s is missing a column: %s", path, e)
            return Response.fail(
                detail=f"Missing required field: {e}",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        except MalformedRowError as e:
            logger.warning("Malformed roster file %s: %s", path, e)
            return Response.fail(
                detail=f"Malformed record: {e}",
                error=ErrorCode.MALFORMED_ROW,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info("Loaded %d students from %s", len(roster), path)
            return Response.succeed(
                data={
                    "roster": roster,
                },
            )

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, key: object) -> bool:
        return key in self._students

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students.values())

    def __repr__(self) -> str:
        return f"Roster({len(self._students)} students)"

    # === data accessors ===

    def get(self, key: str) -> Student | None:
        """Returns the live `Student` for `key`, or None. The live entry is the one mutators update."""
        return self._students.get(key)

    def require(self, key: str, invariant: str = "registry-membership") -> Student:
        """
        Returns the live `Student` for `key`.

        Raises:
            RosterConsistencyError: If `key` is not in the registry. This is an engine defect,
                never the result of operator input.
        """
        student = self._students.get(key)

        if student is None:
            raise RosterConsistencyError(
                invariant, f"key {key!r} is not present in the roster"
            )

        return student

    def score_bounds(self) -> tuple[int, int] | None:
        """Returns `(min, max)` participation score, or None for an empty roster."""
        if not self._students:
            return None

        scores = [student.participation_score for student in self._students.values()]
        return min(scores), max(scores)
