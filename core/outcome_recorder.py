# core/outcome_recorder.py

"""
Applies the outcome of calling on a student.

Only an answer changes statistics: the live roster entry gains one participation point and one
answer for today, and the weighted order is regenerated through `on_change`. Absent and defer
leave every counter untouched.
"""

import logging
from collections.abc import Callable

from models.roster import Roster
from models.student import Student

logger = logging.getLogger(__name__)


class OutcomeRecorder:

    def __init__(self, roster: Roster, on_change: Callable[[], None]):
        self._roster = roster
        self._on_change = on_change

    def answer(self, snapshot: Student) -> None:
        """
        Records an answer for the live student behind `snapshot` and regenerates the order.

        Raises:
            RosterConsistencyError: If the snapshot's key is no longer in the roster.
        """
        student = self._roster.require(snapshot.key, "snapshot-membership")
        student.record_answer()

        logger.debug(
            "Recorded answer for %s (score %d, answered today %d)",
            student.key,
            student.participation_score,
            student.answered_today,
        )

        self._on_change()

    # TODO: bump deferrals/absences once it is decided whether these outcomes should count
    def absent(self, snapshot: Student) -> None:
        logger.debug("Marked %s absent; statistics unchanged", snapshot.key)

    def defer(self, snapshot: Student) -> None:
        logger.debug("Deferred %s; statistics unchanged", snapshot.key)
