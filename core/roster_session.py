# core/roster_session.py

"""
The roster engine's complete application state and its transition function.

`RosterSession` owns the registry, the weighted order, the query, the derived view, the
selection cursor, and the interaction state. The event loop feeds it one `InputEvent` at a time
through `dispatch()`; every event is applied completely before the next is read. Presenters
only use the read-only accessors.

Data flows one way per update: a query edit or an outcome changes the roster or the query, the
view is rebuilt from them, and the selection is reset against the new view.
"""

from __future__ import annotations

import logging
import random

from core.constants import TIER_COUNT
from core.interaction import (
    Action,
    CommandMode,
    InputEvent,
    InteractionState,
    Mode,
    SearchingMode,
    StudentModal,
    is_legal,
    mode_of,
)
from core.outcome_recorder import OutcomeRecorder
from core.query_buffer import QueryBuffer
from core.search import build_view
from core.selection import SelectionCursor
from core.weighted_order import generate_order
from models.roster import Roster
from models.student import Student

logger = logging.getLogger(__name__)


class RosterSession:

    def __init__(
        self,
        roster: Roster,
        rng: random.Random | None = None,
        tier_count: int = TIER_COUNT,
    ):
        if not 1 <= tier_count <= TIER_COUNT:
            raise ValueError(
                f"tier_count must be between 1 and {TIER_COUNT}, got {tier_count}"
            )

        self._roster: Roster = roster
        self._rng: random.Random = rng or random.Random()
        self._tier_count: int = tier_count
        self._query: QueryBuffer = QueryBuffer()
        self._order: list[str] = []
        self._view: list[str] = []
        self._selection: SelectionCursor = SelectionCursor()
        self._state: InteractionState = CommandMode()
        self._recorder: OutcomeRecorder = OutcomeRecorder(roster, self.reshuffle)

        self.reshuffle()

    # === properties ===

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def order(self) -> tuple[str, ...]:
        return tuple(self._order)

    @property
    def view(self) -> tuple[str, ...]:
        return tuple(self._view)

    @property
    def selection(self) -> int | None:
        return self._selection.index

    @property
    def query(self) -> str:
        return self._query.text

    @property
    def query_cursor(self) -> int:
        return self._query.cursor

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def mode(self) -> Mode:
        return mode_of(self._state)

    @property
    def snapshot(self) -> Student | None:
        if isinstance(self._state, StudentModal):
            return self._state.snapshot
        return None

    # === data accessors ===

    def selected(self) -> Student | None:
        """
        Returns the live `Student` under the selection cursor, or None if nothing is selected.

        Raises:
            RosterConsistencyError: If the view holds a key the roster does not.
        """
        index = self._selection.index
        if index is None:
            return None

        return self._roster.require(self._view[index], "view-membership")

    def visible_students(self) -> list[Student]:
        return [self._roster.require(key, "view-membership") for key in self._view]

    # === data manipulators ===

    def reshuffle(self) -> None:
        self._order = generate_order(self._roster, self._rng, self._tier_count)
        self._refresh_view()

    def _refresh_view(self) -> None:
        self._view = build_view(self._roster, self._order, self._query.text)
        self._selection.reset(len(self._view))

    def _confirm_selection(self) -> None:
        student = self.selected()
        if student is None:
            return

        return_to = self._state
        if isinstance(return_to, StudentModal):
            raise RuntimeError("Cannot open a student card from inside another card.")

        self._state = StudentModal(return_to=return_to, snapshot=student.snapshot())

    def _close_student(self) -> None:
        if isinstance(self._state, StudentModal):
            self._state = self._state.return_to

    # === dispatch ===

    def dispatch(self, event: InputEvent) -> bool:
        """
        Applies one operator command.

        Args:
            event (InputEvent): The command to apply.

        Returns:
            False if the operator asked to quit, True otherwise.

        Notes:
            - Commands that are not legal in the current mode are ignored.
            - Navigation, search, and outcome recording never fail for operator input.
        """
        action = event.action

        if not is_legal(self._state, action):
            logger.debug("Ignoring %s in %s mode", action.value, self.mode.value)
            return True

        mode = self.mode

        if action is Action.QUIT:
            return False

        elif action is Action.RESHUFFLE:
            self.reshuffle()

        elif action is Action.BEGIN_SEARCH:
            self._state = SearchingMode()

        elif action is Action.NAVIGATE_UP:
            self._selection.move_up()

        elif action is Action.NAVIGATE_DOWN:
            self._selection.move_down()

        elif action is Action.CONFIRM_SELECTION:
            self._confirm_selection()

        elif action is Action.INSERT_CHAR:
            if event.char:
                self._query.insert(event.char)
            self._refresh_view()

        elif action is Action.BACKSPACE:
            self._query.backspace()
            self._refresh_view()

        elif action is Action.CURSOR_LEFT:
            self._query.move_left()

        elif action is Action.CURSOR_RIGHT:
            self._query.move_right()

        elif action is Action.ESCAPE and mode is Mode.SEARCHING:
            self._state = CommandMode()
            self._query.clear()
            self._refresh_view()

        elif action is Action.ESCAPE:
            self._close_student()

        elif action in (Action.ANSWER, Action.ABSENT, Action.DEFER):
            self._record_outcome(action)

        else:
            raise RuntimeError(f"Unexpected action received: {action}")

        return True

    def _record_outcome(self, action: Action) -> None:
        snapshot = self.snapshot
        if snapshot is None:
            return

        if action is Action.ANSWER:
            self._recorder.answer(snapshot)
        elif action is Action.ABSENT:
            self._recorder.absent(snapshot)
        else:
            self._recorder.defer(snapshot)

        self._close_student()
