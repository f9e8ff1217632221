# core/selection.py

"""
Cursor over the current view.

The index is None exactly when the view is empty; otherwise it is a valid position in the
view. Whenever the view changes length the owner must call `reset()` before reading it again.
"""


class SelectionCursor:

    def __init__(self, view_length: int = 0):
        self._view_length: int = 0
        self._index: int | None = None
        self.reset(view_length)

    @property
    def index(self) -> int | None:
        return self._index

    def reset(self, view_length: int) -> None:
        self._view_length = view_length
        self._index = 0 if view_length > 0 else None

    def move_up(self) -> None:
        if self._index is None or self._index == 0:
            return
        self._index -= 1

    def move_down(self) -> None:
        if self._index is None or self._index >= self._view_length - 1:
            return
        self._index += 1
