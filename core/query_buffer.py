# core/query_buffer.py

"""
Editable search text with a cursor measured in characters.

All cursor positions are character offsets into `text`, never storage offsets, so multi-byte
characters can't be split. `byte_index()` converts the cursor to a UTF-8 offset for callers
that need one.
"""


class QueryBuffer:

    def __init__(self, text: str = ""):
        self._text: str = text
        self._cursor: int = len(text)

    # === properties ===

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    # === cursor methods ===

    def _clamp(self, position: int) -> int:
        return max(0, min(position, len(self._text)))

    def move_left(self) -> None:
        self._cursor = self._clamp(self._cursor - 1)

    def move_right(self) -> None:
        self._cursor = self._clamp(self._cursor + 1)

    def byte_index(self) -> int:
        """Returns the UTF-8 byte offset of the cursor. Always falls on a character boundary."""
        return len(self._text[: self._cursor].encode("utf-8"))

    # === editing methods ===

    def insert(self, char: str) -> None:
        self._text = self._text[: self._cursor] + char + self._text[self._cursor :]
        self._cursor = self._clamp(self._cursor + len(char))

    def backspace(self) -> None:
        """Deletes the character left of the cursor. Does nothing at the leftmost position."""
        if self._cursor == 0:
            return

        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self.move_left()

    def clear(self) -> None:
        self._text = ""
        self._cursor = 0
