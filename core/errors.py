# core/errors.py

"""
Exception types raised by the roster engine.

There are two classes of failure:
- `MalformedRowError` is recoverable: it surfaces while loading the seed file and is
  converted into a failed `Response` before the interaction loop ever starts.
- `RosterConsistencyError` is fatal: it means the order, the view, or the selection
  references a key the registry does not hold. It is never caught inside the engine.
"""


class MalformedRowError(ValueError):
    """
    Raised when a seed record cannot be turned into a `Student`.

    Attributes:
        position (int): The 1-based position of the offending record.
        field (str | None): The column that failed to parse, if known.
    """

    def __init__(self, position: int, message: str, field: str | None = None):
        self.position = position
        self.field = field
        super().__init__(f"Record {position}: {message}")


class MissingFieldError(MalformedRowError):
    """Raised when a seed record lacks one of the required columns."""

    def __init__(self, position: int, field: str):
        super().__init__(position, f"missing required field '{field}'", field)


class RosterConsistencyError(RuntimeError):
    """
    Raised when an internal invariant between the registry and a derived collection breaks.

    Attributes:
        invariant (str): A short name for the broken invariant (e.g. "order-permutation").
    """

    def __init__(self, invariant: str, message: str):
        self.invariant = invariant
        super().__init__(f"[{invariant}] {message}")
