from __future__ import annotations

from typing import Any


class HanoiError(ValueError):
    """Base class for user-facing engine errors.

    Subclasses ValueError so callers can treat them like any other engine
    ValueError (the views answer those with a 400).
    """


# PUBLIC_INTERFACE
class IllegalMove(HanoiError):
    """A move that the stacking rules do not allow on the current board."""

    def __init__(self, move: Any) -> None:
        self.move = move
        super().__init__(f"Illegal move: {move}.")


# PUBLIC_INTERFACE
class NotRoutable(HanoiError):
    """A degenerate move (same start and end) has no route."""

    def __init__(self, move: Any) -> None:
        self.move = move
        super().__init__(f"Move {move} starts and ends on the same peg.")


class BoardCorrupted(RuntimeError):
    """Internal invariant violation. Not a HanoiError: never a client error."""
