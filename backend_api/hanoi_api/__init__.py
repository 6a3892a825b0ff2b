"""
Tower-of-Hanoi API app.

Re-exports the engine so callers can import from hanoi_api directly, e.g.:

    from hanoi_api import Board, Move, Peg
"""

# PUBLIC_INTERFACE
from .engine import (
    Board,
    Move,
    Peg,
    Route,
    NOOP_MOVE,
    HanoiError,
    IllegalMove,
    NotRoutable,
)

__all__ = [
    "Board",
    "Move",
    "Peg",
    "Route",
    "NOOP_MOVE",
    "HanoiError",
    "IllegalMove",
    "NotRoutable",
]
