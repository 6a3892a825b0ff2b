"""
Tower-of-Hanoi engine.

Exports:
- Peg, Move, Route and NOOP_MOVE for describing moves
- Board, the mutable puzzle state with its move validator
- hint, hint_move, play_hint and solve from the hint engine
- IllegalMove, NotRoutable, HanoiError and BoardCorrupted

These modules are framework-agnostic and can be reused by views, management
commands or services without importing request objects.
"""

from .board import Board, is_valid_placement
from .exceptions import BoardCorrupted, HanoiError, IllegalMove, NotRoutable
from .pegs import NOOP_MOVE, Move, Peg, PegPair, Route
from .solver import hint, hint_move, play_hint, solve

__all__ = [
    "Board",
    "is_valid_placement",
    "BoardCorrupted",
    "HanoiError",
    "IllegalMove",
    "NotRoutable",
    "NOOP_MOVE",
    "Move",
    "Peg",
    "PegPair",
    "Route",
    "hint",
    "hint_move",
    "play_hint",
    "solve",
]
