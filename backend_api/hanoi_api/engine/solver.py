from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

from .exceptions import NotRoutable
from .pegs import NOOP_MOVE, Move, Peg, Route

if TYPE_CHECKING:
    from .board import Board


# PUBLIC_INTERFACE
def hint(board: "Board") -> Optional[Route]:
    """Return the next route of the minimal solution toward peg C.

    The move is derived from the board alone, so it works on any position
    reached through legal plays, hinted or not.

    Disks are scanned from the largest down. The running target starts at C.
    A disk already on the running target needs nothing. A disk that cannot
    go there yet, because something sits on it or a smaller disk tops the
    target, sends the smaller disks to the route's auxiliary peg instead:
    that peg becomes the running target for the rest of the scan. The first
    disk with no blocker gives the route.

    Returns None when every disk is already on C (always, for 0 disks).
    """
    target = Peg.C
    for disk in reversed(range(board.count)):
        start, start_blocked = board.locate(disk)
        try:
            route = Route.from_move(Move(start, target))
        except NotRoutable:
            continue
        end_top = board.top(route.end)
        end_blocked = end_top is not None and end_top < disk
        if start_blocked or end_blocked:
            target = route.middle
            continue
        return route
    return None


# PUBLIC_INTERFACE
def hint_move(board: "Board") -> Move:
    """Return the hint as a Move, or NOOP_MOVE when the puzzle is solved."""
    route = hint(board)
    if route is None:
        return NOOP_MOVE
    return route.to_move()


def play_hint(board: "Board") -> Optional[Move]:
    """Play the hinted move. Returns the move played, or None if solved."""
    route = hint(board)
    if route is None:
        return None
    board.play(route)
    return route.to_move()


def solve(board: "Board") -> Iterator[Move]:
    """Play hints until none remain, yielding each move played."""
    while True:
        move = play_hint(board)
        if move is None:
            return
        yield move
