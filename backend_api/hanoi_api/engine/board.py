from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from . import solver
from .exceptions import BoardCorrupted, IllegalMove, NotRoutable
from .pegs import Move, Peg, Route


def is_valid_placement(moving: Optional[int], resting: Optional[int]) -> bool:
    """Return True if disk `moving` may be placed on top of disk `resting`.

    None stands for an empty peg: nothing to move, or nothing to rest on.
    """
    if moving is None:
        return False
    if resting is None:
        return True
    return resting >= moving


# PUBLIC_INTERFACE
class Board:
    """A three-peg board with disks 0..count-1 (0 is the smallest).

    Each stack is listed bottom to top; the last element is the top disk.
    Only play() changes the stacks, and only by one pop and one push.
    """

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("Disk count must be non-negative.")
        self._count = count
        self._stacks: Dict[Peg, List[int]] = {
            Peg.A: list(reversed(range(count))),
            Peg.B: [],
            Peg.C: [],
        }

    @property
    def count(self) -> int:
        return self._count

    def stack(self, peg: Peg) -> Tuple[int, ...]:
        """Read-only copy of a peg's stack."""
        return tuple(self._stacks[peg])

    @property
    def a(self) -> Tuple[int, ...]:
        return self.stack(Peg.A)

    @property
    def b(self) -> Tuple[int, ...]:
        return self.stack(Peg.B)

    @property
    def c(self) -> Tuple[int, ...]:
        return self.stack(Peg.C)

    def stacks(self) -> Dict[Peg, Tuple[int, ...]]:
        return {peg: self.stack(peg) for peg in Peg}

    def top(self, peg: Peg) -> Optional[int]:
        stack = self._stacks[peg]
        return stack[-1] if stack else None

    # PUBLIC_INTERFACE
    def is_valid(self, route: Route) -> bool:
        """Return True if the top disk of route.start may go onto route.end."""
        return is_valid_placement(self.top(route.start), self.top(route.end))

    # PUBLIC_INTERFACE
    def play(self, route: Route) -> None:
        """Move the top disk along route.

        Raises:
            IllegalMove: if the route is not valid; the board is unchanged.
        """
        if not self.is_valid(route):
            raise IllegalMove(route.to_move())
        disk = self._stacks[route.start].pop()
        self._stacks[route.end].append(disk)

    # PUBLIC_INTERFACE
    def play_with_move(self, move: Move) -> None:
        """Play a raw move. A move from a peg to itself does nothing."""
        try:
            route = Route.from_move(move)
        except NotRoutable:
            return
        self.play(route)

    def locate(self, disk: int) -> Tuple[Peg, bool]:
        """Return the peg holding disk and whether another disk sits on it."""
        for peg in Peg:
            stack = self._stacks[peg]
            if disk in stack:
                return peg, stack.index(disk) + 1 < len(stack)
        raise BoardCorrupted(f"Disk {disk} is on no peg.")

    def hint(self) -> Optional[Route]:
        return solver.hint(self)

    def hint_move(self) -> Move:
        return solver.hint_move(self)

    def play_hint(self) -> Optional[Move]:
        return solver.play_hint(self)

    def __repr__(self) -> str:
        return f"Board(count={self._count}, A={self.a}, B={self.b}, C={self.c})"
