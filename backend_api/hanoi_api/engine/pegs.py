from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Type

from .exceptions import BoardCorrupted, NotRoutable


# PUBLIC_INTERFACE
class Peg(str, Enum):
    """One of the three physical pegs."""

    A = "A"
    B = "B"
    C = "C"

    def excluded(self) -> Type["PegPair"]:
        """Return the two-peg subset that cannot name this peg."""
        return _EXCLUDING[self]

    def third(self, other: "Peg") -> "Peg":
        """Return the peg that is neither self nor other.

        Raises:
            NotRoutable: if other is self.
        """
        return Route.from_move(Move(self, other)).middle


class PegPair(Enum):
    """Base for the two-valued peg subsets. Members share their value with Peg."""

    @property
    def peg(self) -> Peg:
        return Peg(self.value)

    def swap(self) -> "PegPair":
        """Return the other member of this subset."""
        first, second = type(self)
        return second if self is first else first


class NotA(PegPair):
    B = "B"
    C = "C"


class NotB(PegPair):
    A = "A"
    C = "C"


class NotC(PegPair):
    A = "A"
    B = "B"


_EXCLUDING: Dict[Peg, Type[PegPair]] = {
    Peg.A: NotA,
    Peg.B: NotB,
    Peg.C: NotC,
}


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Move:
    """An unvalidated (start, end) pair. start == end is the no-op sentinel."""

    start: Peg
    end: Peg

    @property
    def is_noop(self) -> bool:
        return self.start is self.end

    def __str__(self) -> str:
        return f"{self.start.value}->{self.end.value}"


# Returned as the hint once nothing is left to move.
NOOP_MOVE = Move(Peg.C, Peg.C)


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Route:
    """A non-degenerate move with its implied auxiliary peg.

    The target is drawn from the subset that excludes the start peg, so a
    route from a peg to itself cannot be built.
    """

    start: Peg
    target: PegPair

    def __post_init__(self) -> None:
        if not isinstance(self.target, self.start.excluded()):
            raise BoardCorrupted(f"Route target {self.target!r} may not start from {self.start.value}.")

    @property
    def end(self) -> Peg:
        return self.target.peg

    @property
    def middle(self) -> Peg:
        return self.target.swap().peg

    @classmethod
    def from_move(cls, move: Move) -> "Route":
        """Refine a Move into a Route.

        Raises:
            NotRoutable: if the move starts and ends on the same peg.
        """
        subset = move.start.excluded()
        try:
            target = subset(move.end.value)
        except ValueError:
            raise NotRoutable(move) from None
        return cls(move.start, target)

    def to_move(self) -> Move:
        return Move(self.start, self.end)

    def __str__(self) -> str:
        return f"{self.start.value}->{self.end.value} via {self.middle.value}"
