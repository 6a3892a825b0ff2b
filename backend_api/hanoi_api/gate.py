from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from django.conf import settings

from .engine import Board

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class BoardGate:
    """Owns the single shared Board and serializes every access to it.

    A request does all of its work (read, hint or play, and serializing the
    result) inside one session(), so a play is never observed half done.
    """

    def __init__(self, count: int) -> None:
        self._lock = threading.Lock()
        self._board = Board(count)

    @contextmanager
    def session(self, reset_to: Optional[int] = None) -> Iterator[Board]:
        """Hold the lock and yield the board.

        With reset_to, the board is first replaced by a fresh one with that
        many disks.
        """
        with self._lock:
            if reset_to is not None:
                self._board = Board(reset_to)
                logger.debug("Board replaced with %d disks", reset_to)
            yield self._board

    def reset(self, count: int) -> Board:
        with self.session(reset_to=count) as board:
            return board


_gate: Optional[BoardGate] = None
_gate_lock = threading.Lock()


# PUBLIC_INTERFACE
def get_board_gate() -> BoardGate:
    """Return the process-wide gate, creating it on first use.

    Settings are read here rather than at import time.
    """
    global _gate
    with _gate_lock:
        if _gate is None:
            _gate = BoardGate(settings.HANOI_DEFAULT_DISK_COUNT)
        return _gate


def reset_board_gate(count: Optional[int] = None) -> Board:
    """Reset the shared board to `count` disks (configured default if None)."""
    if count is None:
        count = settings.HANOI_DEFAULT_DISK_COUNT
    return get_board_gate().reset(count)
