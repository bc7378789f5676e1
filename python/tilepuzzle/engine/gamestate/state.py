"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import StrEnum

from tilepuzzle.models.board import Board


class GameStatus(StrEnum):
    PLAYING = "playing"
    WON = "won"


class GameState:
    """Holds the current board, move counter, elapsed time and status."""

    def __init__(
        self, board: Board, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self.board = board
        self._clock = clock
        self.moves: int = 0
        self.status = GameStatus.PLAYING
        self._start_time: float = clock()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (self._clock() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += self._clock() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = self._clock()
            self._running = True

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def mark_won(self) -> None:
        self.status = GameStatus.WON
        self.pause()

    def reset(self) -> None:
        """Zero the move counter and restart the clock."""
        self.moves = 0
        self.status = GameStatus.PLAYING
        self._elapsed_banked = 0.0
        self._start_time = self._clock()
        self._running = True

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
