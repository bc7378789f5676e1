"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from tilepuzzle.config import DEFAULT_SIZE, EMPTY
from tilepuzzle.engine.gamegenerator import GameGenerator
from tilepuzzle.engine.gamerules import rules
from tilepuzzle.engine.gamestate import GameState, GameStatus
from tilepuzzle.errors import GameLogicError, ValidationError
from tilepuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)

# The offset points to the tile that will slide into the blank.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class PuzzleSnapshot:
    board: tuple[int, ...]
    solution: tuple[int, ...]
    empty_position: tuple[int, int]


class PuzzleEngine:
    """Owns one puzzle: its board, solution and session counters.

    Instances are independent; build one per board you want to play. The
    ``animating`` flag is set by the presentation layer while a tile slide is
    on screen, and ``move_piece`` refuses to act while it is set.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self.rng = rng or random.Random(seed)
        self.animating = False
        rules.validate_size(size)
        self.size = size
        self._solution = rules.solution(size)
        self.state = GameState(GameGenerator.generate(size, self.rng))

    @classmethod
    def from_board(
        cls, board: Board, rng: random.Random | None = None
    ) -> PuzzleEngine:
        """Create an engine around an existing board (e.g. a test fixture)."""
        rules.validate_size(board.size)
        rules.validate_board(board.tiles, board.size)
        empty = board.empty_index
        if not 0 <= empty < len(board.tiles) or board.tiles[empty] != EMPTY:
            raise ValidationError(
                f"blank_pos {board.blank_pos} does not hold the empty cell",
                blank_pos=board.blank_pos,
            )
        obj = object.__new__(cls)
        obj.rng = rng or random.Random()
        obj.animating = False
        obj.size = board.size
        obj._solution = rules.solution(board.size)
        obj.state = GameState(board)
        return obj

    # -- lifecycle ------------------------------------------------------------

    def new_puzzle(self, size: int) -> PuzzleSnapshot:
        """Replace the board with a freshly scrambled one of *size*."""
        rules.validate_size(size)
        board = GameGenerator.generate(size, self.rng)
        self.size = size
        self._solution = rules.solution(size)
        self.state.board = board
        self.state.status = GameStatus.PLAYING
        self.state.resume()
        return self.snapshot()

    def reset_puzzle(self, size: int | None = None) -> None:
        """Start over: new board, zero moves, fresh clock."""
        self.new_puzzle(self.size if size is None else size)
        self.state.reset()
        logger.info("Puzzle reset (%dx%d)", self.size, self.size)

    @contextmanager
    def animation(self) -> Iterator[None]:
        """Hold the animation lock for the duration of the block.

        Hosts wrap tile slides or screen repaints in it; the Rich frontend
        holds it while redrawing the board.
        """
        previous = self.animating
        self.animating = True
        try:
            yield
        finally:
            self.animating = previous

    # -- movement -------------------------------------------------------------

    def move_piece(self, index: int) -> bool:
        """Slide the tile at flat *index* into the blank.

        Returns False while animating or when the tile does not touch the
        blank. Raises ``ValidationError`` for an index off the board. Raises
        ``GameLogicError`` if the board has lost track of its blank.
        """
        if self.animating:
            return False

        board = self.state.board
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not 0 <= index < len(board.tiles)
        ):
            raise ValidationError(f"Invalid piece index: {index}", index=index)

        if not rules.is_adjacent(index, board.empty_index, self.size):
            return False

        if not board.slide(index):
            raise GameLogicError(
                "Board refused a move next to the cached blank",
                index=index,
                blank_pos=board.blank_pos,
            )
        self.state.increment_moves()

        if board.is_solved():
            self.state.mark_won()
            logger.info("Puzzle solved in %d moves", self.state.moves)
        return True

    def perform_move(self, index: int) -> bool:
        """Swap without the animation gate or move counting."""
        return self.state.board.slide(index)

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        br, bc = self.state.board.blank_pos
        dr, dc = _OFFSETS[direction]
        return self.move_tile(br + dr, bc + dc)

    def move_tile(self, row: int, col: int) -> bool:
        """Move a tile at (row, col) into the adjacent blank."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            return False
        return self.move_piece(rules.to_index(row, col, self.size))

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def solution(self) -> tuple[int, ...]:
        return self._solution

    @property
    def empty_index(self) -> int:
        return self.state.board.empty_index

    @property
    def empty_position(self) -> tuple[int, int]:
        return self.state.board.blank_pos

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def elapsed_time(self) -> float:
        return self.state.elapsed_time

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def is_won(self) -> bool:
        return self.state.status is GameStatus.WON

    def valid_moves(self) -> list[int]:
        return self.state.board.valid_moves()

    def is_solved(self) -> bool:
        return self.state.is_solved

    def is_adjacent(self, a: int, b: int) -> bool:
        return rules.is_adjacent(a, b, self.size)

    def snapshot(self) -> PuzzleSnapshot:
        board = self.state.board
        return PuzzleSnapshot(
            board=tuple(board.tiles),
            solution=self._solution,
            empty_position=board.blank_pos,
        )
