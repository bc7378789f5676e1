"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from tilepuzzle import config
from tilepuzzle.engine.gamerules import rules
from tilepuzzle.errors import GameLogicError, ValidationError
from tilepuzzle.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by sliding tiles away from the solved state.

    Only legal moves are ever applied, so every generated board can be
    walked back to the goal.
    """

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def scramble(
        board: Board, rng: random.Random, moves: int | None = None
    ) -> list[int]:
        """Scramble *board* in-place using random valid moves.

        Returns the trail of indices that slid into the blank, in order.
        """
        count = config.scramble_moves(board.size) if moves is None else moves
        trail: list[int] = []

        for _ in range(count):
            candidates = board.valid_moves()
            target = rng.choice(candidates) if candidates else None
            if target is None or not board.slide(target):
                logger.warning(
                    "Scramble stalled after %d of %d moves; using fallback shuffle",
                    len(trail),
                    count,
                )
                trail.extend(GameGenerator.fallback_shuffle(board, rng))
                break
            trail.append(target)

        logger.debug("Board scrambled with %d random moves", len(trail))
        return trail

    @staticmethod
    def fallback_shuffle(board: Board, rng: random.Random) -> list[int]:
        """Resync the blank and apply a short run of legal moves.

        A board with no blank at all is left as it is; ``generate`` rejects it.
        """
        trail: list[int] = []
        try:
            board.resync_blank()
        except GameLogicError as exc:
            logger.error("Fallback shuffle skipped: %s", exc)
            return trail
        for _ in range(config.FALLBACK_MOVES):
            target = rng.choice(board.valid_moves())
            if board.slide(target):
                trail.append(target)
        return trail

    @staticmethod
    def generate_with_trail(
        size: int, rng: random.Random | None = None
    ) -> tuple[Board, list[int]]:
        """Return a random *solvable* board and the moves that produced it."""
        rules.validate_size(size)
        rng = rng or random.Random()
        board = GameGenerator.solved(size)
        trail = GameGenerator.scramble(board, rng)

        # Ensure the board is not already solved
        while board.is_solved():
            logger.debug("Scramble landed on the goal state; scrambling again")
            trail.extend(GameGenerator.scramble(board, rng))

        try:
            rules.validate_board(board.tiles, size)
        except ValidationError as exc:
            raise GameLogicError(
                "Generated puzzle board is invalid", size=size, tiles=board.tiles
            ) from exc
        if board.tiles[board.empty_index] != config.EMPTY:
            raise GameLogicError(
                "Generated puzzle lost track of the empty cell",
                size=size,
                blank_pos=board.blank_pos,
            )

        logger.info("Generated %dx%d puzzle", size, size)
        return board, trail

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board of the given size."""
        board, _ = GameGenerator.generate_with_trail(size, rng)
        return board
