"""Board model for the sliding puzzle game."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from tilepuzzle.config import EMPTY
from tilepuzzle.engine.gamerules import rules
from tilepuzzle.errors import GameLogicError

logger = logging.getLogger(__name__)


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list of ints. 0 represents the
    blank space; ``blank_pos`` caches its ``(row, col)`` and is only ever
    written together with ``tiles``.
    """

    size: int
    tiles: list[int]
    blank_pos: tuple[int, int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        rules.validate_size(size)
        rules.validate_board(flat, size)
        tiles = list(flat)
        return cls(
            size=size,
            tiles=tiles,
            blank_pos=rules.to_position(tiles.index(EMPTY), size),
        )

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        rules.validate_size(size)
        return cls(
            size=size,
            tiles=list(rules.solution(size)),
            blank_pos=(size - 1, size - 1),
        )

    # -- queries --------------------------------------------------------------

    @property
    def empty_index(self) -> int:
        return rules.to_index(*self.blank_pos, self.size)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[rules.to_index(row, col, self.size)]

    def rows(self) -> list[list[int]]:
        """2D view of the tiles, one list per row."""
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def valid_moves(self) -> list[int]:
        """Flat indices of the tiles that can slide into the blank."""
        return rules.neighbors(self.empty_index, self.size)

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return rules.is_solved(self.tiles, self.size)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == EMPTY:
            return row == self.size - 1 and col == self.size - 1
        return (row, col) == rules.to_position(val - 1, self.size)

    def copy(self) -> Board:
        return Board(size=self.size, tiles=self.tiles[:], blank_pos=self.blank_pos)

    # -- mutation -------------------------------------------------------------

    def slide(self, index: int) -> bool:
        """Swap the tile at *index* into the blank.

        Checks that the cached blank is real and that *index* touches it;
        there is no animation gate here. A bad request is logged and ignored
        so best-effort loops can keep going.
        """
        empty = self.empty_index
        if not 0 <= empty < len(self.tiles) or self.tiles[empty] != EMPTY:
            logger.warning("Blank cache %s out of sync with tiles", self.blank_pos)
            return False
        if not 0 <= index < len(self.tiles):
            logger.warning("Ignoring slide of out-of-range index %s", index)
            return False
        if not rules.is_adjacent(index, empty, self.size):
            logger.warning(
                "Ignoring slide of index %s: not adjacent to blank at %s",
                index,
                empty,
            )
            return False
        self.tiles[empty], self.tiles[index] = self.tiles[index], self.tiles[empty]
        self.blank_pos = rules.to_position(index, self.size)
        return True

    def resync_blank(self) -> None:
        """Recompute ``blank_pos`` by scanning the tiles for the blank."""
        try:
            index = self.tiles.index(EMPTY)
        except ValueError:
            raise GameLogicError("Board has no empty cell", tiles=self.tiles) from None
        self.blank_pos = rules.to_position(index, self.size)
