"""Tunable constants for the puzzle engine and the terminal frontend."""

from __future__ import annotations

# Value stored in the empty cell.
EMPTY = 0

MIN_SIZE = 2
DEFAULT_SIZE = 3

# Scramble length is max(MIN_SCRAMBLE_MOVES, SCRAMBLE_FACTOR * size²).
MIN_SCRAMBLE_MOVES = 50
SCRAMBLE_FACTOR = 3

# Legal moves replayed by the scrambler's recovery path.
FALLBACK_MOVES = 20

# Sizes offered by the CLI menu.
CLI_MIN_SIZE = 2
CLI_MAX_SIZE = 8


def scramble_moves(size: int) -> int:
    """Number of random legal moves used to scramble a *size*×*size* board."""
    return max(MIN_SCRAMBLE_MOVES, SCRAMBLE_FACTOR * size * size)

# Seconds between clock repaints on the play screen.
CLOCK_TICK = 0.5
