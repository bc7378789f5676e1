"""Pure board rules: index math, adjacency, validation and the win test.

All functions work on flat row-major tile sequences so they can be shared by
the ``Board`` model, the generator and the tests without any state.
"""

from __future__ import annotations

from collections.abc import Sequence

from tilepuzzle.config import EMPTY, MIN_SIZE
from tilepuzzle.errors import ValidationError

# (dr, dc) in up, down, left, right order.
_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


# -- index math ---------------------------------------------------------------


def to_position(index: int, size: int) -> tuple[int, int]:
    return divmod(index, size)


def to_index(row: int, col: int, size: int) -> int:
    return row * size + col


def is_adjacent(a: int, b: int, size: int) -> bool:
    """Return True if flat cells *a* and *b* share an edge.

    Rows and columns are compared separately: ``a`` and ``a + 1`` are not
    neighbours when they sit on different rows.
    """
    ar, ac = divmod(a, size)
    br, bc = divmod(b, size)
    return abs(ar - br) + abs(ac - bc) == 1


def neighbors(index: int, size: int) -> list[int]:
    """Flat indices orthogonally adjacent to *index*, clipped to the grid."""
    row, col = divmod(index, size)
    result: list[int] = []
    for dr, dc in _OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < size and 0 <= nc < size:
            result.append(nr * size + nc)
    return result


# -- validation ---------------------------------------------------------------


def validate_size(size: object) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValidationError(
            f"Puzzle size must be an integer, got {size!r}.", size=size
        )
    if size < MIN_SIZE:
        raise ValidationError(
            f"Puzzle size must be at least {MIN_SIZE}, got {size}.", size=size
        )
    return size


def validate_board(tiles: Sequence[int], size: int) -> None:
    """Raise ``ValidationError`` unless *tiles* is a permutation of 0..size²-1."""
    expected = size * size
    if len(tiles) != expected:
        raise ValidationError(
            f"Expected {expected} tiles for a {size}×{size} board, "
            f"got {len(tiles)}.",
            size=size,
            length=len(tiles),
        )
    if len(set(tiles)) != len(tiles):
        raise ValidationError("Board contains duplicate values.", tiles=list(tiles))
    missing = sorted(set(range(expected)) - set(tiles))
    if missing:
        raise ValidationError(
            f"Board missing value {missing[0]}.", tiles=list(tiles), missing=missing
        )


# -- goal state ---------------------------------------------------------------


def solution(size: int) -> tuple[int, ...]:
    """The goal order: 1..size²-1 followed by the empty cell."""
    return tuple(range(1, size * size)) + (EMPTY,)


def is_solved(tiles: Sequence[int], size: int) -> bool:
    last = size * size - 1
    if len(tiles) != last + 1:
        return False
    for i in range(last):
        if tiles[i] != i + 1:
            return False
    return tiles[last] == EMPTY
