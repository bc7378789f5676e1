from tilepuzzle.engine.gamerules.rules import (
    is_adjacent,
    is_solved,
    neighbors,
    solution,
    to_index,
    to_position,
    validate_board,
    validate_size,
)

__all__ = [
    "is_adjacent",
    "is_solved",
    "neighbors",
    "solution",
    "to_index",
    "to_position",
    "validate_board",
    "validate_size",
]
