"""Sliding tile puzzle engine."""

from tilepuzzle.engine.gamegenerator import GameGenerator
from tilepuzzle.engine.gameplay import PuzzleEngine, PuzzleSnapshot
from tilepuzzle.engine.gamestate import GameState, GameStatus
from tilepuzzle.errors import GameLogicError, PuzzleError, ValidationError
from tilepuzzle.models import Board, Direction

__all__ = [
    "Board",
    "Direction",
    "GameGenerator",
    "GameLogicError",
    "GameState",
    "GameStatus",
    "PuzzleEngine",
    "PuzzleError",
    "PuzzleSnapshot",
    "ValidationError",
]
