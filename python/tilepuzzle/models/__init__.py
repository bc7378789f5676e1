from tilepuzzle.models.board import Board, Direction

__all__ = ["Board", "Direction"]
