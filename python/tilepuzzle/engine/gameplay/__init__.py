from tilepuzzle.engine.gameplay.game import PuzzleEngine, PuzzleSnapshot

__all__ = ["PuzzleEngine", "PuzzleSnapshot"]
