"""Scrambler — solvability by construction, fallback and determinism."""

from __future__ import annotations

import logging
import random

import pytest

from tilepuzzle import config
from tilepuzzle.engine.gamegenerator import GameGenerator
from tilepuzzle.engine.gamerules import rules
from tilepuzzle.errors import GameLogicError, ValidationError
from tilepuzzle.models.board import Board

# -- helpers ------------------------------------------------------------------


def _unwind(board: Board, start: int, trail: list[int]) -> None:
    """Undo *trail* by sliding the blank back through its earlier cells."""
    previous = [start] + trail[:-1]
    for index in reversed(previous):
        assert board.slide(index), f"could not slide {index} back"


# -- scramble -----------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_generated_board_is_permutation(size: int) -> None:
    board = GameGenerator.generate(size, random.Random(size))
    assert sorted(board.tiles) == list(range(size * size))
    assert board.tiles[board.empty_index] == config.EMPTY


@pytest.mark.parametrize("seed", range(10))
def test_scramble_trail_unwinds_to_solved(seed: int) -> None:
    board = Board.solved(4)
    start = board.empty_index
    trail = GameGenerator.scramble(board, random.Random(seed))
    _unwind(board, start, trail)
    assert board.is_solved()


@pytest.mark.parametrize("size", [2, 3, 5])
def test_generated_board_reachable_from_solved(size: int) -> None:
    board, trail = GameGenerator.generate_with_trail(size, random.Random(99))
    _unwind(board, size * size - 1, trail)
    assert board.is_solved()


@pytest.mark.parametrize(("size", "expected"), [(2, 50), (3, 50), (4, 50), (5, 75)])
def test_scramble_length(size: int, expected: int) -> None:
    assert config.scramble_moves(size) == expected
    trail = GameGenerator.scramble(Board.solved(size), random.Random(0))
    assert len(trail) == expected


def test_scramble_steps_are_legal() -> None:
    board = Board.solved(3)
    blank = board.empty_index
    for index in GameGenerator.scramble(board, random.Random(3), moves=30):
        assert rules.is_adjacent(index, blank, 3)
        blank = index


def test_generate_is_not_solved() -> None:
    for seed in range(20):
        assert not GameGenerator.generate(4, random.Random(seed)).is_solved()


def test_same_seed_same_board() -> None:
    a = GameGenerator.generate(4, random.Random(42))
    b = GameGenerator.generate(4, random.Random(42))
    assert a.tiles == b.tiles
    assert a.blank_pos == b.blank_pos


def test_generate_rejects_small_size() -> None:
    with pytest.raises(ValidationError):
        GameGenerator.generate(1, random.Random(0))


# -- recovery -----------------------------------------------------------------


def test_scramble_falls_back_on_stale_blank(caplog: pytest.LogCaptureFixture) -> None:
    board = Board.solved(3)
    board.blank_pos = (0, 0)

    with caplog.at_level(logging.WARNING):
        trail = GameGenerator.scramble(board, random.Random(1))

    assert "fallback" in caplog.text
    assert len(trail) == config.FALLBACK_MOVES
    rules.validate_board(board.tiles, 3)
    assert board.tiles[board.empty_index] == config.EMPTY
    _unwind(board, 8, trail)
    assert board.is_solved()


def test_generate_raises_when_scramble_corrupts_board(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def corrupting_scramble(board: Board, rng: random.Random) -> list[int]:
        board.tiles[0] = board.tiles[1]
        return []

    monkeypatch.setattr(GameGenerator, "scramble", staticmethod(corrupting_scramble))
    with pytest.raises(GameLogicError) as info:
        GameGenerator.generate(3, random.Random(0))
    assert isinstance(info.value.__cause__, ValidationError)


def test_scramble_without_blank_does_not_raise(caplog: pytest.LogCaptureFixture) -> None:
    board = Board(size=3, tiles=list(range(1, 10)), blank_pos=(2, 2))

    with caplog.at_level(logging.WARNING):
        trail = GameGenerator.scramble(board, random.Random(0))

    assert trail == []
    assert board.tiles == list(range(1, 10))
    assert "no empty cell" in caplog.text


def test_resync_blank_without_blank_raises() -> None:
    board = Board(size=2, tiles=[1, 2, 3, 4], blank_pos=(1, 1))
    with pytest.raises(GameLogicError, match="no empty cell"):
        board.resync_blank()
