"""Board model — construction, queries and the guarded slide primitive."""

from __future__ import annotations

import logging

import pytest

from tilepuzzle.errors import ValidationError
from tilepuzzle.models.board import Board

NEAR_SOLVED = [1, 2, 3, 4, 5, 6, 7, 0, 8]


# -- construction -------------------------------------------------------------


def test_from_flat_finds_blank() -> None:
    board = Board.from_flat(3, NEAR_SOLVED)
    assert board.blank_pos == (2, 1)
    assert board.empty_index == 7


def test_from_flat_copies_input() -> None:
    flat = list(NEAR_SOLVED)
    board = Board.from_flat(3, flat)
    flat[0] = 99
    assert board.tiles[0] == 1


@pytest.mark.parametrize(
    ("size", "flat"),
    [
        (3, [1, 2, 3, 0]),
        (3, [1, 2, 3, 4, 5, 6, 7, 7, 0]),
        (1, [0]),
    ],
)
def test_from_flat_rejects_malformed(size: int, flat: list[int]) -> None:
    with pytest.raises(ValidationError):
        Board.from_flat(size, flat)


def test_solved_board() -> None:
    board = Board.solved(4)
    assert board.tiles == list(range(1, 16)) + [0]
    assert board.blank_pos == (3, 3)
    assert board.is_solved()


# -- queries ------------------------------------------------------------------


def test_rows_view() -> None:
    board = Board.from_flat(3, NEAR_SOLVED)
    assert board.rows() == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    assert board.get_tile(2, 2) == 8


def test_valid_moves_near_solved() -> None:
    board = Board.from_flat(3, NEAR_SOLVED)
    assert sorted(board.valid_moves()) == [4, 6, 8]


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, NEAR_SOLVED)
    assert board.is_tile_correct(0, 0)
    assert board.is_tile_correct(2, 0)
    assert not board.is_tile_correct(2, 1)  # blank, not in the corner
    assert not board.is_tile_correct(2, 2)  # 8 belongs at (2, 1)


def test_copy_is_independent() -> None:
    board = Board.from_flat(3, NEAR_SOLVED)
    clone = board.copy()
    clone.slide(8)
    assert board.tiles == NEAR_SOLVED
    assert board.blank_pos == (2, 1)
    assert clone.is_solved()


# -- slide --------------------------------------------------------------------


def test_slide_swaps_and_moves_blank() -> None:
    board = Board.from_flat(3, NEAR_SOLVED)
    assert board.slide(4)
    assert board.tiles == [1, 2, 3, 4, 0, 6, 7, 5, 8]
    assert board.blank_pos == (1, 1)


@pytest.mark.parametrize("index", [0, 2, 3, 5, 7, 9, -1])
def test_slide_ignores_bad_requests(
    index: int, caplog: pytest.LogCaptureFixture
) -> None:
    board = Board.from_flat(3, NEAR_SOLVED)
    with caplog.at_level(logging.WARNING, logger="tilepuzzle.models.board"):
        assert not board.slide(index)
    assert board.tiles == NEAR_SOLVED
    assert board.blank_pos == (2, 1)
    assert "Ignoring slide" in caplog.text


def test_slide_refuses_stale_blank_cache() -> None:
    board = Board.solved(3)
    board.blank_pos = (0, 0)
    assert not board.slide(1)
    assert board.tiles == list(range(1, 9)) + [0]


def test_resync_blank() -> None:
    board = Board.from_flat(3, NEAR_SOLVED)
    board.blank_pos = (0, 0)
    board.resync_blank()
    assert board.blank_pos == (2, 1)
