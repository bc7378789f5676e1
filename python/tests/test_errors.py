"""Error taxonomy and player-facing messages."""

from __future__ import annotations

from tilepuzzle.errors import (
    GameLogicError,
    PuzzleError,
    Severity,
    ValidationError,
    user_message,
)


def test_hierarchy() -> None:
    assert issubclass(ValidationError, PuzzleError)
    assert issubclass(ValidationError, ValueError)
    assert issubclass(GameLogicError, PuzzleError)
    assert issubclass(GameLogicError, RuntimeError)


def test_details_and_severity() -> None:
    err = ValidationError("Invalid piece index: 12", index=12)
    assert str(err) == "Invalid piece index: 12"
    assert err.details == {"index": 12}
    assert err.severity is Severity.MEDIUM
    assert GameLogicError("broken").severity is Severity.HIGH
    assert GameLogicError("broken", severity=Severity.CRITICAL).severity is Severity.CRITICAL


def test_user_message() -> None:
    assert "Invalid input" in user_message(ValidationError("x"))
    assert "Game error" in user_message(GameLogicError("x"))
    assert user_message(KeyError("x")) == "Something went wrong. Please try again."
