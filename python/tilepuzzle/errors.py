"""Exception hierarchy for the puzzle engine."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class Severity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class PuzzleError(Exception):
    """Base class for every error raised by the engine.

    ``details`` carries the offending values (index, size, ...) so callers
    can log or display them without parsing the message.
    """

    default_severity = Severity.MEDIUM

    def __init__(
        self,
        message: str,
        *,
        severity: Severity | None = None,
        **details: Any,
    ) -> None:
        super().__init__(message)
        self.severity = severity or self.default_severity
        self.details: dict[str, Any] = details


class ValidationError(PuzzleError, ValueError):
    """Malformed input: bad size, out-of-range index, broken board."""


class GameLogicError(PuzzleError, RuntimeError):
    """An internal invariant was violated (e.g. a generated board is broken)."""

    default_severity = Severity.HIGH


_MESSAGES: dict[type[PuzzleError], str] = {
    ValidationError: "Invalid input. Please check your selection and try again.",
    GameLogicError: "Game error. Please restart the puzzle and try again.",
}


def user_message(error: BaseException) -> str:
    """Return a short player-facing sentence describing *error*."""
    for cls, message in _MESSAGES.items():
        if isinstance(error, cls):
            return message
    return "Something went wrong. Please try again."
