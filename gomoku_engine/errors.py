"""
Gomoku error hierarchy.

The rules engine itself does not raise: range and occupancy are caller
preconditions. These exceptions are raised at the checked entry points
(GomokuGame) where a human or AI move is actually submitted.

Usage:
    from gomoku_engine.errors import InvalidMoveError

    try:
        game.make_move(row, col)
    except InvalidMoveError as e:
        print(f"Invalid move: {e.message}")
"""

from typing import Any, Optional

__all__ = [
    "ConfigurationError",
    "GameOverError",
    "GomokuError",
    "InvalidMoveError",
]


class GomokuError(Exception):
    """Base exception for all gomoku_engine errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Additional details for debugging
    """
    code: str = "GOMOKU_ERROR"

    def __init__(self, message: str = "", **context: Any):
        self.message = message or self.__class__.__doc__ or ""
        self.context = context
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({details})"
        return f"[{self.code}] {self.message}"


class InvalidMoveError(GomokuError):
    """Move is off the board or targets an occupied cell."""
    code = "INVALID_MOVE"

    def __init__(self, row: int, col: int, reason: str = ""):
        self.row = row
        self.col = col
        self.reason = reason
        super().__init__(
            f"cannot play at ({row}, {col})" + (f": {reason}" if reason else ""),
            row=row,
            col=col,
        )


class GameOverError(GomokuError):
    """A move was submitted after the game ended."""
    code = "GAME_OVER"


class ConfigurationError(GomokuError):
    """Invalid game setup (unknown mode)."""
    code = "CONFIGURATION_ERROR"

    def __init__(self, message: str = "", value: Optional[Any] = None):
        if value is None:
            super().__init__(message)
        else:
            super().__init__(message, value=value)
