"""
Exceptions for Numeric TicTacToe.

Bad console input never raises: players re-prompt instead.
These are for programming errors in the game flow.
"""


class GameError(Exception):
    """Base class for game errors."""


class InvalidMoveError(GameError):
    """A player handed the controller a move that targets an occupied cell."""

    def __init__(self, row: int, col: int, current: int):
        super().__init__(
            f"Cell ({row}, {col}) is already occupied by {current}"
        )
        self.row = row
        self.col = col
        self.current = current


class GameOverError(GameError):
    """A turn was requested after the game already ended."""
