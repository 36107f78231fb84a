"""
Move validator for Numeric TicTacToe.
Validates that moves follow the rules.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates Numeric TicTacToe moves.

    The only board rule: you can only place on an empty cell.
    Row, column and value ranges belong to the input layer
    (see check_index and check_value), not to validate_move.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def validate_move(self, board: Board, row: int, col: int, value: int) -> bool:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the value (0-2).
            col: Column to place the value (0-2).
            value: The value being placed. Not range checked here.

        Returns:
            True if the target cell is empty.
        """
        return board.is_empty(row, col)

    def check_move(self, board: Board, row: int, col: int, value: int) -> ValidationResult:
        """
        Same rule as validate_move, with a message for the player.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not self.validate_move(board, row, col, value):
            return ValidationResult(
                is_valid=False,
                error_message="Invalid move. The cell is already occupied. Try again."
            )

        return ValidationResult(is_valid=True)

    def check_index(self, index: Optional[int], label: str = "row") -> ValidationResult:
        """
        Check that a row or column index is on the board.

        Args:
            index: Row or column index, None if the answer was not a number.
            label: "row" or "column", used in the message.

        Returns:
            ValidationResult.
        """
        if index is None or not self.config.is_valid_index(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid {label}. Enter again (0-{self.config.BOARD_SIZE - 1}): "
            )

        return ValidationResult(is_valid=True)

    def check_value(self, value: Optional[int]) -> ValidationResult:
        """
        Check that a value is in the playable range (1-9).
        None (not a number) fails like an out-of-range value.

        Returns:
            ValidationResult.
        """
        if value is None or not self.config.is_valid_value(value):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid value. Enter again "
                    f"({self.config.MIN_VALUE}-{self.config.MAX_VALUE}): "
                )
            )

        return ValidationResult(is_valid=True)

    def get_valid_cells(self, board: Board) -> List[Tuple[int, int]]:
        """
        Get all cells a move may target.

        Args:
            board: Current board.

        Returns:
            List of (row, col) positions.
        """
        return board.get_empty_cells()
