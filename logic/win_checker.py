"""
Win checker for Numeric TicTacToe.
Checks if a line adds up to the target sum or if the game is a draw.
"""

from typing import List, Optional, Tuple

import numpy as np

from .config import GameConfig
from .game_state import Board


class WinChecker:
    """
    Checks for win conditions in Numeric TicTacToe.

    Win condition: any row, column or diagonal sums to exactly 15.
    The win belongs to whoever made the last move, so no colors
    are tracked here.
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def line_sums(self, board: Board) -> np.ndarray:
        """
        Sum every line on the board.

        Args:
            board: The board to scan.

        Returns:
            Array of 8 sums: 3 rows, 3 columns, then the 2 diagonals.
        """
        cells = board.cells
        return np.concatenate([
            cells.sum(axis=1),
            cells.sum(axis=0),
            [np.trace(cells), np.trace(np.fliplr(cells))],
        ])

    def has_win(self, board: Board) -> bool:
        """
        Check if any line sums to the target.

        Args:
            board: The board to check.

        Returns:
            True if some row, column or diagonal sums to exactly 15.
        """
        return bool(np.any(self.line_sums(board) == self.config.WIN_SUM))

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board.

        Returns:
            The first winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if board.sum_line(line) == self.config.WIN_SUM:
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and no line sums to 15.
        """
        return board.is_full() and not self.has_win(board)
