"""
Computer player for Numeric TicTacToe.
Picks random cells and values until it finds an empty cell.
"""

from typing import Callable, Optional

import numpy as np

from .config import GameConfig
from .game_state import Board, Marker, Move
from .move_validator import MoveValidator


class ComputerPlayer:
    """
    A computer opponent that plays random moves.

    Row and column are uniform over the board. The value comes from
    the odd pool for the ODD marker and the even pool for EVEN.
    There is no retry limit: with at least one empty cell the
    search ends with probability 1.
    """

    def __init__(
        self,
        name: str,
        marker: Marker = Marker.EVEN,
        seed: Optional[int] = None,
        output_fn: Callable[[str], None] = print,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the computer player.

        Args:
            name: Display name.
            marker: Which marker the computer plays.
            seed: Seed for the random generator (None for fresh entropy).
            output_fn: Writes one line of text.
            config: Game configuration.
        """
        self.name = name
        self.marker = marker
        self.output_fn = output_fn
        self.config = config or GameConfig()
        self.validator = MoveValidator(self.config)
        self.rng = np.random.default_rng(seed)

        # Keep track of how many picks the last move took (for debugging)
        self.attempts = 0

    @property
    def value_pool(self):
        """Values this player draws from."""
        if self.marker == Marker.ODD:
            return self.config.ODD_VALUES
        return self.config.EVEN_VALUES

    def make_move(self, board: Board) -> Move:
        """
        Sample moves until one lands on an empty cell.

        Args:
            board: Current board.

        Returns:
            A valid move.
        """
        size = self.config.BOARD_SIZE
        self.attempts = 0

        while True:
            self.attempts += 1
            row = int(self.rng.integers(0, size))
            col = int(self.rng.integers(0, size))
            value = int(self.rng.choice(self.value_pool))

            if self.validator.validate_move(board, row, col, value):
                break

        self.output_fn(f"Computer ({self.name}) plays: {row} {col} {value}")
        return Move.create(self.name, self.marker, row, col, value, self.config)
