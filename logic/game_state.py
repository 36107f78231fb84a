"""
Game state for Numeric TicTacToe.
Tracks the board cells, the player markers and the moves.
"""

from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from .config import GameConfig


class Marker(Enum):
    """The two player markers. The marker decides value parity for the computer."""
    ODD = "O"
    EVEN = "E"


@dataclass(frozen=True)
class Move:
    """
    A move in the game. Immutable once created.
    """
    player_name: str        # Who made the move
    marker: Marker          # The player's marker
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    value: int              # Number placed (1-9)
    timestamp: str          # When the move was made

    @classmethod
    def create(
        cls,
        player_name: str,
        marker: Marker,
        row: int,
        col: int,
        value: int,
        config: Optional[GameConfig] = None
    ) -> "Move":
        """Build a move stamped with the current time."""
        config = config or GameConfig()
        return cls(
            player_name=player_name,
            marker=marker,
            row=row,
            col=col,
            value=value,
            timestamp=datetime.now().strftime(config.TIMESTAMP_FORMAT)
        )

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)


class Board:
    """
    The 3x3 grid of numbers.

    0 means empty, otherwise the cell holds a value 1-9.
    Cells are only written by applying a validated move
    (or cleared by an explicit undo).
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize an empty board.

        Args:
            config: Game configuration.
        """
        self.config = config or GameConfig()
        size = self.config.BOARD_SIZE
        self.cells = np.full((size, size), self.config.EMPTY_VALUE, dtype=int)

    @property
    def size(self) -> int:
        return self.config.BOARD_SIZE

    def get(self, row: int, col: int) -> int:
        """Get the value in a cell."""
        return int(self.cells[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        """Check if a cell is empty."""
        return bool(self.cells[row, col] == self.config.EMPTY_VALUE)

    def place(self, row: int, col: int, value: int):
        """
        Put a value in a cell.

        The caller must validate the move first, there is no re-check here.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            value: Number to place (1-9).
        """
        self.cells[row, col] = value

    def clear(self, row: int, col: int):
        """Empty a cell. Only used when undoing a move."""
        self.cells[row, col] = self.config.EMPTY_VALUE

    def sum_line(self, cells: Iterable[Tuple[int, int]]) -> int:
        """
        Sum the values along a line.

        Args:
            cells: (row, col) positions to add up.

        Returns:
            The sum of those cells.
        """
        rows, cols = zip(*cells)
        return int(self.cells[list(rows), list(cols)].sum())

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        rows, cols = np.nonzero(self.cells == self.config.EMPTY_VALUE)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_full(self) -> bool:
        """True when no empty cell is left."""
        return not bool(np.any(self.cells == self.config.EMPTY_VALUE))

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board(self.config)
        new_board.cells = self.cells.copy()
        return new_board

    def render(self) -> str:
        """
        Render the board as text.

        Empty cells show as a dash, values as numbers, tab separated.
        """
        lines = []
        for row in self.cells:
            line = ""
            for value in row:
                if value == self.config.EMPTY_VALUE:
                    line += self.config.EMPTY_PLACEHOLDER
                else:
                    line += str(int(value))
                line += self.config.CELL_SEPARATOR
            lines.append(line)
        return "\n".join(lines)

    def print_board(self, output_fn: Callable[[str], None] = print):
        """Print the board to console."""
        output_fn("Current Game Board:")
        output_fn(self.render())
        output_fn("")
