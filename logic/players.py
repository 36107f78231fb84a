"""
The player capability shared by humans and the computer.
"""

from typing import Protocol

from .game_state import Board, Marker, Move


class MoveStrategy(Protocol):
    """
    Anything that can produce the next valid move for a board.

    Implementations loop internally until the move targets an
    empty cell, so the turn controller never sees an invalid one.
    """

    name: str
    marker: Marker

    def make_move(self, board: Board) -> Move:
        ...
