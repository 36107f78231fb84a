"""
Undo/redo bookkeeping for Numeric TicTacToe.
"""

from typing import List, Optional

from .game_state import Move


class UndoRedoManager:
    """
    Two stacks of moves.

    The undo stack holds applied moves, the redo stack holds undone
    moves, most recent last in both. A new move wipes the redo chain.
    """

    def __init__(self):
        self.undo_stack: List[Move] = []
        self.redo_stack: List[Move] = []

    def record(self, move: Move):
        """Record an applied move. Clears anything that could be redone."""
        self.undo_stack.append(move)
        self.redo_stack.clear()

    def undo(self) -> Optional[Move]:
        """
        Take back the most recent move.

        Returns:
            The undone move, or None if there is nothing to undo.
        """
        if not self.undo_stack:
            return None

        move = self.undo_stack.pop()
        self.redo_stack.append(move)
        return move

    def redo(self) -> Optional[Move]:
        """
        Replay the most recently undone move.

        Returns:
            The redone move, or None if there is nothing to redo.
        """
        if not self.redo_stack:
            return None

        move = self.redo_stack.pop()
        self.undo_stack.append(move)
        return move

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def clear(self):
        """Forget all moves."""
        self.undo_stack.clear()
        self.redo_stack.clear()
