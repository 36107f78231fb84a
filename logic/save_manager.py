"""
Save manager for Numeric TicTacToe.
Writes the move history to a plain text file.

File format, one line per move, no header:
    playerName,row,col,value,timestamp
"""

import os
from typing import Callable, Iterable, Optional

from .config import GameConfig
from .game_state import Move


class SaveManager:
    """
    Saves a finished game.

    A bad path or a failed write is reported and the save is skipped.
    Nothing here raises to the caller.
    """

    def __init__(
        self,
        output_fn: Callable[[str], None] = print,
        config: Optional[GameConfig] = None
    ):
        self.output_fn = output_fn
        self.config = config or GameConfig()

    def format_move(self, move: Move) -> str:
        """Turn a move into one line of the save file (no newline)."""
        fields = [
            move.player_name,
            str(move.row),
            str(move.col),
            str(move.value),
            move.timestamp,
        ]
        return self.config.SAVE_FIELD_SEPARATOR.join(fields)

    def is_valid_file_path(self, file_path: str) -> bool:
        """
        Check that a path could be written to.

        Args:
            file_path: Path typed by the player.

        Returns:
            False for blank paths, paths with NUL bytes, directories
            and paths whose parent folder does not exist.
        """
        if not file_path or not file_path.strip():
            return False

        if "\0" in file_path:
            return False

        full_path = os.path.abspath(file_path)
        if os.path.isdir(full_path):
            return False

        return os.path.isdir(os.path.dirname(full_path))

    def save_game(self, moves: Iterable[Move], file_path: str) -> bool:
        """
        Write moves to a file.

        Args:
            moves: Moves in the order they were played.
            file_path: Where to write.

        Returns:
            True if the file was written.
        """
        if not self.is_valid_file_path(file_path):
            self.output_fn("Invalid file path. Please enter a valid path.")
            return False

        try:
            with open(file_path, "w", encoding=self.config.SAVE_ENCODING) as f:
                for move in moves:
                    f.write(self.format_move(move) + "\n")
        except OSError as e:
            self.output_fn(f"ERROR saving game: {e}")
            return False

        self.output_fn("Game successfully saved.")
        return True
