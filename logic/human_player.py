"""
Interactive player for Numeric TicTacToe.
Asks a person at the console for row, column and value.
"""

from typing import Callable, Optional

from .config import GameConfig
from .game_state import Board, Marker, Move
from .move_validator import MoveValidator, ValidationResult


class HumanPlayer:
    """
    A player that types their moves.

    Console access goes through input_fn / output_fn so a test
    can script the answers and capture the prompts.
    """

    def __init__(
        self,
        name: str,
        marker: Marker,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the human player.

        Args:
            name: Display name (also written to the save file).
            marker: The player's marker.
            input_fn: Reads one answer, given a prompt.
            output_fn: Writes one line of text.
            config: Game configuration.
        """
        self.name = name
        self.marker = marker
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.config = config or GameConfig()
        self.validator = MoveValidator(self.config)

    def make_move(self, board: Board) -> Move:
        """
        Prompt until the player enters a move onto an empty cell.

        Args:
            board: Current board.

        Returns:
            A valid move.
        """
        last = self.config.BOARD_SIZE - 1

        while True:
            self.output_fn(f"{self.name}, it's your turn.")

            row = self._read_number(
                f"Enter Row (0-{last}): ",
                lambda n: self.validator.check_index(n, "row")
            )
            col = self._read_number(
                f"Enter Column (0-{last}): ",
                lambda n: self.validator.check_index(n, "column")
            )
            value = self._read_number(
                f"Enter Value ({self.config.MIN_VALUE}-{self.config.MAX_VALUE}): ",
                self.validator.check_value
            )

            result = self.validator.check_move(board, row, col, value)
            if not result.is_valid:
                self.output_fn(result.error_message)
                continue

            return Move.create(self.name, self.marker, row, col, value, self.config)

    def _read_number(
        self,
        prompt: str,
        check: Callable[[Optional[int]], ValidationResult]
    ) -> int:
        """
        Read one integer, re-prompting until it parses and passes the check.

        Args:
            prompt: First prompt to show.
            check: Range check for the parsed number (None when it did not parse).

        Returns:
            The accepted number.
        """
        answer = self.input_fn(prompt)

        while True:
            try:
                number = int(answer.strip())
            except ValueError:
                number = None

            result = check(number)
            if result.is_valid:
                return number

            answer = self.input_fn(result.error_message)
