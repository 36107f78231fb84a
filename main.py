"""
Main script for Numeric TicTacToe.

Players take turns writing numbers 1-9 into a 3x3 grid.
Whoever completes a row, column or diagonal that sums to 15 wins.

This script ties together:
- Players (human at the console, or a random computer)
- Logic (board, move validation, win checking, turns)
- Saving the move history to a text file

Run this script to play!
"""

from typing import Callable, List, Optional

from logic.config import GameConfig
from logic.game_state import Marker
from logic.human_player import HumanPlayer
from logic.computer_player import ComputerPlayer
from logic.players import MoveStrategy
from logic.turn_controller import TurnController
from logic.save_manager import SaveManager


class NumericTicTacToe:
    """
    Console application for Numeric TicTacToe.

    Flow:
    1. Pick a game mode (human vs human, or human vs computer)
    2. Play until someone wins (or the board fills up)
    3. Offer to save the moves
    4. Offer to play again
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the app.

        Args:
            input_fn: Reads one answer, given a prompt.
            output_fn: Writes one line of text.
            seed: Seed for the computer player.
            config: Game configuration.
        """
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.seed = seed
        self.config = config or GameConfig()
        self.save_manager = SaveManager(output_fn, self.config)

        # The last game played, kept for inspection
        self.controller: Optional[TurnController] = None

    def choose_mode(self) -> str:
        """Ask which game mode to play."""
        self.output_fn("Choose Game Mode:")
        self.output_fn(f"{self.config.MODE_HUMAN_VS_HUMAN}. Human vs Human")
        self.output_fn(f"{self.config.MODE_HUMAN_VS_COMPUTER}. Human vs Computer")
        return self.input_fn("").strip()

    def create_players(self, mode: str) -> List[MoveStrategy]:
        """
        Build the two players for a mode.

        Anything other than human vs human gets a computer opponent.
        """
        player_one = HumanPlayer(
            self.config.PLAYER_ONE_NAME, Marker.ODD,
            self.input_fn, self.output_fn, self.config
        )

        if mode == self.config.MODE_HUMAN_VS_HUMAN:
            player_two = HumanPlayer(
                self.config.PLAYER_TWO_NAME, Marker.EVEN,
                self.input_fn, self.output_fn, self.config
            )
        else:
            player_two = ComputerPlayer(
                self.config.COMPUTER_NAME, Marker.EVEN,
                seed=self.seed, output_fn=self.output_fn, config=self.config
            )

        return [player_one, player_two]

    def play_game(self, mode: str) -> Optional[MoveStrategy]:
        """
        Play one full game, then offer to save it.

        Returns:
            The winner, or None on a draw.
        """
        self.controller = TurnController(
            self.create_players(mode), output_fn=self.output_fn, config=self.config
        )
        winner = self.controller.play()

        if winner is not None:
            self.output_fn(f"{winner.name} won!")
        else:
            self.output_fn("It's a draw!")

        self.ask_to_save()
        return winner

    def ask_to_save(self) -> bool:
        """Offer to save the finished game."""
        choice = self.input_fn("Do you want to save the game? (yes/no): ")
        if choice.strip().lower() != "yes":
            return False

        file_path = self.input_fn("Enter the file path to save the game: ")
        return self.save_manager.save_game(self.controller.history, file_path.strip())

    def ask_for_replay(self) -> Optional[str]:
        """
        Ask whether to play again.

        Returns:
            The chosen mode, or None to quit.
        """
        choice = self.input_fn(
            f"Do you want to play again? "
            f"({self.config.MODE_HUMAN_VS_HUMAN}: Human vs Human, "
            f"{self.config.MODE_HUMAN_VS_COMPUTER}: Human vs Computer, "
            f"0 or * to exit): "
        ).strip()

        if choice in (self.config.MODE_HUMAN_VS_HUMAN, self.config.MODE_HUMAN_VS_COMPUTER):
            return choice
        return None

    def run(self, mode: Optional[str] = None):
        """
        Play games until the player declines a replay.

        Args:
            mode: Game mode for the first game (asked if None).
        """
        if mode is None:
            mode = self.choose_mode()

        while mode is not None:
            self.play_game(mode)
            mode = self.ask_for_replay()

        self.output_fn("Thanks for playing!")


def main(
    argv: Optional[List[str]] = None,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print
):
    """
    Main entry point.

    Args:
        argv: Command line arguments (sys.argv[1:] if None).
        input_fn: Reads one answer, given a prompt.
        output_fn: Writes one line of text.
    """
    import argparse

    config = GameConfig()

    parser = argparse.ArgumentParser(description="Numeric TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[config.MODE_HUMAN_VS_HUMAN, config.MODE_HUMAN_VS_COMPUTER],
        help="Game mode for the first game: 1 human vs human, 2 human vs computer"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the computer player (repeatable games)"
    )

    args = parser.parse_args(argv)

    output_fn("\n" + "=" * config.BANNER_WIDTH)
    output_fn("   Numeric TicTacToe - first line to 15 wins")
    output_fn("=" * config.BANNER_WIDTH + "\n")

    app = NumericTicTacToe(input_fn, output_fn, seed=args.seed, config=config)

    try:
        app.run(args.mode)
    except (KeyboardInterrupt, EOFError):
        output_fn("\n\nGame interrupted by user.")
    finally:
        output_fn("Goodbye!")


if __name__ == "__main__":
    main()
