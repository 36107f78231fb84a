"""
Tests for saving games and the console application flow.
"""

import sys

import pytest

from logic.config import GameConfig
from logic.game_state import Marker, Move
from logic.human_player import HumanPlayer
from logic.computer_player import ComputerPlayer
from logic.save_manager import SaveManager
from main import NumericTicTacToe, main


def scripted(answers, prompts=None):
    answers = iter(answers)

    def input_fn(prompt):
        if prompts is not None:
            prompts.append(prompt)
        return next(answers)

    return input_fn


def raising(error):
    """Build an input function that fails like a closed or interrupted console."""
    def input_fn(prompt):
        raise error
    return input_fn


SAVE_PROMPT = "Do you want to save the game? (yes/no): "
REPLAY_PROMPT = "Do you want to play again? (1: Human vs Human, 2: Human vs Computer, 0 or * to exit): "

# Both players write 1s, filling the board row by row with no line at 15
DRAWN_GAME = [answer for cell in range(9) for answer in (str(cell // 3), str(cell % 3), "1")]


# Player 1 fills row 0 with 8, 4, 3 while Player 2 plays 1s on row 2
WINNING_GAME = [
    "0", "0", "8",
    "2", "0", "1",
    "0", "1", "4",
    "2", "1", "1",
    "0", "2", "3",
]


# ==================== SAVE MANAGER ====================

def test_format_move():
    move = Move("Player 1", Marker.ODD, 0, 2, 7, "2026-01-01 10:00:00")
    assert SaveManager(lambda text: None).format_move(move) == "Player 1,0,2,7,2026-01-01 10:00:00"


def test_save_game_writes_one_line_per_move(tmp_path):
    output = []
    moves = [
        Move("Player 1", Marker.ODD, 0, 0, 8, "t1"),
        Move("Computer", Marker.EVEN, 1, 1, 4, "t2"),
    ]
    path = tmp_path / "game.txt"

    assert SaveManager(output.append).save_game(moves, str(path)) is True
    assert path.read_text().splitlines() == ["Player 1,0,0,8,t1", "Computer,1,1,4,t2"]
    assert output == ["Game successfully saved."]


def test_save_game_skips_bad_paths(tmp_path):
    output = []
    manager = SaveManager(output.append)

    assert manager.save_game([], "") is False
    assert manager.save_game([], "   ") is False
    assert manager.save_game([], str(tmp_path / "missing" / "game.txt")) is False
    assert manager.save_game([], str(tmp_path)) is False
    assert output.count("Invalid file path. Please enter a valid path.") == 4


def test_is_valid_file_path(tmp_path):
    manager = SaveManager(lambda text: None)
    assert manager.is_valid_file_path(str(tmp_path / "game.txt"))
    assert not manager.is_valid_file_path("bad\0name.txt")


# ==================== CONSOLE APP ====================

def test_mode_choice_builds_players():
    app = NumericTicTacToe(scripted([]), lambda text: None, seed=1)

    humans = app.create_players("1")
    assert all(isinstance(p, HumanPlayer) for p in humans)
    assert [p.name for p in humans] == ["Player 1", "Player 2"]

    versus = app.create_players("2")
    assert isinstance(versus[1], ComputerPlayer)
    assert versus[1].name == "Computer"
    assert [p.marker for p in versus] == [Marker.ODD, Marker.EVEN]

    # Unknown choices fall back to the computer opponent
    assert isinstance(app.create_players("7")[1], ComputerPlayer)


def test_human_game_then_save_and_quit(tmp_path):
    path = tmp_path / "moves.txt"
    output = []
    answers = ["1"] + WINNING_GAME + ["yes", str(path), "0"]
    app = NumericTicTacToe(scripted(answers), output.append)

    app.run()

    assert "Player 1 won!" in output
    assert "Game successfully saved." in output
    assert output[-1] == "Thanks for playing!"

    lines = path.read_text().splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("Player 1,0,0,8,")
    assert lines[1].startswith("Player 2,2,0,1,")
    assert lines[-1].startswith("Player 1,0,2,3,")


def test_declining_save_and_replaying(tmp_path):
    output = []
    answers = WINNING_GAME + ["no", "1"] + WINNING_GAME + ["NO", "*"]
    app = NumericTicTacToe(scripted(answers), output.append)

    app.run("1")

    assert output.count("Player 1 won!") == 2
    assert "Game successfully saved." not in output
    assert list(tmp_path.iterdir()) == []


def test_bad_save_path_still_offers_replay():
    output = []
    answers = WINNING_GAME + ["yes", "", "0"]
    app = NumericTicTacToe(scripted(answers), output.append)

    app.run("1")

    assert "Invalid file path. Please enter a valid path." in output
    assert output[-1] == "Thanks for playing!"


def test_replay_choices():
    app = NumericTicTacToe(scripted(["2", "1", "0", "*", "yes"]), lambda text: None)
    assert app.ask_for_replay() == "2"
    assert app.ask_for_replay() == "1"
    assert app.ask_for_replay() is None
    assert app.ask_for_replay() is None
    assert app.ask_for_replay() is None


def test_drawn_game_still_offers_save_and_replay():
    output = []
    prompts = []
    answers = DRAWN_GAME + ["no", "0"]
    app = NumericTicTacToe(scripted(answers, prompts), output.append)

    app.run("1")

    assert "It's a draw!" in output
    assert not any(line.endswith(" won!") for line in output)
    assert app.controller.board.is_full()
    assert prompts[-2:] == [SAVE_PROMPT, REPLAY_PROMPT]
    assert output[-1] == "Thanks for playing!"


def test_drawn_game_can_be_saved(tmp_path):
    path = tmp_path / "draw.txt"
    answers = DRAWN_GAME + ["Yes", str(path), "*"]
    app = NumericTicTacToe(scripted(answers), lambda text: None)

    app.run("1")

    lines = path.read_text().splitlines()
    assert len(lines) == 9
    assert lines[8].startswith("Player 1,2,2,1,")


# ==================== ENTRY POINT ====================

def test_main_plays_a_game_from_mode_flag():
    output = []
    main(["--mode", "1"], scripted(WINNING_GAME + ["no", "0"]), output.append)

    assert output[0] == "\n" + "=" * GameConfig.BANNER_WIDTH
    assert "Player 1 won!" in output
    assert output[-2:] == ["Thanks for playing!", "Goodbye!"]


def test_main_asks_for_mode_without_flag():
    output = []
    main([], scripted(["1"] + WINNING_GAME + ["no", "0"]), output.append)

    assert "Choose Game Mode:" in output
    assert "Player 1 won!" in output
    assert output[-1] == "Goodbye!"


def test_main_says_goodbye_on_end_of_input():
    output = []
    main(["--mode", "2", "--seed", "1"], raising(EOFError), output.append)

    assert "Current Game Board:" in output
    assert "\n\nGame interrupted by user." in output
    assert output[-1] == "Goodbye!"


def test_main_says_goodbye_on_ctrl_c():
    output = []
    main([], raising(KeyboardInterrupt), output.append)

    assert "Choose Game Mode:" in output
    assert "\n\nGame interrupted by user." in output
    assert output[-1] == "Goodbye!"


def test_main_reads_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["main.py", "--mode", "2", "--seed", "3"])
    output = []

    main(input_fn=raising(EOFError), output_fn=output.append)

    # Mode came from argv, so the menu was skipped
    assert "Choose Game Mode:" not in output
    assert "Player 1, it's your turn." in output
    assert output[-1] == "Goodbye!"


def test_main_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        main(["--mode", "5"], raising(EOFError), lambda text: None)
