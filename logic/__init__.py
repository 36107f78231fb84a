"""
Logic module for Numeric TicTacToe.
Handles the board, rules, players and saving.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import GameError, InvalidMoveError, GameOverError
from .game_state import Board, Marker, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .history import UndoRedoManager
from .players import MoveStrategy
from .human_player import HumanPlayer
from .computer_player import ComputerPlayer
from .turn_controller import TurnController, TurnState
from .save_manager import SaveManager
