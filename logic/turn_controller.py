"""
Turn controller for Numeric TicTacToe.
Alternates the two players, applies their moves and checks for a win.
"""

from enum import Enum
from typing import Callable, List, Optional

from .config import GameConfig
from .errors import GameOverError, InvalidMoveError
from .game_state import Board, Move
from .history import UndoRedoManager
from .move_validator import MoveValidator
from .players import MoveStrategy
from .win_checker import WinChecker


class TurnState(Enum):
    """Where the game is in its turn cycle."""
    AWAITING_MOVE = "awaiting_move"
    MOVE_APPLIED = "move_applied"
    GAME_WON = "game_won"
    GAME_DRAWN = "game_drawn"


class TurnController:
    """
    Runs one game between two players.

    Game flow:
    1. Ask the current player for a move
    2. Apply it to the board, log it, record it for undo
    3. Check for a win (the mover wins) or a full board (draw)
    4. Otherwise pass the turn to the other player
    """

    def __init__(
        self,
        players: List[MoveStrategy],
        board: Optional[Board] = None,
        output_fn: Callable[[str], None] = print,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the controller.

        Args:
            players: Exactly two players, first one moves first.
            board: Board to play on (a fresh one if None).
            output_fn: Writes one line of text.
            config: Game configuration.
        """
        if len(players) != 2:
            raise ValueError(f"Need exactly 2 players, got {len(players)}")

        self.config = config or GameConfig()
        self.players = players
        self.board = board or Board(self.config)
        self.output_fn = output_fn

        self.validator = MoveValidator(self.config)
        self.win_checker = WinChecker(self.config)
        self.undo_redo = UndoRedoManager()

        # Append-only log of applied moves, used for saving
        self.history: List[Move] = []

        self.current_index = 0
        self.state = TurnState.AWAITING_MOVE
        self.winner: Optional[MoveStrategy] = None

    @property
    def current_player(self) -> MoveStrategy:
        return self.players[self.current_index]

    @property
    def is_game_over(self) -> bool:
        return self.state in (TurnState.GAME_WON, TurnState.GAME_DRAWN)

    def play(self) -> Optional[MoveStrategy]:
        """
        Play turns until someone wins or the board fills up.

        Returns:
            The winning player, or None on a draw.
        """
        self.board.print_board(self.output_fn)

        while not self.is_game_over:
            self.play_turn()

        return self.winner

    def play_turn(self) -> Move:
        """
        Let the current player make one move.

        Returns:
            The applied move.
        """
        if self.is_game_over:
            raise GameOverError("Game is already over!")

        move = self.current_player.make_move(self.board)
        self.apply_move(move)
        return move

    def apply_move(self, move: Move):
        """
        Put a move on the board and advance the state machine.

        Args:
            move: Move from the current player.
        """
        if not self.validator.validate_move(self.board, move.row, move.col, move.value):
            raise InvalidMoveError(move.row, move.col, self.board.get(move.row, move.col))

        self.board.place(move.row, move.col, move.value)
        self.history.append(move)
        self.undo_redo.record(move)
        self.state = TurnState.MOVE_APPLIED

        self.board.print_board(self.output_fn)
        self._update_state()

    def _update_state(self):
        """Check the board after a move and pick the next state."""
        if self.win_checker.has_win(self.board):
            self.state = TurnState.GAME_WON
            self.winner = self.current_player
        elif self.win_checker.check_draw(self.board):
            self.state = TurnState.GAME_DRAWN
            self.winner = None
        else:
            self.current_index = 1 - self.current_index
            self.state = TurnState.AWAITING_MOVE

    def undo_last(self) -> Optional[Move]:
        """
        Take back the last move.

        The cell is emptied and the turn goes back to whoever made
        the move. The history log keeps the move.

        Returns:
            The undone move, or None if there was nothing to undo.
        """
        move = self.undo_redo.undo()
        if move is None:
            return None

        self.board.clear(move.row, move.col)
        self.current_index = self._index_of(move)
        self.state = TurnState.AWAITING_MOVE
        self.winner = None

        self.board.print_board(self.output_fn)
        return move

    def redo_last(self) -> Optional[Move]:
        """
        Replay the last undone move.

        Returns:
            The redone move, or None if there was nothing to redo.
        """
        move = self.undo_redo.redo()
        if move is None:
            return None

        self.board.place(move.row, move.col, move.value)
        self.current_index = self._index_of(move)
        self.state = TurnState.MOVE_APPLIED

        self.board.print_board(self.output_fn)
        self._update_state()
        return move

    def _index_of(self, move: Move) -> int:
        """Find which player made a move."""
        for index, player in enumerate(self.players):
            if player.marker == move.marker:
                return index
        return self.current_index
