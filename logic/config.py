"""
Game configuration for Numeric TicTacToe.
All the rules and console settings live here.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the rules or the console text.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # A line (row, column or diagonal) wins when it sums to this
    WIN_SUM = 15

    # 0 means the cell is empty
    EMPTY_VALUE = 0

    # ==================== VALUE SETTINGS ====================
    MIN_VALUE = 1
    MAX_VALUE = 9

    # Value pools for the computer player, picked by marker
    ODD_VALUES = (1, 3, 5, 7, 9)
    EVEN_VALUES = (2, 4, 6, 8)

    # ==================== PLAYER SETTINGS ====================
    PLAYER_ONE_NAME = "Player 1"
    PLAYER_TWO_NAME = "Player 2"
    COMPUTER_NAME = "Computer"

    # Game modes offered at the menu
    MODE_HUMAN_VS_HUMAN = "1"
    MODE_HUMAN_VS_COMPUTER = "2"

    # ==================== DISPLAY SETTINGS ====================
    EMPTY_PLACEHOLDER = "-"
    CELL_SEPARATOR = "\t"
    BANNER_WIDTH = 60

    # ==================== SAVE FILE SETTINGS ====================
    SAVE_FIELD_SEPARATOR = ","
    SAVE_ENCODING = "utf-8"
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.BOARD_SIZE * self.BOARD_SIZE

    def is_valid_index(self, index: int) -> bool:
        """Check that a row or column index is on the board."""
        return 0 <= index < self.BOARD_SIZE

    def is_valid_value(self, value: int) -> bool:
        """Check that a value is in the playable range."""
        return self.MIN_VALUE <= value <= self.MAX_VALUE
