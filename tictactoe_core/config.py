"""
Game configuration for tic-tac-toe.
Timings, marks and display settings used by the drivers.
"""

from .board_state import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Command-line flags override some of these per run.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3

    # ==================== PLAYERS ====================
    HUMAN_MARK = Mark.X   # X always moves first
    AI_MARK = Mark.O

    # ==================== TIMING ====================
    COUNTDOWN_SECONDS = 3      # Before each round starts
    AI_MOVE_DELAY_MS = 500     # Pause before the AI move appears

    # ==================== DISPLAY ====================
    WINDOW_TITLE = "Tic Tac Toe"
    BACKGROUND_COLOR = "#1f2937"
    CELL_COLOR = "#374151"
    TEXT_COLOR = "white"

    MARK_COLORS = {
        Mark.X: "#3b82f6",   # blue
        Mark.O: "#ef4444",   # red
    }

    ICON_SIZE = 64      # Pixels, square
    ICON_WIDTH = 8      # Stroke width of drawn icons
    FONT = "Segoe UI"
