"""
Settings for the Tic Tac Toe window.
Colours, sizes and logging defaults live here so the widgets stay plain.
"""


class AppConfig:
    """
    Configuration class for the app.
    Change these values to restyle the game.
    """

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_WIDTH = 420
    WINDOW_HEIGHT = 560
    BOARD_MIN_SIZE = 150    # px, board never shrinks below this

    # ==================== BOARD COLOURS ====================
    BOARD_BG = "#333"
    GRID_LINE = "#555"
    GRID_LINE_WIDTH = 2
    X_COLOR = "#8acaff"
    O_COLOR = "#ff8a8a"
    MARK_WIDTH = 4
    WIN_CELL_BG = "#3d5a40"  # fill behind the three winning cells
    MARK_SCALE = 0.7         # mark radius as a share of half a cell

    # ==================== STATUS COLOURS ====================
    STATUS_COLOR = "#eee"
    WIN_COLOR = "lime"
    ACTIVE_PILL = "color: #8acaff; font-weight: bold;"
    IDLE_PILL = "color: #777;"

    # ==================== LOGGING ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
