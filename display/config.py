"""
Display configuration for TicTacToe.
All the settings for the game window and drawing.
"""

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to resize or restyle the board.
    """

    # ==================== CANVAS SETTINGS ====================
    # Square canvas, split into a 3x3 grid
    CANVAS_SIZE = 450
    BOARD_SIZE = 3
    SEGMENT = CANVAS_SIZE // BOARD_SIZE  # 150 pixels per cell

    # ==================== DRAWING SETTINGS ====================
    # Colors are BGR
    BACKGROUND_COLOR = (220, 220, 220)
    LINE_COLOR = (0, 0, 0)
    X_COLOR = (0, 0, 0)
    O_FILL_COLOR = (255, 255, 255)
    O_OUTLINE_COLOR = (0, 0, 0)
    TEXT_COLOR = (0, 0, 0)

    LINE_THICKNESS = 1
    MARK_THICKNESS = 2

    # Distance between an X and the cell border
    MARK_PADDING = 15

    # O is drawn as a circle of this diameter, centered in the cell
    O_DIAMETER = 100

    # Game over message
    FONT = cv2.FONT_HERSHEY_SIMPLEX
    FONT_SCALE = 0.9
    FONT_THICKNESS = 2

    # ==================== WINDOW SETTINGS ====================
    WINDOW_NAME = "TicTacToe"
    FRAME_DELAY_MS = 30  # ~30 FPS redraw
    SCREENSHOT_PREFIX = "tictactoe"
