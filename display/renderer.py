"""
Board renderer for TicTacToe.
Draws the grid, the X and O marks, and the game over screen.
"""

import cv2
import numpy as np
from typing import Optional
from logic.game_state import GameState, Cell
from .config import DisplayConfig


class BoardRenderer:
    """
    Renders a GameState into a BGR image.

    Cells are numbered 0-8 from the top-left corner to the bottom-right
    corner, row by row.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()

    def render(self, game_state: GameState) -> np.ndarray:
        """
        Draw the current frame.

        Args:
            game_state: The game to draw.

        Returns:
            BGR image of size CANVAS_SIZE x CANVAS_SIZE.
        """
        outcome = game_state.outcome

        # Once the game is over only the result is shown
        if outcome.is_decided:
            return self.show_text(outcome.message)

        canvas = self.draw_board()

        for index, cell in enumerate(game_state.board):
            if cell == Cell.PLAYER_X:
                self.draw_x(canvas, index)
            elif cell == Cell.PLAYER_O:
                self.draw_o(canvas, index)

        return canvas

    def _blank_canvas(self) -> np.ndarray:
        size = self.config.CANVAS_SIZE
        canvas = np.zeros((size, size, 3), dtype=np.uint8)
        canvas[:] = self.config.BACKGROUND_COLOR
        return canvas

    def draw_board(self) -> np.ndarray:
        """Draw an empty board: background plus two lines each way."""
        canvas = self._blank_canvas()
        size = self.config.CANVAS_SIZE
        segment = self.config.SEGMENT

        for i in range(1, self.config.BOARD_SIZE):
            # Vertical line
            cv2.line(canvas, (i * segment, 0), (i * segment, size),
                     self.config.LINE_COLOR, self.config.LINE_THICKNESS)
            # Horizontal line
            cv2.line(canvas, (0, i * segment), (size, i * segment),
                     self.config.LINE_COLOR, self.config.LINE_THICKNESS)

        return canvas

    def draw_x(self, canvas: np.ndarray, index: int):
        """
        Draw an X in a cell.

        Args:
            canvas: Image to draw on (modified in place).
            index: Cell index (0-8).
        """
        segment = self.config.SEGMENT
        pad = self.config.MARK_PADDING
        row, col = divmod(index, self.config.BOARD_SIZE)

        left = col * segment + pad
        right = (col + 1) * segment - pad
        top = row * segment + pad
        bottom = (row + 1) * segment - pad

        cv2.line(canvas, (left, top), (right, bottom),
                 self.config.X_COLOR, self.config.MARK_THICKNESS)
        cv2.line(canvas, (right, top), (left, bottom),
                 self.config.X_COLOR, self.config.MARK_THICKNESS)

    def draw_o(self, canvas: np.ndarray, index: int):
        """
        Draw an O in a cell: a filled circle with an outline.

        Args:
            canvas: Image to draw on (modified in place).
            index: Cell index (0-8).
        """
        center = self.cell_center(index)
        radius = self.config.O_DIAMETER // 2

        cv2.circle(canvas, center, radius, self.config.O_FILL_COLOR, -1)
        cv2.circle(canvas, center, radius, self.config.O_OUTLINE_COLOR, self.config.LINE_THICKNESS)

    def show_text(self, text: str) -> np.ndarray:
        """Plain background with the text centered."""
        canvas = self._blank_canvas()
        size = self.config.CANVAS_SIZE

        (text_width, text_height), _ = cv2.getTextSize(
            text, self.config.FONT, self.config.FONT_SCALE, self.config.FONT_THICKNESS
        )
        origin = ((size - text_width) // 2, (size + text_height) // 2)

        cv2.putText(canvas, text, origin, self.config.FONT, self.config.FONT_SCALE,
                    self.config.TEXT_COLOR, self.config.FONT_THICKNESS, cv2.LINE_AA)

        return canvas

    def cell_center(self, index: int) -> tuple:
        """Pixel (x, y) of the middle of a cell."""
        segment = self.config.SEGMENT
        row, col = divmod(index, self.config.BOARD_SIZE)
        return (col * segment + segment // 2, row * segment + segment // 2)

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Map a pixel position to a cell index.

        Args:
            x: Pixel column.
            y: Pixel row.

        Returns:
            Cell index (0-8), or None if the point is off the canvas.
        """
        size = self.config.CANVAS_SIZE
        if not (0 <= x < size and 0 <= y < size):
            return None

        segment = self.config.SEGMENT
        return x // segment + self.config.BOARD_SIZE * (y // segment)
