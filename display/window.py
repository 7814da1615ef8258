"""
Game window for TicTacToe.
Shows the board with OpenCV and forwards mouse clicks to the game.
"""

import time
import cv2
from typing import Optional
from logic.game_controller import GameController
from .config import DisplayConfig
from .renderer import BoardRenderer


class GameWindow:
    """
    OpenCV window that plays one session of TicTacToe.

    Controls:
    - Left click: place X (or start a new game once it is over)
    - 'r': reset the game
    - 's': save a screenshot
    - 'q': quit
    """

    def __init__(
        self,
        controller: Optional[GameController] = None,
        config: Optional[DisplayConfig] = None
    ):
        self.config = config or DisplayConfig()
        self.controller = controller or GameController()
        self.renderer = BoardRenderer(self.config)
        self.is_running = False

    def _on_mouse(self, event, x, y, flags, param):
        """Mouse callback registered with OpenCV."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return

        index = self.renderer.cell_at(x, y)
        if index is None:
            return

        self.controller.handle_cell_selected(index)

    def handle_key(self, key: int, frame) -> bool:
        """
        Handle a key press.

        Args:
            key: Key code from cv2.waitKey (masked to 8 bits).
            frame: The frame currently shown, for screenshots.

        Returns:
            False if the window should close.
        """
        if key == ord('q'):
            print("\nGame quit by user.")
            return False
        elif key == ord('r'):
            self.controller.reset()
        elif key == ord('s'):
            filename = f"{self.config.SCREENSHOT_PREFIX}_{int(time.time())}.png"
            cv2.imwrite(filename, frame)
            print(f"Saved: {filename}")
        return True

    def _window_closed(self) -> bool:
        return cv2.getWindowProperty(self.config.WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1

    def run(self):
        """Open the window and run until the user quits."""
        print("\nStarting TicTacToe game...")
        print("Click a cell to play. Press 'q' to quit, 'r' to reset, 's' to save screenshot\n")

        cv2.namedWindow(self.config.WINDOW_NAME)
        cv2.setMouseCallback(self.config.WINDOW_NAME, self._on_mouse)

        self.is_running = True
        try:
            while self.is_running:
                frame = self.renderer.render(self.controller.game_state)
                cv2.imshow(self.config.WINDOW_NAME, frame)

                key = cv2.waitKey(self.config.FRAME_DELAY_MS) & 0xFF
                if not self.handle_key(key, frame) or self._window_closed():
                    self.is_running = False
        finally:
            cv2.destroyAllWindows()
