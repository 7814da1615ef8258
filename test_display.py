"""
Test script for the display module.
Tests rendering, pointer-to-cell mapping, and window input handling
without opening a window.

Usage:
    python test_display.py             # Run all tests
    python test_display.py --show      # Also show a sample frame
"""

import os
import sys
import tempfile
import cv2
import numpy as np
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from display import DisplayConfig, BoardRenderer, GameWindow
from logic.game_state import GameState, Cell, is_empty
from logic.game_controller import GameController


X, O, _ = Cell.PLAYER_X, Cell.PLAYER_O, Cell.EMPTY

BACKGROUND = list(DisplayConfig.BACKGROUND_COLOR)
BLACK = [0, 0, 0]
WHITE = [255, 255, 255]


def test_render_empty_board():
    renderer = BoardRenderer()
    frame = renderer.render(GameState())

    assert frame.shape == (450, 450, 3)
    assert frame.dtype == np.uint8

    # Cell centers are background, grid lines are black
    assert list(frame[75, 75]) == BACKGROUND
    assert list(frame[10, 150]) == BLACK
    assert list(frame[10, 300]) == BLACK
    assert list(frame[150, 10]) == BLACK
    assert list(frame[300, 10]) == BLACK


def test_render_marks():
    renderer = BoardRenderer()
    game = GameState(board=[X, _, _,
                            _, O, _,
                            _, _, _], current_player=X)
    frame = renderer.render(game)

    # X diagonals cross in the middle of cell 0
    assert list(frame[75, 75]) == BLACK
    assert list(frame[20, 20]) == BLACK

    # O is white inside with a black outline
    assert list(frame[225, 225]) == WHITE
    assert list(frame[175, 225]) == BLACK

    # Empty cell untouched
    assert list(frame[375, 375]) == BACKGROUND


def test_render_game_over_shows_message_only():
    renderer = BoardRenderer()
    game = GameState(board=[X, X, X,
                            O, O, _,
                            _, _, _], current_player=O)
    frame = renderer.render(game)

    # No grid or marks, only centered text
    assert list(frame[10, 150]) == BACKGROUND
    assert list(frame[75, 75]) == BACKGROUND
    assert (frame != np.array(BACKGROUND, dtype=np.uint8)).any()

    expected = renderer.show_text("X won by a horizontal line")
    assert np.array_equal(frame, expected)


def test_cell_at():
    renderer = BoardRenderer()

    assert renderer.cell_at(0, 0) == 0
    assert renderer.cell_at(160, 10) == 1
    assert renderer.cell_at(449, 0) == 2
    assert renderer.cell_at(10, 160) == 3
    assert renderer.cell_at(225, 225) == 4
    assert renderer.cell_at(449, 449) == 8

    assert renderer.cell_at(450, 0) is None
    assert renderer.cell_at(-1, 10) is None


def test_cell_center_round_trip():
    renderer = BoardRenderer()
    for index in range(9):
        x, y = renderer.cell_center(index)
        assert renderer.cell_at(x, y) == index


def test_custom_config():
    class SmallConfig(DisplayConfig):
        CANVAS_SIZE = 300
        SEGMENT = 100
        O_DIAMETER = 60

    renderer = BoardRenderer(SmallConfig())
    frame = renderer.render(GameState())
    assert frame.shape == (300, 300, 3)
    assert renderer.cell_at(150, 150) == 4


def test_window_click_plays_move():
    window = GameWindow()

    window._on_mouse(cv2.EVENT_LBUTTONDOWN, 225, 225, 0, None)
    board = window.controller.game_state.board
    assert board[4] == X
    assert board.count(O) == 1

    # Mouse moves and off-canvas clicks are ignored
    snapshot = list(board)
    window._on_mouse(cv2.EVENT_MOUSEMOVE, 10, 10, 0, None)
    window._on_mouse(cv2.EVENT_LBUTTONDOWN, 500, 10, 0, None)
    assert window.controller.game_state.board == snapshot


def test_window_keys():
    controller = GameController()
    window = GameWindow(controller)
    controller.handle_cell_selected(4)
    frame = window.renderer.render(controller.game_state)

    assert window.handle_key(ord('r'), frame)
    assert is_empty(controller.game_state.board)

    assert window.handle_key(255, frame)
    assert not window.handle_key(ord('q'), frame)


def test_window_screenshot_key_writes_png():
    controller = GameController()
    window = GameWindow(controller)
    controller.handle_cell_selected(4)
    frame = window.renderer.render(controller.game_state)

    old_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmp_dir:
        os.chdir(tmp_dir)
        try:
            assert window.handle_key(ord('s'), frame)
            saved = list(Path(tmp_dir).glob(f"{DisplayConfig.SCREENSHOT_PREFIX}_*.png"))
            assert len(saved) == 1

            image = cv2.imread(str(saved[0]))
            assert image is not None
            assert np.array_equal(image, frame)
        finally:
            os.chdir(old_cwd)


def main():
    """Run tests, optionally showing a sample frame."""
    import argparse

    parser = argparse.ArgumentParser(description="Test the display module")
    parser.add_argument("--show", action="store_true", help="Show a sample frame")
    args = parser.parse_args()

    tests = [
        (name, func) for name, func in globals().items()
        if name.startswith("test_") and callable(func)
    ]

    failed = 0
    for name, func in tests:
        try:
            func()
            print(f"  ✓ {name}")
        except AssertionError as e:
            print(f"  ✗ {name} FAILED: {e}")
            failed += 1

    if args.show:
        game = GameState()
        for index in [4, 0, 8]:
            game.make_move(index)
        cv2.imshow("Display Test", BoardRenderer().render(game))
        cv2.waitKey(0)
        cv2.destroyAllWindows()

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
