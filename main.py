"""
Main script for TicTacToe against the Minimax AI.

This script ties together:
- Logic (game state, win checking, AI)
- Display (OpenCV window, mouse input)

Run this script to play TicTacToe against the computer!
The human plays X and always moves first.
"""

from logic.game_controller import GameController
from logic.game_state import CELL_COUNT


def run_console(controller: GameController):
    """
    Play in the terminal.

    Cells are numbered 0-8, row by row from the top-left corner.
    """
    print("\n" + "="*60)
    print("   TicTacToe - Console Mode")
    print("   Cells: 0|1|2  3|4|5  6|7|8")
    print("   Type 'q' to quit")
    print("="*60)

    game_state = controller.game_state

    while True:
        game_state.print_board()

        if game_state.is_game_over:
            answer = input("\nPlay again? [y/N]: ").strip().lower()
            if answer != "y":
                break
            controller.reset()
            continue

        text = input(f"\nPlay {controller.human_player.symbol} at [0-{CELL_COUNT - 1}]: ").strip()
        if text == "q":
            break

        try:
            index = int(text)
        except ValueError:
            print("Please type a number 0..8.")
            continue

        if not controller.handle_cell_selected(index):
            print("Illegal move. Try again.")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a Minimax AI")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    controller = GameController()

    try:
        if args.no_ui:
            run_console(controller)
        else:
            from display.window import GameWindow
            GameWindow(controller).run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
