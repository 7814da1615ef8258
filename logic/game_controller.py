"""
Turn handling for a human vs. computer game.
"""

from typing import Optional
from .game_state import GameState, Cell, player_to_move
from .move_validator import MoveValidator
from .win_checker import GameOutcome
from .ai_player import AIPlayer


class GameController:
    """
    Owns the board for one game session and applies moves to it.

    Game flow:
    1. Human (X) selects a cell
    2. The move is applied if legal, otherwise ignored
    3. Computer (O) answers immediately with the best move
    4. Once the game is over, the next selection starts a new game
    """

    def __init__(
        self,
        game_state: Optional[GameState] = None,
        ai: Optional[AIPlayer] = None
    ):
        self.game_state = game_state or GameState()
        self.ai = ai or AIPlayer(Cell.PLAYER_O)
        self.validator = MoveValidator()
        self.human_player = self.ai.player.opposite()

    @property
    def outcome(self) -> GameOutcome:
        return self.game_state.outcome

    @property
    def status_text(self) -> str:
        """One-line description of the game for display."""
        outcome = self.outcome
        if outcome.is_decided:
            return outcome.message
        if player_to_move(self.game_state.board) == self.human_player:
            return f"Turn: {self.human_player.symbol} (Human)"
        return f"Turn: {self.ai.player.symbol} (Computer)"

    def handle_cell_selected(self, index: int) -> bool:
        """
        React to the human choosing a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the human move was applied.
        """
        # A click on a finished game starts a new one
        if self.game_state.is_game_over:
            self.reset()
            return False

        if player_to_move(self.game_state.board) != self.human_player:
            return False

        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            return False

        print(f"\n>>> Human placed {self.human_player.symbol} at {index}")
        self.game_state.make_move(index)

        if not self.game_state.is_game_over:
            self._computer_move()

        return True

    def _computer_move(self):
        """Ask the AI for its reply and apply it."""
        result = self.validator.validate_ai_request(self.game_state, self.ai.player)
        if not result.is_valid:
            print(f"Skipping computer move: {result.error_message}")
            return

        move = self.ai.choose_move(self.game_state.board)

        if move is None:
            print("ERROR: AI could not find a move!")
            return

        print(f">>> Computer placed {self.ai.player.symbol} at {move}")
        self.game_state.make_move(move)

    def reset(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.game_state.reset()
