"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, Cell, CELL_COUNT, is_empty, legal_moves, player_to_move


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Can only place on empty cells
    2. Players alternate, X first
    3. Game must not be over
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-8."
            )

        # Check if cell is empty
        if game_state.board[index] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {game_state.board[index].symbol}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def validate_ai_request(self, game_state: GameState, ai_player: Cell = Cell.PLAYER_O) -> ValidationResult:
        """
        Check that the AI may be asked for a move.

        Args:
            game_state: Current game state.
            ai_player: The player the AI controls.

        Returns:
            ValidationResult.
        """
        if is_empty(game_state.board):
            return ValidationResult(
                is_valid=False,
                error_message="Board is empty, the human moves first!"
            )

        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if player_to_move(game_state.board) != ai_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {ai_player.symbol}'s turn!"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of valid cell indices.
        """
        if game_state.is_game_over:
            return []

        return legal_moves(game_state.board)
