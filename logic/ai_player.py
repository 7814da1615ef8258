"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from contextlib import contextmanager
from typing import Optional, Tuple, List
from .game_state import Cell, is_empty, legal_moves, player_to_move
from .win_checker import WinChecker


# Score of an immediate win; each ply of delay costs one point
WIN_SCORE = 10


class SearchInvariantError(RuntimeError):
    """The search reached a non-terminal board with no legal moves."""


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Among equally good outcomes it prefers the fastest win and the
    slowest loss.
    """

    def __init__(self, player: Cell = Cell.PLAYER_O):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
        """
        self.player = player
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def choose_move(self, board: List[Cell]) -> Optional[int]:
        """
        Get the best move for the current position.

        The board is explored in place and restored before returning.

        Args:
            board: Current board, with the AI to move.

        Returns:
            Index of the best move, or None if the AI should not move.
        """
        self.positions_evaluated = 0

        # Nothing to answer yet, the human always opens
        if is_empty(board):
            print("Warning: Board is empty, the human moves first!")
            return None

        if self.win_checker.evaluate(board).is_decided:
            print("Warning: Game is already over!")
            return None

        # Check if it's our turn
        if player_to_move(board) != self.player:
            print(f"Warning: It's not {self.player.symbol}'s turn!")
            return None

        best_score, best_move = self._max_value(board, depth=0)

        print(f"AI evaluated {self.positions_evaluated} positions. Best move: {best_move} (score: {best_score})")

        return best_move

    @contextmanager
    def _placed(self, board: List[Cell], index: int, player: Cell):
        """Temporarily put a mark on the board."""
        board[index] = player
        try:
            yield
        finally:
            board[index] = Cell.EMPTY

    def _terminal_score(self, board: List[Cell], depth: int) -> Optional[int]:
        """
        Score a finished board from the AI's point of view.

        Returns:
            The score, or None if the game is still going.
        """
        outcome = self.win_checker.evaluate(board)

        if not outcome.is_decided:
            return None
        if outcome.winner == self.player:
            return WIN_SCORE - depth  # Win (prefer faster wins)
        if outcome.winner == self.player.opposite():
            return depth - WIN_SCORE  # Loss (prefer slower losses)
        return 0  # Tie

    def _minimax(self, board: List[Cell], depth: int, is_maximizing: bool) -> int:
        """
        Minimax score of a position.

        Args:
            board: Current board.
            depth: Plies played since choose_move was called.
            is_maximizing: True if it is the AI's turn.

        Returns:
            The score of the position.
        """
        if is_maximizing:
            score, _ = self._max_value(board, depth)
            return score
        return self._min_value(board, depth)

    def _max_value(self, board: List[Cell], depth: int) -> Tuple[int, Optional[int]]:
        """Best score for the AI, and the move that reaches it."""
        self.positions_evaluated += 1

        if is_empty(board):
            return 0, None

        score = self._terminal_score(board, depth)
        if score is not None:
            return score, None

        valid_moves = self._moves_or_fail(board)

        # Any real outcome scores above -WIN_SCORE
        max_score = -WIN_SCORE
        best_move = None
        for index in valid_moves:
            with self._placed(board, index, self.player):
                score = self._minimax(board, depth + 1, False)
            if score > max_score:
                max_score = score
                best_move = index

        return max_score, best_move

    def _min_value(self, board: List[Cell], depth: int) -> int:
        """Best score the opponent can hold the AI to."""
        self.positions_evaluated += 1

        if is_empty(board):
            return 0

        score = self._terminal_score(board, depth)
        if score is not None:
            return score

        valid_moves = self._moves_or_fail(board)

        min_score = WIN_SCORE
        for index in valid_moves:
            with self._placed(board, index, self.player.opposite()):
                score = self._minimax(board, depth + 1, True)
            min_score = min(min_score, score)

        return min_score

    def _moves_or_fail(self, board: List[Cell]) -> List[int]:
        valid_moves = legal_moves(board)
        if not valid_moves:
            raise SearchInvariantError(
                f"No legal moves on a board evaluated as ongoing: {[cell.symbol for cell in board]}"
            )
        return valid_moves


_ai = AIPlayer(Cell.PLAYER_O)


def choose_move(board: List[Cell]) -> Optional[int]:
    """Pick the computer's reply with the shared AIPlayer."""
    return _ai.choose_move(board)
