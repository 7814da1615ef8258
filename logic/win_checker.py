"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a tie.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass
from .game_state import Cell


class WinReason(Enum):
    """Why a game ended."""
    HORIZONTAL_LINE = "horizontal line"
    VERTICAL_LINE = "vertical line"
    DIAGONAL_LINE = "diagonal line"
    TIE = "tie"


@dataclass(frozen=True)
class GameOutcome:
    """
    Result of evaluating a board.

    An ongoing game has is_decided=False and nothing else set. A decided game
    carries the winner (EMPTY only for a tie), the reason, and the completed
    line for wins.
    """
    is_decided: bool
    winner: Cell = Cell.EMPTY
    reason: Optional[WinReason] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_tie(self) -> bool:
        return self.is_decided and self.reason == WinReason.TIE

    @property
    def message(self) -> str:
        """Text shown when the game is over."""
        if not self.is_decided:
            return ""
        if self.reason == WinReason.TIE:
            return "Tie!"
        return f"{self.winner.symbol} won by a {self.reason.value}"


ONGOING = GameOutcome(is_decided=False)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, in scan order
    WINNING_LINES: List[Tuple[Tuple[int, int, int], WinReason]] = [
        # Rows
        ((0, 1, 2), WinReason.HORIZONTAL_LINE),
        ((3, 4, 5), WinReason.HORIZONTAL_LINE),
        ((6, 7, 8), WinReason.HORIZONTAL_LINE),
        # Columns
        ((0, 3, 6), WinReason.VERTICAL_LINE),
        ((1, 4, 7), WinReason.VERTICAL_LINE),
        ((2, 5, 8), WinReason.VERTICAL_LINE),
        # Diagonals
        ((0, 4, 8), WinReason.DIAGONAL_LINE),
        ((2, 4, 6), WinReason.DIAGONAL_LINE),
    ]

    def evaluate(self, board: List[Cell]) -> GameOutcome:
        """
        Evaluate the board.

        Lines are checked rows first, then columns, then diagonals. A full
        board with no completed line is a tie.

        Args:
            board: The board to evaluate (not modified).

        Returns:
            The GameOutcome for this board.
        """
        for line, reason in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return GameOutcome(
                    is_decided=True,
                    winner=winner,
                    reason=reason,
                    line=line
                )

        if Cell.EMPTY not in board:
            return GameOutcome(is_decided=True, winner=Cell.EMPTY, reason=WinReason.TIE)

        return ONGOING

    def _check_line(
        self,
        board: List[Cell],
        line: Tuple[int, int, int]
    ) -> Optional[Cell]:
        """
        Check if a single line has a winner.

        Returns:
            The winning player if all 3 cells match, None otherwise.
        """
        a, b, c = line
        if board[a] != Cell.EMPTY and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_winner(self, board: List[Cell]) -> Optional[Cell]:
        """Get the winning player, or None if nobody has won."""
        outcome = self.evaluate(board)
        if outcome.is_decided and not outcome.is_tie:
            return outcome.winner
        return None

    def check_draw(self, board: List[Cell]) -> bool:
        """True if the board is full with no winner."""
        return self.evaluate(board).is_tie

    def get_winning_line(self, board: List[Cell]) -> Optional[Tuple[int, int, int]]:
        """Get the completed line as three cell indices, or None."""
        return self.evaluate(board).line


_checker = WinChecker()


def evaluate(board: List[Cell]) -> GameOutcome:
    """Evaluate a board with the shared WinChecker."""
    return _checker.evaluate(board)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    X, O, _ = Cell.PLAYER_X, Cell.PLAYER_O, Cell.EMPTY
    checker = WinChecker()

    # Horizontal win
    outcome = checker.evaluate([X, X, X, O, O, _, _, _, _])
    print(f"Test 1 (horizontal): {outcome.message}")
    assert outcome.reason == WinReason.HORIZONTAL_LINE

    # Tie
    outcome = checker.evaluate([X, O, X, X, O, O, O, X, X])
    print(f"Test 2 (tie): {outcome.message}")
    assert outcome.is_tie

    print("\nWinChecker test done!")
