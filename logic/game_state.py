"""
Game state management for TicTacToe.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import Optional, List, TYPE_CHECKING
from dataclasses import dataclass, field

if TYPE_CHECKING:
    from .win_checker import GameOutcome


class Cell(Enum):
    """What a board cell can hold."""
    EMPTY = 0
    PLAYER_X = 1    # Human
    PLAYER_O = 2    # Computer

    def opposite(self) -> "Cell":
        """Get the opposite player."""
        if self == Cell.PLAYER_X:
            return Cell.PLAYER_O
        if self == Cell.PLAYER_O:
            return Cell.PLAYER_X
        return Cell.EMPTY

    @property
    def symbol(self) -> str:
        """Single character used when printing the board."""
        return {Cell.EMPTY: " ", Cell.PLAYER_X: "X", Cell.PLAYER_O: "O"}[self]


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def new_board() -> List[Cell]:
    """Create an empty 3x3 board as a flat list of 9 cells."""
    return [Cell.EMPTY] * CELL_COUNT


def is_empty(board: List[Cell]) -> bool:
    """True if no player has placed a mark yet."""
    return all(cell == Cell.EMPTY for cell in board)


def legal_moves(board: List[Cell]) -> List[int]:
    """
    Get all empty cells on the board.

    The order is always ascending, the search relies on it to break ties.

    Args:
        board: The board to scan.

    Returns:
        List of cell indices (0-8).
    """
    return [index for index, cell in enumerate(board) if cell == Cell.EMPTY]


def player_to_move(board: List[Cell]) -> Cell:
    """Whose turn it is, given that X always moves first."""
    x_count = board.count(Cell.PLAYER_X)
    o_count = board.count(Cell.PLAYER_O)
    return Cell.PLAYER_X if x_count == o_count else Cell.PLAYER_O


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Cell            # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Ply number since the game started (0-8)

    @property
    def row(self) -> int:
        return self.index // BOARD_SIZE

    @property
    def col(self) -> int:
        return self.index % BOARD_SIZE


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The board (9 cells, row-major)
    - Current player
    - Move history

    The outcome is derived from the board and cached until the next move.
    """

    # Row-major board, index = row * 3 + col
    board: List[Cell] = field(default_factory=new_board)

    # Current player's turn (the human always starts)
    current_player: Cell = Cell.PLAYER_X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Cached evaluate() result for the current board
    _outcome: Optional["GameOutcome"] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        # The marks on the board decide whose turn it is
        self.current_player = player_to_move(self.board)

    @property
    def outcome(self) -> "GameOutcome":
        """Outcome of the current board (win, tie, or ongoing)."""
        if self._outcome is None:
            from .win_checker import evaluate
            self._outcome = evaluate(self.board)
        return self._outcome

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_decided

    @property
    def winner(self) -> Cell:
        return self.outcome.winner

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        # Check if game is over
        if self.is_game_over:
            print("Game is already over!")
            return False

        # Check if index is on the board
        if not 0 <= index < CELL_COUNT:
            print(f"Invalid cell {index}. Must be 0-8.")
            return False

        # Check if cell is empty
        if self.board[index] != Cell.EMPTY:
            print(f"Cell {index} is already occupied!")
            return False

        # Place the mark
        player = player_to_move(self.board)
        self.board[index] = player
        self._outcome = None

        # Record the move
        self.moves.append(Move(
            player=player,
            index=index,
            move_number=len(self.moves)
        ))

        # Switch turns
        self.current_player = player.opposite()

        return True

    def reset(self):
        """Clear the board for a new game."""
        self.board = new_board()
        self.current_player = Cell.PLAYER_X
        self.moves = []
        self._outcome = None

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves)
        )

    def print_board(self):
        """Print the board to console."""
        print("\n  0   1   2")
        print("+---+---+---+")

        for row in range(BOARD_SIZE):
            cells = self.board[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
            print(f"| {' | '.join(cell.symbol for cell in cells)} | {row * BOARD_SIZE}")
            print("+---+---+---+")

        # Print game info
        outcome = self.outcome
        if outcome.is_decided:
            print(f"\n{outcome.message}")
        else:
            print(f"\nCurrent turn: {self.current_player.symbol}")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # Simulate a game: X takes the diagonal
    for index in [4, 0, 2, 8, 6]:
        print(f"\n{game.current_player.symbol} moves to {index}")
        game.make_move(index)
        game.print_board()

    print("\nGame state test done!")
