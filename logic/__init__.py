"""
Logic module for TicTacToe.
Handles game state, rules, and the Minimax AI opponent.
"""

__version__ = "1.0.0"

from .game_state import GameState, Cell, Move, new_board, is_empty, legal_moves, player_to_move
from .win_checker import WinChecker, GameOutcome, WinReason, evaluate
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, SearchInvariantError, choose_move
from .game_controller import GameController
