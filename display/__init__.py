"""
Display module for TicTacToe.
Draws the board and turns mouse clicks into moves.
"""

from .config import DisplayConfig
from .renderer import BoardRenderer
from .window import GameWindow
