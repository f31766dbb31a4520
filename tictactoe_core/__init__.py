"""
Tic-Tac-Toe core
================
Game state, win/draw detection, and a perfect-play Minimax opponent
for 3x3 tic-tac-toe. Drivers (console or Tk) call into this package.
"""

__version__ = "1.0.0"

from .board_state import Board, Mark, empty_indices
from .errors import GameError, InvalidMove, GameAlreadyOver, PreconditionViolated
from .win_checker import WinChecker, Outcome, GameStatus, evaluate
from .move_validator import MoveValidator, apply_move
from .ai_player import AIPlayer, best_move
from .config import GameConfig
from .match import Match, Round, Scoreboard
