"""
Win checker for tic-tac-toe.
Works out whether a board is won, drawn, or still in progress.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, List, Tuple
from .board_state import Board, Mark


class GameStatus(Enum):
    """Status part of an Outcome."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.
    Always recomputed from the board, never stored next to it.
    """
    status: GameStatus
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        return cls(GameStatus.WIN, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def __str__(self) -> str:
        if self.status == GameStatus.WIN:
            return f"{self.winner.value} wins"
        if self.status == GameStatus.DRAW:
            return "Draw"
        return "In progress"


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as index triples)
    WINNING_LINES: List[Tuple[int, int, int]] = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The first complete line (rows, then columns, then diagonals), or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no complete line."""
        return board.is_full() and self.check_winner(board) is None

    def evaluate(self, board: Board) -> Outcome:
        """
        Evaluate a board.

        Returns:
            Outcome.win(mark) if a line is complete, Outcome.draw() if the
            board is full, otherwise Outcome.in_progress().
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.win(winner)
        if board.is_full():
            return Outcome.draw()
        return Outcome.in_progress()


_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Outcome of the board. Pure; safe to call any number of times."""
    return _checker.evaluate(board)
