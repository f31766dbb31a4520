"""
AI player for tic-tac-toe.
Uses full-depth Minimax to choose the best move.
"""

from typing import Optional
from .board_state import Board, Mark, to_row_col
from .errors import PreconditionViolated
from .win_checker import WinChecker, GameStatus

WIN_SCORE = 1
LOSS_SCORE = -1
DRAW_SCORE = 0


class AIPlayer:
    """
    An AI that plays tic-tac-toe using the Minimax algorithm.

    The search runs all the way to the end of the game with no pruning,
    so the AI wins whenever a win can be forced and never loses.
    Ties between equally good moves go to the lowest index.
    """

    def __init__(self, mark: Mark = Mark.O, verbose: bool = False):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
            verbose: Print a summary line after each search.
        """
        self.mark = mark
        self.verbose = verbose
        self.win_checker = WinChecker()

        # Positions scored during the last search
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> int:
        """Best move for this AI's mark on the given board."""
        return self.best_move(board, self.mark)

    def best_move(self, board: Board, mark: Mark) -> int:
        """
        Get the optimal move for mark.

        Args:
            board: A well-formed, unfinished board where it is mark's turn.
            mark: The side to move.

        Returns:
            Index (0-8) of the best move.

        Raises:
            PreconditionViolated: The board is malformed or finished,
                or it is not mark's turn.
        """
        self._check_preconditions(board, mark)
        self.positions_evaluated = 0

        best_score = None
        best_index = None

        for index in board.empty_indices():
            score = self.score(board.place(index, mark), mark)

            # Strictly greater: the lowest index wins ties
            if best_score is None or score > best_score:
                best_score = score
                best_index = index

        if self.verbose:
            print(
                f"AI evaluated {self.positions_evaluated} positions. "
                f"Best move: {best_index} {to_row_col(best_index)} (score: {best_score})"
            )

        return best_index

    def score(self, board: Board, maximizing_mark: Mark) -> int:
        """
        Minimax value of a board from maximizing_mark's point of view.

        +1 for a forced win, -1 for a forced loss, 0 for a draw.
        The side to move is read from the board, so max and min
        alternate on their own.
        """
        self.positions_evaluated += 1

        outcome = self.win_checker.evaluate(board)
        if outcome.status == GameStatus.WIN:
            return WIN_SCORE if outcome.winner == maximizing_mark else LOSS_SCORE
        if outcome.status == GameStatus.DRAW:
            return DRAW_SCORE

        to_move = board.turn
        scores = [
            self.score(board.place(index, to_move), maximizing_mark)
            for index in board.empty_indices()
        ]

        if to_move == maximizing_mark:
            return max(scores)
        return min(scores)

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion for the side to move.

        Returns:
            A string describing the suggested move.
        """
        if self.win_checker.evaluate(board).is_terminal:
            return "No moves available!"

        mark = board.turn
        index = self.best_move(board, mark)
        row, col = to_row_col(index)

        return f"Place {mark.value} at cell {index} (row {row}, col {col})"

    def _check_preconditions(self, board: Board, mark: Mark) -> None:
        if not isinstance(board, Board):
            raise PreconditionViolated(f"Expected a Board, got {type(board).__name__}")
        if not board.is_well_formed():
            raise PreconditionViolated(f"Malformed board: {board.to_string()}")

        outcome = self.win_checker.evaluate(board)
        if outcome.is_terminal:
            raise PreconditionViolated(f"Cannot search a finished game ({outcome})")

        if mark != board.turn:
            raise PreconditionViolated(
                f"It is {board.turn.value}'s turn, not {_mark_name(mark)}'s"
            )


def _mark_name(mark: Optional[Mark]) -> str:
    return mark.value if isinstance(mark, Mark) else repr(mark)


def best_move(board: Board, mark: Mark) -> int:
    """Optimal move for mark on board. See AIPlayer.best_move."""
    return AIPlayer(mark).best_move(board, mark)
