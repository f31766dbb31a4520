"""
Move validator for tic-tac-toe.
Checks moves against the rules and applies the ones that pass.
"""

from .board_state import Board, Mark, NUM_CELLS
from .errors import InvalidMove, GameAlreadyOver
from .win_checker import WinChecker


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. Game must not be over, and the board must be well formed
    2. Index must be 0-8
    3. Can only place on empty cells
    4. Only the side whose turn it is may move
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(self, board: Board, index: int, mark: Mark) -> None:
        """
        Validate a move, raising if it breaks a rule.

        Args:
            board: Current board.
            index: Cell to place on (0-8).
            mark: The mark being placed.

        Raises:
            GameAlreadyOver: The board already has a result.
            InvalidMove: Any other rule is broken.
        """
        outcome = self.win_checker.evaluate(board)
        if outcome.is_terminal:
            raise GameAlreadyOver(f"Game is already over ({outcome})", outcome=outcome)

        if not board.is_well_formed():
            raise InvalidMove(f"Malformed board: {board.to_string()}", index, mark)

        # bool is an int subclass; True/False are not cell indices
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidMove(f"Invalid index {index!r}. Must be an int.", index, mark)

        if not 0 <= index < NUM_CELLS:
            raise InvalidMove(
                f"Invalid index {index}. Must be 0-{NUM_CELLS - 1}.", index, mark
            )

        if not isinstance(mark, Mark):
            raise InvalidMove(f"Invalid mark {mark!r}.", index, mark)

        if board[index] is not None:
            raise InvalidMove(
                f"Cell {index} is already occupied by {board[index].value}", index, mark
            )

        if mark != board.turn:
            raise InvalidMove(
                f"It is {board.turn.value}'s turn, not {mark.value}'s", index, mark
            )

    def is_valid(self, board: Board, index: int, mark: Mark) -> bool:
        """Same checks as validate_move, as a bool."""
        try:
            self.validate_move(board, index, mark)
        except (InvalidMove, GameAlreadyOver):
            return False
        return True


_validator = MoveValidator()


def apply_move(board: Board, index: int, mark: Mark) -> Board:
    """
    Place mark at index and return the new board.
    The board passed in is left untouched.

    Raises:
        GameAlreadyOver: The board already has a result.
        InvalidMove: Malformed board, occupied cell, bad index or mark, or out of turn.
    """
    _validator.validate_move(board, index, mark)
    return board.place(index, mark)
