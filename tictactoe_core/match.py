"""
Round and scoreboard handling for the drivers.
A Match runs rounds one after another and keeps the tally between them.
"""

from typing import Optional
from dataclasses import dataclass
from .board_state import Board, Mark
from .errors import PreconditionViolated
from .ai_player import AIPlayer
from .move_validator import apply_move
from .win_checker import Outcome, GameStatus, evaluate


@dataclass
class Scoreboard:
    """Win/loss/draw tally across rounds."""
    player: int = 0
    ai: int = 0
    draws: int = 0

    @property
    def rounds(self) -> int:
        return self.player + self.ai + self.draws

    def record(self, outcome: Outcome, human_mark: Mark) -> None:
        """Add a finished round's outcome to the tally."""
        if outcome.status == GameStatus.WIN:
            if outcome.winner == human_mark:
                self.player += 1
            else:
                self.ai += 1
        elif outcome.status == GameStatus.DRAW:
            self.draws += 1
        else:
            raise PreconditionViolated("Cannot record a round that is still in progress")

    def __str__(self) -> str:
        return f"Player: {self.player}  AI: {self.ai}  Draws: {self.draws}"


class Round:
    """
    One playthrough from an empty board to a result.

    The board is replaced on every move; there is no reset,
    a new round gets a new Round.
    """

    def __init__(self, human_mark: Mark = Mark.X, ai: Optional[AIPlayer] = None):
        self.human_mark = human_mark
        self.ai = ai if ai is not None else AIPlayer(human_mark.opposite())
        self.board = Board.empty()

    @property
    def ai_mark(self) -> Mark:
        return self.ai.mark

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.board)

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def is_human_turn(self) -> bool:
        return not self.is_over and self.board.turn == self.human_mark

    @property
    def is_ai_turn(self) -> bool:
        return not self.is_over and self.board.turn == self.ai_mark

    def play_human(self, index: int) -> Outcome:
        """
        Apply the human's move.

        Raises:
            InvalidMove, GameAlreadyOver: The move was rejected; board unchanged.
        """
        self.board = apply_move(self.board, index, self.human_mark)
        return self.outcome

    def play_ai(self) -> int:
        """
        Let the AI pick and apply its move.

        Returns:
            The index the AI played.
        """
        index = self.ai.get_best_move(self.board)
        self.board = apply_move(self.board, index, self.ai_mark)
        return index


class Match:
    """
    A series of rounds between a human and the AI.

    Example:
        match = Match()
        round_ = match.new_round()
        match.play_human(4)
        match.play_ai()
    """

    def __init__(self, human_mark: Mark = Mark.X, verbose: bool = False):
        self.human_mark = human_mark
        self.verbose = verbose
        self.scoreboard = Scoreboard()
        self.current_round: Optional[Round] = None
        self._recorded = False

    @property
    def in_progress(self) -> bool:
        return self.current_round is not None and not self.current_round.is_over

    def new_round(self) -> Round:
        """Start a new round on a fresh board."""
        if self.in_progress:
            raise PreconditionViolated("The current round is not finished yet")

        ai = AIPlayer(self.human_mark.opposite(), verbose=self.verbose)
        self.current_round = Round(self.human_mark, ai)
        self._recorded = False
        return self.current_round

    def play_human(self, index: int) -> Outcome:
        """Human move in the current round; tallies the result if it ends the round."""
        outcome = self._round().play_human(index)
        self._record_if_over()
        return outcome

    def play_ai(self) -> int:
        """AI move in the current round; tallies the result if it ends the round."""
        index = self._round().play_ai()
        self._record_if_over()
        return index

    def _round(self) -> Round:
        if self.current_round is None:
            raise PreconditionViolated("No round has been started")
        return self.current_round

    def _record_if_over(self) -> None:
        outcome = self.current_round.outcome
        if outcome.is_terminal and not self._recorded:
            self.scoreboard.record(outcome, self.human_mark)
            self._recorded = True
