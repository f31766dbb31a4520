"""
Main entry point for Tic-Tac-Toe against a perfect-play AI.

Launches the Tk UI by default. With --no-ui, plays in the console:
- Human enters a cell index (0-8)
- AI replies with its Minimax move
- Scores are kept across rounds

Run this script to play!
"""

import time
from typing import Optional

from tictactoe_core import (
    GameConfig,
    GameAlreadyOver,
    GameStatus,
    InvalidMove,
    Match,
)


class TicTacToeConsole:
    """
    Console driver for the game.

    Game flow:
    1. Human (X) enters a cell index
    2. AI (O) calculates its best response
    3. Repeat until someone wins or it's a draw
    4. Tally the result and offer another round
    """

    def __init__(
        self,
        ai_first: bool = False,
        rounds: Optional[int] = None,
        delay: float = GameConfig.AI_MOVE_DELAY_MS / 1000.0,
        verbose: bool = False
    ):
        """
        Initialize the console game.

        Args:
            ai_first: If True, the AI plays X and moves first.
            rounds: Stop after this many rounds (None asks after each one).
            delay: Seconds to wait before the AI move is shown.
            verbose: Print search statistics for every AI move.
        """
        self.human_mark = GameConfig.AI_MARK if ai_first else GameConfig.HUMAN_MARK
        self.rounds = rounds
        self.delay = delay
        self.match = Match(human_mark=self.human_mark, verbose=verbose)
        self.is_running = False

    def start(self):
        """Play rounds until the user quits or the round limit is hit."""
        print("\n" + "="*40)
        print("   Tic Tac Toe")
        print(f"   Human plays: {self.human_mark.value}")
        print(f"   AI plays: {self.human_mark.opposite().value}")
        print("="*40)
        print("Enter a cell number (0-8), or 'q' to quit.\n")

        self.is_running = True
        while self.is_running:
            self._play_round()

            if not self.is_running:
                break
            if self.rounds is not None and self.match.scoreboard.rounds >= self.rounds:
                break
            if self.rounds is None and not self._ask_play_again():
                break

        print(f"\nFinal score - {self.match.scoreboard}")

    def _play_round(self):
        """Play one round from an empty board."""
        round_ = self.match.new_round()
        print(f"\nRound {self.match.scoreboard.rounds + 1}")

        while self.is_running and not round_.is_over:
            if round_.is_human_turn:
                print("\n" + round_.board.pretty())
                self._human_move()
            else:
                self._ai_move()

        if round_.is_over:
            self._show_round_result()

    def _human_move(self):
        """Read indices until one is accepted."""
        while self.is_running:
            text = input(f"\nYour move ({self.human_mark.value}): ").strip()

            if text.lower() in ("q", "quit", "exit"):
                print("\nGame quit by user.")
                self.is_running = False
                return

            try:
                index = int(text)
            except ValueError:
                print(f"'{text}' is not a cell number. Enter 0-8.")
                continue

            try:
                self.match.play_human(index)
                return
            except (InvalidMove, GameAlreadyOver) as e:
                print(f"Invalid move: {e}")

    def _ai_move(self):
        """Execute the AI's move."""
        print("\n>>> AI is thinking...")
        if self.delay > 0:
            time.sleep(self.delay)

        index = self.match.play_ai()
        print(f">>> AI plays {index}")

    def _show_round_result(self):
        """Show the result of the finished round."""
        round_ = self.match.current_round
        outcome = round_.outcome

        print("\n" + round_.board.pretty())
        print("\n" + "="*40)

        if outcome.status == GameStatus.DRAW:
            print("   It's a Tie!")
        elif outcome.winner == self.human_mark:
            print(f"   Winner: {outcome.winner.value} - you won!")
        else:
            print(f"   Winner: {outcome.winner.value} - AI wins!")

        print(f"   {self.match.scoreboard}")
        print("="*40)

    def _ask_play_again(self) -> bool:
        answer = input("\nStart new round? [Y/n]: ").strip().lower()
        return answer in ("", "y", "yes")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic Tac Toe against a perfect-play AI")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Number of rounds to play in console mode (default: ask after each round)"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.AI_MOVE_DELAY_MS / 1000.0,
        help="Seconds before the AI move is shown"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics for every AI move"
    )

    args = parser.parse_args(argv)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(
            ai_first=args.ai_first,
            delay_ms=int(args.delay * 1000),
            verbose=args.verbose
        )
        ui.run()
        return

    game = TicTacToeConsole(
        ai_first=args.ai_first,
        rounds=args.rounds,
        delay=args.delay,
        verbose=args.verbose
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
