"""
Tic-Tac-Toe UI
A graphical interface for playing against the Minimax AI using Tkinter.

Shows:
- Scoreboard (player, AI, draws) kept across rounds
- Countdown before each round
- The 3x3 board with X / O icons drawn by Pillow
- Round result and a button to start the next round
"""

import tkinter as tk
from tkinter import ttk
from typing import Dict, List, Optional
from PIL import Image, ImageDraw, ImageTk

from tictactoe_core import (
    GameAlreadyOver,
    GameConfig,
    GameStatus,
    InvalidMove,
    Mark,
    Match,
)


def draw_mark_icon(mark: Optional[Mark], size: int = GameConfig.ICON_SIZE,
                   width: int = GameConfig.ICON_WIDTH) -> Image.Image:
    """
    Draw the icon for a cell.

    Args:
        mark: X (a cross), O (a circle with a check), or None (blank).
        size: Icon width and height in pixels.
        width: Stroke width.

    Returns:
        An RGBA Pillow image.
    """
    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    if mark is None:
        return image

    draw = ImageDraw.Draw(image)
    color = GameConfig.MARK_COLORS[mark]
    pad = size // 6

    if mark == Mark.X:
        draw.line([(pad, pad), (size - pad, size - pad)], fill=color, width=width)
        draw.line([(size - pad, pad), (pad, size - pad)], fill=color, width=width)
    else:
        draw.ellipse([pad, pad, size - pad, size - pad], outline=color, width=width)
        # Check mark inside the circle
        draw.line(
            [(size * 0.34, size * 0.52), (size * 0.46, size * 0.64), (size * 0.68, size * 0.38)],
            fill=color,
            width=max(2, width // 2)
        )

    return image


class TicTacToeUI:
    """
    Main UI class for the game.
    """

    def __init__(self, ai_first: bool = False,
                 delay_ms: int = GameConfig.AI_MOVE_DELAY_MS,
                 verbose: bool = False):
        """Initialize the UI."""
        self.human_mark = GameConfig.AI_MARK if ai_first else GameConfig.HUMAN_MARK
        self.delay_ms = delay_ms
        self.match = Match(human_mark=self.human_mark, verbose=verbose)

        # State
        self.round_ready = False
        self.pending_ai_move: Optional[str] = None

        # Create UI
        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BACKGROUND_COLOR)
        self.root.resizable(False, False)

        # Icons need a Tk root to exist first
        self.icons: Dict[Optional[Mark], ImageTk.PhotoImage] = {
            mark: ImageTk.PhotoImage(draw_mark_icon(mark))
            for mark in (None, Mark.X, Mark.O)
        }

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BACKGROUND_COLOR)
        style.configure('TLabel', background=GameConfig.BACKGROUND_COLOR,
                        foreground=GameConfig.TEXT_COLOR, font=(GameConfig.FONT, 12))
        style.configure('Title.TLabel', font=(GameConfig.FONT, 18, 'bold'))
        style.configure('Status.TLabel', font=(GameConfig.FONT, 16, 'bold'))

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Scoreboard
        score_frame = ttk.Frame(main_frame)
        score_frame.pack(fill=tk.X, pady=(0, 10))

        self.player_score_label = ttk.Label(score_frame, text="Player: 0")
        self.player_score_label.pack(side=tk.LEFT, expand=True)
        self.ai_score_label = ttk.Label(score_frame, text="AI: 0")
        self.ai_score_label.pack(side=tk.LEFT, expand=True)
        self.draws_label = ttk.Label(score_frame, text="Draws: 0")
        self.draws_label.pack(side=tk.LEFT, expand=True)

        # Countdown / result
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.start_btn = tk.Button(
            main_frame,
            text="Start Game",
            font=(GameConfig.FONT, 11, 'bold'),
            bg=GameConfig.MARK_COLORS[Mark.X],
            fg='white',
            width=16,
            command=self._start_round
        )
        self.start_btn.pack(pady=5)

        # Board, packed only while a round is being played
        self.board_frame = ttk.Frame(main_frame)

        self.board_cells: List[tk.Button] = []
        for index in range(GameConfig.BOARD_SIZE ** 2):
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                self.board_frame,
                image=self.icons[None],
                width=GameConfig.ICON_SIZE + 16,
                height=GameConfig.ICON_SIZE + 16,
                bg=GameConfig.CELL_COLOR,
                activebackground=GameConfig.CELL_COLOR,
                relief='flat',
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=4, pady=4)
            self.board_cells.append(cell)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _start_round(self):
        """Start a new round: fresh board, then the countdown."""
        if self.match.in_progress:
            return

        self.match.new_round()
        self.round_ready = False
        self.start_btn.pack_forget()
        self.board_frame.pack_forget()
        self._update_board_display()
        self._tick_countdown(GameConfig.COUNTDOWN_SECONDS)

    def _tick_countdown(self, remaining: int):
        """Show the countdown, one second per tick."""
        if remaining > 0:
            self.status_label.configure(text=f"Starting in {remaining}")
            self.root.after(1000, lambda: self._tick_countdown(remaining - 1))
            return

        self.round_ready = True
        self.board_frame.pack(pady=10)
        self._update_status()
        if self.match.current_round.is_ai_turn:
            self._schedule_ai_move()

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        if not self.round_ready or self.pending_ai_move is not None:
            return

        round_ = self.match.current_round
        if round_ is None or not round_.is_human_turn:
            return

        try:
            self.match.play_human(index)
        except (InvalidMove, GameAlreadyOver) as e:
            print(f"Ignored click: {e}")
            return

        self._after_move()

    def _schedule_ai_move(self):
        """Let the AI move after a short delay."""
        self.pending_ai_move = self.root.after(self.delay_ms, self._ai_move)
        self.status_label.configure(text="AI is thinking...")

    def _ai_move(self):
        """Execute the AI's move (runs on the UI thread)."""
        self.pending_ai_move = None
        if not self.match.in_progress:
            return

        index = self.match.play_ai()
        print(f"AI plays {index}")
        self._after_move()

    def _after_move(self):
        """Refresh the display and hand over to the next side."""
        self._update_board_display()
        round_ = self.match.current_round

        if round_.is_over:
            self._show_round_result()
        elif round_.is_ai_turn:
            self._schedule_ai_move()
        else:
            self._update_status()

    def _update_board_display(self):
        """Update the board grid display."""
        board = self.match.current_round.board
        for index, cell in enumerate(self.board_cells):
            cell.configure(image=self.icons[board[index]])

    def _update_status(self):
        """Update the turn label."""
        round_ = self.match.current_round
        if round_.is_human_turn:
            self.status_label.configure(text=f"Your turn ({self.human_mark.value})")

    def _update_scoreboard(self):
        score = self.match.scoreboard
        self.player_score_label.configure(text=f"Player: {score.player}")
        self.ai_score_label.configure(text=f"AI: {score.ai}")
        self.draws_label.configure(text=f"Draws: {score.draws}")

    def _show_round_result(self):
        """Show the round result and offer a new round."""
        outcome = self.match.current_round.outcome
        self.round_ready = False

        if outcome.status == GameStatus.DRAW:
            self.status_label.configure(text="It's a Tie!")
        else:
            self.status_label.configure(text=f"Winner: {outcome.winner.value}")

        self._update_scoreboard()
        self.board_frame.pack_forget()
        self.start_btn.configure(text="Start New Round")
        self.start_btn.pack(pady=5)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        if self.pending_ai_move is not None:
            self.root.after_cancel(self.pending_ai_move)

        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point. Flags are parsed by main.py."""
    from main import main as run_game
    run_game()


if __name__ == "__main__":
    main()
