"""
Board state for tic-tac-toe.
Holds the 9 cells; whose turn it is comes from the cells themselves.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass


class Mark(Enum):
    """The two marks. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


# None means the cell is empty
Cell = Optional[Mark]

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# Characters accepted as an empty cell by Board.from_string
EMPTY_CHARS = ".-_ "


def to_index(row: int, col: int) -> int:
    """Row-major index of (row, col)."""
    return row * BOARD_SIZE + col


def to_row_col(index: int) -> Tuple[int, int]:
    """(row, col) of a row-major index."""
    return divmod(index, BOARD_SIZE)


@dataclass(frozen=True)
class Board:
    """
    An immutable 3x3 board.

    Cells are stored row-major (row r, col c -> index 3r+c).
    Moves never modify a Board; they return a new one.
    """

    cells: Tuple[Cell, ...] = (None,) * NUM_CELLS

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != NUM_CELLS:
            raise ValueError(f"Board needs {NUM_CELLS} cells, got {len(cells)}")
        for cell in cells:
            if cell is not None and not isinstance(cell, Mark):
                raise ValueError(f"Invalid cell value: {cell!r}")
        # Accept lists; keep the stored value hashable
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        """A fresh board for a new round."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a 9-character string such as "XX.OO....".

        Args:
            text: One character per cell, row-major. 'X' and 'O' are marks,
                any of ". - _" or a space is an empty cell.

        Returns:
            The parsed Board.
        """
        cells: List[Cell] = []
        for char in text:
            if char.upper() in ("X", "O"):
                cells.append(Mark(char.upper()))
            elif char in EMPTY_CHARS:
                cells.append(None)
            else:
                raise ValueError(f"Invalid board character: {char!r}")
        return cls(tuple(cells))

    def to_string(self) -> str:
        """Inverse of from_string, using '.' for empty cells."""
        return "".join(cell.value if cell else "." for cell in self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __len__(self) -> int:
        return NUM_CELLS

    def count(self, mark: Mark) -> int:
        """How many cells hold the given mark."""
        return sum(1 for cell in self.cells if cell == mark)

    @property
    def turn(self) -> Mark:
        """The side to move: whichever mark has placed fewer cells (X on ties)."""
        return Mark.O if self.count(Mark.X) > self.count(Mark.O) else Mark.X

    def is_well_formed(self) -> bool:
        """True if the X count minus the O count is 0 or 1."""
        return self.count(Mark.X) - self.count(Mark.O) in (0, 1)

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def empty_indices(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of indices, ascending.
        """
        return [index for index, cell in enumerate(self.cells) if cell is None]

    def place(self, index: int, mark: Mark) -> "Board":
        """
        Return a copy with mark at index. No rule checks;
        use apply_move for anything that comes from a player.
        """
        cells = list(self.cells)
        cells[index] = mark
        return Board(tuple(cells))

    def pretty(self) -> str:
        """Render the board for the console. Empty cells show their index."""
        lines = []
        for row in range(BOARD_SIZE):
            row_cells = []
            for col in range(BOARD_SIZE):
                index = to_index(row, col)
                cell = self.cells[index]
                row_cells.append(cell.value if cell else str(index))
            lines.append(" " + " | ".join(row_cells))
            if row < BOARD_SIZE - 1:
                lines.append("---+---+---")
        return "\n".join(lines)


def empty_indices(board: Board) -> List[int]:
    """All indices of empty cells, ascending."""
    return board.empty_indices()
