"""
Board constants for tic tac toe.
Cells, players, game status and the winning lines.

The board's tiles are numbered like so:

    0 | 1 | 2
    - + - + -
    3 | 4 | 5
    - + - + -
    6 | 7 | 8
"""

from enum import Enum, IntEnum
from typing import Tuple

import numpy as np


# Number of tiles on the board
BOARD_CELLS = 9
BOARD_SIZE = 3


class Cell(IntEnum):
    """
    What a tile holds.
    The values double as the numpy board encoding, so the sum
    of a line is +3 / -3 when one player owns all of it.
    """
    X = 1
    O = -1
    EMPTY = 0

    @property
    def symbol(self) -> str:
        """Character used when printing the board."""
        return "" if self == Cell.EMPTY else self.name


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def mark(self) -> Cell:
        """The mark this player puts on the board."""
        return Cell.X if self == Player.X else Cell.O


class GameStatus(Enum):
    """Result of looking at a board. Never stored, always computed."""
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"
    NOT_COMPLETED = "not_completed"

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.NOT_COMPLETED


# All possible winning lines, checked in this order
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
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
)

# Same table as an (8, 3) index array for fancy indexing the board
LINE_INDEX = np.array(WINNING_LINES, dtype=np.intp)
LINE_INDEX.setflags(write=False)

Board = Tuple[Cell, ...]


def empty_cells() -> np.ndarray:
    """A fresh numpy board with every tile empty."""
    return np.zeros(BOARD_CELLS, dtype=np.int8)


def to_board(cells: np.ndarray) -> Board:
    """Convert the numpy encoding into a tuple of Cell values."""
    return tuple(Cell(int(value)) for value in cells)


def to_cells(board) -> np.ndarray:
    """
    Convert any sequence of Cell values (or their ints) into the
    numpy encoding.

    Raises:
        ValueError: if the sequence is not exactly 9 tiles long.
    """
    cells = np.array([int(value) for value in board], dtype=np.int8)
    if cells.shape != (BOARD_CELLS,):
        raise ValueError(f"A board has {BOARD_CELLS} tiles, got {cells.size}")
    return cells
