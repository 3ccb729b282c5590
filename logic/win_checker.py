"""
Win checker for tic tac toe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

import numpy as np

from .board import (
    WINNING_LINES, LINE_INDEX, Cell, Player, GameStatus, to_cells
)


class WinChecker:
    """
    Checks for win conditions in tic tac toe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    Every method takes a board snapshot: either the tuple of Cell
    values returned by GameState.board() or the raw numpy encoding.
    A win is always reported before a draw, so a full board that
    contains a line is a win.
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board) -> Optional[Player]:
        """
        Check if there's a winner.

        Only the first complete line (in WINNING_LINES order) counts.
        Two lines for different players can't happen in a legal game.

        Args:
            board: The board to look at.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self._first_winning_line(self._as_cells(board))
        if line is None:
            return None

        return Player.X if line[1] == Cell.X else Player.O

    def check_draw(self, board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND no winner.
        """
        cells = self._as_cells(board)

        # First check if there's a winner - if so, not a draw
        if self._first_winning_line(cells) is not None:
            return False

        return not np.any(cells == Cell.EMPTY)

    def find_game_status(self, board) -> GameStatus:
        """
        Work out where the game stands.

        Args:
            board: The board to look at.

        Returns:
            X_WON / O_WON if a line is complete, DRAW if the board is
            full without one, NOT_COMPLETED otherwise.
        """
        cells = self._as_cells(board)

        found = self._first_winning_line(cells)
        if found is not None:
            return GameStatus.X_WON if found[1] == Cell.X else GameStatus.O_WON

        if not np.any(cells == Cell.EMPTY):
            return GameStatus.DRAW

        return GameStatus.NOT_COMPLETED

    def get_winning_line(self, board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of tile indices, or None.
        """
        found = self._first_winning_line(self._as_cells(board))
        return None if found is None else found[0]

    def _first_winning_line(
        self, cells: np.ndarray
    ) -> Optional[Tuple[Tuple[int, int, int], Cell]]:
        """
        Find the first complete line and the mark that owns it.

        A line sums to +3 only when all three tiles are X and to -3
        only when all three are O.
        """
        sums = cells[LINE_INDEX].sum(axis=1)
        owned = np.flatnonzero(np.abs(sums) == 3)

        if owned.size == 0:
            return None

        first = int(owned[0])
        mark = Cell.X if sums[first] > 0 else Cell.O
        return WINNING_LINES[first], mark

    @staticmethod
    def _as_cells(board) -> np.ndarray:
        if isinstance(board, np.ndarray):
            return board
        return to_cells(board)
