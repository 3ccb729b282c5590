"""
Game state management for tic tac toe.
Tracks the board and whose turn it is.
"""

from dataclasses import dataclass, field
from typing import Iterable, List

import numpy as np

from .board import (
    BOARD_CELLS, Board, Cell, GameStatus, Player, empty_cells, to_board
)
from .win_checker import WinChecker


_win_checker = WinChecker()


@dataclass(eq=False)
class GameState:
    """
    The complete state of a tic tac toe game.

    Tracks:
    - The 9 tiles of the board (numpy int8, see Cell for the encoding)
    - The player to move

    The only way to change the board is make_move(), which also
    hands the turn to the other player. Nothing stops moves after
    the game is decided; callers check find_game_status() first.
    """

    # The 9 tiles - Cell.EMPTY means free
    cells: np.ndarray = field(default_factory=empty_cells)

    # X always moves first
    to_move: Player = Player.X

    @classmethod
    def from_moves(cls, moves: Iterable[int]) -> "GameState":
        """
        Replay a sequence of moves from an empty board.

        Args:
            moves: Tile indices, alternating X and O starting with X.

        Returns:
            The resulting game state.

        Raises:
            ValueError: if one of the moves is illegal.
        """
        state = cls()
        for number, tile in enumerate(moves):
            if not state.make_move(tile):
                raise ValueError(f"Move #{number} to tile {tile!r} is illegal")
        return state

    def board(self) -> Board:
        """Snapshot of the 9 tiles."""
        return to_board(self.cells)

    def player_to_move(self) -> Player:
        return self.to_move

    def move_count(self) -> int:
        """How many marks are on the board."""
        return int(np.count_nonzero(self.cells))

    def make_move(self, tile: int) -> bool:
        """
        Place the current player's mark on a tile.

        Args:
            tile: Tile index (0-8).

        Returns:
            True if move was successful, False if the tile is off the
            board or already taken. The state is unchanged on False.
        """
        # bool is an int subclass; True must not mean tile 1
        if isinstance(tile, bool) or not isinstance(tile, (int, np.integer)):
            return False

        if tile < 0 or tile > BOARD_CELLS - 1:
            return False

        if self.cells[tile] != Cell.EMPTY:
            return False

        self.cells[tile] = self.to_move.mark
        self.to_move = self.to_move.opposite()

        return True

    def legal_moves(self) -> List[int]:
        """
        Get all empty tiles, lowest index first.

        Returns:
            List of tile indices. Empty only when the board is full.
        """
        return [int(tile) for tile in np.flatnonzero(self.cells == Cell.EMPTY)]

    def find_game_status(self) -> GameStatus:
        """Win, draw or still going - computed fresh from the board."""
        return _win_checker.find_game_status(self.cells)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(cells=self.cells.copy(), to_move=self.to_move)
