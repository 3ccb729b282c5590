"""
AI players for tic tac toe.
Three move selectors of increasing strength, all of them cheap:
random, simple (win/block) and "perfect" (opening + win/block).
"""

import random
from enum import Enum
from typing import List, Optional, Tuple, Union

import numpy as np

from .board import WINNING_LINES, LINE_INDEX, Cell
from .config import GameConfig
from .game_state import GameState


class GameMode(Enum):
    """Who plays the non-human side(s)."""
    SELF = "self"              # One human plays both sides
    RANDOM_AI = "random-ai"    # Random moves
    SIMPLE_AI = "simple-ai"    # Win, block, else random
    PERFECT_AI = "perfect-ai"  # Opening, win, block, else random


CENTER = 4
CORNERS = (0, 2, 6, 8)


class MoveSelector:
    """
    Base class for the AI players.

    A selector looks at a game state and returns the tile it wants.
    It never places the mark itself - that is up to the caller - and
    it plays for whoever is to move.
    """

    name = "ai"

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        verbose: Optional[bool] = None
    ):
        """
        Initialize the selector.

        Args:
            rng: Source of randomness. Anything with a choice() method
                works; a fresh unseeded random.Random by default.
            verbose: Print why each move was picked
                (default: GameConfig.DEBUG_MODE).
        """
        self.rng = rng if rng is not None else random.Random()
        self.verbose = GameConfig.DEBUG_MODE if verbose is None else verbose

    def select_move(self, game_state: GameState) -> int:
        raise NotImplementedError

    def _legal_moves(self, game_state: GameState) -> List[int]:
        moves = game_state.legal_moves()
        if not moves:
            raise ValueError("No legal moves: the board is full")
        return moves

    def _random_move(self, moves: List[int]) -> int:
        return int(self.rng.choice(moves))

    def _log(self, message: str):
        if self.verbose:
            print(f"[{self.name}] {message}")


class RandomSelector(MoveSelector):
    """Picks any empty tile, all equally likely."""

    name = "random-ai"

    def select_move(self, game_state: GameState) -> int:
        tile = self._random_move(self._legal_moves(game_state))
        self._log(f"random pick: {tile}")
        return tile


class SimpleSelector(MoveSelector):
    """
    Takes a win when there is one, otherwise blocks the opponent's
    win, otherwise plays a random empty tile.

    Wins are looked for on all 8 lines before any block is, so a win
    on the last diagonal beats a block on the first row. Within each
    pass the first line in WINNING_LINES order is used.
    """

    name = "simple-ai"

    def select_move(self, game_state: GameState) -> int:
        moves = self._legal_moves(game_state)

        tile = self._win_or_block(game_state)
        if tile is not None:
            return tile

        tile = self._random_move(moves)
        self._log(f"nothing to win or block, random pick: {tile}")
        return tile

    def _win_or_block(self, game_state: GameState) -> Optional[int]:
        """
        The win/block steps shared with PerfectSelector.

        Returns:
            Tile that completes our line, else the tile that completes
            the opponent's line, else None.
        """
        ours, theirs = self._line_counts(game_state)

        tile = self._completing_tile(game_state, ours)
        if tile is not None:
            self._log(f"taking the win on tile {tile}")
            return tile

        tile = self._completing_tile(game_state, theirs)
        if tile is not None:
            self._log(f"blocking tile {tile}")
            return tile

        return None

    @staticmethod
    def _line_counts(game_state: GameState) -> Tuple[np.ndarray, np.ndarray]:
        """
        Count marks per winning line.

        Returns:
            (ours, theirs): two arrays of 8 counts, in WINNING_LINES order.
        """
        player = game_state.player_to_move()
        lines = game_state.cells[LINE_INDEX]

        ours = np.count_nonzero(lines == player.mark, axis=1)
        theirs = np.count_nonzero(lines == player.opposite().mark, axis=1)
        return ours, theirs

    @staticmethod
    def _completing_tile(game_state: GameState, counts: np.ndarray) -> Optional[int]:
        """First line holding 2 of the counted marks and exactly 1 empty tile."""
        for line, count in zip(WINNING_LINES, counts):
            if count != 2:
                continue
            empty = [tile for tile in line if game_state.cells[tile] == Cell.EMPTY]
            if len(empty) == 1:
                return empty[0]
        return None


class PerfectSelector(SimpleSelector):
    """
    The "perfect" AI - which is NOT perfect.

    On the first two plies it plays the book opening (center, or a
    corner when the center is gone). After that it only knows how to
    win and block, then plays randomly. There is no fork creation or
    fork blocking, so it can lose to a player who sets up a fork.
    """

    name = "perfect-ai"

    # Plies (marks on the board) covered by the opening
    OPENING_PLIES = 2

    def select_move(self, game_state: GameState) -> int:
        moves = self._legal_moves(game_state)

        if game_state.move_count() < self.OPENING_PLIES:
            return self._opening_move(moves)

        return super().select_move(game_state)

    def _opening_move(self, moves: List[int]) -> int:
        if CENTER in moves:
            self._log("opening: center")
            return CENTER

        corners = [tile for tile in CORNERS if tile in moves]
        tile = self._random_move(corners)
        self._log(f"opening: corner {tile}")
        return tile


SELECTORS = {
    GameMode.RANDOM_AI: RandomSelector,
    GameMode.SIMPLE_AI: SimpleSelector,
    GameMode.PERFECT_AI: PerfectSelector,
}


def create_selector(
    mode: Union[GameMode, str],
    rng: Optional[random.Random] = None,
    verbose: Optional[bool] = None
) -> Optional[MoveSelector]:
    """
    Build the AI for a game mode.

    Args:
        mode: A GameMode or its command line name ("simple-ai", ...).
        rng: Source of randomness handed to the selector.
        verbose: Print the selector's reasoning.

    Returns:
        The selector, or None in "self" mode (no AI).

    Raises:
        ValueError: for an unknown mode.
    """
    mode = GameMode(mode)

    if mode == GameMode.SELF:
        return None

    return SELECTORS[mode](rng=rng, verbose=verbose)
