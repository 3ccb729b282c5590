"""
Move validator for tic tac toe.
Explains why a move is not allowed and turns typed input into a tile.
"""

from typing import Optional
from dataclasses import dataclass

from .board import BOARD_CELLS, Cell
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates tic tac toe moves.

    Rules:
    1. The tile must be on the board (0-8)
    2. Can only place on empty tiles
    3. Game must not be over

    GameState.make_move() applies rules 1 and 2 on its own and just
    says yes or no; this class says why.
    """

    def validate_move(self, game_state: GameState, tile) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            tile: Tile to place a mark on.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.find_game_status().is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if tile is in valid range
        if isinstance(tile, bool) or not isinstance(tile, int) \
                or not (0 <= tile < BOARD_CELLS):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid tile {tile!r}. Must be 0-{BOARD_CELLS - 1}."
            )

        # Check if tile is empty
        cell = game_state.board()[tile]
        if cell != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Tile {tile} is already taken by {cell.symbol}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def parse_tile(self, text: str) -> Optional[int]:
        """
        Turn a line typed by the player into a tile index.

        Args:
            text: Raw input line.

        Returns:
            The integer typed, or None if the line isn't a whole number.
            Range is not checked here.
        """
        text = text.strip()
        try:
            return int(text)
        except ValueError:
            return None
