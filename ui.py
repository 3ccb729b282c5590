"""
t4 console UI
Draws the board as text and runs the turn-taking loop.

The board looks like this, empty tiles show their number:

    0|1|X
    -+-+-
    3|O|5
    -+-+-
    6|7|8
"""

from typing import Callable, Optional

from logic.board import BOARD_SIZE, Cell, GameStatus, Player
from logic.config import GameConfig
from logic.game_state import GameState
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.ai_player import GameMode, MoveSelector, create_selector


def render_board(game_state: GameState) -> str:
    """
    Draw the board as text.

    Args:
        game_state: Game to draw.

    Returns:
        Five lines of text, no trailing newline.
    """
    tiles = [
        cell.symbol if cell != Cell.EMPTY else str(index)
        for index, cell in enumerate(game_state.board())
    ]

    rows = [
        "|".join(tiles[row * BOARD_SIZE:(row + 1) * BOARD_SIZE])
        for row in range(BOARD_SIZE)
    ]
    return "\n-+-+-\n".join(rows)


class ConsoleUI:
    """
    Main UI class for the console game.

    Game flow:
    1. Draw the board
    2. The player to move picks a tile (typed in, or chosen by the AI)
    3. Illegal picks from a human are refused and asked again
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        mode: GameMode = GameMode.SELF,
        human_player: Player = Player.X,
        selector: Optional[MoveSelector] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize the UI.

        Args:
            mode: Game mode; decides which AI plays the other side.
            human_player: Side the human plays against an AI.
            selector: AI to use instead of the mode's default one.
            input_fn: Reads a line from the player (default: input).
            output_fn: Writes a block of text (default: print).
        """
        self.mode = GameMode(mode)
        self.human_player = human_player
        self.selector = selector if selector is not None else create_selector(self.mode)

        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    def is_human_turn(self) -> bool:
        if self.selector is None:
            return True
        return self.game_state.player_to_move() == self.human_player

    def run(self) -> GameStatus:
        """
        Play one game.

        Returns:
            The final status, or NOT_COMPLETED if the input ran out.
        """
        self.output_fn(GameConfig.TITLE)
        self.output_fn("-" * len(GameConfig.TITLE) + "\n")

        while True:
            self.output_fn(render_board(self.game_state))

            if self.is_human_turn():
                try:
                    placed = self._human_move()
                except EOFError:
                    self.output_fn("\nNo more input, game abandoned.")
                    return GameStatus.NOT_COMPLETED
                if not placed:
                    continue
            else:
                self._ai_move()

            self.output_fn("")
            status = self.game_state.find_game_status()
            if status.is_terminal:
                self._show_game_result(status)
                return status

    def _human_move(self) -> bool:
        """
        Ask the human for a tile and play it.

        Returns:
            True if a mark was placed, False if the pick was refused.

        Raises:
            EOFError: when the input runs out.
        """
        player = self.game_state.player_to_move()
        line = self.input_fn(GameConfig.PROMPT.format(player=player.value))

        tile = self.validator.parse_tile(line)
        if tile is None:
            self.output_fn(GameConfig.INVALID_TILE_MESSAGE)
            return False

        result = self.validator.validate_move(self.game_state, tile)
        if not result.is_valid or not self.game_state.make_move(tile):
            self.output_fn(f"{GameConfig.INVALID_TILE_MESSAGE} {result.error_message}")
            return False

        return True

    def _ai_move(self):
        """Let the AI pick a tile and play it."""
        player = self.game_state.player_to_move()
        tile = self.selector.select_move(self.game_state)

        # An illegal pick is a bug in the selector, not something to retry
        if not self.game_state.make_move(tile):
            raise RuntimeError(f"{self.selector.name} picked illegal tile {tile!r}")

        self.output_fn(GameConfig.AI_MOVE_MESSAGE.format(
            player=player.value, mode=self.selector.name, tile=tile
        ))

    def _show_game_result(self, status: GameStatus):
        """Announce the result and draw the final board."""
        if status == GameStatus.DRAW:
            self.output_fn(GameConfig.DRAW_MESSAGE)
        else:
            winner = Player.X if status == GameStatus.X_WON else Player.O
            self.output_fn(GameConfig.WIN_MESSAGE.format(player=winner.value))

            line = self.win_checker.get_winning_line(self.game_state.board())
            self.output_fn("Winning line: " + "-".join(str(tile) for tile in line))

        self.output_fn(render_board(self.game_state))
