"""
Tests for the console UI and the command line.

Input is scripted and output collected in a list, so whole games
can be played without a terminal.

Usage:
    python -m unittest test_ui
"""

import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

import main
from logic.board import GameStatus, Player
from logic.config import GameConfig
from logic.game_state import GameState
from logic.ai_player import GameMode, MoveSelector, SimpleSelector
from ui import ConsoleUI, render_board


class ScriptedInput:
    """Feeds prepared lines to the UI, then behaves like a closed stdin."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class FirstChoice:
    def choice(self, options):
        return options[0]


class StuckSelector(MoveSelector):
    """Always wants tile 0 - illegal from its second move on."""

    name = "stuck-ai"

    def select_move(self, game_state):
        return 0


def play(lines, **kwargs):
    output = []
    scripted = ScriptedInput(lines)
    ui = ConsoleUI(input_fn=scripted, output_fn=output.append, **kwargs)
    status = ui.run()
    return status, output, scripted, ui


class RenderBoardTests(unittest.TestCase):
    def test_empty_board_shows_numbers(self):
        self.assertEqual(
            render_board(GameState()),
            "0|1|2\n-+-+-\n3|4|5\n-+-+-\n6|7|8"
        )

    def test_marks(self):
        game = GameState.from_moves([4, 0, 8])
        self.assertEqual(
            render_board(game),
            "O|1|2\n-+-+-\n3|X|5\n-+-+-\n6|7|X"
        )


class ConsoleUITests(unittest.TestCase):
    def test_self_play_draw(self):
        status, output, scripted, ui = play(
            ["0", "1", "2", "4", "3", "5", "7", "6", "8"]
        )
        self.assertEqual(status, GameStatus.DRAW)
        self.assertIn(GameConfig.DRAW_MESSAGE, output)
        self.assertEqual(output[0], GameConfig.TITLE)
        # Final board is drawn after the result
        self.assertEqual(output[-1], "X|O|X\n-+-+-\nX|O|O\n-+-+-\nO|X|X")

    def test_prompts_name_the_player(self):
        _, _, scripted, _ = play(["0", "3", "1", "4", "2"])
        self.assertEqual(scripted.prompts[0], GameConfig.PROMPT.format(player="X"))
        self.assertEqual(scripted.prompts[1], GameConfig.PROMPT.format(player="O"))

    def test_bad_input_is_asked_again(self):
        status, output, scripted, ui = play(
            ["zero", "0", "0", "9", "-1", "3", "1", "4", "2"]
        )
        self.assertEqual(status, GameStatus.X_WON)
        refusals = [line for line in output if line.startswith(GameConfig.INVALID_TILE_MESSAGE)]
        self.assertEqual(len(refusals), 4)
        self.assertIn("Player X won!", output)
        self.assertIn("Winning line: 0-1-2", output)

    def test_end_of_input_abandons_game(self):
        status, output, _, ui = play(["4"])
        self.assertEqual(status, GameStatus.NOT_COMPLETED)
        self.assertEqual(ui.game_state.move_count(), 1)

    def test_human_against_simple_ai(self):
        selector = SimpleSelector(rng=FirstChoice(), verbose=False)
        status, output, scripted, ui = play(
            ["0", "4", "6", "2"],
            mode=GameMode.SIMPLE_AI,
            selector=selector
        )
        # AI opens 1, blocks 8, blocks 3, then X completes 2-4-6
        self.assertEqual(status, GameStatus.X_WON)
        self.assertEqual(ui.game_state.legal_moves(), [5, 7])
        self.assertIn("Player O (simple-ai) picks tile 8.", output)
        self.assertEqual(len(scripted.prompts), 4)

    def test_ai_moves_first_when_human_is_o(self):
        selector = SimpleSelector(rng=FirstChoice(), verbose=False)
        status, output, scripted, ui = play(
            [], mode=GameMode.SIMPLE_AI, human_player=Player.O, selector=selector
        )
        self.assertEqual(status, GameStatus.NOT_COMPLETED)
        self.assertEqual(ui.game_state.move_count(), 1)
        self.assertEqual(scripted.prompts, [GameConfig.PROMPT.format(player="O")])

    def test_illegal_ai_move_is_a_bug(self):
        with self.assertRaises(RuntimeError):
            play(["1"], mode=GameMode.RANDOM_AI, human_player=Player.O,
                 selector=StuckSelector(verbose=False))

    def test_self_mode_has_no_ai(self):
        ui = ConsoleUI(mode="self", input_fn=ScriptedInput([]), output_fn=[].append)
        self.assertIsNone(ui.selector)
        self.assertTrue(ui.is_human_turn())


class MainTests(unittest.TestCase):
    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main.main(argv)
        return code, out.getvalue()

    def test_missing_mode_prints_usage(self):
        code, text = self.run_main([])
        self.assertEqual(code, 0)
        self.assertIn("usage:", text)

    def test_unknown_mode_prints_usage(self):
        code, text = self.run_main(["minimax-ai"])
        self.assertEqual(code, 0)
        self.assertIn("Unknown mode: minimax-ai", text)
        self.assertIn("usage:", text)

    def test_unknown_player_prints_usage(self):
        code, text = self.run_main(["simple-ai", "--human", "Z"])
        self.assertEqual(code, 0)
        self.assertIn("Unknown player: Z", text)

    def test_plays_until_input_ends(self):
        with mock.patch("builtins.input", side_effect=["4", EOFError()]):
            code, text = self.run_main(["perfect-ai", "--seed", "7"])
        self.assertEqual(code, 0)
        self.assertIn("Player O (perfect-ai) picks tile", text)
        self.assertIn("Goodbye!", text)

    def test_debug_flag(self):
        with mock.patch.object(GameConfig, "DEBUG_MODE", False), \
                mock.patch("builtins.input", side_effect=EOFError()):
            code, text = self.run_main(["perfect-ai", "--human", "o", "--debug"])
        self.assertEqual(code, 0)
        self.assertIn("[perfect-ai] opening: center", text)

    def test_keyboard_interrupt(self):
        with mock.patch("builtins.input", side_effect=KeyboardInterrupt()):
            code, text = self.run_main(["self"])
        self.assertEqual(code, 0)
        self.assertIn("Game interrupted by user.", text)


if __name__ == "__main__":
    unittest.main()
