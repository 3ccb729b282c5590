"""
Configuration for the console tic tac toe game.
Prompts, messages and debug switches.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags in main.py override some of these.
    """

    # ==================== GAME MODES ====================
    # First argument on the command line
    GAME_MODES = ["self", "random-ai", "simple-ai", "perfect-ai"]

    # Which side the human takes against an AI ("X" moves first)
    HUMAN_PLAYER = "X"

    # Seed for the AI's random choices. None = different every game
    RANDOM_SEED = None

    # ==================== TEXT ====================
    TITLE = "t4 - a tiny tic tac toe program"
    PROMPT = "You are player {player}.\nSelect a tile to place a mark: "
    INVALID_TILE_MESSAGE = "You didn't pick a valid tile!"
    DRAW_MESSAGE = "Draw!"
    WIN_MESSAGE = "Player {player} won!"
    AI_MOVE_MESSAGE = "Player {player} ({mode}) picks tile {tile}."

    # ==================== DEBUG SETTINGS ====================
    # Print why the AI picked its move
    DEBUG_MODE = False
