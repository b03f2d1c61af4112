"""Touch-driven Snake: a menu screen and a fixed-tick game view."""

from .config import Config, Direction
from .board import Board
from .game import GameState, Outcome, SnakeBody, new_game_state, spawn_mouse, step_game
from .loop import GameLoop

__all__ = [
    "Board",
    "Config",
    "Direction",
    "GameLoop",
    "GameState",
    "Outcome",
    "SnakeBody",
    "new_game_state",
    "spawn_mouse",
    "step_game",
]

__version__ = "0.1.0"
