import os

# pygame must never try to open a real window or audio device under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random
from unittest.mock import MagicMock

import pytest

from touchsnake.board import Board
from touchsnake.config import Direction
from touchsnake.game import GameState, SnakeBody


@pytest.fixture
def board():
    return Board(10, 10, 10)


@pytest.fixture
def rng():
    return random.Random(0)


@pytest.fixture
def audio():
    return MagicMock()


@pytest.fixture
def make_state(board):
    def _make(cells, mouse=(1, 1), direction=Direction.RIGHT, capacity=200):
        state = GameState(board=board, body=SnakeBody.from_cells(cells, capacity), mouse=mouse)
        state.direction.store(direction)
        return state
    return _make
