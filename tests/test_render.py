from unittest.mock import MagicMock

import numpy as np
import pygame
import pytest

from touchsnake.board import Board
from touchsnake.config import BG, HEAD, MOUSE, SNAKE
from touchsnake.render import BODY, EMPTY, HEAD_CELL, MOUSE_CELL, GridRenderer, PygameRenderer


def test_grid_renderer_marks_head_body_and_mouse():
    board = Board(5, 4, 10)
    renderer = GridRenderer(board)
    renderer.present([(2, 1), (1, 1), (0, 1)], 0, (3, 3), 7)

    assert renderer.frame.shape == (4, 5)
    assert renderer.frame[1, 2] == HEAD_CELL
    assert renderer.frame[1, 1] == BODY
    assert renderer.frame[1, 0] == BODY
    assert renderer.frame[3, 3] == MOUSE_CELL
    assert np.count_nonzero(renderer.frame) == 4
    assert renderer.score == 7
    assert renderer.frames == 1


def test_grid_renderer_clears_between_frames_and_skips_off_board_cells():
    board = Board(5, 4, 10)
    renderer = GridRenderer(board)
    renderer.present([(2, 1), (1, 1)], 0, (3, 3), 0)
    renderer.present([(5, 1), (2, 1)], 0, (1, 2), 0)

    assert renderer.frame[1, 1] == EMPTY
    assert renderer.frame[1, 2] == BODY
    assert renderer.frame[2, 1] == MOUSE_CELL
    assert np.count_nonzero(renderer.frame) == 2


def test_grid_renderer_text_dump():
    renderer = GridRenderer(Board(3, 3, 10))
    renderer.present([(0, 0), (1, 0)], 0, (2, 1), 0)
    assert renderer.to_text() == "@o.\n..m\n..."


@pytest.fixture
def display():
    pygame.display.init()
    screen = pygame.display.set_mode((100, 100))
    yield screen
    pygame.display.quit()


def test_pygame_renderer_draws_cells(display):
    canvas = pygame.Surface((100, 100), 0, 32)
    renderer = PygameRenderer(Board(10, 10, 10), surface=lambda: canvas)
    renderer.present([(2, 3), (1, 3)], 0, (7, 8), 0)

    assert tuple(canvas.get_at((25, 35)))[:3] == HEAD
    assert tuple(canvas.get_at((15, 35)))[:3] == SNAKE
    assert tuple(canvas.get_at((75, 85)))[:3] == MOUSE
    assert tuple(canvas.get_at((55, 55)))[:3] == BG


def test_pygame_renderer_skips_frame_without_surface(display, monkeypatch):
    flip = MagicMock()
    monkeypatch.setattr(pygame.display, "flip", flip)
    renderer = PygameRenderer(Board(10, 10, 10), surface=lambda: None)

    renderer.present([(2, 3)], 0, (7, 8), 0)
    flip.assert_not_called()


def test_pygame_renderer_skips_frame_when_display_is_down():
    pygame.display.quit()
    renderer = PygameRenderer(Board(10, 10, 10))
    renderer.present([(2, 3)], 0, (7, 8), 0)
