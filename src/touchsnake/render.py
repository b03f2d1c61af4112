# render.py
import logging
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .board import Board
from .config import BG, HEAD, MOUSE, SNAKE, TEXT

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# GridRenderer cell codes
EMPTY, BODY, HEAD_CELL, MOUSE_CELL = 0, 1, 2, 3
_GLYPHS = {EMPTY: ".", BODY: "o", HEAD_CELL: "@", MOUSE_CELL: "m"}


def draw_cell(screen: pygame.Surface, board: Board, gx: int, gy: int,
              color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, pygame.Rect(*board.to_pixels(gx, gy)))


# ---------- pygame ----------
class PygameRenderer:
    """Draws frames onto the display surface. Frames are dropped while there is none."""

    def __init__(self, board: Board,
                 surface: Callable[[], Optional[pygame.Surface]] = pygame.display.get_surface,
                 font: Optional[pygame.font.Font] = None):
        self.board = board
        self.surface = surface
        self.font = font

    def _valid_surface(self) -> Optional[pygame.Surface]:
        if not pygame.display.get_init():
            return None
        return self.surface()

    def present(self, segments: Sequence[Cell], head_index: int, mouse: Cell, score: int) -> None:
        screen = self._valid_surface()
        if screen is None:
            logger.debug("No drawing surface, skipping frame")
            return

        screen.fill(BG)
        # score
        if self.font is not None:
            txt = self.font.render(f"Score:{score}", True, TEXT)
            screen.blit(txt, (10, 6))
        # snake
        for i, (x, y) in enumerate(segments):
            draw_cell(screen, self.board, x, y, HEAD if i == head_index else SNAKE)
        # mouse
        draw_cell(screen, self.board, mouse[0], mouse[1], MOUSE)
        pygame.display.flip()


# ---------- headless ----------
class GridRenderer:
    """
    Keeps the latest frame as a (height, width) uint8 grid instead of
    drawing it. Used for headless runs and tests.

    Cells off the board (a head that just crashed) are left out.
    """

    def __init__(self, board: Board):
        self.board = board
        self.frame = np.zeros((board.height_blocks, board.width_blocks), dtype=np.uint8)
        self.score = 0
        self.frames = 0

    def _put(self, cell: Cell, code: int) -> None:
        x, y = cell
        if self.board.in_bounds(x, y):
            self.frame[y, x] = code

    def present(self, segments: Sequence[Cell], head_index: int, mouse: Cell, score: int) -> None:
        self.frame.fill(EMPTY)
        self._put(mouse, MOUSE_CELL)
        for i, cell in enumerate(segments):
            self._put(cell, HEAD_CELL if i == head_index else BODY)
        self.score = score
        self.frames += 1

    def to_text(self) -> str:
        # row 0 first, matching the screen layout
        rows: List[str] = ["".join(_GLYPHS[int(c)] for c in row) for row in self.frame]
        return "\n".join(rows)
