# controls.py
from typing import TYPE_CHECKING, Optional, Tuple

import pygame  # type: ignore

from .config import Direction

if TYPE_CHECKING:
    from .game import GameState


class DirectionSlot:
    """
    Latest-wins hand-off of the heading between the input thread and the
    loop thread. Rebinding one attribute is atomic, so neither side locks.
    """

    def __init__(self, direction: Direction = Direction.RIGHT):
        self._direction = direction

    def store(self, direction: Direction) -> None:
        self._direction = direction

    def load(self) -> Direction:
        return self._direction


def direction_for_release(current: Direction, px: float, py: float,
                          screen_w: int, screen_h: int) -> Direction:
    """
    A release always turns onto the other axis: moving sideways picks
    up/down from the half of the screen touched, moving vertically picks
    left/right.
    """
    if current.is_horizontal:
        return Direction.UP if py >= screen_h / 2 else Direction.DOWN
    return Direction.RIGHT if px >= screen_w / 2 else Direction.LEFT


def handle_release(state: "GameState", px: float, py: float, screen_size: Tuple[int, int]) -> Direction:
    """Turn a pointer release into the heading for the next tick."""
    w, h = screen_size
    new_dir = direction_for_release(state.direction.load(), px, py, w, h)
    state.direction.store(new_dir)
    return new_dir


def release_position(event, screen_size: Tuple[int, int]) -> Optional[Tuple[float, float]]:
    """Pixel position of a mouse or finger release, None for any other event."""
    if event.type == pygame.MOUSEBUTTONUP:
        # SDL mirrors every touch as a mouse event; the FINGERUP already counted
        if getattr(event, "touch", False):
            return None
        return float(event.pos[0]), float(event.pos[1])
    if event.type == pygame.FINGERUP:
        # finger coordinates come normalized to 0..1
        w, h = screen_size
        return event.x * w, event.y * h
    return None
