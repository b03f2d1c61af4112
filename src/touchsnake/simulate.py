# simulate.py
from __future__ import annotations

import logging
import random
from typing import Optional, Tuple

from .audio import SilentCues
from .board import Board
from .config import CFG, Config
from .game import Outcome, new_game_state
from .loop import GameLoop
from .render import GridRenderer

logger = logging.getLogger(__name__)


class RecordingNavigator:
    """Stands in for the menu: remembers how the session ended."""

    def __init__(self):
        self.calls = 0
        self.outcome: Optional[Outcome] = None
        self.score = 0

    def return_to_menu(self, outcome: Outcome, score: int) -> None:
        self.calls += 1
        self.outcome = outcome
        self.score = score


def random_release(rng: random.Random, screen_size: Tuple[int, int]) -> Tuple[float, float]:
    """Random policy: a tap anywhere on the screen."""
    w, h = screen_size
    return rng.uniform(0, w), rng.uniform(0, h)


def simulate(cfg: Config = CFG, max_ticks: int = 1000, touch_every: int = 4,
             renderer: Optional[GridRenderer] = None) -> Tuple[int, int, Outcome]:
    """
    Play one session without a window or a worker thread, tapping the
    screen at random every `touch_every` ticks.

    Time is synthetic: each iteration jumps the clock to the next tick
    deadline, so the run is as fast as the CPU allows.

    Returns:
        ticks: number of ticks played
        score: final score
        outcome: ALIVE if `max_ticks` ran out before the session ended
    """
    rng = random.Random(cfg.seed)
    board = Board.from_screen(cfg.screen_size[0], cfg.screen_size[1], cfg.blocks_wide)
    renderer = renderer or GridRenderer(board)
    navigator = RecordingNavigator()

    now = 0
    loop = GameLoop(new_game_state(board, cfg, rng), renderer, SilentCues(), navigator,
                    cfg=cfg, rng=rng, clock=lambda: now)

    ticks = 0
    while ticks < max_ticks and not loop.finished:
        if touch_every > 0 and ticks % touch_every == touch_every - 1:
            px, py = random_release(rng, cfg.screen_size)
            loop.on_release(px, py, cfg.screen_size)
        now = loop.next_tick_ms
        if loop.run_once(now):
            ticks += 1

    score = loop.state.score
    logger.info("Simulated %d ticks: score=%d outcome=%s", ticks, score, loop.state.outcome.value)
    return ticks, score, loop.state.outcome
