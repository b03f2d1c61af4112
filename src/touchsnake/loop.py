# loop.py
import logging
import random
import threading
import time
from typing import Callable, Optional, Tuple

from .config import CFG, Config
from .controls import handle_release
from .game import GameState, Outcome, step_game

logger = logging.getLogger(__name__)


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class GameLoop:
    """
    Fixed-rate driver for one session.

    A worker thread ticks the game `cfg.tick_rate` times per second while
    the playing flag is set. Each tick updates the state and then asks the
    renderer to draw it. When the session ends the navigator is told once
    and the worker exits on its own.
    """

    def __init__(self, state: GameState, renderer, audio, navigator,
                 cfg: Config = CFG, rng: Optional[random.Random] = None,
                 clock: Callable[[], int] = monotonic_ms):
        self.state = state
        self.renderer = renderer
        self.audio = audio
        self.navigator = navigator
        self.cfg = cfg
        self.rng = rng or random.Random(cfg.seed)
        self.clock = clock

        self.next_tick_ms = clock()
        self._playing = threading.Event()
        self._wake = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._navigated = False

    @property
    def playing(self) -> bool:
        return self._playing.is_set()

    @property
    def finished(self) -> bool:
        return self.state.outcome is not Outcome.ALIVE

    # ---------- Lifecycle ----------
    def resume(self) -> None:
        if self.finished:
            logger.debug("Session already over, not resuming")
            return
        if self._thread is not None and self._thread.is_alive():
            return
        self.next_tick_ms = self.clock()
        self._wake.clear()
        self._playing.set()
        self._thread = threading.Thread(target=self._run, name="touchsnake-loop", daemon=True)
        self._thread.start()
        logger.info("Game loop resumed")

    def pause(self) -> None:
        """Stop ticking and block until the worker has exited."""
        self._playing.clear()
        self._wake.set()
        thread = self._thread
        if thread is None:
            return
        if thread is threading.current_thread():
            # called from inside a tick; the worker exits once it returns,
            # and resume() will not start another one until then
            return
        thread.join()
        self._thread = None
        logger.info("Game loop paused")

    # ---------- Ticking ----------
    def _run(self) -> None:
        while self._playing.is_set():
            now = self.clock()
            if self.run_once(now):
                continue
            # sleep until the next deadline; pause() wakes us early
            self._wake.wait(max(self.next_tick_ms - now, 0) / 1000.0)

    def run_once(self, now: int) -> bool:
        """Perform one tick if the deadline has passed. Returns True if it ticked."""
        if now < self.next_tick_ms or self.finished:
            return False
        self.next_tick_ms = now + self.cfg.period_ms
        self.tick()
        return True

    def tick(self) -> Outcome:
        state = self.state
        outcome = step_game(state, self.rng, self.audio)
        if outcome is Outcome.ALIVE:
            self.renderer.present(list(state.body), 0, state.mouse, state.score)
        else:
            self._end(outcome)
        return outcome

    def _end(self, outcome: Outcome) -> None:
        self._playing.clear()
        if self._navigated:
            return
        self._navigated = True
        logger.info("Session over (%s), score %d", outcome.value, self.state.score)
        self.navigator.return_to_menu(outcome, self.state.score)

    # ---------- Input ----------
    def on_release(self, px: float, py: float, screen_size: Tuple[int, int]) -> None:
        handle_release(self.state, px, py, screen_size)
