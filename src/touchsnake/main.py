# main.py
import argparse
import logging
import random
from typing import Optional, Sequence

import pygame  # type: ignore

from .audio import SoundCues
from .board import Board
from .config import Config, MENU_FPS, TEXT_SIZE, WIDTH, HEIGHT, NUM_BLOCKS_WIDE, TICK_RATE, SOUND_DIR
from .controls import release_position
from .game import new_game_state
from .loop import GameLoop
from .menu import RETURN_TO_MENU, EventNavigator, MenuScreen
from .render import GridRenderer, PygameRenderer
from .simulate import simulate

logger = logging.getLogger(__name__)

MENU, PLAYING = "menu", "playing"


class App:
    """
    Owns the window and switches between the menu and a play session.

    Everything here runs on the main thread; the session itself ticks on
    the GameLoop worker and comes back through RETURN_TO_MENU.
    """

    def __init__(self, cfg: Config):
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)

        pygame.init()
        self.screen = pygame.display.set_mode(cfg.screen_size)
        pygame.display.set_caption("Snake")
        self.font = pygame.font.SysFont(None, TEXT_SIZE)
        self.clock = pygame.time.Clock()

        self.board = Board.from_screen(*cfg.screen_size, blocks_wide=cfg.blocks_wide)
        self.audio = SoundCues(cfg)
        self.menu = MenuScreen(self.screen, self.font)
        self.navigator = EventNavigator()
        self.renderer = PygameRenderer(self.board, font=self.font)

        self.mode = MENU
        self.loop: Optional[GameLoop] = None

    # ---------- transitions ----------
    def start_session(self) -> None:
        state = new_game_state(self.board, self.cfg, self.rng)
        self.loop = GameLoop(state, self.renderer, self.audio, self.navigator,
                             cfg=self.cfg, rng=self.rng)
        self.mode = PLAYING
        self.loop.resume()

    def show_menu(self) -> None:
        if self.loop is not None:
            self.loop.pause()
            self.loop = None
        self.mode = MENU

    # ---------- events ----------
    def handle_event(self, event) -> bool:
        """Process one event. Return False to quit."""
        if event.type == pygame.QUIT:
            return False

        if self.mode == MENU:
            pos = release_position(event, self.cfg.screen_size)
            if pos is not None and self.menu.hit_play(pos):
                self.start_session()
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self.start_session()
            return True

        if event.type == RETURN_TO_MENU:
            self.menu.last_result = (event.outcome, event.score)
            self.show_menu()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.show_menu()
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.loop.pause()
        elif event.type == pygame.WINDOWFOCUSGAINED:
            self.loop.resume()
        else:
            pos = release_position(event, self.cfg.screen_size)
            if pos is not None:
                self.loop.on_release(pos[0], pos[1], self.cfg.screen_size)
        return True

    def run(self) -> None:
        running = True
        try:
            while running:
                for event in pygame.event.get():
                    running = self.handle_event(event)
                    if not running:
                        break
                if running and self.mode == MENU:
                    self.menu.draw()
                self.clock.tick(MENU_FPS)
        finally:
            self.show_menu()
            pygame.quit()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="touchsnake", description="Touch-controlled Snake")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--blocks-wide", type=int, default=NUM_BLOCKS_WIDE)
    parser.add_argument("--tick-rate", type=int, default=TICK_RATE, help="game updates per second")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--sound-dir", type=str, default=SOUND_DIR)
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--simulate",
        type=int,
        default=0,
        metavar="TICKS",
        help="play one headless session with random taps for at most TICKS ticks, then exit",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = Config(
        seed=args.seed,
        tick_rate=args.tick_rate,
        blocks_wide=args.blocks_wide,
        sound_dir=args.sound_dir,
        screen_size=(args.width, args.height),
    )

    if args.simulate > 0:
        renderer = GridRenderer(Board.from_screen(args.width, args.height, args.blocks_wide))
        ticks, score, outcome = simulate(cfg, max_ticks=args.simulate, renderer=renderer)
        logger.debug("Final frame:\n%s", renderer.to_text())
        print(f"ticks={ticks} score={score} outcome={outcome.value}")
        return

    App(cfg).run()


if __name__ == "__main__":
    main()
