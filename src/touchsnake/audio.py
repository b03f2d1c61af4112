# audio.py
import logging
import os
from typing import Optional

import pygame  # type: ignore

from .config import CFG, Config

logger = logging.getLogger(__name__)


def load_sound(path: str) -> Optional[pygame.mixer.Sound]:
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError) as e:
        logger.warning("Could not load sound %s: %s", path, e)
        return None


class SoundCues:
    """
    Eat and death sounds, loaded once. A sound that fails to load (or a
    machine with no audio device) leaves that cue silent.
    """

    def __init__(self, cfg: Config = CFG):
        self.eat: Optional[pygame.mixer.Sound] = None
        self.death: Optional[pygame.mixer.Sound] = None
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio unavailable, playing without sound: %s", e)
            return
        self.eat = load_sound(os.path.join(cfg.sound_dir, cfg.eat_sound))
        self.death = load_sound(os.path.join(cfg.sound_dir, cfg.death_sound))

    def play_eat_sound(self) -> None:
        if self.eat is not None:
            self.eat.play()

    def play_death_sound(self) -> None:
        if self.death is not None:
            self.death.play()


class SilentCues:
    def play_eat_sound(self) -> None:
        pass

    def play_death_sound(self) -> None:
        pass
