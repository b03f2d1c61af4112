from dataclasses import dataclass
from enum import Enum
import os
from typing import Optional, Tuple

# ----- Window & grid -----
WIDTH, HEIGHT = 480, 800
NUM_BLOCKS_WIDE = 40
# the mouse spawns off the border ring, so a board needs an interior
MIN_BOARD_BLOCKS = 3
SNAKE_CAPACITY = 200

# ----- Timing -----
TICK_RATE = 10
MILLIS_IN_A_SECOND = 1000
MENU_FPS = 30

# Segments directly behind the head never count as a self-collision
SELF_COLLISION_EXEMPT = 5

# ----- Colors -----
BG = (255, 102, 102)
SNAKE = (255, 255, 255)
HEAD = (204, 0, 0)
MOUSE = (255, 255, 51)
TEXT = (255, 255, 255)
BUTTON = (204, 0, 0)
TEXT_SIZE = 30

# ----- Assets -----
SOUND_DIR = os.path.join(os.path.dirname(__file__), "assets")
EAT_SOUND = "get_mouse_sound.ogg"
DEATH_SOUND = "death_sound.ogg"


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)
    LEFT = (-1, 0)

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_rate: int = TICK_RATE
    blocks_wide: int = NUM_BLOCKS_WIDE
    capacity: int = SNAKE_CAPACITY
    sound_dir: str = SOUND_DIR
    eat_sound: str = EAT_SOUND
    death_sound: str = DEATH_SOUND
    screen_size: Tuple[int, int] = (WIDTH, HEIGHT)

    def __post_init__(self):
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        if self.blocks_wide <= 0:
            raise ValueError(f"blocks_wide must be positive, got {self.blocks_wide}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {self.capacity}")

    @property
    def period_ms(self) -> int:
        return MILLIS_IN_A_SECOND // self.tick_rate


CFG = Config()
