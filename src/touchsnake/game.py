# game.py
from dataclasses import dataclass, field
from enum import Enum
import logging
import random
from typing import Iterator, List, Optional, Tuple

from .board import Board
from .config import CFG, Config, Direction, SELF_COLLISION_EXEMPT
from .controls import DirectionSlot

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class CapacityExceeded(Exception):
    """The snake tried to grow past its segment capacity."""


class Outcome(Enum):
    ALIVE = "alive"
    DEAD = "dead"
    WON = "won"


# ---------- Snake ----------
class SnakeBody:
    """
    Ordered segments, head at index 0 and tail last.

    Growth is deferred: `grow()` only bumps the length, and the next
    `advance()` keeps the old tail in place instead of dropping it.
    """

    def __init__(self, head: Cell, capacity: int):
        self.segments: List[Cell] = [head]
        self.capacity = capacity
        self.length = 1

    @classmethod
    def from_cells(cls, cells: List[Cell], capacity: int) -> "SnakeBody":
        if not cells or len(cells) > capacity:
            raise ValueError(f"need 1..{capacity} cells, got {len(cells)}")
        body = cls(cells[0], capacity)
        body.segments = list(cells)
        body.length = len(cells)
        return body

    @property
    def head(self) -> Cell:
        return self.segments[0]

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.segments[:self.length])

    def __getitem__(self, i: int) -> Cell:
        return self.segments[i]

    def grow(self) -> None:
        if self.length >= self.capacity:
            raise CapacityExceeded(f"snake is already {self.length} segments long")
        self.length += 1

    def advance(self, direction: Direction) -> None:
        # every segment takes the place of the one in front of it
        hx, hy = self.segments[0]
        dx, dy = direction.value
        self.segments.insert(0, (hx + dx, hy + dy))
        del self.segments[self.length:]


# ---------- Target ----------
def spawn_mouse(board: Board, rng: random.Random) -> Cell:
    """Random cell off the outer border. The snake may be sitting on it."""
    return (rng.randrange(1, board.width_blocks - 1),
            rng.randrange(1, board.height_blocks - 1))


# ---------- State ----------
@dataclass
class GameState:
    board: Board
    body: SnakeBody
    mouse: Cell
    score: int = 0
    direction: DirectionSlot = field(default_factory=DirectionSlot)
    outcome: Outcome = Outcome.ALIVE


def new_game_state(board: Board, cfg: Config = CFG,
                   rng: Optional[random.Random] = None) -> GameState:
    rng = rng or random.Random(cfg.seed)
    state = GameState(
        board=board,
        body=SnakeBody(board.center, cfg.capacity),
        mouse=spawn_mouse(board, rng),
    )
    logger.info("New session on a %dx%d board", board.width_blocks, board.height_blocks)
    return state


# ---------- Update ----------
def eat_mouse(state: GameState, rng: random.Random, audio) -> None:
    state.body.grow()
    state.mouse = spawn_mouse(state.board, rng)
    state.score += 1
    audio.play_eat_sound()
    logger.debug("Ate a mouse, score=%d length=%d", state.score, len(state.body))


def detect_death(state: GameState) -> bool:
    hx, hy = state.body.head
    if not state.board.in_bounds(hx, hy):
        return True
    body = state.body
    for i in range(SELF_COLLISION_EXEMPT, len(body)):
        if body[i] == body.head:
            return True
    return False


def step_game(state: GameState, rng: random.Random, audio) -> Outcome:
    """
    Advance the session by one tick and return its outcome.

    The mouse is checked before moving, so the growth from an eat shows up
    as the old tail staying put during this same move. Once the session has
    ended further calls change nothing.
    """
    if state.outcome is not Outcome.ALIVE:
        return state.outcome

    if state.body.head == state.mouse:
        try:
            eat_mouse(state, rng, audio)
        except CapacityExceeded:
            state.score += 1
            audio.play_eat_sound()
            state.outcome = Outcome.WON
            logger.info("Snake filled its capacity, session won with score %d", state.score)
            return state.outcome

    # Read the pending direction once per tick
    state.body.advance(state.direction.load())

    if detect_death(state):
        audio.play_death_sound()
        state.outcome = Outcome.DEAD
        logger.info("Snake died at %s with score %d", state.body.head, state.score)
    return state.outcome
