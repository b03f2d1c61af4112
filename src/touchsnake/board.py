from dataclasses import dataclass
from typing import Tuple

from .config import MIN_BOARD_BLOCKS, NUM_BLOCKS_WIDE


@dataclass(frozen=True)
class Board:
    """Playable area measured in blocks; fixed for the life of a session."""
    width_blocks: int
    height_blocks: int
    block_size: int

    def __post_init__(self):
        if self.width_blocks < MIN_BOARD_BLOCKS or self.height_blocks < MIN_BOARD_BLOCKS:
            raise ValueError(
                f"board must be at least {MIN_BOARD_BLOCKS}x{MIN_BOARD_BLOCKS} blocks, got "
                f"{self.width_blocks}x{self.height_blocks}"
            )
        if self.block_size <= 0:
            raise ValueError(f"block_size must be positive, got {self.block_size}")

    @classmethod
    def from_screen(cls, width_px: int, height_px: int,
                    blocks_wide: int = NUM_BLOCKS_WIDE) -> "Board":
        """
        Fit `blocks_wide` square blocks across the screen; the height in
        blocks is however many of those fit vertically.
        """
        block = width_px // blocks_wide
        if block <= 0:
            raise ValueError(
                f"screen {width_px}px wide cannot hold {blocks_wide} blocks"
            )
        return cls(blocks_wide, height_px // block, block)

    @property
    def center(self) -> Tuple[int, int]:
        return (self.width_blocks // 2, self.height_blocks // 2)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width_blocks and 0 <= y < self.height_blocks

    def to_pixels(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Grid cell -> (left, top, width, height) in screen pixels."""
        return (x * self.block_size, y * self.block_size,
                self.block_size, self.block_size)
