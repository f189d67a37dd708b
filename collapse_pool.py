"""Tile pool: the pre-shuffled sequence of tiles fed into the staging row"""
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from collapse_grid import BOMB, COLORS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tile:
    index: int  # stable handle; a presentation layer keys its visuals on this
    code: int


class TilePool:
    def __init__(self, size: int, n_colors: int = 3, bomb_chance: float = 1 / 300,
                 seed: Optional[int] = None):
        self.rng = random.Random(seed)
        colors = COLORS[:n_colors]
        self.tiles: List[Tile] = []
        for i in range(size):
            if self.rng.random() < bomb_chance:
                code = BOMB
            else:
                code = self.rng.choice(colors)
            self.tiles.append(Tile(i, code))
        self.order = list(range(size))
        self.rng.shuffle(self.order)
        self.cursor = 0
        logger.debug("pool of %d tiles, %d bombs", size, self.bombs)

    @property
    def bombs(self) -> int:
        return sum(1 for t in self.tiles if t.code == BOMB)

    @property
    def remaining(self) -> int:
        return len(self.order) - self.cursor

    def next_tile(self) -> Optional[Tile]:
        if self.cursor >= len(self.order):
            return None
        tile = self.tiles[self.order[self.cursor]]
        self.cursor += 1
        return tile

    def reset(self):
        """Rewind and reshuffle for a new session."""
        self.rng.shuffle(self.order)
        self.cursor = 0

    def __len__(self):
        return len(self.tiles)
