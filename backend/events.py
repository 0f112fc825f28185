# backend/events.py

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Compass directions with their (dx, dy) step. North is the row above."""
    N = (0, -1)
    S = (0, 1)
    E = (1, 0)
    W = (-1, 0)
    NE = (1, -1)
    NW = (-1, -1)
    SE = (1, 1)
    SW = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class Activate:
    pass


@dataclass(frozen=True)
class Press:
    """Pointer press at (x, y) on the render surface, not board coordinates."""
    x: int
    y: int
