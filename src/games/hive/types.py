"""Domain models for Hive: hex geometry, creatures and pieces.

Hexes use cube coordinates (q, r, s) with q + r + s == 0::

    +s ____
      /    \\
     /      \\ +q
     \\      /
      \\____/
     +r
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, model_validator

from src.engine.errors import InvalidHexError
from src.engine.traversal import bfs


class Direction(int, Enum):
    """The six hex directions, clockwise from Up.

    Values index DIRECTION_VECTORS. The order is load-bearing: the slide rule
    treats (i - 1) % 6 and (i + 1) % 6 as the cells either side of direction i.
    """

    UP = 0
    UP_RIGHT = 1
    DOWN_RIGHT = 2
    DOWN = 3
    DOWN_LEFT = 4
    UP_LEFT = 5

    @property
    def vector(self) -> tuple[int, int, int]:
        return DIRECTION_VECTORS[self.value]

    @property
    def opposite(self) -> Direction:
        return Direction((self.value + 3) % 6)


DIRECTION_VECTORS: list[tuple[int, int, int]] = [
    (0, -1, 1),
    (1, -1, 0),
    (1, 0, -1),
    (0, 1, -1),
    (-1, 1, 0),
    (-1, 0, 1),
]


class Hex(BaseModel):
    """An immutable cell of the hex grid in cube coordinates."""

    model_config = ConfigDict(frozen=True, strict=True)

    q: int
    r: int
    s: int

    def __init__(self, q: int, r: int, s: int) -> None:
        super().__init__(q=q, r=r, s=s)

    @model_validator(mode="after")
    def _check_cube_invariant(self) -> Hex:
        if self.q + self.r + self.s != 0:
            raise InvalidHexError(
                f"Invalid hexgrid coordinates ({self.q}, {self.r}, {self.s}): "
                "components must sum to zero"
            )
        return self

    def to_key(self) -> str:
        return f"{self.q},{self.r},{self.s}"

    @staticmethod
    def from_key(key: str) -> Hex:
        parts = key.split(",")
        if len(parts) != 3:
            raise InvalidHexError(f"Hex key must have 3 components: {key!r}")
        try:
            q, r, s = (int(p) for p in parts)
        except ValueError:
            raise InvalidHexError(f"Hex key components must be integers: {key!r}") from None
        return Hex(q, r, s)

    def move(self, direction: Direction) -> Hex:
        dq, dr, ds = direction.vector
        return Hex(self.q + dq, self.r + dr, self.s + ds)

    def adjacent(self) -> list[Hex]:
        """Return the 6 neighbouring hexes, ordered clockwise from Up."""
        return [self.move(direction) for direction in Direction]


def fringe(start: Hex, steps: int, passable: Callable[[Hex], bool]) -> list[Hex]:
    """Return the hexes exactly *steps* moves away from *start*.

    Only hexes for which ``passable`` is true can be entered. A hex reachable in
    fewer steps by another route is not part of the fringe.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    def passable_neighbors(cell: Hex) -> list[Hex]:
        return [n for n in cell.adjacent() if passable(n)]

    return bfs(start, passable_neighbors, steps)[steps]


class Creature(str, Enum):
    QUEEN_BEE = "queen_bee"
    BEETLE = "beetle"
    SPIDER = "spider"
    GRASSHOPPER = "grasshopper"
    SOLDIER_ANT = "soldier_ant"


class Color(str, Enum):
    BLACK = "black"
    WHITE = "white"


class Piece(BaseModel):
    """A creature tile. Pieces have no identity beyond creature and colour."""

    model_config = ConfigDict(frozen=True)

    creature: Creature
    color: Color
