"""Integer grid coordinates used to address maze cells."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from mazeatlas.types import CellCoord


@dataclass(frozen=True, slots=True)
class Coord:
    """An integer 2D vector. `+y` points up, `+x` points right."""

    x: CellCoord
    y: CellCoord

    ZERO: ClassVar[Coord]
    DIRECTIONS: ClassVar[tuple[Coord, ...]]

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Coord:
        return Coord(-self.x, -self.y)

    def __mul__(self, scale: int) -> Coord:
        return Coord(self.x * scale, self.y * scale)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def squared_distance(self, other: Coord) -> int:
        """Squared Euclidean distance. Exactly 1 for grid-adjacent coordinates."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def manhattan_distance(self, other: Coord) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def abs(self) -> Coord:
        return Coord(abs(self.x), abs(self.y))

    @property
    def left(self) -> Coord:
        return Coord(self.x - 1, self.y)

    @property
    def right(self) -> Coord:
        return Coord(self.x + 1, self.y)

    @property
    def up(self) -> Coord:
        return Coord(self.x, self.y + 1)

    @property
    def down(self) -> Coord:
        return Coord(self.x, self.y - 1)

    def neighbors(self) -> tuple[Coord, Coord, Coord, Coord]:
        """The four orthogonal neighbors in the order left, right, up, down."""
        return (self.left, self.right, self.up, self.down)


Coord.ZERO = Coord(0, 0)
Coord.DIRECTIONS = (Coord(0, 1), Coord(1, 0), Coord(0, -1), Coord(-1, 0))
