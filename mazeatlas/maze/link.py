"""Undirected links between grid-adjacent maze cells."""

from __future__ import annotations

from collections.abc import Iterator

from mazeatlas.errors import InvalidArgumentError

from .coords import Coord


class Link:
    """A connection (opening) between two horizontally or vertically adjacent cells.

    Links are unordered: ``Link(a, b) == Link(b, a)`` and both hash the same.
    """

    __slots__ = ("_a", "_b")

    def __init__(self, a: Coord, b: Coord) -> None:
        if a.squared_distance(b) != 1:
            raise InvalidArgumentError(
                f"Coordinates must be adjacent (horizontally or vertically) "
                f"in a link: {a} and {b}."
            )
        self._a = a
        self._b = b

    @property
    def a(self) -> Coord:
        return self._a

    @property
    def b(self) -> Coord:
        return self._b

    @property
    def is_horizontal(self) -> bool:
        return self._a.y == self._b.y

    @property
    def is_vertical(self) -> bool:
        return self._a.x == self._b.x

    def connects_to(self, cell: Coord) -> bool:
        return cell == self._a or cell == self._b

    def other(self, cell: Coord) -> Coord:
        """Return the endpoint that is not `cell`."""
        if cell == self._a:
            return self._b
        if cell == self._b:
            return self._a
        raise InvalidArgumentError(f"{self!r} does not connect to {cell}.")

    def __iter__(self) -> Iterator[Coord]:
        yield self._a
        yield self._b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Link):
            return NotImplemented
        return (self._a == other._a and self._b == other._b) or (
            self._a == other._b and self._b == other._a
        )

    def __hash__(self) -> int:
        return hash(frozenset((self._a, self._b)))

    def __repr__(self) -> str:
        return f"Link({self._a}, {self._b})"
