"""A maze generator that returns a fixed, hand-authored layout."""

from __future__ import annotations

from collections.abc import Iterable

from mazeatlas.errors import InvalidArgumentError
from mazeatlas.maze.coords import Coord
from mazeatlas.maze.link import Link
from mazeatlas.maze.maze import CellTag, Maze

from .base import MazeGenerator


class StaticMazeGenerator(MazeGenerator):
    """Returns the same maze on every call, regardless of seed.

    Useful for hand-built layouts and as the inner generator of a
    SymmetryTransformGenerator, which then supplies the variation.
    """

    def __init__(
        self,
        cells: Iterable[Coord] = (Coord.ZERO,),
        links: Iterable[Link] = (),
        tags: Iterable[CellTag] = (),
    ) -> None:
        super().__init__(seed=None)
        self.cells: list[Coord] = []
        self.links: list[Link] = []
        self.tags: list[CellTag] = []
        self.replace_contents(cells, links, tags)

    def replace_contents(
        self,
        cells: Iterable[Coord],
        links: Iterable[Link],
        tags: Iterable[CellTag] | None = None,
    ) -> None:
        if cells is None:
            raise InvalidArgumentError("cells must not be None.")
        if links is None:
            raise InvalidArgumentError("links must not be None.")
        self.cells = list(cells)
        self.links = list(links)
        self.tags = [tag.deep_copy() for tag in tags] if tags is not None else []

    @classmethod
    def from_maze(cls, maze: Maze) -> StaticMazeGenerator:
        return cls(maze.get_cells(), maze.get_links(), maze.get_tags())

    def generate(self) -> Maze:
        return Maze(self.cells, self.links, self.tags)
