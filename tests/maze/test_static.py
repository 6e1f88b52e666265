from __future__ import annotations

import pytest

from mazeatlas.errors import InvalidArgumentError
from mazeatlas.maze.coords import Coord
from mazeatlas.maze.generators import StaticMazeGenerator
from mazeatlas.maze.link import Link
from mazeatlas.maze.maze import CellTag, Maze


def test_default_is_single_cell() -> None:
    maze = StaticMazeGenerator().generate()
    assert maze.get_cells() == [Coord.ZERO]
    assert maze.link_count == 0


def test_from_maze_round_trips(l_shaped_maze: Maze) -> None:
    generator = StaticMazeGenerator.from_maze(l_shaped_maze)
    maze = generator.generate()
    assert maze.get_cells() == l_shaped_maze.get_cells()
    assert set(maze.get_links()) == set(l_shaped_maze.get_links())


def test_seed_is_ignored(l_shaped_maze: Maze) -> None:
    generator = StaticMazeGenerator.from_maze(l_shaped_maze)
    generator.seed = 1
    first = generator.generate()
    generator.seed = 2
    assert first.get_cells() == generator.generate().get_cells()


def test_replace_contents() -> None:
    generator = StaticMazeGenerator()
    a, b = Coord(0, 0), Coord(0, 1)
    generator.replace_contents([a, b], [Link(a, b)], [CellTag.from_keys(b, "end")])
    maze = generator.generate()
    assert maze.cell_count == 2
    assert maze.is_top_open(a)
    assert "end" in maze.get_tag(b)


def test_replace_contents_rejects_none() -> None:
    generator = StaticMazeGenerator()
    with pytest.raises(InvalidArgumentError):
        generator.replace_contents(None, [])  # type: ignore[arg-type]


def test_invalid_contents_fail_on_generate() -> None:
    generator = StaticMazeGenerator([Coord(0, 0)], [Link(Coord(0, 0), Coord(1, 0))])
    with pytest.raises(InvalidArgumentError):
        generator.generate()
