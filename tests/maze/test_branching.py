from __future__ import annotations

from collections import deque

import pytest

from mazeatlas import config
from mazeatlas.errors import GenerationStalledError, InvalidArgumentError
from mazeatlas.maze.coords import Coord
from mazeatlas.maze.generators import BranchingPathGenerator
from mazeatlas.maze.maze import Maze


def _find_tagged(maze: Maze, key: str) -> Coord:
    matches = [tag.cell for tag in maze.get_tags() if key in tag]
    assert len(matches) == 1
    return matches[0]


def _reachable(maze: Maze, start: Coord) -> set[Coord]:
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for neighbor in maze.neighbors(cell):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


@pytest.mark.parametrize("seed", [0, 1, 7, 12345, "crypt"])
def test_generated_maze_is_connected(seed: int | str) -> None:
    maze = BranchingPathGenerator(3, 2, cell_count=15, seed=seed).generate()

    assert maze.cell_count == 15
    start = _find_tagged(maze, config.START_TAG)
    end = _find_tagged(maze, config.END_TAG)
    reachable = _reachable(maze, start)
    assert len(reachable) == 15
    assert end in reachable


def test_start_and_end_are_first_and_last() -> None:
    maze = BranchingPathGenerator(4, 4, cell_count=20, seed=3).generate()
    cells = maze.get_cells()
    assert config.START_TAG in maze.get_tag(cells[0])
    assert config.END_TAG in maze.get_tag(cells[-1])


def test_same_seed_same_maze() -> None:
    first = BranchingPathGenerator(3, 3, cell_count=12, seed=99).generate()
    second = BranchingPathGenerator(3, 3, cell_count=12, seed=99).generate()
    assert first.get_cells() == second.get_cells()
    assert first.get_links() == second.get_links()


def test_repeated_generate_is_stable() -> None:
    generator = BranchingPathGenerator(3, 3, cell_count=12, seed=5)
    assert generator.generate().get_cells() == generator.generate().get_cells()


def test_no_extra_links_gives_a_tree() -> None:
    maze = BranchingPathGenerator(
        3, 3, cell_count=20, extra_link_proportion=0.0, seed=11
    ).generate()
    assert maze.link_count == maze.cell_count - 1


def test_cell_count_shorter_than_path_truncates() -> None:
    # Start and end are at least grid_length apart, so one or two cells
    # can only come from truncating the initial path.
    maze = BranchingPathGenerator(5, 2, cell_count=2, seed=0).generate()
    assert maze.cell_count == 2
    assert maze.link_count == 1


def test_single_cell() -> None:
    maze = BranchingPathGenerator(2, 2, cell_count=1, seed=0).generate()
    assert maze.cell_count == 1
    assert maze.link_count == 0
    (only,) = maze.get_cells()
    tag = maze.get_tag(only)
    assert config.START_TAG in tag
    assert config.END_TAG in tag


def test_single_column_grid_still_generates() -> None:
    maze = BranchingPathGenerator(1, 1, cell_count=6, seed=2).generate()
    assert maze.cell_count == 6
    start = _find_tagged(maze, config.START_TAG)
    assert len(_reachable(maze, start)) == 6


@pytest.mark.parametrize(
    "kwargs",
    [
        {"grid_length": 0, "grid_width": 2, "cell_count": 5},
        {"grid_length": 2, "grid_width": 0, "cell_count": 5},
        {"grid_length": 2, "grid_width": 2, "cell_count": 0},
        {"grid_length": 2, "grid_width": 2, "cell_count": 5, "grid_weights": ()},
        {
            "grid_length": 2,
            "grid_width": 2,
            "cell_count": 5,
            "extra_link_proportion": 1.5,
        },
    ],
)
def test_invalid_configuration_rejected(kwargs: dict) -> None:
    with pytest.raises(InvalidArgumentError):
        BranchingPathGenerator(**kwargs)


def test_configuration_changed_after_construction_is_revalidated() -> None:
    generator = BranchingPathGenerator(2, 2, cell_count=5, seed=0)
    generator.cell_count = -1
    with pytest.raises(InvalidArgumentError):
        generator.generate()


class _StartOnlyBranching(BranchingPathGenerator):
    """Always branches from the first path cell, which walls itself in quickly."""

    @staticmethod
    def _pick_branch_index(rng, path_length: int) -> int:
        return 0


def test_enclosed_branch_cell_raises_stalled(monkeypatch: pytest.MonkeyPatch) -> None:
    # The start cell has at most three free neighbors, so 30 cells never fit.
    monkeypatch.setattr(config, "BRANCH_ATTEMPT_FACTOR", 2)
    generator = _StartOnlyBranching(2, 2, cell_count=30, seed=0)
    with pytest.raises(GenerationStalledError):
        generator.generate()
