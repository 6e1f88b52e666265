"""Weighted shortest path over a dense integer grid.

This is a special-purpose search used only to seed maze growth, not a general
pathfinder. Stepping into a cell costs that cell's own weight; movement is
4-directional.

A cell is marked visited the first time it is *enqueued*, not when it is
popped. A cell therefore keeps the parent that first discovered it even if a
cheaper route reaches it later. On uniform grids this is exact; on weighted
grids it can miss the optimum, which is acceptable for seeding a random walk
and keeps generated layouts stable across versions.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Sequence

import numpy as np

from mazeatlas.errors import InvalidArgumentError, PathNotFoundError

from .coords import Coord


def find_weighted_path(
    weights: np.ndarray | Sequence[Sequence[int]],
    start: Coord,
    end: Coord,
) -> list[Coord]:
    """Find a cheap path from `start` to `end`, both inclusive.

    Args:
        weights: 2D grid of non-negative entry costs, indexed ``[x, y]``.
        start: Starting cell. Must be inside the grid.
        end: Target cell. Must be inside the grid.

    Returns:
        The cells from `start` to `end` inclusive, each orthogonally adjacent
        to the next.

    Raises:
        InvalidArgumentError: If the grid is not 2D or start/end are out of bounds.
        PathNotFoundError: If the queue empties before reaching `end`.
    """
    grid = np.asarray(weights)
    if grid.ndim != 2:
        raise InvalidArgumentError(f"Weights must be a 2D grid, got shape {grid.shape}.")
    length, width = grid.shape
    if not _in_bounds(start, length, width) or not _in_bounds(end, length, width):
        raise InvalidArgumentError(
            f"Coordinates out of range: start={start}, end={end}, "
            f"grid=({length}, {width})."
        )

    if start == end:
        return [start]

    # The counter breaks cost ties in insertion order, keeping results stable.
    counter = itertools.count()
    queue: list[tuple[int, int, Coord]] = [(0, next(counter), start)]
    parents: dict[Coord, Coord] = {}
    visited: set[Coord] = {start}

    while queue:
        cost, _, current = heapq.heappop(queue)
        if current == end:
            return _recover_path(parents, start, end)

        for neighbor in current.neighbors():
            if neighbor in visited or not _in_bounds(neighbor, length, width):
                continue
            visited.add(neighbor)
            parents[neighbor] = current
            entry_cost = int(grid[neighbor.x, neighbor.y])
            heapq.heappush(queue, (cost + entry_cost, next(counter), neighbor))

    # Grids are fully connected under 4-directional movement.
    raise PathNotFoundError("Internal error. Path-finding algorithm failed.")


def path_cost(weights: np.ndarray | Sequence[Sequence[int]], path: Sequence[Coord]) -> int:
    """Total weight of every cell on `path`, the starting cell included."""
    grid = np.asarray(weights)
    return sum(int(grid[cell.x, cell.y]) for cell in path)


def _in_bounds(coord: Coord, length: int, width: int) -> bool:
    return 0 <= coord.x < length and 0 <= coord.y < width


def _recover_path(parents: dict[Coord, Coord], start: Coord, end: Coord) -> list[Coord]:
    path = [end]
    current = end
    while current != start:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path
