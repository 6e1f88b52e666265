"""Maze graphs: coordinates, links, the maze container and the weighted search."""

from .coords import Coord
from .link import Link
from .maze import CellTag, Maze, MetaData, Openings, metadata_from_keys
from .shortest_path import find_weighted_path, path_cost

__all__ = [
    "CellTag",
    "Coord",
    "Link",
    "Maze",
    "MetaData",
    "Openings",
    "find_weighted_path",
    "metadata_from_keys",
    "path_cost",
]
