"""The maze graph: cells on an integer grid, their openings, and per-cell tags.

A maze is an immutable snapshot. Openings are derived from the links at
construction time and never stored independently of them. Tag metadata is
copied on the way in and on the way out, so nothing handed to or returned by
a maze can be used to mutate it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import IntFlag

from mazeatlas.errors import CellNotFoundError, InvalidArgumentError

from .coords import Coord
from .link import Link

# Ordered, key-unique string map attached to cells, charts and markers.
type MetaData = dict[str, str]


def metadata_from_keys(*keys: str) -> MetaData:
    """Build metadata where each key maps to the empty string."""
    return dict.fromkeys(keys, "")


class Openings(IntFlag):
    """The open sides of a single cell, packed into four bits."""

    NONE = 0
    LEFT = 1
    UP = 2
    RIGHT = 4
    DOWN = 8

    def opposite(self) -> Openings:
        return _OPPOSITES[self]

    @classmethod
    def from_delta(cls, delta: Coord) -> Openings:
        """The side of a cell facing the neighbor at `cell + delta`."""
        try:
            return _DELTA_TO_OPENING[delta]
        except KeyError:
            raise InvalidArgumentError(f"{delta} is not a unit direction.") from None


_OPPOSITES = {
    Openings.LEFT: Openings.RIGHT,
    Openings.RIGHT: Openings.LEFT,
    Openings.UP: Openings.DOWN,
    Openings.DOWN: Openings.UP,
}

_DELTA_TO_OPENING = {
    Coord(-1, 0): Openings.LEFT,
    Coord(1, 0): Openings.RIGHT,
    Coord(0, 1): Openings.UP,
    Coord(0, -1): Openings.DOWN,
}


@dataclass(frozen=True)
class CellTag:
    """Metadata attached to a single maze cell.

    The metadata is copied on construction so the caller's dict can't be used
    to modify the tag afterwards.
    """

    cell: Coord
    metadata: MetaData = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.metadata is None:
            raise InvalidArgumentError("CellTag metadata must not be None.")
        object.__setattr__(self, "metadata", dict(self.metadata))

    def __hash__(self) -> int:
        return hash(self.cell)

    @classmethod
    def from_keys(cls, cell: Coord, *keys: str) -> CellTag:
        return cls(cell, metadata_from_keys(*keys))

    def deep_copy(self) -> CellTag:
        return CellTag(self.cell, self.metadata)

    def keys(self) -> list[str]:
        return list(self.metadata)

    def __contains__(self, key: str) -> bool:
        return key in self.metadata

    def __len__(self) -> int:
        return len(self.metadata)


class Maze:
    """A coordinate-addressed graph of cells with 4-directional openings.

    Args:
        cells: Coordinates of every cell. Must be non-empty and distinct.
        links: Connections to open between cells. May be empty. Every endpoint
            must be one of `cells`.
        tags: Optional metadata per cell. At most one tag per cell, and every
            tagged cell must be one of `cells`.

    Raises:
        InvalidArgumentError: If any of the constraints above is violated.
    """

    def __init__(
        self,
        cells: Iterable[Coord],
        links: Iterable[Link],
        tags: Iterable[CellTag] | Mapping[Coord, MetaData] = (),
    ) -> None:
        if cells is None:
            raise InvalidArgumentError("cells must not be None.")
        if links is None:
            raise InvalidArgumentError("links must not be None.")
        if tags is None:
            raise InvalidArgumentError("tags must not be None.")

        self._cells: tuple[Coord, ...] = tuple(cells)
        if not self._cells:
            raise InvalidArgumentError("Must have at least one cell to build a maze.")

        self._openings: dict[Coord, Openings] = dict.fromkeys(
            self._cells, Openings.NONE
        )
        if len(self._openings) != len(self._cells):
            raise InvalidArgumentError("Maze cells must be distinct.")

        self._links: tuple[Link, ...] = tuple(links)
        for link in self._links:
            if link.a not in self._openings or link.b not in self._openings:
                raise InvalidArgumentError(f"{link!r} references a cell not in the maze.")
            # Opening on A's side faces B, and vice versa.
            opening = Openings.from_delta(link.b - link.a)
            self._openings[link.a] |= opening
            self._openings[link.b] |= opening.opposite()

        if isinstance(tags, Mapping):
            tags = [CellTag(cell, metadata) for cell, metadata in tags.items()]
        self._tags: dict[Coord, CellTag] = {}
        for tag in tags:
            if tag.cell not in self._openings:
                raise InvalidArgumentError(
                    f"CellTag given for cell not in maze: {tag.cell}."
                )
            if tag.cell in self._tags:
                raise InvalidArgumentError(f"Duplicate CellTag for cell {tag.cell}.")
            self._tags[tag.cell] = tag.deep_copy()

    # -------------------------------------------------------------------------
    # Sizes
    # -------------------------------------------------------------------------

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    @property
    def link_count(self) -> int:
        return len(self._links)

    @property
    def tag_count(self) -> int:
        return len(self._tags)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._openings

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def get_cells(self) -> list[Coord]:
        """Coordinates of all the cells, in construction order."""
        return list(self._cells)

    def get_links(self) -> list[Link]:
        return list(self._links)

    def get_tags(self) -> list[CellTag]:
        """Deep copies of every tag, in construction order."""
        return [tag.deep_copy() for tag in self._tags.values()]

    def bounds(self) -> tuple[Coord, Coord]:
        """The (min, max) corners of the cells' bounding box, inclusive."""
        xs = [cell.x for cell in self._cells]
        ys = [cell.y for cell in self._cells]
        return Coord(min(xs), min(ys)), Coord(max(xs), max(ys))

    # -------------------------------------------------------------------------
    # Tags
    # -------------------------------------------------------------------------

    def has_tag(self, cell: Coord) -> bool:
        self._raise_if_missing(cell)
        return cell in self._tags

    def get_tag(self, cell: Coord) -> CellTag:
        """Return a copy of the cell's tag. Call has_tag() first to check."""
        self._raise_if_missing(cell)
        tag = self._tags.get(cell)
        if tag is None:
            raise CellNotFoundError(f"Cell {cell} does not have a tag.")
        return tag.deep_copy()

    # -------------------------------------------------------------------------
    # Openings
    # -------------------------------------------------------------------------

    def openings(self, cell: Coord) -> Openings:
        self._raise_if_missing(cell)
        return self._openings[cell]

    def is_left_open(self, cell: Coord) -> bool:
        return bool(self.openings(cell) & Openings.LEFT)

    def is_right_open(self, cell: Coord) -> bool:
        return bool(self.openings(cell) & Openings.RIGHT)

    def is_top_open(self, cell: Coord) -> bool:
        return bool(self.openings(cell) & Openings.UP)

    def is_bottom_open(self, cell: Coord) -> bool:
        return bool(self.openings(cell) & Openings.DOWN)

    def neighbors(self, cell: Coord) -> list[Coord]:
        """Cells reachable from `cell` through a single link."""
        openings = self.openings(cell)
        return [
            cell + delta
            for delta, opening in _DELTA_TO_OPENING.items()
            if openings & opening
        ]

    def _raise_if_missing(self, cell: Coord) -> None:
        if cell not in self._openings:
            raise CellNotFoundError(f"Maze does not contain cell {cell}.")

    def __repr__(self) -> str:
        return (
            f"Maze(cells={self.cell_count}, links={self.link_count}, "
            f"tags={self.tag_count})"
        )
