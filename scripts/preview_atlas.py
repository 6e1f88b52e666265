#!/usr/bin/env python3
"""Generate a sample atlas and print it as text or save it as an image.

Builds a handful of room-shaped charts, grows a branching maze, applies a
random symmetry and stitches the charts into one global map.

Usage:
    uv run python scripts/preview_atlas.py --seed 7 --cells 12
    uv run python scripts/preview_atlas.py --output atlas.png --scale 4
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from mazeatlas import config
from mazeatlas.atlas import Atlas, MazeAtlasGenerator
from mazeatlas.charts import AutoConnectChartProvider, RawChart, RawMarker, map_to_image
from mazeatlas.content import MarkerMapper
from mazeatlas.maze.generators import BranchingPathGenerator, SymmetryTransformGenerator
from mazeatlas.tile_types import TileTypeID, get_glyph_map

logger = logging.getLogger(__name__)


def _make_room(size: int, inset: int) -> np.ndarray:
    """A solid chart with a rectangular room `inset` tiles in from each edge."""
    tiles = np.full((size, size), TileTypeID.WALL, dtype=np.uint8, order="F")
    tiles[inset : size - inset, inset : size - inset] = TileTypeID.FLOOR
    return tiles


def _make_pillared_room(size: int) -> np.ndarray:
    tiles = _make_room(size, 2)
    tiles[size // 2 - 1 : size // 2 + 1, size // 2 - 1 : size // 2 + 1] = TileTypeID.WALL
    return tiles


def build_sample_charts(size: int) -> tuple[list[RawChart], list[RawChart], list[RawChart]]:
    """Entrance, exit and filler pools of square charts with side `size`."""
    center = (size / 2, size / 2)
    entrance = RawChart(
        _make_room(size, 3),
        [RawMarker(center, (1, 1), category="spawn", preset="player")],
        {"role": "entrance"},
        name="entrance",
    )
    exit_chart = RawChart(
        _make_room(size, 3),
        [RawMarker(center, (1, 1), category="goal", preset="stairs")],
        {"role": "exit"},
        name="exit",
    )
    fillers = [
        RawChart(
            _make_room(size, 2),
            [RawMarker((size / 3, size / 3), (1, 1), category="enemy", preset="rat")],
            name="room",
        ),
        RawChart(
            _make_pillared_room(size),
            [RawMarker((2.5, 2.5), (1, 1), category="loot", preset="chest")],
            name="pillars",
        ),
        RawChart(_make_room(size, size // 2 - 1), name="corridor"),
    ]
    return [entrance], [exit_chart], fillers


def render_text(atlas: Atlas) -> str:
    # Rows are printed top to bottom, so flip y.
    glyphs = get_glyph_map(atlas.global_map).T[::-1]
    return "\n".join("".join(row) for row in glyphs)


def main() -> None:
    parser = argparse.ArgumentParser(description="Preview a generated maze atlas")
    parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED)
    parser.add_argument("--cells", type=int, default=10, help="Number of maze cells")
    parser.add_argument("--grid", type=int, nargs=2, default=(3, 2), metavar=("L", "W"))
    parser.add_argument("--chart-size", type=int, default=12)
    parser.add_argument("--output", type=Path, help="Write a PNG instead of printing")
    parser.add_argument("--scale", type=int, default=4, help="Pixels per tile in PNGs")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    entrances, exits, fillers = build_sample_charts(args.chart_size)
    generator = MazeAtlasGenerator(
        maze_generator=SymmetryTransformGenerator(
            BranchingPathGenerator(args.grid[0], args.grid[1], args.cells)
        ),
        chart_provider=AutoConnectChartProvider(
            entrances, exits, fillers, args.chart_size, args.chart_size
        ),
        seed=args.seed,
    )
    atlas = generator.generate()

    placed: list[str] = []
    MarkerMapper(
        {"player": "@", "stairs": ">", "rat": "r", "chest": "$"},
        lambda glyph, marker, pos: placed.append(f"{glyph} at {pos}"),
        clamp_to_grid=True,
    ).generate_content(atlas)
    for line in placed:
        logger.info("Placed %s", line)

    if args.output is not None:
        map_to_image(atlas.global_map, scale=args.scale).save(args.output)
        logger.info("Wrote %s", args.output)
    else:
        print(render_text(atlas))


if __name__ == "__main__":
    main()
