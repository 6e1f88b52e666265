from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from mazeatlas.charts.image import map_from_image, map_to_image
from mazeatlas.tile_types import TileTypeID


def _image_with_top_left_pixel_lit() -> PILImage.Image:
    image = PILImage.new("L", (4, 3), color=0)
    image.putpixel((0, 0), 255)
    return image


def test_image_rows_map_to_y_up() -> None:
    tiles = map_from_image(_image_with_top_left_pixel_lit())
    assert tiles.shape == (4, 3)
    assert tiles.dtype == np.uint8
    # Top-left pixel is the chart's top-left tile: x=0, y=width-1.
    assert tiles[0, 2] == TileTypeID.FLOOR
    assert int(tiles.sum()) == 1


def test_threshold() -> None:
    image = PILImage.new("L", (2, 1), color=0)
    image.putpixel((0, 0), 100)
    image.putpixel((1, 0), 200)
    tiles = map_from_image(image, threshold=150)
    assert tiles[0, 0] == TileTypeID.WALL
    assert tiles[1, 0] == TileTypeID.FLOOR


def test_color_images_are_converted() -> None:
    image = PILImage.new("RGB", (2, 2), color=(255, 255, 255))
    assert (map_from_image(image) == TileTypeID.FLOOR).all()


def test_map_to_image_orientation() -> None:
    tiles = np.zeros((4, 3), dtype=np.uint8)
    tiles[0, 2] = TileTypeID.FLOOR
    image = map_to_image(tiles)
    assert image.size == (4, 3)
    assert image.getpixel((0, 0)) == 255
    assert image.getpixel((3, 2)) == 0


def test_map_to_image_scale() -> None:
    tiles = np.ones((4, 3), dtype=np.uint8)
    assert map_to_image(tiles, scale=3).size == (12, 9)


def test_load_from_path(tmp_path: Path) -> None:
    path = tmp_path / "chart.png"
    _image_with_top_left_pixel_lit().save(path)
    tiles = map_from_image(path)
    assert tiles[0, 2] == TileTypeID.FLOOR
    assert np.array_equal(map_from_image(map_to_image(tiles)), tiles)
