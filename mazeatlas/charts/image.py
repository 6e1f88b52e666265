"""Converting chart maps to and from images.

Charts are convenient to author as small black-and-white images: light pixels
are floor, dark pixels are wall. Image rows run top to bottom while map `y`
grows upward, so rows are flipped on the way in and out.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from mazeatlas import config
from mazeatlas.tile_types import TileTypeID, get_gray_map


def map_from_image(
    image: PILImage.Image | str | Path,
    threshold: int = config.IMAGE_FLOOR_THRESHOLD,
) -> np.ndarray:
    """Read a chart map from an image (or a path to one).

    Returns:
        A uint8 array of TileTypeID values with shape (image width, image height).
    """
    if isinstance(image, (str, Path)):
        with PILImage.open(image) as opened:
            gray = np.asarray(opened.convert("L"))
    else:
        gray = np.asarray(image.convert("L"))

    # (rows, cols) top-down -> [x, y] bottom-up
    floor = np.flipud(gray).T >= threshold
    return np.asfortranarray(
        np.where(floor, TileTypeID.FLOOR, TileTypeID.WALL).astype(np.uint8)
    )


def map_to_image(tiles: np.ndarray, scale: int = 1) -> PILImage.Image:
    """Render a map as a grayscale image, `scale` pixels per tile."""
    gray = np.flipud(get_gray_map(tiles).T)
    image = PILImage.fromarray(np.ascontiguousarray(gray))
    if scale != 1:
        image = image.resize(
            (image.width * scale, image.height * scale), PILImage.Resampling.NEAREST
        )
    return image
