"""Destination rectangles for tile objects.

A tile object's sprite is anchored at its bottom-left corner ``(x, y)``. The
full placement puts the sprite's top-left at ``(x, y - height)``.

The upper-band placement keeps only the rows of the sprite that lie above the
top of the tile row containing the object's bottom edge::

    row_top    = floor(y / tile_height) * tile_height
    left_top   = y - height
    band       = row_top - left_top

Drawing just that band lets tiles of the object's own row, rendered
afterwards or on a later layer, cover the object's lower part. An object whose
band is at least its height is drawn whole; one whose band is zero or negative
is not drawn at all. Objects taller than two rows still get a single band that
spans every row above the bottom one.
"""

import math

from dataclasses import dataclass

from PIL import Image

from tiled_render.model import MapObject


@dataclass(frozen=True)
class Placement:
    """Canvas rectangle receiving the top-left ``width x height`` source pixels.

    Attributes:
        x: Left edge on the canvas (may be negative).
        y: Top edge on the canvas (may be negative).
        width: Columns taken from the source image.
        height: Rows taken from the source image.
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


def object_top(obj: MapObject) -> float:
    """Top edge of the object's footprint in canvas space."""
    return obj.y - obj.height


def upper_band_height(y: float, height: float, tile_height: int) -> float:
    """Height of the part of a footprint above the tile row it rests in."""
    if tile_height <= 0:
        raise ValueError(f"Tile height must be positive, got {tile_height}")
    row_top = math.floor(y / tile_height) * tile_height
    return row_top - (y - height)


def full_placement(obj: MapObject, image: Image.Image) -> Placement:
    """Place the whole transformed image at the object's top-left corner."""
    return Placement(
        x=int(obj.x),
        y=int(object_top(obj)),
        width=image.width,
        height=image.height,
    )


def upper_band_placement(
    obj: MapObject, image: Image.Image, tile_height: int
) -> Placement:
    """Place only the rows of ``image`` above the object's bottom tile row."""
    band = upper_band_height(obj.y, obj.height, tile_height)
    full = full_placement(obj, image)
    if band >= obj.height:
        return full
    if band <= 0:
        return Placement(x=full.x, y=full.y, width=full.width, height=0)
    return Placement(
        x=full.x,
        y=full.y,
        width=full.width,
        height=min(int(band), image.height),
    )
