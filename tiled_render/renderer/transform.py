"""Per-object sprite transform.

The sprite of a tile object is oriented by its gid flip flags, resized to the
object's declared size and rotated about its centre, in that order. Resizing
and rotation both use nearest-neighbour sampling to keep pixel art crisp.
Rotation grows the image so no corner is cropped; uncovered pixels are fully
transparent.
"""

from typing import Tuple

from PIL import Image

from tiled_render.model import MapObject
from tiled_render.utils.gid import NO_FLIP, Flip
from tiled_render.utils.image import apply_flip

TRANSPARENT = (0, 0, 0, 0)


def object_size(obj: MapObject) -> Tuple[int, int]:
    """Declared object size in whole pixels, truncated toward zero."""
    return int(obj.width), int(obj.height)


def resize_sprite(sprite: Image.Image, size: Tuple[int, int]) -> Image.Image:
    """
    Nearest-neighbour resize to exactly ``size``. Returns the sprite itself
    when it already has that size and an empty image for a degenerate size.
    """
    width, height = size
    if width <= 0 or height <= 0:
        return Image.new("RGBA", (max(width, 0), max(height, 0)))
    if sprite.size == (width, height):
        return sprite
    return sprite.resize((width, height), Image.Resampling.NEAREST)


def rotate_sprite(sprite: Image.Image, rotation: float) -> Image.Image:
    """
    Rotate clockwise by ``rotation`` degrees about the centre, expanding the
    canvas to fit. Pillow rotates counter-clockwise, hence the negated angle.
    """
    if rotation == 0 or sprite.width == 0 or sprite.height == 0:
        return sprite
    return sprite.rotate(
        -rotation,
        resample=Image.Resampling.NEAREST,
        expand=True,
        fillcolor=TRANSPARENT,
    )


def transform_object(
    obj: MapObject, sprite: Image.Image, flip: Flip = NO_FLIP
) -> Image.Image:
    """Produce the image to composite for ``obj`` from its tile sprite."""
    if sprite.mode != "RGBA":
        sprite = sprite.convert("RGBA")
    if flip.any:
        sprite = apply_flip(sprite, flip)
    sprite = resize_sprite(sprite, object_size(obj))
    return rotate_sprite(sprite, obj.rotation)
