"""Tile layer blitting.

Each non-empty cell of an orthogonal tile layer is drawn with its sprite's
bottom-left corner on the bottom-left corner of the cell, so tiles taller than
the grid extend upward into the row above, as in Tiled.
"""

import logging

from PIL import Image

from tiled_render.model import TiledMap, TileLayer
from tiled_render.renderer.compositor import composite
from tiled_render.renderer.placement import Placement
from tiled_render.renderer.provider import ImageProvider
from tiled_render.utils.gid import decode_gid
from tiled_render.utils.image import apply_flip

logger = logging.getLogger(__name__)


def tile_placement(
    tiled_map: TiledMap, x: int, y: int, sprite: Image.Image
) -> Placement:
    """Canvas rectangle of the sprite drawn in cell ``(x, y)``."""
    return Placement(
        x=x * tiled_map.tile_width,
        y=(y + 1) * tiled_map.tile_height - sprite.height,
        width=sprite.width,
        height=sprite.height,
    )


def render_tile_layer(
    canvas: Image.Image,
    tiled_map: TiledMap,
    layer: TileLayer,
    provider: ImageProvider,
) -> None:
    """Draw every non-empty cell of ``layer`` row by row, left to right.

    Raises:
        TileLookupError: If a cell references a tile that cannot be resolved.
    """
    if not layer.visible:
        logger.debug("Skipping hidden tile layer %r", layer.name)
        return

    for y in range(layer.height):
        for x in range(layer.width):
            gid, flip = decode_gid(layer.gid_at(x, y))
            if gid == 0:
                continue
            sprite = provider.resolve(tiled_map.tile_gid_to_tile(gid))
            if flip.any:
                sprite = apply_flip(sprite, flip)
            composite(
                canvas,
                sprite,
                tile_placement(tiled_map, x, y, sprite),
                layer.opacity,
            )
