"""Sprite lookup for tile references.

The renderer never decodes images itself; it asks an :class:`ImageProvider`
for the sprite of a :class:`~tiled_render.model.Tile`. The default
:class:`TilesetImageProvider` cuts sprites out of the decoded sheets the host
attached to each tileset and memoizes them.
"""

import logging

from typing import Dict, Protocol

from PIL import Image

from tiled_render.errors import TileLookupError
from tiled_render.model import Tile

logger = logging.getLogger(__name__)


class ImageProvider(Protocol):
    def resolve(self, tile: Tile) -> Image.Image:
        """Return the RGBA sprite of ``tile`` or raise ``TileLookupError``."""
        ...


def load_tile_image(tile: Tile) -> Image.Image:
    """Cut the sprite of ``tile`` out of its tileset.

    Raises:
        TileLookupError: If the tileset has no image for the tile, has no
            columns to index into, or the tile rectangle does not lie inside
            the sheet.
    """
    tileset = tile.tileset
    if not tileset.contains(tile.id):
        raise TileLookupError(f"Tile {tile.id} not found in tileset {tileset.name!r}")

    if tileset.is_collection:
        return tileset.images[tile.id].convert("RGBA")

    if tileset.image is None:
        raise TileLookupError(f"Tileset {tileset.name!r} has no image")
    if tileset.columns <= 0:
        raise TileLookupError(f"Tileset {tileset.name!r} has no columns")

    left, top, right, bottom = tileset.tile_box(tile.id)
    sheet_width, sheet_height = tileset.image.size
    if left < 0 or top < 0 or right > sheet_width or bottom > sheet_height:
        raise TileLookupError(
            f"Tile {tile.id} of tileset {tileset.name!r} lies outside its "
            f"{sheet_width}x{sheet_height} sheet"
        )
    return tileset.image.crop((left, top, right, bottom)).convert("RGBA")


class TilesetImageProvider:
    """Caching provider over in-memory tileset images.

    Sprites are returned shared; callers must copy before mutating.
    """

    cache: Dict[Tile, Image.Image]

    def __init__(self) -> None:
        self.cache = {}

    def resolve(self, tile: Tile) -> Image.Image:
        if tile in self.cache:
            return self.cache[tile]
        logger.debug("Loading sprite for gid %d (%s)", tile.gid, tile.tileset.name)
        sprite = load_tile_image(tile)
        self.cache[tile] = sprite
        return sprite

    def clear(self) -> None:
        self.cache.clear()
