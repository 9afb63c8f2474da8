"""Tilesets and tile references.

A :class:`Tileset` owns a contiguous range of global tile ids starting at
``first_gid``. Its tiles come either from a single sheet image cut into a
grid (``image``) or, for image-collection tilesets, from one image per tile
(``images``). Images are decoded by the host; nothing here touches the disk.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image
from pyrsistent import pmap
from pyrsistent.typing import PMap

from tiled_render.types import GID, TileID

# (left, top, right, bottom) in sheet pixels, as used by ``Image.crop``
Box = Tuple[int, int, int, int]


@dataclass(frozen=True, eq=False)
class Tileset:
    """Tile source.

    Compared and hashed by identity so it can key provider caches without
    hashing image data.

    Attributes:
        first_gid: Global id of local tile ``0``.
        name: Tileset name.
        tile_width: Width of one tile in the sheet.
        tile_height: Height of one tile in the sheet.
        tile_count: Number of tiles in the sheet.
        columns: Tiles per sheet row.
        spacing: Pixels between neighbouring tiles.
        margin: Pixels around the outer edge of the sheet.
        image: Decoded sheet, ``None`` for image-collection tilesets.
        images: Per-tile images of an image-collection tileset.
    """

    first_gid: GID
    name: str = ""
    tile_width: int = 0
    tile_height: int = 0
    tile_count: int = 0
    columns: int = 0
    spacing: int = 0
    margin: int = 0
    image: Optional[Image.Image] = None
    images: PMap[TileID, Image.Image] = pmap()

    def __post_init__(self) -> None:
        object.__setattr__(self, "images", pmap(self.images))

    @property
    def is_collection(self) -> bool:
        return len(self.images) > 0

    def contains(self, tile_id: TileID) -> bool:
        """Return True if ``tile_id`` is a local id of this tileset."""
        if self.is_collection:
            return tile_id in self.images
        return 0 <= tile_id < self.tile_count

    def tile_box(self, tile_id: TileID) -> Box:
        """Crop box of ``tile_id`` inside the sheet image.

        Raises:
            ValueError: If the tileset has no columns to index into.
        """
        if self.columns <= 0:
            raise ValueError(f"Tileset {self.name!r} has no columns")
        col = tile_id % self.columns
        row = tile_id // self.columns
        left = self.margin + col * (self.tile_width + self.spacing)
        top = self.margin + row * (self.tile_height + self.spacing)
        return (left, top, left + self.tile_width, top + self.tile_height)


@dataclass(frozen=True)
class Tile:
    """Reference to one tile of a tileset (the provider's lookup key)."""

    tileset: Tileset
    id: TileID

    @property
    def gid(self) -> GID:
        return self.tileset.first_gid + self.id
