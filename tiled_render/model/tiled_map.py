"""Immutable map snapshot.

``TiledMap`` is the read-only input of the renderer: map geometry, tilesets
and the layer tree in document order. It is produced by a host-side parser
and never mutated while rendering.
"""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tiled_render.errors import TileLookupError
from tiled_render.model.group import Group
from tiled_render.model.object_group import ObjectGroup
from tiled_render.model.tile_layer import TileLayer
from tiled_render.model.tileset import Tile, Tileset
from tiled_render.types import GID
from tiled_render.utils.gid import decode_gid


@dataclass(frozen=True)
class TiledMap:
    """Orthogonal tile map.

    Attributes:
        width: Map width in tiles.
        height: Map height in tiles.
        tile_width: Grid cell width in pixels.
        tile_height: Grid cell height in pixels. Also the row height used to
            clip tall objects against the grid.
        tilesets: Tilesets; their gid ranges must not overlap.
        layers: Top-level tile layers in document order.
        object_groups: Top-level object groups in document order.
        groups: Layer groups in document order.
    """

    width: int
    height: int
    tile_width: int
    tile_height: int
    tilesets: PVector[Tileset] = pvector()
    layers: PVector[TileLayer] = pvector()
    object_groups: PVector[ObjectGroup] = pvector()
    groups: PVector[Group] = pvector()

    def __post_init__(self) -> None:
        for name in ("tilesets", "layers", "object_groups", "groups"):
            object.__setattr__(self, name, pvector(getattr(self, name)))

    @property
    def pixel_size(self) -> tuple[int, int]:
        """Canvas size ``(width, height)`` in pixels."""
        return self.width * self.tile_width, self.height * self.tile_height

    def tile_gid_to_tile(self, gid: GID) -> Tile:
        """Resolve a global tile id to a tile reference.

        Flip flags are ignored. The owning tileset is the one with the
        greatest ``first_gid`` not above ``gid``.

        Raises:
            TileLookupError: If ``gid`` is zero, precedes every tileset, or
                falls past the end of its tileset.
        """
        gid, _ = decode_gid(gid)
        if gid == 0:
            raise TileLookupError("gid 0 does not reference a tile")

        candidates = [ts for ts in self.tilesets if ts.first_gid <= gid]
        if not candidates:
            raise TileLookupError(f"No tileset contains gid {gid}")
        tileset = max(candidates, key=lambda ts: ts.first_gid)

        tile_id = gid - tileset.first_gid
        if not tileset.contains(tile_id):
            raise TileLookupError(
                f"gid {gid} is outside tileset {tileset.name!r} "
                f"(first gid {tileset.first_gid})"
            )
        return Tile(tileset=tileset, id=tile_id)
