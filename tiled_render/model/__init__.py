"""tiled_render.model
=================================

Read-only map model consumed by the renderer.

The model mirrors the parts of a Tiled document the renderer needs: map
geometry, tilesets, tile layers, object groups with their objects, and one
level of layer groups. Every class is a frozen dataclass whose collections are
``pyrsistent`` vectors or maps, so a parsed map can be shared freely between
render calls::

    from tiled_render.model import TiledMap, ObjectGroup, MapObject

"""

from .group import Group
from .map_object import MapObject
from .object_group import ObjectGroup, clamp_opacity
from .tile_layer import TileLayer
from .tiled_map import TiledMap
from .tileset import Tile, Tileset

__all__ = [
    "Group",
    "MapObject",
    "ObjectGroup",
    "TileLayer",
    "TiledMap",
    "Tile",
    "Tileset",
    "clamp_opacity",
]
