"""Tile object placed freely on an object group.

Coordinates are in map pixels. As in Tiled, the ``y`` of a tile object is the
*bottom* edge of its footprint and ``x`` its left edge, so the sprite occupies
``[x, x + width) x [y - height, y)`` before rotation.
"""

from dataclasses import dataclass

from tiled_render.types import GID


@dataclass(frozen=True)
class MapObject:
    """Free-form object.

    Attributes:
        id: Object id, unique within the map.
        x: Left edge of the footprint.
        y: Bottom edge of the footprint.
        width: Declared width; the sprite is resized to it.
        height: Declared height; the sprite is resized to it.
        rotation: Clockwise rotation in degrees.
        gid: Raw global tile id including flip flags. ``0`` means the object
            has no sprite (rectangles, points, polygons) and is never drawn.
        visible: Hidden objects are skipped before depth sorting.
        name: Optional label.
    """

    id: int
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0
    rotation: float = 0.0
    gid: GID = 0
    visible: bool = True
    name: str = ""
