"""Tile object rendering.

One object is drawn by resolving its gid to a sprite, transforming the sprite
(flip, resize, rotate) and compositing it at its full or upper-band
placement. An object group is drawn by filtering out hidden and sprite-less
objects, sorting the rest back to front and drawing them one by one.

Lookup failures are not recovered: the first unresolvable gid aborts the
group with ``TileLookupError`` and objects already drawn stay on the canvas.
"""

import logging

from typing import List

from PIL import Image

from tiled_render.model import MapObject, ObjectGroup, TiledMap
from tiled_render.renderer.compositor import composite
from tiled_render.renderer.placement import (
    Placement,
    full_placement,
    upper_band_placement,
)
from tiled_render.renderer.provider import ImageProvider
from tiled_render.renderer.sorting import sort_objects
from tiled_render.renderer.transform import transform_object
from tiled_render.types import ObjectDrawMode
from tiled_render.utils.gid import decode_gid

logger = logging.getLogger(__name__)


def is_drawable(obj: MapObject) -> bool:
    """Only visible tile objects (non-zero gid) reach the compositor."""
    return obj.visible and decode_gid(obj.gid)[0] != 0


def drawable_objects(group: ObjectGroup) -> List[MapObject]:
    """Visible tile objects of ``group`` in draw order."""
    return sort_objects(obj for obj in group.objects if is_drawable(obj))


def object_image(
    tiled_map: TiledMap, obj: MapObject, provider: ImageProvider
) -> Image.Image:
    """Resolve and transform the sprite of ``obj``.

    Raises:
        TileLookupError: If the object's gid cannot be resolved.
    """
    gid, flip = decode_gid(obj.gid)
    sprite = provider.resolve(tiled_map.tile_gid_to_tile(gid))
    return transform_object(obj, sprite, flip)


def object_placement(
    tiled_map: TiledMap, obj: MapObject, image: Image.Image, mode: ObjectDrawMode
) -> Placement:
    if mode == ObjectDrawMode.UPPER_BAND:
        return upper_band_placement(obj, image, tiled_map.tile_height)
    return full_placement(obj, image)


def render_object(
    canvas: Image.Image,
    tiled_map: TiledMap,
    group: ObjectGroup,
    obj: MapObject,
    provider: ImageProvider,
    mode: ObjectDrawMode = ObjectDrawMode.FULL,
) -> None:
    """Composite a single object of ``group`` onto ``canvas``."""
    if not is_drawable(obj):
        logger.debug("Skipping object %d (hidden or without tile)", obj.id)
        return
    image = object_image(tiled_map, obj, provider)
    composite(
        canvas,
        image,
        object_placement(tiled_map, obj, image, mode),
        group.opacity,
    )


def render_full(
    canvas: Image.Image,
    tiled_map: TiledMap,
    group: ObjectGroup,
    obj: MapObject,
    provider: ImageProvider,
) -> None:
    """Draw the whole transformed sprite of ``obj``."""
    render_object(canvas, tiled_map, group, obj, provider, ObjectDrawMode.FULL)


def render_upper_band(
    canvas: Image.Image,
    tiled_map: TiledMap,
    group: ObjectGroup,
    obj: MapObject,
    provider: ImageProvider,
) -> None:
    """Draw only the part of ``obj`` above the tile row its footprint rests in."""
    render_object(canvas, tiled_map, group, obj, provider, ObjectDrawMode.UPPER_BAND)


def render_object_group(
    canvas: Image.Image,
    tiled_map: TiledMap,
    group: ObjectGroup,
    provider: ImageProvider,
    mode: ObjectDrawMode = ObjectDrawMode.UPPER_BAND,
) -> None:
    """Draw the visible tile objects of ``group`` back to front."""
    if not group.visible:
        logger.debug("Skipping hidden object group %r", group.name)
        return
    for obj in drawable_objects(group):
        render_object(canvas, tiled_map, group, obj, provider, mode)
