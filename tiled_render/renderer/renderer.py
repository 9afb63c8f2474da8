"""Map renderer: owns the canvas and walks the layer tree.

Groups are drawn in document order; within a group every visible tile layer
is drawn before any object group. Hidden groups, layers and object groups are
skipped without being touched. The first ``TileLookupError`` aborts the walk
and propagates to the caller, leaving what was already drawn on ``result``.
"""

import logging

from typing import Optional

from PIL import Image

from tiled_render.config import RendererConfig
from tiled_render.model import Group, MapObject, ObjectGroup, TiledMap
from tiled_render.renderer.objects import render_object, render_object_group
from tiled_render.renderer.provider import ImageProvider, TilesetImageProvider
from tiled_render.renderer.tiles import render_tile_layer
from tiled_render.types import ObjectDrawMode

logger = logging.getLogger(__name__)


class Renderer:
    tiled_map: TiledMap
    provider: ImageProvider
    config: RendererConfig
    result: Image.Image

    def __init__(
        self,
        tiled_map: TiledMap,
        provider: Optional[ImageProvider] = None,
        config: Optional[RendererConfig] = None,
    ):
        self.tiled_map = tiled_map
        self.provider = provider or TilesetImageProvider()
        self.config = config or RendererConfig()
        self.result = Image.new("RGBA", tiled_map.pixel_size, self.config.background)

    def clear(self) -> None:
        """Reset the canvas to the background colour."""
        self.result.paste(self.config.background, (0, 0, *self.result.size))

    # -------- Groups --------

    def render_visible_groups(self) -> None:
        """Render every visible group in document order."""
        for group in self.tiled_map.groups:
            if not group.visible:
                logger.debug("Skipping hidden group %r", group.name)
                continue
            self._render_group(group)

    def render_group(self, group_idx: int) -> None:
        """Render a single group regardless of its visibility flag."""
        self._render_group(self.tiled_map.groups[group_idx])

    def render_group_object_group(self, group_idx: int, object_group_idx: int) -> None:
        """Render one object group of one group."""
        group = self.tiled_map.groups[group_idx]
        self._render_object_group(group.object_groups[object_group_idx])

    def _render_group(self, group: Group) -> None:
        for layer in group.layers:
            if layer.visible:
                render_tile_layer(self.result, self.tiled_map, layer, self.provider)
        for object_group in group.object_groups:
            if object_group.visible:
                self._render_object_group(object_group)

    # -------- Top-level layers --------

    def render_visible_layers(self) -> None:
        """Render every visible top-level tile layer."""
        for layer in self.tiled_map.layers:
            if layer.visible:
                render_tile_layer(self.result, self.tiled_map, layer, self.provider)

    def render_layer(self, layer_idx: int) -> None:
        """Render a single top-level tile layer."""
        layer = self.tiled_map.layers[layer_idx]
        render_tile_layer(self.result, self.tiled_map, layer, self.provider)

    def render_visible_object_groups(self) -> None:
        """Render every visible top-level object group."""
        for object_group in self.tiled_map.object_groups:
            if object_group.visible:
                self._render_object_group(object_group)

    def render_object_group(self, object_group_idx: int) -> None:
        """Render a single top-level object group."""
        self._render_object_group(self.tiled_map.object_groups[object_group_idx])

    def render_visible_layers_and_object_groups(self) -> None:
        """
        Render all visible top-level tile layers, then all visible top-level
        object groups. Document interleaving between the two kinds is not
        preserved; put layers into groups and use ``render_visible_groups``
        when it matters.
        """
        self.render_visible_layers()
        self.render_visible_object_groups()

    def _render_object_group(self, object_group: ObjectGroup) -> None:
        render_object_group(
            self.result,
            self.tiled_map,
            object_group,
            self.provider,
            self.config.object_draw_mode,
        )

    # -------- Single objects --------

    def render_object(
        self,
        object_group: ObjectGroup,
        obj: MapObject,
        mode: Optional[ObjectDrawMode] = None,
    ) -> None:
        """Render one object with ``mode`` (defaults to the configured mode)."""
        render_object(
            self.result,
            self.tiled_map,
            object_group,
            obj,
            self.provider,
            mode or self.config.object_draw_mode,
        )
