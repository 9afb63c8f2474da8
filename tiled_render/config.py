"""Renderer configuration.

``RendererConfig`` groups the knobs of :class:`tiled_render.renderer.Renderer`
that are independent of the map being drawn. Values are plain data so a
config can be shared between renderers and compared in tests.
"""

from dataclasses import dataclass

from tiled_render.types import RGBA, ObjectDrawMode

DEFAULT_BACKGROUND: RGBA = (0, 0, 0, 0)
DEFAULT_OBJECT_DRAW_MODE = ObjectDrawMode.UPPER_BAND


@dataclass(frozen=True)
class RendererConfig:
    """Rendering options.

    Attributes:
        object_draw_mode: How tile objects are composited by the layer walk.
            ``UPPER_BAND`` draws only the part of each object above the tile
            row its footprint rests in; ``FULL`` draws the whole sprite.
        background: RGBA fill of a fresh or cleared canvas.
    """

    object_draw_mode: ObjectDrawMode = DEFAULT_OBJECT_DRAW_MODE
    background: RGBA = DEFAULT_BACKGROUND
