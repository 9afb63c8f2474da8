"""Rendering subpackage.

Turns an immutable :class:`tiled_render.model.TiledMap` into a Pillow RGBA
image. The pipeline for tile objects is:

* Depth sorting of each object group (``y`` then ``x``, stable).
* Per-object transform: gid flips, nearest-neighbour resize to the declared
  size, rotation about the centre with canvas expansion.
* Placement, either the whole sprite or only its upper band above the tile
  row the object stands in.
* Alpha compositing with layer opacity, clipped to the canvas.

See :mod:`tiled_render.renderer.renderer` for the layer walk and
:mod:`tiled_render.renderer.objects` for the per-object pipeline.
"""

from .renderer import Renderer

__all__ = ["Renderer"]
