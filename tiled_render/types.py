"""Common type aliases and enumerations.

``GID`` values are raw Tiled global tile ids as they appear in layer data and
on tile objects, flip flags included. ``ObjectDrawMode`` selects how the
renderer composites tile objects (see :mod:`tiled_render.renderer.objects`).
"""

from enum import StrEnum, auto
from typing import Tuple

GID = int
TileID = int

RGBA = Tuple[int, int, int, int]


class ObjectDrawMode(StrEnum):
    """Compositing strategy for tile objects."""

    FULL = auto()
    UPPER_BAND = auto()
