"""Tile grid layer component."""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tiled_render.model.object_group import clamp_opacity
from tiled_render.types import GID


@dataclass(frozen=True)
class TileLayer:
    """Fixed grid of tiles.

    Attributes:
        name: Layer name.
        width: Columns.
        height: Rows.
        data: Row-major raw gids (``data[y * width + x]``), flip flags included.
            ``0`` marks an empty cell.
        visible: Invisible layers are never touched by the renderer.
        opacity: Layer opacity, clamped into ``[0, 1]`` on construction.
    """

    name: str = ""
    width: int = 0
    height: int = 0
    data: PVector[GID] = pvector()
    visible: bool = True
    opacity: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "opacity", clamp_opacity(self.opacity))
        object.__setattr__(self, "data", pvector(self.data))
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"Layer {self.name!r} has {len(self.data)} cells, "
                f"expected {self.width}x{self.height}"
            )

    def gid_at(self, x: int, y: int) -> GID:
        """Return the raw gid stored at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Cell ({x}, {y}) outside layer {self.name!r} "
                f"of size {self.width}x{self.height}"
            )
        return self.data[y * self.width + x]
