"""Object layer component."""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tiled_render.model.map_object import MapObject


def clamp_opacity(opacity: float) -> float:
    """Clamp a layer opacity into ``[0, 1]``."""
    return min(max(float(opacity), 0.0), 1.0)


@dataclass(frozen=True)
class ObjectGroup:
    """Ordered collection of free-form objects.

    Attributes:
        name: Layer name.
        objects: Objects in document order. Draw order is decided by the depth
            sorter, document order only breaks ties.
        visible: Invisible groups are never touched by the renderer.
        opacity: Layer opacity, clamped into ``[0, 1]`` on construction.
    """

    name: str = ""
    objects: PVector[MapObject] = pvector()
    visible: bool = True
    opacity: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "opacity", clamp_opacity(self.opacity))
        object.__setattr__(self, "objects", pvector(self.objects))
