"""Layer group component.

Groups are one level deep: a group holds tile layers and object groups but
no nested groups. The renderer draws a group's tile layers first, then its
object groups.
"""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tiled_render.model.object_group import ObjectGroup
from tiled_render.model.tile_layer import TileLayer


@dataclass(frozen=True)
class Group:
    name: str = ""
    layers: PVector[TileLayer] = pvector()
    object_groups: PVector[ObjectGroup] = pvector()
    visible: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "layers", pvector(self.layers))
        object.__setattr__(self, "object_groups", pvector(self.object_groups))
