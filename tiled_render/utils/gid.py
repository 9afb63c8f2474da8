"""Global tile id (gid) decoding.

Tiled stores three orientation flags in the top bits of every gid written to
tile layer data or to a tile object. The remaining bits are the gid proper,
which indexes into the map's tilesets.
"""

from dataclasses import dataclass
from typing import Tuple

from tiled_render.types import GID

FLIPPED_HORIZONTALLY_FLAG = 0x80000000
FLIPPED_VERTICALLY_FLAG = 0x40000000
FLIPPED_DIAGONALLY_FLAG = 0x20000000

FLIP_FLAGS_MASK = (
    FLIPPED_HORIZONTALLY_FLAG | FLIPPED_VERTICALLY_FLAG | FLIPPED_DIAGONALLY_FLAG
)


@dataclass(frozen=True)
class Flip:
    """Orientation flags decoded from a gid.

    Attributes:
        horizontal: Mirror left/right.
        vertical: Mirror top/bottom.
        diagonal: Swap x and y, applied before the other two.
    """

    horizontal: bool = False
    vertical: bool = False
    diagonal: bool = False

    @property
    def any(self) -> bool:
        return self.horizontal or self.vertical or self.diagonal


NO_FLIP = Flip()


def decode_gid(raw: GID) -> Tuple[GID, Flip]:
    """Split a raw gid into the bare gid and its flip flags."""
    flip = Flip(
        horizontal=bool(raw & FLIPPED_HORIZONTALLY_FLAG),
        vertical=bool(raw & FLIPPED_VERTICALLY_FLAG),
        diagonal=bool(raw & FLIPPED_DIAGONALLY_FLAG),
    )
    return raw & ~FLIP_FLAGS_MASK, flip


def encode_gid(gid: GID, flip: Flip = NO_FLIP) -> GID:
    """Inverse of :func:`decode_gid`."""
    raw = gid & ~FLIP_FLAGS_MASK
    if flip.horizontal:
        raw |= FLIPPED_HORIZONTALLY_FLAG
    if flip.vertical:
        raw |= FLIPPED_VERTICALLY_FLAG
    if flip.diagonal:
        raw |= FLIPPED_DIAGONALLY_FLAG
    return raw
