"""Alpha compositing onto the render canvas.

All drawing goes through :func:`composite`, which blends the top-left
``placement.width x placement.height`` pixels of a source image onto the canvas
with Pillow's "over" operator. Layer opacity below one is applied as a uniform
mask multiplied into the source alpha first. Parts of the placement outside
the canvas are dropped.
"""

from typing import Optional, Tuple

from PIL import Image

from tiled_render.renderer.placement import Placement
from tiled_render.utils.image import apply_alpha_mask, opacity_to_mask

# (left, top, right, bottom)
Box = Tuple[int, int, int, int]


def clip_to_canvas(
    placement: Placement, image: Image.Image, canvas: Image.Image
) -> Optional[Tuple[Tuple[int, int], Box]]:
    """
    Intersect a placement with the source image and the canvas.
    Returns ``(dest, source_box)`` for ``Image.alpha_composite`` or ``None``
    when nothing remains.
    """
    width = min(placement.width, image.width)
    height = min(placement.height, image.height)

    left = max(placement.x, 0)
    top = max(placement.y, 0)
    right = min(placement.x + width, canvas.width)
    bottom = min(placement.y + height, canvas.height)
    if right <= left or bottom <= top:
        return None

    src_left = left - placement.x
    src_top = top - placement.y
    source_box = (src_left, src_top, src_left + right - left, src_top + bottom - top)
    return (left, top), source_box


def composite_masked(
    canvas: Image.Image, image: Image.Image, placement: Placement, mask: int
) -> None:
    """Blend ``image`` over ``canvas`` with its alpha scaled by ``mask / 255``."""
    if mask <= 0 or placement.empty:
        return
    clipped = clip_to_canvas(placement, image, canvas)
    if clipped is None:
        return
    dest, source_box = clipped

    source = image.crop(source_box)
    if source.mode != "RGBA":
        source = source.convert("RGBA")
    if mask < 255:
        source = apply_alpha_mask(source, mask)
    canvas.alpha_composite(source, dest=dest)


def composite(
    canvas: Image.Image,
    image: Image.Image,
    placement: Placement,
    opacity: float = 1.0,
) -> None:
    """Blend ``image`` over ``canvas`` in place honouring layer opacity."""
    composite_masked(canvas, image, placement, opacity_to_mask(opacity))
