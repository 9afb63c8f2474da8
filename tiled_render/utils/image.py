import numpy as np
import numpy.typing as npt
from PIL import Image

from tiled_render.utils.gid import Flip

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]
UInt16Array = npt.NDArray[np.uint16]


def opacity_to_mask(opacity: float) -> int:
    """
    Convert a layer opacity in [0,1] to a uniform 8-bit alpha mask value.
    Out of range values are clamped.
    """
    return int(round(min(max(opacity, 0.0), 1.0) * 255))


def apply_alpha_mask(image: Image.Image, mask: int) -> Image.Image:
    """
    Multiply every pixel's alpha by ``mask / 255`` and return a new RGBA image.
    Colour channels are left untouched. A mask of 255 leaves alpha unchanged.
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")

    arr: UInt8Array = np.array(image, dtype=np.uint8)
    alpha: UInt16Array = arr[..., 3].astype(np.uint16)

    # (a * m + 127) // 255 rounds to nearest and is exact at m == 255
    scaled: UInt16Array = (alpha * np.uint16(mask) + np.uint16(127)) // np.uint16(255)

    out: UInt8Array = arr.copy()
    out[..., 3] = scaled.astype(np.uint8)
    return Image.fromarray(out)


def apply_flip(image: Image.Image, flip: Flip) -> Image.Image:
    """
    Orient a sprite according to gid flip flags. The diagonal flip is applied
    first, as Tiled does, so a diagonal plus horizontal flip is a 90 degree
    clockwise rotation.
    """
    if flip.diagonal:
        image = image.transpose(Image.Transpose.TRANSPOSE)
    if flip.horizontal:
        image = image.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
    if flip.vertical:
        image = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    return image
