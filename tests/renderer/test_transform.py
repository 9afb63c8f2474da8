import pytest
from PIL import Image

from tiled_render.renderer.transform import (
    object_size,
    resize_sprite,
    rotate_sprite,
    transform_object,
)
from tiled_render.utils.gid import Flip
from tests.test_utils import BLUE, GREEN, RED, WHITE, make_object, solid_sprite


def quad_sprite() -> Image.Image:
    """2x2 sprite: red, green / blue, white."""
    img = Image.new("RGBA", (2, 2))
    img.putpixel((0, 0), RED)
    img.putpixel((1, 0), GREEN)
    img.putpixel((0, 1), BLUE)
    img.putpixel((1, 1), WHITE)
    return img


def test_resize_to_own_size_is_noop() -> None:
    sprite = quad_sprite()

    resized = resize_sprite(sprite, sprite.size)

    assert resized.tobytes() == sprite.tobytes()


def test_resize_uses_nearest_neighbour() -> None:
    resized = resize_sprite(quad_sprite(), (4, 4))

    assert resized.size == (4, 4)
    for x, y in [(0, 0), (1, 0), (0, 1), (1, 1)]:
        assert resized.getpixel((x, y)) == RED
    assert resized.getpixel((3, 0)) == GREEN
    assert resized.getpixel((0, 3)) == BLUE
    assert resized.getpixel((3, 3)) == WHITE


@pytest.mark.parametrize("size", [(0, 16), (16, 0), (-4, 16)])
def test_resize_degenerate_size_gives_empty_image(size: tuple[int, int]) -> None:
    resized = resize_sprite(solid_sprite(), size)

    assert resized.width == 0 or resized.height == 0


def test_rotate_by_zero_is_noop() -> None:
    sprite = quad_sprite()

    assert rotate_sprite(sprite, 0).tobytes() == sprite.tobytes()


def test_rotate_90_is_clockwise() -> None:
    row = Image.new("RGBA", (2, 1))
    row.putpixel((0, 0), RED)
    row.putpixel((1, 0), GREEN)

    rotated = rotate_sprite(row, 90)

    assert rotated.size == (1, 2)
    assert rotated.getpixel((0, 0)) == RED
    assert rotated.getpixel((0, 1)) == GREEN


def test_rotate_expands_and_fills_transparent() -> None:
    rotated = rotate_sprite(solid_sprite(RED, (16, 16)), 45)

    assert rotated.width > 16 and rotated.height > 16
    assert rotated.getpixel((0, 0))[3] == 0  # type: ignore[index]
    center = (rotated.width // 2, rotated.height // 2)
    assert rotated.getpixel(center) == RED


def test_object_size_truncates() -> None:
    assert object_size(make_object(width=16.9, height=31.2)) == (16, 31)


def test_transform_object_resizes_to_declared_size() -> None:
    obj = make_object(width=32, height=48)

    image = transform_object(obj, solid_sprite(RED, (16, 16)))

    assert image.size == (32, 48)
    assert image.mode == "RGBA"


def test_transform_object_identity() -> None:
    sprite = quad_sprite()
    obj = make_object(width=2, height=2)

    assert transform_object(obj, sprite).tobytes() == sprite.tobytes()


def test_transform_object_applies_flip_before_resize() -> None:
    obj = make_object(width=4, height=4)

    image = transform_object(obj, quad_sprite(), Flip(horizontal=True))

    assert image.getpixel((0, 0)) == GREEN
    assert image.getpixel((3, 3)) == BLUE


def test_transform_object_converts_mode() -> None:
    sprite = Image.new("RGB", (16, 16), (255, 0, 0))

    image = transform_object(make_object(), sprite)

    assert image.mode == "RGBA"
    assert image.getpixel((0, 0)) == RED


def test_transform_object_does_not_mutate_sprite() -> None:
    sprite = quad_sprite()
    before = sprite.tobytes()

    transform_object(make_object(width=8, height=8, rotation=30), sprite, Flip(True, True, True))

    assert sprite.tobytes() == before
