import pytest
from PIL import Image
from pyrsistent import pmap

from tiled_render.errors import TileLookupError
from tiled_render.model import Tile, Tileset
from tiled_render.renderer.provider import TilesetImageProvider, load_tile_image
from tests.test_utils import BLUE, GREEN, RED, make_sheet, make_tileset


def test_load_tile_image_crops_sheet() -> None:
    tileset = make_tileset([RED, GREEN, BLUE])

    sprite = load_tile_image(Tile(tileset, 1))

    assert sprite.size == (16, 16)
    assert sprite.mode == "RGBA"
    assert sprite.getpixel((0, 0)) == GREEN
    assert sprite.getpixel((15, 15)) == GREEN


def test_load_tile_image_honours_margin_and_spacing() -> None:
    tileset = Tileset(
        first_gid=1,
        name="spaced",
        tile_width=8,
        tile_height=8,
        tile_count=3,
        columns=3,
        margin=2,
        spacing=1,
        image=make_sheet([RED, GREEN, BLUE], (8, 8), margin=2, spacing=1),
    )

    for tile_id, color in enumerate([RED, GREEN, BLUE]):
        sprite = load_tile_image(Tile(tileset, tile_id))
        assert sprite.getpixel((0, 0)) == color
        assert sprite.getpixel((7, 7)) == color


def test_load_tile_image_collection_tileset() -> None:
    tall = Image.new("RGBA", (16, 32), RED)
    tileset = Tileset(first_gid=10, name="props", images=pmap({0: tall, 4: tall}))

    assert load_tile_image(Tile(tileset, 4)).size == (16, 32)
    with pytest.raises(TileLookupError):
        load_tile_image(Tile(tileset, 2))


def test_load_tile_image_without_image_fails() -> None:
    tileset = Tileset(first_gid=1, name="empty", tile_width=16, tile_height=16, tile_count=1, columns=1)

    with pytest.raises(TileLookupError):
        load_tile_image(Tile(tileset, 0))


def test_load_tile_image_box_outside_sheet_fails() -> None:
    tileset = Tileset(
        first_gid=1,
        name="short",
        tile_width=16,
        tile_height=16,
        tile_count=4,
        columns=4,
        image=make_sheet([RED, GREEN]),
    )

    with pytest.raises(TileLookupError):
        load_tile_image(Tile(tileset, 3))


def test_load_tile_image_unknown_id_fails() -> None:
    with pytest.raises(TileLookupError):
        load_tile_image(Tile(make_tileset([RED]), 5))


def test_provider_caches_sprites() -> None:
    provider = TilesetImageProvider()
    tile = Tile(make_tileset(), 0)

    first = provider.resolve(tile)
    second = provider.resolve(Tile(tile.tileset, 0))

    assert first is second
    assert len(provider.cache) == 1

    provider.clear()
    assert provider.cache == {}


def test_provider_cache_is_per_tileset() -> None:
    provider = TilesetImageProvider()
    a = make_tileset([RED])
    b = make_tileset([BLUE])

    assert provider.resolve(Tile(a, 0)).getpixel((0, 0)) == RED
    assert provider.resolve(Tile(b, 0)).getpixel((0, 0)) == BLUE


def test_provider_sheet_without_columns_fails_with_lookup_error() -> None:
    tileset = Tileset(
        first_gid=1,
        tile_width=16,
        tile_height=16,
        tile_count=1,
        columns=0,
        image=Image.new("RGBA", (16, 16)),
    )

    with pytest.raises(TileLookupError):
        TilesetImageProvider().resolve(Tile(tileset, 0))
