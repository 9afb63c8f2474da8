from typing import Sequence

from PIL import Image

from tiled_render.model import (
    Group,
    MapObject,
    ObjectGroup,
    TiledMap,
    TileLayer,
    Tileset,
)
from tiled_render.types import RGBA

RED: RGBA = (255, 0, 0, 255)
GREEN: RGBA = (0, 255, 0, 255)
BLUE: RGBA = (0, 0, 255, 255)
WHITE: RGBA = (255, 255, 255, 255)
TRANSPARENT: RGBA = (0, 0, 0, 0)

TILE = 16


def solid_sprite(color: RGBA = RED, size: tuple[int, int] = (TILE, TILE)) -> Image.Image:
    return Image.new("RGBA", size, color)


def make_sheet(
    colors: Sequence[RGBA],
    tile_size: tuple[int, int] = (TILE, TILE),
    margin: int = 0,
    spacing: int = 0,
) -> Image.Image:
    """Single-row sheet with one solid tile per colour."""
    tw, th = tile_size
    width = 2 * margin + len(colors) * tw + (len(colors) - 1) * spacing
    sheet = Image.new("RGBA", (width, 2 * margin + th), TRANSPARENT)
    for i, color in enumerate(colors):
        left = margin + i * (tw + spacing)
        sheet.paste(color, (left, margin, left + tw, margin + th))
    return sheet


def make_tileset(
    colors: Sequence[RGBA] = (RED, GREEN, BLUE),
    first_gid: int = 1,
    tile_size: tuple[int, int] = (TILE, TILE),
    name: str = "colors",
) -> Tileset:
    tw, th = tile_size
    return Tileset(
        first_gid=first_gid,
        name=name,
        tile_width=tw,
        tile_height=th,
        tile_count=len(colors),
        columns=len(colors),
        image=make_sheet(colors, tile_size),
    )


def make_object(
    id: int = 1,
    x: float = 0,
    y: float = TILE,
    width: float = TILE,
    height: float = TILE,
    gid: int = 1,
    rotation: float = 0,
    visible: bool = True,
) -> MapObject:
    return MapObject(
        id=id,
        x=x,
        y=y,
        width=width,
        height=height,
        rotation=rotation,
        gid=gid,
        visible=visible,
    )


def make_layer(
    rows: Sequence[Sequence[int]], name: str = "ground", **kwargs: object
) -> TileLayer:
    height = len(rows)
    width = len(rows[0]) if rows else 0
    data = [gid for row in rows for gid in row]
    return TileLayer(name=name, width=width, height=height, data=data, **kwargs)  # type: ignore[arg-type]


def make_map(
    width: int = 4,
    height: int = 4,
    tilesets: Sequence[Tileset] | None = None,
    layers: Sequence[TileLayer] = (),
    object_groups: Sequence[ObjectGroup] = (),
    groups: Sequence[Group] = (),
    tile_size: tuple[int, int] = (TILE, TILE),
) -> TiledMap:
    tw, th = tile_size
    return TiledMap(
        width=width,
        height=height,
        tile_width=tw,
        tile_height=th,
        tilesets=list(tilesets) if tilesets is not None else [make_tileset()],
        layers=list(layers),
        object_groups=list(object_groups),
        groups=list(groups),
    )


def blank_canvas(size: tuple[int, int] = (4 * TILE, 4 * TILE)) -> Image.Image:
    return Image.new("RGBA", size, TRANSPARENT)


def opaque_rows(image: Image.Image, x: int = 0) -> list[int]:
    """Rows of column ``x`` whose pixel is not fully transparent."""
    return [y for y in range(image.height) if image.getpixel((x, y))[3] != 0]  # type: ignore[index]
