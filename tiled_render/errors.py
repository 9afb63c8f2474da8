"""Exceptions raised while resolving tiles into sprites."""


class TileLookupError(LookupError):
    """A tile reference (gid or tile id) cannot be resolved to a sprite.

    Raised by :meth:`tiled_render.model.TiledMap.tile_gid_to_tile` and by image
    providers. Rendering never recovers from it: the error propagates out of
    the object, layer and group currently being drawn.
    """
