"""Depth ordering of objects within one object group."""

from functools import cmp_to_key
from typing import Callable, Iterable, List, TypeVar

from tiled_render.model import MapObject

T = TypeVar("T")

LessFn = Callable[[T, T], bool]


def sort_by(items: Iterable[T], less: LessFn[T]) -> List[T]:
    """
    Stable sort driven by a less-than predicate. Items for which neither
    ``less(a, b)`` nor ``less(b, a)`` holds keep their input order.
    """

    def compare(a: T, b: T) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(items, key=cmp_to_key(compare))


def object_less(a: MapObject, b: MapObject) -> bool:
    """Painter's order: higher on screen first, then left to right."""
    if a.y != b.y:
        return a.y < b.y
    return a.x < b.x


def sort_objects(objects: Iterable[MapObject]) -> List[MapObject]:
    """Return objects in back-to-front draw order (``y`` then ``x``)."""
    return sort_by(objects, object_less)
