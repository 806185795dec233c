"""
Intersection records and hit selection.

An Intersection binds a ray parameter t to the shape that produced it.
Intersections keeps a collection of them in ascending t order so that the
visible hit is simply the first non-negative entry.
"""

from __future__ import annotations
from bisect import insort
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .shapes import Shape


def _by_t(intersection: Intersection) -> float:
    return intersection.t


@dataclass(frozen=True, eq=False)
class Intersection:
    """A ray-shape intersection.

    Attributes:
        t: The ray parameter (negative means behind the ray origin)
        shape: The shape that was struck (shared, never copied)
    """
    t: float
    shape: Shape

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.shape is other.shape

    def __hash__(self) -> int:
        return hash((self.t, id(self.shape)))


class Intersections:
    """An ordered collection of intersections, ascending by t.

    Insertion is stable: entries with equal t keep the order in which they
    were pushed, which makes hit selection deterministic on ties.
    """

    __slots__ = ('_items',)

    def __init__(self, items: Optional[Iterable[Intersection]] = None):
        self._items: list[Intersection] = []
        if items is not None:
            self.extend(items)

    def push(self, intersection: Intersection) -> None:
        """Insert an intersection, keeping ascending t order."""
        insort(self._items, intersection, key=_by_t)

    def extend(self, items: Iterable[Intersection]) -> None:
        for intersection in items:
            self.push(intersection)

    def hit(self) -> Optional[Intersection]:
        """Return the visible hit: the smallest non-negative t, or None."""
        for intersection in self._items:
            if intersection.t >= 0:
                return intersection
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Intersections({[i.t for i in self._items]})"


def intersections(*items: Intersection) -> Intersections:
    """Build an ordered collection from the given intersections."""
    return Intersections(items)
