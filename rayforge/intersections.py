"""
Ray intersections and hit selection.

An Intersection records the ray parameter t and the object that was hit.
An IntersectionList keeps intersections ordered by t and picks the hit:
the nearest intersection in front of the ray origin (t >= 0).
"""

from __future__ import annotations
from typing import Iterator, Optional, TYPE_CHECKING

from .tuples import approx_equal

if TYPE_CHECKING:
    from .shapes import Hittable


class Intersection:
    """A ray parameter t paired with the object hit at that t.

    The empty intersection (t = 0, object = None) means "no hit". Check
    ``object is None`` rather than t to tell it apart from a real hit at t = 0.
    """

    __slots__ = ('t', 'object')

    def __init__(self, t: float, obj: Optional[Hittable]):
        self.t = float(t)
        self.object = obj

    @classmethod
    def empty(cls) -> Intersection:
        return cls(0.0, None)

    def is_empty(self) -> bool:
        return self.object is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.object is other.object and approx_equal(self.t, other.t)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Intersection({self.t:g}, {self.object!r})"


class IntersectionList:
    """An immutable collection of intersections sorted ascending by t.

    Sorting happens once at construction. Python's sort is stable, so
    intersections with equal t keep their insertion order.
    """

    __slots__ = ('_items',)

    def __init__(self, *intersections: Intersection):
        self._items = sorted(intersections, key=lambda i: i.t)

    @classmethod
    def combine(cls, *groups: Optional[IntersectionList]) -> IntersectionList:
        """Merge several intersect() results, skipping misses (None)."""
        merged = []
        for group in groups:
            if group is not None:
                merged.extend(group)
        return cls(*merged)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def hit(self) -> Intersection:
        """The lowest non-negative intersection, or the empty intersection.

        Intersections behind the ray origin (t < 0) are never selected.
        """
        for intersection in self._items:
            if intersection.t >= 0:
                return intersection
        return Intersection.empty()

    def __repr__(self) -> str:
        return f"IntersectionList({', '.join(repr(i) for i in self._items)})"
