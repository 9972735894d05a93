"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
position(t) = origin + direction * t
"""

from __future__ import annotations
from .tuples import Tuple
from .matrix import Matrix


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction
    where t >= 0 represents points in front of the origin.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Tuple, direction: Tuple):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray (w = 1)
            direction: The direction vector (w = 0)
        """
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Tuple:
        """Get the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> Ray:
        """Return a new ray with origin and direction multiplied by m."""
        return Ray(m @ self.origin, m @ self.direction)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.direction == other.direction

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
