"""
Shapes that rays can intersect.

Each shape implements the Hittable interface: ``intersect`` and
``normal_at``. The only primitive is the unit sphere; position, size and
orientation come from its transform.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional
import math
import threading

from .tuples import Tuple, ORIGIN, vector, dot
from .matrix import Matrix, MatrixShapeError
from .ray import Ray
from .intersections import Intersection, IntersectionList


class Hittable(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    @abstractmethod
    def intersect(self, ray: Ray) -> Optional[IntersectionList]:
        """Intersect a world-space ray with this object.

        Returns:
            The intersections tagged with this object, or None on a miss
        """
        pass

    @abstractmethod
    def normal_at(self, world_point: Tuple) -> Tuple:
        """Return the unit world-space surface normal at world_point."""
        pass


class Sphere(Hittable):
    """A unit sphere centered at the object-space origin.

    The transform maps object space to world space. Its inverse and the
    transposed inverse are cached together whenever the transform is set.
    """

    def __init__(self, transform: Optional[Matrix] = None):
        """Create a sphere.

        Args:
            transform: Object-to-world transform (identity if None)
        """
        self._lock = threading.Lock()
        self._state = None
        self.set_transform(transform if transform is not None else Matrix.identity(4))

    @property
    def transform(self) -> Matrix:
        return self._state[0].copy()

    @transform.setter
    def transform(self, value: Matrix) -> None:
        self.set_transform(value)

    def set_transform(self, transform: Matrix) -> None:
        """Replace the transform and its cached inverses.

        The three matrices are swapped in as a single tuple, so readers see
        either the old set or the new one. A transform that is not 4x4
        raises MatrixShapeError. A singular transform raises
        SingularMatrixError. Either way the sphere is left unchanged.
        """
        if transform.rows != 4 or transform.columns != 4:
            raise MatrixShapeError(
                f"A sphere transform must be 4x4, got {transform.rows}x{transform.columns}"
            )
        with self._lock:
            transform = transform.copy()
            inverse = transform.inverse()
            self._state = (transform, inverse, inverse.transpose())

    def intersect(self, ray: Ray) -> Optional[IntersectionList]:
        _, inverse, _ = self._state
        ray = ray.transform(inverse)

        # Vector from the sphere's center (the object-space origin) to the ray origin.
        sphere_to_ray = ray.origin - ORIGIN

        a = dot(ray.direction, ray.direction)
        b = 2 * dot(ray.direction, sphere_to_ray)
        c = dot(sphere_to_ray, sphere_to_ray) - 1

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2 * a)
        t2 = (-b + sqrt_disc) / (2 * a)

        return IntersectionList(Intersection(t1, self), Intersection(t2, self))

    def normal_at(self, world_point: Tuple) -> Tuple:
        _, inverse, inverse_transpose = self._state
        object_point = inverse @ world_point
        object_normal = object_point - ORIGIN
        world_normal = inverse_transpose @ object_normal
        # The transposed inverse can disturb w; drop it before renormalizing.
        return vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    def __repr__(self) -> str:
        return f"Sphere(transform={self._state[0]!r})"
