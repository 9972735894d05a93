"""
Homogeneous 4-component tuple for 3D math.

This is the fundamental building block of the ray tracer, used for:
- Points in 3D space (w = 1)
- Direction vectors (w = 0)

Adding two points yields w = 2, which is representable but meaningless.
A lot of the math here depends on w being either 0 or 1.
"""

from __future__ import annotations
import math
from numbers import Real
import numpy as np


# Numbers are considered equal if they are closer than this.
EPSILON = 1e-5


def approx_equal(a: float, b: float) -> bool:
    """Are a and b approximately equal?"""
    return abs(a - b) < EPSILON


class TupleKindError(ValueError):
    """An operation received a point where a vector is required (or vice versa)."""

    def __init__(self, argument: str, expected: str = "vector"):
        super().__init__(f"The tuple '{argument}' must be a {expected}.")
        self.argument = argument
        self.expected = expected


class Tuple:
    """A 4-component (x, y, z, w) tuple.

    Uses numpy internally for the component-wise arithmetic. Instances are
    treated as immutable values.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0):
        self._data = np.array([x, y, z, w], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Tuple:
        """Create a Tuple from a 4-element numpy array."""
        t = cls.__new__(cls)
        t._data = np.asarray(arr, dtype=np.float64)
        return t

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __repr__(self) -> str:
        if self.is_point():
            return f"Point({self.x:.5f}, {self.y:.5f}, {self.z:.5f})"
        if self.is_vector():
            return f"Vector({self.x:.5f}, {self.y:.5f}, {self.z:.5f})"
        return f"Tuple({self.x:.5f}, {self.y:.5f}, {self.z:.5f}, {self.w:.5f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    # Tolerance-based equality cannot be made consistent with hashing.
    __hash__ = None

    def __neg__(self) -> Tuple:
        return Tuple.from_array(-self._data)

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.from_array(self._data + other._data)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.from_array(self._data - other._data)

    def __mul__(self, scale: float) -> Tuple:
        if not isinstance(scale, Real):
            return NotImplemented
        return Tuple.from_array(self._data * scale)

    def __rmul__(self, scale: float) -> Tuple:
        return self.__mul__(scale)

    def __truediv__(self, scale: float) -> Tuple:
        if not isinstance(scale, Real):
            return NotImplemented
        return Tuple.from_array(self._data / scale)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self):
        return iter(float(c) for c in self._data)

    def magnitude(self) -> float:
        """Euclidean norm over all four components.

        Only meaningful for vectors: a point's w contributes to the result.
        """
        return float(math.sqrt(np.dot(self._data, self._data)))

    def normalize(self) -> Tuple:
        """Divide every component by the magnitude.

        No guard is applied for points; normalizing a point is well defined
        but meaningless.
        """
        return Tuple.from_array(self._data / self.magnitude())

    def dot(self, other: Tuple) -> float:
        return dot(self, other)

    def cross(self, other: Tuple) -> Tuple:
        return cross(self, other)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w = 0)."""
    return Tuple(x, y, z, 0.0)


def dot(left: Tuple, right: Tuple) -> float:
    """Dot product over all four components.

    For unit vectors this is the cosine of the angle between them.
    """
    return float(np.dot(left._data, right._data))


def cross(left: Tuple, right: Tuple) -> Tuple:
    """Cross product of two vectors.

    The result is perpendicular to both inputs. Both operands must be
    vectors; a point raises TupleKindError.
    """
    if not left.is_vector():
        raise TupleKindError("left")
    if not right.is_vector():
        raise TupleKindError("right")

    return vector(
        left.y * right.z - left.z * right.y,
        left.z * right.x - left.x * right.z,
        left.x * right.y - left.y * right.x,
    )


ORIGIN = point(0, 0, 0)
