"""
Affine transform builders.

Each function returns a new 4x4 Matrix. Transforms combine by matrix
multiplication, and the rightmost factor is applied first:

    transform = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(pi / 2)

rotates, then scales, then translates.
"""

from __future__ import annotations
import math
from functools import reduce

from .matrix import Matrix


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z). Vectors are unaffected since w = 0."""
    m = Matrix.identity(4)
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return m


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale along each axis. A negative factor reflects across that axis."""
    m = Matrix.identity(4)
    m[0, 0] = x
    m[1, 1] = y
    m[2, 2] = z
    return m


def rotation_x(radians: float) -> Matrix:
    cos_r = math.cos(radians)
    sin_r = math.sin(radians)
    return Matrix([
        [1, 0, 0, 0],
        [0, cos_r, -sin_r, 0],
        [0, sin_r, cos_r, 0],
        [0, 0, 0, 1],
    ])


def rotation_y(radians: float) -> Matrix:
    cos_r = math.cos(radians)
    sin_r = math.sin(radians)
    return Matrix([
        [cos_r, 0, sin_r, 0],
        [0, 1, 0, 0],
        [-sin_r, 0, cos_r, 0],
        [0, 0, 0, 1],
    ])


def rotation_z(radians: float) -> Matrix:
    cos_r = math.cos(radians)
    sin_r = math.sin(radians)
    return Matrix([
        [cos_r, -sin_r, 0, 0],
        [sin_r, cos_r, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 1],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Move each coordinate in proportion to the other two.

    Args:
        xy: x moved in proportion to y
        xz: x moved in proportion to z
        yx: y moved in proportion to x
        yz: y moved in proportion to z
        zx: z moved in proportion to x
        zy: z moved in proportion to y
    """
    return Matrix([
        [1, xy, xz, 0],
        [yx, 1, yz, 0],
        [zx, zy, 1, 0],
        [0, 0, 0, 1],
    ])


def chain(*transforms: Matrix) -> Matrix:
    """Compose transforms in the order they should be applied.

    ``chain(a, b, c)`` is ``c @ b @ a``: a is applied first.
    """
    return reduce(lambda acc, m: m @ acc, transforms, Matrix.identity(4))
