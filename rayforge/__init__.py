"""
RayForge - the math core of a ray tracer

Provides:
- Homogeneous tuples (points and vectors) and colors
- N x N matrices with cofactor-based determinant and inverse
- Affine transform builders (translation, scaling, rotation, shearing)
- Rays, transformable unit spheres and hit selection
- A pixel canvas with PNG output and a few demo programs
"""

__version__ = "0.1.0"
__author__ = "RayForge Team"

from .tuples import Tuple, TupleKindError, EPSILON, approx_equal, point, vector, dot, cross
from .color import Color
from .matrix import Matrix, MatrixShapeError, SingularMatrixError
from .transforms import translation, scaling, rotation_x, rotation_y, rotation_z, shearing, chain
from .ray import Ray
from .intersections import Intersection, IntersectionList
from .shapes import Hittable, Sphere
from .canvas import Canvas
from .renderer import Renderer, RenderSettings
from .demos import Projectile, Environment, tick, simulate, default_launch, clock_points, draw_clock
