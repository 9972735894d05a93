"""
Small demo programs built on the math core.

- Projectiles: a point launched into an environment with gravity and wind
- Clock: twelve hour marks placed with rotation, scaling and translation
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, List

from .tuples import Tuple, point, vector
from .color import Color, WHITE
from .canvas import Canvas
from .transforms import translation, scaling, rotation_z


@dataclass(frozen=True)
class Projectile:
    position: Tuple
    velocity: Tuple


@dataclass(frozen=True)
class Environment:
    gravity: Tuple
    wind: Tuple


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    position = proj.position + proj.velocity
    velocity = proj.velocity + env.gravity + env.wind
    return Projectile(position, velocity)


def default_launch() -> tuple[Projectile, Environment]:
    """One unit above the origin, unit velocity up and to the right."""
    proj = Projectile(point(0, 1, 0), vector(1, 1, 0).normalize())
    env = Environment(gravity=vector(0, -0.1, 0), wind=vector(-0.01, 0, 0))
    return proj, env


def simulate(proj: Projectile, env: Environment, max_ticks: int = 10_000) -> Iterator[Projectile]:
    """Yield the projectile at every tick until it falls below y = 0.

    The starting state is yielded first, then each state after a tick,
    including the first one with y < 0.
    """
    yield proj
    for _ in range(max_ticks):
        if proj.position.y < 0:
            return
        proj = tick(env, proj)
        yield proj


def clock_points(size: int = 256, radius: float = 100.0) -> List[Tuple]:
    """Positions of the twelve hour marks on a size x size canvas.

    Each mark starts at (0, -1, 0), is rotated around z by its hour, then
    scaled to the clock radius and moved to the canvas center.
    """
    center = size / 2
    place = translation(center, center, 0) @ scaling(radius, radius, 1)
    twelve = point(0, -1, 0)
    return [
        place @ rotation_z(hour * 2 * math.pi / 12) @ twelve
        for hour in range(1, 13)
    ]


def draw_clock(canvas: Canvas, radius: float = None, color: Color = WHITE) -> Canvas:
    """Plot the hour marks onto the canvas."""
    size = min(canvas.width, canvas.height)
    if radius is None:
        radius = size * 100 / 256
    for mark in clock_points(size, radius):
        canvas.set_pixel(int(mark.x), int(mark.y), color)
    return canvas
