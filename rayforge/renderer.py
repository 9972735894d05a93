"""
Renderer module - casts rays at a shape and paints its silhouette.

Implements:
- One ray per pixel from a fixed eye point towards a virtual wall
- Multi-threaded rendering by rows
- Progress reporting through a callback

Shapes are read-only during a render, so rows can be traced in parallel
without coordination.
"""

from __future__ import annotations
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Callable, Tuple as PyTuple
import numpy as np

from .tuples import Tuple, point
from .color import Color
from .ray import Ray
from .canvas import Canvas
from .shapes import Hittable


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 256
    height: int = 256
    wall_z: float = 10.0
    wall_size: float = 7.0
    ray_origin: Tuple = None
    color: Color = None
    background_color: Color = None
    num_threads: int = 0  # 0 = auto-detect

    def __post_init__(self):
        if self.ray_origin is None:
            self.ray_origin = point(0, 0, -5)
        if self.color is None:
            self.color = Color(1.0, 0.0, 0.0)
        if self.background_color is None:
            self.background_color = Color(0.0, 0.0, 0.0)
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


class Renderer:
    """Silhouette renderer with multi-threading support."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Build the ray from the eye through pixel (x, y) on the wall.

        The wall spans [-half, +half] in x and y; world y is flipped so the
        top row of the canvas is +half.
        """
        settings = self.settings
        half = settings.wall_size / 2
        pixel_width = settings.wall_size / settings.width
        pixel_height = settings.wall_size / settings.height

        world_x = pixel_width * x - half
        world_y = half - pixel_height * y
        position = point(world_x, world_y, settings.wall_z)

        origin = settings.ray_origin
        return Ray(origin, (position - origin).normalize())

    def render(self, shape: Hittable) -> Canvas:
        """Render the shape's silhouette.

        Args:
            shape: The object to render

        Returns:
            A canvas with hit pixels painted in the settings color
        """
        width = self.settings.width
        height = self.settings.height
        canvas = Canvas(width, height)

        hit_rgb = self.settings.color.to_array()
        background_rgb = self.settings.background_color.to_array()
        completed_rows = [0]  # Use list for mutable in closure
        progress_lock = threading.Lock()

        def render_row(y: int) -> PyTuple[int, np.ndarray]:
            """Render a single row."""
            row = np.tile(background_rgb, (width, 1))
            for x in range(width):
                xs = shape.intersect(self.ray_for_pixel(x, y))
                if xs is not None and not xs.hit().is_empty():
                    row[x] = hit_rgb

            with progress_lock:
                completed_rows[0] += 1
                if self._progress_callback:
                    self._progress_callback(completed_rows[0] / height)

            return y, row

        if self.settings.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                results = list(executor.map(render_row, range(height)))
        else:
            results = [render_row(y) for y in range(height)]

        for y, row in results:
            canvas.set_row(y, row)

        return canvas
