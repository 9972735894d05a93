"""
Pixel canvas.

A width x height grid of float RGB colors, initialised to black. Pixels
are stored unclamped and converted to 8-bit only for output.
"""

from __future__ import annotations
import numpy as np

from .color import Color


class Canvas:
    """A grid of colors addressed by (x, y), with (0, 0) at the top left."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @classmethod
    def from_array(cls, image: np.ndarray) -> Canvas:
        """Create a canvas from an (height, width, 3) float array."""
        height, width = image.shape[:2]
        canvas = cls(width, height)
        canvas._pixels[:] = image
        return canvas

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = color.to_array()

    def get_pixel(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        return Color.from_array(self._pixels[y, x].copy())

    def fill(self, color: Color) -> None:
        self._pixels[:, :] = color.to_array()

    def set_row(self, y: int, row: np.ndarray) -> None:
        """Overwrite a full row with a (width, 3) array."""
        self._pixels[y] = row

    def to_array(self) -> np.ndarray:
        """Return the canvas as an 8-bit (height, width, 3) array.

        Components are clamped to [0, 1] before scaling to 0..255.
        """
        return (np.clip(self._pixels, 0.0, 1.0) * 255).astype(np.uint8)

    def save(self, filename: str) -> None:
        """Save the canvas to an image file (format from the extension)."""
        from PIL import Image as PILImage

        pil_image = PILImage.fromarray(self.to_array())
        pil_image.save(filename)

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"

