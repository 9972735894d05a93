"""
RGB color type.

While it only makes sense to display colors with components in [0, 1],
the components are not constrained: intermediate math regularly takes
them out of range. Clamping happens when converting to bytes.
"""

from __future__ import annotations
from numbers import Real
from typing import Union
import numpy as np

from .tuples import EPSILON


class Color:
    """An RGB color backed by a numpy array."""

    __slots__ = ('_data',)

    def __init__(self, red: float = 0.0, green: float = 0.0, blue: float = 0.0):
        self._data = np.array([red, green, blue], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Color:
        """Create Color from numpy array."""
        c = cls.__new__(cls)
        c._data = np.asarray(arr, dtype=np.float64)
        return c

    @property
    def red(self) -> float:
        return float(self._data[0])

    @property
    def green(self) -> float:
        return float(self._data[1])

    @property
    def blue(self) -> float:
        return float(self._data[2])

    def __repr__(self) -> str:
        return f"Color({self.red:.5f}, {self.green:.5f}, {self.blue:.5f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._data + other._data)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._data - other._data)

    def __mul__(self, other: Union[Color, float]) -> Color:
        # Color * Color is the Hadamard (Schur) product.
        if isinstance(other, Color):
            return Color.from_array(self._data * other._data)
        if not isinstance(other, Real):
            return NotImplemented
        return Color.from_array(self._data * other)

    def __rmul__(self, other: float) -> Color:
        if not isinstance(other, Real):
            return NotImplemented
        return Color.from_array(other * self._data)

    def __truediv__(self, scale: float) -> Color:
        if not isinstance(scale, Real):
            return NotImplemented
        return Color.from_array(self._data / scale)

    def clamp(self, min_val: float = 0.0, max_val: float = 1.0) -> Color:
        """Clamp all components to the given range."""
        return Color.from_array(np.clip(self._data, min_val, max_val))

    def to_bytes(self) -> tuple[int, int, int]:
        """Convert to 8-bit channels, clamping out-of-range components."""
        r, g, b = (np.clip(self._data, 0.0, 1.0) * 255).astype(np.uint8)
        return int(r), int(g), int(b)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


BLACK = Color(0, 0, 0)
WHITE = Color(1, 1, 1)
RED = Color(1, 0, 0)
