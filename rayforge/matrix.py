"""
General N x N matrix type.

Implements the textbook algorithms directly:
- Determinant by Laplace (cofactor) expansion along row 0
- Minor, cofactor and submatrix extraction
- Inverse via the adjugate divided by the determinant

The cofactor expansion is exponential in the matrix size. That is fine at
the 4x4 scale used for transforms and is not meant to scale further.
"""

from __future__ import annotations
import math
from typing import Iterable, Sequence, Union
import numpy as np

from .tuples import EPSILON, Tuple


class MatrixShapeError(ValueError):
    """An operation was given a matrix of the wrong shape."""
    pass


class SingularMatrixError(ArithmeticError):
    """The matrix has a zero determinant and cannot be inverted."""
    pass


class Matrix:
    """A dense rows x columns matrix of floats.

    Elements can be read and written with ``m[row, column]``. Everything
    else returns a new matrix.
    """

    __slots__ = ('_values',)

    def __init__(self, values: Union[Sequence[Sequence[float]], np.ndarray]):
        """Create a matrix from nested rows.

        Args:
            values: A 2D sequence (or numpy array) of row values
        """
        arr = np.array(values, dtype=np.float64)
        if arr.ndim != 2:
            raise MatrixShapeError(f"Matrix values must be 2-dimensional, got {arr.ndim}")
        self._values = arr

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Matrix:
        """Wrap a 2D numpy array without copying."""
        m = cls.__new__(cls)
        m._values = np.asarray(arr, dtype=np.float64)
        return m

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Matrix:
        """Create a square matrix from a flat, row-major sequence."""
        flat = np.array(list(values), dtype=np.float64)
        side = math.isqrt(flat.size)
        if side * side != flat.size:
            raise MatrixShapeError("Values must define a square matrix.")
        return cls.from_array(flat.reshape(side, side))

    @classmethod
    def zero(cls, rows: int, columns: int) -> Matrix:
        return cls.from_array(np.zeros((rows, columns), dtype=np.float64))

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        """The size x size identity matrix."""
        return cls.from_array(np.identity(size, dtype=np.float64))

    @property
    def rows(self) -> int:
        return self._values.shape[0]

    @property
    def columns(self) -> int:
        return self._values.shape[1]

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return float(self._values[row, column])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, column = index
        self._values[row, column] = value

    def copy(self) -> Matrix:
        return Matrix.from_array(self._values.copy())

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._values.copy()

    def transpose(self) -> Matrix:
        """Swap rows and columns. Defined for any rectangular matrix."""
        return Matrix.from_array(self._values.T.copy())

    def _require_square(self, operation: str) -> None:
        if not self.is_square:
            raise MatrixShapeError(
                f"{operation} requires a square matrix, got {self.rows}x{self.columns}"
            )

    def determinant(self) -> float:
        self._require_square("determinant")
        v = self._values
        # The empty matrix has determinant 1, so a 1x1 cofactor is 1.
        if self.rows == 0:
            return 1.0
        if self.rows == 1:
            return float(v[0, 0])
        if self.rows == 2:
            return float(v[0, 0] * v[1, 1] - v[0, 1] * v[1, 0])

        det = 0.0
        for column in range(self.columns):
            det += v[0, column] * self.cofactor(0, column)
        return float(det)

    def submatrix(self, remove_row: int, remove_column: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        values = np.delete(self._values, remove_row, axis=0)
        values = np.delete(values, remove_column, axis=1)
        return Matrix.from_array(values)

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        minor = self.minor(row, column)
        return minor if (row + column) % 2 == 0 else -minor

    def is_invertible(self) -> bool:
        # Exact comparison: nearly singular matrices still count as invertible.
        return self.determinant() != 0

    def inverse(self) -> Matrix:
        """Invert using the adjugate.

        Raises:
            SingularMatrixError: If the determinant is exactly zero
        """
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError("Matrix is not invertible (determinant is 0)")

        result = np.zeros_like(self._values)
        for row in range(self.rows):
            for column in range(self.columns):
                # Writing to [column, row] transposes the cofactor matrix in the same pass.
                result[column, row] = self.cofactor(row, column) / det
        return Matrix.from_array(result)

    def __matmul__(self, other: Union[Matrix, Tuple]) -> Union[Matrix, Tuple]:
        if isinstance(other, Matrix):
            if self.columns != other.rows:
                raise MatrixShapeError(
                    f"Cannot multiply {self.rows}x{self.columns} by {other.rows}x{other.columns}"
                )
            return Matrix.from_array(self._values @ other._values)
        if isinstance(other, Tuple):
            if self.rows != 4 or self.columns != 4:
                raise MatrixShapeError(
                    f"Only a 4x4 matrix can transform a tuple, got {self.rows}x{self.columns}"
                )
            return Tuple.from_array(self._values @ other.to_array())
        return NotImplemented

    __mul__ = __matmul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._values.shape != other._values.shape:
            return False
        return bool(np.all(np.abs(self._values - other._values) < EPSILON))

    __hash__ = None

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(f"{value:g}" for value in row) + "]"
            for row in self._values
        )
        return f"Matrix({self.rows}x{self.columns})[{rows}]"
