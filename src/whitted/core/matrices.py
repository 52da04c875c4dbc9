"""Square matrices for affine transforms.

Matrices are immutable value types backed by a NumPy float64 array. The
inverse is computed explicitly as the transposed cofactor matrix divided
by the determinant, with the determinant obtained by first-row cofactor
expansion down to the 2x2 base case.

Transforms are expected to be invertible by construction. Inverting a
singular matrix is a programming error and raises ValueError rather than
producing a matrix full of infinities.

Example:
    >>> from src.whitted.core.matrices import Matrix, identity_matrix
    >>> m = Matrix([[2, 0, 0, 0], [0, 2, 0, 0], [0, 0, 2, 0], [0, 0, 0, 1]])
    >>> m * m.inverse() == identity_matrix()
    True
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import overload

import numpy as np
import numpy.typing as npt

from src.whitted.core.tuples import EPSILON, Tuple


class Matrix:
    """An immutable n x n matrix of floats.

    Attributes:
        size: Number of rows (and columns).
    """

    __slots__ = ("_data", "_rows")

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        data.setflags(write=False)
        self._data = data
        # Plain Python rows keep matrix * tuple cheap on the hot path
        self._rows = data.tolist()

    @property
    def size(self) -> int:
        return self._data.shape[0]

    @property
    def data(self) -> npt.NDArray[np.float64]:
        """Read-only view of the underlying array."""
        return self._data

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self._rows[row][col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._data.shape != other._data.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    @overload
    def __mul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __mul__(self, other: Tuple) -> Tuple: ...

    def __mul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        if isinstance(other, Matrix):
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple):
            x, y, z, w = other.x, other.y, other.z, other.w
            r0, r1, r2, r3 = self._rows
            return Tuple(
                r0[0] * x + r0[1] * y + r0[2] * z + r0[3] * w,
                r1[0] * x + r1[1] * y + r1[2] * z + r1[3] * w,
                r2[0] * x + r2[1] * y + r2[2] * z + r2[3] * w,
                r3[0] * x + r3[1] * y + r3[2] * z + r3[3] * w,
            )
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Remove one row and one column.

        Args:
            row: Index of the row to drop.
            col: Index of the column to drop.

        Returns:
            The (n-1) x (n-1) matrix that remains.
        """
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix at (row, col)."""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Minor at (row, col), negated when row + col is odd."""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along the first row."""
        if self.size == 2:
            (a, b), (c, d) = self._rows
            return a * d - b * c
        return sum(self._rows[0][col] * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Compute the inverse as transpose(cofactors) / determinant.

        Raises:
            ValueError: If the determinant is zero.
        """
        det = self.determinant()
        if det == 0.0:
            raise ValueError(f"Matrix is not invertible (determinant is 0): {self!r}")

        n = self.size
        cofactors = [[self.cofactor(row, col) for col in range(n)] for row in range(n)]
        # Transposing while dividing: element (col, row) takes cofactor (row, col)
        return Matrix(np.array(cofactors, dtype=np.float64).T / det)


def identity_matrix(size: int = 4) -> Matrix:
    """Create the identity matrix."""
    return Matrix(np.identity(size, dtype=np.float64))


IDENTITY = identity_matrix()
