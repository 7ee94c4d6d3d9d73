"""
Dense matrix with Gauss-Jordan row reduction.

A small float64 matrix type used to solve the normal equations for
rating weights. Transpose and multiply return new matrices; row
reduction and inversion transform the instance in place.

Pivot policy for row reduction:
    - Scan rows top to bottom with a pivot column starting at 0
    - Take the first row at or below the current one whose entry in the
      pivot column exceeds the pivot tolerance in magnitude
    - If none exists, move to the next column without advancing the row
    - Swap it up, scale the pivot to 1, clear the column in every other row

The pivot tolerance is configurable: 0.0 gives exact-zero comparison,
None (default) scales machine epsilon by the matrix size and magnitude.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ratingfit.core.exceptions import ShapeError, SingularMatrixError
from ratingfit.core.compute.tolerances import CPU_FP64
from ratingfit.core.validation import (
    check_array,
    check_rectangular,
    check_2d,
    check_1d,
    check_finite,
)


class Matrix:
    """
    Dense 2-D matrix of float64 values.

    Construct from a non-empty rectangular table:

        >>> m = Matrix([[1, 2], [3, 4]])
        >>> m.height, m.width
        (2, 2)
        >>> m.transpose().tolist()
        [[1.0, 3.0], [2.0, 4.0]]

    height and width are read from the stored data, so they remain
    correct after in-place reduction or inversion.

    Args:
        values: Rows of numeric entries, or a 2-D array. Copied.
        tol: Pivot tolerance for row reduction (None = scale-aware,
             0.0 = exact-zero comparison)

    Raises:
        ShapeError: If the table is empty, ragged or not 2-D
        ValidationError: If entries are non-numeric or non-finite
    """

    __hash__ = None  # mutable

    def __init__(self, values: ArrayLike, *, tol: float | None = None):
        check_rectangular(values, 'values')
        arr = check_array(values, 'values')
        check_2d(arr, 'values')
        check_finite(arr, 'values')
        self._values = np.array(arr, dtype=np.float64)
        self.tol = _check_tol(tol)

    @classmethod
    def _wrap(cls, arr: NDArray[np.float64], tol: float | None) -> Matrix:
        """Adopt an already-valid float64 array without copying."""
        obj = cls.__new__(cls)
        obj._values = arr
        obj.tol = tol
        return obj

    # === Properties ===

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._values.shape[0]

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._values.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    @property
    def is_square(self) -> bool:
        return self.height == self.width

    @property
    def values(self) -> NDArray[np.float64]:
        """Read-only view of the entries."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    # === Operations returning new matrices ===

    def transpose(self) -> Matrix:
        """Return a new (width, height) matrix with rows and columns swapped."""
        return Matrix._wrap(np.ascontiguousarray(self._values.T), self.tol)

    def multiply(self, other: Matrix) -> Matrix:
        """
        Return the matrix product self · other.

        Raises:
            ShapeError: If self.width != other.height
        """
        if self.width != other.height:
            raise ShapeError(
                f"incompatible sizes: ({self.height}, {self.width}) x "
                f"({other.height}, {other.width})"
            )
        return Matrix._wrap(self._values @ other._values, self.tol)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def copy(self) -> Matrix:
        return Matrix._wrap(self._values.copy(), self.tol)

    # === In-place operations ===

    def to_reduced_row_echelon_form(self) -> int:
        """
        Reduce this matrix to reduced row-echelon form in place.

        Rank-deficient input is not an error: reduction stops once the
        pivot column runs past the last column.

        Returns:
            Rank, the number of pivots found
        """
        tol = self._pivot_tolerance(self._values)
        return len(_reduce(self._values, tol))

    def inverse(self, *, check_singular: bool = True) -> Matrix:
        """
        Invert this matrix in place and return it.

        Augments with the identity, row-reduces, and keeps the right half.

        Args:
            check_singular: If True, raise when the left block does not
                reduce to the identity. If False, keep whatever the right
                block holds, which is meaningless for singular input.

        Returns:
            self, now holding the inverse

        Raises:
            ShapeError: If the matrix is not square
            SingularMatrixError: If singular and check_singular is True.
                The matrix is left unmodified.
        """
        if not self.is_square:
            raise ShapeError(
                f"can't invert a non-square matrix: shape ({self.height}, {self.width})"
            )

        n = self.height
        tol = self._pivot_tolerance(self._values)
        augmented = np.hstack([self._values, np.eye(n)])
        pivots = _reduce(augmented, tol)

        rank = sum(1 for col in pivots if col < n)
        if check_singular and rank < n:
            raise SingularMatrixError(
                f"Matrix is singular: row reduction found {rank} pivots, expected {n}",
                condition_number=float(np.linalg.cond(self._values)),
                rank=rank,
                expected_rank=n,
            )

        self._values = np.ascontiguousarray(augmented[:, n:])
        return self

    def _pivot_tolerance(self, arr: NDArray[np.float64]) -> float:
        if self.tol is not None:
            return self.tol
        scale = float(np.max(np.abs(arr)))
        return max(arr.shape) * np.finfo(np.float64).eps * scale

    # === Conversion and comparison ===

    def to_numpy(self) -> NDArray[np.float64]:
        return self._values.copy()

    def tolist(self) -> list[list[float]]:
        return self._values.tolist()

    def allclose(
        self,
        other: Matrix,
        rtol: float = CPU_FP64.rtol,
        atol: float = CPU_FP64.atol,
    ) -> bool:
        """Element-wise comparison within tolerance; False on shape mismatch."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._values, other._values, rtol=rtol, atol=atol))

    def __getitem__(self, key: Any) -> Any:
        result = self._values[key]
        if isinstance(result, np.ndarray):
            return result.copy()
        return float(result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._values, other._values))

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()!r})"

    def __str__(self) -> str:
        return "\n".join(
            ",".join(np.format_float_positional(v, trim='-') for v in row)
            for row in self._values
        )


def identity(n: int) -> Matrix:
    """
    Identity matrix of order n.

    Raises:
        ShapeError: If n < 1
    """
    if n < 1:
        raise ShapeError(f"identity: order must be >= 1, got {n}")
    return Matrix._wrap(np.eye(n), None)


def column_vector(values: ArrayLike) -> Matrix:
    """
    Single-column matrix from a flat sequence of values.

    Raises:
        ShapeError: If values is empty or not 1-D
    """
    arr = check_array(values, 'values')
    check_1d(arr, 'values')
    if arr.shape[0] == 0:
        raise ShapeError("values: empty vector, expected at least one entry")
    check_finite(arr, 'values')
    return Matrix._wrap(np.array(arr, dtype=np.float64).reshape(-1, 1), None)


def _check_tol(tol: float | None) -> float | None:
    if tol is None:
        return None
    if not np.isfinite(tol) or tol < 0:
        raise ValueError(f"tol must be a finite non-negative number, got {tol!r}")
    return float(tol)


def _reduce(a: NDArray[np.float64], tol: float) -> list[int]:
    """
    Gauss-Jordan elimination of `a` in place.

    Returns:
        Pivot column of each reduced row, in row order
    """
    height, width = a.shape
    pivots: list[int] = []
    lead = 0
    for r in range(height):
        if lead >= width:
            break

        i = r
        while abs(a[i, lead]) <= tol:
            i += 1
            if i == height:
                i = r
                lead += 1
                if lead == width:
                    return pivots

        if i != r:
            a[[i, r]] = a[[r, i]]

        pivot = a[r, lead]
        a[r] /= pivot

        factors = a[:, lead].copy()
        factors[r] = 0.0
        a -= np.outer(factors, a[r])

        pivots.append(lead)
        lead += 1

    return pivots
