"""
Ordinary least squares via the normal equations.

Solves min_β ||y - Xβ||² in closed form:

    β = (X'X)⁻¹ X'y

using only Matrix operations. Suitable for the small, well-conditioned
designs rating fits produce (a few dozen predictors, a few thousand
rows). The QR reference backend handles anything less benign.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ratingfit.core.exceptions import SingularMatrixError
from ratingfit.core.compute.tolerances import gram_pivot_tolerance
from ratingfit.core.compute.linalg.matrix import Matrix, column_vector
from ratingfit.core.validation import check_array


def regression_coefficients(
    X: Matrix | ArrayLike,
    y: Matrix | ArrayLike,
    *,
    tol: float | None = None,
) -> Matrix:
    """
    OLS coefficients for design X and response y.

    No intercept is added; prepend a column of ones to X for one.

    Args:
        X: Design matrix (n x p), one row per observation
        y: Response, a (n x 1) Matrix or a flat sequence of n values
        tol: Pivot tolerance for inverting X'X (see Matrix). Defaults to
             X's own tolerance, else one scaled to the number of
             observations (gram_pivot_tolerance).

    Returns:
        Column Matrix (p x 1) of coefficients in the column order of X

    Raises:
        ShapeError: If X and y disagree on the number of observations
        SingularMatrixError: If X'X is singular (X is rank-deficient)
    """
    x = X if isinstance(X, Matrix) else Matrix(X, tol=tol)
    response = y if isinstance(y, Matrix) else _as_column(y)

    xt = x.transpose()
    gram = xt.multiply(x)

    if tol is None:
        tol = x.tol
    if tol is None:
        scale = float(np.max(np.abs(gram.values)))
        tol = gram_pivot_tolerance(x.height, x.width, scale)
    gram.tol = tol

    try:
        gram.inverse()
    except SingularMatrixError as e:
        raise SingularMatrixError(
            f"Design matrix is rank-deficient: X'X has rank {e.rank}, "
            f"expected {e.expected_rank}. This indicates perfect multicollinearity.",
            matrix_name="X'X",
            condition_number=e.condition_number,
            rank=e.rank,
            expected_rank=e.expected_rank,
        ) from e

    return gram.multiply(xt).multiply(response)


def _as_column(y: ArrayLike) -> Matrix:
    arr = check_array(y, 'y')
    if arr.ndim == 2:
        return Matrix(arr)
    return column_vector(arr)
