"""
Regression Design.

Design holds a validated design matrix X, response y and the predictor
labels. Labels travel with the design because the engine itself carries
no column names; coefficients are read back against them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ratingfit.core.exceptions import ShapeError
from ratingfit.core.compute.linalg.matrix import Matrix, column_vector
from ratingfit.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_1d,
    check_consistent_length,
    check_min_samples,
)

INTERCEPT_LABEL = "(Intercept)"


@dataclass(frozen=True)
class Design:
    """
    Regression design specification.

    Immutable after construction.

    Construction:
        Design.from_arrays(X, y)
        Design.from_arrays(X, y, labels=['hgt', 'stre'])
        Design.from_arrays(X, y, add_intercept=True)   # prepends ones
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int
    _labels: tuple[str, ...]
    _has_intercept: bool = False

    @classmethod
    def from_arrays(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        *,
        labels: Sequence[str] | None = None,
        add_intercept: bool = False,
    ) -> Design:
        """
        Build Design directly from arrays.

        Args:
            X: Design matrix (n x p), or a single predictor (n,)
            y: Response (n,) or (n x 1)
            labels: One name per column of X. Defaults to x0..x{p-1}.
            add_intercept: Prepend a column of ones labelled '(Intercept)'

        Raises:
            ShapeError: If shapes are inconsistent or labels don't match p
            ValidationError: If data is non-numeric, non-finite, or n < p
        """
        X_arr = check_array(X, 'X').astype(np.float64, copy=False)
        y_arr = check_array(y, 'y').astype(np.float64, copy=False)
        return cls._build(X_arr, y_arr, labels, add_intercept)

    @classmethod
    def _build(
        cls,
        X: NDArray,
        y: NDArray,
        labels: Sequence[str] | None,
        add_intercept: bool,
    ) -> Design:
        """Internal builder with validation."""
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()

        check_2d(X, 'X')
        check_1d(y, 'y')
        check_finite(X, 'X')
        check_finite(y, 'y')
        check_consistent_length(X, y, names=('X', 'y'))

        if X.shape[1] == 0:
            raise ShapeError("X: no predictor columns")

        if labels is None:
            names = tuple(f"x{j}" for j in range(X.shape[1]))
        else:
            names = tuple(str(label) for label in labels)
            if len(names) != X.shape[1]:
                raise ShapeError(
                    f"labels: got {len(names)} labels for {X.shape[1]} columns of X"
                )

        if add_intercept:
            X = np.column_stack([np.ones(X.shape[0]), X])
            names = (INTERCEPT_LABEL,) + names

        n, p = X.shape
        check_min_samples(X, p, 'X')

        return cls(
            _X=X, _y=y, _n=n, _p=p, _labels=names, _has_intercept=add_intercept,
        )

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p)."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of predictors (including the intercept, if added)."""
        return self._p

    @property
    def labels(self) -> tuple[str, ...]:
        """Predictor names, in column order."""
        return self._labels

    @property
    def has_intercept(self) -> bool:
        """Whether column 0 is the ones column added by add_intercept."""
        return self._has_intercept

    def as_matrices(self) -> tuple[Matrix, Matrix]:
        """X and y as Matrix instances for the normal-equations engine."""
        return Matrix(self._X), column_vector(self._y)
