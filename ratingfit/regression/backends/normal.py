"""
Normal-equations backend for linear regression.

Solves β = (X'X)⁻¹ X'y with the Matrix engine's Gauss-Jordan
inversion. This is the default backend: rating designs are small and
well-conditioned, and the computation stays inspectable end to end.
"""

from typing import Any

import numpy as np

from ratingfit.core.result import Result
from ratingfit.core.compute.timing import Timer
from ratingfit.core.compute.tolerances import CONDITION_WARNING_THRESHOLD
from ratingfit.core.compute.linalg.normal_equations import regression_coefficients
from ratingfit.regression.design import Design
from ratingfit.regression.solution import LinearParams


class NormalEquationsBackend:
    """
    CPU backend using Gauss-Jordan inversion of X'X.

    Implements the Backend protocol for Design -> LinearParams.

    Squares the condition number of X, so badly conditioned designs
    produce a warning in the Result (not an error: the pivot search
    already refuses genuinely singular X'X).
    """

    def __init__(self, tol: float | None = None):
        """
        Args:
            tol: Pivot tolerance for the inversion (None = scale-aware,
                 0.0 = exact-zero comparison)
        """
        self._tol = tol

    @property
    def name(self) -> str:
        return 'cpu_normal'

    def solve(self, design: Design) -> Result[LinearParams]:
        """
        Solve OLS via the normal equations.

        Raises:
            SingularMatrixError: If X'X is singular
        """
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y
        n, p = design.n, design.p

        with timer.section('matrix_construction'):
            x_mat, y_mat = design.as_matrices()

        with timer.section('solve'):
            beta = regression_coefficients(x_mat, y_mat, tol=self._tol)
            coefficients = beta.to_numpy().ravel()

        with timer.section('residuals'):
            fitted_values = X @ coefficients
            residuals = y - fitted_values

        with timer.section('statistics'):
            rss = float(residuals @ residuals)
            tss = float(np.sum((y - np.mean(y)) ** 2))

        with timer.section('conditioning'):
            condition_number = float(np.linalg.cond(X)) ** 2

        timer.stop()

        warnings: tuple[str, ...] = ()
        if condition_number > CONDITION_WARNING_THRESHOLD:
            warnings = (
                f"X'X is ill-conditioned (condition number {condition_number:.3g} > "
                f"{CONDITION_WARNING_THRESHOLD:.0e}); coefficients may be inaccurate. "
                f"Consider backend='cpu_qr'.",
            )

        params = LinearParams(
            coefficients=coefficients,
            residuals=residuals,
            fitted_values=fitted_values,
            rss=rss,
            tss=tss,
            rank=p,
            df_residual=n - p,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'rank': p,
            'condition_number': condition_number,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )
