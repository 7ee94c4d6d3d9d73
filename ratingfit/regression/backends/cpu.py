"""
QR reference backend for linear regression.

Uses LAPACK QR (through NumPy) and back substitution (SciPy). Does not
square the condition number, so it is the yardstick the normal-equations
backend is validated against.
"""

from typing import Any

import numpy as np
from scipy.linalg import solve_triangular

from ratingfit.core.exceptions import SingularMatrixError
from ratingfit.core.result import Result
from ratingfit.core.compute.timing import Timer
from ratingfit.regression.design import Design
from ratingfit.regression.solution import LinearParams


class CPUQRBackend:
    """
    CPU backend using QR decomposition.

    Implements the Backend protocol for Design -> LinearParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: Design) -> Result[LinearParams]:
        """
        Solve OLS via QR decomposition.

        Algorithm:
            1. X = QR (reduced)
            2. Numerical rank from |diag(R)|
            3. β = R⁻¹ Q'y by back substitution

        Raises:
            SingularMatrixError: If X is rank-deficient
        """
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y
        n, p = design.n, design.p

        with timer.section('qr_decomposition'):
            Q, R = np.linalg.qr(X, mode='reduced')
            diag_R = np.abs(np.diag(R))
            tol = max(X.shape) * np.finfo(X.dtype).eps * diag_R.max()
            rank = int(np.sum(diag_R > tol))

        if rank < p:
            raise SingularMatrixError(
                f"Design matrix is rank-deficient: rank={rank}, expected={p}. "
                f"This indicates perfect multicollinearity.",
                matrix_name='X',
                rank=rank,
                expected_rank=p,
            )

        with timer.section('solve'):
            coefficients = solve_triangular(R, Q.T @ y, lower=False)

        with timer.section('residuals'):
            fitted_values = X @ coefficients
            residuals = y - fitted_values

        with timer.section('statistics'):
            rss = float(residuals @ residuals)
            tss = float(np.sum((y - np.mean(y)) ** 2))

        timer.stop()

        params = LinearParams(
            coefficients=coefficients,
            residuals=residuals,
            fitted_values=fitted_values,
            rss=rss,
            tss=tss,
            rank=rank,
            df_residual=n - rank,
        )

        info: dict[str, Any] = {
            'method': 'qr',
            'rank': rank,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
