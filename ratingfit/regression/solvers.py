"""
Solver dispatch for regression.

This module provides the fit() function (public API) and backend selection.
"""

from collections.abc import Sequence
from typing import Literal
import warnings

from numpy.typing import ArrayLike

from ratingfit.core.protocols import Backend
from ratingfit.regression.design import Design
from ratingfit.regression.solution import LinearSolution, LinearParams
from ratingfit.regression.backends.normal import NormalEquationsBackend
from ratingfit.regression.backends.cpu import CPUQRBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'normal', 'cpu_normal', 'cpu_qr']


def fit(
    X: ArrayLike | Design,
    y: ArrayLike | None = None,
    *,
    labels: Sequence[str] | None = None,
    add_intercept: bool = False,
    backend: BackendChoice = 'auto',
    tol: float | None = None,
) -> LinearSolution:
    """
    Fit a linear regression model.

    Solves the ordinary least squares problem:
        min_β ||y - Xβ||²

    All input validation, backend selection, and result wrapping
    happens here.

    Args:
        X: Design matrix (n x p), or a prebuilt Design
        y: Response vector (n,). Required unless X is a Design.
        labels: Predictor names, one per column of X
        add_intercept: Prepend a column of ones labelled '(Intercept)'
        backend: Computational backend to use:
            - 'auto': Normal equations through the Matrix engine
            - 'normal' / 'cpu_normal': Same, explicitly
            - 'cpu_qr': QR decomposition reference (LAPACK)
        tol: Pivot tolerance for the normal-equations backend. The QR
             backend has its own rank cutoff and rejects it.

    Returns:
        LinearSolution with coefficients, diagnostics, and summary methods

    Raises:
        ValidationError: If inputs are invalid
        ValueError: If backend is unknown, or tol is given with 'cpu_qr'
        ShapeError: If X and y have inconsistent dimensions
        SingularMatrixError: If X is rank-deficient

    Example:
        >>> import numpy as np
        >>> from ratingfit.regression import fit
        >>>
        >>> X = np.random.randn(100, 2)
        >>> y = X @ [3, -2]
        >>>
        >>> result = fit(X, y, labels=['hgt', 'spd'])
        >>> result.named_coefficients()
        {'hgt': 3.0, 'spd': -2.0}
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(X, Design):
        design = X
    else:
        if y is None:
            raise ValueError("y required when X is not a Design")
        design = Design.from_arrays(X, y, labels=labels, add_intercept=add_intercept)

    # === Select Backend ===
    backend_impl = _get_backend(backend, tol)

    # === Solve ===
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    # === Wrap and Return ===
    return LinearSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice, tol: float | None) -> Backend[Design, LinearParams]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified, or tol given with 'cpu_qr'
    """
    if choice in ('auto', 'normal', 'cpu_normal'):
        return NormalEquationsBackend(tol=tol)

    elif choice == 'cpu_qr':
        if tol is not None:
            raise ValueError(
                f"tol={tol!r} applies only to the normal-equations backend, not 'cpu_qr'"
            )
        return CPUQRBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
