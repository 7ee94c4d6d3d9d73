"""
Linear regression.

Public API:
    fit(X, y, ...) -> LinearSolution

The fit() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from ratingfit.regression import fit
    >>> result = fit(X, y, labels=['hgt', 'stre'])
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from ratingfit.regression.design import Design
from ratingfit.regression.solution import LinearSolution, LinearParams
from ratingfit.regression.solvers import fit

__all__ = [
    "fit",
    "Design",
    "LinearSolution",
    "LinearParams",
]
