"""
ratingfit: rating-weight regression for league simulations.

A dense matrix engine (transpose, multiply, Gauss-Jordan reduction,
inversion) and the ordinary least squares fits built on it, used to
weigh player ratings against observed performance.

Submodules:
    core: Exceptions, validation, Result envelope, Matrix engine
    regression: OLS fits with labelled coefficients
    ratings: PER-on-ratings weight estimation from player records
"""

__version__ = "0.1.0"

from ratingfit.core.compute.linalg import (
    Matrix,
    identity,
    column_vector,
    regression_coefficients,
)
from ratingfit.core.exceptions import ShapeError, SingularMatrixError
from ratingfit import regression
from ratingfit import ratings

__all__ = [
    "__version__",
    "Matrix",
    "identity",
    "column_vector",
    "regression_coefficients",
    "ShapeError",
    "SingularMatrixError",
    "regression",
    "ratings",
]
