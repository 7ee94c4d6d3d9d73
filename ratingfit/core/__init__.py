"""
Core infrastructure for ratingfit.

Shared abstractions, validators and numeric kernels used by the
regression and ratings domains.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, Matrix and the normal-equations solver
"""

from ratingfit.core.protocols import Backend
from ratingfit.core.result import Result
from ratingfit.core.exceptions import (
    RatingFitError,
    ValidationError,
    ShapeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "RatingFitError",
    "ValidationError",
    "ShapeError",
    "NumericalError",
    "SingularMatrixError",
]
