"""
Exception hierarchy for ratingfit.

All exceptions inherit from RatingFitError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Shape errors are raised before any matrix is mutated
"""


class RatingFitError(Exception):
    """Base exception for all ratingfit errors."""
    pass


class ValidationError(RatingFitError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a table is empty or ragged, when a multiply has
    mismatched inner dimensions, or when a non-square matrix is inverted.
    """
    pass


class NumericalError(RatingFitError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but row
    reduction finds fewer pivots than the matrix order.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Number of pivots found by row reduction, if computed
        expected_rank: Rank required for invertibility
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
