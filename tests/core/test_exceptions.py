"""
Tests for the ratingfit exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via RatingFitError)
    - ShapeError is a ValidationError, SingularMatrixError a NumericalError
    - Diagnostic attributes on SingularMatrixError
"""

import pytest

from ratingfit.core.exceptions import (
    NumericalError,
    RatingFitError,
    ShapeError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via RatingFitError."""

    def test_validation_error_is_ratingfit_error(self):
        with pytest.raises(RatingFitError):
            raise ValidationError("bad input")

    def test_shape_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise ShapeError("incompatible sizes")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)

    def test_shape_error_is_not_numerical_error(self):
        assert not isinstance(ShapeError("x"), NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "X'X is singular",
            matrix_name="X'X",
            condition_number=1e18,
            rank=14,
            expected_rank=15,
        )
        assert str(err) == "X'X is singular"
        assert err.matrix_name == "X'X"
        assert err.condition_number == 1e18
        assert err.rank == 14
        assert err.expected_rank == 15

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.rank is None
        assert err.expected_rank is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="A", rank=1)
        assert exc_info.value.matrix_name == "A"
        assert exc_info.value.rank == 1
