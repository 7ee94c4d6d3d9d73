"""
Linear algebra kernels for ratingfit.

All functions follow these conventions:
    - Matrix stores float64 entries in a NumPy array
    - transpose/multiply allocate; reduce/inverse work in place
    - Errors are raised immediately with clear messages

Submodules:
    matrix: Matrix type, identity and column vector constructors
    normal_equations: OLS coefficients via (X'X)⁻¹ X'y
"""

from ratingfit.core.compute.linalg.matrix import (
    Matrix,
    identity,
    column_vector,
)
from ratingfit.core.compute.linalg.normal_equations import regression_coefficients

__all__ = [
    "Matrix",
    "identity",
    "column_vector",
    "regression_coefficients",
]
