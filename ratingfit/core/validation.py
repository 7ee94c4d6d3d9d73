"""
Input validation utilities for ratingfit.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ratingfit.core.exceptions import ValidationError, ShapeError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a floating point numpy array.

    Rejects inputs that result in object dtype (mixed types, ragged
    nesting) or any other non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        ShapeError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise ShapeError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_rectangular(table: Any, name: str) -> None:
    """
    Verify a nested sequence is a non-empty table of equal-length rows.

    NumPy arrays are rectangular by construction and only checked for
    emptiness.

    Args:
        table: Nested sequence (rows of entries) or array
        name: Parameter name for error messages

    Raises:
        ShapeError: If the table is empty, has empty rows, or is ragged
    """
    if isinstance(table, np.ndarray):
        if table.size == 0:
            raise ShapeError(f"{name}: empty table with shape {table.shape}")
        return

    if not isinstance(table, Sequence) or isinstance(table, (str, bytes)):
        raise ShapeError(
            f"{name}: expected a sequence of rows, got {type(table).__name__}"
        )
    if len(table) == 0:
        raise ShapeError(f"{name}: empty table, expected at least one row")

    lengths = []
    for i, row in enumerate(table):
        if isinstance(row, np.ndarray):
            lengths.append(row.shape[0] if row.ndim == 1 else -1)
        elif isinstance(row, Sequence) and not isinstance(row, (str, bytes)):
            lengths.append(len(row))
        else:
            raise ShapeError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence of entries"
            )

    if -1 in lengths:
        raise ShapeError(f"{name}: rows must be 1D, got a nested array row")

    if len(set(lengths)) > 1:
        raise ShapeError(
            f"{name}: ragged rows, lengths range from {min(lengths)} to {max(lengths)}"
        )
    if lengths[0] == 0:
        raise ShapeError(f"{name}: rows are empty, expected at least one column")


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        ShapeError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise ShapeError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )
