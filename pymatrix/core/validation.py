"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except real numbers to float64)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from numbers import Integral, Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionMismatchError,
    MatrixIndexError,
    ShapeError,
    ShapeMismatchError,
    ValidationError,
)


def _to_float(value: Real, label: str) -> float:
    try:
        return float(value)
    except OverflowError:
        raise ValidationError(
            f"{label}: {type(value).__name__} value is outside the float64 range"
        ) from None


def _check_array_grid(array: np.ndarray, name: str) -> NDArray[np.floating[Any]]:
    if array.ndim != 2:
        raise ShapeError(
            f"{name}: not a valid matrix, expected 2D array, got {array.ndim}D "
            f"with shape {array.shape}"
        )
    if array.dtype == object:
        raise ValidationError(
            f"{name}: object dtype, indicating mixed types or non-numeric data"
        )
    if np.issubdtype(array.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {array.dtype}, expected real data")
    if not np.issubdtype(array.dtype, np.number) and array.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {array.dtype}, expected numeric data"
        )
    if array.shape[0] == 0:
        return np.empty((0, 0), dtype=np.float64)
    return np.array(array, dtype=np.float64, copy=True)


def check_grid(grid: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a grid of numbers and convert it to a fresh float64 array.

    The reference row length is the length of the first row (0 when the
    grid has no rows). Every row must match it.

    Args:
        grid: Sequence of row sequences, or a 2D numpy array
        name: Parameter name for error messages

    Returns:
        Newly allocated 2D float64 array. A grid with no rows gives
        shape (0, 0).

    Raises:
        ShapeError: If rows have inconsistent lengths or the grid is not 2D
        ValidationError: If the grid is not a sequence or holds non-real values,
            or a value lies outside the float64 range
    """
    if isinstance(grid, np.ndarray):
        return _check_array_grid(grid, name)

    if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(grid).__name__}"
        )

    rows = list(grid)
    if not rows:
        return np.empty((0, 0), dtype=np.float64)

    expected = None
    values = []
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
            raise ShapeError(
                f"{name}: not a valid matrix, row {i} is {type(row).__name__}, "
                f"expected a sequence",
                row_index=i,
            )
        if expected is None:
            expected = len(row)
        if len(row) != expected:
            raise ShapeError(
                f"{name}: not a valid matrix, row {i} has length {len(row)}, "
                f"expected {expected}",
                row_index=i,
                expected_length=expected,
                actual_length=len(row),
            )
        converted = []
        for j, value in enumerate(row):
            if not isinstance(value, Real):
                raise ValidationError(
                    f"{name}: entry ({i}, {j}) is {type(value).__name__}, "
                    f"expected a real number"
                )
            converted.append(_to_float(value, f"{name}: entry ({i}, {j})"))
        values.append(converted)

    if expected == 0:
        return np.empty((len(rows), 0), dtype=np.float64)
    return np.array(values, dtype=np.float64)


def check_real_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real number and return it as a Python float.

    Args:
        value: Candidate scalar
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not a real number or overflows float64
    """
    if not isinstance(value, Real):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )
    return _to_float(value, name)


def check_size(value: Any, name: str) -> int:
    """
    Verify value is a non-negative integer dimension.

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify index lies in 0..bound-1.

    Negative indices are rejected; no wrap-around from the end is applied.

    Args:
        index: Candidate index
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Raises:
        MatrixIndexError: If index is not an integer or is out of range
    """
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise MatrixIndexError(
            f"{name}: expected an integer index, got {type(index).__name__}",
            index=index,
            bound=bound,
        )
    if not 0 <= index < bound:
        raise MatrixIndexError(
            f"{name}: index {index} out of range [0, {bound})",
            index=index,
            bound=bound,
        )
    return int(index)


def check_same_shape(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shape.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if left_shape != right_shape:
        raise ShapeMismatchError(
            f"{operation}: matrices must be the same size, "
            f"got {left_shape} and {right_shape}",
            left_shape=left_shape,
            right_shape=right_shape,
        )


def check_inner_dimension(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the left column count equals the right row count.

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left_shape[1] != right_shape[0]:
        raise DimensionMismatchError(
            f"{operation}: inner dimensions do not agree, "
            f"{left_shape} and {right_shape} ({left_shape[1]} != {right_shape[0]})",
            left_shape=left_shape,
            right_shape=right_shape,
        )
