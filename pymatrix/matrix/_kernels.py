"""
Numeric kernels behind Matrix arithmetic.

Each kernel takes validated float64 arrays and returns a newly allocated
array; operands are never written to. Shape checks happen in the caller.

numpy floating-point warnings (overflow, divide, invalid) are silenced
here; the caller reports non-finite results once via warn_if_nonfinite().
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def scale(a: NDArray[np.floating[Any]], s: float) -> NDArray[np.floating[Any]]:
    """Multiply every element by s."""
    with np.errstate(all='ignore'):
        return a * s


def divide_scalar(a: NDArray[np.floating[Any]], s: float) -> NDArray[np.floating[Any]]:
    """Divide every element by s, with IEEE results for s == 0."""
    with np.errstate(all='ignore'):
        return a / s


def product(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Matrix product.

    out[i, j] = sum_k a[i, k] * b[k, j] for a (m, n) and b (n, p).
    """
    with np.errstate(all='ignore'):
        return a @ b


def quotient_sum(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Sum of elementwise quotients along the inner dimension.

    out[i, j] = sum_k a[i, k] / b[k, j] for a (m, n) and b (n, p).

    Same index pattern as product() with division in place of
    multiplication. This is not a + b^-1.
    """
    m, n = a.shape
    p = b.shape[1]
    if n == 0:
        return np.zeros((m, p), dtype=np.float64)
    with np.errstate(all='ignore'):
        # (m, n, 1) / (1, n, p) -> (m, n, p)
        quotients = a[:, :, np.newaxis] / b[np.newaxis, :, :]
        return quotients.sum(axis=1)


def add(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Elementwise sum of equally shaped arrays."""
    with np.errstate(all='ignore'):
        return a + b


def subtract(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Elementwise difference of equally shaped arrays."""
    with np.errstate(all='ignore'):
        return a - b
