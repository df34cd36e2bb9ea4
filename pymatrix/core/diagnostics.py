"""
Warning categories for PyMatrix.

Non-fatal numerical anomalies are reported through the standard
``warnings`` machinery so callers can filter, escalate or record them
with ``warnings.simplefilter`` / ``pytest.warns``.
"""

import warnings

import numpy as np
from numpy.typing import NDArray
from typing import Any


class PyMatrixWarning(RuntimeWarning):
    """Base warning for all PyMatrix warnings."""
    pass


class NonFiniteResultWarning(PyMatrixWarning):
    """An operation on finite inputs produced Inf or NaN entries."""
    pass


def warn_if_nonfinite(
    result: NDArray[np.floating[Any]],
    *inputs: NDArray[np.floating[Any]],
    operation: str,
    stacklevel: int,
) -> None:
    """
    Emit NonFiniteResultWarning when finite inputs produced non-finite output.

    Inputs that already hold NaN or Inf are expected to propagate them,
    so no warning is raised in that case.

    Args:
        result: Output of the operation
        *inputs: Operand arrays
        operation: Operation name for the message
        stacklevel: Passed to warnings.warn, counted from this function
    """
    if not all(np.all(np.isfinite(a)) for a in inputs):
        return
    non_finite = ~np.isfinite(result)
    if np.any(non_finite):
        n_nan = int(np.sum(np.isnan(result)))
        n_inf = int(np.sum(np.isinf(result)))
        warnings.warn(
            f"{operation}: produced non-finite values ({n_nan} NaN, {n_inf} Inf) "
            f"from finite inputs",
            NonFiniteResultWarning,
            stacklevel=stacklevel,
        )
