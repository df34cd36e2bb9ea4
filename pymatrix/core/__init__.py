"""
Core infrastructure for PyMatrix.

Key components:
    exceptions: Exception hierarchy
    diagnostics: Warning categories for non-fatal numerical anomalies
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    ShapeError,
    DimensionError,
    ShapeMismatchError,
    DimensionMismatchError,
    MatrixIndexError,
)
from pymatrix.core.diagnostics import PyMatrixWarning, NonFiniteResultWarning
from pymatrix.core.tolerances import (
    ToleranceTier,
    EXACT,
    CPU_FP64,
    LOOSE,
    select_tolerance,
)

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "ShapeError",
    "DimensionError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "MatrixIndexError",
    # Warnings
    "PyMatrixWarning",
    "NonFiniteResultWarning",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "LOOSE",
    "select_tolerance",
]
