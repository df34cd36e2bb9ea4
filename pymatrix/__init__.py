"""
PyMatrix: immutable dense matrices for Python.

A small value type over numpy float64 arrays with validated construction,
scalar and matrix arithmetic, and shape-checked elementwise operations.

Submodules:
    matrix: The Matrix value type
    core: Exceptions, warnings, validators and tolerance tiers
"""

__version__ = "0.1.0"

from pymatrix.matrix import Matrix
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
from pymatrix.core.tolerances import ToleranceTier, EXACT, CPU_FP64, LOOSE

__all__ = [
    "__version__",
    "Matrix",
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
]
