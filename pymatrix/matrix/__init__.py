"""
Dense matrix module.

Public API:
    Matrix                  - Immutable dense float64 matrix
    Matrix.times(x)         - Scalar multiple or matrix product
    Matrix.div(x)           - Scalar quotient or sum-of-quotients
    Matrix.plus(m)          - Elementwise sum
    Matrix.minus(m)         - Elementwise difference
    Matrix.row(i)           - Row access
    Matrix.col(i, j)        - Element access
"""

from pymatrix.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
