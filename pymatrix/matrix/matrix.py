"""
Matrix: immutable dense two-dimensional float64 matrix.

Wraps a validated, read-only numpy array and exposes scalar/matrix
multiplication and division, elementwise addition and subtraction,
shape introspection, element access and string rendering. Every
arithmetic operation returns a new Matrix built through the validating
constructor; operands are never modified.
"""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Real
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.diagnostics import warn_if_nonfinite
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.tolerances import CPU_FP64, ToleranceTier, select_tolerance
from pymatrix.core.validation import (
    check_grid,
    check_index,
    check_inner_dimension,
    check_real_scalar,
    check_same_shape,
    check_size,
)
from pymatrix.matrix import _kernels

# warn_if_nonfinite -> private arithmetic helper -> public method/operator -> caller
_CALLER_STACKLEVEL = 4


class Matrix:
    """
    Immutable dense matrix of float64 values.

    Construction:
        Matrix([[1, 2], [3, 4]])
        Matrix.from_array(np.ones((3, 2)))
        Matrix.zeros(2, 3)
        Matrix.identity(4)

    The grid must be rectangular: the first row fixes the column count and
    every other row must match it. An empty grid is a (0, 0) matrix.

    The stored array is copied from the input and flagged read-only, so a
    Matrix can be shared freely, including across threads.
    """

    __slots__ = ('_grid',)

    # Make numpy defer to our reflected operators (np.float64(2) * m)
    __array_ufunc__ = None

    def __init__(self, grid: ArrayLike | Matrix):
        if isinstance(grid, Matrix):
            grid = grid._grid
        data = check_grid(grid, 'grid')
        data.flags.writeable = False
        self._grid = data

    @classmethod
    def from_array(cls, data: ArrayLike) -> Matrix:
        """
        Build a Matrix from array-like data.

        Parameters
        ----------
        data : array-like
            2D data. Can be a numpy array, pandas DataFrame, or nested
            sequence. 1D input is reshaped to a single column (n, 1).
        """
        if hasattr(data, 'columns') and hasattr(data, 'values'):
            data = np.asarray(data.values)
        elif not isinstance(data, (np.ndarray, Sequence)):
            data = np.asarray(data)

        if isinstance(data, np.ndarray):
            if data.ndim == 1:
                data = data.reshape(-1, 1)
        elif data and all(isinstance(v, Real) for v in data):
            data = [[v] for v in data]

        return cls(data)

    @classmethod
    def zeros(cls, n_rows: int, n_cols: int) -> Matrix:
        """Zero-filled matrix of the given shape."""
        n_rows = check_size(n_rows, 'n_rows')
        n_cols = check_size(n_cols, 'n_cols')
        return cls(np.zeros((n_rows, n_cols), dtype=np.float64))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        n = check_size(n, 'n')
        return cls(np.eye(n, dtype=np.float64))

    # --- Shape ---

    @property
    def shape(self) -> tuple[int, int]:
        """(row count, column count). A matrix with no rows is (0, 0)."""
        n_rows, n_cols = self._grid.shape
        return (int(n_rows), int(n_cols))

    @property
    def n_rows(self) -> int:
        """Number of rows."""
        return self.shape[0]

    @property
    def n_cols(self) -> int:
        """Number of columns."""
        return self.shape[1]

    def same_shape(self, other: Matrix) -> bool:
        """True if other is a Matrix with exactly this shape."""
        return isinstance(other, Matrix) and self.shape == other.shape

    # --- Multiplication ---

    def times(self, operand: float | Matrix) -> Matrix:
        """
        Multiply by a scalar or a matrix.

        A real scalar scales every element. A Matrix operand gives the
        matrix product: (m x n) times (n x p) is (m x p) with
        result[i][j] = sum_k self[i][k] * operand[k][j].

        Warns:
            NonFiniteResultWarning: If finite inputs overflowed to Inf/NaN

        Raises:
            DimensionMismatchError: If self.n_cols != operand.n_rows
            ValidationError: If operand is neither a real number nor a Matrix
        """
        if isinstance(operand, Matrix):
            return self._product(operand, _CALLER_STACKLEVEL)
        if isinstance(operand, Real):
            return self._scaled(operand, _CALLER_STACKLEVEL)
        raise ValidationError(
            f"times: expected a real scalar or Matrix, got {type(operand).__name__}"
        )

    def times_scalar(self, scalar: float) -> Matrix:
        """Multiply every element by scalar."""
        return self._scaled(scalar, _CALLER_STACKLEVEL)

    def times_matrix(self, other: Matrix) -> Matrix:
        """Matrix product self . other."""
        return self._product(other, _CALLER_STACKLEVEL)

    # --- Division ---

    def div(self, operand: float | Matrix) -> Matrix:
        """
        Divide by a scalar or a matrix.

        A real scalar divides every element; dividing by zero gives Inf/NaN
        under IEEE rules rather than raising. A Matrix operand uses the
        product index pattern with division in place of multiplication:
        result[i][j] = sum_k self[i][k] / operand[k][j]. No inverse is
        computed.

        Warns:
            NonFiniteResultWarning: If finite inputs produced Inf/NaN

        Raises:
            DimensionMismatchError: If self.n_cols != operand.n_rows
            ValidationError: If operand is neither a real number nor a Matrix
        """
        if isinstance(operand, Matrix):
            return self._quotient_sum(operand, _CALLER_STACKLEVEL)
        if isinstance(operand, Real):
            return self._quotient(operand, _CALLER_STACKLEVEL)
        raise ValidationError(
            f"div: expected a real scalar or Matrix, got {type(operand).__name__}"
        )

    def div_scalar(self, scalar: float) -> Matrix:
        """Divide every element by scalar."""
        return self._quotient(scalar, _CALLER_STACKLEVEL)

    def div_matrix(self, other: Matrix) -> Matrix:
        """Sum-of-quotients counterpart of times_matrix()."""
        return self._quotient_sum(other, _CALLER_STACKLEVEL)

    # --- Elementwise ---

    def plus(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises:
            ShapeMismatchError: If the shapes differ
        """
        return self._sum(other, _CALLER_STACKLEVEL)

    def minus(self, other: Matrix) -> Matrix:
        """
        Elementwise difference.

        Raises:
            ShapeMismatchError: If the shapes differ
        """
        return self._difference(other, _CALLER_STACKLEVEL)

    # --- Arithmetic helpers ---
    # Every public method and operator calls exactly one of these directly,
    # so a fixed stacklevel lands the warning on the user's line.

    def _scaled(self, scalar: float, stacklevel: int) -> Matrix:
        s = check_real_scalar(scalar, 'scalar')
        result = _kernels.scale(self._grid, s)
        warn_if_nonfinite(
            result, self._grid, np.asarray(s), operation='times', stacklevel=stacklevel
        )
        return Matrix(result)

    def _product(self, other: Matrix, stacklevel: int) -> Matrix:
        other = _check_matrix(other, 'times')
        check_inner_dimension(self.shape, other.shape, 'times')
        result = _kernels.product(self._grid, other._grid)
        warn_if_nonfinite(
            result, self._grid, other._grid, operation='times', stacklevel=stacklevel
        )
        return Matrix(result)

    def _quotient(self, scalar: float, stacklevel: int) -> Matrix:
        s = check_real_scalar(scalar, 'scalar')
        result = _kernels.divide_scalar(self._grid, s)
        warn_if_nonfinite(
            result, self._grid, np.asarray(s), operation='div', stacklevel=stacklevel
        )
        return Matrix(result)

    def _quotient_sum(self, other: Matrix, stacklevel: int) -> Matrix:
        other = _check_matrix(other, 'div')
        check_inner_dimension(self.shape, other.shape, 'div')
        result = _kernels.quotient_sum(self._grid, other._grid)
        warn_if_nonfinite(
            result, self._grid, other._grid, operation='div', stacklevel=stacklevel
        )
        return Matrix(result)

    def _sum(self, other: Matrix, stacklevel: int) -> Matrix:
        other = _check_matrix(other, 'plus')
        check_same_shape(self.shape, other.shape, 'plus')
        result = _kernels.add(self._grid, other._grid)
        warn_if_nonfinite(
            result, self._grid, other._grid, operation='plus', stacklevel=stacklevel
        )
        return Matrix(result)

    def _difference(self, other: Matrix, stacklevel: int) -> Matrix:
        other = _check_matrix(other, 'minus')
        check_same_shape(self.shape, other.shape, 'minus')
        result = _kernels.subtract(self._grid, other._grid)
        warn_if_nonfinite(
            result, self._grid, other._grid, operation='minus', stacklevel=stacklevel
        )
        return Matrix(result)

    # --- Access ---

    def row(self, index: int) -> NDArray[np.floating[Any]]:
        """
        Row at index as a read-only 1D array.

        Raises:
            MatrixIndexError: If index is outside 0..n_rows-1
        """
        i = check_index(index, self.n_rows, 'row')
        return self._grid[i]

    def col(self, row_index: int, col_index: int) -> float:
        """
        Single value at (row_index, col_index).

        Raises:
            MatrixIndexError: If either index is out of range
        """
        i = check_index(row_index, self.n_rows, 'row_index')
        j = check_index(col_index, self.n_cols, 'col_index')
        return float(self._grid[i, j])

    def raw_value(self) -> NDArray[np.floating[Any]]:
        """The underlying grid. Read-only; writes raise ValueError."""
        return self._grid

    def tolist(self) -> list[list[float]]:
        """Fresh nested list copy of the grid."""
        return self._grid.tolist()

    # --- Comparison ---

    def allclose(
        self,
        other: Matrix,
        tolerance: ToleranceTier | str = CPU_FP64,
    ) -> bool:
        """
        Approximate elementwise equality.

        Parameters
        ----------
        other : Matrix
        tolerance : ToleranceTier or str
            Tier (or tier name) giving rtol/atol. Default CPU_FP64.

        Returns
        -------
        bool
            False when the shapes differ.
        """
        other = _check_matrix(other, 'allclose')
        if isinstance(tolerance, str):
            tolerance = select_tolerance(tolerance)
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._grid, other._grid, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0 so equal matrices hash equal
        return hash((self.shape, (self._grid + 0.0).tobytes()))

    # --- Operators ---

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Real):
            return self._scaled(other, _CALLER_STACKLEVEL)
        return NotImplemented

    __rmul__ = __mul__

    def __matmul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self._product(other, _CALLER_STACKLEVEL)
        return NotImplemented

    def __truediv__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self._quotient_sum(other, _CALLER_STACKLEVEL)
        if isinstance(other, Real):
            return self._quotient(other, _CALLER_STACKLEVEL)
        return NotImplemented

    def __add__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self._sum(other, _CALLER_STACKLEVEL)
        return NotImplemented

    def __sub__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self._difference(other, _CALLER_STACKLEVEL)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return self._scaled(-1.0, _CALLER_STACKLEVEL)

    # --- Rendering ---

    def to_string(self) -> str:
        """Rows joined by newlines, values within a row joined by ', '."""
        return "\n".join(
            ", ".join(str(value) for value in row) for row in self._grid.tolist()
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Matrix(shape={self.shape})"


def _check_matrix(other: Any, operation: str) -> Matrix:
    if not isinstance(other, Matrix):
        raise ValidationError(
            f"{operation}: expected a Matrix, got {type(other).__name__}"
        )
    return other
