"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. MatrixIndexError additionally inherits from the
builtin IndexError so ordinary Python index handling keeps working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric
    entries, unsupported operand types, negative sizes).
    """
    pass


class ShapeError(ValidationError):
    """
    Grid is not a valid matrix.

    Raised at construction when the rows of the input grid have
    inconsistent lengths, or the input is not two-dimensional.

    Attributes:
        row_index: Index of the first offending row, if known
        expected_length: Reference row length (taken from the first row)
        actual_length: Length of the offending row
    """

    def __init__(
        self,
        message: str,
        row_index: int | None = None,
        expected_length: int | None = None,
        actual_length: int | None = None
    ):
        super().__init__(message)
        self.row_index = row_index
        self.expected_length = expected_length
        self.actual_length = actual_length


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible for an operation.

    Attributes:
        left_shape: Shape of the left-hand operand
        right_shape: Shape of the right-hand operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class ShapeMismatchError(DimensionError):
    """
    Elementwise operation on matrices of different shape.

    Raised by plus/minus before any element is touched.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Inner dimensions do not agree.

    Raised by the matrix paths of times/div when the left operand's column
    count differs from the right operand's row count.
    """
    pass


class MatrixIndexError(PyMatrixError, IndexError):
    """
    Row or column index out of range.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound of the valid range
    """

    def __init__(
        self,
        message: str,
        index: object = None,
        bound: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
