"""
Tests for Matrix accessors, rendering and equality.
"""

import numpy as np
import pytest

from pymatrix import CPU_FP64, EXACT, Matrix, MatrixIndexError, ValidationError


class TestRow:

    def test_returns_stored_row(self, square):
        np.testing.assert_array_equal(square.row(0), [1.0, 2.0])
        np.testing.assert_array_equal(square.row(1), [3.0, 4.0])

    def test_row_is_read_only(self, square):
        with pytest.raises(ValueError):
            square.row(0)[0] = 99.0

    @pytest.mark.parametrize("index", [2, 10, -1])
    def test_out_of_range(self, square, index):
        with pytest.raises(MatrixIndexError):
            square.row(index)

    def test_out_of_range_is_index_error(self, square):
        with pytest.raises(IndexError):
            square.row(5)

    def test_empty_matrix_has_no_rows(self):
        with pytest.raises(IndexError):
            Matrix([]).row(0)


class TestCol:

    def test_single_value(self, square):
        assert square.col(0, 1) == 2.0
        assert square.col(1, 0) == 3.0

    def test_returns_python_float(self, square):
        assert type(square.col(0, 0)) is float

    def test_agrees_with_row(self, random_int_matrix):
        m = random_int_matrix(3, 4)
        for i in range(3):
            for j in range(4):
                assert m.col(i, j) == m.row(i)[j]

    @pytest.mark.parametrize("i, j", [(2, 0), (0, 2), (-1, 0), (0, -1)])
    def test_out_of_range(self, square, i, j):
        with pytest.raises(MatrixIndexError):
            square.col(i, j)

    def test_zero_column_matrix(self):
        with pytest.raises(MatrixIndexError, match="col_index"):
            Matrix([[], []]).col(0, 0)


class TestRawValue:

    def test_exposes_grid(self, square):
        raw = square.raw_value()
        assert isinstance(raw, np.ndarray)
        np.testing.assert_array_equal(raw, [[1, 2], [3, 4]])

    def test_aliases_storage(self, square):
        assert square.raw_value() is square.raw_value()

    def test_read_only(self, square):
        with pytest.raises(ValueError):
            square.raw_value()[0, 0] = 99.0

    def test_tolist_is_copy(self, square):
        grid = square.tolist()
        grid[0][0] = 99.0
        assert square.col(0, 0) == 1.0


class TestToString:

    def test_rendering(self):
        assert Matrix([[1, 2], [3, 4]]).to_string() == "1.0, 2.0\n3.0, 4.0"

    def test_str_matches_to_string(self, square):
        assert str(square) == square.to_string()

    def test_no_rounding(self):
        assert Matrix([[1 / 3]]).to_string() == str(1 / 3)

    def test_structure(self, rng):
        data = rng.standard_normal((3, 4))
        m = Matrix(data)
        lines = m.to_string().split("\n")
        assert len(lines) == 3
        for i, line in enumerate(lines):
            assert line.split(", ") == [str(v) for v in m.row(i).tolist()]

    def test_empty(self):
        assert Matrix([]).to_string() == ""

    def test_special_values(self):
        assert Matrix([[np.inf, np.nan]]).to_string() == "inf, nan"


class TestEquality:

    def test_equal(self):
        assert Matrix([[1, 2]]) == Matrix([[1.0, 2.0]])

    def test_unequal_values(self):
        assert Matrix([[1, 2]]) != Matrix([[1, 3]])

    def test_unequal_shape(self):
        assert Matrix([[1, 2]]) != Matrix([[1], [2]])

    def test_not_equal_to_list(self):
        assert Matrix([[1, 2]]) != [[1, 2]]

    def test_hash_consistent(self):
        assert hash(Matrix([[1, 2]])) == hash(Matrix([[1.0, 2.0]]))

    def test_hash_signed_zero(self):
        a = Matrix([[0.0]])
        b = Matrix([[-0.0]])
        assert a == b
        assert hash(a) == hash(b)

    def test_usable_in_set(self):
        assert len({Matrix([[1]]), Matrix([[1.0]]), Matrix([[2]])}) == 2


class TestAllclose:

    def test_within_tolerance(self):
        a = Matrix([[1.0, 2.0]])
        b = Matrix([[1.0 + 1e-14, 2.0]])
        assert a.allclose(b)

    def test_exact_tier(self):
        a = Matrix([[1.0, 2.0]])
        b = Matrix([[1.0 + 1e-14, 2.0]])
        assert not a.allclose(b, tolerance=EXACT)

    def test_tier_by_name(self):
        a = Matrix([[1.0]])
        b = Matrix([[1.0 + 1e-9]])
        assert not a.allclose(b, tolerance='cpu_fp64')
        assert a.allclose(b, tolerance='loose')

    def test_shape_mismatch_is_false(self):
        assert not Matrix([[1, 2]]).allclose(Matrix([[1], [2]]), tolerance=CPU_FP64)

    def test_unknown_tier(self, square):
        with pytest.raises(ValidationError):
            square.allclose(square, tolerance='nope')
