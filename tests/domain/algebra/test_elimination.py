import pytest
from vecmat.domain.algebra.elimination import gauss_jordan_reduce, right_triangularize


class TestRightTriangularize:
    def test_does_not_modify_input(self):
        rows = [[0.0, 1.0], [1.0, 1.0]]
        right_triangularize(rows)
        assert rows == [[0.0, 1.0], [1.0, 1.0]]

    def test_row_addition_fixes_zero_pivot(self):
        assert right_triangularize([[0, 2, 1], [3, 1, 1], [1, 1, 1]])[0] == [3, 3, 2]

    def test_skips_column_without_pivot(self):
        result = right_triangularize([[0, 1, 2], [0, 3, 4]])
        assert result == [[0, 1, 2], [0, 3, 4]]

    def test_tall_matrix(self):
        result = right_triangularize([[1, 2], [3, 4], [5, 6]])
        assert result[1][0] == 0.0
        assert result[2][0] == 0.0
        assert result[2][1] == 0.0
        assert result[1][1] == pytest.approx(-2.0)

    def test_wide_matrix(self):
        result = right_triangularize([[2, 4, 6, 8], [1, 3, 5, 7]])
        assert result == [[2, 4, 6, 8], [0.0, 1.0, 2.0, 3.0]]


class TestGaussJordanReduce:
    def test_returns_right_half(self):
        inverse = gauss_jordan_reduce([[2, 1, 1, 0], [1, 1, 0, 1]], order=2)
        assert inverse[0] == pytest.approx([1.0, -1.0])
        assert inverse[1] == pytest.approx([-1.0, 2.0])

    def test_diagonal_matrix(self):
        inverse = gauss_jordan_reduce([[4, 0, 1, 0], [0, 0.5, 0, 1]], order=2)
        assert inverse == [[0.25, 0.0], [0.0, 2.0]]
