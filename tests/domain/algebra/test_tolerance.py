import pytest
from vecmat.domain.algebra import tolerance
from vecmat.domain.algebra.constants import PRECISION
from vecmat.domain.algebra.matrix import Matrix


@pytest.fixture
def restore_precision():
    previous = tolerance.get_precision()
    yield
    tolerance.configure_precision(previous)


class TestTolerance:
    def test_default_precision(self):
        assert PRECISION == 1e-6
        assert tolerance.get_precision() == PRECISION

    def test_resolve_tolerance(self):
        assert tolerance.resolve_tolerance(None) == PRECISION
        assert tolerance.resolve_tolerance(0.5) == 0.5

    def test_is_zero(self):
        assert tolerance.is_zero(1e-7)
        assert tolerance.is_zero(-1e-7)
        assert not tolerance.is_zero(1e-5)
        assert tolerance.is_zero(1e-5, tolerance=1e-4)

    def test_are_close(self):
        assert tolerance.are_close(1.0, 1.0 + 5e-7)
        assert not tolerance.are_close(1.0, 1.001)
        assert tolerance.are_close(1.0, 1.001, tolerance=0.01)

    def test_configure_precision(self, restore_precision):
        previous = tolerance.configure_precision(0.1)
        assert previous == PRECISION
        assert tolerance.get_precision() == 0.1
        assert Matrix.identity(2).is_close_to([[1.05, 0], [0, 1]])

    @pytest.mark.parametrize("value", [0, -1e-6, float("nan"), float("inf")])
    def test_configure_precision_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            tolerance.configure_precision(value)
        assert tolerance.get_precision() == PRECISION

    def test_explicit_tolerance_wins_over_default(self, restore_precision):
        tolerance.configure_precision(0.1)
        assert not Matrix.identity(2).is_close_to([[1.05, 0], [0, 1]], tolerance=0.01)
