import pytest
from vecmat.domain.algebra.matrix import Matrix
from vecmat.domain.algebra.operands import OperandKind, classify, components_of, resolve
from vecmat.domain.algebra.vector import Vector
from vecmat.domain.geometry.line import X_AXIS
from vecmat.domain.geometry.plane import XY_PLANE


class TestClassify:
    @pytest.mark.parametrize("value, kind", [
        (3, OperandKind.SCALAR),
        (2.5, OperandKind.SCALAR),
        ([1, 2], OperandKind.SEQUENCE),
        ((1, 2), OperandKind.SEQUENCE),
        ([[1, 2], [3, 4]], OperandKind.SEQUENCE),
        (Vector(elements=(1, 2)), OperandKind.VECTOR),
        (Matrix.identity(2), OperandKind.MATRIX),
        (X_AXIS, OperandKind.LINE),
        (XY_PLANE, OperandKind.PLANE),
        ("abc", OperandKind.UNKNOWN),
        (None, OperandKind.UNKNOWN),
    ])
    def test_kinds(self, value, kind):
        assert classify(value) is kind


class TestResolve:
    def test_flat_sequence(self):
        operand = resolve([1, 2, 3])
        assert operand.kind is OperandKind.SEQUENCE
        assert operand.rows == ((1.0,), (2.0,), (3.0,))
        assert operand.components == (1.0, 2.0, 3.0)

    def test_nested_sequence(self):
        operand = resolve([[1, 2], [3, 4]])
        assert operand.rows == ((1.0, 2.0), (3.0, 4.0))
        assert operand.components is None

    def test_vector(self):
        operand = resolve(Vector(elements=(1, 2)))
        assert operand.rows == ((1.0,), (2.0,))
        assert operand.components == (1.0, 2.0)

    def test_matrix(self):
        m = Matrix.identity(2)
        operand = resolve(m)
        assert operand.rows is m.elements
        assert operand.components is None

    def test_scalar_has_no_rows(self):
        operand = resolve(5)
        assert operand.rows is None
        assert operand.value == 5

    def test_components_of(self):
        assert components_of(Vector(elements=(1, 2))) == (1.0, 2.0)
        assert components_of([3, 4]) == (3.0, 4.0)
        assert components_of([[3, 4]]) is None
        assert components_of(X_AXIS) is None
