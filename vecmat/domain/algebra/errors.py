# vecmat/domain/algebra/errors.py
"""Errors raised by strict variants of the vector and matrix operations.

Non-strict operations signal an inapplicable or undefined result by
returning None instead.
"""


class LinearAlgebraError(ValueError):
    """Base class for all vecmat errors."""


class DimensionMismatchError(LinearAlgebraError):
    """Operand shapes are incompatible with the requested operation."""


class NotSquareError(LinearAlgebraError):
    """A square-only operation was applied to a rectangular matrix."""


class SingularMatrixError(LinearAlgebraError):
    """The matrix has a zero determinant and cannot be inverted."""


class DegenerateGeometryError(LinearAlgebraError):
    """Parallel objects, zero-length normals or directions."""
