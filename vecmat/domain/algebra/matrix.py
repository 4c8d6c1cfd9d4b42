# vecmat/domain/algebra/matrix.py
import logging
import random as _random
from typing import Any, Callable, ClassVar, List, Optional, Sequence, Tuple, Union

from pydantic import Field, field_validator

from vecmat.domain.algebra.elimination import gauss_jordan_reduce, right_triangularize
from vecmat.domain.algebra.errors import DimensionMismatchError, NotSquareError, SingularMatrixError
from vecmat.domain.algebra.operands import OperandKind, Rows, resolve
from vecmat.domain.algebra.tolerance import resolve_tolerance
from vecmat.domain.algebra.vector import Vector
from vecmat.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Matrix(ImmutableModel):
    """
    Represents a dense rows x cols matrix of floats.

    Row and column indices are 1-based. Every operation returns a new matrix;
    operations that are undefined for the given shapes return None, or raise
    a LinearAlgebraError subclass when called with strict=True.

    The elimination engine (to_right_triangular, determinant, rank, inverse)
    uses row addition only, so triangularization never changes the
    determinant.
    """
    operand_kind: ClassVar[OperandKind] = OperandKind.MATRIX

    elements: Tuple[Tuple[float, ...], ...] = Field(description="Row-major matrix elements")

    @field_validator("elements")
    @classmethod
    def validate_shape(cls, value: Rows) -> Rows:
        """Ensure the matrix is non-empty and rectangular."""
        if len(value) < 1 or len(value[0]) < 1:
            raise ValueError("Matrix must have at least one row and one column")
        width = len(value[0])
        for i, row in enumerate(value, start=1):
            if len(row) != width:
                raise ValueError(f"Row {i} has {len(row)} elements, expected {width}")
        return value

    @classmethod
    def create(cls, elements: Any) -> "Matrix":
        """
        Create a matrix from nested rows, a flat sequence, a Vector or a Matrix.

        Flat sequences and vectors produce a single-column matrix.

        Raises:
            ValueError: If the input is empty, ragged or not matrix-like
        """
        operand = resolve(elements)
        if operand.kind is OperandKind.MATRIX:
            return elements
        if operand.rows is None:
            raise ValueError(f"Cannot build a matrix from {elements!r}")
        return cls(elements=operand.rows)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Identity matrix of order n."""
        return cls(elements=tuple(
            tuple(1.0 if i == j else 0.0 for j in range(n)) for i in range(n)
        ))

    @classmethod
    def zero(cls, n: int, m: int) -> "Matrix":
        """n x m matrix of zeros."""
        return cls(elements=tuple((0.0,) * m for _ in range(n)))

    @classmethod
    def diagonal_of(cls, elements: Sequence[float]) -> "Matrix":
        """Square matrix with the given values on its diagonal."""
        n = len(elements)
        return cls(elements=tuple(
            tuple(float(elements[i]) if i == j else 0.0 for j in range(n)) for i in range(n)
        ))

    @classmethod
    def random(cls, n: int, m: int, rng: Optional[_random.Random] = None) -> "Matrix":
        """n x m matrix with elements drawn from [0, 1)."""
        rng = rng or _random.Random()
        return cls.zero(n, m).map(lambda x, i, j: rng.random())

    @property
    def row_count(self) -> int:
        return len(self.elements)

    @property
    def col_count(self) -> int:
        return len(self.elements[0])

    def dimensions(self) -> Tuple[int, int]:
        """(rows, cols) of the matrix."""
        return self.row_count, self.col_count

    def element_at(self, i: int, j: int) -> Optional[float]:
        """Element at row i, column j (1-based), or None if out of range."""
        if i < 1 or i > self.row_count or j < 1 or j > self.col_count:
            return None
        return self.elements[i - 1][j - 1]

    def row(self, i: int) -> Optional[Vector]:
        """Row i (1-based) as a vector, or None if out of range."""
        if i < 1 or i > self.row_count:
            return None
        return Vector(elements=self.elements[i - 1])

    def col(self, j: int) -> Optional[Vector]:
        """Column j (1-based) as a vector, or None if out of range."""
        if j < 1 or j > self.col_count:
            return None
        return Vector(elements=tuple(row[j - 1] for row in self.elements))

    def is_square(self) -> bool:
        return self.row_count == self.col_count

    def diagonal(self) -> Optional[Vector]:
        """Leading diagonal of a square matrix, or None for rectangular matrices."""
        if not self.is_square():
            return None
        return Vector(elements=tuple(self.elements[i][i] for i in range(self.row_count)))

    def max(self) -> float:
        """Element with the largest absolute value, sign preserved."""
        m = 0.0
        for row in self.elements:
            for x in row:
                if abs(x) > abs(m):
                    m = x
        return m

    def index_of(self, x: float) -> Optional[Tuple[int, int]]:
        """1-based (row, col) of the first element equal to x, scanning row by row."""
        for i, row in enumerate(self.elements, start=1):
            for j, value in enumerate(row, start=1):
                if value == x:
                    return i, j
        return None

    def is_same_size_as(self, other: Any) -> bool:
        """Check if another matrix (or matrix-like value) has the same dimensions."""
        rows = resolve(other).rows
        if not rows:
            return False
        return len(rows) == self.row_count and len(rows[0]) == self.col_count

    def can_multiply_from_left(self, other: Any) -> bool:
        """Check if self x other is defined, i.e. self's columns match other's rows."""
        rows = resolve(other).rows
        if not rows:
            return False
        return self.col_count == len(rows)

    def is_close_to(self, other: Any, tolerance: float = None) -> bool:
        """
        Check if this matrix equals another within the specified tolerance.

        The comparison uses the absolute difference of each element pair, so it
        is not scale-aware: very large or very small matrices may need an
        explicit tolerance.

        Args:
            other: Matrix or matrix-like value to compare with
            tolerance: Maximum absolute difference per element.
                      If None, uses the configured default precision.

        Returns:
            True if the dimensions match and every element pair is close
        """
        tolerance = resolve_tolerance(tolerance)
        if not self.is_same_size_as(other):
            return False
        rows = resolve(other).rows
        return all(
            abs(a - b) <= tolerance
            for own, theirs in zip(self.elements, rows)
            for a, b in zip(own, theirs)
        )

    def map(self, fn: Callable[[float, int, int], float]) -> "Matrix":
        """Apply fn(value, row, col) to every element; indices are 1-based."""
        return Matrix(elements=tuple(
            tuple(fn(x, i, j) for j, x in enumerate(row, start=1))
            for i, row in enumerate(self.elements, start=1)
        ))

    def _same_size_rows(self, other: Any, strict: bool, operation: str) -> Optional[Rows]:
        rows = resolve(other).rows
        if not rows or len(rows) != self.row_count or len(rows[0]) != self.col_count:
            if strict:
                raise DimensionMismatchError(
                    f"Cannot {operation} {self.row_count}x{self.col_count} matrix and {other!r}"
                )
            return None
        return rows

    def add(self, other: Any, strict: bool = False) -> Optional["Matrix"]:
        """Element-wise sum; None (or DimensionMismatchError if strict) for different sizes."""
        rows = self._same_size_rows(other, strict, "add")
        if rows is None:
            return None
        return self.map(lambda x, i, j: x + rows[i - 1][j - 1])

    def subtract(self, other: Any, strict: bool = False) -> Optional["Matrix"]:
        """Element-wise difference; None (or DimensionMismatchError if strict) for different sizes."""
        rows = self._same_size_rows(other, strict, "subtract")
        if rows is None:
            return None
        return self.map(lambda x, i, j: x - rows[i - 1][j - 1])

    def multiply(self, other: Any, strict: bool = False) -> Optional[Union["Matrix", Vector]]:
        """
        Multiply by a scalar, a vector or another matrix.

        A scalar scales every element. A Vector operand is treated as a column
        and the product is returned as a Vector. Matrices and raw sequences
        give a Matrix.

        Returns:
            The product, or None if self's columns do not match the operand's rows
        """
        operand = resolve(other)
        if operand.kind is OperandKind.SCALAR:
            return self.map(lambda x, i, j: x * other)

        rows = operand.rows
        if not rows or self.col_count != len(rows):
            if strict:
                raise DimensionMismatchError(
                    f"Cannot multiply {self.row_count}x{self.col_count} matrix by {other!r}"
                )
            return None

        columns = list(zip(*rows))
        product = Matrix(elements=tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in self.elements
        ))
        if operand.kind is OperandKind.VECTOR:
            return product.col(1)
        return product

    def transpose(self) -> "Matrix":
        return Matrix(elements=tuple(zip(*self.elements)))

    def minor(self, start_row: int, start_col: int, n_rows: int, n_cols: int) -> "Matrix":
        """
        Extract an n_rows x n_cols block starting at (start_row, start_col).

        Indices wrap around the matrix edges, so a block may run off the
        bottom or right and continue from the top or left.
        """
        return Matrix(elements=tuple(
            tuple(
                self.elements[(start_row + i - 1) % self.row_count][(start_col + j - 1) % self.col_count]
                for j in range(n_cols)
            )
            for i in range(n_rows)
        ))

    def augment(self, other: Any, strict: bool = False) -> Optional["Matrix"]:
        """Append the columns of another matrix with the same number of rows."""
        rows = resolve(other).rows
        if not rows or len(rows) != self.row_count:
            if strict:
                raise DimensionMismatchError(
                    f"Cannot augment {self.row_count}-row matrix with {other!r}"
                )
            return None
        return Matrix(elements=tuple(own + theirs for own, theirs in zip(self.elements, rows)))

    def round(self) -> "Matrix":
        """Round every element to the nearest integer value."""
        return self.map(lambda x, i, j: float(round(x)))

    def snap_to(self, x: float, tolerance: float = None) -> "Matrix":
        """Replace elements within the tolerance of x by x itself."""
        tolerance = resolve_tolerance(tolerance)
        return self.map(lambda p, i, j: x if abs(p - x) <= tolerance else p)

    def flatten(self) -> List[float]:
        """Elements in column-major order, as expected by graphics APIs."""
        return [self.elements[i][j] for j in range(self.col_count) for i in range(self.row_count)]

    def ensure_4x4(self) -> Optional["Matrix"]:
        """
        Pad the matrix to 4x4 with the corresponding identity elements.

        Returns None if the matrix already exceeds 4 rows or columns.
        """
        if self.row_count > 4 or self.col_count > 4:
            return None
        if self.row_count == 4 and self.col_count == 4:
            return self
        return Matrix(elements=tuple(
            tuple(
                self.elements[i][j] if i < self.row_count and j < self.col_count
                else (1.0 if i == j else 0.0)
                for j in range(4)
            )
            for i in range(4)
        ))

    def make_3x3(self) -> Optional["Matrix"]:
        """Upper-left 3x3 block of a 4x4 matrix, or None for other sizes."""
        if self.row_count != 4 or self.col_count != 4:
            return None
        return self.minor(1, 1, 3, 3)

    def to_right_triangular(self) -> "Matrix":
        """Right (upper) triangular form reached by row addition only."""
        return Matrix(elements=tuple(tuple(row) for row in right_triangularize(self.elements)))

    def to_upper_triangular(self) -> "Matrix":
        return self.to_right_triangular()

    def determinant(self, strict: bool = False) -> Optional[float]:
        """
        Determinant of a square matrix.

        Computed as the product of the diagonal of the right triangular form.

        Returns:
            The determinant, or None for a rectangular matrix

        Raises:
            NotSquareError: For a rectangular matrix when strict is set
        """
        if not self._check_square(strict, "determinant"):
            return None
        triangular = right_triangularize(self.elements)
        det = 1.0
        for i in range(self.row_count):
            det *= triangular[i][i]
        return det

    def is_singular(self) -> bool:
        """True for a square matrix whose determinant is exactly zero."""
        return self.is_square() and self.determinant() == 0

    def trace(self, strict: bool = False) -> Optional[float]:
        """Sum of the diagonal of a square matrix, or None for a rectangular one."""
        if not self._check_square(strict, "trace"):
            return None
        return sum(self.elements[i][i] for i in range(self.row_count))

    def rank(self, tolerance: float = None) -> int:
        """
        Rank of the matrix.

        Counts the rows of the right triangular form that hold an element
        whose absolute value exceeds the tolerance. A column with no pivot
        still takes up its diagonal row, so the count is never more than
        min(rows, cols) but can exceed the number of independent rows, as
        for [[0, 1], [0, 1]].
        """
        tolerance = resolve_tolerance(tolerance)
        triangular = right_triangularize(self.elements)
        return sum(1 for row in triangular if any(abs(x) > tolerance for x in row))

    def inverse(self, strict: bool = False) -> Optional["Matrix"]:
        """
        Inverse of a square, non-singular matrix by Gauss-Jordan elimination.

        The matrix is augmented with the identity and right-triangularized;
        rows are then normalized and eliminated from the bottom up, leaving the
        inverse in the right half.

        Returns:
            The inverse, or None if the matrix is rectangular or singular

        Raises:
            NotSquareError: For a rectangular matrix when strict is set
            SingularMatrixError: For a singular matrix when strict is set
        """
        if not self._check_square(strict, "inverse"):
            return None
        if self.is_singular():
            logger.debug(f"Matrix {self.inspect()!r} is singular and has no inverse")
            if strict:
                raise SingularMatrixError("Matrix is singular and has no inverse")
            return None

        augmented = self.augment(Matrix.identity(self.row_count))
        inverse_rows = gauss_jordan_reduce(augmented.elements, self.row_count)
        return Matrix(elements=tuple(tuple(row) for row in inverse_rows))

    def _check_square(self, strict: bool, operation: str) -> bool:
        if self.is_square():
            return True
        if strict:
            raise NotSquareError(
                f"The {operation} of a {self.row_count}x{self.col_count} matrix is undefined"
            )
        return False

    def inspect(self) -> str:
        """Format the matrix as one bracketed row per line."""
        return "\n".join(Vector(elements=row).inspect() for row in self.elements)

    def __str__(self) -> str:
        return self.inspect()

    def __add__(self, other: Any) -> "Matrix":
        return self.add(other, strict=True)

    def __sub__(self, other: Any) -> "Matrix":
        return self.subtract(other, strict=True)

    def __mul__(self, k: float) -> "Matrix":
        if resolve(k).kind is not OperandKind.SCALAR:
            return NotImplemented
        return self.multiply(k)

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> Union["Matrix", Vector]:
        return self.multiply(other, strict=True)

    def __neg__(self) -> "Matrix":
        return self.multiply(-1)
