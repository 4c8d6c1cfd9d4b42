# vecmat/domain/algebra/vector.py
import math
import random as _random
from typing import Any, Callable, ClassVar, Optional, Tuple

from pydantic import Field, field_validator

from vecmat.domain.algebra.errors import DimensionMismatchError
from vecmat.domain.algebra.operands import OperandKind, classify, components_of
from vecmat.domain.algebra.tolerance import are_close, is_zero, resolve_tolerance
from vecmat.utils.base_model import ImmutableModel


class Vector(ImmutableModel):
    """
    Represents a dense n-dimensional vector of floats.

    Vectors double as points for the geometry types. Element access is
    1-based; every operation returns a new vector and signals an undefined
    result (mismatched sizes, out-of-range index) by returning None.
    """
    operand_kind: ClassVar[OperandKind] = OperandKind.VECTOR

    elements: Tuple[float, ...] = Field(description="Vector components")

    @field_validator("elements")
    @classmethod
    def validate_elements(cls, value: Tuple[float, ...]) -> Tuple[float, ...]:
        """Ensure the vector has at least one component."""
        if len(value) < 1:
            raise ValueError("Vector must have at least one element")
        return value

    @classmethod
    def create(cls, elements: Any) -> "Vector":
        """Create a vector from a sequence of numbers, or return an existing vector."""
        if isinstance(elements, Vector):
            return elements
        return cls(elements=tuple(elements))

    @classmethod
    def zero(cls, n: int) -> "Vector":
        """Create an n-dimensional zero vector."""
        return cls(elements=(0.0,) * n)

    @classmethod
    def random(cls, n: int, rng: Optional[_random.Random] = None) -> "Vector":
        """Create an n-dimensional vector with components drawn from [0, 1)."""
        rng = rng or _random.Random()
        return cls(elements=tuple(rng.random() for _ in range(n)))

    @property
    def dimensions(self) -> int:
        """Number of components."""
        return len(self.elements)

    def element_at(self, i: int) -> Optional[float]:
        """Get the i-th component (1-based), or None if i is out of range."""
        if i < 1 or i > len(self.elements):
            return None
        return self.elements[i - 1]

    def modulus(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(sum(x * x for x in self.elements))

    def is_close_to(self, other: Any, tolerance: float = None) -> bool:
        """
        Check if this vector equals another within the specified tolerance.

        Args:
            other: Vector or sequence of numbers to compare with
            tolerance: Maximum absolute difference per component.
                      If None, uses the configured default precision.

        Returns:
            True if both have the same size and every component pair is close
        """
        tolerance = resolve_tolerance(tolerance)
        components = components_of(other)
        if components is None or len(components) != len(self.elements):
            return False
        return all(are_close(a, b, tolerance) for a, b in zip(self.elements, components))

    def map(self, fn: Callable[[float, int], float]) -> "Vector":
        """Apply fn(value, index) to every component; the index is 1-based."""
        return Vector(elements=tuple(fn(x, i) for i, x in enumerate(self.elements, start=1)))

    def to_unit_vector(self) -> "Vector":
        """Return the vector scaled to unit length; a zero vector is returned unchanged."""
        r = self.modulus()
        if r == 0:
            return self
        return Vector(elements=tuple(x / r for x in self.elements))

    def angle_from(self, other: Any) -> Optional[float]:
        """
        Angle in radians between this vector and another, in [0, pi].

        Returns None if the sizes differ or either vector is zero.
        """
        components = components_of(other)
        if components is None or len(components) != len(self.elements):
            return None
        dot = sum(a * b for a, b in zip(self.elements, components))
        mod1 = math.sqrt(sum(a * a for a in self.elements))
        mod2 = math.sqrt(sum(b * b for b in components))
        if mod1 * mod2 == 0:
            return None
        cosine = max(-1.0, min(1.0, dot / (mod1 * mod2)))
        return math.acos(cosine)

    def is_parallel_to(self, other: Any, tolerance: float = None) -> Optional[bool]:
        """Check if the angle between the vectors is within the tolerance of zero."""
        angle = self.angle_from(other)
        if angle is None:
            return None
        return angle <= resolve_tolerance(tolerance)

    def is_antiparallel_to(self, other: Any, tolerance: float = None) -> Optional[bool]:
        """Check if the angle between the vectors is within the tolerance of pi."""
        angle = self.angle_from(other)
        if angle is None:
            return None
        return abs(angle - math.pi) <= resolve_tolerance(tolerance)

    def is_perpendicular_to(self, other: Any, tolerance: float = None) -> Optional[bool]:
        """Check if the dot product is within the tolerance of zero."""
        dot = self.dot(other)
        if dot is None:
            return None
        return is_zero(dot, tolerance)

    def _matching_components(self, other: Any, strict: bool) -> Optional[Tuple[float, ...]]:
        components = components_of(other)
        if components is None or len(components) != len(self.elements):
            if strict:
                raise DimensionMismatchError(
                    f"Cannot combine a {len(self.elements)}-vector with {other!r}"
                )
            return None
        return components

    def add(self, other: Any, strict: bool = False) -> Optional["Vector"]:
        """Component-wise sum; None (or DimensionMismatchError if strict) for mismatched sizes."""
        components = self._matching_components(other, strict)
        if components is None:
            return None
        return Vector(elements=tuple(a + b for a, b in zip(self.elements, components)))

    def subtract(self, other: Any, strict: bool = False) -> Optional["Vector"]:
        """Component-wise difference; None (or DimensionMismatchError if strict) for mismatched sizes."""
        components = self._matching_components(other, strict)
        if components is None:
            return None
        return Vector(elements=tuple(a - b for a, b in zip(self.elements, components)))

    def multiply(self, k: float) -> "Vector":
        """Scale every component by k."""
        return Vector(elements=tuple(x * k for x in self.elements))

    def dot(self, other: Any) -> Optional[float]:
        """Scalar product, or None for mismatched sizes."""
        components = components_of(other)
        if components is None or len(components) != len(self.elements):
            return None
        return sum(a * b for a, b in zip(self.elements, components))

    def cross(self, other: Any) -> Optional["Vector"]:
        """Cross product of two 3D vectors, or None if either is not 3D."""
        b = components_of(other)
        if b is None or len(self.elements) != 3 or len(b) != 3:
            return None
        a = self.elements
        return Vector(elements=(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ))

    def max(self) -> float:
        """Component with the largest absolute value, sign preserved."""
        m = 0.0
        for x in self.elements:
            if abs(x) > abs(m):
                m = x
        return m

    def index_of(self, x: float) -> Optional[int]:
        """1-based index of the first component equal to x, or None."""
        for i, value in enumerate(self.elements, start=1):
            if value == x:
                return i
        return None

    def to_diagonal_matrix(self) -> "Matrix":
        """Square matrix with this vector on its diagonal."""
        from vecmat.domain.algebra.matrix import Matrix
        return Matrix.diagonal_of(self.elements)

    def round(self) -> "Vector":
        """Round every component to the nearest integer value."""
        return Vector(elements=tuple(float(round(x)) for x in self.elements))

    def snap_to(self, x: float, tolerance: float = None) -> "Vector":
        """Replace components within the tolerance of x by x itself."""
        tolerance = resolve_tolerance(tolerance)
        return Vector(elements=tuple(x if abs(y - x) <= tolerance else y for y in self.elements))

    def to_3d(self) -> Optional["Vector"]:
        """Pad a 2D vector with a zero z component; 3D vectors are returned as-is, others give None."""
        if len(self.elements) == 3:
            return self
        if len(self.elements) == 2:
            return Vector(elements=self.elements + (0.0,))
        return None

    def distance_from(self, obj: Any, tolerance: float = None) -> Optional[float]:
        """Distance from a point, line or plane; None for a point of a different size."""
        if classify(obj) in (OperandKind.LINE, OperandKind.PLANE):
            return obj.distance_from(self, tolerance=tolerance)
        components = components_of(obj)
        if components is None or len(components) != len(self.elements):
            return None
        return math.sqrt(sum((a - b) ** 2 for a, b in zip(self.elements, components)))

    def lies_on(self, line: "Line", tolerance: float = None) -> bool:
        """Check if this point lies on the given line."""
        return line.contains(self, tolerance=tolerance)

    def lies_in(self, plane: "Plane", tolerance: float = None) -> Optional[bool]:
        """Check if this point lies in the given plane."""
        return plane.contains(self, tolerance=tolerance)

    def rotate(self, t: float, obj: Any) -> Optional["Vector"]:
        """
        Rotate the point by t radians.

        A 2D point is rotated about another 2D point; a 3D point is rotated
        about a Line, anticlockwise when looking along the line's direction
        towards its origin.

        Returns:
            The rotated point, or None if obj does not suit this vector's size
        """
        from vecmat.domain.algebra.transforms import rotation

        if len(self.elements) == 2:
            centre = components_of(obj)
            if centre is None or len(centre) != 2:
                return None
            offset = self.subtract(centre)
            return rotation(t).multiply(offset).add(centre)

        if len(self.elements) == 3:
            if classify(obj) is not OperandKind.LINE:
                return None
            centre = obj.point_closest_to(self)
            offset = self.subtract(centre)
            return rotation(t, obj.direction).multiply(offset).add(centre)

        return None

    def reflection_in(self, obj: Any) -> Optional["Vector"]:
        """Reflection of this point in a point, line or plane."""
        if classify(obj) in (OperandKind.LINE, OperandKind.PLANE):
            point = self.to_3d()
            if point is None:
                return None
            closest = obj.point_closest_to(point)
            return closest.multiply(2).subtract(point)

        components = components_of(obj)
        if components is None or len(components) != len(self.elements):
            return None
        return Vector(elements=tuple(2 * q - p for p, q in zip(self.elements, components)))

    def inspect(self) -> str:
        """Format the vector as a bracketed list."""
        return "[" + ", ".join(str(x) for x in self.elements) + "]"

    def __str__(self) -> str:
        return self.inspect()

    def __add__(self, other: Any) -> "Vector":
        return self.add(other, strict=True)

    def __sub__(self, other: Any) -> "Vector":
        return self.subtract(other, strict=True)

    def __mul__(self, k: float) -> "Vector":
        return self.multiply(k)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return self.multiply(-1)


# Standard basis of 3D space
UNIT_I = Vector(elements=(1.0, 0.0, 0.0))
UNIT_J = Vector(elements=(0.0, 1.0, 0.0))
UNIT_K = Vector(elements=(0.0, 0.0, 1.0))
