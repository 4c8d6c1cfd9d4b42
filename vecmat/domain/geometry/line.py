# vecmat/domain/geometry/line.py
import logging
import math
from typing import Any, ClassVar, Optional

from pydantic import Field, field_validator, model_validator

from vecmat.domain.algebra.errors import DegenerateGeometryError
from vecmat.domain.algebra.operands import OperandKind, classify, components_of
from vecmat.domain.algebra.tolerance import resolve_tolerance
from vecmat.domain.algebra.transforms import rotation
from vecmat.domain.algebra.vector import Vector
from vecmat.domain.geometry.solver import solve_linear_system
from vecmat.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


def as_point(value: Any) -> Optional[Vector]:
    """Convert a 2D or 3D point (Vector or sequence) to a 3D Vector, or None."""
    components = components_of(value)
    if components is None:
        return None
    return Vector(elements=components).to_3d()


class Line(ImmutableModel):
    """
    Represents an infinite line in 3D space.

    The line passes through ``anchor`` and runs along ``direction``. 2D inputs
    are embedded in the z = 0 plane. The direction must be non-zero but is not
    normalized by the constructor; Line.create() normalizes it.
    """
    operand_kind: ClassVar[OperandKind] = OperandKind.LINE

    anchor: Vector = Field(description="A point on the line")
    direction: Vector = Field(description="Direction of the line")

    @field_validator("anchor", "direction", mode="before")
    @classmethod
    def coerce_vector(cls, value: Any) -> Any:
        """Accept plain sequences in place of vectors."""
        if isinstance(value, (Vector, dict)):
            return value
        return Vector.create(value)

    @field_validator("anchor", "direction")
    @classmethod
    def validate_3d(cls, value: Vector) -> Vector:
        """Ensure the vector is 2D or 3D and embed it in 3D."""
        embedded = value.to_3d()
        if embedded is None:
            raise ValueError(f"Expected a 2D or 3D vector, got {value.dimensions} components")
        return embedded

    @model_validator(mode="after")
    def validate_direction(self):
        """Validate that the direction is not the zero vector."""
        if self.direction.modulus() == 0:
            raise ValueError("Line direction cannot be the zero vector")
        return self

    @classmethod
    def create(cls, anchor: Any, direction: Any) -> Optional["Line"]:
        """
        Create a line with a unit direction.

        Returns:
            The line, or None if either vector is not 2D/3D or the direction is zero
        """
        anchor = as_point(anchor)
        direction = as_point(direction)
        if anchor is None or direction is None or direction.modulus() == 0:
            return None
        return cls(anchor=anchor, direction=direction.to_unit_vector())

    def coincides_with(self, other: "Line", tolerance: float = None) -> bool:
        """Check if the other line occupies the same points as this one."""
        return bool(self.is_parallel_to(other, tolerance=tolerance)) and self.contains(other.anchor, tolerance=tolerance)

    def translate(self, vector: Any) -> "Line":
        """Shift the line by the given 2D or 3D offset."""
        return self.with_changes(anchor=self.anchor.add(as_point(vector), strict=True))

    def reverse(self) -> "Line":
        """The same line with its direction flipped."""
        return self.with_changes(direction=self.direction.multiply(-1))

    def is_parallel_to(self, obj: Any, tolerance: float = None) -> Optional[bool]:
        """
        Check if this line is parallel to another line or to a plane.

        Anti-parallel lines count as parallel. Returns None for other objects.
        """
        kind = classify(obj)
        if kind is OperandKind.PLANE:
            return obj.is_parallel_to(self, tolerance=tolerance)
        if kind is not OperandKind.LINE:
            return None
        tolerance = resolve_tolerance(tolerance)
        theta = self.direction.angle_from(obj.direction)
        return abs(theta) <= tolerance or abs(theta - math.pi) <= tolerance

    def distance_from(self, obj: Any, tolerance: float = None) -> Optional[float]:
        """Shortest distance to a point, line or plane."""
        kind = classify(obj)
        if kind is OperandKind.PLANE:
            return obj.distance_from(self, tolerance=tolerance)

        if kind is OperandKind.LINE:
            if self.is_parallel_to(obj, tolerance=tolerance):
                return self.distance_from(obj.anchor)
            normal = self.direction.cross(obj.direction).to_unit_vector()
            return abs(self.anchor.subtract(obj.anchor).dot(normal))

        point = as_point(obj)
        if point is None:
            return None
        offset = point.subtract(self.anchor)
        along = offset.dot(self.direction) / self.direction.dot(self.direction)
        return offset.subtract(self.direction.multiply(along)).modulus()

    def contains(self, obj: Any, tolerance: float = None) -> bool:
        """
        Check if a point, or every point of another line, lies on this line.

        Args:
            obj: Point (2D/3D Vector or sequence) or Line
            tolerance: Maximum distance for a point to count as on the line

        Returns:
            True if the object lies on the line within the tolerance
        """
        if classify(obj) is OperandKind.LINE:
            return self.coincides_with(obj, tolerance=tolerance)
        distance = self.distance_from(obj, tolerance=tolerance)
        return distance is not None and distance <= resolve_tolerance(tolerance)

    def position_of(self, point: Any, tolerance: float = None) -> Optional[float]:
        """
        Parameter t with point = anchor + t * direction.

        Returns None if the point is not on the line.
        """
        if not self.contains(point, tolerance=tolerance):
            return None
        offset = as_point(point).subtract(self.anchor)
        return offset.dot(self.direction) / self.direction.dot(self.direction)

    def lies_in(self, plane: "Plane", tolerance: float = None) -> Optional[bool]:
        """Check if the line lies in the given plane."""
        return plane.contains(self, tolerance=tolerance)

    def intersects(self, obj: Any, tolerance: float = None) -> Optional[bool]:
        """
        Check if the line has a unique point of intersection with a line or plane.

        Returns None for other objects.
        """
        kind = classify(obj)
        if kind is OperandKind.PLANE:
            return obj.intersects(self, tolerance=tolerance)
        if kind is not OperandKind.LINE:
            return None
        return (not self.is_parallel_to(obj, tolerance=tolerance)
                and self.distance_from(obj, tolerance=tolerance) <= resolve_tolerance(tolerance))

    def intersection_with(self, obj: Any, tolerance: float = None, strict: bool = False) -> Optional[Vector]:
        """
        The unique point shared with another line or a plane.

        Returns:
            The intersection point, or None if there is none (parallel or skew)

        Raises:
            DegenerateGeometryError: If strict is set and there is no unique intersection
        """
        if classify(obj) is OperandKind.PLANE:
            return obj.intersection_with(self, tolerance=tolerance, strict=strict)
        if not self.intersects(obj, tolerance=tolerance):
            logger.debug(f"{self} has no unique intersection with {obj}")
            if strict:
                raise DegenerateGeometryError(f"{self} has no unique intersection with {obj}")
            return None
        return self._closest_point_to_line(obj)

    def point_closest_to(self, obj: Any, tolerance: float = None) -> Optional[Vector]:
        """
        Point on this line closest to a point or to another line.

        Returns None for a parallel line, which has no unique closest point.
        """
        if classify(obj) is OperandKind.LINE:
            if self.is_parallel_to(obj, tolerance=tolerance):
                return None
            return self._closest_point_to_line(obj)

        point = as_point(obj)
        if point is None:
            return None
        along = point.subtract(self.anchor).dot(self.direction) / self.direction.dot(self.direction)
        return self.anchor.add(self.direction.multiply(along))

    def _closest_point_to_line(self, other: "Line") -> Optional[Vector]:
        # Minimise |P + sX - Q - tY| over s and t
        x, y = self.direction, other.direction
        offset = other.anchor.subtract(self.anchor)
        solution = solve_linear_system(
            [[x.dot(x), -x.dot(y)], [x.dot(y), -y.dot(y)]],
            [x.dot(offset), y.dot(offset)],
        )
        if solution is None:
            return None
        return self.anchor.add(x.multiply(solution.elements[0]))

    def rotate(self, t: float, line: "Line") -> "Line":
        """Rotate the line by t radians about another line."""
        matrix = rotation(t, line.direction)
        centre = line.point_closest_to(self.anchor)
        offset = self.anchor.subtract(centre)
        return Line(
            anchor=centre.add(matrix.multiply(offset)),
            direction=matrix.multiply(self.direction),
        )

    def reflection_in(self, obj: Any) -> Optional["Line"]:
        """Mirror image of the line in a point, line or plane."""
        kind = classify(obj)
        if kind is OperandKind.PLANE:
            new_anchor = self.anchor.reflection_in(obj)
            tip = self.anchor.add(self.direction)
            mirrored_tip = tip.reflection_in(obj)
            return Line(anchor=new_anchor, direction=mirrored_tip.subtract(new_anchor))
        if kind is OperandKind.LINE:
            return self.rotate(math.pi, obj)
        point = as_point(obj)
        if point is None:
            return None
        return Line(anchor=self.anchor.reflection_in(point), direction=self.direction)

    def __str__(self) -> str:
        """String representation of the line."""
        return f"Line({self.anchor} + t{self.direction})"


X_AXIS = Line(anchor=(0.0, 0.0, 0.0), direction=(1.0, 0.0, 0.0))
Y_AXIS = Line(anchor=(0.0, 0.0, 0.0), direction=(0.0, 1.0, 0.0))
Z_AXIS = Line(anchor=(0.0, 0.0, 0.0), direction=(0.0, 0.0, 1.0))
