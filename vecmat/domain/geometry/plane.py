# vecmat/domain/geometry/plane.py
import logging
import math
from typing import Any, ClassVar, Optional, Union

from pydantic import Field, field_validator

from vecmat.domain.algebra.errors import DegenerateGeometryError
from vecmat.domain.algebra.operands import OperandKind, classify
from vecmat.domain.algebra.tolerance import is_zero, resolve_tolerance
from vecmat.domain.algebra.transforms import rotation
from vecmat.domain.algebra.vector import Vector, UNIT_I, UNIT_J, UNIT_K
from vecmat.domain.geometry.line import Line, as_point
from vecmat.domain.geometry.solver import plane_pair_anchor
from vecmat.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Plane(ImmutableModel):
    """
    Represents an infinite plane in 3D space.

    The plane passes through ``anchor`` and is perpendicular to ``normal``.
    The normal is normalized to unit length on construction; a zero normal is
    rejected. Intersections with lines and other planes are computed with the
    matrix elimination engine.
    """
    operand_kind: ClassVar[OperandKind] = OperandKind.PLANE

    anchor: Vector = Field(description="A point in the plane")
    normal: Vector = Field(description="Unit normal of the plane")

    @field_validator("anchor", "normal", mode="before")
    @classmethod
    def coerce_vector(cls, value: Any) -> Any:
        """Accept plain sequences in place of vectors."""
        if isinstance(value, (Vector, dict)):
            return value
        return Vector.create(value)

    @field_validator("anchor")
    @classmethod
    def validate_anchor(cls, value: Vector) -> Vector:
        """Ensure the anchor is a 2D or 3D point and embed it in 3D."""
        embedded = value.to_3d()
        if embedded is None:
            raise ValueError(f"Expected a 2D or 3D anchor, got {value.dimensions} components")
        return embedded

    @field_validator("normal")
    @classmethod
    def normalize_normal(cls, value: Vector) -> Vector:
        """Embed the normal in 3D and scale it to unit length."""
        embedded = value.to_3d()
        if embedded is None:
            raise ValueError(f"Expected a 2D or 3D normal, got {value.dimensions} components")
        if embedded.modulus() == 0:
            raise ValueError("Plane normal cannot be the zero vector")
        return embedded.to_unit_vector()

    @classmethod
    def create(cls, anchor: Any, v1: Any, v2: Any = None) -> Optional["Plane"]:
        """
        Create a plane from an anchor and a normal, or from three points.

        Args:
            anchor: A point in the plane
            v1: The normal when v2 is omitted, otherwise a second point in the plane
            v2: Optional third point in the plane

        Returns:
            The plane, or None if an input is not 2D/3D or the normal would be
            zero (including three collinear points)
        """
        anchor = as_point(anchor)
        first = as_point(v1)
        if anchor is None or first is None:
            return None
        if v2 is None:
            normal = first
        else:
            second = as_point(v2)
            if second is None:
                return None
            normal = first.subtract(anchor).cross(second.subtract(anchor))
        if normal.modulus() == 0:
            return None
        return cls(anchor=anchor, normal=normal)

    def coincides_with(self, other: "Plane", tolerance: float = None) -> bool:
        """Check if the other plane occupies the same space as this one."""
        return self.contains(other.anchor, tolerance=tolerance) and bool(self.is_parallel_to(other, tolerance=tolerance))

    def translate(self, vector: Any) -> "Plane":
        """Shift the plane by the given 2D or 3D offset."""
        return self.with_changes(anchor=self.anchor.add(as_point(vector), strict=True))

    def is_parallel_to(self, obj: Any, tolerance: float = None) -> Optional[bool]:
        """
        Check if this plane is parallel to another plane or a line.

        Equal planes and lines lying in the plane count as parallel. Returns
        None for other objects.
        """
        tolerance = resolve_tolerance(tolerance)
        kind = classify(obj)
        if kind is OperandKind.PLANE:
            theta = self.normal.angle_from(obj.normal)
            return abs(theta) <= tolerance or abs(math.pi - theta) <= tolerance
        if kind is OperandKind.LINE:
            return self.normal.is_perpendicular_to(obj.direction, tolerance=tolerance)
        return None

    def is_perpendicular_to(self, plane: "Plane", tolerance: float = None) -> bool:
        """Check if the angle between the normals is within the tolerance of a right angle."""
        theta = self.normal.angle_from(plane.normal)
        return abs(math.pi / 2 - theta) <= resolve_tolerance(tolerance)

    def distance_from(self, obj: Any, tolerance: float = None) -> Optional[float]:
        """
        Distance to a point, line or plane.

        Intersecting or contained objects are at distance zero; parallel ones
        are measured from their anchor.
        """
        if self.intersects(obj, tolerance=tolerance) or self.contains(obj, tolerance=tolerance):
            return 0.0
        if classify(obj) in (OperandKind.LINE, OperandKind.PLANE):
            point = obj.anchor
        else:
            point = as_point(obj)
            if point is None:
                return None
        return abs(self.anchor.subtract(point).dot(self.normal))

    def contains(self, obj: Any, tolerance: float = None) -> Optional[bool]:
        """
        Check if a point or a line lies in the plane.

        Returns None for a plane (use coincides_with) or an unrecognised object.
        """
        kind = classify(obj)
        if kind is OperandKind.PLANE:
            return None
        if kind is OperandKind.LINE:
            return (self.contains(obj.anchor, tolerance=tolerance)
                    and self.contains(obj.anchor.add(obj.direction), tolerance=tolerance))
        point = as_point(obj)
        if point is None:
            return None
        return is_zero(self.normal.dot(self.anchor.subtract(point)), tolerance)

    def intersects(self, obj: Any, tolerance: float = None) -> Optional[bool]:
        """
        Check if the plane has a unique intersection with a line or plane.

        Returns None for other objects.
        """
        if classify(obj) not in (OperandKind.LINE, OperandKind.PLANE):
            return None
        return not self.is_parallel_to(obj, tolerance=tolerance)

    def intersection_with(self, obj: Any, tolerance: float = None,
                          strict: bool = False) -> Optional[Union[Vector, Line]]:
        """
        The unique intersection with a line (a point) or a plane (a line).

        For a line through P along D the point is P + tD with
        t = N.(A - P) / N.D. For a plane the line runs along the normalized
        cross product of the normals, through a point found by solving a 2x2
        system of the plane equations.

        Returns:
            A Vector for a line, a Line for a plane, or None if there is no
            unique intersection

        Raises:
            DegenerateGeometryError: If strict is set and there is no unique intersection
        """
        if not self.intersects(obj, tolerance=tolerance):
            return self._no_intersection(obj, strict)

        if classify(obj) is OperandKind.LINE:
            # intersects() has already ruled out |N.D| <= tolerance
            t = self.normal.dot(self.anchor.subtract(obj.anchor)) / self.normal.dot(obj.direction)
            return obj.anchor.add(obj.direction.multiply(t))

        direction = self.normal.cross(obj.normal).to_unit_vector()
        anchor = plane_pair_anchor(self.normal, self.anchor, obj.normal, obj.anchor)
        if anchor is None:
            return self._no_intersection(obj, strict)
        return Line(anchor=anchor, direction=direction)

    def _no_intersection(self, obj: Any, strict: bool) -> None:
        logger.debug(f"{self} has no unique intersection with {obj}")
        if strict:
            raise DegenerateGeometryError(f"{self} has no unique intersection with {obj}")
        return None

    def point_closest_to(self, point: Any) -> Optional[Vector]:
        """Orthogonal projection of a point onto the plane."""
        point = as_point(point)
        if point is None:
            return None
        distance = self.anchor.subtract(point).dot(self.normal)
        return point.add(self.normal.multiply(distance))

    def rotate(self, t: float, line: Line) -> "Plane":
        """Rotate the plane by t radians about a line."""
        matrix = rotation(t, line.direction)
        centre = line.point_closest_to(self.anchor)
        offset = self.anchor.subtract(centre)
        return Plane(
            anchor=centre.add(matrix.multiply(offset)),
            normal=matrix.multiply(self.normal),
        )

    def reflection_in(self, obj: Any) -> Optional["Plane"]:
        """Mirror image of the plane in a point, line or plane."""
        kind = classify(obj)
        if kind is OperandKind.PLANE:
            new_anchor = self.anchor.reflection_in(obj)
            tip = self.anchor.add(self.normal)
            mirrored_tip = tip.reflection_in(obj)
            return Plane(anchor=new_anchor, normal=mirrored_tip.subtract(new_anchor))
        if kind is OperandKind.LINE:
            return self.rotate(math.pi, obj)
        point = as_point(obj)
        if point is None:
            return None
        return Plane(anchor=self.anchor.reflection_in(point), normal=self.normal)

    def __str__(self) -> str:
        """String representation of the plane."""
        return f"Plane(anchor={self.anchor}, normal={self.normal})"


_ORIGIN = Vector.zero(3)

XY_PLANE = Plane(anchor=_ORIGIN, normal=UNIT_K)
YZ_PLANE = Plane(anchor=_ORIGIN, normal=UNIT_I)
ZX_PLANE = Plane(anchor=_ORIGIN, normal=UNIT_J)
