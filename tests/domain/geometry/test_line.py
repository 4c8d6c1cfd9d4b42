import pytest
import math
from vecmat.domain.algebra.errors import DegenerateGeometryError
from vecmat.domain.algebra.vector import Vector
from vecmat.domain.geometry.line import Line, X_AXIS, Y_AXIS, Z_AXIS
from vecmat.domain.geometry.plane import XY_PLANE, YZ_PLANE


class TestLine:
    def test_create_line(self):
        line = Line(anchor=[1.0, 2.0, 3.0], direction=[0.0, 0.0, 2.0])

        assert line.anchor == Vector.create([1.0, 2.0, 3.0])
        assert line.direction == Vector.create([0.0, 0.0, 2.0])

    def test_2d_input_is_embedded(self):
        line = Line(anchor=[1.0, 2.0], direction=[1.0, 0.0])
        assert line.anchor.elements == (1.0, 2.0, 0.0)
        assert line.direction.elements == (1.0, 0.0, 0.0)

    def test_zero_direction(self):
        with pytest.raises(ValueError):
            Line(anchor=[0.0, 0.0, 0.0], direction=[0.0, 0.0, 0.0])

    def test_wrong_dimensions(self):
        with pytest.raises(ValueError):
            Line(anchor=[0.0, 0.0, 0.0, 0.0], direction=[1.0, 0.0, 0.0])

    def test_create_normalizes_direction(self):
        line = Line.create([0, 0, 0], [2, 0, 0])
        assert line.direction.elements == (1.0, 0.0, 0.0)
        assert Line.create([0, 0, 0], [0, 0, 0]) is None
        assert Line.create([0, 0, 0, 0], [1, 0, 0]) is None

    def test_contains_point(self):
        assert X_AXIS.contains([5.0, 0.0, 0.0])
        assert X_AXIS.contains([5.0, 0.0])
        assert not X_AXIS.contains([5.0, 1.0, 0.0])

    def test_contains_line(self):
        assert X_AXIS.contains(Line(anchor=[3.0, 0.0, 0.0], direction=[-2.0, 0.0, 0.0]))
        assert not X_AXIS.contains(Line(anchor=[3.0, 1.0, 0.0], direction=[1.0, 0.0, 0.0]))
        assert not X_AXIS.contains(Y_AXIS)

    def test_is_parallel_to(self):
        assert X_AXIS.is_parallel_to(Line(anchor=[0.0, 1.0, 0.0], direction=[1.0, 0.0, 0.0]))
        assert X_AXIS.is_parallel_to(X_AXIS.reverse())
        assert not X_AXIS.is_parallel_to(Y_AXIS)
        assert X_AXIS.is_parallel_to(XY_PLANE)
        assert not X_AXIS.is_parallel_to(YZ_PLANE)
        assert X_AXIS.is_parallel_to([1.0, 0.0, 0.0]) is None

    def test_distance_to_point(self):
        assert X_AXIS.distance_from([3.0, 4.0, 0.0]) == pytest.approx(4.0)
        assert X_AXIS.distance_from([3.0, 0.0, 0.0]) == pytest.approx(0.0)
        assert X_AXIS.distance_from([1.0, 2.0, 3.0, 4.0]) is None

    def test_distance_to_line(self):
        parallel = Line(anchor=[0.0, 3.0, 0.0], direction=[1.0, 0.0, 0.0])
        skew = Line(anchor=[0.0, 0.0, 2.0], direction=[0.0, 1.0, 0.0])
        assert X_AXIS.distance_from(parallel) == pytest.approx(3.0)
        assert X_AXIS.distance_from(skew) == pytest.approx(2.0)
        assert X_AXIS.distance_from(Y_AXIS) == pytest.approx(0.0)

    def test_intersects(self):
        skew = Line(anchor=[0.0, 0.0, 2.0], direction=[0.0, 1.0, 0.0])
        assert X_AXIS.intersects(Y_AXIS)
        assert not X_AXIS.intersects(skew)
        assert not X_AXIS.intersects(X_AXIS)
        assert X_AXIS.intersects(YZ_PLANE)
        assert X_AXIS.intersects([1.0, 0.0, 0.0]) is None

    def test_intersection_with_line(self):
        other = Line(anchor=[1.0, 1.0, 0.0], direction=[0.0, 1.0, 0.0])
        assert X_AXIS.intersection_with(other).is_close_to([1.0, 0.0, 0.0])

        slanted = Line.create([0.0, 2.0, 0.0], [1.0, -1.0, 0.0])
        assert X_AXIS.intersection_with(slanted).is_close_to([2.0, 0.0, 0.0])

    def test_intersection_with_plane(self):
        line = Line(anchor=[1.0, 2.0, 5.0], direction=[0.0, 0.0, 1.0])
        assert line.intersection_with(XY_PLANE).is_close_to([1.0, 2.0, 0.0])

    def test_no_intersection(self):
        skew = Line(anchor=[0.0, 0.0, 2.0], direction=[0.0, 1.0, 0.0])
        assert X_AXIS.intersection_with(skew) is None
        assert X_AXIS.intersection_with(XY_PLANE) is None
        with pytest.raises(DegenerateGeometryError):
            X_AXIS.intersection_with(skew, strict=True)

    def test_position_of(self):
        line = Line(anchor=[1.0, 0.0, 0.0], direction=[2.0, 0.0, 0.0])
        assert line.position_of([5.0, 0.0, 0.0]) == pytest.approx(2.0)
        assert line.position_of([5.0, 1.0, 0.0]) is None

    def test_point_closest_to(self):
        assert X_AXIS.point_closest_to([2.0, 5.0, 7.0]).is_close_to([2.0, 0.0, 0.0])
        skew = Line(anchor=[3.0, 0.0, 2.0], direction=[0.0, 1.0, 0.0])
        assert X_AXIS.point_closest_to(skew).is_close_to([3.0, 0.0, 0.0])
        assert X_AXIS.point_closest_to(X_AXIS.translate([0.0, 1.0])) is None

    def test_translate_and_reverse(self):
        moved = X_AXIS.translate([0.0, 1.0])
        assert moved.anchor.elements == (0.0, 1.0, 0.0)
        assert moved.direction == X_AXIS.direction
        assert X_AXIS.reverse().direction.elements == (-1.0, 0.0, 0.0)

    def test_rotate(self):
        rotated = X_AXIS.rotate(math.pi / 2, Z_AXIS)
        assert rotated.anchor.is_close_to([0.0, 0.0, 0.0])
        assert rotated.direction.is_close_to([0.0, 1.0, 0.0])

    def test_reflection_in(self):
        line = Line(anchor=[0.0, 0.0, 1.0], direction=[1.0, 0.0, 1.0])
        mirrored = line.reflection_in(XY_PLANE)
        assert mirrored.anchor.is_close_to([0.0, 0.0, -1.0])
        assert mirrored.direction.is_close_to([1.0, 0.0, -1.0])

        about_point = line.reflection_in([0.0, 0.0, 0.0])
        assert about_point.anchor.is_close_to([0.0, 0.0, -1.0])
        assert about_point.coincides_with(line.translate([0.0, 0.0, -2.0]))

    def test_lies_in(self):
        assert X_AXIS.lies_in(XY_PLANE)
        assert not Z_AXIS.lies_in(XY_PLANE)

    def test_string_representation(self):
        assert str(X_AXIS) == "Line([0.0, 0.0, 0.0] + t[1.0, 0.0, 0.0])"
