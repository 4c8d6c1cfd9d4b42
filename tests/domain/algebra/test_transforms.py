import pytest
import math
from vecmat.domain.algebra.matrix import Matrix
from vecmat.domain.algebra.transforms import (
    frustum,
    look_at,
    ortho,
    perspective,
    rotation,
    rotation_x,
    rotation_y,
    rotation_z,
    translation,
)
from vecmat.domain.algebra.vector import Vector


class TestRotation:
    def test_plane_rotation(self):
        r = rotation(math.pi / 2)
        assert r.is_close_to([[0, -1], [1, 0]])

    def test_axis_rotation_matches_special_cases(self):
        theta = 0.3
        assert rotation(theta, [1, 0, 0]).is_close_to(rotation_x(theta))
        assert rotation(theta, [0, 2, 0]).is_close_to(rotation_y(theta))
        assert rotation(theta, Vector.create([0, 0, 5])).is_close_to(rotation_z(theta))

    def test_axis_rotation_is_orthogonal(self):
        r = rotation(1.2, [1, 2, 3])
        assert r.multiply(r.transpose()).is_close_to(Matrix.identity(3))
        assert r.determinant() == pytest.approx(1.0)

    def test_invalid_axis(self):
        assert rotation(1.0, [1, 0]) is None
        assert rotation(1.0, [0, 0, 0]) is None


class TestTranslation:
    def test_3d_translation(self):
        t = translation([1, 2, 3])
        assert t.dimensions() == (4, 4)
        assert t.multiply(Vector.create([0, 0, 0, 1])).elements == (1.0, 2.0, 3.0, 1.0)

    def test_2d_translation(self):
        t = translation(Vector.create([5, -1]))
        assert t.elements == ((1.0, 0.0, 5.0), (0.0, 1.0, -1.0), (0.0, 0.0, 1.0))

    def test_invalid_translation(self):
        with pytest.raises(ValueError):
            translation([1, 2, 3, 4])


class TestProjections:
    def test_ortho(self):
        assert ortho(-1, 1, -1, 1, -1, 1).is_close_to(Matrix.diagonal_of([1, 1, -1, 1]))

    def test_frustum(self):
        m = frustum(-1, 1, -1, 1, 1, 10)
        assert m.is_close_to([
            [1, 0, 0, 0],
            [0, 1, 0, 0],
            [0, 0, -11 / 9, -20 / 9],
            [0, 0, -1, 0],
        ])

    def test_perspective_matches_frustum(self):
        assert perspective(90, 1, 1, 10).is_close_to(frustum(-1, 1, -1, 1, 1, 10))

    def test_look_at(self):
        m = look_at([0, 0, 1], [0, 0, 0], [0, 1, 0])
        assert m.is_close_to([
            [1, 0, 0, 0],
            [0, 1, 0, 0],
            [0, 0, 1, -1],
            [0, 0, 0, 1],
        ])
