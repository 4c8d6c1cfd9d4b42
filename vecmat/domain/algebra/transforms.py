# vecmat/domain/algebra/transforms.py
"""
Builders for rotation, translation and projection matrices.

The projection builders follow the OpenGL conventions of gluLookAt,
gluPerspective, glFrustum and glOrtho and produce 4x4 matrices for
column vectors.
"""
import math
from typing import Any, Optional

from vecmat.domain.algebra.matrix import Matrix
from vecmat.domain.algebra.operands import components_of
from vecmat.domain.algebra.vector import Vector


def rotation(theta: float, axis: Any = None) -> Optional[Matrix]:
    """
    Rotation matrix for an angle of theta radians.

    Without an axis this is the 2x2 rotation of the plane. With an axis it is
    the 3x3 Rodrigues rotation about that axis, anticlockwise when looking
    along the axis towards the origin.

    Args:
        theta: Angle in radians
        axis: Optional 3D axis of rotation (Vector or sequence), need not be unit length

    Returns:
        The rotation matrix, or None if the axis is not a non-zero 3D vector
    """
    if axis is None:
        c, s = math.cos(theta), math.sin(theta)
        return Matrix(elements=((c, -s), (s, c)))

    components = components_of(axis)
    if components is None or len(components) != 3:
        return None
    mod = Vector(elements=components).modulus()
    if mod == 0:
        return None
    x, y, z = (value / mod for value in components)
    s, c = math.sin(theta), math.cos(theta)
    t = 1 - c
    return Matrix(elements=(
        (t * x * x + c, t * x * y - s * z, t * x * z + s * y),
        (t * x * y + s * z, t * y * y + c, t * y * z - s * x),
        (t * x * z - s * y, t * y * z + s * x, t * z * z + c),
    ))


def rotation_x(theta: float) -> Matrix:
    """Rotation about the x axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Matrix(elements=((1.0, 0.0, 0.0), (0.0, c, -s), (0.0, s, c)))


def rotation_y(theta: float) -> Matrix:
    """Rotation about the y axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Matrix(elements=((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c)))


def rotation_z(theta: float) -> Matrix:
    """Rotation about the z axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Matrix(elements=((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0)))


def translation(vector: Any) -> Matrix:
    """
    Homogeneous translation matrix.

    A 2D offset gives a 3x3 matrix and a 3D offset a 4x4 matrix, with the
    offset in the last column.

    Raises:
        ValueError: If the offset is neither 2D nor 3D
    """
    components = components_of(vector)
    if components is None or len(components) not in (2, 3):
        raise ValueError(f"Translation needs a 2D or 3D offset, got {vector!r}")
    n = len(components) + 1
    return Matrix.identity(n).map(
        lambda x, i, j: components[i - 1] if j == n and i < n else x
    )


def look_at(eye: Any, centre: Any, up: Any) -> Matrix:
    """View matrix placing the camera at eye, looking at centre, with the given up direction."""
    eye = Vector.create(eye)
    z = eye.subtract(centre).to_unit_vector()
    x = Vector.create(up).cross(z).to_unit_vector()
    y = z.cross(x).to_unit_vector()

    orientation = Matrix(elements=(
        x.elements + (0.0,),
        y.elements + (0.0,),
        z.elements + (0.0,),
        (0.0, 0.0, 0.0, 1.0),
    ))
    return orientation.multiply(translation(eye.multiply(-1)))


def frustum(left: float, right: float, bottom: float, top: float, znear: float, zfar: float) -> Matrix:
    """Perspective projection for the given clipping planes, as glFrustum."""
    x = 2 * znear / (right - left)
    y = 2 * znear / (top - bottom)
    a = (right + left) / (right - left)
    b = (top + bottom) / (top - bottom)
    c = -(zfar + znear) / (zfar - znear)
    d = -2 * zfar * znear / (zfar - znear)
    return Matrix(elements=(
        (x, 0.0, a, 0.0),
        (0.0, y, b, 0.0),
        (0.0, 0.0, c, d),
        (0.0, 0.0, -1.0, 0.0),
    ))


def perspective(fovy: float, aspect: float, znear: float, zfar: float) -> Matrix:
    """Perspective projection from a vertical field of view in degrees, as gluPerspective."""
    ymax = znear * math.tan(fovy * math.pi / 360.0)
    ymin = -ymax
    return frustum(ymin * aspect, ymax * aspect, ymin, ymax, znear, zfar)


def ortho(left: float, right: float, bottom: float, top: float, znear: float, zfar: float) -> Matrix:
    """Orthographic projection, as glOrtho."""
    tx = -(right + left) / (right - left)
    ty = -(top + bottom) / (top - bottom)
    tz = -(zfar + znear) / (zfar - znear)
    return Matrix(elements=(
        (2 / (right - left), 0.0, 0.0, tx),
        (0.0, 2 / (top - bottom), 0.0, ty),
        (0.0, 0.0, -2 / (zfar - znear), tz),
        (0.0, 0.0, 0.0, 1.0),
    ))
