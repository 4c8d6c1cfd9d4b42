"""
vecmat - vectors, matrices, lines and planes for small-dimension geometry
"""
import logging

# Configure logging to print to console
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

__version__ = "0.1.0"

from vecmat.domain.algebra.constants import PRECISION
from vecmat.domain.algebra.errors import (
    LinearAlgebraError,
    DimensionMismatchError,
    NotSquareError,
    SingularMatrixError,
    DegenerateGeometryError,
)
from vecmat.domain.algebra.tolerance import configure_precision, get_precision
from vecmat.domain.algebra.vector import Vector, UNIT_I, UNIT_J, UNIT_K
from vecmat.domain.algebra.matrix import Matrix
from vecmat.domain.algebra.transforms import (
    rotation,
    rotation_x,
    rotation_y,
    rotation_z,
    translation,
    look_at,
    perspective,
    frustum,
    ortho,
)
from vecmat.domain.geometry.line import Line, X_AXIS, Y_AXIS, Z_AXIS
from vecmat.domain.geometry.plane import Plane, XY_PLANE, YZ_PLANE, ZX_PLANE
from vecmat.domain.geometry.solver import solve_linear_system
from vecmat.utils.formatting import matrix_to_html

__all__ = [
    'PRECISION',
    'LinearAlgebraError',
    'DimensionMismatchError',
    'NotSquareError',
    'SingularMatrixError',
    'DegenerateGeometryError',
    'configure_precision',
    'get_precision',
    'Vector',
    'UNIT_I',
    'UNIT_J',
    'UNIT_K',
    'Matrix',
    'rotation',
    'rotation_x',
    'rotation_y',
    'rotation_z',
    'translation',
    'look_at',
    'perspective',
    'frustum',
    'ortho',
    'Line',
    'X_AXIS',
    'Y_AXIS',
    'Z_AXIS',
    'Plane',
    'XY_PLANE',
    'YZ_PLANE',
    'ZX_PLANE',
    'solve_linear_system',
    'matrix_to_html',
]
