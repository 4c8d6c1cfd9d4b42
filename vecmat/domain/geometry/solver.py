# vecmat/domain/geometry/solver.py
"""
Small linear systems solved with Matrix.inverse().

Used by the plane intersection routines to find a common point of two
planes.
"""
import logging
from typing import Any, Optional

from vecmat.domain.algebra.matrix import Matrix
from vecmat.domain.algebra.operands import components_of
from vecmat.domain.algebra.vector import Vector

logger = logging.getLogger(__name__)


def solve_linear_system(coefficients: Any, constants: Any) -> Optional[Vector]:
    """
    Solve the square system coefficients * x = constants.

    Args:
        coefficients: Square Matrix (or nested sequence) of the system
        constants: Right-hand side as a Vector or flat sequence

    Returns:
        The solution vector, or None if the system is not square, is singular,
        or the right-hand side has the wrong size
    """
    matrix = Matrix.create(coefficients)
    rhs = components_of(constants)
    if rhs is None or len(rhs) != matrix.row_count:
        return None
    inverse = matrix.inverse()
    if inverse is None:
        return None
    return inverse.multiply(Vector(elements=rhs))


def plane_pair_anchor(n: Vector, a: Vector, o: Vector, b: Vector) -> Optional[Vector]:
    """
    Find a point lying in two non-parallel planes.

    The planes are N.x = N.A and O.x = O.B. One coordinate of the point is
    fixed at zero and the 2x2 system in the two remaining coordinates is
    solved. Candidate coordinate pairs (k, k+1) are tried for k = 0, 1, 2
    until their 2x2 block of the normals is non-singular; the coordinate
    (k + 2) mod 3 is the one set to zero.

    Args:
        n: Normal of the first plane
        a: Anchor of the first plane
        o: Normal of the second plane
        b: Anchor of the second plane

    Returns:
        A common point, or None if every candidate block is singular, which
        happens only for parallel normals
    """
    constants = (n.dot(a), o.dot(b))
    N, O = n.elements, o.elements

    for k in range(3):
        k1 = (k + 1) % 3
        block = Matrix(elements=((N[k], N[k1]), (O[k], O[k1])))
        if block.is_singular():
            continue
        solution = block.inverse().multiply(Vector(elements=constants))
        anchor = [0.0, 0.0, 0.0]
        anchor[k] = solution.elements[0]
        anchor[k1] = solution.elements[1]
        return Vector(elements=anchor)

    logger.warning(f"No non-singular 2x2 block for normals {n} and {o}; planes are parallel")
    return None
