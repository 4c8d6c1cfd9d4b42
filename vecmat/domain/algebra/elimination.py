# vecmat/domain/algebra/elimination.py
"""
Row-reduction routines behind Matrix.to_right_triangular(), rank() and inverse().

These functions copy their input into a scratch buffer local to the call and
never touch the caller's rows. They assume a rectangular, non-empty input;
Matrix enforces that at construction.
"""
from typing import List, Sequence

Scratch = List[List[float]]


def right_triangularize(rows: Sequence[Sequence[float]]) -> Scratch:
    """
    Reduce a matrix to right (upper) triangular form using row addition only.

    Rows are never swapped or scaled, so the determinant is preserved. A zero
    pivot is repaired by adding the first lower row with a nonzero entry in
    the pivot column; if there is none the column is skipped.

    Args:
        rows: Row-major matrix elements

    Returns:
        A new list of rows in right triangular form
    """
    scratch = [list(row) for row in rows]
    row_count = len(scratch)
    col_count = len(scratch[0])

    for i in range(min(row_count, col_count)):
        if scratch[i][i] == 0:
            for j in range(i + 1, row_count):
                if scratch[j][i] != 0:
                    scratch[i] = [a + b for a, b in zip(scratch[i], scratch[j])]
                    break

        pivot = scratch[i][i]
        if pivot != 0:
            pivot_row = scratch[i]
            for j in range(i + 1, row_count):
                multiplier = scratch[j][i] / pivot
                current = scratch[j]
                # Columns up to the pivot column are known to vanish
                scratch[j] = [
                    0.0 if p <= i else current[p] - pivot_row[p] * multiplier
                    for p in range(col_count)
                ]

    return scratch


def gauss_jordan_reduce(augmented: Sequence[Sequence[float]], order: int) -> Scratch:
    """
    Run Gauss-Jordan elimination on a matrix augmented with the identity.

    The augmented rows are first right-triangularized, then processed from the
    bottom row up: each pivot row is divided by its diagonal element and
    multiples of it are subtracted from every row above.

    Args:
        augmented: Rows of [M | I] for a non-singular square M
        order: The order n of M

    Returns:
        The rows of the right half after reduction, i.e. the inverse of M
    """
    scratch = right_triangularize(augmented)
    inverse: Scratch = [[] for _ in range(order)]

    for i in range(order - 1, -1, -1):
        divisor = scratch[i][i]
        scratch[i] = [value / divisor for value in scratch[i]]
        inverse[i] = scratch[i][order:]

        pivot_row = scratch[i]
        for j in range(i):
            factor = scratch[j][i]
            scratch[j] = [a - b * factor for a, b in zip(scratch[j], pivot_row)]

    return inverse
