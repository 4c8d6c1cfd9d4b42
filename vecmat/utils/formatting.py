# vecmat/utils/formatting.py
"""Human-readable renderings of matrices."""
from vecmat.domain.algebra.matrix import Matrix


def matrix_to_html(matrix: Matrix) -> str:
    """
    Render a 3x3 or 4x4 matrix as monospace HTML, one row per line.

    Elements are shown with four decimals. Matrices of any other size fall
    back to the plain inspect() text.
    """
    if matrix.dimensions() not in ((3, 3), (4, 4)):
        return matrix.inspect()
    lines = []
    for row in matrix.elements:
        cells = ",".join(f"{x:.4f}" for x in row)
        lines.append(f"<span style='font-family: monospace'>[{cells}]</span><br>")
    return "".join(lines)
