# vecmat/domain/algebra/operands.py
"""
Resolution of the loosely typed arguments accepted by public operations.

An argument is one of a small closed set of variants: a number, a raw
sequence (flat or nested), a Vector, a Matrix, a Line or a Plane. Each
public operation resolves its argument once, on entry, into an Operand and
then works on the resolved rows or components only.
"""
import numbers
from enum import Enum
from typing import Any, NamedTuple, Optional, Tuple

Rows = Tuple[Tuple[float, ...], ...]


class OperandKind(str, Enum):
    """The variants an argument can resolve to."""
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    VECTOR = "vector"
    MATRIX = "matrix"
    LINE = "line"
    PLANE = "plane"
    UNKNOWN = "unknown"


class Operand(NamedTuple):
    """An argument tagged with its kind.

    ``rows`` holds the matrix view of sequence, vector and matrix operands
    (flat sequences and vectors become a single column), ``components``
    the flat view of sequence and vector operands.
    """
    kind: OperandKind
    value: Any
    rows: Optional[Rows] = None
    components: Optional[Tuple[float, ...]] = None


def _is_sequence(value: Any) -> bool:
    return hasattr(value, "__len__") and hasattr(value, "__getitem__") and not isinstance(value, (str, bytes))


def classify(value: Any) -> OperandKind:
    """Determine which variant a value belongs to."""
    kind = getattr(type(value), "operand_kind", None)
    if isinstance(kind, OperandKind):
        return kind
    if isinstance(value, numbers.Real):
        return OperandKind.SCALAR
    if _is_sequence(value):
        return OperandKind.SEQUENCE
    return OperandKind.UNKNOWN


def _rows_from_sequence(value: Any) -> Rows:
    if len(value) > 0 and _is_sequence(value[0]):
        return tuple(tuple(float(x) for x in row) for row in value)
    return tuple((float(x),) for x in value)


def resolve(value: Any) -> Operand:
    """
    Resolve an argument into a tagged Operand.

    Args:
        value: Number, flat or nested sequence, Vector, Matrix, Line or Plane

    Returns:
        The Operand, with rows/components filled in where the kind has them
    """
    kind = classify(value)
    if kind is OperandKind.MATRIX:
        return Operand(kind, value, rows=value.elements)
    if kind is OperandKind.VECTOR:
        components = value.elements
        return Operand(kind, value, rows=tuple((x,) for x in components), components=components)
    if kind is OperandKind.SEQUENCE:
        rows = _rows_from_sequence(value)
        components = None
        if len(value) == 0 or not _is_sequence(value[0]):
            components = tuple(float(x) for x in value)
        return Operand(kind, value, rows=rows, components=components)
    return Operand(kind, value)


def components_of(value: Any) -> Optional[Tuple[float, ...]]:
    """Flat components of a Vector or flat sequence, None for anything else."""
    return resolve(value).components
