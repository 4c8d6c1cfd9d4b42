# vecmat/domain/algebra/tolerance.py
"""
Process-wide default tolerance and the helpers that resolve it.

Every comparison-bearing operation takes an explicit ``tolerance`` keyword;
passing None falls back to the configured default, which starts out as
PRECISION. The default is meant to be configured once at start-up, before
any comparison is made. Changing it while other threads compare is not
synchronized.
"""
import logging
import math
from typing import Optional

from vecmat.domain.algebra.constants import PRECISION

logger = logging.getLogger(__name__)

_default_precision = PRECISION


def get_precision() -> float:
    """Return the configured default tolerance."""
    return _default_precision


def configure_precision(value: float) -> float:
    """
    Override the default tolerance used when callers pass no tolerance.

    Args:
        value: New tolerance, must be positive and finite

    Returns:
        The previous default

    Raises:
        ValueError: If the value is not a positive finite number
    """
    global _default_precision
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"Precision must be a positive finite number, got {value}")
    previous = _default_precision
    _default_precision = float(value)
    logger.info(f"Default precision changed from {previous} to {_default_precision}")
    return previous


def resolve_tolerance(tolerance: Optional[float] = None) -> float:
    """Return the given tolerance, or the configured default when it is None."""
    if tolerance is None:
        return _default_precision
    return tolerance


def is_zero(value: float, tolerance: float = None) -> bool:
    """Check whether a value is numerically zero."""
    return abs(value) <= resolve_tolerance(tolerance)


def are_close(a: float, b: float, tolerance: float = None) -> bool:
    """Check whether two values differ by at most the tolerance (absolute difference)."""
    return abs(a - b) <= resolve_tolerance(tolerance)
