# vecmat/domain/algebra/constants.py
"""Constants for numerical comparisons."""

# Default tolerance for floating-point comparisons
PRECISION = 1e-6
