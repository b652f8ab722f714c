"""
Domain models and value objects.

Contains the immutable complex number types: Complex, ComplexDecimal.
"""

from fractal.core.domain.complex_decimal import ComplexDecimal, ScaleMismatch, ensure_same_scale
from fractal.core.domain.complex_value import Complex

__all__ = [
    # Fixed precision
    "Complex",
    # Arbitrary precision
    "ComplexDecimal",
    "ScaleMismatch",
    "ensure_same_scale",
]
