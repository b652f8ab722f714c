"""
Core math modules

Точная decimal-арифметика, округление и выбор уровня точности.
"""

# Decimal Arithmetic
from fractal.core.math.decimal_arithmetic import (
    # Constants
    DECIMAL_CONTEXT,
    ESCAPE_RADIUS,
    ESCAPE_RADIUS_SQUARED,
    ROUNDING_MODE,
    # Exceptions
    EscapeTimeError,
    MalformedNumber,
    # Functions
    fractional_digits,
    is_valid_float,
    parse_decimal,
    round_to_scale,
    strip_trailing_zeros,
    validate_scale,
)

# Precision
from fractal.core.math.precision import (
    FLOAT_EPSILON,
    PrecisionPolicy,
    PrecisionTier,
    pixel_step,
    required_scale,
    select_precision_tier,
)

__all__ = [
    # Decimal Arithmetic — Constants
    "DECIMAL_CONTEXT",
    "ESCAPE_RADIUS",
    "ESCAPE_RADIUS_SQUARED",
    "ROUNDING_MODE",
    # Decimal Arithmetic — Exceptions
    "EscapeTimeError",
    "MalformedNumber",
    # Decimal Arithmetic — Functions
    "fractional_digits",
    "is_valid_float",
    "parse_decimal",
    "round_to_scale",
    "strip_trailing_zeros",
    "validate_scale",
    # Precision — Constants
    "FLOAT_EPSILON",
    # Precision — Types
    "PrecisionPolicy",
    "PrecisionTier",
    # Precision — Functions
    "pixel_step",
    "required_scale",
    "select_precision_tier",
]
