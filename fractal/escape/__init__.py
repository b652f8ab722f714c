"""Escape — escape-time тест точек для множеств Мандельброта и Жюлиа.

- test_point: фиксированная точность (float)
- test_point_arbitrary_precision: произвольная точность (Decimal)
- test_mandelbrot_point / test_julia_point: режимы использования
"""

from .escape_time import (
    InvalidIterationBound,
    OrbitValue,
    escape_time,
    narrow_to_fixed_precision,
    test_julia_point,
    test_mandelbrot_point,
    test_point,
    test_point_arbitrary_precision,
    validate_iteration_bound,
)

__all__ = [
    "InvalidIterationBound",
    "OrbitValue",
    "escape_time",
    "narrow_to_fixed_precision",
    "test_julia_point",
    "test_mandelbrot_point",
    "test_point",
    "test_point_arbitrary_precision",
    "validate_iteration_bound",
]
