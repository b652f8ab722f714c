"""Escape-Time Tester — проверка выхода орбиты за диск радиуса 2.

Итерация: orbit_0 = seed, orbit_{n+1} = z + orbit_n².

Один обобщённый алгоритм escape_time работает с любым типом, который
умеет add, square и has_escaped. Две формы:
- test_point: фиксированная точность (Complex, |z| > 2)
- test_point_arbitrary_precision: произвольная точность (ComplexDecimal, |z|² > 4)

Результат: индекс итерации выхода в [1, max_iterations] или 0, если
орбита не вышла за max_iterations шагов (условно "в множестве").

Режимы использования определяет вызывающий код:
- Mandelbrot: seed = 0+0i, z меняется по пикселям
- Julia: z фиксирован, seed меняется по пикселям

Функции чистые, без состояния; безопасны для параллельного вызова.
"""

import logging
from typing import Protocol, TypeVar

from fractal.core.domain.complex_decimal import ComplexDecimal, ensure_same_scale
from fractal.core.domain.complex_value import Complex
from fractal.core.math.decimal_arithmetic import EscapeTimeError

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidIterationBound(EscapeTimeError):
    """max_iterations отрицательный или не является целым числом."""

    pass


# =============================================================================
# GENERIC ROUTINE
# =============================================================================


class OrbitValue(Protocol):
    """Операции, необходимые escape-тесту."""

    def add(self, addend): ...

    def square(self): ...

    def has_escaped(self) -> bool: ...


T = TypeVar("T", bound=OrbitValue)


def validate_iteration_bound(max_iterations: int) -> None:
    """
    Валидация границы числа итераций.

    Raises:
        InvalidIterationBound: Если max_iterations не int или < 0
    """
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, int):
        raise InvalidIterationBound(f"max_iterations must be an integer, got {max_iterations!r}")

    if max_iterations < 0:
        raise InvalidIterationBound(f"max_iterations must be non-negative, got {max_iterations}")


def escape_time(z: T, seed: T, max_iterations: int) -> int:
    """
    Обобщённый escape-time алгоритм.

    Args:
        z: Слагаемое, добавляемое к квадрату на каждом шаге
        seed: Начальное значение орбиты
        max_iterations: Максимальное число итераций (>= 0)

    Returns:
        Индекс итерации выхода (1..max_iterations) или 0

    Raises:
        InvalidIterationBound: Если max_iterations невалиден

    Examples:
        >>> escape_time(Complex(real=2.0, imaginary=0.0), Complex(real=0.0, imaginary=0.0), 10)
        2
        >>> escape_time(Complex(real=0.0, imaginary=0.0), Complex(real=0.0, imaginary=0.0), 10)
        0
    """
    validate_iteration_bound(max_iterations)

    current = seed
    for iteration in range(1, max_iterations + 1):
        current = z.add(current.square())
        if current.has_escaped():
            return iteration

    return 0


# =============================================================================
# FIXED / ARBITRARY PRECISION FORMS
# =============================================================================


def test_point(z: Complex, seed: Complex, max_iterations: int) -> int:
    """
    Escape-тест в фиксированной точности (float).

    Выход фиксируется при |next| > 2 (строго).
    """
    return escape_time(z, seed, max_iterations)


def test_point_arbitrary_precision(
    z: ComplexDecimal,
    seed: ComplexDecimal,
    max_iterations: int,
) -> int:
    """
    Escape-тест в произвольной точности (Decimal).

    Тот же алгоритм, что и test_point, но с ComplexDecimal и проверкой
    |next|² > 4 без извлечения корня. Для неглубоких орбит результат
    совпадает с test_point.

    Args:
        z: Слагаемое (ComplexDecimal)
        seed: Начальное значение орбиты (тот же scale, что у z)
        max_iterations: Максимальное число итераций (>= 0)

    Returns:
        Индекс итерации выхода (1..max_iterations) или 0

    Raises:
        ScaleMismatch: Если scale у z и seed различаются
        InvalidIterationBound: Если max_iterations невалиден
    """
    scale = ensure_same_scale(z, seed)
    result = escape_time(z, seed, max_iterations)
    logger.debug(
        "Arbitrary-precision escape test: scale=%d max_iterations=%d result=%d",
        scale,
        max_iterations,
        result,
    )
    return result


def narrow_to_fixed_precision(value: ComplexDecimal) -> Complex:
    """Сужение ComplexDecimal до Complex (ближайший float покомпонентно)."""
    return value.to_fixed_precision()


# =============================================================================
# USAGE MODES
# =============================================================================


def test_mandelbrot_point(c: Complex | ComplexDecimal, max_iterations: int) -> int:
    """
    Режим Mandelbrot: seed = 0+0i, z = c.

    Тип и scale нуля берутся из c.
    """
    if isinstance(c, ComplexDecimal):
        return test_point_arbitrary_precision(c, ComplexDecimal.origin(c.scale), max_iterations)
    return test_point(c, Complex(real=0.0, imaginary=0.0), max_iterations)


def test_julia_point(
    z0: Complex | ComplexDecimal,
    c: Complex | ComplexDecimal,
    max_iterations: int,
) -> int:
    """
    Режим Julia: z = c фиксирован для всего изображения, seed = z0 (пиксель).

    Raises:
        TypeError: Если z0 и c разной точности
    """
    if type(z0) is not type(c):
        raise TypeError(
            f"z0 and c must have the same precision: {type(z0).__name__} != {type(c).__name__}"
        )
    if isinstance(c, ComplexDecimal):
        return test_point_arbitrary_precision(c, z0, max_iterations)
    return test_point(c, z0, max_iterations)
