"""
Decimal Arithmetic — точная арифметика и округление для arbitrary precision

Модуль обеспечивает численную корректность decimal-ветки движка:
- Точный decimal-контекст (prec=MAX_PREC) для add/subtract/multiply
- Разбор текстовых decimal-литералов с ошибкой MalformedNumber
- Округление до фиксированного scale по правилу ROUND_HALF_EVEN
- Валидация scale и проверка конечности float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сложение и умножение никогда не округляются (контекст процесса не используется)
2. Округление выполняется только через round_to_scale (ROUND_HALF_EVEN)
3. NaN/Infinity никогда не попадают в decimal-компоненты
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Final

# =============================================================================
# КОНСТАНТЫ ESCAPE-ТЕСТА
# =============================================================================

# Радиус диска, за пределами которого орбита считается убежавшей
ESCAPE_RADIUS: Final[float] = 2.0

# Квадрат радиуса для decimal-ветки (сравнение без sqrt)
ESCAPE_RADIUS_SQUARED: Final[Decimal] = Decimal(4)

# Правило округления decimal-компонент
ROUNDING_MODE: Final[str] = ROUND_HALF_EVEN

# Точный контекст: при prec=MAX_PREC сложение и умножение конечных
# операндов выполняются без округления
DECIMAL_CONTEXT: Final[Context] = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EscapeTimeError(Exception):
    """Базовое исключение движка escape-time."""

    pass


class MalformedNumber(EscapeTimeError):
    """
    Компонента не является конечным decimal-литералом.

    Намеренно не наследует ValueError: pydantic оборачивает ValueError из
    валидаторов в ValidationError, а MalformedNumber должен дойти до
    вызывающего кода без изменений.
    """

    pass


# =============================================================================
# РАЗБОР И ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def parse_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Преобразование компоненты в конечный Decimal без потери точности.

    float переводится точно (двоичное значение целиком), строки разбираются
    как decimal-литералы. Округление здесь не выполняется.

    Args:
        value: Decimal, int, float или текстовый литерал

    Returns:
        Точный конечный Decimal

    Raises:
        MalformedNumber: Если строка не является decimal-литералом или
            значение не конечно (NaN/Infinity)
        TypeError: Если тип компоненты не поддерживается

    Examples:
        >>> parse_decimal("0.25")
        Decimal('0.25')
        >>> parse_decimal(0.5)
        Decimal('0.5')
        >>> parse_decimal("abc")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        MalformedNumber: ...
    """
    if isinstance(value, bool):
        raise TypeError(f"Unsupported decimal component type: {type(value).__name__}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise MalformedNumber(f"Not a decimal numeral: {value!r}") from None
    else:
        raise TypeError(f"Unsupported decimal component type: {type(value).__name__}")

    if not result.is_finite():
        raise MalformedNumber(f"Decimal component must be finite, got {value!r}")

    return result


def validate_scale(scale: int) -> None:
    """
    Валидация scale (число дробных десятичных знаков).

    Args:
        scale: Проверяемое значение

    Raises:
        ValueError: Если scale не целое число или отрицательный
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise ValueError(f"scale must be an integer, got {scale!r}")

    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to_scale(value: Decimal, scale: int) -> Decimal:
    """
    Округление до ровно `scale` дробных знаков по ROUND_HALF_EVEN.

    Результат всегда имеет экспоненту -scale, т.е. в plain-записи содержит
    ровно `scale` цифр после точки.

    Args:
        value: Конечный Decimal
        scale: Число дробных знаков (>= 0)

    Returns:
        Округлённое значение

    Examples:
        >>> round_to_scale(Decimal("0.125"), 2)
        Decimal('0.12')
        >>> round_to_scale(Decimal("0.135"), 2)
        Decimal('0.14')
        >>> round_to_scale(Decimal("1"), 3)
        Decimal('1.000')
    """
    quantum = Decimal(1).scaleb(-scale, DECIMAL_CONTEXT)
    return value.quantize(quantum, rounding=ROUNDING_MODE, context=DECIMAL_CONTEXT)


def fractional_digits(value: Decimal) -> int:
    """
    Число дробных знаков в plain-записи значения.

    Examples:
        >>> fractional_digits(Decimal("1.500"))
        3
        >>> fractional_digits(Decimal("12"))
        0
    """
    exponent = value.as_tuple().exponent
    return max(-exponent, 0)


def strip_trailing_zeros(value: Decimal) -> str:
    """
    Plain-запись без хвостовых нулей (без экспоненциальной нотации).

    Examples:
        >>> strip_trailing_zeros(Decimal("0.2500"))
        '0.25'
        >>> strip_trailing_zeros(Decimal("100.00"))
        '100'
    """
    return format(DECIMAL_CONTEXT.normalize(value), "f")
