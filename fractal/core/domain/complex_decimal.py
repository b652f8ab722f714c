"""
ComplexDecimal — комплексное число произвольной точности

Immutable Pydantic модель для глубокого zoom, где округление double
делает границу множества вычислительно бессмысленной.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обе компоненты округлены до ровно `scale` дробных знаков (ROUND_HALF_EVEN)
   при создании и после каждой арифметической операции
2. Экземпляр с неокруглёнными компонентами никогда не наблюдаем
3. Операнды одной операции имеют одинаковый scale, иначе ScaleMismatch
4. Равенство: real, imaginary и scale совпадают покомпонентно
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, model_validator

from fractal.core.domain.complex_value import Complex
from fractal.core.math.decimal_arithmetic import (
    DECIMAL_CONTEXT,
    ESCAPE_RADIUS_SQUARED,
    EscapeTimeError,
    parse_decimal,
    round_to_scale,
    strip_trailing_zeros,
    validate_scale,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ScaleMismatch(EscapeTimeError):
    """
    Операнды arbitrary-precision операции имеют разный scale.

    Молчаливое перемасштабирование не выполняется: вызывающий код обязан
    строить все значения одного вычисления с одним scale.
    """

    pass


def ensure_same_scale(left: "ComplexDecimal", right: "ComplexDecimal") -> int:
    """
    Проверка совпадения scale у двух операндов.

    Returns:
        Общий scale

    Raises:
        ScaleMismatch: Если scale различаются
    """
    if left.scale != right.scale:
        raise ScaleMismatch(
            f"Operands must share scale: {left.scale} != {right.scale}"
        )
    return left.scale


# =============================================================================
# COMPLEX DECIMAL MODEL
# =============================================================================


class ComplexDecimal(BaseModel):
    """
    Комплексное число с компонентами Decimal фиксированного scale.

    Компоненты принимаются как Decimal, int, float (точное двоичное значение)
    или текстовый decimal-литерал и сразу округляются до `scale`.
    Сложение и умножение выполняются точно в DECIMAL_CONTEXT, округление
    происходит только при создании результата.
    """

    real: Decimal = Field(..., description="Действительная часть, ровно scale дробных знаков")
    imaginary: Decimal = Field(..., description="Мнимая часть, ровно scale дробных знаков")
    scale: int = Field(..., ge=0, description="Число дробных десятичных знаков")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def round_components(cls, data: Any) -> Any:
        """
        Разбор и округление компонент до `scale` (ROUND_HALF_EVEN).

        Raises:
            MalformedNumber: Если компонента не является конечным decimal-литералом
        """
        if not isinstance(data, dict) or "scale" not in data:
            return data

        scale = data["scale"]
        validate_scale(scale)

        rounded = dict(data)
        for name in ("real", "imaginary"):
            if name in rounded:
                rounded[name] = round_to_scale(parse_decimal(rounded[name]), scale)
        return rounded

    @classmethod
    def origin(cls, scale: int) -> "ComplexDecimal":
        """Ноль 0+0i с заданным scale (seed множества Мандельброта)."""
        return cls(real=0, imaginary=0, scale=scale)

    def add(self, addend: "ComplexDecimal") -> "ComplexDecimal":
        """
        Покомпонентная сумма, округлённая до общего scale.

        Raises:
            ScaleMismatch: Если scale операндов различаются
        """
        scale = ensure_same_scale(self, addend)
        return ComplexDecimal(
            real=DECIMAL_CONTEXT.add(self.real, addend.real),
            imaginary=DECIMAL_CONTEXT.add(self.imaginary, addend.imaginary),
            scale=scale,
        )

    def square(self) -> "ComplexDecimal":
        """
        Квадрат числа: (re² − im², 2·re·im), округлённый до scale.

        Произведения вычисляются точно, округляется только результат.
        """
        ctx = DECIMAL_CONTEXT
        real = ctx.subtract(ctx.multiply(self.real, self.real), ctx.multiply(self.imaginary, self.imaginary))
        imaginary = ctx.multiply(ctx.multiply(self.real, self.imaginary), 2)
        return ComplexDecimal(real=real, imaginary=imaginary, scale=self.scale)

    def magnitude_squared(self) -> Decimal:
        """
        Квадрат модуля |z|² = re² + im².

        Значение точное и не округляется: sqrt привёл бы к потере точности,
        поэтому escape-тест сравнивает |z|² с 4.
        """
        ctx = DECIMAL_CONTEXT
        return ctx.add(ctx.multiply(self.real, self.real), ctx.multiply(self.imaginary, self.imaginary))

    def has_escaped(self) -> bool:
        """Проверка |z|² > 4 (строгое сравнение)."""
        return self.magnitude_squared() > ESCAPE_RADIUS_SQUARED

    def conjugate(self) -> "ComplexDecimal":
        """Сопряжённое число (re, −im) с тем же scale."""
        return ComplexDecimal(real=self.real, imaginary=self.imaginary.copy_negate(), scale=self.scale)

    def to_fixed_precision(self) -> Complex:
        """
        Сужение до Complex: ближайший float для каждой компоненты.

        Потеря точности молчаливая, обратного преобразования нет.
        """
        return Complex(real=float(self.real), imaginary=float(self.imaginary))

    def plain_string(self) -> str:
        """Plain-запись с ровно `scale` дробными знаками у обеих компонент."""
        sign = "-" if self.imaginary.is_signed() else "+"
        return f"{self.real:f}{sign}{self.imaginary.copy_abs():f}i"

    def __str__(self) -> str:
        sign = "-" if self.imaginary.is_signed() else "+"
        return f"{strip_trailing_zeros(self.real)}{sign}{strip_trailing_zeros(self.imaginary.copy_abs())}i"
