"""
Complex — комплексное число фиксированной точности (float)

Immutable Pydantic модель для обычных уровней zoom, где точности double
достаточно. Каждая операция возвращает новый экземпляр.
"""

import math

from pydantic import BaseModel, Field

from fractal.core.math.decimal_arithmetic import ESCAPE_RADIUS, is_valid_float


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число с компонентами float.

    Immutable модель (frozen=True): равенство и hash структурные,
    по двум компонентам.
    """

    real: float = Field(..., description="Действительная часть")
    imaginary: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    def add(self, addend: "Complex") -> "Complex":
        """Покомпонентная сумма."""
        return Complex(real=self.real + addend.real, imaginary=self.imaginary + addend.imaginary)

    def square(self) -> "Complex":
        """
        Квадрат числа: (re² − im², 2·re·im).

        Returns:
            Новый Complex
        """
        return Complex(
            real=self.real * self.real - self.imaginary * self.imaginary,
            imaginary=2.0 * self.real * self.imaginary,
        )

    def absolute_value(self) -> float:
        """Модуль sqrt(re² + im²)."""
        return math.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    def has_escaped(self) -> bool:
        """
        Проверка выхода за диск радиуса 2.

        Сравнение строгое: |z| == 2 ещё не выход. Переполнение (inf/nan в
        модуле) считается выходом, иначе NaN маскировал бы расходящуюся орбиту.
        """
        magnitude = self.absolute_value()
        if not is_valid_float(magnitude):
            return True
        return magnitude > ESCAPE_RADIUS

    def conjugate(self) -> "Complex":
        """Сопряжённое число (re, −im)."""
        return Complex(real=self.real, imaginary=-self.imaginary)

    def __str__(self) -> str:
        sign = "-" if math.copysign(1.0, self.imaginary) < 0 else "+"
        return f"{self.real!r}{sign}{abs(self.imaginary)!r}i"
