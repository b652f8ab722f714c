"""
Precision — выбор уровня точности для окна просмотра

Вспомогательные функции для вызывающего кода (рендерера): ядро само
никогда не переключает точность, решение принимает вызывающий код.

Правило выбора:
    pixel_step = view_span / max(pixels - 1, 1)
    FIXED      если pixel_step > epsilon_guard * float_eps * max(|center|, 1)
    ARBITRARY  иначе (соседние пиксели сливаются в одно значение double)

Необходимый scale:
    scale = ceil(-log10(pixel_step)) + guard_digits, не меньше min_scale
"""

import logging
import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Final

logger = logging.getLogger(__name__)

# Машинный epsilon double
FLOAT_EPSILON: Final[float] = sys.float_info.epsilon


# =============================================================================
# ENUMS / CONFIG
# =============================================================================


class PrecisionTier(str, Enum):
    """Уровень точности вычислений"""

    FIXED = "fixed"
    ARBITRARY = "arbitrary"


@dataclass(frozen=True)
class PrecisionPolicy:
    """Конфигурация выбора точности.

    epsilon_guard: запас (в единицах float_eps) до слияния пикселей
    guard_digits: дополнительные дробные знаки сверх шага пикселя
    min_scale: минимальный scale для arbitrary precision
    """

    epsilon_guard: float = 32.0
    guard_digits: int = 4
    min_scale: int = 16


# =============================================================================
# ВЫБОР ТОЧНОСТИ
# =============================================================================


def pixel_step(view_span: float, pixels: int) -> float:
    """
    Шаг между соседними пикселями в координатах плоскости.

    Raises:
        ValueError: Если view_span <= 0 (или NaN/Inf) или pixels < 1
    """
    if not math.isfinite(view_span) or view_span <= 0:
        raise ValueError(f"view_span must be a positive finite number, got {view_span}")

    if pixels < 1:
        raise ValueError(f"pixels must be >= 1, got {pixels}")

    return view_span / max(pixels - 1, 1)


def select_precision_tier(
    view_span: float,
    pixels: int,
    center_magnitude: float = 0.0,
    policy: PrecisionPolicy | None = None,
) -> PrecisionTier:
    """
    Выбор уровня точности для окна шириной view_span.

    Args:
        view_span: Ширина окна в координатах плоскости
        pixels: Число пикселей по ширине
        center_magnitude: max(|re|, |im|) центра окна
        policy: Конфигурация (опционально, используется default)

    Returns:
        PrecisionTier.FIXED или PrecisionTier.ARBITRARY

    Examples:
        >>> select_precision_tier(3.0, 800)
        <PrecisionTier.FIXED: 'fixed'>
        >>> select_precision_tier(1e-14, 800, center_magnitude=0.75)
        <PrecisionTier.ARBITRARY: 'arbitrary'>
    """
    policy = policy or PrecisionPolicy()
    step = pixel_step(view_span, pixels)
    threshold = policy.epsilon_guard * FLOAT_EPSILON * max(abs(center_magnitude), 1.0)

    if step > threshold:
        return PrecisionTier.FIXED

    logger.info(
        "Arbitrary precision required: pixel_step=%.3e threshold=%.3e",
        step,
        threshold,
    )
    return PrecisionTier.ARBITRARY


def required_scale(
    view_span: float,
    pixels: int,
    policy: PrecisionPolicy | None = None,
) -> int:
    """
    Число дробных десятичных знаков, достаточное для разрешения шага пикселя.

    Examples:
        >>> required_scale(3e-20, 1001)
        27
        >>> required_scale(3.0, 800)
        16
    """
    policy = policy or PrecisionPolicy()
    step = pixel_step(view_span, pixels)
    digits = math.ceil(-math.log10(step)) + policy.guard_digits
    return max(digits, policy.min_scale)
