"""
Numerical Safeguards — проверки параметров и сходимости

Модуль содержит вспомогательные примитивы для ядра калькулятора:
- Параметры сходимости итерационных методов (precision, max iterations)
- Проверка сходимости по абсолютной разнице
- Валидация параметров итерационных методов (ValueError при нарушении)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нарушение контракта функции → ValueError (программная ошибка)
2. Доменные ошибки (деление на ноль и т.п.) здесь НЕ обрабатываются,
   они возвращаются как CalcOutcome из функций ядра
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ СХОДИМОСТИ
# =============================================================================

# Порог сходимости метода Ньютона: |new_guess - guess| < SQRT_PRECISION_DEFAULT
SQRT_PRECISION_DEFAULT: Final[float] = 0.001

# Максимальное число итераций метода Ньютона
SQRT_MAX_ITERATIONS_DEFAULT: Final[int] = 20


# =============================================================================
# СХОДИМОСТЬ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def has_converged(previous: float, current: float, precision: float) -> bool:
    """
    Проверка сходимости итерации по абсолютной разнице.

    Сравнение строгое: разница, равная precision, не считается сходимостью.

    Args:
        previous: Значение на предыдущей итерации
        current: Значение на текущей итерации
        precision: Порог сходимости (> 0)

    Returns:
        True если |current - previous| < precision

    Examples:
        >>> has_converged(4.0012, 4.0000002, 0.001)
        False
        >>> has_converged(4.0000002, 4.0, 0.001)
        True
    """
    return abs(current - previous) < precision


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")

