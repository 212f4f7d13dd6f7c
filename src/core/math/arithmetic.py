"""
Arithmetic — базовые операции и целочисленная степень

Операции:
- add / subtract / multiply: целочисленные, без проверки переполнения
- divide: деление с политикой report-and-continue (CalcOutcome)
- power: целочисленная степень повторным умножением
- approx_circle_area: демонстрационная "площадь круга" на целых числах

ПЕРЕПОЛНЕНИЕ:
Python int не имеет фиксированной разрядности, поэтому add/subtract/
multiply/power никогда не "заворачиваются" (wraparound) — результат всегда
точный. 32-битное переполнение не эмулируется.

ДЕЛЕНИЕ:
divide выполняет настоящее float деление (15 / 4 = 3.75), а не
целочисленное с последующим приведением к float.
"""

from typing import Final

from src.core.domain.outcome import CalcErrorKind, CalcOutcome

# Целочисленная замена π для демонстрации: 3 * 14 (не 3.14)
PI_STAND_IN_WHOLE: Final[int] = 3
PI_STAND_IN_FRACTION: Final[int] = 14


def add(a: int, b: int) -> int:
    return a + b


def subtract(a: int, b: int) -> int:
    return a - b


def multiply(a: int, b: int) -> int:
    return a * b


def divide(a: int, b: int) -> CalcOutcome:
    """
    Деление с защитой от деления на ноль.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        CalcOutcome:
        - b == 0: failure(DIVISION_BY_ZERO), value == 0.0 (sentinel)
        - иначе: success(a / b)

    Examples:
        >>> divide(15, 4).value
        3.75
        >>> divide(15, 0).error
        <CalcErrorKind.DIVISION_BY_ZERO: 'DIVISION_BY_ZERO'>
    """
    if b == 0:
        return CalcOutcome.failure(CalcErrorKind.DIVISION_BY_ZERO)

    return CalcOutcome.success(a / b)


def power(base: int, exponent: int) -> int:
    """
    Целочисленная степень повторным умножением.

    exponent == 0 → 1 для любого base, включая 0^0.

    Отрицательный exponent вне контракта: цикл не выполняется ни разу,
    результат 1. Полагаться на это нельзя.

    Args:
        base: Основание
        exponent: Показатель (>= 0)

    Returns:
        base ** exponent, вычисленный умножением exponent раз

    Examples:
        >>> power(2, 3)
        8
        >>> power(0, 0)
        1
    """
    result = 1
    for _ in range(exponent):
        result = multiply(result, base)

    return result


def approx_circle_area(radius: int) -> int:
    """
    "Площадь круга" на целых числах: (3 * 14) * (r * r).

    Иллюстративное вычисление, не точная формула π·r².

    Examples:
        >>> approx_circle_area(5)
        1050
    """
    return multiply(
        multiply(PI_STAND_IN_WHOLE, PI_STAND_IN_FRACTION),
        multiply(radius, radius),
    )
