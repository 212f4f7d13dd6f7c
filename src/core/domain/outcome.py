"""
CalcOutcome — результат вычисления с политикой report-and-continue

Доменные ошибки ядра (деление на ноль, корень из отрицательного числа)
не выбрасываются как исключения. Функция ядра возвращает CalcOutcome:
- value: вычисленное значение или sentinel 0.0 при ошибке
- error: тип доменной ошибки (None при успехе)

Печать диагностического сообщения выполняет вызывающий код (Reporter),
ядро остаётся чистым и тестируется без перехвата stdout.

ИНВАРИАНТЫ:
1. failure → value == SENTINEL_VALUE (0.0)
2. success → error is None
3. Тексты сообщений фиксированы (побайтовое сравнение вывода)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

# Значение, возвращаемое вместо результата при доменной ошибке
SENTINEL_VALUE: Final[float] = 0.0


# =============================================================================
# ENUMS
# =============================================================================


class CalcErrorKind(str, Enum):
    """Доменные ошибки ядра калькулятора."""

    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    NEGATIVE_SQRT_INPUT = "NEGATIVE_SQRT_INPUT"

    @property
    def message(self) -> str:
        """Фиксированный диагностический текст для консоли."""
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: Final[dict[CalcErrorKind, str]] = {
    CalcErrorKind.DIVISION_BY_ZERO: "Error: Division by zero!",
    CalcErrorKind.NEGATIVE_SQRT_INPUT: (
        "Error: Cannot calculate square root of negative number!"
    ),
}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CalcOutcome:
    """Значение или tagged доменная ошибка.

    Examples:
        >>> CalcOutcome.success(3.75).value
        3.75
        >>> CalcOutcome.failure(CalcErrorKind.DIVISION_BY_ZERO).value
        0.0
    """

    value: float
    error: Optional[CalcErrorKind] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value != SENTINEL_VALUE:
            raise ValueError(
                f"Failed outcome must carry sentinel {SENTINEL_VALUE}, got {self.value}"
            )

    @classmethod
    def success(cls, value: float) -> "CalcOutcome":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: CalcErrorKind) -> "CalcOutcome":
        return cls(value=SENTINEL_VALUE, error=kind)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        """Диагностика для печати (None при успехе)."""
        if self.error is None:
            return None
        return self.error.message


class FloatStyle(str, Enum):
    """Стиль отображения float результатов.

    FIXED — шесть знаков после точки ("%f").
    TRUNCATED — вывод через целочисленный форматтер (дробная часть
    отбрасывается).
    """

    FIXED = "fixed"
    TRUNCATED = "truncated"
