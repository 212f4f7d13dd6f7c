"""
Тесты для CalcOutcome и доменных enum

Покрывает:
- success / failure конструкторы
- sentinel инвариант
- Тексты диагностических сообщений
- Immutability (frozen dataclass)
"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.domain import SENTINEL_VALUE, CalcErrorKind, CalcOutcome, FloatStyle


class TestCalcErrorKind:
    """Тесты CalcErrorKind."""

    def test_messages(self):
        assert CalcErrorKind.DIVISION_BY_ZERO.message == "Error: Division by zero!"
        assert (
            CalcErrorKind.NEGATIVE_SQRT_INPUT.message
            == "Error: Cannot calculate square root of negative number!"
        )

    def test_str_enum(self):
        assert CalcErrorKind("DIVISION_BY_ZERO") is CalcErrorKind.DIVISION_BY_ZERO


class TestCalcOutcome:
    """Тесты CalcOutcome."""

    def test_success(self):
        outcome = CalcOutcome.success(3.75)
        assert outcome.ok
        assert outcome.value == 3.75
        assert outcome.error is None
        assert outcome.message is None

    def test_failure_carries_sentinel(self):
        outcome = CalcOutcome.failure(CalcErrorKind.NEGATIVE_SQRT_INPUT)
        assert not outcome.ok
        assert outcome.value == SENTINEL_VALUE == 0.0
        assert outcome.message == CalcErrorKind.NEGATIVE_SQRT_INPUT.message

    def test_failure_with_non_sentinel_rejected(self):
        with pytest.raises(ValueError, match="must carry sentinel"):
            CalcOutcome(value=1.0, error=CalcErrorKind.DIVISION_BY_ZERO)

    def test_frozen(self):
        outcome = CalcOutcome.success(1.0)
        with pytest.raises(FrozenInstanceError):
            outcome.value = 2.0

    def test_equality(self):
        assert CalcOutcome.success(2.0) == CalcOutcome.success(2.0)
        assert CalcOutcome.success(0.0) != CalcOutcome.failure(CalcErrorKind.DIVISION_BY_ZERO)


class TestFloatStyle:
    """Тесты FloatStyle."""

    def test_values(self):
        assert FloatStyle("fixed") is FloatStyle.FIXED
        assert FloatStyle("truncated") is FloatStyle.TRUNCATED
