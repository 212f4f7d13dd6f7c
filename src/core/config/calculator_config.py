"""CalculatorConfig — конфигурация ядра, вывода и демо-последовательности

Immutable Pydantic модели:
- KernelConfig: параметры метода Ньютона
- ReporterConfig: стиль отображения float и разделитель "label: value"
- DemoInputs: литеральные входы демонстрационной последовательности
- CalculatorConfig: агрегат трёх моделей

Значения по умолчанию — литералы стандартной демонстрации.
"""

from pydantic import BaseModel, Field

from src.core.domain.outcome import FloatStyle
from src.core.math.numerical_safeguards import (
    SQRT_MAX_ITERATIONS_DEFAULT,
    SQRT_PRECISION_DEFAULT,
)


# =============================================================================
# MODELS
# =============================================================================


class KernelConfig(BaseModel):
    """Параметры итерационных функций ядра."""

    sqrt_precision: float = Field(
        default=SQRT_PRECISION_DEFAULT, gt=0.0, description="Newton convergence threshold"
    )
    sqrt_max_iterations: int = Field(
        default=SQRT_MAX_ITERATIONS_DEFAULT, ge=1, description="Newton iteration cap"
    )

    model_config = {"frozen": True}


class ReporterConfig(BaseModel):
    """Параметры форматирования вывода."""

    float_style: FloatStyle = Field(default=FloatStyle.FIXED, description="Float display style")
    separator: str = Field(default=": ", description="Separator between label and value")

    model_config = {"frozen": True}


class DemoInputs(BaseModel):
    """Литеральные входы демонстрационной последовательности.

    num1/num2 — операнды секции Basic Arithmetic,
    a/b/c — операнды выражения (a * b) + (c / 2),
    prime_limit — верхняя граница (включительно) проверки простоты,
    circle_radius — радиус для "площади круга".
    """

    num1: int = 15
    num2: int = 4
    a: int = 12
    b: int = 8
    c: int = 5
    prime_limit: int = Field(default=17, ge=2)
    circle_radius: int = Field(default=5, ge=0)

    model_config = {"frozen": True}


class CalculatorConfig(BaseModel):
    """Полная конфигурация калькулятора."""

    kernel: KernelConfig = Field(default_factory=KernelConfig)
    reporter: ReporterConfig = Field(default_factory=ReporterConfig)
    inputs: DemoInputs = Field(default_factory=DemoInputs)

    model_config = {"frozen": True}

    @classmethod
    def default(cls) -> "CalculatorConfig":
        return cls()
