"""
Configuration models.

Pydantic models for kernel parameters, reporter formatting and demo inputs.
"""

from src.core.config.calculator_config import (
    CalculatorConfig,
    DemoInputs,
    KernelConfig,
    ReporterConfig,
)

__all__ = [
    "CalculatorConfig",
    "DemoInputs",
    "KernelConfig",
    "ReporterConfig",
]
