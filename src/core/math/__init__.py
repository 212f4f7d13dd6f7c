"""
Core math modules для Advanced Calculator

Чистые численные функции ядра калькулятора. Ничего не печатают:
доменные ошибки возвращаются в CalcOutcome.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    SQRT_MAX_ITERATIONS_DEFAULT,
    SQRT_PRECISION_DEFAULT,
    has_converged,
    is_valid_float,
    validate_positive,
)

# Arithmetic
from src.core.math.arithmetic import (
    PI_STAND_IN_FRACTION,
    PI_STAND_IN_WHOLE,
    add,
    approx_circle_area,
    divide,
    multiply,
    power,
    subtract,
)

# Roots
from src.core.math.roots import sqrt_approx

# Number Theory
from src.core.math.number_theory import gcd, is_prime

__all__ = [
    # Numerical Safeguards — Constants
    "SQRT_MAX_ITERATIONS_DEFAULT",
    "SQRT_PRECISION_DEFAULT",
    # Numerical Safeguards — Functions
    "has_converged",
    "is_valid_float",
    "validate_positive",
    # Arithmetic — Constants
    "PI_STAND_IN_FRACTION",
    "PI_STAND_IN_WHOLE",
    # Arithmetic — Functions
    "add",
    "approx_circle_area",
    "divide",
    "multiply",
    "power",
    "subtract",
    # Roots
    "sqrt_approx",
    # Number Theory
    "gcd",
    "is_prime",
]
