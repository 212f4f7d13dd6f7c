"""
Roots — приближённый квадратный корень методом Ньютона

Алгоритм:
    guess_0 = number / 2
    guess_{k+1} = (guess_k + number / guess_k) / 2

Остановка:
- |guess_{k+1} - guess_k| < precision → возвращается guess_{k+1}
- после max_iterations итераций → возвращается последний guess

Результат — приближение: точность ограничена порогом сходимости 0.001
(после возведения в квадрат погрешность порядка 0.01 для малых чисел).
"""

from src.core.domain.outcome import CalcErrorKind, CalcOutcome
from src.core.math.numerical_safeguards import (
    SQRT_MAX_ITERATIONS_DEFAULT,
    SQRT_PRECISION_DEFAULT,
    has_converged,
    validate_positive,
)


def sqrt_approx(
    number: int,
    precision: float = SQRT_PRECISION_DEFAULT,
    max_iterations: int = SQRT_MAX_ITERATIONS_DEFAULT,
) -> CalcOutcome:
    """
    Приближённый квадратный корень.

    Args:
        number: Подкоренное значение
        precision: Порог сходимости (default: 0.001)
        max_iterations: Максимум итераций (default: 20)

    Returns:
        CalcOutcome:
        - number < 0: failure(NEGATIVE_SQRT_INPUT), value == 0.0 (sentinel)
        - number == 0: success(0.0)
        - иначе: success(приближение sqrt(number))

    Raises:
        ValueError: Если precision <= 0 или max_iterations < 1

    Examples:
        >>> sqrt_approx(16).value
        4.0
        >>> sqrt_approx(0).value
        0.0
        >>> sqrt_approx(-4).ok
        False
    """
    validate_positive(precision, "precision")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")

    if number < 0:
        return CalcOutcome.failure(CalcErrorKind.NEGATIVE_SQRT_INPUT)

    if number == 0:
        return CalcOutcome.success(0.0)

    value = float(number)
    guess = value / 2

    for _ in range(max_iterations):
        new_guess = (guess + value / guess) / 2
        if has_converged(guess, new_guess, precision):
            return CalcOutcome.success(new_guess)
        guess = new_guess

    return CalcOutcome.success(guess)
