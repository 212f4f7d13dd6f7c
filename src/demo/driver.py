"""Driver — фиксированная демонстрационная последовательность

Секции (в порядке вывода):
1. Заголовок
2. Basic Arithmetic
3. Power Calculations
4. Square Root Approximations
5. Prime Number Checking
6. Greatest Common Divisor
7. Complex Calculations
8. Завершающая строка

Driver вызывает функции ядра с литеральными входами из DemoInputs и
передаёт результаты в Reporter. Доменные ошибки обрабатываются через
Reporter.report_outcome (report-and-continue).
"""

import logging
from typing import Optional

from src.core.config.calculator_config import CalculatorConfig
from src.core.math.arithmetic import (
    add,
    approx_circle_area,
    divide,
    multiply,
    power,
    subtract,
)
from src.core.math.number_theory import gcd, is_prime
from src.core.math.roots import sqrt_approx
from src.reporter.display import Reporter, format_int

logger = logging.getLogger(__name__)

TITLE = "=== Advanced Calculator ==="
COMPLETED = "Calculator operations completed!"

POWER_CASES = ((2, 3), (5, 4), (10, 0))
SQRT_CASES = (16, 25, 10)
GCD_CASES = ((48, 18), (100, 25), (17, 13))


class CalculatorDemo:
    """Демонстрационная последовательность калькулятора."""

    def __init__(self, config: Optional[CalculatorConfig] = None, reporter: Optional[Reporter] = None):
        self.config = config or CalculatorConfig.default()
        self.reporter = reporter or Reporter(self.config.reporter)

    def run(self) -> int:
        """Выполнение всех секций.

        Returns:
            Exit code (всегда 0)
        """
        self.reporter.line(TITLE)
        self.reporter.blank()

        self.basic_arithmetic()
        self.power_calculations()
        self.square_roots()
        self.prime_checking()
        self.greatest_common_divisor()
        self.complex_calculations()

        self.reporter.line(COMPLETED)
        logger.debug("Demo sequence completed")
        return 0

    def basic_arithmetic(self) -> None:
        inputs = self.config.inputs
        out = self.reporter
        logger.debug("Section: basic arithmetic (num1=%d, num2=%d)", inputs.num1, inputs.num2)

        out.header("Basic Arithmetic:")
        out.display_result("First number", inputs.num1)
        out.display_result("Second number", inputs.num2)
        out.blank()
        out.display_result("Addition", add(inputs.num1, inputs.num2))
        out.display_result("Subtraction", subtract(inputs.num1, inputs.num2))
        out.display_result("Multiplication", multiply(inputs.num1, inputs.num2))
        out.display_outcome("Division", divide(inputs.num1, inputs.num2))
        out.blank()

    def power_calculations(self) -> None:
        logger.debug("Section: power")
        self.reporter.header("Power Calculations:")
        for base, exponent in POWER_CASES:
            self.reporter.display_result(f"{base}^{exponent}", power(base, exponent))
        self.reporter.blank()

    def square_roots(self) -> None:
        kernel = self.config.kernel
        logger.debug(
            "Section: square roots (precision=%s, max_iterations=%d)",
            kernel.sqrt_precision,
            kernel.sqrt_max_iterations,
        )
        self.reporter.header("Square Root Approximations:")
        for number in SQRT_CASES:
            outcome = sqrt_approx(
                number,
                precision=kernel.sqrt_precision,
                max_iterations=kernel.sqrt_max_iterations,
            )
            self.reporter.display_outcome(f"sqrt({number})", outcome)
        self.reporter.blank()

    def prime_checking(self) -> None:
        limit = self.config.inputs.prime_limit
        logger.debug("Section: primes up to %d", limit)
        self.reporter.header("Prime Number Checking:")
        for i in range(2, limit + 1):
            if is_prime(i):
                self.reporter.line(f"{format_int(i)} is prime")
        self.reporter.blank()

    def greatest_common_divisor(self) -> None:
        logger.debug("Section: gcd")
        self.reporter.header("Greatest Common Divisor:")
        for a, b in GCD_CASES:
            self.reporter.display_result(f"GCD({a}, {b})", gcd(a, b))
        self.reporter.blank()

    def complex_calculations(self) -> None:
        inputs = self.config.inputs
        logger.debug("Section: complex calculations")
        self.reporter.header("Complex Calculations:")

        # Дробная часть (c / 2) отбрасывается до сложения
        half_c = int(self.reporter.report_outcome(divide(inputs.c, 2)))
        complex_result = add(multiply(inputs.a, inputs.b), half_c)
        self.reporter.line(
            f"({inputs.a} * {inputs.b}) + ({inputs.c} / 2) = {format_int(complex_result)}"
        )

        area = approx_circle_area(inputs.circle_radius)
        self.reporter.line(
            f"Approximate area of circle (r={inputs.circle_radius}): {format_int(area)}"
        )
        self.reporter.blank()


def run_demo(config: Optional[CalculatorConfig] = None, reporter: Optional[Reporter] = None) -> int:
    """Запуск демонстрации с конфигурацией по умолчанию."""
    return CalculatorDemo(config=config, reporter=reporter).run()
