"""Unit тесты для демонстрационной последовательности.

Coverage:
- Полный вывод с конфигурацией по умолчанию (побайтовое сравнение)
- TRUNCATED стиль (дробная часть отбрасывается при выводе)
- Изменённые входы и отдельные секции
- Exit code
"""

import io

import pytest

from src.core.config import CalculatorConfig, DemoInputs, ReporterConfig
from src.core.domain import FloatStyle
from src.demo import CalculatorDemo, run_demo
from src.reporter import Reporter

EXPECTED_OUTPUT = """\
=== Advanced Calculator ===

Basic Arithmetic:
First number: 15
Second number: 4

Addition: 19
Subtraction: 11
Multiplication: 60
Division: 3.750000

Power Calculations:
2^3: 8
5^4: 625
10^0: 1

Square Root Approximations:
sqrt(16): 4.000000
sqrt(25): 5.000000
sqrt(10): 3.162278

Prime Number Checking:
2 is prime
3 is prime
5 is prime
7 is prime
11 is prime
13 is prime
17 is prime

Greatest Common Divisor:
GCD(48, 18): 6
GCD(100, 25): 25
GCD(17, 13): 1

Complex Calculations:
(12 * 8) + (5 / 2) = 98
Approximate area of circle (r=5): 1050

Calculator operations completed!
"""


def _run(config: CalculatorConfig) -> tuple[int, str]:
    stream = io.StringIO()
    exit_code = run_demo(config, Reporter(config.reporter, stream=stream))
    return exit_code, stream.getvalue()


@pytest.fixture
def default_config():
    """Fixture для конфигурации по умолчанию."""
    return CalculatorConfig.default()


class TestFullSequence:
    """Полный вывод демонстрации."""

    def test_default_output(self, default_config):
        exit_code, output = _run(default_config)
        assert exit_code == 0
        assert output == EXPECTED_OUTPUT

    def test_default_output_to_stdout(self, capsys):
        assert run_demo() == 0
        assert capsys.readouterr().out == EXPECTED_OUTPUT

    def test_truncated_style(self):
        config = CalculatorConfig(reporter=ReporterConfig(float_style=FloatStyle.TRUNCATED))
        _, output = _run(config)
        expected = (
            EXPECTED_OUTPUT.replace("Division: 3.750000", "Division: 3")
            .replace("sqrt(16): 4.000000", "sqrt(16): 4")
            .replace("sqrt(25): 5.000000", "sqrt(25): 5")
            .replace("sqrt(10): 3.162278", "sqrt(10): 3")
        )
        assert output == expected

    def test_idempotent(self, default_config):
        assert _run(default_config) == _run(default_config)


class TestSections:
    """Отдельные секции с изменёнными входами."""

    def test_division_by_zero_reported_and_continues(self):
        config = CalculatorConfig(inputs=DemoInputs(num2=0))
        exit_code, output = _run(config)
        assert exit_code == 0
        assert "Error: Division by zero!\nDivision: 0.000000\n" in output
        assert output.endswith("Calculator operations completed!\n")

    def test_prime_limit(self):
        stream = io.StringIO()
        config = CalculatorConfig(inputs=DemoInputs(prime_limit=30))
        demo = CalculatorDemo(config, Reporter(config.reporter, stream=stream))
        demo.prime_checking()
        lines = stream.getvalue().splitlines()
        assert lines[0] == "Prime Number Checking:"
        assert lines[1:-1] == [f"{p} is prime" for p in (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)]
        assert lines[-1] == ""

    def test_complex_calculations_truncates_half(self):
        stream = io.StringIO()
        config = CalculatorConfig(inputs=DemoInputs(a=3, b=4, c=7, circle_radius=2))
        demo = CalculatorDemo(config, Reporter(config.reporter, stream=stream))
        demo.complex_calculations()
        assert stream.getvalue() == (
            "Complex Calculations:\n"
            "(3 * 4) + (7 / 2) = 15\n"
            "Approximate area of circle (r=2): 168\n"
            "\n"
        )
