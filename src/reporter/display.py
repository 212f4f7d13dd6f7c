"""Reporter — форматирование и вывод результатов калькулятора

Формат строки результата: "<label>: <value>\\n".

Единственный путь форматирования значений — format_value():
- int → str(value)
- float + FloatStyle.FIXED → "%f" (шесть знаков после точки)
- float + FloatStyle.TRUNCATED → целочисленный форматтер (int(value))

Reporter также реализует вторую половину report-and-continue: печатает
диагностику для неуспешного CalcOutcome и возвращает sentinel вызывающему.
"""

import logging
import sys
from typing import Optional, TextIO, Union

import click

from src.core.config.calculator_config import ReporterConfig
from src.core.domain.outcome import CalcOutcome, FloatStyle

logger = logging.getLogger(__name__)


def format_int(value: int) -> str:
    return str(value)


def format_value(value: Union[int, float], float_style: FloatStyle = FloatStyle.FIXED) -> str:
    """
    Текстовое представление значения.

    Args:
        value: int или float
        float_style: Стиль для float значений

    Returns:
        Строка для вывода

    Examples:
        >>> format_value(19)
        '19'
        >>> format_value(3.75)
        '3.750000'
        >>> format_value(3.75, FloatStyle.TRUNCATED)
        '3'
    """
    if isinstance(value, float):
        if float_style == FloatStyle.TRUNCATED:
            return format_int(int(value))
        return f"{value:f}"
    return format_int(value)


class Reporter:
    """Построчный вывод результатов в поток (stdout по умолчанию).

    Порядок строк совпадает с порядком вызовов.
    """

    def __init__(self, config: Optional[ReporterConfig] = None, stream: Optional[TextIO] = None):
        self.config = config or ReporterConfig()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stdout резолвится при каждой записи (совместимо с capsys/CliRunner)
        return self._stream if self._stream is not None else sys.stdout

    def line(self, text: str) -> None:
        click.echo(text, file=self.stream)

    def blank(self) -> None:
        self.line("")

    def header(self, title: str) -> None:
        self.line(title)

    def format_result(self, label: str, value: Union[int, float]) -> str:
        return f"{label}{self.config.separator}{format_value(value, self.config.float_style)}"

    def display_result(self, label: str, value: int) -> None:
        self.line(self.format_result(label, value))

    def display_result_float(self, label: str, value: float) -> None:
        self.line(self.format_result(label, float(value)))

    def report_outcome(self, outcome: CalcOutcome) -> float:
        """
        Печать диагностики для неуспешного результата.

        Args:
            outcome: Результат функции ядра

        Returns:
            outcome.value (sentinel 0.0 при ошибке)
        """
        if not outcome.ok:
            logger.warning(
                "Recovered domain error %s, using sentinel %s", outcome.error.value, outcome.value
            )
            self.line(outcome.message)
        return outcome.value

    def display_outcome(self, label: str, outcome: CalcOutcome) -> None:
        self.display_result_float(label, self.report_outcome(outcome))
