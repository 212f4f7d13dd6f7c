"""
Command-line interface for the advanced calculator demo.
"""

import logging
import sys

import click

from src.core.config import CalculatorConfig, ReporterConfig
from src.core.domain import FloatStyle
from src.demo import run_demo

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--float-style",
    type=click.Choice([style.value for style in FloatStyle]),
    default=FloatStyle.FIXED.value,
    show_default=True,
    help="How division and square-root results are displayed",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(float_style: str, verbose: bool) -> None:
    """Print the advanced calculator demonstration results."""

    # Configure logging
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = CalculatorConfig(reporter=ReporterConfig(float_style=FloatStyle(float_style)))
    logger.debug("Running demo with %s", config)

    sys.exit(run_demo(config))


if __name__ == "__main__":
    main()
