"""
Tests for the advanced-calc command-line interface.
"""

from click.testing import CliRunner

from src.cli import __version__, main


class TestCli:
    """Тесты click entry point."""

    def test_default_run(self):
        runner = CliRunner()
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert result.stdout.startswith("=== Advanced Calculator ===\n\n")
        assert "Division: 3.750000\n" in result.stdout
        assert result.stdout.endswith("Calculator operations completed!\n")

    def test_truncated_float_style(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--float-style", "truncated"])
        assert result.exit_code == 0
        assert "Division: 3\n" in result.stdout
        assert "sqrt(10): 3\n" in result.stdout

    def test_invalid_float_style(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--float-style", "scientific"])
        assert result.exit_code == 2

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
