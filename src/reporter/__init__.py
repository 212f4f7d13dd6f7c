"""
Reporter: console formatting of labeled calculator results.
"""

from src.reporter.display import Reporter, format_int, format_value

__all__ = [
    "Reporter",
    "format_int",
    "format_value",
]
