"""
Domain value types.

Contains the result carrier for report-and-continue kernel operations and
display enums.
"""

from src.core.domain.outcome import (
    SENTINEL_VALUE,
    CalcErrorKind,
    CalcOutcome,
    FloatStyle,
)

__all__ = [
    "SENTINEL_VALUE",
    "CalcErrorKind",
    "CalcOutcome",
    "FloatStyle",
]
