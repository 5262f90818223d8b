"""
Duration Layer

Exposes the duration value type and the expression parser used for all
delay arguments.
"""

from .units import DEFAULT_UNITS, TimeUnit, UnitTable
from .value import MAX_NANOSECONDS, Duration
from .parser import InvalidDurationFormat, parse_duration

__all__ = [
    "DEFAULT_UNITS",
    "MAX_NANOSECONDS",
    "Duration",
    "InvalidDurationFormat",
    "TimeUnit",
    "UnitTable",
    "parse_duration",
]
