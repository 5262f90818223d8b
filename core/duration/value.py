"""
Duration Value

Immutable, non-negative elapsed time with nanosecond resolution.
"""

from datetime import timedelta
from fractions import Fraction
from numbers import Rational
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from core.duration.units import SECOND, TimeUnit


# Largest representable span: u64 whole seconds plus sub-second nanoseconds
MAX_NANOSECONDS: int = (2 ** 64 - 1) * SECOND + (SECOND - 1)

Scalar = Union[int, float, Fraction]

# Largest-first order used by the compact string form
_DISPLAY_UNITS = (
    TimeUnit.DAY,
    TimeUnit.HOUR,
    TimeUnit.MINUTE,
    TimeUnit.SECOND,
    TimeUnit.MILLISECOND,
    TimeUnit.MICROSECOND,
    TimeUnit.NANOSECOND,
)


class Duration(BaseModel):
    """
    A non-negative span of time stored as whole nanoseconds.

    Arithmetic returns new instances; results outside
    ``0..MAX_NANOSECONDS`` raise ``OverflowError``.

    Examples:
        Duration.from_unit(1.5, TimeUnit.HOUR) + Duration.from_unit(30, TimeUnit.MINUTE)
        → Duration(nanoseconds=7200000000000)
    """
    model_config = ConfigDict(frozen=True)

    nanoseconds: int = Field(0, ge=0, le=MAX_NANOSECONDS)

    # ───────────────────────────────────────────────────────────────────────
    # Constructors
    # ───────────────────────────────────────────────────────────────────────

    @classmethod
    def zero(cls) -> "Duration":
        return cls(nanoseconds=0)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> "Duration":
        _check_range(nanoseconds)
        return cls(nanoseconds=nanoseconds)

    @classmethod
    def from_unit(cls, magnitude: Union[Scalar, str], unit: TimeUnit) -> "Duration":
        """Convert a magnitude in ``unit``, truncating to whole nanoseconds."""
        exact = Fraction(magnitude) * unit.nanoseconds
        if exact < 0:
            raise ValueError(f"Negative duration: {magnitude} {unit.symbol}")
        return cls.from_nanoseconds(int(exact))

    @classmethod
    def from_seconds(cls, seconds: Union[Scalar, str]) -> "Duration":
        return cls.from_unit(seconds, TimeUnit.SECOND)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
        return cls.from_unit(micros, TimeUnit.MICROSECOND)

    # ───────────────────────────────────────────────────────────────────────
    # Conversions
    # ───────────────────────────────────────────────────────────────────────

    def in_unit(self, unit: TimeUnit) -> Fraction:
        """Exact magnitude of this duration expressed in ``unit``."""
        return Fraction(self.nanoseconds, unit.nanoseconds)

    def total_seconds(self) -> float:
        return self.nanoseconds / TimeUnit.SECOND.nanoseconds

    def to_timedelta(self) -> timedelta:
        """Lossy below one microsecond."""
        return timedelta(microseconds=self.nanoseconds // TimeUnit.MICROSECOND.nanoseconds)

    def is_zero(self) -> bool:
        return self.nanoseconds == 0

    # ───────────────────────────────────────────────────────────────────────
    # Arithmetic
    # ───────────────────────────────────────────────────────────────────────

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_nanoseconds(self.nanoseconds + other.nanoseconds)

    def __mul__(self, factor: Scalar) -> "Duration":
        if isinstance(factor, bool) or not isinstance(factor, (Rational, float)):
            return NotImplemented
        exact = Fraction(factor) * self.nanoseconds
        if exact < 0:
            raise ValueError(f"Negative scale factor: {factor}")
        return Duration.from_nanoseconds(int(exact))

    __rmul__ = __mul__

    def __floordiv__(self, divisor: int) -> "Duration":
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            return NotImplemented
        if divisor <= 0:
            raise ZeroDivisionError("Duration can only be divided by a positive integer")
        return Duration(nanoseconds=self.nanoseconds // divisor)

    def __lt__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds < other.nanoseconds

    def __le__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds <= other.nanoseconds

    def __gt__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds > other.nanoseconds

    def __ge__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds >= other.nanoseconds

    def __bool__(self) -> bool:
        return self.nanoseconds != 0

    def __str__(self) -> str:
        """Compact form, e.g. ``1h30m``, ``20ms``, ``0s``."""
        remaining = self.nanoseconds
        if remaining == 0:
            return "0s"

        parts = []
        for unit in _DISPLAY_UNITS:
            count, remaining = divmod(remaining, unit.nanoseconds)
            if count:
                parts.append(f"{count}{unit.symbol}")
        return "".join(parts)


def _check_range(nanoseconds: int) -> None:
    if nanoseconds < 0:
        raise ValueError(f"Negative duration: {nanoseconds}ns")
    if nanoseconds > MAX_NANOSECONDS:
        raise OverflowError(f"Duration out of range: {nanoseconds}ns")
