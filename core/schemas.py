"""
Print Schemas and Type Definitions

Pydantic models for the slow-scan delay configuration and the options of
a single print session. Delay fields accept either a ``Duration`` or a
duration expression string such as ``"20ms"``.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.duration import Duration, parse_duration


def _coerce_duration(value):
    if isinstance(value, str):
        return parse_duration(value)
    return value


# ═══════════════════════════════════════════════════════════════════════════════
# DELAY CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

class SlowScanConfig(BaseModel):
    """
    Delays applied after each printed unit.

    Attributes:
        base_delay: Delay after half-width characters (Latin letters,
            digits, symbols) and after every chunk in line mode
        full_width_delay: Delay after full-width characters (CJK)
        control_char_delay: Delay after control characters (newline, tab)
        tail_delay: Also delay after the very last unit
    """
    model_config = ConfigDict(validate_assignment=True)

    base_delay: Duration = Field(
        default_factory=lambda: parse_duration("20ms"),
        description="Delay for half-width characters and line chunks",
    )
    full_width_delay: Duration = Field(
        default_factory=lambda: parse_duration("40ms"),
        description="Delay for full-width characters",
    )
    control_char_delay: Duration = Field(
        default_factory=Duration.zero,
        description="Delay for control characters",
    )
    tail_delay: bool = Field(
        False,
        description="Whether to delay after the last unit as well",
    )

    @field_validator("base_delay", "full_width_delay", "control_char_delay", mode="before")
    @classmethod
    def parse_delay(cls, value):
        return _coerce_duration(value)

    def fit_base_delay(self, expectation: Duration, chunk_count: int) -> "SlowScanConfig":
        """
        Derive ``base_delay`` from an expected total output duration.

        The number of delays is ``chunk_count`` with tail delay, otherwise
        ``chunk_count - 1``; with no delays the base delay becomes zero.
        Full-width and control delays are left untouched.

        Examples:
            tail_delay=True,  1s over 10 chunks → 100ms
            tail_delay=False, 1s over 11 chunks → 100ms
        """
        if chunk_count < 0:
            raise ValueError("chunk_count must be non-negative")

        delay_count = chunk_count if self.tail_delay else max(chunk_count - 1, 0)

        if delay_count > 0:
            self.base_delay = expectation // delay_count
        else:
            self.base_delay = Duration.zero()
        return self


# ═══════════════════════════════════════════════════════════════════════════════
# PRINT SESSION
# ═══════════════════════════════════════════════════════════════════════════════

class PrintOptions(BaseModel):
    """
    Everything one invocation needs to print.

    ``files`` uses ``"-"`` for standard input. ``full_width_explicit``
    records whether the user chose the full-width delay, so that it is
    not re-derived when the base delay is fitted to ``total_duration``.
    """
    config: SlowScanConfig = Field(default_factory=SlowScanConfig)
    line_mode: bool = False
    hide_cursor: bool = False
    files: List[str] = Field(default_factory=lambda: ["-"], min_length=1)
    total_duration: Optional[Duration] = None
    full_width_explicit: bool = False

    @field_validator("total_duration", mode="before")
    @classmethod
    def parse_total(cls, value):
        return _coerce_duration(value)

    @property
    def mode(self) -> str:
        return "line" if self.line_mode else "char"
