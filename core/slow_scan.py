"""
Slow-Scan Writer

Writes text one unit at a time with a pause after each unit:
- chunk mode: every unit waits ``base_delay`` (used for lines)
- char mode: the wait depends on the character's display class

Waits are scheduled against a running deadline, so the time spent
writing does not add up as drift over long outputs.
"""

import time
import unicodedata
from enum import Enum
from typing import Callable, Iterable, Iterator, Optional, TextIO, Tuple, TypeVar

from core.duration import Duration
from core.schemas import SlowScanConfig


T = TypeVar("T")


# ═══════════════════════════════════════════════════════════════════════════════
# CHARACTER CLASSES
# ═══════════════════════════════════════════════════════════════════════════════

class CharClass(Enum):
    HALF_WIDTH = "half_width"
    FULL_WIDTH = "full_width"
    CONTROL = "control"


# "A" (ambiguous) counts as wide, following the CJK convention
_WIDE_EAST_ASIAN = frozenset({"W", "F", "A"})

# Combining marks and format characters take no column of their own
_ZERO_WIDTH_CATEGORIES = frozenset({"Mn", "Me", "Cf"})


def is_zero_width(ch: str) -> bool:
    return unicodedata.category(ch) in _ZERO_WIDTH_CATEGORIES


def classify_char(ch: str) -> CharClass:
    """
    Classify a single character by terminal display width.

    Examples:
        "a"  → HALF_WIDTH
        "中" → FULL_WIDTH
        "\\n" → CONTROL
        "\\u0301" → HALF_WIDTH (combining mark)
    """
    category = unicodedata.category(ch)
    if category == "Cc":
        return CharClass.CONTROL
    if category in _ZERO_WIDTH_CATEGORIES:
        return CharClass.HALF_WIDTH
    if unicodedata.east_asian_width(ch) in _WIDE_EAST_ASIAN:
        return CharClass.FULL_WIDTH
    return CharClass.HALF_WIDTH


def delay_for(ch: str, config: SlowScanConfig) -> Duration:
    char_class = classify_char(ch)
    if char_class is CharClass.FULL_WIDTH:
        return config.full_width_delay
    if char_class is CharClass.CONTROL:
        return config.control_char_delay
    return config.base_delay


def with_last_flag(items: Iterable[T]) -> Iterator[Tuple[T, bool]]:
    """Yield ``(item, is_last)`` pairs using one item of lookahead."""
    iterator = iter(items)
    try:
        current = next(iterator)
    except StopIteration:
        return
    for upcoming in iterator:
        yield current, False
        current = upcoming
    yield current, True


# ═══════════════════════════════════════════════════════════════════════════════
# WRITER
# ═══════════════════════════════════════════════════════════════════════════════

class SlowScanWriter:
    """
    Paced writer over a text stream.

    Args:
        stream: Destination (flushed after every unit)
        sleep: Sleep function, seconds as float
        clock: Monotonic clock, seconds as float
    """

    def __init__(
        self,
        stream: TextIO,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.stream = stream
        self._sleep = sleep
        self._clock = clock
        self._deadline: Optional[float] = None

    def write_chunks(self, chunks: Iterable[str], config: SlowScanConfig) -> int:
        """
        Write each chunk, waiting ``base_delay`` between chunks.

        Returns:
            Number of chunks written
        """
        return self._write(chunks, config, lambda _chunk: config.base_delay)

    def write_chars(self, chars: Iterable[str], config: SlowScanConfig) -> int:
        """
        Write each character, waiting by its class:
        full-width → ``full_width_delay``, control → ``control_char_delay``,
        anything else → ``base_delay``.

        Returns:
            Number of characters written
        """
        return self._write(chars, config, lambda ch: delay_for(ch, config))

    def _write(self, units: Iterable[str], config: SlowScanConfig, delay_of) -> int:
        self._deadline = self._clock()
        count = 0

        for unit, is_last in with_last_flag(units):
            self.stream.write(unit)
            self.stream.flush()
            count += 1

            if not is_last or config.tail_delay:
                self._wait(delay_of(unit))

        return count

    def _wait(self, delay: Duration) -> None:
        self._deadline += delay.total_seconds()
        remaining = self._deadline - self._clock()
        if remaining > 0:
            self._sleep(remaining)
