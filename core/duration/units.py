"""
Time Units

Canonical time units, their fixed nanosecond conversion factors and the
alias table used to resolve unit suffixes in duration expressions.

Year and month are calendar approximations (365 and 30 days), not
calendar-aware values.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple


# ═══════════════════════════════════════════════════════════════════════════════
# UNITS
# ═══════════════════════════════════════════════════════════════════════════════

class TimeUnit(Enum):
    """Canonical time units, valued by their primary symbol."""
    YEAR = "y"
    MONTH = "mon"
    WEEK = "w"
    DAY = "d"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "ms"
    MICROSECOND = "µs"
    NANOSECOND = "ns"

    @property
    def nanoseconds(self) -> int:
        return UNIT_NANOSECONDS[self]

    @property
    def symbol(self) -> str:
        return self.value


NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

UNIT_NANOSECONDS: Mapping[TimeUnit, int] = MappingProxyType({
    TimeUnit.YEAR: YEAR,
    TimeUnit.MONTH: MONTH,
    TimeUnit.WEEK: WEEK,
    TimeUnit.DAY: DAY,
    TimeUnit.HOUR: HOUR,
    TimeUnit.MINUTE: MINUTE,
    TimeUnit.SECOND: SECOND,
    TimeUnit.MILLISECOND: MILLISECOND,
    TimeUnit.MICROSECOND: MICROSECOND,
    TimeUnit.NANOSECOND: NANOSECOND,
})


# ═══════════════════════════════════════════════════════════════════════════════
# ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Latin aliases are matched case-insensitively, so "M" and "MS" resolve too.
LATIN_ALIASES: Mapping[TimeUnit, Tuple[str, ...]] = MappingProxyType({
    TimeUnit.YEAR: ("y", "yr", "yrs", "year", "years"),
    TimeUnit.MONTH: ("mon", "month", "months"),
    TimeUnit.WEEK: ("w", "wk", "wks", "week", "weeks"),
    TimeUnit.DAY: ("d", "day", "days"),
    TimeUnit.HOUR: ("h", "hr", "hrs", "hour", "hours"),
    TimeUnit.MINUTE: ("m", "min", "mins", "minute", "minutes"),
    TimeUnit.SECOND: ("s", "sec", "secs", "second", "seconds"),
    TimeUnit.MILLISECOND: ("ms", "msec", "msecs", "millisecond", "milliseconds"),
    TimeUnit.MICROSECOND: (
        "µs", "μs", "us", "µsec", "usec", "µsecond", "microsecond", "microseconds",
    ),
    TimeUnit.NANOSECOND: ("ns", "nsec", "nsecs", "nanosecond", "nanoseconds"),
})

# CJK aliases are matched exactly.
CJK_ALIASES: Mapping[TimeUnit, Tuple[str, ...]] = MappingProxyType({
    TimeUnit.YEAR: ("年",),
    TimeUnit.MONTH: ("月",),
    TimeUnit.WEEK: ("周", "週", "星期"),
    TimeUnit.DAY: ("日", "天"),
    TimeUnit.HOUR: ("时", "時", "小时", "小時"),
    TimeUnit.MINUTE: ("分", "分钟", "分鐘"),
    TimeUnit.SECOND: ("秒",),
    TimeUnit.MILLISECOND: ("毫秒",),
    TimeUnit.MICROSECOND: ("微秒",),
    TimeUnit.NANOSECOND: ("纳秒", "納秒"),
})


class UnitTable:
    """
    Immutable suffix -> unit lookup built from alias mappings.

    Construct once at startup (``UnitTable.default()``) and pass it to
    the parser; the table never changes afterwards.
    """

    __slots__ = ("_exact", "_folded", "_aliases")

    def __init__(
        self,
        latin: Mapping[TimeUnit, Tuple[str, ...]],
        cjk: Mapping[TimeUnit, Tuple[str, ...]],
    ):
        exact: Dict[str, TimeUnit] = {}
        folded: Dict[str, TimeUnit] = {}

        for unit, aliases in cjk.items():
            for alias in aliases:
                _register(exact, alias, unit)

        for unit, aliases in latin.items():
            for alias in aliases:
                _register(folded, alias.casefold(), unit)

        self._exact = MappingProxyType(exact)
        self._folded = MappingProxyType(folded)
        self._aliases = MappingProxyType({
            unit: tuple(latin.get(unit, ())) + tuple(cjk.get(unit, ())) for unit in TimeUnit
        })

    @classmethod
    def default(cls) -> "UnitTable":
        return cls(LATIN_ALIASES, CJK_ALIASES)

    def lookup(self, suffix: str) -> Optional[TimeUnit]:
        """Resolve a unit suffix, or return None when it is unknown."""
        unit = self._exact.get(suffix)
        if unit is not None:
            return unit
        return self._folded.get(suffix.casefold())

    def aliases(self, unit: TimeUnit) -> Tuple[str, ...]:
        """Aliases of ``unit`` as declared, Latin first."""
        return self._aliases[unit]

    def __contains__(self, suffix: str) -> bool:
        return self.lookup(suffix) is not None

    def __iter__(self) -> Iterator[TimeUnit]:
        return iter(TimeUnit)


def _register(table: Dict[str, TimeUnit], alias: str, unit: TimeUnit) -> None:
    existing = table.get(alias)
    if existing is not None and existing is not unit:
        raise ValueError(f"Alias {alias!r} maps to both {existing.name} and {unit.name}")
    table[alias] = unit


DEFAULT_UNITS = UnitTable.default()
