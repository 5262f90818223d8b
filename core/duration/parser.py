"""
Duration Expression Parser

Turns human-authored duration strings into a single ``Duration``.

Grammar (left-to-right scan, ``*`` binds tighter than addition):

    expression := term ( ('+' | <implicit>) term )*
    term       := factor ( '*' factor )*
    factor     := number [unit]

Examples:
    "1.5h30m"       → 2h          (implicit concatenation = addition)
    "1.5h + 30m"    → 2h
    "100ms * 2"     → 200ms
    "1 + 1 + 100ms" → 2.1s        (bare numbers are seconds)
    "1小时30分钟"    → 1h30m
"""

import re
from dataclasses import dataclass
from fractions import Fraction
from typing import List, NoReturn, Optional

from core.duration.units import DEFAULT_UNITS, TimeUnit, UnitTable
from core.duration.value import MAX_NANOSECONDS, Duration
from infra.logger import logger_parser


# ═══════════════════════════════════════════════════════════════════════════════
# ERRORS
# ═══════════════════════════════════════════════════════════════════════════════

class InvalidDurationFormat(ValueError):
    """
    Raised for any malformed duration expression.

    Attributes:
        expression: The full input string
        reason: Short human-readable cause
        fragment: Offending substring (may be empty)
        position: Index of the fragment in the expression
    """

    def __init__(self, expression: str, reason: str, fragment: str = "", position: int = 0):
        self.expression = expression
        self.reason = reason
        self.fragment = fragment
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        if self.fragment:
            return (
                f"Invalid duration {self.expression!r}: {self.reason} "
                f"at position {self.position} ({self.fragment!r})"
            )
        return f"Invalid duration {self.expression!r}: {self.reason}"


# ═══════════════════════════════════════════════════════════════════════════════
# TOKENS
# ═══════════════════════════════════════════════════════════════════════════════

_WHITESPACE = re.compile(r"\s*")
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_NUMBER_TAIL = re.compile(r"[\d.]*")
_UNIT = re.compile(r"[^\s\d+*.\-]+")


@dataclass(frozen=True)
class Factor:
    """A numeric literal with an optional unit."""
    magnitude: Fraction
    unit: Optional[TimeUnit]
    text: str
    position: int


# ═══════════════════════════════════════════════════════════════════════════════
# PARSER
# ═══════════════════════════════════════════════════════════════════════════════

class _Scanner:

    def __init__(self, text: str, units: UnitTable):
        self.text = text
        self.units = units
        self.pos = 0

    def fail(self, reason: str, start: Optional[int] = None, end: Optional[int] = None) -> NoReturn:
        start = self.pos if start is None else start
        end = start + 1 if end is None else end
        raise InvalidDurationFormat(self.text, reason, self.text[start:end], start)

    def skip_whitespace(self) -> None:
        self.pos = _WHITESPACE.match(self.text, self.pos).end()

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if not self.at_end() else ""

    def expression(self) -> List[List[Factor]]:
        terms = [self.term()]

        while True:
            self.skip_whitespace()
            if self.at_end():
                return terms

            explicit = self.peek() == "+"
            if explicit:
                plus = self.pos
                self.pos += 1
                self.skip_whitespace()
                if self.at_end():
                    self.fail("expected a term after '+'", plus)

            # Explicit '+' or implicit concatenation: both start a new term
            terms.append(self.term(after_operator=explicit))

    def term(self, after_operator: bool = False) -> List[Factor]:
        factors = [self.factor(after_operator)]

        while True:
            self.skip_whitespace()
            if self.peek() != "*":
                return factors
            star = self.pos
            self.pos += 1
            self.skip_whitespace()
            if self.at_end():
                self.fail("expected a number after '*'", star)
            factors.append(self.factor(after_operator=True))

    def factor(self, after_operator: bool = False) -> Factor:
        self.skip_whitespace()
        start = self.pos

        if self.at_end():
            self.fail("expected a number", max(start - 1, 0))

        match = _NUMBER.match(self.text, self.pos)
        if not match:
            if self.peek() in "+*":
                self.fail(f"unexpected operator {self.peek()!r}")
            unit_match = _UNIT.match(self.text, self.pos)
            end = unit_match.end() if unit_match else self.pos + 1
            self.fail("expected a number", start, end)

        literal = match.group()
        self.pos = match.end()

        if self.peek() == ".":
            # e.g. "1.2.3s"
            tail = _NUMBER_TAIL.match(self.text, self.pos).end()
            self.fail("malformed number", start, tail)
        if literal.startswith("-"):
            self.fail("negative durations are not supported", start, self.pos)
        if literal.startswith("+") and after_operator:
            # e.g. "1h ++2", "1h * +2"
            self.fail("unexpected operator '+'", start)

        try:
            magnitude = Fraction(literal.lstrip("+"))
        except ValueError:
            # Past the interpreter's int conversion limit
            self.fail("duration overflow", start, self.pos)

        self.skip_whitespace()
        unit = None
        unit_match = _UNIT.match(self.text, self.pos)
        if unit_match:
            suffix = unit_match.group()
            unit = self.units.lookup(suffix)
            if unit is None:
                self.fail(f"unknown unit {suffix!r}", unit_match.start(), unit_match.end())
            self.pos = unit_match.end()

        return Factor(magnitude=magnitude, unit=unit, text=self.text[start:self.pos].strip(), position=start)


def _evaluate_term(scanner: _Scanner, factors: List[Factor]) -> int:
    """Evaluate one product term to whole nanoseconds (truncating)."""
    with_unit = [f for f in factors if f.unit is not None]
    if len(with_unit) > 1:
        second = with_unit[1]
        scanner.fail(
            "cannot multiply a duration by a duration",
            second.position,
            second.position + len(second.text),
        )

    exact = Fraction(1)
    for f in factors:
        exact *= f.magnitude

    unit = with_unit[0].unit if with_unit else TimeUnit.SECOND
    nanoseconds = int(exact * unit.nanoseconds)

    if nanoseconds > MAX_NANOSECONDS:
        first = factors[0]
        last = factors[-1]
        scanner.fail("duration overflow", first.position, last.position + len(last.text))
    return nanoseconds


def parse_duration(text: str, units: UnitTable = DEFAULT_UNITS) -> Duration:
    """
    Parse a duration expression.

    Args:
        text: Expression such as "1.5h30m", "100ms * 2" or "5"
        units: Unit alias table (defaults to the built-in table)

    Returns:
        The summed Duration

    Raises:
        InvalidDurationFormat: On empty input, unknown units, malformed
            numbers, dangling operators, negative values or overflow
    """
    if text is None or not str(text).strip():
        logger_parser.debug("PARSE_FAIL | reason=empty")
        raise InvalidDurationFormat("" if text is None else str(text), "empty duration")

    scanner = _Scanner(str(text), units)
    try:
        terms = scanner.expression()

        total = 0
        for factors in terms:
            total += _evaluate_term(scanner, factors)
            if total > MAX_NANOSECONDS:
                scanner.fail("duration overflow", 0, len(scanner.text))
    except InvalidDurationFormat as e:
        logger_parser.debug(f"PARSE_FAIL | text={text!r} | reason={e.reason} | at={e.position}")
        raise

    duration = Duration(nanoseconds=total)
    logger_parser.debug(f"PARSE_OK | text={text!r} | terms={len(terms)} | value={duration}")
    return duration
