"""
Test suite for the Duration value type and unit table
"""

import sys
from datetime import timedelta
from fractions import Fraction
from pathlib import Path

import pytest
from pydantic import ValidationError

# Add project root to path so we can import from core/
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.duration import DEFAULT_UNITS, MAX_NANOSECONDS, Duration, TimeUnit, UnitTable
from core.duration.units import CJK_ALIASES, LATIN_ALIASES


# ═══════════════════════════════════════════════════════════════════════════════
# DURATION
# ═══════════════════════════════════════════════════════════════════════════════

def test_constructors():
    """Test Duration constructors."""

    print("Testing constructors...")

    assert Duration.zero().nanoseconds == 0
    assert Duration.from_unit(1.5, TimeUnit.HOUR).nanoseconds == 5_400_000_000_000
    assert Duration.from_unit("0.1", TimeUnit.SECOND).nanoseconds == 100_000_000
    assert Duration.from_seconds(2) == Duration.from_unit(2000, TimeUnit.MILLISECOND)
    assert Duration.from_timedelta(timedelta(minutes=1, microseconds=5)).nanoseconds == 60_000_005_000
    assert Duration.from_nanoseconds(MAX_NANOSECONDS).nanoseconds == MAX_NANOSECONDS

    print("✓ constructor tests passed")


def test_range_is_enforced():
    """Test negative and out-of-range values."""

    print("Testing range checks...")

    with pytest.raises(ValueError):
        Duration.from_nanoseconds(-1)
    with pytest.raises(OverflowError):
        Duration.from_nanoseconds(MAX_NANOSECONDS + 1)
    with pytest.raises(ValueError):
        Duration.from_unit(-1, TimeUnit.SECOND)
    with pytest.raises(ValidationError):
        Duration(nanoseconds=-5)
    with pytest.raises(ValidationError):
        Duration(nanoseconds=MAX_NANOSECONDS + 1)

    print("✓ range check tests passed")


def test_duration_is_frozen():
    """Test immutability and hashing."""

    print("Testing immutability...")

    d = Duration.from_seconds(1)
    with pytest.raises(ValidationError):
        d.nanoseconds = 5
    assert hash(d) == hash(Duration.from_seconds(1))

    print("✓ immutability tests passed")


def test_arithmetic():
    """Test +, *, // and comparisons."""

    print("Testing arithmetic...")

    one = Duration.from_seconds(1)
    half = Duration.from_unit(500, TimeUnit.MILLISECOND)

    assert one + half == Duration.from_unit(1500, TimeUnit.MILLISECOND)
    assert half * 2 == one
    assert 2 * half == one
    assert one * Fraction(1, 3) == Duration.from_nanoseconds(333_333_333)
    assert one * 0.5 == half
    assert one // 3 == Duration.from_nanoseconds(333_333_333)
    assert half < one <= one
    assert one > half >= half
    assert not Duration.zero()
    assert one

    with pytest.raises(OverflowError):
        Duration.from_nanoseconds(MAX_NANOSECONDS) + Duration.from_nanoseconds(1)
    with pytest.raises(ValueError):
        one * -1
    with pytest.raises(ZeroDivisionError):
        one // 0
    with pytest.raises(TypeError):
        one * True
    with pytest.raises(TypeError):
        one + 1

    print("✓ arithmetic tests passed")


def test_conversions():
    """Test unit conversions."""

    print("Testing conversions...")

    d = Duration.from_unit(90, TimeUnit.MINUTE)
    assert d.in_unit(TimeUnit.HOUR) == Fraction(3, 2)
    assert d.total_seconds() == 5400.0
    assert d.to_timedelta() == timedelta(hours=1, minutes=30)
    assert Duration.from_nanoseconds(1_999).to_timedelta() == timedelta(microseconds=1)
    assert Duration.zero().is_zero()

    print("✓ conversion tests passed")


def test_str_is_compact():
    """Test the compact string form."""

    print("Testing string form...")

    assert str(Duration.zero()) == "0s"
    assert str(Duration.from_unit(90, TimeUnit.MINUTE)) == "1h30m"
    assert str(Duration.from_unit(20, TimeUnit.MILLISECOND)) == "20ms"
    assert str(Duration.from_unit(2, TimeUnit.WEEK)) == "14d"
    assert str(Duration.from_nanoseconds(1_001_001)) == "1ms1µs1ns"

    print("✓ string form tests passed")


# ═══════════════════════════════════════════════════════════════════════════════
# UNIT TABLE
# ═══════════════════════════════════════════════════════════════════════════════

def test_unit_factors():
    """Test fixed conversion factors."""

    print("Testing unit factors...")

    assert TimeUnit.SECOND.nanoseconds == 10 ** 9
    assert TimeUnit.MINUTE.nanoseconds == 60 * 10 ** 9
    assert TimeUnit.DAY.nanoseconds == 86_400 * 10 ** 9
    assert TimeUnit.WEEK.nanoseconds == 7 * TimeUnit.DAY.nanoseconds
    assert TimeUnit.MONTH.nanoseconds == 30 * TimeUnit.DAY.nanoseconds
    assert TimeUnit.YEAR.nanoseconds == 365 * TimeUnit.DAY.nanoseconds
    assert TimeUnit.MICROSECOND.symbol == "µs"

    print("✓ unit factor tests passed")


def test_lookup():
    """Test alias resolution."""

    print("Testing lookup...")

    assert DEFAULT_UNITS.lookup("ms") is TimeUnit.MILLISECOND
    assert DEFAULT_UNITS.lookup("MS") is TimeUnit.MILLISECOND
    assert DEFAULT_UNITS.lookup("M") is TimeUnit.MINUTE
    assert DEFAULT_UNITS.lookup("Mon") is TimeUnit.MONTH
    assert DEFAULT_UNITS.lookup("μs") is TimeUnit.MICROSECOND
    assert DEFAULT_UNITS.lookup("µs") is TimeUnit.MICROSECOND
    assert DEFAULT_UNITS.lookup("小時") is TimeUnit.HOUR
    assert DEFAULT_UNITS.lookup("fortnight") is None
    assert "sec" in DEFAULT_UNITS
    assert "parsec" not in DEFAULT_UNITS

    print("✓ lookup tests passed")


def test_every_alias_resolves_to_its_unit():
    """Test the whole alias table."""

    print("Testing alias table...")

    for aliases in (LATIN_ALIASES, CJK_ALIASES):
        for unit, names in aliases.items():
            for name in names:
                assert DEFAULT_UNITS.lookup(name) is unit, name

    assert DEFAULT_UNITS.aliases(TimeUnit.SECOND) == ("s", "sec", "secs", "second", "seconds", "秒")
    assert list(DEFAULT_UNITS) == list(TimeUnit)

    print("✓ alias table tests passed")


def test_conflicting_aliases_rejected():
    """Test that one alias cannot name two units."""

    print("Testing alias conflicts...")

    with pytest.raises(ValueError):
        UnitTable({TimeUnit.SECOND: ("s",), TimeUnit.MINUTE: ("S",)}, {})

    print("✓ alias conflict tests passed")


def run_all_tests():
    """Run all test functions."""
    print("\n" + "="*60)
    print("Running Duration Value Tests")
    print("="*60 + "\n")

    try:
        test_constructors()
        test_range_is_enforced()
        test_duration_is_frozen()
        test_arithmetic()
        test_conversions()
        test_str_is_compact()
        test_unit_factors()
        test_lookup()
        test_every_alias_resolves_to_its_unit()
        test_conflicting_aliases_rejected()

        print("\n" + "="*60)
        print("✅ ALL TESTS PASSED!")
        print("="*60 + "\n")

    except AssertionError as e:
        print("\n" + "="*60)
        print("❌ TEST FAILED!")
        print("="*60)
        print(f"Error: {e}\n")
        raise


if __name__ == "__main__":
    run_all_tests()
