"""
Test suite for terminal glue: cursor, signals, stderr and the unit table
"""

import io
import signal
import sys
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

# Add project root to path so we can import from infra/
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.duration import DEFAULT_UNITS, TimeUnit
from infra.i18n import Translator
from infra.ui import (
    HIDE_CURSOR,
    SHOW_CURSOR,
    CursorGuard,
    TerminationRequested,
    _raise_termination,
    display_width,
    install_termination_handlers,
    render_unit_table,
    write_line,
)


class TtyStream(io.StringIO):
    def isatty(self):
        return True


# ═══════════════════════════════════════════════════════════════════════════════
# CURSOR
# ═══════════════════════════════════════════════════════════════════════════════

def test_cursor_guard_on_terminal():
    """Test hide/show around a block."""

    print("Testing CursorGuard...")

    stream = TtyStream()
    with CursorGuard(stream) as guard:
        assert guard.hidden
        stream.write("x")
    assert not guard.hidden
    assert stream.getvalue() == HIDE_CURSOR + "x" + SHOW_CURSOR

    print("✓ CursorGuard tests passed")


def test_cursor_guard_restores_on_error():
    """Test that the cursor comes back after an exception."""

    print("Testing CursorGuard on error...")

    stream = TtyStream()
    with pytest.raises(RuntimeError):
        with CursorGuard(stream):
            raise RuntimeError("boom")
    assert stream.getvalue().endswith(SHOW_CURSOR)

    print("✓ CursorGuard error tests passed")


def test_cursor_guard_noop_cases():
    """Test disabled guards and non-terminal streams."""

    print("Testing CursorGuard no-ops...")

    stream = TtyStream()
    with CursorGuard(stream, enabled=False) as guard:
        assert not guard.hidden
    assert stream.getvalue() == ""

    plain = io.StringIO()
    with CursorGuard(plain) as guard:
        assert not guard.hidden
    assert plain.getvalue() == ""

    print("✓ CursorGuard no-op tests passed")


# ═══════════════════════════════════════════════════════════════════════════════
# SIGNALS
# ═══════════════════════════════════════════════════════════════════════════════

def test_install_termination_handlers():
    """Test handler installation."""

    print("Testing install_termination_handlers...")

    on_error = Mock()
    with patch("infra.ui.signal.signal") as install:
        installed = install_termination_handlers(on_error)

    assert signal.SIGTERM in installed
    install.assert_any_call(signal.SIGTERM, _raise_termination)
    on_error.assert_not_called()

    print("✓ install_termination_handlers tests passed")


def test_install_failure_is_reported():
    """Test the error callback."""

    print("Testing install failure...")

    on_error = Mock()
    failure = ValueError("signal only works in main thread")
    with patch("infra.ui.signal.signal", side_effect=failure):
        installed = install_termination_handlers(on_error)

    assert installed == []
    on_error.assert_called_once_with(failure)

    print("✓ install failure tests passed")


def test_termination_handler_raises():
    """Test that the handler unwinds with TerminationRequested."""

    print("Testing termination handler...")

    with pytest.raises(TerminationRequested) as exc:
        _raise_termination(signal.SIGTERM, None)
    assert exc.value.signum == signal.SIGTERM

    print("✓ termination handler tests passed")


# ═══════════════════════════════════════════════════════════════════════════════
# STDERR
# ═══════════════════════════════════════════════════════════════════════════════

def test_write_line():
    """Test diagnostic lines, including a closed stream."""

    print("Testing write_line...")

    stream = io.StringIO()
    write_line("hello", stream)
    assert stream.getvalue() == "hello\n"

    stream.close()
    write_line("ignored", stream)

    print("✓ write_line tests passed")


# ═══════════════════════════════════════════════════════════════════════════════
# UNIT TABLE
# ═══════════════════════════════════════════════════════════════════════════════

def test_display_width():
    """Test column counting."""

    print("Testing display_width...")

    assert display_width("abc") == 3
    assert display_width("中a") == 3
    assert display_width("e\u0301") == 1
    assert display_width("a\u200bb") == 2
    assert display_width("") == 0

    print("✓ display_width tests passed")


def test_render_unit_table():
    """Test the --help unit reference."""

    print("Testing render_unit_table...")

    table = render_unit_table(DEFAULT_UNITS, Translator("en-US"))
    lines = table.splitlines()

    assert lines[0] == "Time unit reference:"
    for unit in TimeUnit:
        assert any(line.strip().startswith(unit.symbol + " ") for line in lines), unit
    assert "ms, msec, msecs, millisecond, milliseconds, 毫秒" in table
    assert "1.5h30m" in table

    zh_table = render_unit_table(DEFAULT_UNITS, Translator("zh-CN"))
    assert zh_table.splitlines()[0] == "时间单位参考："

    print("✓ render_unit_table tests passed")


def run_all_tests():
    """Run all test functions."""
    print("\n" + "="*60)
    print("Running Terminal Glue Tests")
    print("="*60 + "\n")

    try:
        test_cursor_guard_on_terminal()
        test_cursor_guard_noop_cases()
        test_install_termination_handlers()
        test_install_failure_is_reported()
        test_write_line()
        test_display_width()
        test_render_unit_table()

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
