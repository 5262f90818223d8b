"""
Terminal Glue

Cursor visibility, termination signals, stderr diagnostics and the unit
reference table shown in --help.
"""

import signal
import sys
from typing import Callable, List, Optional, TextIO

from core.duration import TimeUnit, UnitTable
from core.slow_scan import CharClass, classify_char, is_zero_width
from infra.logger import logger_cli


HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"


# ═══════════════════════════════════════════════════════════════════════════════
# CURSOR
# ═══════════════════════════════════════════════════════════════════════════════

def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def hide_cursor(stream: TextIO = sys.stdout) -> bool:
    """Hide the terminal cursor. Returns False when stream is not a TTY."""
    if not _is_terminal(stream):
        return False
    stream.write(HIDE_CURSOR)
    stream.flush()
    return True


def show_cursor(stream: TextIO = sys.stdout) -> bool:
    """Show the terminal cursor. Returns False when stream is not a TTY."""
    if not _is_terminal(stream):
        return False
    stream.write(SHOW_CURSOR)
    stream.flush()
    return True


class CursorGuard:
    """
    Hides the cursor for the duration of a ``with`` block.

    The cursor is shown again however the block exits: normally, on an
    exception, on Ctrl+C or on a termination signal.
    """

    def __init__(self, stream: TextIO = sys.stdout, enabled: bool = True):
        self.stream = stream
        self.enabled = enabled
        self.hidden = False

    def __enter__(self) -> "CursorGuard":
        if self.enabled:
            self.hidden = hide_cursor(self.stream)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.hidden:
            try:
                show_cursor(self.stream)
            except OSError as e:
                logger_cli.warning(f"CURSOR_RESTORE_FAIL | error={e}")
            self.hidden = False


# ═══════════════════════════════════════════════════════════════════════════════
# SIGNALS
# ═══════════════════════════════════════════════════════════════════════════════

class TerminationRequested(Exception):
    """Raised from a SIGTERM/SIGHUP handler to unwind like Ctrl+C."""

    def __init__(self, signum: int):
        self.signum = signum
        super().__init__(f"Terminated by signal {signum}")


def _raise_termination(signum, frame):
    raise TerminationRequested(signum)


def install_termination_handlers(on_error: Callable[[Exception], None]) -> List[int]:
    """
    Route SIGTERM and SIGHUP through TerminationRequested.

    Ctrl+C keeps Python's default KeyboardInterrupt. Failures to install
    (e.g. outside the main thread) are reported through ``on_error``.

    Returns:
        Signal numbers that were installed
    """
    installed = []
    for name in ("SIGTERM", "SIGHUP"):
        signum = getattr(signal, name, None)
        if signum is None:
            continue
        try:
            signal.signal(signum, _raise_termination)
            installed.append(signum)
        except (ValueError, OSError) as e:
            logger_cli.warning(f"SIGNAL_INSTALL_FAIL | signal={name} | error={e}")
            on_error(e)
            break
    return installed


# ═══════════════════════════════════════════════════════════════════════════════
# STDERR
# ═══════════════════════════════════════════════════════════════════════════════

def write_line(message: str, stream: Optional[TextIO] = None) -> None:
    """Write one diagnostic line; a closed or broken stderr is ignored."""
    stream = sys.stderr if stream is None else stream
    try:
        stream.write(message + "\n")
        stream.flush()
    except (OSError, ValueError):
        pass


# ═══════════════════════════════════════════════════════════════════════════════
# UNIT REFERENCE TABLE
# ═══════════════════════════════════════════════════════════════════════════════

def display_width(text: str) -> int:
    """Terminal columns taken by ``text`` (full-width characters count twice, combining marks not at all)."""
    return sum(_char_width(ch) for ch in text)


def _char_width(ch: str) -> int:
    if is_zero_width(ch):
        return 0
    return 2 if classify_char(ch) is CharClass.FULL_WIDTH else 1


def _pad(text: str, width: int) -> str:
    return text + " " * max(width - display_width(text), 0)


def render_unit_table(units: UnitTable, translate: Callable[..., str]) -> str:
    """
    Render the time unit reference shown in --help.

    Args:
        units: Alias table to describe
        translate: Message lookup, e.g. a Translator
    """
    header = (
        translate("units.header.unit"),
        translate("units.header.scale"),
        translate("units.header.aliases"),
    )
    rows = [
        (unit.symbol, translate(f"units.name.{unit.name}"), ", ".join(units.aliases(unit)))
        for unit in TimeUnit
    ]

    widths = [
        max(display_width(row[i]) for row in [header] + rows)
        for i in range(2)
    ]
    rule = ("-" * widths[0], "-" * widths[1], "-" * display_width(header[2]))

    lines = [translate("units.title")]
    for row in [header, rule] + rows:
        lines.append(f"  {_pad(row[0], widths[0])}  {_pad(row[1], widths[1])}  {row[2]}")
    lines.append("")
    lines.append(translate("units.examples"))
    return "\n".join(lines)
