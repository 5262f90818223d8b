"""
Print Session Runner

Runs one slow-scan print session:
- Opens every input (unopenable ones are reported and skipped)
- Picks line or character units
- Optionally fits the base delay to an expected total duration
- Hides the cursor while printing and always restores it
"""

import sys
import time
from typing import Callable, Iterable, Optional, TextIO

from app.config import FULL_WIDTH_FACTOR
from core.input_source import ChainedReader, InputError, InputErrorKind, describe_cause, open_sources
from core.schemas import PrintOptions, SlowScanConfig
from core.slow_scan import SlowScanWriter
from infra.i18n import Translator
from infra.logger import (
    log_delays_resolved,
    log_print_complete,
    log_print_start,
    log_total_fit,
    logger_output,
)
from infra.ui import CursorGuard, write_line


# ═══════════════════════════════════════════════════════════════════════════════
# CONSTANTS
# ═══════════════════════════════════════════════════════════════════════════════

EXIT_OK = 0
EXIT_FAILURE = 1


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN RUNNER
# ═══════════════════════════════════════════════════════════════════════════════

def run(
    options: PrintOptions,
    translator: Translator,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    stdin: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Execute a print session.

    Args:
        options: What to print and how
        translator: User-facing message lookup
        stdout: Output stream (defaults to sys.stdout)
        stderr: Diagnostics stream (defaults to sys.stderr)
        stdin: Stream used for the "-" input (defaults to sys.stdin)
        sleep: Sleep function, injectable for tests

    Returns:
        Process exit status
    """
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    def report_input_error(error: InputError) -> None:
        write_line(_describe_input_error(error, translator), stderr)

    sources = open_sources(options.files, on_error=report_input_error, stdin=stdin)
    log_print_start(options.mode, len(sources))

    config = options.config.model_copy()
    writer = SlowScanWriter(stdout, sleep=sleep)
    started = time.perf_counter()

    try:
        with ChainedReader(sources) as reader, CursorGuard(stdout, enabled=options.hide_cursor):
            units = reader.lines() if options.line_mode else reader.chars()

            if options.total_duration is not None:
                units = list(units)
                _fit_to_total(config, options, len(units))

            log_delays_resolved(
                config.base_delay,
                config.full_width_delay,
                config.control_char_delay,
                config.tail_delay,
            )
            count = _write(writer, units, config, options.line_mode)

    except BrokenPipeError:
        logger_output.info("PRINT_ABORTED | reason=broken_pipe")
        return EXIT_FAILURE

    except OverflowError as e:
        # Fitted base delay too large to double for full-width characters
        logger_output.error(f"TOTAL_FIT_FAILED | total={options.total_duration} | error={e}")
        write_line(
            translator.t("error.convert_string_to_duration", value=str(options.total_duration), reason=e),
            stderr,
        )
        return EXIT_FAILURE

    except OSError as e:
        logger_output.error(f"PRINT_FAILED | error={e}")
        write_line(translator.t("error.io_error_on_slow_scan_print", error=e), stderr)
        return EXIT_FAILURE

    log_print_complete(count, time.perf_counter() - started)
    return EXIT_OK


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _write(writer: SlowScanWriter, units: Iterable[str], config: SlowScanConfig, line_mode: bool) -> int:
    if line_mode:
        return writer.write_chunks(units, config)
    return writer.write_chars(units, config)


def _fit_to_total(config: SlowScanConfig, options: PrintOptions, unit_count: int) -> None:
    """Derive the base delay from --total-duration, keeping explicit full-width delays."""
    config.fit_base_delay(options.total_duration, unit_count)
    if not options.full_width_explicit:
        config.full_width_delay = config.base_delay * FULL_WIDTH_FACTOR
    log_total_fit(options.total_duration, unit_count, config.base_delay)


def _describe_input_error(error: InputError, translator: Translator) -> str:
    if error.kind is InputErrorKind.URI_IS_EMPTY:
        return translator.t("input.uri_is_empty")
    return translator.t("input.cannot_open_uri", uri=error.uri, source=describe_cause(error.cause))
