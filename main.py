"""
slow-scan-print CLI

Prints text from files or stdin one character (or line) at a time:
- Delays are duration expressions ("20ms", "1.5h30m", "100ms * 2")
- Full-width characters wait twice the base delay unless overridden
- Control characters do not wait unless overridden
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from app.config import (
    DEFAULT_CONTROL_CHAR_DELAY,
    FULL_WIDTH_FACTOR,
    LOG_LEVELS,
    PROGRAM_NAME,
    VERSION,
    Settings,
    load_settings,
)
from app.runner import EXIT_FAILURE, run
from core.duration import DEFAULT_UNITS, Duration, InvalidDurationFormat, UnitTable, parse_duration
from core.schemas import PrintOptions, SlowScanConfig
from infra.i18n import Translator
from infra.logger import logger_cli, setup_logging
from infra.ui import TerminationRequested, install_termination_handlers, render_unit_table, write_line


# ═══════════════════════════════════════════════════════════════════════════════
# CLI INTERFACE
# ═══════════════════════════════════════════════════════════════════════════════

class CLI:
    """
    Command-line interface for slow-scan-print.

    Turns argv into PrintOptions and hands them to the runner. Settings,
    translator and unit table are built once and passed in.
    """

    def __init__(self, settings: Settings, translator: Translator, units: UnitTable = DEFAULT_UNITS):
        self.settings = settings
        self.translator = translator
        self.units = units

    def build_parser(self) -> argparse.ArgumentParser:
        t = self.translator.t
        parser = argparse.ArgumentParser(
            prog=PROGRAM_NAME,
            description=t("cli.about"),
            epilog=render_unit_table(self.units, t),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
        )

        parser.add_argument(
            "-d", "--delay",
            metavar="TIME",
            default=None,
            help=t("cli.delay", default=self.settings.default_delay),
        )
        parser.add_argument(
            "-f", "--full-width-delay",
            metavar="TIME",
            default=None,
            help=t("cli.full_width_delay"),
        )
        parser.add_argument(
            "-c", "--control-char-delay",
            metavar="TIME",
            default=None,
            help=t("cli.control_char_delay"),
        )
        parser.add_argument(
            "-t", "--tail-delay",
            action="store_true",
            help=t("cli.tail_delay"),
        )
        parser.add_argument(
            "-l", "--line-mode",
            action="store_true",
            help=t("cli.line_mode"),
        )
        parser.add_argument(
            "-i", "--hide-cursor",
            action="store_true",
            help=t("cli.hide_cursor"),
        )
        parser.add_argument(
            "--total-duration",
            metavar="TIME",
            default=None,
            help=t("cli.total_duration"),
        )
        parser.add_argument(
            "--log-level",
            choices=LOG_LEVELS,
            type=str.upper,
            default=None,
            help=t("cli.log_level", default=self.settings.log_level),
        )
        parser.add_argument(
            "files",
            nargs="*",
            metavar="FILES",
            help=t("cli.files"),
        )
        parser.add_argument(
            "-v", "--version",
            action="version",
            version=f"%(prog)s {VERSION}",
            help=t("cli.version"),
        )
        parser.add_argument(
            "-h", "--help",
            action="help",
            help=t("cli.help"),
        )
        return parser

    def resolve_options(self, args: argparse.Namespace) -> PrintOptions:
        """
        Apply the delay defaulting rules.

        - base delay: --delay, else the configured default
        - full-width delay: --full-width-delay, else twice the base delay
        - control-char delay: --control-char-delay, else zero

        Raises:
            InvalidDurationFormat: If any delay expression is malformed
        """
        base = self._parse(args.delay if args.delay is not None else self.settings.default_delay)

        if args.full_width_delay is not None:
            full_width = self._parse(args.full_width_delay)
        else:
            full_width = base * FULL_WIDTH_FACTOR

        if args.control_char_delay is not None:
            control = self._parse(args.control_char_delay)
        else:
            control = self._parse(DEFAULT_CONTROL_CHAR_DELAY)

        total = self._parse(args.total_duration) if args.total_duration is not None else None

        config = SlowScanConfig(
            base_delay=base,
            full_width_delay=full_width,
            control_char_delay=control,
            tail_delay=args.tail_delay,
        )
        return PrintOptions(
            config=config,
            line_mode=args.line_mode,
            hide_cursor=args.hide_cursor,
            files=args.files or ["-"],
            total_duration=total,
            full_width_explicit=args.full_width_delay is not None,
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Parse argv, print, and return the exit status."""
        args = self.build_parser().parse_args(argv)

        setup_logging(
            level=args.log_level or self.settings.log_level,
            log_file=self.settings.log_file,
        )
        logger_cli.debug(f"CLI_START | locale={self.translator.locale} | argv={argv}")

        try:
            options = self.resolve_options(args)
        except InvalidDurationFormat as e:
            logger_cli.error(f"INVALID_DURATION | value={e.expression!r} | reason={e.reason}")
            write_line(self.translator.t(
                "error.convert_string_to_duration",
                value=e.expression,
                reason=e.reason,
            ))
            return EXIT_FAILURE
        except OverflowError as e:
            write_line(self.translator.t(
                "error.convert_string_to_duration",
                value=args.delay or self.settings.default_delay,
                reason=str(e),
            ))
            return EXIT_FAILURE

        install_termination_handlers(
            on_error=lambda e: write_line(self.translator.t("error.set_ctrlc_handle_error", error=e))
        )

        try:
            return run(options, self.translator)
        except (KeyboardInterrupt, TerminationRequested):
            logger_cli.info("CLI_INTERRUPTED")
            return EXIT_FAILURE

    def _parse(self, text: str) -> Duration:
        return parse_duration(text, self.units)


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════════

def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the application.

    Loads settings, selects the locale and runs the CLI.
    """
    try:
        settings = load_settings()
    except ValidationError as e:
        write_line(f"{PROGRAM_NAME}: invalid configuration\n{e}")
        return EXIT_FAILURE

    translator = Translator.for_system(settings.locale)
    return CLI(settings, translator).run(argv)


if __name__ == "__main__":
    sys.exit(main())
