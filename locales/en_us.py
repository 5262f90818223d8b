"""
English (en-US) messages.
"""

MESSAGES = {
    # ───────────────────────────── CLI ─────────────────────────────
    "cli.about": (
        "Read text from stdin or specified files, and print with configurable delays "
        "in character-by-character or line-by-line mode.\n"
        "Tool name inspired by Slow Scan Television (SSTV)"
    ),
    "cli.delay": (
        'Set character print delay duration (default unit: seconds/s). '
        'Supports basic arithmetic (+, *). See "--help" for full syntax (default: {default})'
    ),
    "cli.full_width_delay": (
        "Set delay for full-width characters such as CJK ideographs (default: twice --delay)"
    ),
    "cli.control_char_delay": (
        "Set delay for control characters such as newline and tab (default: 0)"
    ),
    "cli.tail_delay": "Also wait after the last character or line",
    "cli.line_mode": "Enable line-by-line printing mode",
    "cli.hide_cursor": "Hide terminal cursor during printing and restore after exit",
    "cli.total_duration": (
        "Spread the output over roughly this total duration (overrides --delay)"
    ),
    "cli.log_level": "Diagnostic log level written to stderr (default: {default})",
    "cli.files": (
        'Input file paths (supports multiple files). Read from stdin when the argument is "-"'
    ),
    "cli.version": "Show version number",
    "cli.help": "Show this help message and exit",

    # ──────────────────────── UNIT REFERENCE ───────────────────────
    "units.title": "Time unit reference:",
    "units.header.unit": "Unit",
    "units.header.scale": "Time scale",
    "units.header.aliases": "Supported aliases (Latin aliases are case-insensitive)",
    "units.name.YEAR": "year",
    "units.name.MONTH": "month",
    "units.name.WEEK": "week",
    "units.name.DAY": "day",
    "units.name.HOUR": "hour",
    "units.name.MINUTE": "minute",
    "units.name.SECOND": "second",
    "units.name.MILLISECOND": "millisecond",
    "units.name.MICROSECOND": "microsecond",
    "units.name.NANOSECOND": "nanosecond",
    "units.examples": (
        "Examples:\n"
        "  1.5h30m       => 1.5 hours + 30 minutes = 2 hours\n"
        "  100ms * 2     => 100ms * 2 = 200ms\n"
        "  1 + 1 + 100ms => 1s + 1s + 100ms = 2100ms"
    ),

    # ─────────────────────────── ERRORS ────────────────────────────
    "error.convert_string_to_duration": (
        "Invalid time format argument {value!r}: {reason}. "
        'See time format examples with "--help"'
    ),
    "error.set_ctrlc_handle_error": (
        "Failed to register Ctrl+C handler. Terminal cursor may not restore properly "
        "on abnormal exit.\nYou can suppress this message by closing stderr.\n{error}"
    ),
    "error.io_error_on_slow_scan_print": "I/O error occurred during slow-scan printing\n{error}",

    # ─────────────────────────── INPUT ─────────────────────────────
    "input.cannot_open_uri": "failed to open '{uri}': {source}",
    "input.uri_is_empty": "uri cannot be empty",
}
