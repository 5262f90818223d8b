"""
Centralized Logging Configuration

Provides structured logging for slow-scan-print with:
- Component-specific loggers under the "ssp" namespace
- Consistent formatting
- Diagnostics on stderr (stdout carries the printed text)
"""

import logging
import sys
from typing import Optional, TextIO


ROOT_LOGGER_NAME = "ssp"

CONSOLE_FORMAT = "%(asctime)s | %(name)-10s | %(levelname)-8s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(filename)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGER CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the "ssp" logger tree.

    Safe to call more than once: previous handlers are replaced.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to (UTF-8)
        stream: Console destination (defaults to sys.stderr)

    Returns:
        The configured "ssp" logger
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.setLevel(log_level)
    return logger


# ═══════════════════════════════════════════════════════════════════════════════
# COMPONENT LOGGERS
# ═══════════════════════════════════════════════════════════════════════════════

logger_parser = logging.getLogger(f"{ROOT_LOGGER_NAME}.parser")
logger_input = logging.getLogger(f"{ROOT_LOGGER_NAME}.input")
logger_output = logging.getLogger(f"{ROOT_LOGGER_NAME}.output")
logger_cli = logging.getLogger(f"{ROOT_LOGGER_NAME}.cli")


# ═══════════════════════════════════════════════════════════════════════════════
# STRUCTURED LOGGING HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

class LogContext:
    """Helper for consistent structured logging"""

    @staticmethod
    def format_dict(data: dict) -> str:
        """Format dictionary for logging"""
        return " | ".join(f"{k}={v}" for k, v in data.items())

    @staticmethod
    def format_timing(duration_seconds: float) -> str:
        """Format timing information"""
        return f"{duration_seconds * 1000:.2f}ms"


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING UTILITIES
# ═══════════════════════════════════════════════════════════════════════════════

def log_delays_resolved(base, full_width, control, tail_delay: bool):
    """Log the effective delay configuration"""
    context = {
        "base": base,
        "full_width": full_width,
        "control": control,
        "tail_delay": tail_delay,
    }
    logger_cli.info(f"DELAYS_RESOLVED | {LogContext.format_dict(context)}")


def log_source_opened(uri: str, kind: str):
    """Log an input source being opened"""
    logger_input.debug(f"SOURCE_OPEN | uri={uri} | kind={kind}")


def log_source_failed(uri: str, error: str):
    """Log an input source that could not be opened"""
    logger_input.warning(f"SOURCE_FAIL | uri={uri} | error={error[:200]}")


def log_print_start(mode: str, sources: int):
    """Log the start of a print session"""
    logger_output.info(f"PRINT_START | mode={mode} | sources={sources}")


def log_print_complete(units: int, duration_seconds: float):
    """Log print session completion"""
    context = {
        "units": units,
        "duration": LogContext.format_timing(duration_seconds),
    }
    logger_output.info(f"PRINT_COMPLETE | {LogContext.format_dict(context)}")


def log_total_fit(total, units: int, base):
    """Log the base delay derived from an expected total duration"""
    logger_output.info(f"TOTAL_FIT | total={total} | units={units} | base={base}")
