"""
Application Configuration

Centralized defaults for slow-scan-print and the startup settings model.
Values can be overridden through environment variables (a .env file in
the working directory is honoured).
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.duration import parse_duration
from infra.env import get_env, load_environment


# ═══════════════════════════════════════════════════════════════════════════════
# PROGRAM
# ═══════════════════════════════════════════════════════════════════════════════

PROGRAM_NAME: str = "slow-scan-print"

VERSION: str = "1.2.1"


# ═══════════════════════════════════════════════════════════════════════════════
# DELAY DEFAULTS
# ═══════════════════════════════════════════════════════════════════════════════

# Base delay when --delay is not given
DEFAULT_DELAY: str = "20ms"

# Full-width delay is this multiple of the base delay unless set explicitly
FULL_WIDTH_FACTOR: int = 2

# Control characters print without delay unless set explicitly
DEFAULT_CONTROL_CHAR_DELAY: str = "0s"


# ═══════════════════════════════════════════════════════════════════════════════
# LOCALE
# ═══════════════════════════════════════════════════════════════════════════════

AVAILABLE_LOCALES: Tuple[str, ...] = ("en-US", "zh-CN", "zh-TW", "zh-HK")

# Used when the system locale is unknown or unsupported
DEFAULT_LOCALE: str = "en-US"


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Quiet by default: stderr is shared with user-facing messages
LOG_LEVEL: str = "WARNING"


# ═══════════════════════════════════════════════════════════════════════════════
# ENVIRONMENT VARIABLES
# ═══════════════════════════════════════════════════════════════════════════════

ENV_DELAY = "SLOW_SCAN_PRINT_DELAY"
ENV_LOCALE = "SLOW_SCAN_PRINT_LOCALE"
ENV_LOG_LEVEL = "SLOW_SCAN_PRINT_LOG_LEVEL"
ENV_LOG_FILE = "SLOW_SCAN_PRINT_LOG_FILE"


# ═══════════════════════════════════════════════════════════════════════════════
# SETTINGS
# ═══════════════════════════════════════════════════════════════════════════════

class Settings(BaseModel):
    """
    Startup settings, built once and passed down explicitly.

    Attributes:
        default_delay: Delay expression used when --delay is absent
        locale: Requested locale tag, or None to detect from the system
        log_level: Logging level name
        log_file: Optional path for a log file
    """
    model_config = ConfigDict(frozen=True)

    default_delay: str = Field(DEFAULT_DELAY, min_length=1)
    locale: Optional[str] = None
    log_level: str = LOG_LEVEL
    log_file: Optional[str] = None

    @field_validator("default_delay")
    @classmethod
    def check_delay(cls, value: str) -> str:
        parse_duration(value)
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}")
        return level


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Read settings from the environment (and .env), falling back to defaults."""
    load_environment(dotenv_path)
    return Settings(
        default_delay=get_env(ENV_DELAY, DEFAULT_DELAY),
        locale=get_env(ENV_LOCALE),
        log_level=get_env(ENV_LOG_LEVEL, LOG_LEVEL),
        log_file=get_env(ENV_LOG_FILE),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# HELPER FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

def is_locale_available(tag: str) -> bool:
    """Check if a locale tag has a message catalogue"""
    return tag in AVAILABLE_LOCALES


def validate_config():
    """Validate configuration on startup"""
    assert DEFAULT_LOCALE in AVAILABLE_LOCALES, f"Invalid DEFAULT_LOCALE: {DEFAULT_LOCALE}"
    assert LOG_LEVEL in LOG_LEVELS, f"Invalid LOG_LEVEL: {LOG_LEVEL}"
    assert FULL_WIDTH_FACTOR > 0, "FULL_WIDTH_FACTOR must be positive"
    parse_duration(DEFAULT_DELAY)
    parse_duration(DEFAULT_CONTROL_CHAR_DELAY)


# Validate on import
validate_config()
