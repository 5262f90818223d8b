import os
from typing import Optional

from dotenv import load_dotenv


def load_environment(dotenv_path: Optional[str] = None) -> None:
    """Load a .env file into os.environ without overriding real variables."""
    load_dotenv(dotenv_path, override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()
