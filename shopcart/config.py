"""Environment-driven settings."""
import os
from dataclasses import dataclass
from functools import cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CURRENCY = "USD"


def _load_env_file() -> None:
    """Load .env from the working directory if present (never overrides real env)."""
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


@dataclass(frozen=True)
class Settings:
    """Runtime settings for logging and display."""
    log_level: str = "INFO"
    log_simple: bool = False
    currency: str = DEFAULT_CURRENCY


@cache
def get_settings() -> Settings:
    """
    Build settings from the environment.

    Cached; call ``get_settings.cache_clear()`` after changing env vars.
    """
    _load_env_file()
    return Settings(
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        log_simple=os.environ.get("SHOPCART_LOG_SIMPLE") == "1",
        currency=os.environ.get("SHOPCART_CURRENCY", DEFAULT_CURRENCY).upper(),
    )


__all__ = ["DEFAULT_CURRENCY", "Settings", "get_settings"]
