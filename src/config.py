"""
Configuration from environment variables.

Environment is loaded from .env.local (local dev, highest priority) or .env,
then read once into an immutable Settings object.

Variables:
    MAX_RESULT_DOCUMENT_COUNT: Top-K truncation of search results (default: 5)
    STOP_WORDS: Stop words for the HTTP service engine (default: none)
    LOG_LEVEL: Console log level (default: INFO)
    LOG_FILE: Base path of the rotating log file (default: logs/search-server.log)
    PORT: HTTP port (default: 8080)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .search_engine.selector import MAX_RESULT_DOCUMENT_COUNT

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_environment(project_root: Path = PROJECT_ROOT) -> None:
    """Load .env.local first, then .env as fallback (existing env vars win)."""
    env_local = project_root / ".env.local"
    env_file = project_root / ".env"

    if env_local.exists():
        load_dotenv(env_local)
    elif env_file.exists():
        load_dotenv(env_file)


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class Settings:
    max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT
    stop_words: str = ""
    log_level: str = "INFO"
    log_file: str = "logs/search-server.log"
    port: int = 8080

    @property
    def console_log_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


def load_settings() -> Settings:
    """
    Read settings from the current environment.

    Raises:
        ValueError: if an integer variable is malformed or out of range
    """
    max_results = _get_int("MAX_RESULT_DOCUMENT_COUNT", MAX_RESULT_DOCUMENT_COUNT)
    if max_results < 1:
        raise ValueError(f"MAX_RESULT_DOCUMENT_COUNT must be >= 1, got {max_results}")

    return Settings(
        max_result_document_count=max_results,
        stop_words=os.getenv("STOP_WORDS", ""),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE", "logs/search-server.log"),
        port=_get_int("PORT", 8080),
    )
