"""Logging configuration: console (brief) and rotating session log file (detailed)"""
import glob
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, TextIO

SESSION_LOGS_TO_KEEP = 5
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'


def _cleanup_session_logs(log_path: Path, keep: int = SESSION_LOGS_TO_KEEP) -> None:
    """Delete oldest session logs so that a new one fits within `keep`."""
    log_pattern = str(log_path.parent / f"{log_path.stem}_*.log")
    existing_logs = sorted(glob.glob(log_pattern), reverse=True)  # Newest first
    for old_log in existing_logs[keep - 1:]:
        try:
            Path(old_log).unlink()
        except OSError as e:
            logging.getLogger(__name__).debug(f"Could not delete old log {old_log}: {e}")


def setup_logging(
    log_file: Optional[str] = "logs/search-server.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console_stream: Optional[TextIO] = None,
) -> Optional[Path]:
    """
    Configure root logging.

    Destinations:
    - Console: brief logs (INFO by default)
    - File: detailed logs (DEBUG by default), one file per session,
      `<stem>_<timestamp>.log`, last 5 sessions kept, rotated at 10MB

    The CLI passes log_file=None and console_stream=sys.stderr so that
    stdout carries only search results.

    Args:
        log_file: Base path to log file, or None for console only
        console_level: Console logging level
        file_level: File logging level
        console_stream: Console stream (default: stdout)

    Returns:
        Path of the session log file, or None if file logging is off
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates on repeated setup
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(console_stream or sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers in console (but keep in file)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    if log_file is None:
        logging.debug(f"Logging configured: console={logging.getLevelName(console_level)}, no file")
        return None

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _cleanup_session_logs(log_path)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=MAX_LOG_BYTES,
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    root_logger.addHandler(file_handler)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    return session_log
