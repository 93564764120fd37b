import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LEVEL = "WARNING"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Diagnostics go to stderr at WARNING by default so they stay out of
    the game screen. LOG_LEVEL overrides the level and LOG_FILE adds a
    rotating log file. Unknown levels and unreadable sizes fall back to
    the defaults.
    """
    log_level = (level or os.getenv("LOG_LEVEL", "") or DEFAULT_LEVEL).strip().upper()
    if log_level not in LEVELS:
        log_level = DEFAULT_LEVEL
    log_file = os.getenv("LOG_FILE", "").strip()
    max_mb = _env_int("LOG_MAX_MB", 10)
    backup_count = _env_int("LOG_BACKUP_COUNT", 5)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    root.addHandler(stream_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)
