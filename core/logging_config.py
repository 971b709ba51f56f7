"""
Logging Configuration

Sets up root logging with console output and a daily-rotated log file.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from config.settings import LOG_DIR, LOG_FILE, LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s | %(name)s"


def setup_logging(
    level: Union[str, int] = LOG_LEVEL,
    log_file: Optional[Path] = None,
    console: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Setup logging with rotation.

    Logs to console and file with rotation:
    - Daily rotation
    - Keep 7 days of logs

    Args:
        level: Log level name or number
        log_file: Log file path (None = LOG_DIR/LOG_FILE)
        console: Whether to log to the console as well
        stream: Console stream (None = stdout)

    Returns:
        The configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    if console:
        console_handler = logging.StreamHandler(stream or sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    log_path = Path(log_file) if log_file else Path(LOG_DIR) / LOG_FILE
    try:
        file_handler = _rotating_handler(log_path)
    except (PermissionError, FileNotFoundError):
        # Fallback to local logs directory if LOG_DIR not writable
        logs_dir = Path("logs")
        logs_dir.mkdir(exist_ok=True)

        fallback_log = logs_dir / log_path.name
        logger.warning(
            f"Cannot write to {log_path}, using fallback: {fallback_log}",
        )
        file_handler = _rotating_handler(fallback_log)

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


def _rotating_handler(path: Path) -> logging.handlers.TimedRotatingFileHandler:
    return logging.handlers.TimedRotatingFileHandler(
        str(path),
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8",
    )
