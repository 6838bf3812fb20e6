"""
Logging configuration for Crypto Track.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "app.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def default_log_dir() -> Path:
    if os.name == "nt":
        return Path(os.environ.get("APPDATA", "")) / "crypto-track" / "logs"
    return Path.home() / ".config" / "crypto-track" / "logs"


def _make_handlers(log_file: Path) -> list[logging.Handler]:
    rotating = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    return [rotating, logging.StreamHandler(sys.stdout)]


def setup_logging(log_dir: Path | None = None, log_level: int = logging.INFO) -> Path:
    """
    Send log records to a rotating file under `log_dir` and to stdout.

    Calling it again replaces the handlers installed by the previous call.

    Returns:
        Path of the log file.
    """
    log_dir = log_dir or default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _make_handlers(log_file):
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger(__name__).info(f"Logging to {log_file}")
    return log_file
