# src/gcurrency/shared/logging_conf.py
"""
Logging Configuration - Logging Setup for Embedding Applications

Library modules only create module loggers; they never attach handlers.
Applications that want gcurrency's log output in a consistent format can
call setup_logging once at startup.

Files that USE this module:
- Applications embedding gcurrency
- tests.test_logging_conf (unit tests)

Files that this module USES:
- gcurrency.config (settings for logging defaults)
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union
from logging.handlers import RotatingFileHandler

from gcurrency.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    log_stdout: Optional[bool] = None,
    max_bytes: Optional[int] = None,
    backup_count: Optional[int] = None,
) -> List[logging.Handler]:
    """
    Configure the gcurrency logger.

    Unset arguments fall back to settings (LOG_FILE, LOG_DIR,
    GCURRENCY_LOG_STDOUT, LOG_MAX_BYTES, LOG_BACKUP_COUNT).

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; writes gcurrency.log there
        log_stdout: Whether to also log to stdout
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup log files to keep

    Returns:
        The handlers attached to the "gcurrency" logger
    """
    log_file = log_file or settings.log_file
    log_dir = log_dir or settings.log_dir
    if log_stdout is None:
        log_stdout = settings.log_stdout
    max_bytes = max_bytes or settings.log_max_bytes
    backup_count = backup_count if backup_count is not None else settings.log_backup_count

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if log_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        handlers.append(stdout_handler)

    log_file_path = None
    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "gcurrency.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # If no handlers specified, default to stdout
    if not handlers:
        fallback = logging.StreamHandler(sys.stdout)
        fallback.setFormatter(formatter)
        handlers = [fallback]

    package_logger = logging.getLogger("gcurrency")
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)

    logger = logging.getLogger(__name__)
    if log_file_path is not None:
        logger.info("Logging configured: file=%s, level=%s", log_file_path, level)
    else:
        logger.info("Logging configured: stdout, level=%s", level)
    return handlers
