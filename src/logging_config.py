"""Logging configuration with console and rotating file handlers"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

KEEP_SESSION_LOGS = 5
MAX_LOG_BYTES = 10 * 1024 * 1024


def _remove_old_session_logs(log_path: Path) -> None:
    """Delete all but the newest session logs, leaving room for a new one."""
    existing_logs = sorted(log_path.parent.glob(f"{log_path.stem}_*.log"), reverse=True)  # Newest first
    for old_log in existing_logs[KEEP_SESSION_LOGS - 1:]:
        try:
            old_log.unlink()
        except OSError:
            pass  # Still in use by another process


def setup_logging(
    log_file: Optional[str] = "logs/bm25.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Optional[Path]:
    """
    Configure logging with two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default), one file per session, rotated at 10MB

    Args:
        log_file: Base path of the log file, or None for console only
        console_level: Console logging level
        file_level: File logging level

    Returns:
        Path of this session's log file (None when file logging is off)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    if log_file is None:
        return None

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _remove_old_session_logs(log_path)

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
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root_logger.addHandler(file_handler)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    return session_log
