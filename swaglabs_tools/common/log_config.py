"""
================================================================================
Logging Configuration
================================================================================

Centralized Loguru logging setup for the suites and the runner.

Features:
    - One console sink with a consistent format
    - pytest-xdist worker id in every record
    - Optional rotating file sink
    - LOG_LEVEL environment variable override

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger


DEFAULT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[worker]} | "
    "{name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_str: str = DEFAULT_FORMAT,
    force: bool = False,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Call once per process (pytest_configure, runner main). Later calls are
    ignored unless `force` is set.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). $LOG_LEVEL wins when set.
        log_file: Optional path of a rotating log file.
        format_str: Loguru format string; may use {extra[worker]}.
        force: Reconfigure even if already initialized.
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    log_level = (os.getenv("LOG_LEVEL") or level or "INFO").upper()

    logger.remove()
    logger.configure(extra={"worker": os.getenv("PYTEST_XDIST_WORKER", "main")})
    logger.add(
        sys.stderr,
        level=log_level,
        format=format_str,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=format_str.replace("{level: <8}", "{level}"),  # Remove padding for file
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            enqueue=True,
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")

