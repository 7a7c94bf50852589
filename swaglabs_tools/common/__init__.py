"""
================================================================================
Swag Labs Tools Common Utilities
================================================================================

Exports:
    - init_logger: Initialize the loguru logger with standard settings

Usage:
    from swaglabs_tools.common import init_logger

    init_logger(level="DEBUG", log_file="reports/logs/run.log")

================================================================================
"""

from .log_config import init_logger

__all__ = [
    "init_logger",
]
