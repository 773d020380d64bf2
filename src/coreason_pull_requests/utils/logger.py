# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

"""
Loguru configuration.

Diagnostics always go to stderr so that they never mix with the changelog
lines written to stdout.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

LOG_FORMAT = "{level}: {message}"
FILE_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"
DEFAULT_LEVEL = "WARNING"


def _ensure_log_directory(log_file: Path) -> None:
    log_dir = log_file.parent
    if not log_dir.exists():
        log_dir.mkdir(parents=True, exist_ok=True)


def configure_logging(level: str = DEFAULT_LEVEL, log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Replaces the loguru handlers with a stderr sink and an optional file sink.

    Args:
        level: Minimum level for the stderr sink.
        log_file: Optional path of a rotated log file receiving DEBUG and above.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT, colorize=False)

    if log_file is not None:
        path = Path(log_file)
        _ensure_log_directory(path)
        logger.add(
            str(path),
            level="DEBUG",
            format=FILE_LOG_FORMAT,
            rotation="10 MB",
            retention="7 days",
        )


configure_logging()

__all__ = ["logger", "configure_logging"]
