"""
Logging setup shared by the command line scripts
"""

import os
import sys
from typing import Optional
from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def default_log_level() -> str:
    return os.getenv('LOG_LEVEL') or 'INFO'


def log_level(value: str) -> str:
    """
    Normalize a level name, raising ValueError for levels loguru does not know

    Used as an argparse type, so bad values become usage errors.
    """
    name = value.strip().upper()
    try:
        logger.level(name)
    except ValueError:
        raise ValueError(f"unknown log level: {value!r}")
    return name


def configure_logging(level: Optional[str] = None):
    """Send loguru output to stderr so stdout only carries results"""
    level = log_level(level or default_log_level())

    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level
    )
