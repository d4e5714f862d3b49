"""Logger configuration for fitcalc."""

import sys

from loguru import logger


def setup_logger(level: str = "WARNING") -> None:
    """Route loguru output to stderr at `level`, keeping stdout for reports."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level.upper(),
        colorize=True,
    )
