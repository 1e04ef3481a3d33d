"""Utility functions for matrix-contacts."""

import sys
from pathlib import Path

from loguru import logger


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Setup logging to stderr and, optionally, a rotating file using loguru."""
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format="<level>{level}: {message}</level>",
    )

    if log_file:
        ensure_dir(log_file.expanduser().parent)
        logger.add(
            log_file.expanduser(),
            rotation="10 MB",
            level=level,
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )
