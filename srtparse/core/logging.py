"""Logging configuration."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import TextIO

from srtparse.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    settings: Settings | None = None, level: str | None = None, stream: TextIO | None = None
) -> None:
    """Configure logging with a console handler and an optional rotating file handler.

    Args:
        settings: Settings to read the log configuration from (default: cached settings)
        level: Log level overriding ``settings.log_level``
        stream: Console stream (default: stdout)
    """
    settings = settings or get_settings()

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]

    if settings.log_to_file:
        logs_dir = Path(settings.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                logs_dir / "srtparse.log",
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger instance for module."""
    return logging.getLogger(name)
