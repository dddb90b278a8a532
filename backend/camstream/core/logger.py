"""Logging configuration."""

import logging
import sys
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from camstream.core.config import settings


def setup_logging(log_to_file: Optional[bool] = None) -> None:
    """Configure logging for the application."""

    # Use DEBUG=true in settings to enable verbose logging
    root_logger = logging.getLogger()

    # Avoid duplicate handlers (from Uvicorn reloader)
    if root_logger.handlers:
        root_logger.handlers.clear()

    level = logging.DEBUG if settings.debug else logging.INFO
    root_logger.setLevel(level)

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file is None:
        log_to_file = settings.log_to_file

    if log_to_file:
        try:
            logs_dir = "logs"
            os.makedirs(logs_dir, exist_ok=True)

            log_file = os.path.join(logs_dir, "camstream.log")
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10_000_000,  # 10MB
                backupCount=5
            )
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(f"File logging disabled: {e}")

    # Request lines from httpx include full media URLs with tokens
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.ERROR)

    # Control verbose libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
