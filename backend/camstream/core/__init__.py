"""Core module for configuration, logging and errors."""

from .config import settings, is_placeholder
from .logger import setup_logging, get_logger
from .exceptions import (
    StreamSetupError,
    TransportError,
    UpstreamStatusError,
    MalformedResponseError,
    MissingConfigurationError,
)

__all__ = [
    "settings",
    "is_placeholder",
    "setup_logging",
    "get_logger",
    "StreamSetupError",
    "TransportError",
    "UpstreamStatusError",
    "MalformedResponseError",
    "MissingConfigurationError",
]
