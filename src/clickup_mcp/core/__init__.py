"""Ambient concerns: configuration, logging, errors, key management."""

from .config import AppConfig, load_config
from .errors import (
    ClickUpClientError,
    ClickUpHTTPError,
    ClickUpParseError,
    ClickUpServiceError,
    ClickUpValidationError,
    KeyManagerError,
    MissingConfigError,
    ToolInputError,
    UnknownToolError,
)
from .logging import setup_logging
from .observability import log_event
from .security import KeyManager

__all__ = [
    "AppConfig",
    "load_config",
    "setup_logging",
    "log_event",
    "KeyManager",
    "ClickUpClientError",
    "ClickUpHTTPError",
    "ClickUpParseError",
    "ClickUpServiceError",
    "ClickUpValidationError",
    "KeyManagerError",
    "MissingConfigError",
    "ToolInputError",
    "UnknownToolError",
]
