"""clickup_mcp package exports."""

from .client import ClickUpClient, rate_limit_state, with_auth_header
from .core.errors import (
    ClickUpClientError,
    ClickUpHTTPError,
    ClickUpParseError,
    ClickUpServiceError,
    ClickUpValidationError,
    ToolInputError,
)
from .server import build_server, dispatch
from .service import ClickUpService
from .transports.stdio.main import run as run_server

__version__ = "0.1.0"

__all__ = [
    # Client
    "ClickUpClient",
    "ClickUpService",
    "with_auth_header",
    "rate_limit_state",
    # Exceptions
    "ClickUpClientError",
    "ClickUpHTTPError",
    "ClickUpParseError",
    "ClickUpServiceError",
    "ClickUpValidationError",
    "ToolInputError",
    # Server utilities
    "dispatch",
    "build_server",
    "run_server",
]
