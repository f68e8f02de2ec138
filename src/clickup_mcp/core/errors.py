from __future__ import annotations

from typing import Any, Dict, List, Optional, Union


class ClickUpClientError(Exception):
    """Base error for transport failures."""


class ClickUpHTTPError(ClickUpClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        message: str,
        response_json: Optional[Union[Dict[str, Any], List[Any]]] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} {method} {url}: {message}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.response_json = response_json
        self.response_text = response_text


class ClickUpParseError(ClickUpClientError):
    pass


class ClickUpServiceError(Exception):
    """
    Raised by resource services when a ClickUp call fails.
    The message is a fixed template; the transport error is kept as __cause__.
    """


class ClickUpValidationError(ValueError):
    """Raised by a service before any request is issued."""


class ToolInputError(ValueError):
    """Raised by tool handlers when arguments are missing or mistyped."""


class MissingConfigError(ValueError):
    pass


class UnknownToolError(LookupError):
    pass


class KeyManagerError(Exception):
    pass


__all__ = [
    "ClickUpClientError",
    "ClickUpHTTPError",
    "ClickUpParseError",
    "ClickUpServiceError",
    "ClickUpValidationError",
    "ToolInputError",
    "MissingConfigError",
    "UnknownToolError",
    "KeyManagerError",
]
