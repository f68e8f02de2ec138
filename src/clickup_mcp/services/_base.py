from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from clickup_mcp.client import ClickUpClient
from clickup_mcp.core.errors import (
    ClickUpClientError,
    ClickUpHTTPError,
    ClickUpServiceError,
    ClickUpValidationError,
)


def compact(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None; ClickUp treats null and absent differently."""
    return {k: v for k, v in values.items() if v is not None}


def without(values: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    excluded = set(keys)
    return {k: v for k, v in values.items() if k not in excluded}


def workspace_number(workspace_id: Any, field: str = "workspace_id") -> int:
    """v3 endpoints take the workspace id as a number."""
    text = str(workspace_id).strip()
    if not (text.isascii() and text.isdigit()):
        raise ClickUpValidationError(
            f"Invalid {field}: '{workspace_id}' must be a numeric string."
        )
    return int(text)


class ResourceService:
    """
    Base for one ClickUp resource family.

    `_call` issues exactly one request; any transport failure is logged with
    its method/url/status and re-raised as ClickUpServiceError(error), chained
    to the original exception.
    """

    resource = "resource"

    def __init__(self, client: ClickUpClient, *, logger: Optional[logging.Logger] = None):
        self.client = client
        self.log = logger or logging.getLogger(f"clickup_mcp.services.{self.resource}")

    async def _call(
        self,
        method: str,
        url: str,
        *,
        error: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        try:
            return await self.client.request(
                method, url, params=params or None, json=json, tool=self.resource
            )
        except ClickUpClientError as exc:
            self._log_failure(exc, method=method, url=url)
            raise ClickUpServiceError(error) from exc

    def _unwrap(self, payload: Any, key: str, *, error: str) -> Any:
        if not isinstance(payload, dict) or key not in payload:
            self.log.error(
                "Unexpected ClickUp response shape: missing %r",
                key,
                extra={"tool": self.resource},
            )
            raise ClickUpServiceError(error)
        return payload[key]

    def _log_failure(self, exc: Exception, *, method: str, url: str) -> None:
        status = exc.status_code if isinstance(exc, ClickUpHTTPError) else None
        body = None
        if isinstance(exc, ClickUpHTTPError):
            body = exc.response_json if exc.response_json is not None else exc.response_text
        self.log.error(
            "ClickUp request failed: %s (response: %s)",
            exc,
            body,
            extra={
                "tool": self.resource,
                "method": method.upper(),
                "url": url,
                "status": status,
                "error_type": type(exc).__name__,
            },
        )


__all__ = ["ResourceService", "compact", "without", "workspace_number"]
