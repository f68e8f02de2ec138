from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional

from mcp import types
from mcp.server import Server

from clickup_mcp.core.config import AppConfig, load_config
from clickup_mcp.core.errors import ToolInputError, UnknownToolError
from clickup_mcp.core.observability import log_event
from clickup_mcp.service import ClickUpService
from clickup_mcp.tools import TOOL_DEFINITIONS, TOOL_HANDLERS, TOOLS_BY_NAME

SERVER_NAME = "clickup-mcp"

log = logging.getLogger("clickup_mcp.server")


def create_service_from_env(config: Optional[AppConfig] = None) -> ClickUpService:
    """Build the ClickUp facade from the environment (.env included)."""
    return ClickUpService.from_config(config or load_config())


def _requires_arguments(name: str) -> bool:
    schema = TOOLS_BY_NAME[name].inputSchema or {}
    return bool(schema.get("required"))


async def dispatch(
    service: ClickUpService, name: str, arguments: Optional[Mapping[str, Any]]
) -> Dict[str, Any]:
    """
    Run one tool call to completion.

    Never raises: any failure (unknown tool, bad arguments, ClickUp error)
    comes back as a single text block "Error processing <name>: <message>".
    """
    start = time.perf_counter()
    status = "ok"
    try:
        handler = TOOL_HANDLERS.get(name)
        if handler is None:
            raise UnknownToolError(f"Unknown tool: {name}")

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping) or (
            not arguments and _requires_arguments(name)
        ):
            raise ToolInputError(f"Missing arguments for tool {name}.")

        return await handler(service, arguments)
    except Exception as exc:
        status = "error"
        log.error(
            "Error handling tool request: %s",
            exc,
            exc_info=not isinstance(exc, (ToolInputError, UnknownToolError)),
            extra={"tool": name, "error_type": type(exc).__name__},
        )
        return {
            "content": [
                {"type": "text", "text": f"Error processing {name}: {_message(exc)}"}
            ]
        }
    finally:
        log_event(
            "tool_call",
            tool=name,
            status=status,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )


def _message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def build_server(service: ClickUpService) -> Server:
    app = Server(SERVER_NAME)

    @app.list_tools()
    async def list_tools() -> list[types.Tool]:
        return list(TOOL_DEFINITIONS)

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        # Bypasses the SDK's input/output schema validation.
        envelope = await dispatch(service, req.params.name, req.params.arguments)
        return types.ServerResult(types.CallToolResult.model_validate(envelope))

    app.request_handlers[types.CallToolRequest] = call_tool
    return app


__all__ = ["dispatch", "build_server", "create_service_from_env", "SERVER_NAME"]
