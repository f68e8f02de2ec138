from __future__ import annotations

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from clickup_mcp.core.config import load_config
from clickup_mcp.core.errors import MissingConfigError
from clickup_mcp.core.logging import setup_logging
from clickup_mcp.server import build_server, create_service_from_env

log = logging.getLogger("clickup_mcp.stdio")


async def main() -> None:
    # stdout carries the protocol; logs go to stderr
    config = load_config(use_dotenv=True)
    setup_logging(config.log_level)

    async with create_service_from_env(config) as service:
        app = build_server(service)
        async with stdio_server() as (read_stream, write_stream):
            log.info("ClickUp MCP server listening on stdio")
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )


def run() -> None:
    try:
        asyncio.run(main())
    except MissingConfigError as exc:
        setup_logging()
        log.error("Failed to start ClickUp MCP server: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    run()
