from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.service import ClickUpService

from ._common import json_result, tool

TOOLS = [
    tool(
        "clickup_get_teams",
        "List the ClickUp workspaces (teams) the token can access.",
        {},
    ),
]


async def handle_get_teams(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    return json_result(await service.get_teams())


HANDLERS = {"clickup_get_teams": handle_get_teams}
