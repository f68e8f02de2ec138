from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.models import BoardCreateInput, parse_tool_input
from clickup_mcp.service import ClickUpService

from ._common import STRING, json_result, prop, tool

TOOLS = [
    tool(
        "clickup_create_board",
        "Create a board view in a ClickUp space.",
        {
            "space_id": prop(STRING, "Space to add the board to."),
            "name": prop(STRING, "Board name."),
        },
        required=("space_id", "name"),
    ),
]


async def handle_create_board(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    # Boards are views of type "board" on the space.
    args = parse_tool_input(BoardCreateInput, arguments)
    view = await service.views.create_view(
        "space", args.space_id, {"name": args.name, "type": "board"}
    )
    return json_result(view)


HANDLERS = {"clickup_create_board": handle_create_board}
