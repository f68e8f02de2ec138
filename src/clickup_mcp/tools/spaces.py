from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.core.errors import ToolInputError
from clickup_mcp.models import (
    SpaceCreateInput,
    SpaceDeleteInput,
    SpaceInput,
    SpacesInput,
    SpaceUpdateInput,
    parse_tool_input,
)
from clickup_mcp.service import ClickUpService

from ._common import BOOLEAN, OBJECT, STRING, envelope, json_result, prop, tool

TOOLS = [
    tool(
        "clickup_get_spaces",
        "List the spaces of a ClickUp workspace.",
        {
            "team_id": prop(STRING, "Workspace (team) ID."),
            "archived": prop(BOOLEAN, "Include archived spaces."),
        },
        required=("team_id",),
    ),
    tool(
        "clickup_create_space",
        "Create a space in a ClickUp workspace.",
        {
            "team_id": prop(STRING, "Workspace (team) ID."),
            "name": prop(STRING, "Space name."),
            "multiple_assignees": prop(BOOLEAN, "Allow more than one assignee per task."),
            "features": prop(OBJECT, "ClickApps to enable, keyed by feature name."),
        },
        required=("team_id", "name"),
    ),
    tool(
        "clickup_get_space",
        "Get a ClickUp space.",
        {"space_id": prop(STRING, "Space ID.")},
        required=("space_id",),
    ),
    tool(
        "clickup_update_space",
        "Update a ClickUp space.",
        {
            "space_id": prop(STRING, "Space ID."),
            "name": prop(STRING, "New name."),
            "color": prop(STRING, "Hex color, e.g. #7B68EE."),
            "private": prop(BOOLEAN, "Make the space private."),
            "admin_can_manage": prop(BOOLEAN, "Let admins manage the space."),
            "archived": prop(BOOLEAN, "Archive or unarchive the space."),
            "features": prop(OBJECT, "ClickApps to enable or disable."),
        },
        required=("space_id",),
    ),
    tool(
        "clickup_delete_space",
        "Delete a ClickUp space.",
        {"space_id": prop(STRING, "Space ID.")},
        required=("space_id",),
    ),
]


async def handle_get_spaces(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(SpacesInput, arguments)
    data = await service.spaces.get_spaces(args.team_id, archived=args.archived)
    return json_result(data.get("spaces"))


async def handle_create_space(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(SpaceCreateInput, arguments)
    body = args.fields_set(exclude=("team_id",))
    return json_result(await service.spaces.create_space(args.team_id, body))


async def handle_get_space(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(SpaceInput, arguments)
    return json_result(await service.spaces.get_space(args.space_id))


async def handle_update_space(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(SpaceUpdateInput, arguments)
    updates = args.fields_set(exclude=("space_id",))
    if not updates:
        raise ToolInputError("No update fields provided for space.")
    return json_result(await service.spaces.update_space(args.space_id, updates))


async def handle_delete_space(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(SpaceDeleteInput, arguments)
    await service.spaces.delete_space(args.space_id)
    return envelope(f"Space {args.space_id} deleted successfully.")


HANDLERS = {
    "clickup_get_spaces": handle_get_spaces,
    "clickup_create_space": handle_create_space,
    "clickup_get_space": handle_get_space,
    "clickup_update_space": handle_update_space,
    "clickup_delete_space": handle_delete_space,
}
