from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.models import FolderListsInput, ListCreateInput, parse_tool_input
from clickup_mcp.service import ClickUpService
from clickup_mcp.services.lists import LIST_PARENT_TYPES

from ._common import BOOLEAN, NUMBER, STRING, enum, json_result, prop, tool

TOOLS = [
    tool(
        "clickup_get_lists",
        "List the lists inside a ClickUp folder.",
        {"folder_id": prop(STRING, "Folder ID.")},
        required=("folder_id",),
    ),
    tool(
        "clickup_create_list",
        "Create a list in a folder, or directly in a space (folderless list).",
        {
            "parent_id": prop(STRING, "Folder ID or space ID."),
            "parent_type": enum(LIST_PARENT_TYPES, "Kind of parent."),
            "name": prop(STRING, "List name."),
            "content": prop(STRING, "List description."),
            "due_date": prop(NUMBER, "Due date, Unix time in milliseconds."),
            "due_date_time": prop(BOOLEAN, "Whether the due date includes a time."),
            "priority": prop(NUMBER, "1 (urgent) to 4 (low)."),
            "assignee": prop(STRING, "User ID of the list owner."),
            "status": prop(STRING, "List color/status."),
        },
        required=("parent_id", "parent_type", "name"),
    ),
]


async def handle_get_lists(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(FolderListsInput, arguments)
    return json_result(await service.get_lists(args.folder_id))


async def handle_create_list(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ListCreateInput, arguments)
    created = await service.lists.create_list(
        args.parent_id,
        args.parent_type,
        args.name,
        content=args.content,
        due_date=args.due_date,
        due_date_time=args.due_date_time,
        priority=args.priority,
        assignee=args.assignee,
        status=args.status,
    )
    return json_result(created)


HANDLERS = {
    "clickup_get_lists": handle_get_lists,
    "clickup_create_list": handle_create_list,
}
