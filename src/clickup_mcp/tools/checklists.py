from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.core.errors import ToolInputError
from clickup_mcp.models import (
    ChecklistCreateInput,
    ChecklistInput,
    ChecklistItemCreateInput,
    ChecklistItemInput,
    ChecklistItemUpdateInput,
    ChecklistUpdateInput,
    parse_tool_input,
)
from clickup_mcp.service import ClickUpService

from ._common import BOOLEAN, NUMBER, OBJECT, STRING, envelope, json_result, prop, tool

_CHECKLIST = {"checklist_id": prop(STRING, "Checklist ID.")}
_ITEM = {**_CHECKLIST, "checklist_item_id": prop(STRING, "Checklist item ID.")}


def _checklist(data: Any) -> Dict[str, Any]:
    # ClickUp wraps checklist responses in {"checklist": {...}}
    if isinstance(data, dict) and data.get("checklist"):
        return {"checklist": data["checklist"]}
    return {"checklist": data}


TOOLS = [
    tool(
        "clickup_create_checklist",
        "Add a checklist to a task.",
        {"task_id": prop(STRING, "Task ID."), "name": prop(STRING, "Checklist name.")},
        required=("task_id", "name"),
        output={"checklist": OBJECT},
    ),
    tool(
        "clickup_update_checklist",
        "Rename or reorder a checklist.",
        {
            **_CHECKLIST,
            "name": prop(STRING, "New name."),
            "position": prop(NUMBER, "Position among the task's checklists."),
        },
        required=("checklist_id",),
        output={"checklist": OBJECT},
    ),
    tool(
        "clickup_delete_checklist",
        "Delete a checklist.",
        _CHECKLIST,
        required=("checklist_id",),
        output={"success": BOOLEAN},
    ),
    tool(
        "clickup_create_checklist_item",
        "Add an item to a checklist.",
        {
            **_CHECKLIST,
            "name": prop(STRING, "Item name."),
            "assignee": prop(NUMBER, "User ID to assign the item to."),
        },
        required=("checklist_id", "name"),
        output={"checklist": OBJECT},
    ),
    tool(
        "clickup_update_checklist_item",
        "Update, resolve or nest a checklist item.",
        {
            **_ITEM,
            "name": prop(STRING, "New name."),
            "resolved": prop(BOOLEAN, "Mark the item done."),
            "assignee": prop(NUMBER, "User ID to assign, or null to unassign."),
            "parent": prop(STRING, "Nest under this item."),
        },
        required=("checklist_id", "checklist_item_id"),
        output={"checklist": OBJECT},
    ),
    tool(
        "clickup_delete_checklist_item",
        "Delete a checklist item.",
        _ITEM,
        required=("checklist_id", "checklist_item_id"),
        output={"success": BOOLEAN},
    ),
]


async def handle_create_checklist(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChecklistCreateInput, arguments)
    data = await service.checklists.create_checklist(args.task_id, {"name": args.name})
    return json_result(data, _checklist(data))


async def handle_update_checklist(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChecklistUpdateInput, arguments)
    updates: Dict[str, Any] = {}
    if args.name:
        updates["name"] = args.name
    if "position" in args.model_fields_set:
        updates["position"] = args.position
    if not updates:
        raise ToolInputError("At least one field (name or position) must be provided.")

    data = await service.checklists.update_checklist(args.checklist_id, updates)
    return json_result(data, _checklist(data))


async def handle_delete_checklist(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChecklistInput, arguments)
    await service.checklists.delete_checklist(args.checklist_id)
    return envelope(
        f"Checklist {args.checklist_id} deleted successfully", {"success": True}
    )


async def handle_create_checklist_item(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChecklistItemCreateInput, arguments)
    body = args.fields_set(exclude=("checklist_id",))
    data = await service.checklists.create_checklist_item(args.checklist_id, body)
    return json_result(data, _checklist(data))


async def handle_update_checklist_item(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChecklistItemUpdateInput, arguments)
    sent = args.model_fields_set
    updates: Dict[str, Any] = {}
    if args.name:
        updates["name"] = args.name
    for key in ("resolved", "assignee"):
        if key in sent:
            updates[key] = getattr(args, key)
    if args.parent:
        updates["parent"] = args.parent
    if not updates:
        raise ToolInputError("At least one field must be provided to update.")

    data = await service.checklists.update_checklist_item(
        args.checklist_id, args.checklist_item_id, updates
    )
    return json_result(data, _checklist(data))


async def handle_delete_checklist_item(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChecklistItemInput, arguments)
    await service.checklists.delete_checklist_item(
        args.checklist_id, args.checklist_item_id
    )
    return envelope(
        f"Checklist item {args.checklist_item_id} deleted successfully",
        {"success": True},
    )


HANDLERS = {
    "clickup_create_checklist": handle_create_checklist,
    "clickup_update_checklist": handle_update_checklist,
    "clickup_delete_checklist": handle_delete_checklist,
    "clickup_create_checklist_item": handle_create_checklist_item,
    "clickup_update_checklist_item": handle_update_checklist_item,
    "clickup_delete_checklist_item": handle_delete_checklist_item,
}
