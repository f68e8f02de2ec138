from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.core.errors import ToolInputError
from clickup_mcp.models import (
    ViewCreateInput,
    ViewDeleteInput,
    ViewInput,
    ViewsInput,
    ViewTasksInput,
    ViewUpdateInput,
    parse_tool_input,
)
from clickup_mcp.service import ClickUpService
from clickup_mcp.services.views import VIEW_PARENT_TYPES, VIEW_TYPES

from ._common import (
    ARRAY,
    BOOLEAN,
    NUMBER,
    OBJECT,
    STRING,
    envelope,
    enum,
    field,
    prop,
    to_json,
    tool,
)

_PARENT = {
    "parent_id": prop(STRING, "ID of the team, space, folder or list."),
    "parent_type": enum(VIEW_PARENT_TYPES, "Kind of parent the views belong to."),
}

TOOLS = [
    tool(
        "clickup_get_views",
        "List the views of a workspace, space, folder or list.",
        _PARENT,
        required=("parent_id", "parent_type"),
        output={"views": ARRAY},
    ),
    tool(
        "clickup_create_view",
        "Create a view on a workspace, space, folder or list.",
        {
            **_PARENT,
            "name": prop(STRING, "View name."),
            "type": enum(VIEW_TYPES, "View type."),
        },
        required=("parent_id", "parent_type", "name", "type"),
        output={"view": OBJECT},
    ),
    tool(
        "clickup_get_view_details",
        "Get a ClickUp view.",
        {"view_id": prop(STRING, "View ID.")},
        required=("view_id",),
        output={"view": OBJECT},
    ),
    tool(
        "clickup_update_view",
        "Update a ClickUp view.",
        {
            "view_id": prop(STRING, "View ID."),
            "name": prop(STRING, "New view name."),
        },
        required=("view_id",),
        output={"view": OBJECT},
    ),
    tool(
        "clickup_delete_view",
        "Delete a ClickUp view.",
        {"view_id": prop(STRING, "View ID.")},
        required=("view_id",),
        output={"success": BOOLEAN},
    ),
    tool(
        "clickup_get_view_tasks",
        "List the tasks shown in a view, one page at a time.",
        {
            "view_id": prop(STRING, "View ID."),
            "page": prop(NUMBER, "Page to fetch, starting at 0.", minimum=0),
        },
        required=("view_id",),
        output={"tasks": ARRAY, "last_page": BOOLEAN},
    ),
]


async def handle_get_views(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ViewsInput, arguments)
    views = await service.views.get_views(args.parent_type, args.parent_id)
    return envelope(
        f"Retrieved {len(views)} views for {args.parent_type} {args.parent_id}. "
        f"Details: {to_json(views)}",
        {"views": views},
    )


async def handle_create_view(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ViewCreateInput, arguments)
    body = args.fields_set(exclude=("parent_id", "parent_type"))
    view = await service.views.create_view(args.parent_type, args.parent_id, body)
    return envelope(
        f"Successfully created view: {field(view, 'name', None)}. Details: {to_json(view)}",
        {"view": view},
    )


async def handle_get_view_details(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ViewInput, arguments)
    view = await service.views.get_view_details(args.view_id)
    return envelope(
        f"Retrieved details for view: {field(view, 'name', None)}. "
        f"Details: {to_json(view)}",
        {"view": view},
    )


async def handle_update_view(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ViewUpdateInput, arguments)
    updates = args.fields_set(exclude=("view_id",))
    if not updates:
        raise ToolInputError("No fields provided to update the view.")
    view = await service.views.update_view(args.view_id, updates)
    return envelope(
        f"Successfully updated view: {field(view, 'name', None)}. Details: {to_json(view)}",
        {"view": view},
    )


async def handle_delete_view(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ViewDeleteInput, arguments)
    await service.views.delete_view(args.view_id)
    return envelope("View successfully deleted.", {"success": True})


async def handle_get_view_tasks(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ViewTasksInput, arguments)
    page = None if args.page is None else int(args.page)
    data = await service.views.get_view_tasks(args.view_id, page=page)
    tasks = field(data, "tasks", [])
    last_page = data.get("last_page") if isinstance(data, dict) else None
    shown_page = "all/first" if page is None else page
    return envelope(
        f"Retrieved {len(tasks)} tasks for view {args.view_id}. Page: {shown_page}. "
        f"Last Page: {to_json(last_page)}. Details: {to_json(tasks)}",
        {"tasks": tasks, "last_page": last_page},
    )


HANDLERS = {
    "clickup_get_views": handle_get_views,
    "clickup_create_view": handle_create_view,
    "clickup_get_view_details": handle_get_view_details,
    "clickup_update_view": handle_update_view,
    "clickup_delete_view": handle_delete_view,
    "clickup_get_view_tasks": handle_get_view_tasks,
}
