from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.core.errors import ToolInputError
from clickup_mcp.models import (
    TaskCreateInput,
    TaskInput,
    TaskListInput,
    TaskUpdateInput,
    parse_tool_input,
)
from clickup_mcp.service import ClickUpService

from ._common import ARRAY, BOOLEAN, NUMBER, STRING, envelope, json_result, prop, tool

_TASK_FIELDS = {
    "description": prop(STRING, "Task description (markdown supported)."),
    "assignees": prop(ARRAY, "User IDs to assign.", items=STRING),
    "status": prop(STRING, "Status name, as configured on the list."),
    "priority": prop(NUMBER, "1 (urgent) to 4 (low).", minimum=1, maximum=4),
    "due_date": prop(NUMBER, "Due date, Unix time in milliseconds."),
    "time_estimate": prop(NUMBER, "Time estimate in milliseconds."),
    "tags": prop(ARRAY, "Tag names.", items=STRING),
}

TOOLS = [
    tool(
        "clickup_create_task",
        "Create a task in a ClickUp list.",
        {
            "list_id": prop(STRING, "List to create the task in."),
            "name": prop(STRING, "Task name."),
            **_TASK_FIELDS,
        },
        required=("list_id", "name"),
    ),
    tool(
        "clickup_update_task",
        "Update fields of an existing ClickUp task.",
        {
            "task_id": prop(STRING, "Task to update."),
            "name": prop(STRING, "New task name."),
            **_TASK_FIELDS,
        },
        required=("task_id",),
    ),
    tool(
        "clickup_get_task",
        "Get a single ClickUp task.",
        {"task_id": prop(STRING, "Task ID.")},
        required=("task_id",),
    ),
    tool(
        "clickup_get_tasks",
        "List the tasks of a ClickUp list.",
        {
            "list_id": prop(STRING, "List ID."),
            "archived": prop(BOOLEAN, "Include archived tasks."),
            "page": prop(NUMBER, "Page to fetch, starting at 0."),
        },
        required=("list_id",),
    ),
    tool(
        "clickup_delete_task",
        "Delete a ClickUp task.",
        {"task_id": prop(STRING, "Task ID.")},
        required=("task_id",),
    ),
]


async def handle_create_task(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TaskCreateInput, arguments)
    return json_result(await service.create_task(args.task_payload()))


async def handle_update_task(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TaskUpdateInput, arguments)
    updates = args.task_payload()
    if not updates:
        raise ToolInputError("No fields provided to update the task.")
    return json_result(await service.update_task(args.task_id, updates))


async def handle_get_task(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TaskInput, arguments)
    return json_result(await service.tasks.get_task(args.task_id))


async def handle_get_tasks(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TaskListInput, arguments)
    tasks = await service.tasks.get_tasks(
        args.list_id, archived=args.archived, page=args.page
    )
    return json_result(tasks)


async def handle_delete_task(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TaskInput, arguments)
    await service.tasks.delete_task(args.task_id)
    return envelope(f"Task {args.task_id} deleted successfully.")


HANDLERS = {
    "clickup_create_task": handle_create_task,
    "clickup_update_task": handle_update_task,
    "clickup_get_task": handle_get_task,
    "clickup_get_tasks": handle_get_tasks,
    "clickup_delete_task": handle_delete_task,
}
