from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.core.errors import ToolInputError
from clickup_mcp.models import DependencyInput, TaskLinkInput, parse_tool_input
from clickup_mcp.service import ClickUpService

from ._common import BOOLEAN, STRING, envelope, prop, tool

_RELATION = {
    "task_id": prop(STRING, "Task ID."),
    "depends_on": prop(STRING, "Task that must finish before this one (waiting on)."),
    "dependency_of": prop(STRING, "Task that is waiting on this one (blocking)."),
}
_LINK = {
    "task_id": prop(STRING, "Task ID."),
    "links_to": prop(STRING, "Task to link with."),
}
_SUCCESS = {"success": BOOLEAN}

TOOLS = [
    tool(
        "clickup_add_dependency",
        "Make a task wait on, or block, another task.",
        _RELATION,
        required=("task_id",),
        output=_SUCCESS,
    ),
    tool(
        "clickup_delete_dependency",
        "Remove a dependency between two tasks.",
        _RELATION,
        required=("task_id",),
        output=_SUCCESS,
    ),
    tool(
        "clickup_add_task_link",
        "Link two tasks together.",
        _LINK,
        required=("task_id", "links_to"),
        output=_SUCCESS,
    ),
    tool(
        "clickup_delete_task_link",
        "Remove the link between two tasks.",
        _LINK,
        required=("task_id", "links_to"),
        output=_SUCCESS,
    ),
]


def _dependency_args(arguments: Mapping[str, Any]) -> DependencyInput:
    args = parse_tool_input(DependencyInput, arguments)
    if not args.depends_on and not args.dependency_of:
        raise ToolInputError("Either depends_on or dependency_of must be provided.")
    return args


async def handle_add_dependency(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = _dependency_args(arguments)
    await service.dependencies.add_dependency(
        args.task_id, depends_on=args.depends_on, dependency_of=args.dependency_of
    )
    return envelope("Dependency added successfully", {"success": True})


async def handle_delete_dependency(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = _dependency_args(arguments)
    await service.dependencies.delete_dependency(
        args.task_id, depends_on=args.depends_on, dependency_of=args.dependency_of
    )
    return envelope("Dependency removed successfully", {"success": True})


async def handle_add_task_link(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TaskLinkInput, arguments)
    await service.dependencies.add_task_link(args.task_id, args.links_to)
    return envelope("Task link added successfully", {"success": True})


async def handle_delete_task_link(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TaskLinkInput, arguments)
    await service.dependencies.delete_task_link(args.task_id, args.links_to)
    return envelope("Task link removed successfully", {"success": True})


HANDLERS = {
    "clickup_add_dependency": handle_add_dependency,
    "clickup_delete_dependency": handle_delete_dependency,
    "clickup_add_task_link": handle_add_task_link,
    "clickup_delete_task_link": handle_delete_task_link,
}
