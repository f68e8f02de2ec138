from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.models import (
    TaskInput,
    TeamInput,
    TimeEntryCreateInput,
    TimeEntryInput,
    TimeEntryUpdateInput,
    TimerStartInput,
    parse_tool_input,
)
from clickup_mcp.service import ClickUpService

from ._common import (
    ARRAY,
    BOOLEAN,
    NUMBER,
    STRING,
    envelope,
    field,
    json_result,
    prop,
    tool,
)

_ENTRY = {
    "duration": prop(NUMBER, "Duration in milliseconds."),
    "start": prop(NUMBER, "Start time, Unix time in milliseconds."),
    "description": prop(STRING, "What the time was spent on."),
}
_TEAM = {"team_id": prop(STRING, "Workspace (team) ID.")}
_TIMER = {**_TEAM, "timer_id": prop(STRING, "Time entry ID.")}
_DATA = {"data": {"description": "Time entry data returned by ClickUp."}}


def _data(response: Any) -> Dict[str, Any]:
    return {"data": field(response, "data", response)}


TOOLS = [
    tool(
        "clickup_create_time_entry",
        "Log time against a task.",
        {"task_id": prop(STRING, "Task ID."), **_ENTRY},
        required=("task_id", "duration"),
        output=_DATA,
    ),
    tool(
        "clickup_get_time_entries",
        "List the time tracked on a task.",
        {"task_id": prop(STRING, "Task ID.")},
        required=("task_id",),
        output={"data": ARRAY},
    ),
    tool(
        "clickup_update_time_entry",
        "Change a time entry.",
        {**_TIMER, **_ENTRY},
        required=("team_id", "timer_id", "duration"),
        output=_DATA,
    ),
    tool(
        "clickup_delete_time_entry",
        "Delete a time entry.",
        _TIMER,
        required=("team_id", "timer_id"),
        output={"success": BOOLEAN},
    ),
    tool(
        "clickup_start_timer",
        "Start a timer on a task.",
        {
            **_TEAM,
            "task_id": prop(STRING, "Task ID."),
            "description": prop(STRING, "What the time is spent on."),
        },
        required=("team_id", "task_id"),
        output=_DATA,
    ),
    tool(
        "clickup_stop_timer",
        "Stop the running timer.",
        _TEAM,
        required=("team_id",),
        output=_DATA,
    ),
    tool(
        "clickup_get_current_timer",
        "Get the running timer, if any.",
        _TEAM,
        required=("team_id",),
        output=_DATA,
    ),
]


def _entry_body(args: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"duration": args.duration}
    if "start" in args.model_fields_set:
        body["start"] = args.start
    if args.description:
        body["description"] = args.description
    return body


async def handle_create_time_entry(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TimeEntryCreateInput, arguments)
    data = await service.time_tracking.create_time_entry(args.task_id, _entry_body(args))
    return json_result(data, _data(data))


async def handle_get_time_entries(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TaskInput, arguments)
    data = await service.time_tracking.get_time_entries(args.task_id)
    return json_result(data, {"data": field(data, "data", [])})


async def handle_update_time_entry(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TimeEntryUpdateInput, arguments)
    data = await service.time_tracking.update_time_entry(
        args.team_id, args.timer_id, _entry_body(args)
    )
    return json_result(data, _data(data))


async def handle_delete_time_entry(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TimeEntryInput, arguments)
    await service.time_tracking.delete_time_entry(args.team_id, args.timer_id)
    return envelope(f"Time entry {args.timer_id} deleted successfully", {"success": True})


async def handle_start_timer(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TimerStartInput, arguments)
    data = await service.time_tracking.start_timer(
        args.team_id, args.task_id, args.description
    )
    return json_result(data, _data(data))


async def handle_stop_timer(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TeamInput, arguments)
    data = await service.time_tracking.stop_timer(args.team_id)
    return json_result(data, _data(data))


async def handle_get_current_timer(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TeamInput, arguments)
    data = await service.time_tracking.get_current_timer(args.team_id)
    return json_result(data, _data(data))


HANDLERS = {
    "clickup_create_time_entry": handle_create_time_entry,
    "clickup_get_time_entries": handle_get_time_entries,
    "clickup_update_time_entry": handle_update_time_entry,
    "clickup_delete_time_entry": handle_delete_time_entry,
    "clickup_start_timer": handle_start_timer,
    "clickup_stop_timer": handle_stop_timer,
    "clickup_get_current_timer": handle_get_current_timer,
}
