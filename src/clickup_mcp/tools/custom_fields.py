from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.models import (
    CustomFieldRemoveInput,
    CustomFieldSetInput,
    CustomFieldsInput,
    parse_tool_input,
)
from clickup_mcp.service import ClickUpService

from ._common import OBJECT, STRING, envelope, json_result, prop, tool

TOOLS = [
    tool(
        "clickup_get_custom_fields",
        "List the custom fields available on a ClickUp list.",
        {"list_id": prop(STRING, "List ID.")},
        required=("list_id",),
    ),
    tool(
        "clickup_set_task_custom_field_value",
        "Set the value of a custom field on a task. "
        "The value's shape depends on the field type.",
        {
            "task_id": prop(STRING, "Task ID."),
            "field_id": prop(STRING, "Custom field UUID."),
            "value": {"description": "New value: string, number, array or object."},
            "value_options": prop(OBJECT, "Extra options, e.g. {\"time\": true} for dates."),
        },
        required=("task_id", "field_id", "value"),
    ),
    tool(
        "clickup_remove_task_custom_field_value",
        "Clear a custom field value on a task.",
        {
            "task_id": prop(STRING, "Task ID."),
            "field_id": prop(STRING, "Custom field UUID."),
        },
        required=("task_id", "field_id"),
    ),
]


async def handle_get_custom_fields(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(CustomFieldsInput, arguments)
    return json_result(await service.custom_fields.get_custom_fields(args.list_id))


async def handle_set_task_custom_field_value(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(CustomFieldSetInput, arguments)
    await service.custom_fields.set_task_custom_field_value(
        args.task_id, args.field_id, args.value, value_options=args.value_options
    )
    return envelope(
        f"Successfully set custom field {args.field_id} for task {args.task_id}."
    )


async def handle_remove_task_custom_field_value(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(CustomFieldRemoveInput, arguments)
    await service.custom_fields.remove_task_custom_field_value(
        args.task_id, args.field_id
    )
    return envelope(
        f"Successfully removed custom field {args.field_id} for task {args.task_id}."
    )


HANDLERS = {
    "clickup_get_custom_fields": handle_get_custom_fields,
    "clickup_set_task_custom_field_value": handle_set_task_custom_field_value,
    "clickup_remove_task_custom_field_value": handle_remove_task_custom_field_value,
}
