from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.models import (
    CommentCreateInput,
    CommentInput,
    CommentUpdateInput,
    TaskInput,
    parse_tool_input,
)
from clickup_mcp.service import ClickUpService

from ._common import (
    ARRAY,
    BOOLEAN,
    NUMBER,
    OBJECT,
    STRING,
    envelope,
    field,
    json_result,
    prop,
    tool,
)

TOOLS = [
    tool(
        "clickup_create_comment",
        "Comment on a ClickUp task.",
        {
            "task_id": prop(STRING, "Task ID."),
            "comment_text": prop(STRING, "Comment text."),
            "assignee": prop(NUMBER, "User ID to assign the comment to."),
            "notify_all": prop(BOOLEAN, "Notify everyone on the task (default true)."),
        },
        required=("task_id", "comment_text"),
        output={"comment": OBJECT},
    ),
    tool(
        "clickup_get_comments",
        "List the comments on a ClickUp task.",
        {"task_id": prop(STRING, "Task ID.")},
        required=("task_id",),
        output={"comments": ARRAY},
    ),
    tool(
        "clickup_update_comment",
        "Edit, reassign or resolve a comment.",
        {
            "comment_id": prop(STRING, "Comment ID."),
            "comment_text": prop(STRING, "New comment text."),
            "assignee": prop(NUMBER, "User ID to assign the comment to."),
            "resolved": prop(BOOLEAN, "Mark the comment resolved."),
        },
        required=("comment_id", "comment_text"),
        output={"comment": OBJECT},
    ),
    tool(
        "clickup_delete_comment",
        "Delete a comment.",
        {"comment_id": prop(STRING, "Comment ID.")},
        required=("comment_id",),
        output={"success": BOOLEAN},
    ),
]


async def handle_create_comment(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(CommentCreateInput, arguments)
    body: Dict[str, Any] = {
        "comment_text": args.comment_text,
        "notify_all": args.notify_all,
    }
    if "assignee" in args.model_fields_set:
        body["assignee"] = args.assignee
    comment = await service.comments.create_comment(args.task_id, body)
    return json_result(comment, {"comment": comment})


async def handle_get_comments(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(TaskInput, arguments)
    data = await service.comments.get_comments(args.task_id)
    return json_result(data, {"comments": field(data, "comments", [])})


async def handle_update_comment(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(CommentUpdateInput, arguments)
    body = args.fields_set(exclude=("comment_id",))
    comment = await service.comments.update_comment(args.comment_id, body)
    return json_result(comment, {"comment": comment})


async def handle_delete_comment(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(CommentInput, arguments)
    await service.comments.delete_comment(args.comment_id)
    return envelope(f"Comment {args.comment_id} deleted successfully", {"success": True})


HANDLERS = {
    "clickup_create_comment": handle_create_comment,
    "clickup_get_comments": handle_get_comments,
    "clickup_update_comment": handle_update_comment,
    "clickup_delete_comment": handle_delete_comment,
}
