from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.models import AttachmentInput, AttachmentUploadInput, parse_tool_input
from clickup_mcp.service import ClickUpService

from ._common import BOOLEAN, OBJECT, STRING, envelope, json_result, prop, tool

TOOLS = [
    tool(
        "clickup_upload_attachment",
        "Upload a local file as a task attachment.",
        {
            "task_id": prop(STRING, "Task ID."),
            "file_path": prop(STRING, "Path of the file on the server's filesystem."),
            "file_name": prop(STRING, "Name to show in ClickUp."),
        },
        required=("task_id", "file_path"),
        output={"attachment": OBJECT},
    ),
    tool(
        "clickup_delete_attachment",
        "Delete a task attachment.",
        {"attachment_id": prop(STRING, "Attachment ID.")},
        required=("attachment_id",),
        output={"success": BOOLEAN},
    ),
]


async def handle_upload_attachment(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(AttachmentUploadInput, arguments)
    attachment = await service.attachments.upload_attachment(
        args.task_id, args.file_path, args.file_name
    )
    return json_result(attachment, {"attachment": attachment})


async def handle_delete_attachment(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(AttachmentInput, arguments)
    await service.attachments.delete_attachment(args.attachment_id)
    return envelope(
        f"Attachment {args.attachment_id} deleted successfully", {"success": True}
    )


HANDLERS = {
    "clickup_upload_attachment": handle_upload_attachment,
    "clickup_delete_attachment": handle_delete_attachment,
}
