from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.models import (
    FolderCreateInput,
    FolderDeleteInput,
    FolderInput,
    FoldersInput,
    FolderUpdateInput,
    parse_tool_input,
)
from clickup_mcp.service import ClickUpService

from ._common import BOOLEAN, STRING, envelope, json_result, prop, tool

TOOLS = [
    tool(
        "clickup_get_folders",
        "List the folders of a ClickUp space.",
        {
            "space_id": prop(STRING, "Space ID."),
            "archived": prop(BOOLEAN, "Include archived folders."),
        },
        required=("space_id",),
    ),
    tool(
        "clickup_create_folder",
        "Create a folder in a ClickUp space.",
        {
            "space_id": prop(STRING, "Space ID."),
            "name": prop(STRING, "Folder name."),
        },
        required=("space_id", "name"),
    ),
    tool(
        "clickup_get_folder",
        "Get a ClickUp folder.",
        {"folder_id": prop(STRING, "Folder ID.")},
        required=("folder_id",),
    ),
    tool(
        "clickup_update_folder",
        "Rename a ClickUp folder.",
        {
            "folder_id": prop(STRING, "Folder ID."),
            "name": prop(STRING, "New folder name."),
        },
        required=("folder_id", "name"),
    ),
    tool(
        "clickup_delete_folder",
        "Delete a ClickUp folder.",
        {"folder_id": prop(STRING, "Folder ID.")},
        required=("folder_id",),
    ),
]


async def handle_get_folders(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(FoldersInput, arguments)
    data = await service.folders.get_folders(args.space_id, archived=args.archived)
    return json_result(data.get("folders"))


async def handle_create_folder(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(FolderCreateInput, arguments)
    return json_result(await service.folders.create_folder(args.space_id, args.name))


async def handle_get_folder(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(FolderInput, arguments)
    return json_result(await service.folders.get_folder(args.folder_id))


async def handle_update_folder(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(FolderUpdateInput, arguments)
    folder = await service.folders.update_folder(args.folder_id, {"name": args.name})
    return json_result(folder)


async def handle_delete_folder(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(FolderDeleteInput, arguments)
    await service.folders.delete_folder(args.folder_id)
    return envelope(f"Folder {args.folder_id} deleted successfully.")


HANDLERS = {
    "clickup_get_folders": handle_get_folders,
    "clickup_create_folder": handle_create_folder,
    "clickup_get_folder": handle_get_folder,
    "clickup_update_folder": handle_update_folder,
    "clickup_delete_folder": handle_delete_folder,
}
