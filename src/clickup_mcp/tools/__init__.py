"""
Tool catalogue for the ClickUp MCP server.

Each module exposes TOOLS (MCP tool definitions) and HANDLERS
(tool name -> async handler(service, arguments)).
"""

from . import (
    attachments,
    boards,
    chat,
    checklists,
    comments,
    custom_fields,
    dependencies,
    docs,
    folders,
    lists,
    spaces,
    tasks,
    teams,
    time_tracking,
    views,
)

_MODULES = (
    tasks,
    teams,
    lists,
    boards,
    spaces,
    folders,
    custom_fields,
    docs,
    views,
    comments,
    time_tracking,
    checklists,
    dependencies,
    attachments,
    chat,
)

TOOL_DEFINITIONS = [t for module in _MODULES for t in module.TOOLS]
TOOL_HANDLERS = {name: h for module in _MODULES for name, h in module.HANDLERS.items()}
TOOLS_BY_NAME = {t.name: t for t in TOOL_DEFINITIONS}

__all__ = ["TOOL_DEFINITIONS", "TOOL_HANDLERS", "TOOLS_BY_NAME"]
