from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.models import (
    DocCreateInput,
    DocPageContentInput,
    DocPageCreateInput,
    DocPageEditInput,
    DocPagesInput,
    DocSearchInput,
    parse_tool_input,
)
from clickup_mcp.service import ClickUpService
from clickup_mcp.services.docs import CONTENT_EDIT_MODES, DOC_VISIBILITY

from ._common import (
    ARRAY,
    BOOLEAN,
    OBJECT,
    STRING,
    envelope,
    enum,
    json_result,
    prop,
    tool,
)

_WORKSPACE = prop(STRING, "Numeric workspace ID, as a string.")
_CONTENT_FORMAT = prop(STRING, "Content format, e.g. text/md or text/plain.")

TOOLS = [
    tool(
        "clickup_search_docs",
        "Search the Docs of a ClickUp workspace.",
        {
            "team_id": _WORKSPACE,
            "query": prop(STRING, "Text to search for."),
            "include_archived": prop(BOOLEAN, "Include archived Docs."),
        },
        required=("team_id",),
        output={"docs": ARRAY},
    ),
    tool(
        "clickup_create_doc",
        "Create a Doc in a ClickUp workspace.",
        {
            "workspace_id": _WORKSPACE,
            "name": prop(STRING, "Doc name."),
            "parent": {
                "type": "object",
                "description": "Where the Doc lives.",
                "properties": {
                    "id": prop(STRING, "Parent ID."),
                    "type": prop(
                        {"type": "number"},
                        "Parent type: 4 space, 5 folder, 6 list, 7 everything, 12 workspace.",
                    ),
                },
                "required": ["id", "type"],
            },
            "visibility": enum(DOC_VISIBILITY, "Doc visibility."),
            "create_page": prop(BOOLEAN, "Create an initial blank page."),
        },
        required=("workspace_id", "name"),
        output={"doc": OBJECT},
    ),
    tool(
        "clickup_get_doc_pages",
        "List the pages of a ClickUp Doc.",
        {"workspace_id": _WORKSPACE, "doc_id": prop(STRING, "Doc ID.")},
        required=("workspace_id", "doc_id"),
        output={"pages": ARRAY},
    ),
    tool(
        "clickup_create_doc_page",
        "Add a page to a ClickUp Doc.",
        {
            "workspace_id": _WORKSPACE,
            "doc_id": prop(STRING, "Doc ID."),
            "name": prop(STRING, "Page title."),
            "content": prop(STRING, "Page body."),
            "parent_page_id": prop(STRING, "Nest under this page."),
            "sub_title": prop(STRING, "Page subtitle."),
            "content_format": _CONTENT_FORMAT,
        },
        required=("workspace_id", "doc_id", "name"),
        output={"page": OBJECT},
    ),
    tool(
        "clickup_get_doc_page_content",
        "Read the content of a Doc page.",
        {
            "workspace_id": _WORKSPACE,
            "doc_id": prop(STRING, "Doc ID."),
            "page_id": prop(STRING, "Page ID."),
            "content_format": _CONTENT_FORMAT,
        },
        required=("workspace_id", "doc_id", "page_id"),
        output={"content": STRING, "page": OBJECT},
    ),
    tool(
        "clickup_edit_doc_page_content",
        "Replace, append to or prepend to the content of a Doc page.",
        {
            "workspace_id": _WORKSPACE,
            "doc_id": prop(STRING, "Doc ID."),
            "page_id": prop(STRING, "Page ID."),
            "content": prop(STRING, "New content."),
            "title": prop(STRING, "New page title."),
            "sub_title": prop(STRING, "New page subtitle."),
            "content_edit_mode": enum(CONTENT_EDIT_MODES, "How to apply the content."),
            "content_format": _CONTENT_FORMAT,
        },
        required=("workspace_id", "doc_id", "page_id", "content"),
        output={"page": OBJECT, "success": BOOLEAN},
    ),
]


async def handle_search_docs(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(DocSearchInput, arguments)
    docs = await service.docs.search_docs(
        args.team_id, query=args.query, include_archived=args.include_archived
    )
    return json_result(docs, {"docs": docs})


async def handle_create_doc(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(DocCreateInput, arguments)
    doc = await service.docs.create_doc(
        args.workspace_id,
        args.name,
        parent=args.parent,
        visibility=args.visibility,
        create_page=args.create_page,
    )
    return json_result(doc, {"doc": doc})


async def handle_get_doc_pages(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(DocPagesInput, arguments)
    pages = await service.docs.get_doc_pages(args.workspace_id, args.doc_id)
    return json_result(pages, {"pages": pages})


async def handle_create_doc_page(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(DocPageCreateInput, arguments)
    page = await service.docs.create_doc_page(
        args.workspace_id,
        args.doc_id,
        args.name,
        content=args.content,
        parent_page_id=args.parent_page_id,
        sub_title=args.sub_title,
        content_format=args.content_format,
    )
    return json_result(page, {"page": page})


async def handle_get_doc_page_content(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(DocPageContentInput, arguments)
    content = await service.docs.get_doc_page_content(
        args.workspace_id,
        args.doc_id,
        args.page_id,
        content_format=args.content_format,
    )
    return envelope(
        content,
        {"content": content, "page": {"id": args.page_id, "name": "Page Content"}},
    )


async def handle_edit_doc_page_content(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(DocPageEditInput, arguments)
    await service.docs.edit_doc_page_content(
        args.workspace_id,
        args.doc_id,
        args.page_id,
        args.content,
        title=args.title,
        sub_title=args.sub_title,
        content_edit_mode=args.content_edit_mode,
        content_format=args.content_format,
    )
    return envelope(
        f"Successfully edited page {args.page_id}.",
        {
            "page": {"id": args.page_id, "name": args.title or "Updated Page"},
            "success": True,
        },
    )


HANDLERS = {
    "clickup_search_docs": handle_search_docs,
    "clickup_create_doc": handle_create_doc,
    "clickup_get_doc_pages": handle_get_doc_pages,
    "clickup_create_doc_page": handle_create_doc_page,
    "clickup_get_doc_page_content": handle_get_doc_page_content,
    "clickup_edit_doc_page_content": handle_edit_doc_page_content,
}
