from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from clickup_mcp.core.errors import ClickUpServiceError

from ._base import ResourceService, compact, workspace_number

DOC_VISIBILITY = ("PUBLIC", "PRIVATE", "PERSONAL", "HIDDEN")
CONTENT_EDIT_MODES = ("replace", "append", "prepend")


class DocService(ResourceService):
    """
    ClickUp Docs, served by API v3 only.

    Every path is rooted at /workspaces/{workspace_id}, and v3 wants the
    workspace id as a number; a non-numeric id is rejected before any call.
    """

    resource = "docs"

    def _url(
        self, workspace_id: Any, *parts: str, field: str = "workspace_id"
    ) -> str:
        ws = workspace_number(workspace_id, field)
        return self.client.v3_url("/".join((f"workspaces/{ws}",) + parts))

    async def search_docs(
        self,
        team_id: str,
        *,
        query: Optional[str] = None,
        include_archived: Optional[bool] = None,
    ) -> List[Dict[str, Any]]:
        url = self._url(team_id, "docs", field="team_id")
        error = f"Failed to search docs in team {team_id} from ClickUp"

        params: Dict[str, Any] = {}
        if query:
            params["search_string"] = query
        if include_archived is not None:
            params["include_archived"] = include_archived

        self.log.debug("Searching docs in team %s with query %r", team_id, query)
        payload = await self._call("GET", url, params=params, error=error)
        return self._unwrap(payload, "docs", error=error)

    async def create_doc(
        self,
        workspace_id: str,
        name: str,
        *,
        parent: Optional[Mapping[str, Any]] = None,
        visibility: Optional[str] = None,
        create_page: Optional[bool] = None,
    ) -> Dict[str, Any]:
        url = self._url(workspace_id, "docs")
        body = compact(
            {
                "name": name,
                "parent": dict(parent) if parent else None,
                "visibility": visibility,
                "create_page": create_page,
            }
        )
        self.log.debug("Creating doc %r in workspace %s", name, workspace_id)
        return await self._call(
            "POST",
            url,
            json=body,
            error=f"Failed to create doc in workspace {workspace_id} from ClickUp",
        )

    async def get_doc_pages(self, workspace_id: str, doc_id: str) -> List[Dict[str, Any]]:
        url = self._url(workspace_id, "docs", doc_id, "pages")
        return await self._call(
            "GET", url, error=f"Failed to retrieve pages for doc {doc_id} from ClickUp"
        )

    async def create_doc_page(
        self,
        workspace_id: str,
        doc_id: str,
        name: str,
        *,
        content: Optional[str] = None,
        parent_page_id: Optional[str] = None,
        sub_title: Optional[str] = None,
        content_format: Optional[str] = None,
    ) -> Dict[str, Any]:
        url = self._url(workspace_id, "docs", doc_id, "pages")
        body = compact(
            {
                "name": name,
                "content": content,
                "parent_page_id": parent_page_id,
                "sub_title": sub_title,
                "content_format": content_format,
            }
        )
        self.log.debug("Creating page %r in doc %s", name, doc_id)
        return await self._call(
            "POST",
            url,
            json=body,
            error=f"Failed to create page in doc {doc_id} in ClickUp",
        )

    async def get_doc_page_content(
        self,
        workspace_id: str,
        doc_id: str,
        page_id: str,
        *,
        content_format: Optional[str] = None,
    ) -> str:
        """
        Return the page's content string.
        A null `content` reads as an empty page; a missing or non-string one
        is reported as its own error rather than the transport template.
        """
        url = self._url(workspace_id, "docs", doc_id, "pages", page_id)
        params = {"content_format": content_format} if content_format else None
        payload = await self._call(
            "GET",
            url,
            params=params,
            error=f"Failed to retrieve content for page {page_id} from ClickUp",
        )

        if isinstance(payload, dict) and "content" in payload:
            content = payload["content"]
            if isinstance(content, str):
                return content
            if content is None:
                return ""

        self.log.warning(
            "Content not found or not a string for page %s. Response data: %s",
            page_id,
            payload,
        )
        raise ClickUpServiceError(
            f"Content not found or in unexpected format for page {page_id}"
        )

    async def edit_doc_page_content(
        self,
        workspace_id: str,
        doc_id: str,
        page_id: str,
        content: Any,
        *,
        title: Optional[str] = None,
        sub_title: Optional[str] = None,
        content_edit_mode: Optional[str] = None,
        content_format: Optional[str] = None,
    ) -> Dict[str, Any]:
        url = self._url(workspace_id, "docs", doc_id, "pages", page_id)
        body: Dict[str, Any] = {"content": content}
        if title:
            body["name"] = title
        body.update(
            compact(
                {
                    "sub_title": sub_title,
                    "content_edit_mode": content_edit_mode,
                    "content_format": content_format,
                }
            )
        )
        self.log.debug("Editing content for page %s", page_id)
        return await self._call(
            "PUT",
            url,
            json=body,
            error=f"Failed to edit content for page {page_id} in ClickUp",
        )


__all__ = ["DocService", "DOC_VISIBILITY", "CONTENT_EDIT_MODES"]
