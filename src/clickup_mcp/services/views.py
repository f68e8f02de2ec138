from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from clickup_mcp.core.errors import ClickUpValidationError

from ._base import ResourceService, without

VIEW_PARENT_TYPES = ("team", "space", "folder", "list")
VIEW_TYPES = ("list", "board", "calendar", "gantt")


class ViewService(ResourceService):
    resource = "views"

    def _parent_path(self, parent_type: str, parent_id: str) -> str:
        if parent_type not in VIEW_PARENT_TYPES:
            self.log.error("Invalid view parent type provided: %s", parent_type)
            raise ClickUpValidationError(f"Invalid view parent type: {parent_type}")
        return f"/{parent_type}/{parent_id}/view"

    async def get_views(self, parent_type: str, parent_id: str) -> List[Dict[str, Any]]:
        url = self._parent_path(parent_type, parent_id)
        error = f"Failed to retrieve views for {parent_type} {parent_id} from ClickUp"
        payload = await self._call("GET", url, error=error)
        return self._unwrap(payload, "views", error=error)

    async def create_view(
        self, parent_type: str, parent_id: str, body: Mapping[str, Any]
    ) -> Dict[str, Any]:
        url = self._parent_path(parent_type, parent_id)
        self.log.debug(
            "Creating %s view %r for %s %s",
            body.get("type"),
            body.get("name"),
            parent_type,
            parent_id,
        )
        return await self._call(
            "POST",
            url,
            json=without(body, ("parent_id", "parent_type")),
            error=f"Failed to create view for {parent_type} {parent_id} in ClickUp",
        )

    async def get_view_details(self, view_id: str) -> Dict[str, Any]:
        return await self._call(
            "GET",
            f"/view/{view_id}",
            error=f"Failed to retrieve view {view_id} from ClickUp",
        )

    async def update_view(
        self, view_id: str, body: Mapping[str, Any]
    ) -> Dict[str, Any]:
        return await self._call(
            "PUT",
            f"/view/{view_id}",
            json=without(body, ("view_id",)),
            error=f"Failed to update view {view_id} in ClickUp",
        )

    async def delete_view(self, view_id: str) -> Dict[str, Any]:
        return await self._call(
            "DELETE",
            f"/view/{view_id}",
            error=f"Failed to delete view {view_id} in ClickUp",
        )

    async def get_view_tasks(
        self, view_id: str, *, page: Optional[int] = None
    ) -> Dict[str, Any]:
        """Returns {"tasks": [...], "last_page": bool}."""
        params = {"page": page} if page is not None else None
        self.log.debug("Fetching tasks for view %s, page %s", view_id, page or 0)
        return await self._call(
            "GET",
            f"/view/{view_id}/task",
            params=params,
            error=f"Failed to retrieve tasks for view {view_id} from ClickUp",
        )


__all__ = ["ViewService", "VIEW_PARENT_TYPES", "VIEW_TYPES"]
