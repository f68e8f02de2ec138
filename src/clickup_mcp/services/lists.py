from __future__ import annotations

from typing import Any, Dict, Optional

from clickup_mcp.core.errors import ClickUpValidationError

from ._base import ResourceService

LIST_PARENT_TYPES = ("folder", "space")


class ListService(ResourceService):
    resource = "lists"

    async def create_list(
        self,
        parent_id: Optional[str],
        parent_type: Optional[str],
        name: Optional[str],
        *,
        content: Optional[str] = None,
        due_date: Optional[Any] = None,
        due_date_time: Optional[bool] = None,
        priority: Optional[int] = None,
        assignee: Optional[Any] = None,
        status: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a list under a folder or directly under a space.

        Falsy optional values are not sent, except `due_date_time`, which is
        forwarded whenever it was given (False is meaningful there).
        """
        if not parent_id:
            raise ClickUpValidationError(
                "Parent ID (folder_id or space_id) is required to create a list."
            )
        if not name:
            raise ClickUpValidationError("List name is required.")
        if parent_type not in LIST_PARENT_TYPES:
            raise ClickUpValidationError(
                "Invalid parent_type. Must be 'folder' or 'space'."
            )

        body: Dict[str, Any] = {"name": name}
        if content:
            body["content"] = content
        if due_date:
            body["due_date"] = due_date
        if due_date_time is not None:
            body["due_date_time"] = due_date_time
        if priority:
            body["priority"] = priority
        if assignee:
            body["assignee"] = assignee
        if status:
            body["status"] = status

        self.log.debug("Creating list %r in %s %s", name, parent_type, parent_id)
        return await self._call(
            "POST",
            f"/{parent_type}/{parent_id}/list",
            json=body,
            error=f"Failed to create list for {parent_type} {parent_id} from ClickUp",
        )


__all__ = ["ListService", "LIST_PARENT_TYPES"]
