from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from clickup_mcp.core.errors import ClickUpValidationError

from ._base import ResourceService, compact


class TaskService(ResourceService):
    resource = "tasks"

    async def create_task(self, task: Mapping[str, Any]) -> Dict[str, Any]:
        """POST /list/{list_id}/task. The full task, list_id included, is the body."""
        list_id = task.get("list_id")
        if not list_id:
            raise ClickUpValidationError("list_id is required to create a task.")

        self.log.debug("Creating task %r in list %s", task.get("name"), list_id)
        return await self._call(
            "POST",
            f"/list/{list_id}/task",
            json=dict(task),
            error="Failed to create task in ClickUp",
        )

    async def update_task(
        self, task_id: str, updates: Mapping[str, Any]
    ) -> Dict[str, Any]:
        self.log.debug("Updating task %s", task_id)
        return await self._call(
            "PUT",
            f"/task/{task_id}",
            json=dict(updates),
            error="Failed to update task in ClickUp",
        )

    async def get_task(self, task_id: str) -> Dict[str, Any]:
        return await self._call(
            "GET", f"/task/{task_id}", error="Failed to retrieve task from ClickUp"
        )

    async def get_tasks(
        self,
        list_id: str,
        *,
        archived: Optional[bool] = None,
        page: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = compact(
            {
                "archived": str(archived).lower() if archived is not None else None,
                "page": page,
            }
        )
        return await self._call(
            "GET",
            f"/list/{list_id}/task",
            params=params,
            error="Failed to retrieve tasks from ClickUp",
        )

    async def delete_task(self, task_id: str) -> Dict[str, Any]:
        return await self._call(
            "DELETE", f"/task/{task_id}", error="Failed to delete task in ClickUp"
        )


__all__ = ["TaskService"]
