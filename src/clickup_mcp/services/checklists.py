from __future__ import annotations

from typing import Any, Mapping

from ._base import ResourceService


class ChecklistService(ResourceService):
    resource = "checklists"

    async def create_checklist(self, task_id: str, body: Mapping[str, Any]) -> Any:
        return await self._call(
            "POST",
            f"/task/{task_id}/checklist",
            json=dict(body),
            error="Failed to create checklist in ClickUp",
        )

    async def update_checklist(self, checklist_id: str, body: Mapping[str, Any]) -> Any:
        return await self._call(
            "PUT",
            f"/checklist/{checklist_id}",
            json=dict(body),
            error="Failed to update checklist in ClickUp",
        )

    async def delete_checklist(self, checklist_id: str) -> Any:
        return await self._call(
            "DELETE",
            f"/checklist/{checklist_id}",
            error="Failed to delete checklist from ClickUp",
        )

    async def create_checklist_item(
        self, checklist_id: str, body: Mapping[str, Any]
    ) -> Any:
        return await self._call(
            "POST",
            f"/checklist/{checklist_id}/checklist_item",
            json=dict(body),
            error="Failed to create checklist item in ClickUp",
        )

    async def update_checklist_item(
        self, checklist_id: str, item_id: str, body: Mapping[str, Any]
    ) -> Any:
        return await self._call(
            "PUT",
            f"/checklist/{checklist_id}/checklist_item/{item_id}",
            json=dict(body),
            error="Failed to update checklist item in ClickUp",
        )

    async def delete_checklist_item(self, checklist_id: str, item_id: str) -> Any:
        return await self._call(
            "DELETE",
            f"/checklist/{checklist_id}/checklist_item/{item_id}",
            error="Failed to delete checklist item from ClickUp",
        )


__all__ = ["ChecklistService"]
