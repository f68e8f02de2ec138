from __future__ import annotations

from typing import Any, Optional

from ._base import ResourceService


def _relation(depends_on: Optional[str], dependency_of: Optional[str]) -> dict:
    data = {}
    if depends_on:
        data["depends_on"] = depends_on
    if dependency_of:
        data["dependency_of"] = dependency_of
    return data


class DependencyService(ResourceService):
    """Task dependencies (blocking) and plain task links."""

    resource = "dependencies"

    async def add_dependency(
        self,
        task_id: str,
        depends_on: Optional[str] = None,
        dependency_of: Optional[str] = None,
    ) -> Any:
        self.log.debug("Adding dependency for task %s", task_id)
        return await self._call(
            "POST",
            f"/task/{task_id}/dependency",
            json=_relation(depends_on, dependency_of),
            error="Failed to add dependency in ClickUp",
        )

    async def delete_dependency(
        self,
        task_id: str,
        depends_on: Optional[str] = None,
        dependency_of: Optional[str] = None,
    ) -> Any:
        # ClickUp reads the relation from the query string on DELETE.
        return await self._call(
            "DELETE",
            f"/task/{task_id}/dependency",
            params=_relation(depends_on, dependency_of),
            error="Failed to delete dependency from ClickUp",
        )

    async def add_task_link(self, task_id: str, links_to: str) -> Any:
        return await self._call(
            "POST",
            f"/task/{task_id}/link/{links_to}",
            error="Failed to add task link in ClickUp",
        )

    async def delete_task_link(self, task_id: str, links_to: str) -> Any:
        return await self._call(
            "DELETE",
            f"/task/{task_id}/link/{links_to}",
            error="Failed to delete task link from ClickUp",
        )


__all__ = ["DependencyService"]
