from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ._base import ResourceService, without


class TimeTrackingService(ResourceService):
    resource = "time_tracking"

    async def create_time_entry(self, task_id: str, body: Mapping[str, Any]) -> Any:
        return await self._call(
            "POST",
            f"/task/{task_id}/time",
            json=without(body, ("task_id",)),
            error="Failed to create time entry in ClickUp",
        )

    async def get_time_entries(self, task_id: str) -> Any:
        return await self._call(
            "GET", f"/task/{task_id}/time", error="Failed to get time entries from ClickUp"
        )

    async def update_time_entry(
        self, team_id: str, timer_id: str, body: Mapping[str, Any]
    ) -> Any:
        return await self._call(
            "PUT",
            f"/team/{team_id}/time_entries/{timer_id}",
            json=without(body, ("team_id", "timer_id")),
            error="Failed to update time entry in ClickUp",
        )

    async def delete_time_entry(self, team_id: str, timer_id: str) -> Any:
        return await self._call(
            "DELETE",
            f"/team/{team_id}/time_entries/{timer_id}",
            error="Failed to delete time entry from ClickUp",
        )

    async def start_timer(
        self, team_id: str, task_id: str, description: Optional[str] = None
    ) -> Any:
        body: Dict[str, Any] = {"tid": task_id}
        if description:
            body["description"] = description

        self.log.debug("Starting timer for task %s", task_id)
        return await self._call(
            "POST",
            f"/team/{team_id}/time_entries/start",
            json=body,
            error="Failed to start timer in ClickUp",
        )

    async def stop_timer(self, team_id: str) -> Any:
        return await self._call(
            "POST",
            f"/team/{team_id}/time_entries/stop",
            error="Failed to stop timer in ClickUp",
        )

    async def get_current_timer(self, team_id: str) -> Any:
        return await self._call(
            "GET",
            f"/team/{team_id}/time_entries/current",
            error="Failed to get current timer from ClickUp",
        )


__all__ = ["TimeTrackingService"]
