from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ._base import ResourceService, without


class SpaceService(ResourceService):
    resource = "spaces"

    async def get_spaces(
        self, team_id: str, *, archived: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Returns the ClickUp body as-is: {"spaces": [...]}."""
        params: Dict[str, Any] = {}
        if archived is not None:
            params["archived"] = str(archived).lower()

        self.log.debug("Fetching spaces for team %s", team_id)
        return await self._call(
            "GET",
            f"/team/{team_id}/space",
            params=params,
            error="Failed to retrieve spaces from ClickUp",
        )

    async def create_space(
        self, team_id: str, body: Mapping[str, Any]
    ) -> Dict[str, Any]:
        self.log.debug("Creating space %r in team %s", body.get("name"), team_id)
        return await self._call(
            "POST",
            f"/team/{team_id}/space",
            json=without(body, ("team_id",)),
            error="Failed to create space in ClickUp",
        )

    async def get_space(self, space_id: str) -> Dict[str, Any]:
        return await self._call(
            "GET", f"/space/{space_id}", error="Failed to retrieve space from ClickUp"
        )

    async def update_space(
        self, space_id: str, body: Mapping[str, Any]
    ) -> Dict[str, Any]:
        self.log.debug("Updating space %s", space_id)
        return await self._call(
            "PUT",
            f"/space/{space_id}",
            json=without(body, ("space_id",)),
            error="Failed to update space in ClickUp",
        )

    async def delete_space(self, space_id: str) -> Dict[str, Any]:
        return await self._call(
            "DELETE", f"/space/{space_id}", error="Failed to delete space in ClickUp"
        )


__all__ = ["SpaceService"]
