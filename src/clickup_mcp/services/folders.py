from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ._base import ResourceService, without


class FolderService(ResourceService):
    resource = "folders"

    async def get_folders(
        self, space_id: str, *, archived: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Returns the ClickUp body as-is: {"folders": [...]}."""
        params: Dict[str, Any] = {}
        if archived is not None:
            params["archived"] = str(archived).lower()

        return await self._call(
            "GET",
            f"/space/{space_id}/folder",
            params=params,
            error="Failed to retrieve folders from ClickUp",
        )

    async def create_folder(self, space_id: str, name: str) -> Dict[str, Any]:
        self.log.debug("Creating folder %r in space %s", name, space_id)
        return await self._call(
            "POST",
            f"/space/{space_id}/folder",
            json={"name": name},
            error="Failed to create folder in ClickUp",
        )

    async def get_folder(self, folder_id: str) -> Dict[str, Any]:
        return await self._call(
            "GET",
            f"/folder/{folder_id}",
            error="Failed to retrieve folder from ClickUp",
        )

    async def update_folder(
        self, folder_id: str, body: Mapping[str, Any]
    ) -> Dict[str, Any]:
        return await self._call(
            "PUT",
            f"/folder/{folder_id}",
            json=without(body, ("folder_id",)),
            error="Failed to update folder in ClickUp",
        )

    async def delete_folder(self, folder_id: str) -> Dict[str, Any]:
        return await self._call(
            "DELETE",
            f"/folder/{folder_id}",
            error="Failed to delete folder in ClickUp",
        )


__all__ = ["FolderService"]
