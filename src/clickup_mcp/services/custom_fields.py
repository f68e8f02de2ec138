from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._base import ResourceService


class CustomFieldService(ResourceService):
    resource = "custom_fields"

    async def get_custom_fields(self, list_id: str) -> List[Dict[str, Any]]:
        error = f"Failed to retrieve custom fields for list {list_id} from ClickUp"
        payload = await self._call("GET", f"/list/{list_id}/field", error=error)
        return self._unwrap(payload, "fields", error=error)

    async def set_task_custom_field_value(
        self,
        task_id: str,
        field_id: str,
        value: Any,
        *,
        value_options: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"value": value}
        if value_options:
            body["value_options"] = value_options

        self.log.debug("Setting custom field %s for task %s", field_id, task_id)
        return await self._call(
            "POST",
            f"/task/{task_id}/field/{field_id}",
            json=body,
            error=f"Failed to set custom field {field_id} for task {task_id} in ClickUp",
        )

    async def remove_task_custom_field_value(
        self, task_id: str, field_id: str
    ) -> Dict[str, Any]:
        return await self._call(
            "DELETE",
            f"/task/{task_id}/field/{field_id}",
            error=(
                f"Failed to remove custom field {field_id} for task {task_id} "
                "from ClickUp"
            ),
        )


__all__ = ["CustomFieldService"]
