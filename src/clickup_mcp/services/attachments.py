from __future__ import annotations

from typing import Any, Optional

from clickup_mcp.core.errors import ClickUpClientError, ClickUpServiceError

from ._base import ResourceService


class AttachmentService(ResourceService):
    resource = "attachments"

    async def upload_attachment(
        self, task_id: str, file_path: str, file_name: Optional[str] = None
    ) -> Any:
        """Multipart upload; the file goes in the `attachment` form field."""
        url = f"/task/{task_id}/attachment"
        self.log.debug("Uploading attachment to task %s", task_id)
        try:
            return await self.client.post_file(
                url,
                file_path=file_path,
                field_name="attachment",
                data={"filename": file_name} if file_name else None,
                tool=self.resource,
            )
        except ClickUpClientError as exc:
            self._log_failure(exc, method="POST", url=url)
            raise ClickUpServiceError("Failed to upload attachment in ClickUp") from exc

    async def delete_attachment(self, attachment_id: str) -> Any:
        return await self._call(
            "DELETE",
            f"/attachment/{attachment_id}",
            error="Failed to delete attachment from ClickUp",
        )


__all__ = ["AttachmentService"]
