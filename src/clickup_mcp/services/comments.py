from __future__ import annotations

from typing import Any, Mapping

from ._base import ResourceService


class CommentService(ResourceService):
    resource = "comments"

    async def create_comment(self, task_id: str, body: Mapping[str, Any]) -> Any:
        self.log.debug("Creating comment on task %s", task_id)
        return await self._call(
            "POST",
            f"/task/{task_id}/comment",
            json=dict(body),
            error="Failed to create comment in ClickUp",
        )

    async def get_comments(self, task_id: str) -> Any:
        return await self._call(
            "GET", f"/task/{task_id}/comment", error="Failed to get comments from ClickUp"
        )

    async def update_comment(self, comment_id: str, body: Mapping[str, Any]) -> Any:
        return await self._call(
            "PUT",
            f"/comment/{comment_id}",
            json=dict(body),
            error="Failed to update comment in ClickUp",
        )

    async def delete_comment(self, comment_id: str) -> Any:
        return await self._call(
            "DELETE",
            f"/comment/{comment_id}",
            error="Failed to delete comment from ClickUp",
        )


__all__ = ["CommentService"]
