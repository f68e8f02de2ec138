from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ._base import ResourceService


class ChatService(ResourceService):
    """ClickUp Chat (API v3). Responses are returned exactly as ClickUp sends them."""

    resource = "chat"

    def _url(self, workspace_id: str, path: str) -> str:
        return self.client.v3_url(f"workspaces/{workspace_id}/chat/{path}")

    # Channels

    async def get_channels(self, workspace_id: str) -> Any:
        self.log.debug("Getting channels for workspace %s", workspace_id)
        return await self._call(
            "GET",
            self._url(workspace_id, "channels"),
            error="Failed to get channels from ClickUp",
        )

    async def create_channel(self, workspace_id: str, body: Mapping[str, Any]) -> Any:
        return await self._call(
            "POST",
            self._url(workspace_id, "channels"),
            json=dict(body),
            error="Failed to create channel in ClickUp",
        )

    async def get_channel(self, workspace_id: str, channel_id: str) -> Any:
        return await self._call(
            "GET",
            self._url(workspace_id, f"channels/{channel_id}"),
            error="Failed to get channel from ClickUp",
        )

    async def update_channel(
        self, workspace_id: str, channel_id: str, body: Mapping[str, Any]
    ) -> Any:
        return await self._call(
            "PATCH",
            self._url(workspace_id, f"channels/{channel_id}"),
            json=dict(body),
            error="Failed to update channel in ClickUp",
        )

    async def delete_channel(self, workspace_id: str, channel_id: str) -> Any:
        return await self._call(
            "DELETE",
            self._url(workspace_id, f"channels/{channel_id}"),
            error="Failed to delete channel in ClickUp",
        )

    async def get_channel_followers(self, workspace_id: str, channel_id: str) -> Any:
        return await self._call(
            "GET",
            self._url(workspace_id, f"channels/{channel_id}/followers"),
            error="Failed to get channel followers from ClickUp",
        )

    async def get_channel_members(self, workspace_id: str, channel_id: str) -> Any:
        return await self._call(
            "GET",
            self._url(workspace_id, f"channels/{channel_id}/members"),
            error="Failed to get channel members from ClickUp",
        )

    # Messages

    async def create_message(
        self, workspace_id: str, channel_id: str, body: Mapping[str, Any]
    ) -> Any:
        return await self._call(
            "POST",
            self._url(workspace_id, f"channels/{channel_id}/messages"),
            json=dict(body),
            error="Failed to create message in ClickUp",
        )

    async def get_messages(
        self,
        workspace_id: str,
        channel_id: str,
        pagination: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self._call(
            "GET",
            self._url(workspace_id, f"channels/{channel_id}/messages"),
            params=pagination,
            error="Failed to get messages from ClickUp",
        )

    async def update_message(
        self, workspace_id: str, message_id: str, body: Mapping[str, Any]
    ) -> Any:
        return await self._call(
            "PATCH",
            self._url(workspace_id, f"messages/{message_id}"),
            json=dict(body),
            error="Failed to update message in ClickUp",
        )

    async def delete_message(
        self, workspace_id: str, channel_id: str, message_id: str
    ) -> Any:
        return await self._call(
            "DELETE",
            self._url(workspace_id, f"channels/{channel_id}/messages/{message_id}"),
            error="Failed to delete message in ClickUp",
        )

    # Direct messages

    async def get_direct_messages(self, workspace_id: str) -> Any:
        return await self._call(
            "GET",
            self._url(workspace_id, "channels/direct_message"),
            error="Failed to get direct messages from ClickUp",
        )

    async def get_conversation_messages(
        self,
        workspace_id: str,
        user_id: str,
        pagination: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self._call(
            "GET",
            self._url(workspace_id, f"channels/direct_message/{user_id}"),
            params=pagination,
            error="Failed to get conversation messages from ClickUp",
        )

    async def create_direct_message(
        self, workspace_id: str, body: Mapping[str, Any]
    ) -> Any:
        return await self._call(
            "POST",
            self._url(workspace_id, "channels/direct_message"),
            json=dict(body),
            error="Failed to create direct message in ClickUp",
        )

    # Reactions and replies

    async def create_message_reaction(
        self, workspace_id: str, message_id: str, body: Mapping[str, Any]
    ) -> Any:
        return await self._call(
            "POST",
            self._url(workspace_id, f"messages/{message_id}/reactions"),
            json=dict(body),
            error="Failed to create message reaction in ClickUp",
        )

    async def get_message_reactions(self, workspace_id: str, message_id: str) -> Any:
        return await self._call(
            "GET",
            self._url(workspace_id, f"messages/{message_id}/reactions"),
            error="Failed to get message reactions from ClickUp",
        )

    async def delete_message_reaction(
        self, workspace_id: str, message_id: str, reaction: str
    ) -> Any:
        return await self._call(
            "DELETE",
            self._url(workspace_id, f"messages/{message_id}/reactions/{reaction}"),
            error="Failed to delete message reaction in ClickUp",
        )

    async def create_reply(
        self, workspace_id: str, message_id: str, body: Mapping[str, Any]
    ) -> Any:
        return await self._call(
            "POST",
            self._url(workspace_id, f"messages/{message_id}/replies"),
            json=dict(body),
            error="Failed to create reply in ClickUp",
        )

    async def get_replies(
        self,
        workspace_id: str,
        message_id: str,
        pagination: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self._call(
            "GET",
            self._url(workspace_id, f"messages/{message_id}/replies"),
            params=pagination,
            error="Failed to get replies from ClickUp",
        )

    async def get_mentionable_users(self, workspace_id: str) -> Any:
        return await self._call(
            "GET",
            self._url(workspace_id, "users"),
            error="Failed to get mentionable users from ClickUp",
        )


__all__ = ["ChatService"]
