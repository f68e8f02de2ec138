import json

import pytest
import respx
from httpx import Response
from clickup_mcp.client import ClickUpClient
from clickup_mcp.core.errors import ClickUpServiceError
from clickup_mcp.services import ChatService

CHAT = "https://api.clickup.com/api/v3/workspaces/ws1/chat"


@pytest.fixture
def client():
    return ClickUpClient(token="mock-token")


@pytest.mark.asyncio
@respx.mock
async def test_get_channels_returns_raw_body(client):
    respx.get(f"{CHAT}/channels").mock(
        return_value=Response(200, json={"data": [{"id": "c1"}], "next_cursor": None})
    )

    async with client:
        data = await ChatService(client).get_channels("ws1")

    assert data == {"data": [{"id": "c1"}], "next_cursor": None}


@pytest.mark.asyncio
@respx.mock
async def test_create_channel_posts_body(client):
    route = respx.post(f"{CHAT}/channels").mock(return_value=Response(200, json={"id": "c2"}))

    async with client:
        await ChatService(client).create_channel("ws1", {"name": "general", "private": False})

    assert json.loads(route.calls[0].request.content) == {"name": "general", "private": False}


@pytest.mark.asyncio
@respx.mock
async def test_message_paths(client):
    create = respx.post(f"{CHAT}/channels/c1/messages").mock(
        return_value=Response(200, json={"id": "m1"})
    )
    update = respx.patch(f"{CHAT}/messages/m1").mock(return_value=Response(200, json={}))
    delete = respx.delete(f"{CHAT}/channels/c1/messages/m1").mock(return_value=Response(204))

    async with client:
        service = ChatService(client)
        await service.create_message("ws1", "c1", {"text": "hi"})
        await service.update_message("ws1", "m1", {"text": "edited"})
        assert await service.delete_message("ws1", "c1", "m1") == {}

    assert json.loads(create.calls[0].request.content) == {"text": "hi"}
    assert json.loads(update.calls[0].request.content) == {"text": "edited"}
    assert delete.called


@pytest.mark.asyncio
@respx.mock
async def test_get_messages_forwards_pagination(client):
    route = respx.get(f"{CHAT}/channels/c1/messages").mock(
        return_value=Response(200, json={"messages": []})
    )

    async with client:
        service = ChatService(client)
        await service.get_messages("ws1", "c1", {"limit": 10, "offset": "cursor-1"})
        await service.get_messages("ws1", "c1")

    params = route.calls[0].request.url.params
    assert params["limit"] == "10"
    assert params["offset"] == "cursor-1"
    assert not route.calls[1].request.url.params


@pytest.mark.asyncio
@respx.mock
async def test_direct_message_paths(client):
    listing = respx.get(f"{CHAT}/channels/direct_message").mock(
        return_value=Response(200, json={"channels": []})
    )
    conversation = respx.get(f"{CHAT}/channels/direct_message/u1").mock(
        return_value=Response(200, json={"messages": []})
    )
    send = respx.post(f"{CHAT}/channels/direct_message").mock(
        return_value=Response(200, json={"id": "dm1"})
    )

    async with client:
        service = ChatService(client)
        await service.get_direct_messages("ws1")
        await service.get_conversation_messages("ws1", "u1", {"limit": 5})
        await service.create_direct_message("ws1", {"user_id": "u1", "text": "yo"})

    assert listing.called
    assert conversation.calls[0].request.url.params["limit"] == "5"
    assert json.loads(send.calls[0].request.content) == {"user_id": "u1", "text": "yo"}


@pytest.mark.asyncio
@respx.mock
async def test_reaction_and_reply_paths(client):
    react = respx.post(f"{CHAT}/messages/m1/reactions").mock(
        return_value=Response(200, json={"id": "r1"})
    )
    unreact = respx.delete(f"{CHAT}/messages/m1/reactions/r1").mock(
        return_value=Response(204)
    )
    reply = respx.post(f"{CHAT}/messages/m1/replies").mock(
        return_value=Response(200, json={"id": "rp1"})
    )

    async with client:
        service = ChatService(client)
        await service.create_message_reaction("ws1", "m1", {"emoji": "tada"})
        await service.delete_message_reaction("ws1", "m1", "r1")
        await service.create_reply("ws1", "m1", {"text": "thanks"})

    assert json.loads(react.calls[0].request.content) == {"emoji": "tada"}
    assert unreact.called
    assert json.loads(reply.calls[0].request.content) == {"text": "thanks"}


@pytest.mark.asyncio
@respx.mock
async def test_chat_error_templates(client):
    respx.get(f"{CHAT}/users").mock(return_value=Response(500, json={"err": "x"}))
    respx.get(f"{CHAT}/channels/c1/followers").mock(
        return_value=Response(403, json={"err": "x"})
    )

    async with client:
        service = ChatService(client)
        with pytest.raises(ClickUpServiceError) as users:
            await service.get_mentionable_users("ws1")
        with pytest.raises(ClickUpServiceError) as followers:
            await service.get_channel_followers("ws1", "c1")

    assert str(users.value) == "Failed to get mentionable users from ClickUp"
    assert str(followers.value) == "Failed to get channel followers from ClickUp"


@pytest.mark.asyncio
@respx.mock
async def test_get_channel_members_twice_issues_two_calls(client):
    route = respx.get(f"{CHAT}/channels/c1/members").mock(
        return_value=Response(200, json={"members": [{"id": 1}]})
    )

    async with client:
        service = ChatService(client)
        first = await service.get_channel_members("ws1", "c1")
        second = await service.get_channel_members("ws1", "c1")

    assert first == second == {"members": [{"id": 1}]}
    assert route.call_count == 2
