import json

import pytest
import respx
from httpx import Response
from clickup_mcp.service import ClickUpService
from clickup_mcp.tools import TOOL_HANDLERS

CHAT = "https://api.clickup.com/api/v3/workspaces/ws1/chat"


@pytest.fixture
def service():
    return ClickUpService("mock-token")


def _text(result):
    return result["content"][0]["text"]


async def _call(service, name, arguments):
    return await TOOL_HANDLERS[name](service, arguments)


@pytest.mark.asyncio
@respx.mock
async def test_get_channels_structured_defaults_to_empty_list(service):
    respx.get(f"{CHAT}/channels").mock(return_value=Response(200, json={"data": []}))

    async with service:
        result = await _call(service, "clickup_get_channels", {"workspace_id": "ws1"})

    assert json.loads(_text(result)) == {"data": []}
    assert result["structuredContent"] == {"channels": []}


@pytest.mark.asyncio
@respx.mock
async def test_create_channel_copies_present_optionals(service):
    route = respx.post(f"{CHAT}/channels").mock(
        return_value=Response(200, json={"id": "c1", "name": "general"})
    )

    async with service:
        result = await _call(
            service,
            "clickup_create_chat_channel",
            {"workspace_id": "ws1", "name": "general", "private": False, "description": ""},
        )

    assert json.loads(route.calls[0].request.content) == {"name": "general", "private": False}
    assert result["structuredContent"] == {"channel": {"id": "c1", "name": "general"}}


@pytest.mark.asyncio
@respx.mock
async def test_update_channel_body_excludes_ids(service):
    route = respx.patch(f"{CHAT}/channels/c1").mock(return_value=Response(200, json={"id": "c1"}))

    async with service:
        await _call(
            service,
            "clickup_update_chat_channel",
            {"workspace_id": "ws1", "channel_id": "c1", "description": "team room"},
        )

    assert json.loads(route.calls[0].request.content) == {"description": "team room"}


@pytest.mark.asyncio
@respx.mock
async def test_delete_channel_message(service):
    respx.delete(f"{CHAT}/channels/c1").mock(return_value=Response(204))

    async with service:
        result = await _call(
            service, "clickup_delete_chat_channel", {"workspace_id": "ws1", "channel_id": "c1"}
        )

    assert _text(result) == "Channel c1 deleted successfully"
    assert result["structuredContent"] == {"success": True}


@pytest.mark.asyncio
@respx.mock
async def test_followers_and_members_keys(service):
    respx.get(f"{CHAT}/channels/c1/followers").mock(
        return_value=Response(200, json={"followers": [{"id": 1}]})
    )
    respx.get(f"{CHAT}/channels/c1/members").mock(return_value=Response(200, json={}))

    async with service:
        args = {"workspace_id": "ws1", "channel_id": "c1"}
        followers = await _call(service, "clickup_get_channel_followers", args)
        members = await _call(service, "clickup_get_channel_members", args)

    assert followers["structuredContent"] == {"followers": [{"id": 1}]}
    assert members["structuredContent"] == {"members": []}


@pytest.mark.asyncio
@respx.mock
async def test_messages_round(service):
    create = respx.post(f"{CHAT}/channels/c1/messages").mock(
        return_value=Response(200, json={"id": "m1", "text": "hi"})
    )
    listing = respx.get(f"{CHAT}/channels/c1/messages").mock(
        return_value=Response(200, json={"messages": [{"id": "m1"}]})
    )
    update = respx.patch(f"{CHAT}/messages/m1").mock(return_value=Response(200, json={"id": "m1"}))
    respx.delete(f"{CHAT}/channels/c1/messages/m1").mock(return_value=Response(204))

    async with service:
        created = await _call(
            service,
            "clickup_create_chat_message",
            {"workspace_id": "ws1", "channel_id": "c1", "text": "hi"},
        )
        listed = await _call(
            service,
            "clickup_get_chat_messages",
            {"workspace_id": "ws1", "channel_id": "c1", "limit": 20},
        )
        await _call(
            service,
            "clickup_update_chat_message",
            {"workspace_id": "ws1", "channel_id": "c1", "message_id": "m1", "text": "edit"},
        )
        deleted = await _call(
            service,
            "clickup_delete_chat_message",
            {"workspace_id": "ws1", "channel_id": "c1", "message_id": "m1"},
        )

    assert json.loads(create.calls[0].request.content) == {"text": "hi"}
    assert created["structuredContent"] == {"message": {"id": "m1", "text": "hi"}}
    assert listing.calls[0].request.url.params["limit"] == "20"
    assert "offset" not in listing.calls[0].request.url.params
    assert listed["structuredContent"] == {"messages": [{"id": "m1"}]}
    assert json.loads(update.calls[0].request.content) == {"text": "edit"}
    assert _text(deleted) == "Message m1 deleted successfully"


@pytest.mark.asyncio
@respx.mock
async def test_direct_messages(service):
    respx.get(f"{CHAT}/channels/direct_message").mock(
        return_value=Response(200, json={"channels": [{"id": "dm"}]})
    )
    conversation = respx.get(f"{CHAT}/channels/direct_message/u1").mock(
        return_value=Response(200, json={"messages": []})
    )
    send = respx.post(f"{CHAT}/channels/direct_message").mock(
        return_value=Response(200, json={"id": "m9"})
    )

    async with service:
        listed = await _call(service, "clickup_get_direct_messages", {"workspace_id": "ws1"})
        history = await _call(
            service,
            "clickup_get_conversation_messages",
            {"workspace_id": "ws1", "user_id": "u1", "offset": "abc"},
        )
        sent = await _call(
            service,
            "clickup_create_direct_message",
            {"workspace_id": "ws1", "user_id": "u1", "text": "ping"},
        )

    assert listed["structuredContent"] == {"channels": [{"id": "dm"}]}
    assert conversation.calls[0].request.url.params["offset"] == "abc"
    assert history["structuredContent"] == {"messages": []}
    assert json.loads(send.calls[0].request.content) == {"user_id": "u1", "text": "ping"}
    assert sent["structuredContent"] == {"message": {"id": "m9"}}


@pytest.mark.asyncio
@respx.mock
async def test_reactions_replies_and_users(service):
    react = respx.post(f"{CHAT}/messages/m1/reactions").mock(
        return_value=Response(200, json={"id": "r1"})
    )
    respx.get(f"{CHAT}/messages/m1/reactions").mock(
        return_value=Response(200, json={"reactions": [{"id": "r1"}]})
    )
    respx.delete(f"{CHAT}/messages/m1/reactions/r1").mock(return_value=Response(204))
    respx.post(f"{CHAT}/messages/m1/replies").mock(return_value=Response(200, json={"id": "rp"}))
    respx.get(f"{CHAT}/messages/m1/replies").mock(return_value=Response(200, json={"replies": []}))
    respx.get(f"{CHAT}/users").mock(return_value=Response(200, json={"users": [{"id": 3}]}))

    msg = {"workspace_id": "ws1", "channel_id": "c1", "message_id": "m1"}
    async with service:
        created = await _call(service, "clickup_create_message_reaction", {**msg, "emoji": "+1"})
        listed = await _call(service, "clickup_get_message_reactions", msg)
        deleted = await _call(
            service, "clickup_delete_message_reaction", {**msg, "reaction_id": "r1"}
        )
        reply = await _call(service, "clickup_create_chat_reply", {**msg, "text": "ok"})
        replies = await _call(service, "clickup_get_chat_replies", msg)
        users = await _call(service, "clickup_get_mentionable_users", {"workspace_id": "ws1"})

    assert json.loads(react.calls[0].request.content) == {"emoji": "+1"}
    assert created["structuredContent"] == {"reaction": {"id": "r1"}}
    assert listed["structuredContent"] == {"reactions": [{"id": "r1"}]}
    assert _text(deleted) == "Reaction r1 deleted successfully"
    assert reply["structuredContent"] == {"reply": {"id": "rp"}}
    assert replies["structuredContent"] == {"replies": []}
    assert users["structuredContent"] == {"users": [{"id": 3}]}
