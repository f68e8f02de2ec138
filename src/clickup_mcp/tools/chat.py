from __future__ import annotations

from typing import Any, Dict, Mapping

from clickup_mcp.models import (
    ChannelCreateInput,
    ChannelInput,
    ChannelUpdateInput,
    ChatWorkspaceInput,
    ConversationInput,
    DirectMessageCreateInput,
    MessageCreateInput,
    MessageInput,
    MessagesInput,
    MessageUpdateInput,
    ReactionCreateInput,
    ReactionDeleteInput,
    RepliesInput,
    ReplyCreateInput,
    parse_tool_input,
)
from clickup_mcp.service import ClickUpService

from ._common import (
    ARRAY,
    BOOLEAN,
    NUMBER,
    OBJECT,
    STRING,
    envelope,
    field,
    json_result,
    prop,
    tool,
)

_WS = {"workspace_id": prop(STRING, "Workspace ID.")}
_CH = {**_WS, "channel_id": prop(STRING, "Channel ID.")}
_MSG = {**_CH, "message_id": prop(STRING, "Message ID.")}
_PAGE = {
    "limit": prop(NUMBER, "Maximum number of results."),
    "offset": prop(STRING, "Cursor returned by the previous page."),
}

TOOLS = [
    tool(
        "clickup_get_channels",
        "List the chat channels of a workspace.",
        _WS,
        required=("workspace_id",),
        output={"channels": ARRAY},
    ),
    tool(
        "clickup_create_chat_channel",
        "Create a chat channel.",
        {
            **_WS,
            "name": prop(STRING, "Channel name."),
            "description": prop(STRING, "Channel description."),
            "private": prop(BOOLEAN, "Make the channel private."),
        },
        required=("workspace_id", "name"),
        output={"channel": OBJECT},
    ),
    tool(
        "clickup_get_chat_channel",
        "Get a chat channel.",
        _CH,
        required=("workspace_id", "channel_id"),
        output={"channel": OBJECT},
    ),
    tool(
        "clickup_update_chat_channel",
        "Update a chat channel.",
        {
            **_CH,
            "name": prop(STRING, "New name."),
            "description": prop(STRING, "New description."),
            "private": prop(BOOLEAN, "Make the channel private or public."),
        },
        required=("workspace_id", "channel_id"),
        output={"channel": OBJECT},
    ),
    tool(
        "clickup_delete_chat_channel",
        "Delete a chat channel.",
        _CH,
        required=("workspace_id", "channel_id"),
        output={"success": BOOLEAN},
    ),
    tool(
        "clickup_get_channel_followers",
        "List the followers of a chat channel.",
        _CH,
        required=("workspace_id", "channel_id"),
        output={"followers": ARRAY},
    ),
    tool(
        "clickup_get_channel_members",
        "List the members of a chat channel.",
        _CH,
        required=("workspace_id", "channel_id"),
        output={"members": ARRAY},
    ),
    tool(
        "clickup_create_chat_message",
        "Post a message to a chat channel.",
        {**_CH, "text": prop(STRING, "Message text.")},
        required=("workspace_id", "channel_id", "text"),
        output={"message": OBJECT},
    ),
    tool(
        "clickup_get_chat_messages",
        "List the messages of a chat channel.",
        {**_CH, **_PAGE},
        required=("workspace_id", "channel_id"),
        output={"messages": ARRAY},
    ),
    tool(
        "clickup_update_chat_message",
        "Edit a chat message.",
        {**_MSG, "text": prop(STRING, "New message text.")},
        required=("workspace_id", "channel_id", "message_id", "text"),
        output={"message": OBJECT},
    ),
    tool(
        "clickup_delete_chat_message",
        "Delete a chat message.",
        _MSG,
        required=("workspace_id", "channel_id", "message_id"),
        output={"success": BOOLEAN},
    ),
    tool(
        "clickup_get_direct_messages",
        "List the direct message conversations of the current user.",
        _WS,
        required=("workspace_id",),
        output={"channels": ARRAY},
    ),
    tool(
        "clickup_get_conversation_messages",
        "List the messages of a direct conversation with a user.",
        {**_WS, "user_id": prop(STRING, "The other user's ID."), **_PAGE},
        required=("workspace_id", "user_id"),
        output={"messages": ARRAY},
    ),
    tool(
        "clickup_create_direct_message",
        "Send a direct message to a user.",
        {
            **_WS,
            "user_id": prop(STRING, "Recipient user ID."),
            "text": prop(STRING, "Message text."),
        },
        required=("workspace_id", "user_id", "text"),
        output={"message": OBJECT},
    ),
    tool(
        "clickup_create_message_reaction",
        "React to a chat message with an emoji.",
        {**_MSG, "emoji": prop(STRING, "Emoji name, e.g. thumbsup.")},
        required=("workspace_id", "channel_id", "message_id", "emoji"),
        output={"reaction": OBJECT},
    ),
    tool(
        "clickup_get_message_reactions",
        "List the reactions on a chat message.",
        _MSG,
        required=("workspace_id", "channel_id", "message_id"),
        output={"reactions": ARRAY},
    ),
    tool(
        "clickup_delete_message_reaction",
        "Remove a reaction from a chat message.",
        {**_MSG, "reaction_id": prop(STRING, "Reaction to remove.")},
        required=("workspace_id", "channel_id", "message_id", "reaction_id"),
        output={"success": BOOLEAN},
    ),
    tool(
        "clickup_create_chat_reply",
        "Reply to a chat message.",
        {**_MSG, "text": prop(STRING, "Reply text.")},
        required=("workspace_id", "channel_id", "message_id", "text"),
        output={"reply": OBJECT},
    ),
    tool(
        "clickup_get_chat_replies",
        "List the replies to a chat message.",
        {**_MSG, **_PAGE},
        required=("workspace_id", "channel_id", "message_id"),
        output={"replies": ARRAY},
    ),
    tool(
        "clickup_get_mentionable_users",
        "List the users that can be mentioned in chat.",
        _WS,
        required=("workspace_id",),
        output={"users": ARRAY},
    ),
]


async def handle_get_channels(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChatWorkspaceInput, arguments)
    data = await service.chat.get_channels(args.workspace_id)
    return json_result(data, {"channels": field(data, "channels", [])})


async def handle_create_channel(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChannelCreateInput, arguments)
    body: Dict[str, Any] = {"name": args.name}
    if args.description:
        body["description"] = args.description
    if "private" in args.model_fields_set:
        body["private"] = args.private
    channel = await service.chat.create_channel(args.workspace_id, body)
    return json_result(channel, {"channel": channel})


async def handle_get_channel(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChannelInput, arguments)
    channel = await service.chat.get_channel(args.workspace_id, args.channel_id)
    return json_result(channel, {"channel": channel})


async def handle_update_channel(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChannelUpdateInput, arguments)
    updates = args.fields_set(exclude=("workspace_id", "channel_id"))
    channel = await service.chat.update_channel(
        args.workspace_id, args.channel_id, updates
    )
    return json_result(channel, {"channel": channel})


async def handle_delete_channel(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChannelInput, arguments)
    await service.chat.delete_channel(args.workspace_id, args.channel_id)
    return envelope(f"Channel {args.channel_id} deleted successfully", {"success": True})


async def handle_get_channel_followers(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChannelInput, arguments)
    data = await service.chat.get_channel_followers(args.workspace_id, args.channel_id)
    return json_result(data, {"followers": field(data, "followers", [])})


async def handle_get_channel_members(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChannelInput, arguments)
    data = await service.chat.get_channel_members(args.workspace_id, args.channel_id)
    return json_result(data, {"members": field(data, "members", [])})


async def handle_create_message(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(MessageCreateInput, arguments)
    message = await service.chat.create_message(
        args.workspace_id, args.channel_id, {"text": args.text}
    )
    return json_result(message, {"message": message})


async def handle_get_messages(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(MessagesInput, arguments)
    data = await service.chat.get_messages(
        args.workspace_id, args.channel_id, args.pagination()
    )
    return json_result(data, {"messages": field(data, "messages", [])})


async def handle_update_message(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(MessageUpdateInput, arguments)
    message = await service.chat.update_message(
        args.workspace_id, args.message_id, {"text": args.text}
    )
    return json_result(message, {"message": message})


async def handle_delete_message(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(MessageInput, arguments)
    await service.chat.delete_message(
        args.workspace_id, args.channel_id, args.message_id
    )
    return envelope(f"Message {args.message_id} deleted successfully", {"success": True})


async def handle_get_direct_messages(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChatWorkspaceInput, arguments)
    data = await service.chat.get_direct_messages(args.workspace_id)
    return json_result(data, {"channels": field(data, "channels", [])})


async def handle_get_conversation_messages(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ConversationInput, arguments)
    data = await service.chat.get_conversation_messages(
        args.workspace_id, args.user_id, args.pagination()
    )
    return json_result(data, {"messages": field(data, "messages", [])})


async def handle_create_direct_message(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(DirectMessageCreateInput, arguments)
    message = await service.chat.create_direct_message(
        args.workspace_id, {"user_id": args.user_id, "text": args.text}
    )
    return json_result(message, {"message": message})


async def handle_create_message_reaction(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ReactionCreateInput, arguments)
    reaction = await service.chat.create_message_reaction(
        args.workspace_id, args.message_id, {"emoji": args.emoji}
    )
    return json_result(reaction, {"reaction": reaction})


async def handle_get_message_reactions(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(MessageInput, arguments)
    data = await service.chat.get_message_reactions(args.workspace_id, args.message_id)
    return json_result(data, {"reactions": field(data, "reactions", [])})


async def handle_delete_message_reaction(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ReactionDeleteInput, arguments)
    await service.chat.delete_message_reaction(
        args.workspace_id, args.message_id, args.reaction_id
    )
    return envelope(
        f"Reaction {args.reaction_id} deleted successfully", {"success": True}
    )


async def handle_create_reply(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ReplyCreateInput, arguments)
    reply = await service.chat.create_reply(
        args.workspace_id, args.message_id, {"text": args.text}
    )
    return json_result(reply, {"reply": reply})


async def handle_get_replies(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(RepliesInput, arguments)
    data = await service.chat.get_replies(
        args.workspace_id, args.message_id, args.pagination()
    )
    return json_result(data, {"replies": field(data, "replies", [])})


async def handle_get_mentionable_users(
    service: ClickUpService, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    args = parse_tool_input(ChatWorkspaceInput, arguments)
    data = await service.chat.get_mentionable_users(args.workspace_id)
    return json_result(data, {"users": field(data, "users", [])})


HANDLERS = {
    "clickup_get_channels": handle_get_channels,
    "clickup_create_chat_channel": handle_create_channel,
    "clickup_get_chat_channel": handle_get_channel,
    "clickup_update_chat_channel": handle_update_channel,
    "clickup_delete_chat_channel": handle_delete_channel,
    "clickup_get_channel_followers": handle_get_channel_followers,
    "clickup_get_channel_members": handle_get_channel_members,
    "clickup_create_chat_message": handle_create_message,
    "clickup_get_chat_messages": handle_get_messages,
    "clickup_update_chat_message": handle_update_message,
    "clickup_delete_chat_message": handle_delete_message,
    "clickup_get_direct_messages": handle_get_direct_messages,
    "clickup_get_conversation_messages": handle_get_conversation_messages,
    "clickup_create_direct_message": handle_create_direct_message,
    "clickup_create_message_reaction": handle_create_message_reaction,
    "clickup_get_message_reactions": handle_get_message_reactions,
    "clickup_delete_message_reaction": handle_delete_message_reaction,
    "clickup_create_chat_reply": handle_create_reply,
    "clickup_get_chat_replies": handle_get_replies,
    "clickup_get_mentionable_users": handle_get_mentionable_users,
}
