from __future__ import annotations

from typing import (
    Any,
    ClassVar,
    Dict,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic_core import PydanticCustomError

from .core.errors import ToolInputError
from .services.views import VIEW_PARENT_TYPES, VIEW_TYPES

T = TypeVar("T", bound="ToolInput")

# Check kinds
STRING = "string"  # truthy and a str
PRESENT = "present"  # key present, null allowed
NUMBER = "number"  # truthy int/float, bools excluded
NON_NEGATIVE = "non_negative"  # optional; when given, a whole number >= 0

Number = Union[int, float]
Ident = Union[int, str]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _millis_text(value: Union[int, float, str]) -> str:
    # 1.7e12 -> "1700000000000", not "1700000000000.0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class Check(NamedTuple):
    field: str
    message: str
    kind: Any = STRING

    def passes(self, data: Mapping[str, Any]) -> bool:
        value = data.get(self.field)
        if self.kind == STRING:
            return isinstance(value, str) and bool(value)
        if self.kind == PRESENT:
            return self.field in data
        if self.kind == NUMBER:
            return _is_number(value) and bool(value)
        if self.kind == NON_NEGATIVE:
            return self.field not in data or (
                _is_number(value)
                and value >= 0
                and (isinstance(value, int) or value.is_integer())
            )
        # a tuple of allowed values
        return isinstance(value, str) and value in self.kind


class ToolInput(BaseModel):
    """
    Base for tool arguments.

    `checks` run in order against the raw mapping before field validation,
    so the first failing check decides the error message.
    """

    checks: ClassVar[Tuple[Check, ...]] = ()

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _run_checks(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            raise PydanticCustomError("tool_input", "Arguments must be an object.")
        for check in cls.checks:
            if not check.passes(data):
                raise PydanticCustomError("tool_input", check.message)
        return data

    def fields_set(self, *, exclude: Tuple[str, ...] = ()) -> Dict[str, Any]:
        """Only the fields the caller actually sent (null included)."""
        return self.model_dump(exclude_unset=True, exclude=set(exclude))


def parse_tool_input(model: Type[T], arguments: Optional[Mapping[str, Any]]) -> T:
    try:
        return model.model_validate(dict(arguments or {}))
    except ValidationError as exc:
        raise ToolInputError(_first_message(exc)) from exc


def _first_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    if error["type"] == "tool_input":
        return error["msg"]
    loc = ".".join(str(part) for part in error["loc"])
    return f"Invalid value for '{loc}': {error['msg']}"


# --- Shared checks --------------------------------------------------------- #

TASK_ID = Check("task_id", "Task ID is required and must be a string.")
LIST_ID = Check("list_id", "List ID is required and must be a string.")
WORKSPACE_ID = Check("workspace_id", "Workspace ID is required and must be a string.")
CHANNEL_ID = Check("channel_id", "Channel ID is required and must be a string.")
MESSAGE_ID = Check("message_id", "Message ID is required and must be a string.")
USER_ID = Check("user_id", "User ID is required and must be a string.")
MESSAGE_TEXT = Check("text", "Message text is required and must be a string.")
COMMENT_ID = Check("comment_id", "Comment ID is required and must be a string.")
COMMENT_TEXT = Check("comment_text", "Comment text is required and must be a string.")
CHECKLIST_ID = Check("checklist_id", "Checklist ID is required and must be a string.")
CHECKLIST_ITEM_ID = Check(
    "checklist_item_id", "Checklist item ID is required and must be a string."
)
TEAM_ID = Check("team_id", "Team ID is required and must be a string.")
TIMER_ID = Check("timer_id", "Timer ID is required and must be a string.")
DURATION = Check("duration", "Duration is required and must be a number.", NUMBER)
VIEW_PARENT = (
    Check(
        "parent_id",
        "Parent ID and a valid Parent Type ('team', 'space', 'folder', 'list') are required.",
    ),
    Check(
        "parent_type",
        "Parent ID and a valid Parent Type ('team', 'space', 'folder', 'list') are required.",
        VIEW_PARENT_TYPES,
    ),
)


# --- Tasks ----------------------------------------------------------------- #


class TaskFields(ToolInput):
    name: Optional[str] = None
    description: Optional[str] = None
    assignees: Optional[List[Ident]] = None
    status: Optional[str] = None
    priority: Optional[int] = None
    due_date: Optional[Union[int, float, str]] = None
    time_estimate: Optional[Union[int, float, str]] = None
    tags: Optional[List[str]] = None

    def task_payload(self) -> Dict[str, Any]:
        """Fields the caller sent; dates/estimates go to ClickUp as strings."""
        payload = self.fields_set(exclude=("task_id",))
        for key in ("due_date", "time_estimate"):
            if payload.get(key) is not None:
                payload[key] = _millis_text(payload[key])
        return payload


class TaskCreateInput(TaskFields):
    checks = (LIST_ID, Check("name", "Task name is required and must be a string."))

    list_id: str
    name: str


class TaskUpdateInput(TaskFields):
    checks = (TASK_ID,)

    task_id: str


class TaskInput(ToolInput):
    checks = (TASK_ID,)

    task_id: str


class TaskListInput(ToolInput):
    checks = (LIST_ID,)

    list_id: str
    archived: Optional[bool] = None
    page: Optional[int] = None


# --- Workspace hierarchy --------------------------------------------------- #


class FolderListsInput(ToolInput):
    checks = (Check("folder_id", "Folder ID is required and must be a string."),)

    folder_id: str


class ListCreateInput(ToolInput):
    # presence/parent checks are done by ListService.create_list
    parent_id: Optional[str] = None
    parent_type: Optional[str] = None
    name: Optional[str] = None
    content: Optional[str] = None
    due_date: Optional[Union[int, str]] = None
    due_date_time: Optional[bool] = None
    priority: Optional[int] = None
    assignee: Optional[Ident] = None
    status: Optional[str] = None


class BoardCreateInput(ToolInput):
    checks = (
        Check("space_id", "Space ID is required and must be a string."),
        Check("name", "Board name is required and must be a string."),
    )

    space_id: str
    name: str


class SpacesInput(ToolInput):
    checks = (Check("team_id", "Team ID (Workspace ID) is required."),)

    team_id: str
    archived: Optional[bool] = None


class SpaceCreateInput(ToolInput):
    checks = (
        Check("team_id", "Team ID (Workspace ID) is required."),
        Check("name", "Space name is required."),
    )

    team_id: str
    name: str
    multiple_assignees: Optional[bool] = None
    features: Optional[Dict[str, Any]] = None


class SpaceInput(ToolInput):
    checks = (Check("space_id", "Space ID is required."),)

    space_id: str


class SpaceUpdateInput(ToolInput):
    checks = (Check("space_id", "Space ID is required for update."),)

    space_id: str
    name: Optional[str] = None
    color: Optional[str] = None
    private: Optional[bool] = None
    admin_can_manage: Optional[bool] = None
    archived: Optional[bool] = None
    features: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(frozen=True, extra="allow")


class SpaceDeleteInput(ToolInput):
    checks = (Check("space_id", "Space ID is required for deletion."),)

    space_id: str


class FoldersInput(ToolInput):
    checks = (Check("space_id", "Space ID is required to get folders."),)

    space_id: str
    archived: Optional[bool] = None


class FolderCreateInput(ToolInput):
    checks = (
        Check("space_id", "Space ID is required to create a folder."),
        Check("name", "Folder name is required."),
    )

    space_id: str
    name: str


class FolderInput(ToolInput):
    checks = (Check("folder_id", "Folder ID is required."),)

    folder_id: str


class FolderUpdateInput(ToolInput):
    checks = (
        Check("folder_id", "Folder ID is required for update."),
        Check("name", "Folder name is required for update."),
    )

    folder_id: str
    name: str


class FolderDeleteInput(ToolInput):
    checks = (Check("folder_id", "Folder ID is required for deletion."),)

    folder_id: str


# --- Custom fields --------------------------------------------------------- #


class CustomFieldsInput(ToolInput):
    checks = (Check("list_id", "List ID is required."),)

    list_id: str


class CustomFieldSetInput(ToolInput):
    checks = (
        Check("task_id", "Task ID is required."),
        Check("field_id", "Field ID is required."),
        Check("value", "Value is required to set a custom field.", PRESENT),
    )

    task_id: str
    field_id: str
    value: Any = None
    value_options: Optional[Dict[str, Any]] = None


class CustomFieldRemoveInput(ToolInput):
    checks = (
        Check("task_id", "Task ID is required."),
        Check("field_id", "Field ID is required."),
    )

    task_id: str
    field_id: str


# --- Views ----------------------------------------------------------------- #


class ViewsInput(ToolInput):
    checks = VIEW_PARENT

    parent_id: str
    parent_type: str


class ViewCreateInput(ToolInput):
    checks = VIEW_PARENT + (
        Check("name", "View name is required."),
        Check(
            "type",
            "View type ('list', 'board', 'calendar', 'gantt') is required.",
            VIEW_TYPES,
        ),
    )

    parent_id: str
    parent_type: str
    name: str
    type: str

    model_config = ConfigDict(frozen=True, extra="allow")


class ViewInput(ToolInput):
    checks = (Check("view_id", "View ID is required."),)

    view_id: str


class ViewUpdateInput(ToolInput):
    checks = (Check("view_id", "View ID is required for update."),)

    view_id: str
    name: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="allow")


class ViewDeleteInput(ToolInput):
    checks = (Check("view_id", "View ID is required for deletion."),)

    view_id: str


class ViewTasksInput(ToolInput):
    checks = (
        Check("view_id", "View ID is required."),
        Check("page", "Page parameter must be a non-negative number.", NON_NEGATIVE),
    )

    view_id: str
    page: Optional[Number] = None


# --- Docs ------------------------------------------------------------------ #


class DocSearchInput(ToolInput):
    checks = (Check("team_id", "Team ID is required."),)

    team_id: str
    query: Optional[str] = None
    include_archived: Optional[bool] = None


class DocCreateInput(ToolInput):
    checks = (
        Check("workspace_id", "Workspace ID is required to create a doc."),
        Check("name", "Doc name is required."),
    )

    workspace_id: str
    name: str
    parent: Optional[Dict[str, Any]] = None
    visibility: Optional[str] = None
    create_page: Optional[bool] = None


class DocPagesInput(ToolInput):
    checks = (
        Check("workspace_id", "Workspace ID is required to get doc pages."),
        Check("doc_id", "Doc ID is required."),
    )

    workspace_id: str
    doc_id: str


class DocPageCreateInput(ToolInput):
    checks = (
        Check("workspace_id", "Workspace ID is required for createDocPage tool."),
        Check("doc_id", "Doc ID is required."),
        Check("name", "Page name (title) is required."),
    )

    workspace_id: str
    doc_id: str
    name: str
    content: Optional[str] = None
    parent_page_id: Optional[str] = None
    sub_title: Optional[str] = None
    content_format: Optional[str] = None


class DocPageContentInput(ToolInput):
    checks = (
        Check("workspace_id", "Workspace ID is required for getDocPageContent tool."),
        Check("doc_id", "Doc ID is required for getDocPageContent tool."),
        Check("page_id", "Page ID is required."),
    )

    workspace_id: str
    doc_id: str
    page_id: str
    content_format: Optional[str] = None


class DocPageEditInput(ToolInput):
    checks = (
        Check("workspace_id", "Workspace ID is required for editDocPageContent tool."),
        Check("doc_id", "Doc ID is required for editDocPageContent tool."),
        Check("page_id", "Page ID is required."),
        Check("content", "Content is required to edit a doc page.", PRESENT),
    )

    workspace_id: str
    doc_id: str
    page_id: str
    content: Any = None
    title: Optional[str] = None
    sub_title: Optional[str] = None
    content_edit_mode: Optional[str] = None
    content_format: Optional[str] = None


# --- Chat ------------------------------------------------------------------ #


class Pagination(ToolInput):
    limit: Optional[int] = None
    offset: Optional[Union[int, str]] = None

    def pagination(self) -> Dict[str, Any]:
        sent = self.fields_set()
        return {k: sent[k] for k in ("limit", "offset") if sent.get(k) is not None}


class ChatWorkspaceInput(ToolInput):
    checks = (WORKSPACE_ID,)

    workspace_id: str


class ChannelCreateInput(ToolInput):
    checks = (
        WORKSPACE_ID,
        Check("name", "Channel name is required and must be a string."),
    )

    workspace_id: str
    name: str
    description: Optional[str] = None
    private: Optional[bool] = None


class ChannelInput(ToolInput):
    checks = (WORKSPACE_ID, CHANNEL_ID)

    workspace_id: str
    channel_id: str


class ChannelUpdateInput(ChannelInput):
    name: Optional[str] = None
    description: Optional[str] = None
    private: Optional[bool] = None


class MessageCreateInput(ToolInput):
    checks = (WORKSPACE_ID, CHANNEL_ID, MESSAGE_TEXT)

    workspace_id: str
    channel_id: str
    text: str


class MessagesInput(Pagination):
    checks = (WORKSPACE_ID, CHANNEL_ID)

    workspace_id: str
    channel_id: str


class MessageInput(ToolInput):
    checks = (WORKSPACE_ID, CHANNEL_ID, MESSAGE_ID)

    workspace_id: str
    channel_id: str
    message_id: str


class MessageUpdateInput(MessageInput):
    checks = (WORKSPACE_ID, CHANNEL_ID, MESSAGE_ID, MESSAGE_TEXT)

    text: str


class DirectMessageCreateInput(ToolInput):
    checks = (WORKSPACE_ID, USER_ID, MESSAGE_TEXT)

    workspace_id: str
    user_id: str
    text: str


class ConversationInput(Pagination):
    checks = (WORKSPACE_ID, USER_ID)

    workspace_id: str
    user_id: str


class ReactionCreateInput(MessageInput):
    checks = (
        WORKSPACE_ID,
        CHANNEL_ID,
        MESSAGE_ID,
        Check("emoji", "Emoji is required and must be a string."),
    )

    emoji: str


class ReactionDeleteInput(MessageInput):
    checks = (
        WORKSPACE_ID,
        CHANNEL_ID,
        MESSAGE_ID,
        Check("reaction_id", "Reaction ID is required and must be a string."),
    )

    reaction_id: str


class ReplyCreateInput(MessageInput):
    checks = (
        WORKSPACE_ID,
        CHANNEL_ID,
        MESSAGE_ID,
        Check("text", "Reply text is required and must be a string."),
    )

    text: str


class RepliesInput(Pagination):
    checks = (WORKSPACE_ID, CHANNEL_ID, MESSAGE_ID)

    workspace_id: str
    channel_id: str
    message_id: str


# --- Comments -------------------------------------------------------------- #


class CommentCreateInput(ToolInput):
    checks = (TASK_ID, COMMENT_TEXT)

    task_id: str
    comment_text: str
    notify_all: bool = True
    assignee: Optional[Ident] = None


class CommentUpdateInput(ToolInput):
    checks = (COMMENT_ID, COMMENT_TEXT)

    comment_id: str
    comment_text: str
    assignee: Optional[Ident] = None
    resolved: Optional[bool] = None


class CommentInput(ToolInput):
    checks = (COMMENT_ID,)

    comment_id: str


# --- Checklists ------------------------------------------------------------ #


class ChecklistCreateInput(ToolInput):
    checks = (TASK_ID, Check("name", "Checklist name is required and must be a string."))

    task_id: str
    name: str


class ChecklistInput(ToolInput):
    checks = (CHECKLIST_ID,)

    checklist_id: str


class ChecklistUpdateInput(ChecklistInput):
    name: Optional[str] = None
    position: Optional[int] = None


class ChecklistItemCreateInput(ChecklistInput):
    checks = (CHECKLIST_ID, Check("name", "Item name is required and must be a string."))

    name: str
    assignee: Optional[Ident] = None


class ChecklistItemInput(ChecklistInput):
    checks = (CHECKLIST_ID, CHECKLIST_ITEM_ID)

    checklist_item_id: str


class ChecklistItemUpdateInput(ChecklistItemInput):
    name: Optional[str] = None
    resolved: Optional[bool] = None
    assignee: Optional[Ident] = None
    parent: Optional[str] = None


# --- Dependencies ---------------------------------------------------------- #


class DependencyInput(ToolInput):
    checks = (TASK_ID,)

    task_id: str
    depends_on: Optional[str] = None
    dependency_of: Optional[str] = None


class TaskLinkInput(ToolInput):
    checks = (
        TASK_ID,
        Check("links_to", "Links to task ID is required and must be a string."),
    )

    task_id: str
    links_to: str


# --- Time tracking --------------------------------------------------------- #


class TimeEntryCreateInput(ToolInput):
    checks = (TASK_ID, DURATION)

    task_id: str
    duration: Number
    start: Optional[Number] = None
    description: Optional[str] = None


class TeamInput(ToolInput):
    checks = (TEAM_ID,)

    team_id: str


class TimeEntryInput(TeamInput):
    checks = (TEAM_ID, TIMER_ID)

    timer_id: str


class TimeEntryUpdateInput(TimeEntryInput):
    checks = (TEAM_ID, TIMER_ID, DURATION)

    duration: Number
    start: Optional[Number] = None
    description: Optional[str] = None


class TimerStartInput(TeamInput):
    checks = (TEAM_ID, TASK_ID)

    task_id: str
    description: Optional[str] = None


# --- Attachments ----------------------------------------------------------- #


class AttachmentUploadInput(ToolInput):
    checks = (TASK_ID, Check("file_path", "File path is required and must be a string."))

    task_id: str
    file_path: str
    file_name: Optional[str] = None


class AttachmentInput(ToolInput):
    checks = (Check("attachment_id", "Attachment ID is required and must be a string."),)

    attachment_id: str
