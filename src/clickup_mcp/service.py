from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from .client import ClickUpClient
from .core.config import AppConfig
from .core.errors import MissingConfigError
from .services import (
    AttachmentService,
    ChatService,
    ChecklistService,
    CommentService,
    CustomFieldService,
    DependencyService,
    DocService,
    FolderService,
    ListService,
    SpaceService,
    TaskService,
    TimeTrackingService,
    ViewService,
)
from .services._base import ResourceService


class _LegacyService(ResourceService):
    resource = "clickup"


class ClickUpService:
    """
    Facade over one shared ClickUpClient and every resource service.

    The task/team/list/board methods here predate the resource services and
    are kept for callers that still use them.
    """

    def __init__(
        self,
        token: str,
        *,
        client: Optional[ClickUpClient] = None,
        logger: Optional[logging.Logger] = None,
        **client_kwargs: Any,
    ):
        if not (token or "").strip():
            raise MissingConfigError(
                "ClickUp Personal API Token is missing in configuration."
            )

        self.log = logger or logging.getLogger("clickup_mcp.service")
        self._client = client or ClickUpClient(token=token, **client_kwargs)

        self._tasks = TaskService(self._client)
        self._lists = ListService(self._client)
        self._spaces = SpaceService(self._client)
        self._folders = FolderService(self._client)
        self._views = ViewService(self._client)
        self._docs = DocService(self._client)
        self._custom_fields = CustomFieldService(self._client)
        self._chat = ChatService(self._client)
        self._comments = CommentService(self._client)
        self._checklists = ChecklistService(self._client)
        self._dependencies = DependencyService(self._client)
        self._time_tracking = TimeTrackingService(self._client)
        self._attachments = AttachmentService(self._client)
        self._legacy = _LegacyService(self._client, logger=self.log)

        self.log.info("ClickUp service initialized")

    @classmethod
    def from_config(cls, config: AppConfig, **kwargs: Any) -> "ClickUpService":
        return cls(
            config.clickup_personal_token,
            base_url=config.api_url,
            v3_base_url=config.v3_api_url,
            **kwargs,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ClickUpService":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def client(self) -> ClickUpClient:
        return self._client

    @property
    def tasks(self) -> TaskService:
        return self._tasks

    @property
    def lists(self) -> ListService:
        return self._lists

    @property
    def spaces(self) -> SpaceService:
        return self._spaces

    @property
    def folders(self) -> FolderService:
        return self._folders

    @property
    def views(self) -> ViewService:
        return self._views

    @property
    def docs(self) -> DocService:
        return self._docs

    @property
    def custom_fields(self) -> CustomFieldService:
        return self._custom_fields

    @property
    def chat(self) -> ChatService:
        return self._chat

    @property
    def comments(self) -> CommentService:
        return self._comments

    @property
    def checklists(self) -> ChecklistService:
        return self._checklists

    @property
    def dependencies(self) -> DependencyService:
        return self._dependencies

    @property
    def time_tracking(self) -> TimeTrackingService:
        return self._time_tracking

    @property
    def attachments(self) -> AttachmentService:
        return self._attachments

    # --- Legacy operations ------------------------------------------------- #

    async def get_teams(self) -> List[Dict[str, Any]]:
        error = "Failed to retrieve teams from ClickUp"
        payload = await self._legacy._call("GET", "/team", error=error)
        return self._legacy._unwrap(payload, "teams", error=error)

    async def get_lists(self, folder_id: str) -> List[Dict[str, Any]]:
        error = "Failed to retrieve lists from ClickUp"
        payload = await self._legacy._call("GET", f"/folder/{folder_id}/list", error=error)
        return self._legacy._unwrap(payload, "lists", error=error)

    async def create_board(self, board: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._legacy._call(
            "POST",
            f"/space/{board.get('space_id')}/board",
            json=dict(board),
            error="Failed to create board in ClickUp",
        )

    async def create_task(self, task: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._tasks.create_task(task)

    async def update_task(
        self, task_id: str, updates: Mapping[str, Any]
    ) -> Dict[str, Any]:
        return await self._tasks.update_task(task_id, updates)


__all__ = ["ClickUpService"]
