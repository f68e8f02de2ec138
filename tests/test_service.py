import json

import pytest
import respx
from httpx import Response
from clickup_mcp.core.config import AppConfig
from clickup_mcp.core.errors import ClickUpServiceError, MissingConfigError
from clickup_mcp.service import ClickUpService
from clickup_mcp.services import TaskService

V2 = "https://api.clickup.com/api/v2"


@pytest.fixture
def service():
    return ClickUpService("mock-token")


@pytest.mark.parametrize("token", ["", "   ", None])
def test_missing_token_is_fatal(token):
    with pytest.raises(MissingConfigError) as exc:
        ClickUpService(token)

    assert str(exc.value) == "ClickUp Personal API Token is missing in configuration."


@pytest.mark.asyncio
async def test_services_share_one_client(service):
    async with service:
        assert isinstance(service.tasks, TaskService)
        assert service.tasks.client is service.client
        assert service.chat.client is service.client
        assert service.attachments.client is service.client


@pytest.mark.asyncio
async def test_from_config_uses_configured_urls():
    config = AppConfig(
        clickup_personal_token="pk",
        encryption_key="00" * 32,
        api_url="https://clickup.test/api/v2/",
        v3_api_url="https://clickup.test/api/v3",
    )

    async with ClickUpService.from_config(config) as service:
        assert service.client.base_url == "https://clickup.test/api/v2"
        assert service.client.v3_url("workspaces/1") == "https://clickup.test/api/v3/workspaces/1"


@pytest.mark.asyncio
@respx.mock
async def test_get_teams_unwraps_teams(service):
    respx.get(f"{V2}/team").mock(return_value=Response(200, json={"teams": [{"id": "1"}]}))

    async with service:
        assert await service.get_teams() == [{"id": "1"}]


@pytest.mark.asyncio
@respx.mock
async def test_get_lists_unexpected_shape_uses_template(service):
    respx.get(f"{V2}/folder/F1/list").mock(return_value=Response(200, json={"items": []}))

    async with service:
        with pytest.raises(ClickUpServiceError) as exc:
            await service.get_lists("F1")

    assert str(exc.value) == "Failed to retrieve lists from ClickUp"


@pytest.mark.asyncio
@respx.mock
async def test_get_teams_error_template(service):
    respx.get(f"{V2}/team").mock(return_value=Response(401, json={"err": "Token invalid"}))

    async with service:
        with pytest.raises(ClickUpServiceError) as exc:
            await service.get_teams()

    assert str(exc.value) == "Failed to retrieve teams from ClickUp"


@pytest.mark.asyncio
@respx.mock
async def test_create_board_posts_full_body(service):
    route = respx.post(f"{V2}/space/S1/board").mock(return_value=Response(200, json={"id": "b1"}))

    async with service:
        board = await service.create_board({"space_id": "S1", "name": "Kanban"})

    assert board == {"id": "b1"}
    assert json.loads(route.calls[0].request.content) == {"space_id": "S1", "name": "Kanban"}


@pytest.mark.asyncio
@respx.mock
async def test_task_shortcuts_delegate_to_task_service(service):
    create = respx.post(f"{V2}/list/L1/task").mock(return_value=Response(200, json={"id": "t"}))
    update = respx.put(f"{V2}/task/t").mock(return_value=Response(200, json={"id": "t"}))

    async with service:
        await service.create_task({"list_id": "L1", "name": "a"})
        await service.update_task("t", {"name": "b"})

    assert create.called
    assert json.loads(update.calls[0].request.content) == {"name": "b"}
