import json

import pytest
import respx
from httpx import Response
from clickup_mcp.service import ClickUpService
from clickup_mcp.tools.boards import handle_create_board
from clickup_mcp.tools.lists import handle_create_list, handle_get_lists
from clickup_mcp.tools.tasks import (
    handle_create_task,
    handle_delete_task,
    handle_get_tasks,
    handle_update_task,
)
from clickup_mcp.tools.teams import handle_get_teams

V2 = "https://api.clickup.com/api/v2"


@pytest.fixture
def service():
    return ClickUpService("mock-token")


def _text(result):
    assert len(result["content"]) == 1
    assert result["content"][0]["type"] == "text"
    return result["content"][0]["text"]


@pytest.mark.asyncio
@respx.mock
async def test_create_task_scenario(service):
    created = {"id": "xyz", "list_id": "123", "name": "Test Task"}
    route = respx.post(f"{V2}/list/123/task").mock(return_value=Response(200, json=created))

    async with service:
        result = await handle_create_task(service, {"list_id": "123", "name": "Test Task"})

    assert json.loads(route.calls[0].request.content) == {"list_id": "123", "name": "Test Task"}
    assert json.loads(_text(result)) == created
    assert "structuredContent" not in result


@pytest.mark.asyncio
@respx.mock
async def test_create_task_due_date_forwarded_as_string(service):
    route = respx.post(f"{V2}/list/123/task").mock(return_value=Response(200, json={"id": "t"}))

    async with service:
        await handle_create_task(
            service,
            {
                "list_id": "123",
                "name": "Ship",
                "due_date": 1700000000000,
                "time_estimate": 3600000,
                "priority": 2,
            },
        )

    body = json.loads(route.calls[0].request.content)
    assert body["due_date"] == "1700000000000"
    assert body["time_estimate"] == "3600000"
    assert body["priority"] == 2


@pytest.mark.asyncio
@respx.mock
async def test_create_task_float_millis_have_no_fraction(service):
    route = respx.post(f"{V2}/list/123/task").mock(return_value=Response(200, json={"id": "t"}))

    async with service:
        await handle_create_task(
            service,
            {
                "list_id": "123",
                "name": "Ship",
                "due_date": 1.7e12,
                "time_estimate": 3600000.0,
            },
        )

    body = json.loads(route.calls[0].request.content)
    assert body["due_date"] == "1700000000000"
    assert body["time_estimate"] == "3600000"


@pytest.mark.asyncio
@respx.mock
async def test_update_task_sends_only_given_fields(service):
    route = respx.put(f"{V2}/task/T1").mock(
        return_value=Response(200, json={"id": "T1", "status": "done"})
    )

    async with service:
        result = await handle_update_task(service, {"task_id": "T1", "status": "done"})

    assert json.loads(route.calls[0].request.content) == {"status": "done"}
    assert json.loads(_text(result))["status"] == "done"


@pytest.mark.asyncio
@respx.mock
async def test_get_tasks_and_delete(service):
    respx.get(f"{V2}/list/L1/task").mock(return_value=Response(200, json={"tasks": [{"id": "a"}]}))
    respx.delete(f"{V2}/task/a").mock(return_value=Response(204))

    async with service:
        listed = await handle_get_tasks(service, {"list_id": "L1"})
        deleted = await handle_delete_task(service, {"task_id": "a"})

    assert json.loads(_text(listed)) == {"tasks": [{"id": "a"}]}
    assert _text(deleted) == "Task a deleted successfully."


@pytest.mark.asyncio
@respx.mock
async def test_get_teams_returns_unwrapped_teams(service):
    respx.get(f"{V2}/team").mock(
        return_value=Response(200, json={"teams": [{"id": "9001", "name": "Acme"}]})
    )

    async with service:
        result = await handle_get_teams(service, {})

    assert json.loads(_text(result)) == [{"id": "9001", "name": "Acme"}]


@pytest.mark.asyncio
@respx.mock
async def test_get_lists_returns_unwrapped_lists(service):
    respx.get(f"{V2}/folder/F1/list").mock(
        return_value=Response(200, json={"lists": [{"id": "L1"}]})
    )

    async with service:
        result = await handle_get_lists(service, {"folder_id": "F1"})

    assert json.loads(_text(result)) == [{"id": "L1"}]


@pytest.mark.asyncio
@respx.mock
async def test_create_list_forwards_optional_fields(service):
    route = respx.post(f"{V2}/folder/F1/list").mock(
        return_value=Response(200, json={"id": "L2", "name": "Sprint 4"})
    )

    async with service:
        result = await handle_create_list(
            service,
            {
                "parent_id": "F1",
                "parent_type": "folder",
                "name": "Sprint 4",
                "due_date": 1700000000000,
                "due_date_time": True,
                "priority": 1,
            },
        )

    assert json.loads(route.calls[0].request.content) == {
        "name": "Sprint 4",
        "due_date": 1700000000000,
        "due_date_time": True,
        "priority": 1,
    }
    assert json.loads(_text(result))["id"] == "L2"


@pytest.mark.asyncio
@respx.mock
async def test_create_board_is_a_board_view_on_the_space(service):
    route = respx.post(f"{V2}/space/S1/view").mock(
        return_value=Response(200, json={"id": "v1", "type": "board", "name": "Kanban"})
    )

    async with service:
        result = await handle_create_board(service, {"space_id": "S1", "name": "Kanban"})

    assert json.loads(route.calls[0].request.content) == {"name": "Kanban", "type": "board"}
    assert json.loads(_text(result))["type"] == "board"
