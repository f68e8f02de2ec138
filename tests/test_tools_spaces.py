import json

import pytest
import respx
from httpx import Response
from clickup_mcp.service import ClickUpService
from clickup_mcp.tools.custom_fields import (
    handle_get_custom_fields,
    handle_remove_task_custom_field_value,
    handle_set_task_custom_field_value,
)
from clickup_mcp.tools.folders import (
    handle_create_folder,
    handle_delete_folder,
    handle_get_folders,
    handle_update_folder,
)
from clickup_mcp.tools.spaces import (
    handle_create_space,
    handle_delete_space,
    handle_get_spaces,
    handle_update_space,
)

V2 = "https://api.clickup.com/api/v2"


@pytest.fixture
def service():
    return ClickUpService("mock-token")


def _text(result):
    return result["content"][0]["text"]


@pytest.mark.asyncio
@respx.mock
async def test_get_spaces_scenario(service):
    spaces = [{"id": "space1", "name": "Space Alpha"}]
    route = respx.get(f"{V2}/team/team_123/space").mock(
        return_value=Response(200, json={"spaces": spaces})
    )

    async with service:
        body = await service.spaces.get_spaces("team_123")
        result = await handle_get_spaces(service, {"team_id": "team_123"})

    assert body == {"spaces": spaces}
    assert json.loads(_text(result)) == spaces
    assert all("archived" not in call.request.url.params for call in route.calls)


@pytest.mark.asyncio
@respx.mock
async def test_create_space_copies_only_sent_fields(service):
    route = respx.post(f"{V2}/team/t1/space").mock(
        return_value=Response(200, json={"id": "s1", "name": "Eng"})
    )

    async with service:
        await handle_create_space(
            service, {"team_id": "t1", "name": "Eng", "features": {"due_dates": {"enabled": True}}}
        )

    assert json.loads(route.calls[0].request.content) == {
        "name": "Eng",
        "features": {"due_dates": {"enabled": True}},
    }


@pytest.mark.asyncio
@respx.mock
async def test_update_space_passes_unknown_fields_through(service):
    route = respx.put(f"{V2}/space/s1").mock(return_value=Response(200, json={"id": "s1"}))

    async with service:
        await handle_update_space(
            service, {"space_id": "s1", "private": False, "multiple_assignees": True}
        )

    assert json.loads(route.calls[0].request.content) == {
        "private": False,
        "multiple_assignees": True,
    }


@pytest.mark.asyncio
@respx.mock
async def test_delete_space_message(service):
    respx.delete(f"{V2}/space/s1").mock(return_value=Response(200, json={}))

    async with service:
        result = await handle_delete_space(service, {"space_id": "s1"})

    assert _text(result) == "Space s1 deleted successfully."


@pytest.mark.asyncio
@respx.mock
async def test_folder_tools(service):
    respx.get(f"{V2}/space/s1/folder").mock(
        return_value=Response(200, json={"folders": [{"id": "f1"}]})
    )
    create = respx.post(f"{V2}/space/s1/folder").mock(
        return_value=Response(200, json={"id": "f2", "name": "Q3"})
    )
    update = respx.put(f"{V2}/folder/f2").mock(
        return_value=Response(200, json={"id": "f2", "name": "Q4"})
    )
    respx.delete(f"{V2}/folder/f2").mock(return_value=Response(200, json={}))

    async with service:
        listed = await handle_get_folders(service, {"space_id": "s1", "archived": False})
        created = await handle_create_folder(service, {"space_id": "s1", "name": "Q3"})
        updated = await handle_update_folder(service, {"folder_id": "f2", "name": "Q4"})
        deleted = await handle_delete_folder(service, {"folder_id": "f2"})

    assert json.loads(_text(listed)) == [{"id": "f1"}]
    assert json.loads(_text(created))["name"] == "Q3"
    assert json.loads(create.calls[0].request.content) == {"name": "Q3"}
    assert json.loads(update.calls[0].request.content) == {"name": "Q4"}
    assert json.loads(_text(updated))["name"] == "Q4"
    assert _text(deleted) == "Folder f2 deleted successfully."


@pytest.mark.asyncio
@respx.mock
async def test_custom_field_tools(service):
    respx.get(f"{V2}/list/L1/field").mock(
        return_value=Response(200, json={"fields": [{"id": "cf1"}]})
    )
    set_route = respx.post(f"{V2}/task/T1/field/cf1").mock(return_value=Response(200, json={}))
    respx.delete(f"{V2}/task/T1/field/cf1").mock(return_value=Response(200, json={}))

    async with service:
        listed = await handle_get_custom_fields(service, {"list_id": "L1"})
        set_result = await handle_set_task_custom_field_value(
            service, {"task_id": "T1", "field_id": "cf1", "value": None}
        )
        removed = await handle_remove_task_custom_field_value(
            service, {"task_id": "T1", "field_id": "cf1"}
        )

    assert json.loads(_text(listed)) == [{"id": "cf1"}]
    assert json.loads(set_route.calls[0].request.content) == {"value": None}
    assert _text(set_result) == "Successfully set custom field cf1 for task T1."
    assert _text(removed) == "Successfully removed custom field cf1 for task T1."
