import json
from pathlib import Path

import pytest
import respx
from httpx import Response
from clickup_mcp.client import ClickUpClient
from clickup_mcp.core.errors import ClickUpServiceError
from clickup_mcp.services import (
    AttachmentService,
    ChecklistService,
    CommentService,
    DependencyService,
    TimeTrackingService,
)

V2 = "https://api.clickup.com/api/v2"


@pytest.fixture
def client():
    return ClickUpClient(token="mock-token")


# --- Comments --------------------------------------------------------------- #


@pytest.mark.asyncio
@respx.mock
async def test_comment_paths(client):
    create = respx.post(f"{V2}/task/T1/comment").mock(return_value=Response(200, json={"id": 9}))
    listing = respx.get(f"{V2}/task/T1/comment").mock(
        return_value=Response(200, json={"comments": []})
    )
    update = respx.put(f"{V2}/comment/9").mock(return_value=Response(200, json={}))

    async with client:
        service = CommentService(client)
        await service.create_comment("T1", {"comment_text": "hi", "notify_all": True})
        assert await service.get_comments("T1") == {"comments": []}
        await service.update_comment("9", {"comment_text": "edit", "resolved": True})

    assert json.loads(create.calls[0].request.content) == {"comment_text": "hi", "notify_all": True}
    assert listing.called
    assert json.loads(update.calls[0].request.content) == {"comment_text": "edit", "resolved": True}


@pytest.mark.asyncio
@respx.mock
async def test_delete_comment_error_template(client):
    respx.delete(f"{V2}/comment/9").mock(return_value=Response(404, json={"err": "gone"}))

    async with client:
        with pytest.raises(ClickUpServiceError) as exc:
            await CommentService(client).delete_comment("9")

    assert str(exc.value) == "Failed to delete comment from ClickUp"


# --- Checklists ------------------------------------------------------------- #


@pytest.mark.asyncio
@respx.mock
async def test_checklist_item_paths(client):
    create = respx.post(f"{V2}/checklist/CL1/checklist_item").mock(
        return_value=Response(200, json={"checklist": {"id": "CL1"}})
    )
    update = respx.put(f"{V2}/checklist/CL1/checklist_item/I1").mock(
        return_value=Response(200, json={"checklist": {"id": "CL1"}})
    )
    delete = respx.delete(f"{V2}/checklist/CL1/checklist_item/I1").mock(
        return_value=Response(200, json={})
    )

    async with client:
        service = ChecklistService(client)
        await service.create_checklist_item("CL1", {"name": "step"})
        await service.update_checklist_item("CL1", "I1", {"resolved": True})
        await service.delete_checklist_item("CL1", "I1")

    assert json.loads(create.calls[0].request.content) == {"name": "step"}
    assert json.loads(update.calls[0].request.content) == {"resolved": True}
    assert delete.called


@pytest.mark.asyncio
@respx.mock
async def test_create_checklist_error_template(client):
    respx.post(f"{V2}/task/T1/checklist").mock(return_value=Response(500, json={"err": "x"}))

    async with client:
        with pytest.raises(ClickUpServiceError) as exc:
            await ChecklistService(client).create_checklist("T1", {"name": "QA"})

    assert str(exc.value) == "Failed to create checklist in ClickUp"


# --- Dependencies ----------------------------------------------------------- #


@pytest.mark.asyncio
@respx.mock
async def test_add_dependency_sends_relation_body(client):
    route = respx.post(f"{V2}/task/T1/dependency").mock(return_value=Response(200, json={}))

    async with client:
        await DependencyService(client).add_dependency("T1", depends_on="T0")

    assert json.loads(route.calls[0].request.content) == {"depends_on": "T0"}


@pytest.mark.asyncio
@respx.mock
async def test_delete_dependency_sends_relation_as_query(client):
    route = respx.delete(f"{V2}/task/T1/dependency").mock(return_value=Response(200, json={}))

    async with client:
        await DependencyService(client).delete_dependency("T1", dependency_of="T2")

    req = route.calls[0].request
    assert req.url.params["dependency_of"] == "T2"
    assert "depends_on" not in req.url.params
    assert not req.content


@pytest.mark.asyncio
@respx.mock
async def test_task_link_paths(client):
    add = respx.post(f"{V2}/task/T1/link/T2").mock(return_value=Response(200, json={}))
    remove = respx.delete(f"{V2}/task/T1/link/T2").mock(return_value=Response(200, json={}))

    async with client:
        service = DependencyService(client)
        await service.add_task_link("T1", "T2")
        await service.delete_task_link("T1", "T2")

    assert add.called and remove.called


# --- Time tracking ---------------------------------------------------------- #


@pytest.mark.asyncio
@respx.mock
async def test_create_time_entry_body_excludes_task_id(client):
    route = respx.post(f"{V2}/task/T1/time").mock(return_value=Response(200, json={"data": {}}))

    async with client:
        await TimeTrackingService(client).create_time_entry(
            "T1", {"task_id": "T1", "duration": 60000, "description": "review"}
        )

    assert json.loads(route.calls[0].request.content) == {
        "duration": 60000,
        "description": "review",
    }


@pytest.mark.asyncio
@respx.mock
async def test_update_time_entry_body_excludes_path_ids(client):
    route = respx.put(f"{V2}/team/W1/time_entries/E1").mock(return_value=Response(200, json={}))

    async with client:
        await TimeTrackingService(client).update_time_entry(
            "W1", "E1", {"team_id": "W1", "timer_id": "E1", "duration": 1}
        )

    assert json.loads(route.calls[0].request.content) == {"duration": 1}


@pytest.mark.asyncio
@respx.mock
async def test_timer_paths(client):
    start = respx.post(f"{V2}/team/W1/time_entries/start").mock(
        return_value=Response(200, json={"data": {"id": "E2"}})
    )
    stop = respx.post(f"{V2}/team/W1/time_entries/stop").mock(
        return_value=Response(200, json={"data": {"id": "E2"}})
    )
    current = respx.get(f"{V2}/team/W1/time_entries/current").mock(
        return_value=Response(200, json={"data": None})
    )

    async with client:
        service = TimeTrackingService(client)
        await service.start_timer("W1", "T1")
        await service.start_timer("W1", "T1", "pairing")
        await service.stop_timer("W1")
        assert await service.get_current_timer("W1") == {"data": None}

    assert json.loads(start.calls[0].request.content) == {"tid": "T1"}
    assert json.loads(start.calls[1].request.content) == {"tid": "T1", "description": "pairing"}
    assert stop.called and current.called


# --- Attachments ------------------------------------------------------------ #


@pytest.mark.asyncio
@respx.mock
async def test_upload_attachment_sends_file_and_name(client, tmp_path: Path):
    f = tmp_path / "report.csv"
    f.write_text("a,b\n1,2\n")
    route = respx.post(f"{V2}/task/T1/attachment").mock(
        return_value=Response(200, json={"id": "A1", "title": "final.csv"})
    )

    async with client:
        attachment = await AttachmentService(client).upload_attachment(
            "T1", str(f), "final.csv"
        )

    assert attachment["id"] == "A1"
    req = route.calls[0].request
    assert b'name="attachment"; filename="report.csv"' in req.content
    assert b'name="filename"' in req.content
    assert b"final.csv" in req.content


@pytest.mark.asyncio
async def test_upload_missing_file_uses_template(client, tmp_path: Path):
    async with client:
        with pytest.raises(ClickUpServiceError) as exc:
            await AttachmentService(client).upload_attachment("T1", str(tmp_path / "nope"))

    assert str(exc.value) == "Failed to upload attachment in ClickUp"


@pytest.mark.asyncio
@respx.mock
async def test_delete_attachment_error_template(client):
    respx.delete(f"{V2}/attachment/A1").mock(return_value=Response(400, json={"err": "x"}))

    async with client:
        with pytest.raises(ClickUpServiceError) as exc:
            await AttachmentService(client).delete_attachment("A1")

    assert str(exc.value) == "Failed to delete attachment from ClickUp"
