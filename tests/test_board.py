"""
Tests for the client-side task board.
"""

from datetime import datetime, timezone

import pytest

from taskboard.client.api_client import TaskApiError
from taskboard.client.board import TaskBoard

from tests.fakes import FakeTaskApi, make_task

DUE = datetime(2024, 3, 20, tzinfo=timezone.utc)


def seeded_api(count):
    return FakeTaskApi([make_task(f"{n:04d}", f"Task {n}") for n in range(1, count + 1)])


@pytest.fixture
def alerts():
    return []


def make_board(api, alerts, page_size=10):
    return TaskBoard(api, page_size=page_size, alert=alerts.append)


@pytest.mark.asyncio
async def test_load_fetches_first_page(alerts):
    api = seeded_api(3)
    board = make_board(api, alerts)

    assert await board.load() is True

    assert [task.id for task in board.task_list] == ["0001", "0002", "0003"]
    assert board.current_page == 1
    assert board.total_pages == 1
    assert api.list_calls == [(1, 10)]
    assert board.loading is False


@pytest.mark.asyncio
async def test_deleting_last_task_on_page_falls_back_to_previous_page(alerts):
    api = seeded_api(11)
    board = make_board(api, alerts)
    await board.load()
    await board.next_page()
    assert board.current_page == 2
    assert [task.id for task in board.task_list] == ["0011"]
    api.list_calls.clear()

    assert await board.delete_task("0011") is True

    assert api.list_calls == [(2, 10), (1, 10)]
    assert board.current_page == 1
    assert board.total_pages == 1
    assert len(board.task_list) == 10
    assert alerts == []


@pytest.mark.asyncio
async def test_empty_first_page_does_not_fall_back(alerts):
    api = FakeTaskApi()
    board = make_board(api, alerts)

    await board.load()

    assert api.list_calls == [(1, 10)]
    assert board.task_list == []
    assert board.total_pages == 0
    assert board.show_pagination is False


@pytest.mark.asyncio
async def test_pagination_controls(alerts):
    board = make_board(seeded_api(25), alerts)
    await board.load()

    assert board.show_pagination is True
    assert board.can_go_previous is False
    assert board.can_go_next is True
    assert await board.previous_page() is False

    await board.next_page()
    await board.next_page()

    assert board.current_page == 3
    assert board.can_go_next is False
    assert await board.next_page() is False
    assert board.can_go_previous is True


@pytest.mark.asyncio
async def test_fetch_failure_alerts_and_keeps_state(alerts):
    api = seeded_api(2)
    board = make_board(api, alerts)
    await board.load()
    api.fail_next = TaskApiError("Could not reach server")

    assert await board.fetch_tasks() is False

    assert alerts == ["Failed to fetch tasks."]
    assert len(board.task_list) == 2
    assert board.loading is False


@pytest.mark.asyncio
async def test_add_task_requires_title_and_due_date(alerts):
    api = FakeTaskApi()
    board = make_board(api, alerts)

    assert await board.add_task("", "D", DUE) is False
    assert await board.add_task("T", "D", None) is False

    assert alerts == ["Please enter a title.", "Please select a due date."]
    assert api.tasks == {}
    assert api.list_calls == []


@pytest.mark.asyncio
async def test_add_task_refetches_current_page(alerts):
    api = FakeTaskApi()
    board = make_board(api, alerts)

    assert await board.add_task("T", "", DUE) is True

    assert [task.title for task in board.task_list] == ["T"]
    assert api.list_calls == [(1, 10)]


@pytest.mark.asyncio
async def test_add_task_failure_shows_server_message(alerts):
    api = FakeTaskApi()
    board = make_board(api, alerts)
    api.fail_next = TaskApiError("bad", status_code=500, detail="Failed to create task")

    assert await board.add_task("T", "", DUE) is False
    assert alerts == ["Failed to create task"]


@pytest.mark.asyncio
async def test_update_task_saves_edit_buffer(alerts):
    api = seeded_api(2)
    board = make_board(api, alerts)
    await board.load()

    edit = board.start_edit("0001")
    edit.title = "Renamed"
    assert board.is_editing("0001")

    assert await board.update_task() is True

    assert board.editing is None
    assert board.tasks["0001"].title == "Renamed"
    assert api.tasks["0001"].title == "Renamed"


@pytest.mark.asyncio
async def test_update_of_deleted_task_evicts_it(alerts):
    api = seeded_api(2)
    board = make_board(api, alerts)
    await board.load()
    board.start_edit("0001")
    del api.tasks["0001"]
    api.list_calls.clear()

    assert await board.update_task() is False

    assert alerts == ["Task not found."]
    assert "0001" not in board.tasks
    assert board.editing is None
    assert api.list_calls == []


@pytest.mark.asyncio
async def test_update_with_blank_title_keeps_editing(alerts):
    board = make_board(seeded_api(1), alerts)
    await board.load()
    board.start_edit("0001").title = ""

    assert await board.update_task() is False

    assert alerts == ["Please enter a title."]
    assert board.is_editing("0001")


@pytest.mark.asyncio
async def test_only_one_task_is_edited_at_a_time(alerts):
    board = make_board(seeded_api(2), alerts)
    await board.load()

    board.start_edit("0001")
    board.start_edit("0002")

    assert not board.is_editing("0001")
    assert board.is_editing("0002")

    board.cancel_edit()
    assert board.editing is None


@pytest.mark.asyncio
async def test_delete_of_missing_task_evicts_and_refetches(alerts):
    api = seeded_api(2)
    board = make_board(api, alerts)
    await board.load()
    board.start_edit("0002")
    del api.tasks["0002"]
    api.list_calls.clear()

    assert await board.delete_task("0002") is False

    assert alerts == ["Task not found."]
    assert board.editing is None
    assert [task.id for task in board.task_list] == ["0001"]
    assert api.list_calls == [(1, 10)]


@pytest.mark.asyncio
async def test_delete_failure_keeps_task(alerts):
    api = seeded_api(1)
    board = make_board(api, alerts)
    await board.load()
    api.fail_next = TaskApiError("Could not reach server")

    assert await board.delete_task("0001") is False

    assert alerts == ["Failed to delete task."]
    assert "0001" in board.tasks
