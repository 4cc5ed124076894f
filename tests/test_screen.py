"""
Tests for the settings screen: gate, concurrent load, deletion and status toggle.
"""
import asyncio

import httpx
import pytest

from settings_admin.constants.messages import Messages
from settings_admin.errors import AccessDenied
from settings_admin.repositories.http.factory import create_http_container
from settings_admin.screen import SettingsScreen

from conftest import make_branch, make_category


def confirm_yes(message: str) -> bool:
    return True


def confirm_no(message: str) -> bool:
    return False


@pytest.mark.asyncio
async def test_mount_requires_admin(container, notifier, category_repo, branch_repo):
    screen = SettingsScreen(container, notifier, confirm_yes)

    with pytest.raises(AccessDenied):
        await screen.mount("staff")
    with pytest.raises(AccessDenied):
        await screen.mount(None)

    assert category_repo.calls == []
    assert branch_repo.calls == []


@pytest.mark.asyncio
async def test_mount_loads_both_collections(container, notifier, category_repo, branch_repo):
    category_repo.items = [make_category("1", "Dairy", "dairy")]
    branch_repo.items = [make_branch("b1", "Downtown")]
    screen = SettingsScreen(container, notifier, confirm_yes)
    assert screen.loading

    await screen.mount("admin")

    assert not screen.loading
    assert [c.id for c in screen.categories] == ["1"]
    assert [b.id for b in screen.branches] == ["b1"]
    assert notifier.events == []


@pytest.mark.asyncio
async def test_load_issues_both_requests_concurrently(container, notifier, category_repo, branch_repo):
    both_started = asyncio.Event()
    started = []

    async def list_categories():
        started.append("categories")
        if len(started) == 2:
            both_started.set()
        await both_started.wait()
        return []

    async def list_branches():
        started.append("branches")
        if len(started) == 2:
            both_started.set()
        await both_started.wait()
        return []

    category_repo.list_all = list_categories
    branch_repo.list_all = list_branches
    screen = SettingsScreen(container, notifier, confirm_yes)

    assert await asyncio.wait_for(screen.load(), timeout=1)
    assert sorted(started) == ["branches", "categories"]


@pytest.mark.asyncio
async def test_load_failure_reports_once_and_leaves_loading(container, notifier, category_repo, branch_repo):
    category_repo.fail = True
    branch_repo.fail = True
    screen = SettingsScreen(container, notifier, confirm_yes)

    assert await screen.load() is False

    assert not screen.loading
    assert notifier.errors == [Messages.LOAD_FAILED]
    assert screen.categories.items == ()
    assert screen.branches.items == ()


@pytest.mark.asyncio
async def test_load_failure_on_one_side_keeps_the_other(container, notifier, category_repo, branch_repo):
    category_repo.items = [make_category("1", "Dairy", "dairy")]
    branch_repo.fail = True
    screen = SettingsScreen(container, notifier, confirm_yes)

    await screen.load()

    assert notifier.errors == [Messages.LOAD_FAILED]
    assert len(screen.categories) == 1
    assert len(screen.branches) == 0


@pytest.mark.asyncio
async def test_declined_delete_makes_no_call(container, notifier, category_repo):
    category_repo.items = [make_category("1", "Dairy", "dairy")]
    prompts = []

    def decline(message):
        prompts.append(message)
        return False

    screen = SettingsScreen(container, notifier, decline)
    await screen.load()
    category_repo.calls.clear()

    result = await screen.delete_category("1")

    assert result.status == "rejected"
    assert prompts == [Messages.CATEGORY_DELETE_CONFIRM]
    assert category_repo.calls == []
    assert [c.id for c in screen.categories] == ["1"]
    assert notifier.events == []


@pytest.mark.asyncio
async def test_confirmed_delete_removes_entry(container, notifier, branch_repo):
    branch_repo.items = [make_branch("b1", "Downtown"), make_branch("b2", "Uptown")]
    screen = SettingsScreen(container, notifier, confirm_yes)
    await screen.load()

    result = await screen.delete_branch("b1")

    assert result.ok
    assert [b.id for b in screen.branches] == ["b2"]
    assert notifier.successes == [Messages.BRANCH_DELETED]


@pytest.mark.asyncio
async def test_failed_delete_leaves_list_untouched(container, notifier, category_repo):
    category_repo.items = [make_category("1", "Dairy", "dairy")]
    screen = SettingsScreen(container, notifier, confirm_yes)
    await screen.load()
    category_repo.fail = True

    result = await screen.delete_category("1")

    assert result.status == "remote_error"
    assert [c.id for c in screen.categories] == ["1"]
    assert notifier.errors == [Messages.CATEGORY_DELETE_FAILED]


@pytest.mark.asyncio
async def test_toggle_status_patches_in_place(container, notifier, category_repo, branch_repo):
    category_repo.items = [make_category("1", "Dairy", "dairy"), make_category("2", "Frozen", "frozen")]
    branch_repo.items = [make_branch("b1", "Downtown")]
    screen = SettingsScreen(container, notifier, confirm_yes)
    await screen.load()

    assert (await screen.toggle_category_status("2")).ok
    assert (await screen.toggle_branch_status("b1")).ok

    assert [(c.id, c.is_active) for c in screen.categories] == [("1", True), ("2", False)]
    assert screen.branches.find("b1").is_active is False

    branch_repo.fail = True
    result = await screen.toggle_branch_status("b1")
    assert result.status == "remote_error"
    assert screen.branches.find("b1").is_active is False
    assert notifier.errors == [Messages.BRANCH_TOGGLE_FAILED]


@pytest.mark.asyncio
async def test_create_over_http_end_to_end(notifier):
    created = {"_id": "a1", "name": "Frozen", "value": "frozen", "description": "", "isActive": True}
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.method, request.url.path))
        if request.url.path.endswith("/categories/all"):
            return httpx.Response(200, json={"categories": [], "total": 0})
        if request.url.path.endswith("/branches/all"):
            return httpx.Response(200, json={"branches": [], "total": 0})
        if request.method == "POST":
            return httpx.Response(201, json={"message": "created", "category": created})
        return httpx.Response(404, json={"message": "not found"})

    container = create_http_container(
        base_url="http://api.test/api", token="t", transport=httpx.MockTransport(handler)
    )
    screen = SettingsScreen(container, notifier, confirm_yes)
    await screen.mount("admin")

    form = screen.category_form
    form.open_create()
    form.set_field("name", "Frozen")
    form.set_field("value", "frozen")
    result = await form.submit()
    await container.aclose()

    assert result.ok
    assert [(c.id, c.name, c.value) for c in screen.categories] == [("a1", "Frozen", "frozen")]
    assert ("POST", "/api/settings/categories") in calls


@pytest.mark.asyncio
async def test_create_branch_with_bracketed_name_over_http(notifier):
    created = {"_id": "b9", "name": "Main [/i]", "isActive": True}

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/categories/all"):
            return httpx.Response(200, json={"categories": [], "total": 0})
        if request.url.path.endswith("/branches/all"):
            return httpx.Response(200, json={"branches": [], "total": 0})
        if request.method == "POST" and request.url.path.endswith("/settings/branches"):
            return httpx.Response(201, json={"message": "created", "branch": created})
        return httpx.Response(404, json={"message": "not found"})

    container = create_http_container(
        base_url="http://api.test/api", token="t", transport=httpx.MockTransport(handler)
    )
    screen = SettingsScreen(container, notifier, confirm_yes)
    await screen.mount("admin")

    form = screen.branch_form
    form.open_create()
    form.set_field("name", "Main [/i]")
    result = await form.submit()
    await container.aclose()

    assert result.ok
    assert [(b.id, b.name) for b in screen.branches] == [("b9", "Main [/i]")]
    assert notifier.successes == [Messages.BRANCH_CREATED]
