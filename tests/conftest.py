"""
Shared fixtures: in-memory repositories, a recording notifier and
confirmation stubs.
"""
import asyncio
import itertools
from typing import Optional

import pytest

from settings_admin.container import Container
from settings_admin.domain.branch import Branch
from settings_admin.domain.category import Category
from settings_admin.errors import RemoteFailure
from settings_admin.repositories.interfaces.branch_repository import IBranchRepository
from settings_admin.repositories.interfaces.category_repository import ICategoryRepository
from settings_admin.ui.notifier import Notifier


class RecordingNotifier(Notifier):
    """Keeps every notification as (kind, message)."""

    def __init__(self):
        self.events: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.events.append(("success", message))

    def error(self, message: str) -> None:
        self.events.append(("error", message))

    @property
    def errors(self) -> list[str]:
        return [m for kind, m in self.events if kind == "error"]

    @property
    def successes(self) -> list[str]:
        return [m for kind, m in self.events if kind == "success"]


class _FakeRepository:
    """In-memory collection; ``fail`` makes every call raise RemoteFailure.

    ``gate`` is an optional asyncio.Event every mutating call waits on.
    """

    entity_cls = None

    def __init__(self, items=()):
        self.items = list(items)
        self.calls: list[tuple] = []
        self.fail = False
        self.gate: Optional[asyncio.Event] = None
        self._ids = itertools.count(1)

    async def _enter(self, *call):
        self.calls.append(call)
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise RemoteFailure("Internal Server Error", status_code=500)

    def _find(self, entity_id: str):
        for item in self.items:
            if item.id == entity_id:
                return item
        raise RemoteFailure("Not found", status_code=404)

    async def list_all(self):
        await self._enter("list_all")
        return list(self.items)

    async def list_active(self):
        await self._enter("list_active")
        return [item for item in self.items if item.is_active]

    async def get(self, entity_id: str):
        await self._enter("get", entity_id)
        return self._find(entity_id)

    async def create(self, draft):
        await self._enter("create", draft.model_dump())
        entity = self.entity_cls(id=f"new{next(self._ids)}", **draft.model_dump())
        self.items.insert(0, entity)
        return entity

    async def update(self, entity_id: str, draft):
        await self._enter("update", entity_id, draft.model_dump(exclude_unset=True))
        current = self._find(entity_id)
        data = {**current.__dict__, **draft.model_dump(exclude_unset=True)}
        entity = self.entity_cls(**data)
        self.items = [entity if i.id == entity_id else i for i in self.items]
        return entity

    async def delete(self, entity_id: str):
        await self._enter("delete", entity_id)
        self._find(entity_id)
        self.items = [i for i in self.items if i.id != entity_id]
        return "deleted"

    async def toggle_status(self, entity_id: str):
        await self._enter("toggle_status", entity_id)
        current = self._find(entity_id)
        data = {**current.__dict__, "is_active": not current.is_active}
        entity = self.entity_cls(**data)
        self.items = [entity if i.id == entity_id else i for i in self.items]
        return entity

    def call_names(self) -> list[str]:
        return [c[0] for c in self.calls]


class FakeCategoryRepository(_FakeRepository, ICategoryRepository):
    entity_cls = Category


class FakeBranchRepository(_FakeRepository, IBranchRepository):
    entity_cls = Branch


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def category_repo() -> FakeCategoryRepository:
    return FakeCategoryRepository()


@pytest.fixture
def branch_repo() -> FakeBranchRepository:
    return FakeBranchRepository()


@pytest.fixture
def container(category_repo, branch_repo) -> Container:
    return Container(categories=category_repo, branches=branch_repo)


def make_category(id: str, name: str, value: str, **kwargs) -> Category:
    return Category(id=id, name=name, value=value, **kwargs)


def make_branch(id: str, name: str, **kwargs) -> Branch:
    return Branch(id=id, name=name, **kwargs)
