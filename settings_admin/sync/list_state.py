"""
List state for the settings screen.

The collection is a cached, possibly stale copy of the server's. It is
populated by `load` and then patched locally from mutation results, never
re-fetched. The reducers below are pure: they take the current snapshot and
return a new tuple, so they can be tested without a repository.
"""

from typing import Generic, Optional, Protocol, Sequence, TypeVar

from ..config import logger as log
from ..errors import RemoteFailure


class Identified(Protocol):
    id: str


E = TypeVar("E", bound=Identified)


def load(items: Sequence[E]) -> tuple[E, ...]:
    """Replaces the whole collection."""
    return tuple(items)


def apply_create(items: Sequence[E], entity: E) -> tuple[E, ...]:
    """Prepends a newly created entity (newest first).

    A stale copy with the same id is dropped so identities stay unique.
    """
    return (entity,) + tuple(item for item in items if item.id != entity.id)


def apply_update(items: Sequence[E], entity: E) -> tuple[E, ...]:
    """Replaces the entity with the same id in place; no-op if absent."""
    return tuple(entity if item.id == entity.id else item for item in items)


def apply_delete(items: Sequence[E], entity_id: str) -> tuple[E, ...]:
    """Removes the entity with the given id; no-op if absent."""
    return tuple(item for item in items if item.id != entity_id)


class ListSynchronizer(Generic[E]):
    """Holds the current snapshot of one collection.

    ``repository`` only needs an async ``list_all()``.
    """

    def __init__(self, repository, context: str):
        self._repository = repository
        self._context = context
        self._items: tuple[E, ...] = ()

    @property
    def items(self) -> tuple[E, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def find(self, entity_id: str) -> Optional[E]:
        for item in self._items:
            if item.id == entity_id:
                return item
        return None

    async def load(self) -> tuple[E, ...]:
        """Replaces the collection with the server's.

        Raises:
            RemoteFailure: After resetting the collection to empty.
        """
        log.debug(self._context, "load")
        try:
            fetched = await self._repository.list_all()
        except RemoteFailure:
            self._items = ()
            raise
        self._items = load(fetched)
        log.info(self._context, "loaded", count=len(self._items))
        return self._items

    def apply_create(self, entity: E) -> None:
        self._items = apply_create(self._items, entity)
        log.debug(self._context, "apply_create", id=entity.id, count=len(self._items))

    def apply_update(self, entity: E) -> None:
        if self.find(entity.id) is None:
            log.warn(self._context, "apply_update for unknown id", id=entity.id)
        self._items = apply_update(self._items, entity)

    def apply_delete(self, entity_id: str) -> None:
        before = len(self._items)
        self._items = apply_delete(self._items, entity_id)
        log.debug(
            self._context,
            "apply_delete",
            id=entity_id,
            removed=before - len(self._items),
        )
