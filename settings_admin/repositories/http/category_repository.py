"""HTTP implementation of CategoryRepository."""

from ..interfaces.category_repository import ICategoryRepository
from ...config import logger as log
from ...constants.endpoints import CategoryEndpoints
from ...domain.category import Category
from ...errors import RemoteFailure
from ...models.category import CategoryDraft
from .connection import HTTPConnection, unwrap


def _to_category(data) -> Category:
    try:
        return Category.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise RemoteFailure(f"Malformed category: {e}") from e


class HTTPCategoryRepository(ICategoryRepository):
    """Category repository backed by the /settings/categories endpoints."""

    def __init__(self, connection: HTTPConnection):
        self._conn = connection

    async def _list(self, path: str) -> list[Category]:
        data = await self._conn.request("GET", path)
        items = unwrap(data, "categories")
        if not isinstance(items, list):
            raise RemoteFailure("Malformed response: 'categories' is not a list")
        return [_to_category(item) for item in items]

    async def list_all(self) -> list[Category]:
        """Gets all categories, active and inactive."""
        log.debug("repo.category", "list_all")
        results = await self._list(CategoryEndpoints.ALL)
        log.debug("repo.category", "list_all result", count=len(results))
        return results

    async def list_active(self) -> list[Category]:
        """Gets active categories only."""
        log.debug("repo.category", "list_active")
        return await self._list(CategoryEndpoints.ACTIVE)

    async def get(self, category_id: str) -> Category:
        """Gets a category by ID."""
        log.debug("repo.category", "get", category_id=category_id)
        data = await self._conn.request("GET", CategoryEndpoints.item(category_id))
        return _to_category(unwrap(data, "category"))

    async def create(self, draft: CategoryDraft) -> Category:
        """Creates a category."""
        log.debug("repo.category", "create", value=draft.value)
        data = await self._conn.request(
            "POST", CategoryEndpoints.COLLECTION, json=draft.to_payload()
        )
        category = _to_category(unwrap(data, "category"))
        log.info("repo.category", "created", category_id=category.id, value=category.value)
        return category

    async def update(self, category_id: str, draft: CategoryDraft) -> Category:
        """Updates the fields set on the draft."""
        payload = draft.to_payload(partial=True)
        log.debug("repo.category", "update", category_id=category_id, fields=list(payload))
        data = await self._conn.request(
            "PUT", CategoryEndpoints.item(category_id), json=payload
        )
        category = _to_category(unwrap(data, "category"))
        log.info("repo.category", "updated", category_id=category.id)
        return category

    async def delete(self, category_id: str) -> str:
        """Deletes a category."""
        log.debug("repo.category", "delete", category_id=category_id)
        data = await self._conn.request("DELETE", CategoryEndpoints.item(category_id))
        message = data.get("message", "") if isinstance(data, dict) else ""
        log.info("repo.category", "deleted", category_id=category_id)
        return message

    async def toggle_status(self, category_id: str) -> Category:
        """Flips the active flag."""
        log.debug("repo.category", "toggle_status", category_id=category_id)
        data = await self._conn.request(
            "PATCH", CategoryEndpoints.toggle_status(category_id)
        )
        category = _to_category(unwrap(data, "category"))
        log.info(
            "repo.category",
            "status toggled",
            category_id=category.id,
            is_active=category.is_active,
        )
        return category
