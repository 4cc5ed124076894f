"""Interface for category repository."""

from abc import ABC, abstractmethod

from ...domain.category import Category
from ...models.category import CategoryDraft


class ICategoryRepository(ABC):
    """Contract for category data access.

    Every method raises RemoteFailure when the remote system of record
    cannot complete the call.
    """

    @abstractmethod
    async def list_all(self) -> list[Category]:
        """Gets all categories, active and inactive."""
        pass

    @abstractmethod
    async def list_active(self) -> list[Category]:
        """Gets active categories only."""
        pass

    @abstractmethod
    async def get(self, category_id: str) -> Category:
        """Gets a category by ID."""
        pass

    @abstractmethod
    async def create(self, draft: CategoryDraft) -> Category:
        """Creates a category and returns the server's canonical version."""
        pass

    @abstractmethod
    async def update(self, category_id: str, draft: CategoryDraft) -> Category:
        """Updates the fields set on the draft and returns the updated category."""
        pass

    @abstractmethod
    async def delete(self, category_id: str) -> str:
        """Deletes a category. Returns the server's confirmation message."""
        pass

    @abstractmethod
    async def toggle_status(self, category_id: str) -> Category:
        """Flips the active flag and returns the updated category."""
        pass
