"""Interface for branch repository."""

from abc import ABC, abstractmethod

from ...domain.branch import Branch
from ...models.branch import BranchDraft


class IBranchRepository(ABC):
    """Contract for branch data access."""

    @abstractmethod
    async def list_all(self) -> list[Branch]:
        """Gets all branches, active and inactive."""
        pass

    @abstractmethod
    async def list_active(self) -> list[Branch]:
        """Gets active branches only."""
        pass

    @abstractmethod
    async def get(self, branch_id: str) -> Branch:
        """Gets a branch by ID."""
        pass

    @abstractmethod
    async def create(self, draft: BranchDraft) -> Branch:
        """Creates a branch and returns the server's canonical version."""
        pass

    @abstractmethod
    async def update(self, branch_id: str, draft: BranchDraft) -> Branch:
        """Updates the fields set on the draft and returns the updated branch."""
        pass

    @abstractmethod
    async def delete(self, branch_id: str) -> str:
        """Deletes a branch. Returns the server's confirmation message."""
        pass

    @abstractmethod
    async def toggle_status(self, branch_id: str) -> Branch:
        """Flips the active flag and returns the updated branch."""
        pass
