"""Dependency injection container for repository access."""

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from .repositories.interfaces.branch_repository import IBranchRepository
from .repositories.interfaces.category_repository import ICategoryRepository


@dataclass
class Container:
    """Holds all repository instances for dependency injection."""

    categories: ICategoryRepository
    branches: IBranchRepository
    closer: Optional[Callable[[], Awaitable[None]]] = None

    async def aclose(self) -> None:
        """Releases the resources shared by the repositories."""
        if self.closer is not None:
            await self.closer()


_container: Optional[Container] = None


def get_container() -> Container:
    """Returns the global container instance.

    Raises:
        RuntimeError: If container has not been initialized.
    """
    if _container is None:
        raise RuntimeError(
            "Container not initialized. Call set_container() in the application entry point."
        )
    return _container


def set_container(container: Container) -> None:
    """Sets the global container instance.

    Args:
        container: Container with concrete repository implementations.
    """
    global _container
    _container = container


def reset_container() -> None:
    """Resets the global container. Useful for testing."""
    global _container
    _container = None
