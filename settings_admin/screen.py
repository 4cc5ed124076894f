"""
Settings screen core: categories and branches management.

Owns one list synchronizer and one form session per entity type. The
front end renders from this state and forwards user actions to it.
"""

import asyncio
from typing import Optional

from .config import logger as log
from .constants.messages import Messages
from .container import Container
from .domain.branch import Branch
from .domain.category import Category
from .domain.result import SubmitResult
from .errors import RemoteFailure
from .forms.branch_form import BranchFormSession
from .forms.category_form import CategoryFormSession
from .sync.list_state import ListSynchronizer
from .ui.access import ADMIN_ROLE, require_role
from .ui.notifier import Confirmer, Notifier


class SettingsScreen:
    """State behind the admin settings page."""

    def __init__(self, container: Container, notifier: Notifier, confirm: Confirmer):
        self._container = container
        self._notifier = notifier
        self._confirm = confirm

        self.categories: ListSynchronizer[Category] = ListSynchronizer(
            container.categories, context="list.category"
        )
        self.branches: ListSynchronizer[Branch] = ListSynchronizer(
            container.branches, context="list.branch"
        )
        self.category_form = CategoryFormSession(container.categories, self.categories, notifier)
        self.branch_form = BranchFormSession(container.branches, self.branches, notifier)

        self.loading = True

    async def mount(self, role: Optional[str]) -> None:
        """Runs the admin gate, then the initial load.

        Raises:
            AccessDenied: If ``role`` is not the admin role.
        """
        require_role(role, ADMIN_ROLE)
        await self.load()

    async def load(self) -> bool:
        """Loads both collections concurrently.

        Returns:
            bool: True if both loads succeeded. Any failure is reported
                with a single notification.
        """
        self.loading = True
        try:
            results = await asyncio.gather(
                self.categories.load(),
                self.branches.load(),
                return_exceptions=True,
            )
        finally:
            self.loading = False

        failures = [r for r in results if isinstance(r, BaseException)]
        for failure in failures:
            if not isinstance(failure, RemoteFailure):
                raise failure
        if failures:
            log.error("screen", "load failed", errors=[str(f) for f in failures])
            self._notifier.error(Messages.LOAD_FAILED)
            return False
        log.info(
            "screen",
            "loaded",
            categories=len(self.categories),
            branches=len(self.branches),
        )
        return True

    # -----------------------------------------------------------------
    # Deletion
    # -----------------------------------------------------------------

    async def _delete(
        self,
        synchronizer: ListSynchronizer,
        repository,
        entity_id: str,
        confirm_message: str,
        deleted_message: str,
        failed_message: str,
    ) -> SubmitResult:
        if not self._confirm(confirm_message):
            log.debug("screen", "delete declined", id=entity_id)
            return SubmitResult.rejected()
        try:
            await repository.delete(entity_id)
        except RemoteFailure as e:
            log.error("screen", failed_message, id=entity_id, error=e)
            self._notifier.error(failed_message)
            return SubmitResult.remote_error(failed_message)
        synchronizer.apply_delete(entity_id)
        self._notifier.success(deleted_message)
        return SubmitResult.success(message=deleted_message)

    async def delete_category(self, category_id: str) -> SubmitResult:
        """Deletes a category after confirmation."""
        return await self._delete(
            self.categories,
            self._container.categories,
            category_id,
            Messages.CATEGORY_DELETE_CONFIRM,
            Messages.CATEGORY_DELETED,
            Messages.CATEGORY_DELETE_FAILED,
        )

    async def delete_branch(self, branch_id: str) -> SubmitResult:
        """Deletes a branch after confirmation."""
        return await self._delete(
            self.branches,
            self._container.branches,
            branch_id,
            Messages.BRANCH_DELETE_CONFIRM,
            Messages.BRANCH_DELETED,
            Messages.BRANCH_DELETE_FAILED,
        )

    # -----------------------------------------------------------------
    # Status toggle
    # -----------------------------------------------------------------

    async def _toggle(
        self,
        synchronizer: ListSynchronizer,
        repository,
        entity_id: str,
        changed_message: str,
        failed_message: str,
    ) -> SubmitResult:
        try:
            entity = await repository.toggle_status(entity_id)
        except RemoteFailure as e:
            log.error("screen", failed_message, id=entity_id, error=e)
            self._notifier.error(failed_message)
            return SubmitResult.remote_error(failed_message)
        synchronizer.apply_update(entity)
        self._notifier.success(changed_message)
        return SubmitResult.success(entity, changed_message)

    async def toggle_category_status(self, category_id: str) -> SubmitResult:
        """Activates or deactivates a category."""
        return await self._toggle(
            self.categories,
            self._container.categories,
            category_id,
            Messages.CATEGORY_STATUS_CHANGED,
            Messages.CATEGORY_TOGGLE_FAILED,
        )

    async def toggle_branch_status(self, branch_id: str) -> SubmitResult:
        """Activates or deactivates a branch."""
        return await self._toggle(
            self.branches,
            self._container.branches,
            branch_id,
            Messages.BRANCH_STATUS_CHANGED,
            Messages.BRANCH_TOGGLE_FAILED,
        )
