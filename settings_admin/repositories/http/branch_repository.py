"""HTTP implementation of BranchRepository."""

from ..interfaces.branch_repository import IBranchRepository
from ...config import logger as log
from ...constants.endpoints import BranchEndpoints
from ...domain.branch import Branch
from ...errors import RemoteFailure
from ...models.branch import BranchDraft
from .connection import HTTPConnection, unwrap


def _to_branch(data) -> Branch:
    try:
        return Branch.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise RemoteFailure(f"Malformed branch: {e}") from e


class HTTPBranchRepository(IBranchRepository):
    """Branch repository backed by the /settings/branches endpoints."""

    def __init__(self, connection: HTTPConnection):
        self._conn = connection

    async def _list(self, path: str) -> list[Branch]:
        data = await self._conn.request("GET", path)
        items = unwrap(data, "branches")
        if not isinstance(items, list):
            raise RemoteFailure("Malformed response: 'branches' is not a list")
        return [_to_branch(item) for item in items]

    async def list_all(self) -> list[Branch]:
        """Gets all branches, active and inactive."""
        log.debug("repo.branch", "list_all")
        results = await self._list(BranchEndpoints.ALL)
        log.debug("repo.branch", "list_all result", count=len(results))
        return results

    async def list_active(self) -> list[Branch]:
        """Gets active branches only."""
        log.debug("repo.branch", "list_active")
        return await self._list(BranchEndpoints.ACTIVE)

    async def get(self, branch_id: str) -> Branch:
        """Gets a branch by ID."""
        log.debug("repo.branch", "get", branch_id=branch_id)
        data = await self._conn.request("GET", BranchEndpoints.item(branch_id))
        result = _to_branch(unwrap(data, "branch"))
        log.debug("repo.branch", "get result", name=result.name, address=result.address)
        return result

    async def create(self, draft: BranchDraft) -> Branch:
        """Creates a branch."""
        log.debug("repo.branch", "create", name=draft.name)
        data = await self._conn.request(
            "POST", BranchEndpoints.COLLECTION, json=draft.to_payload()
        )
        branch = _to_branch(unwrap(data, "branch"))
        log.info("repo.branch", "created", branch_id=branch.id, name=branch.name)
        return branch

    async def update(self, branch_id: str, draft: BranchDraft) -> Branch:
        """Updates the fields set on the draft."""
        payload = draft.to_payload(partial=True)
        log.debug("repo.branch", "update", branch_id=branch_id, fields=list(payload))
        data = await self._conn.request("PUT", BranchEndpoints.item(branch_id), json=payload)
        branch = _to_branch(unwrap(data, "branch"))
        log.info("repo.branch", "updated", branch_id=branch.id)
        return branch

    async def delete(self, branch_id: str) -> str:
        """Deletes a branch."""
        log.debug("repo.branch", "delete", branch_id=branch_id)
        data = await self._conn.request("DELETE", BranchEndpoints.item(branch_id))
        log.info("repo.branch", "deleted", branch_id=branch_id)
        return data.get("message", "") if isinstance(data, dict) else ""

    async def toggle_status(self, branch_id: str) -> Branch:
        """Flips the active flag."""
        log.debug("repo.branch", "toggle_status", branch_id=branch_id)
        data = await self._conn.request("PATCH", BranchEndpoints.toggle_status(branch_id))
        branch = _to_branch(unwrap(data, "branch"))
        log.info("repo.branch", "status toggled", branch_id=branch.id, is_active=branch.is_active)
        return branch
