"""Form session for branches."""

from ..constants.messages import Messages
from ..domain.branch import Branch
from ..models.branch import BranchDraft
from .base import FormSession


class BranchFormSession(FormSession[Branch, BranchDraft]):
    """Name is required and unique ignoring case."""

    draft_cls = BranchDraft
    context = "form.branch"

    required_fields = ("name",)
    required_message = Messages.BRANCH_REQUIRED
    conflict_field = "name"
    conflict_message = Messages.BRANCH_NAME_EXISTS

    created_message = Messages.BRANCH_CREATED
    updated_message = Messages.BRANCH_UPDATED
    create_failed_message = Messages.BRANCH_CREATE_FAILED
    update_failed_message = Messages.BRANCH_UPDATE_FAILED

    def conflicts(self, draft: BranchDraft, other: Branch) -> bool:
        return other.name.lower() == draft.name.lower()
