"""Form session for categories."""

from ..constants.messages import Messages
from ..domain.category import Category
from ..models.category import CategoryDraft
from .base import FormSession


class CategoryFormSession(FormSession[Category, CategoryDraft]):
    """Name and value are required; value must be unique (exact match)."""

    draft_cls = CategoryDraft
    context = "form.category"

    required_fields = ("name", "value")
    required_message = Messages.CATEGORY_REQUIRED
    conflict_field = "value"
    conflict_message = Messages.CATEGORY_VALUE_EXISTS

    created_message = Messages.CATEGORY_CREATED
    updated_message = Messages.CATEGORY_UPDATED
    create_failed_message = Messages.CATEGORY_CREATE_FAILED
    update_failed_message = Messages.CATEGORY_UPDATE_FAILED

    def conflicts(self, draft: CategoryDraft, other: Category) -> bool:
        return other.value == draft.value
