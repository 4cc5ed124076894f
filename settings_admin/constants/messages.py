"""User-visible notification texts."""


class Messages:
    """Texts shown through the notifier."""

    LOAD_FAILED = "Failed to load settings data"
    ACCESS_DENIED = "You do not have permission to manage settings"

    CATEGORY_REQUIRED = "Name and value are required"
    CATEGORY_VALUE_EXISTS = "Category value already exists"
    CATEGORY_CREATED = "Category created successfully"
    CATEGORY_UPDATED = "Category updated successfully"
    CATEGORY_DELETED = "Category deleted successfully"
    CATEGORY_STATUS_CHANGED = "Category status updated"
    CATEGORY_CREATE_FAILED = "Failed to create category"
    CATEGORY_UPDATE_FAILED = "Failed to update category"
    CATEGORY_DELETE_FAILED = "Failed to delete category"
    CATEGORY_TOGGLE_FAILED = "Failed to update category status"
    CATEGORY_DELETE_CONFIRM = (
        "Are you sure you want to delete this category? This action cannot be undone."
    )

    BRANCH_REQUIRED = "Branch name is required"
    BRANCH_NAME_EXISTS = "Branch name already exists"
    BRANCH_CREATED = "Branch created successfully"
    BRANCH_UPDATED = "Branch updated successfully"
    BRANCH_DELETED = "Branch deleted successfully"
    BRANCH_STATUS_CHANGED = "Branch status updated"
    BRANCH_CREATE_FAILED = "Failed to create branch"
    BRANCH_UPDATE_FAILED = "Failed to update branch"
    BRANCH_DELETE_FAILED = "Failed to delete branch"
    BRANCH_TOGGLE_FAILED = "Failed to update branch status"
    BRANCH_DELETE_CONFIRM = (
        "Are you sure you want to delete this branch? This action cannot be undone."
    )

    SUBMIT_IN_PROGRESS = "A request is already in progress"
    FORM_NOT_OPEN = "No form is open"
