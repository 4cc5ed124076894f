"""REST paths of the settings API."""


class CategoryEndpoints:
    """Paths under /settings/categories."""

    ACTIVE = "/settings/categories"
    ALL = "/settings/categories/all"
    COLLECTION = "/settings/categories"

    @staticmethod
    def item(category_id: str) -> str:
        return f"/settings/categories/{category_id}"

    @staticmethod
    def toggle_status(category_id: str) -> str:
        return f"/settings/categories/{category_id}/toggle-status"


class BranchEndpoints:
    """Paths under /settings/branches."""

    ACTIVE = "/settings/branches"
    ALL = "/settings/branches/all"
    COLLECTION = "/settings/branches"

    @staticmethod
    def item(branch_id: str) -> str:
        return f"/settings/branches/{branch_id}"

    @staticmethod
    def toggle_status(branch_id: str) -> str:
        return f"/settings/branches/{branch_id}/toggle-status"
