"""
Form sessions for creating and editing settings entities
"""
from .base import FormMode, FormSession, FormState
from .branch_form import BranchFormSession
from .category_form import CategoryFormSession

__all__ = [
    "FormMode",
    "FormSession",
    "FormState",
    "CategoryFormSession",
    "BranchFormSession",
]
