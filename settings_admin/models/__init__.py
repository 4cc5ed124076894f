"""
Draft models for the settings forms
"""
from .branch import BranchDraft
from .category import CategoryDraft

__all__ = [
    "BranchDraft",
    "CategoryDraft",
]
