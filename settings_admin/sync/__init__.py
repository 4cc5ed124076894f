"""
List synchronization between the cached collections and mutation results
"""
from .list_state import (
    ListSynchronizer,
    apply_create,
    apply_delete,
    apply_update,
    load,
)

__all__ = [
    "ListSynchronizer",
    "load",
    "apply_create",
    "apply_update",
    "apply_delete",
]
