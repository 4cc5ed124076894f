"""
Seams to the surrounding UI: notifications, confirmation and role gating
"""
from .access import ADMIN_ROLE, require_role
from .notifier import ConsoleNotifier, Confirmer, Notifier, console_confirm

__all__ = [
    "ADMIN_ROLE",
    "require_role",
    "Notifier",
    "ConsoleNotifier",
    "Confirmer",
    "console_confirm",
]
