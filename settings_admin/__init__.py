"""
Settings management core for the admin dashboard: categories and branches
"""
from .container import Container, get_container, reset_container, set_container
from .errors import AccessDenied, RemoteFailure, SettingsError, ValidationFailure
from .screen import SettingsScreen

__all__ = [
    "Container",
    "get_container",
    "set_container",
    "reset_container",
    "SettingsScreen",
    "SettingsError",
    "ValidationFailure",
    "RemoteFailure",
    "AccessDenied",
]
