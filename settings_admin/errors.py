"""Error taxonomy for the settings core.

ValidationFailure never reaches the network. RemoteFailure covers every
transport or server error; callers treat all of them the same way.
"""

from typing import Optional


class SettingsError(Exception):
    """Base class for settings core errors."""


class ValidationFailure(SettingsError):
    """A draft failed a local check before submission."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class RemoteFailure(SettingsError):
    """The settings API could not be reached or answered with an error.

    ``status_code`` and ``detail`` are kept for logging only.
    """

    def __init__(self, detail: str, status_code: Optional[int] = None):
        self.detail = detail
        self.status_code = status_code
        prefix = f"HTTP {status_code}" if status_code else "Request failed"
        super().__init__(f"{prefix}: {detail}")


class AccessDenied(SettingsError):
    """The current user may not open the settings screen."""
