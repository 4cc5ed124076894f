"""Role gate that must pass before the settings screen mounts."""

from typing import Optional

from ..config import logger as log
from ..errors import AccessDenied

ADMIN_ROLE = "admin"


def require_role(role: Optional[str], required: str = ADMIN_ROLE) -> None:
    """Raises AccessDenied unless ``role`` matches ``required``."""
    if (role or "").strip().lower() != required:
        log.warn("access", "role gate rejected", role=role, required=required)
        raise AccessDenied(f"Role '{role}' cannot access settings (requires '{required}')")
    log.debug("access", "role gate passed", role=role)
