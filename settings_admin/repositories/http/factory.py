"""Factory for creating Container with the HTTP implementation."""

from typing import Optional

import httpx

from ...config.env import get_api_timeout, get_api_token, get_api_url
from ...container import Container
from .branch_repository import HTTPBranchRepository
from .category_repository import HTTPCategoryRepository
from .connection import HTTPConnection


def create_http_container(
    base_url: Optional[str] = None,
    token: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Container:
    """Creates a Container with HTTP repository implementations.

    Args:
        base_url: API root. Uses SETTINGS_API_URL if not specified.
        token: Bearer token. Uses SETTINGS_API_TOKEN if not specified.
        timeout: Seconds per request. Uses SETTINGS_API_TIMEOUT if not specified.
        transport: Optional httpx transport override.

    Returns:
        Container: Configured with HTTP repositories sharing one connection.
    """
    connection = HTTPConnection(
        base_url=base_url or get_api_url(),
        token=token if token is not None else get_api_token(),
        timeout=timeout if timeout is not None else get_api_timeout(),
        transport=transport,
    )

    return Container(
        categories=HTTPCategoryRepository(connection),
        branches=HTTPBranchRepository(connection),
        closer=connection.aclose,
    )
