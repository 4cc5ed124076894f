"""HTTP connection management for the settings API."""

from typing import Any, Optional

import httpx

from ...config import logger as log
from ...errors import RemoteFailure


def _extract_error_detail(response: httpx.Response) -> str:
    """Pulls a readable message out of an error response."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:200] or response.reason_phrase
    if isinstance(data, dict):
        for key in ("message", "error", "detail"):
            if data.get(key):
                return str(data[key])
    return response.reason_phrase


def unwrap(payload: Any, key: str) -> Any:
    """Returns ``payload[key]`` from a response envelope.

    Raises:
        RemoteFailure: If the envelope is not an object or lacks the key.
    """
    if not isinstance(payload, dict) or key not in payload:
        raise RemoteFailure(f"Malformed response: missing '{key}'")
    return payload[key]


class HTTPConnection:
    """Shares one httpx.AsyncClient between the repositories.

    The client is created on first use. Every failure, whether transport,
    status or body, is raised as RemoteFailure.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: Optional[float] = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initializes connection settings.

        Args:
            base_url: API root, e.g. ``http://localhost:5000/api``.
            token: Bearer token sent with every request.
            timeout: Seconds per request. None or 0 disables timeouts.
            transport: Custom transport, e.g. ``httpx.MockTransport`` in tests.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout if timeout and timeout > 0 else None
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def get_client(self) -> httpx.AsyncClient:
        """Returns the shared client, creating it if needed."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    async def request(
        self, method: str, path: str, json: Optional[dict] = None
    ) -> dict:
        """Sends a request and returns the decoded JSON body.

        Raises:
            RemoteFailure: On transport errors, non-2xx statuses or a body
                that is not JSON.
        """
        log.debug("http", f"{method} {path}", body=json)
        client = self.get_client()
        try:
            response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            log.error("http", f"{method} {path} transport error", error=e)
            raise RemoteFailure(str(e) or e.__class__.__name__) from e

        if response.is_error:
            detail = _extract_error_detail(response)
            log.error(
                "http",
                f"{method} {path} failed",
                status=response.status_code,
                detail=detail,
            )
            raise RemoteFailure(detail, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            log.error("http", f"{method} {path} returned invalid JSON")
            raise RemoteFailure("Invalid JSON in response", response.status_code) from e
        log.debug("http", f"{method} {path} ok", status=response.status_code)
        return data

    async def aclose(self) -> None:
        """Closes the shared client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HTTPConnection":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
