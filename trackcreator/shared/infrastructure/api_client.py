"""
API Client

Thin async wrapper around httpx.AsyncClient for the track editor backend.

All requests send and receive JSON. Non-2xx responses are turned into
NoteApiError; transport failures propagate as httpx.HTTPError.
"""
from typing import Any, Optional

import httpx

from trackcreator.shared.errors import NoteApiError
from trackcreator.utils.message import Log

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 10.0


class ApiClient:
    """
    Shared HTTP client for the remote API.

    Usable as an async context manager; the underlying httpx.AsyncClient is
    closed on exit.

    Usage:
        async with ApiClient("http://localhost:8000") as client:
            song = await client.request("GET", "/api/songs/42")
    """

    def __init__(
        self,
        backend_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            backend_url: Base URL of the backend
            timeout: Request timeout in seconds
            transport: Optional transport (tests pass httpx.MockTransport)
        """
        self._backend_url = (backend_url or DEFAULT_BACKEND_URL).rstrip("/")
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self._backend_url,
            timeout=timeout,
            transport=transport,
        )
        Log.info(f"ApiClient: Initialized (backend: {self._backend_url})")

    @property
    def backend_url(self) -> str:
        return self._backend_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(self, method: str, path: str, json: Any = None) -> Any:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the backend URL
            json: Optional JSON body

        Returns:
            Decoded response body, or None for an empty body

        Raises:
            NoteApiError: On a non-2xx response
            httpx.HTTPError: On transport failure
        """
        response = await self._client.request(method, path, json=json)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NoteApiError(
                f"{method} {path} failed with status {e.response.status_code}",
                status_code=e.response.status_code,
                errors=_extract_errors(e.response),
            ) from e

        if not response.content:
            return None
        return response.json()


def _extract_errors(response: httpx.Response) -> Any:
    """Errors reported by the backend: the body's "errors" field or the raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict) and "errors" in body:
        return body["errors"]
    return response.text or None
