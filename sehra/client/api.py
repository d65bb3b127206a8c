"""HTTP client for the Sehra API."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from .session import SessionStore

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
NETWORK_ERROR_STATUS = 0
# A 401 from these means wrong credentials, not an expired session.
CREDENTIAL_ENDPOINTS = frozenset({"/api/auth/login", "/api/auth/register"})


class ApiError(Exception):
    """A failed API call; ``status_code`` is 0 when the request never got an answer."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def api_path(endpoint: str) -> str:
    path = endpoint if endpoint.startswith("/") else f"/{endpoint}"
    if path == API_PREFIX or path.startswith(f"{API_PREFIX}/"):
        return path
    return f"{API_PREFIX}{path}"


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return f"Request failed with status {response.status_code}"


class ApiClient:
    """JSON over HTTP with the session's bearer token attached."""

    def __init__(
        self,
        base_url: str,
        session_store: SessionStore,
        *,
        on_unauthorized: Callable[[], Awaitable[None] | None] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._session_store = session_store
        self.on_unauthorized = on_unauthorized
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        session = self._session_store.current()
        if session is not None:
            headers["Authorization"] = f"Bearer {session.token}"
        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (``None`` when empty)."""

        path = api_path(endpoint)
        try:
            response = await self._client.request(
                method, path, json=data, params=params, headers=self._headers()
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ApiError(NETWORK_ERROR_STATUS, f"Network error: {exc}") from exc

        if (
            response.status_code == httpx.codes.UNAUTHORIZED
            and self.on_unauthorized is not None
            and path not in CREDENTIAL_ENDPOINTS
        ):
            result = self.on_unauthorized()
            if inspect.isawaitable(result):
                await result

        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))

        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def get(self, endpoint: str, *, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Any = None) -> Any:
        return await self.request("POST", endpoint, data)

    async def patch(self, endpoint: str, data: Any = None) -> Any:
        return await self.request("PATCH", endpoint, data)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)


__all__ = ["ApiClient", "ApiError", "api_path"]
