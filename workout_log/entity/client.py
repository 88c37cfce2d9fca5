"""
HTTP client for the workout entity collection.

The backend exposes a generic CRUD collection and wraps every reply in a
``{"success": bool, "data": ...}`` envelope. This module defines the
contract the UI depends on and an httpx implementation of it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityResponse:
    """Envelope returned by every entity operation."""

    success: bool
    data: Any = None


class EntityClientError(Exception):
    """Base exception for entity client errors."""


class EntityUnavailable(EntityClientError):
    """Raised when the entity backend cannot be reached or times out."""


class EntityAPIError(EntityClientError):
    """Raised when the entity backend answers with an error status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class EntityClient(Protocol):
    async def list(self) -> EntityResponse: ...

    async def create(self, data: dict[str, Any]) -> EntityResponse: ...

    async def update(self, record_id: str, data: dict[str, Any]) -> EntityResponse: ...

    async def delete(self, record_id: str) -> EntityResponse: ...


class HttpEntityClient:
    """
    Entity client talking to a REST collection.

    Routes:
        GET    /{collection}        list
        POST   /{collection}        create
        PUT    /{collection}/{id}   update (full replace)
        DELETE /{collection}/{id}   delete
    """

    def __init__(
        self,
        base_url: str,
        collection: str = "workouts",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the entity client.

        Args:
            base_url: Base URL of the backend (e.g., "http://127.0.0.1:8000")
            collection: Name of the workout collection on the backend
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to plug in a mock
        """
        self._base_url = base_url.rstrip("/")
        self._collection = collection.strip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def collection_url(self) -> str:
        return f"{self._base_url}/{self._collection}"

    async def list(self) -> EntityResponse:
        return await self._request("GET", self.collection_url)

    async def create(self, data: dict[str, Any]) -> EntityResponse:
        return await self._request("POST", self.collection_url, json=data)

    async def update(self, record_id: str, data: dict[str, Any]) -> EntityResponse:
        return await self._request("PUT", f"{self.collection_url}/{record_id}", json=data)

    async def delete(self, record_id: str) -> EntityResponse:
        return await self._request("DELETE", f"{self.collection_url}/{record_id}")

    async def _request(
        self,
        method: str,
        url: str,
        json: Optional[dict[str, Any]] = None,
    ) -> EntityResponse:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.request(method, url, json=json)
        except httpx.ConnectError as e:
            logger.error(f"Entity backend unavailable: {e}")
            raise EntityUnavailable(
                f"Entity backend is not available at {self._base_url}"
            ) from e
        except httpx.TimeoutException as e:
            logger.error(f"Entity backend timeout: {e}")
            raise EntityUnavailable("Entity backend request timed out") from e
        except httpx.RequestError as e:
            logger.error(f"Entity backend request failed: {e!r}")
            raise EntityUnavailable(f"{method} {url} failed: {e}") from e

        if response.is_error:
            logger.error(
                f"Entity backend error: {method} {url} -> "
                f"{response.status_code} - {response.text}"
            )
            raise EntityAPIError(
                f"{method} {url} failed: {response.text}",
                response.status_code,
            )

        if not response.content:
            return EntityResponse(success=True)
        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Entity backend sent invalid JSON: {e}")
            raise EntityAPIError(
                f"{method} {url} returned invalid JSON", response.status_code
            ) from e
        if not isinstance(body, dict) or "success" not in body:
            # Bare payloads without an envelope are treated as successful data.
            return EntityResponse(success=True, data=body)
        return EntityResponse(success=bool(body["success"]), data=body.get("data"))
