"""Management API connection contract and its httpx implementation."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType
from typing import Protocol

import httpx


@dataclass(frozen=True)
class SupportResponse:
    """Status code and raw body of one API call."""

    status: int
    body: bytes


class SupportRequest(Protocol):
    """Builder for a single outbound POST."""

    def path(self, value: str) -> SupportRequest:
        """Set the absolute API path."""

    def body(self, data: bytes) -> SupportRequest:
        """Set the JSON request body."""

    def send(self) -> SupportResponse:
        """Execute the request."""


class SupportConnection(Protocol):
    """Anything that can create POST requests against the management API."""

    def post(self) -> SupportRequest:
        """Start a new POST request."""


class HttpxRequest:
    """POST request executed through a shared ``httpx.Client``."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client
        self._path: str | None = None
        self._body = b""

    def path(self, value: str) -> HttpxRequest:
        self._path = value
        return self

    def body(self, data: bytes) -> HttpxRequest:
        self._body = data
        return self

    def send(self) -> SupportResponse:
        if self._path is None:
            raise ValueError("Request path is not set")
        response = self._client.post(self._path, content=self._body)
        return SupportResponse(status=response.status_code, body=response.content)


class HttpxConnection:
    """Authenticated management API connection."""

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout_seconds,
            transport=transport,
        )

    def post(self) -> HttpxRequest:
        return HttpxRequest(self._client)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxConnection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
