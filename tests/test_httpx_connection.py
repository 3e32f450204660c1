from __future__ import annotations

import httpx
import pytest

from core.support.connection import HttpxConnection


def test_httpx_connection_posts_body_with_auth_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"id": "ls-1"})

    with HttpxConnection(
        "https://api.example.test",
        token="secret",
        transport=httpx.MockTransport(handler),
    ) as connection:
        response = (
            connection.post()
            .path("/api/clusters_mgmt/v1/clusters/abc/limited_support_reasons")
            .body(b'{"summary":"s"}')
            .send()
        )

    assert response.status == 201
    assert response.body == b'{"id":"ls-1"}'
    request = seen[0]
    assert request.method == "POST"
    assert request.url == httpx.URL(
        "https://api.example.test/api/clusters_mgmt/v1/clusters/abc/limited_support_reasons"
    )
    assert request.headers["Authorization"] == "Bearer secret"
    assert request.headers["Content-Type"] == "application/json"
    assert request.content == b'{"summary":"s"}'


def test_httpx_connection_omits_auth_without_token() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(400, content=b'{"reason":"bad"}')

    with HttpxConnection("https://api.example.test", transport=httpx.MockTransport(handler)) as c:
        response = c.post().path("/x").body(b"{}").send()

    assert response.status == 400
    assert "Authorization" not in seen[0].headers


def test_httpx_connection_propagates_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    with HttpxConnection("https://api.example.test", transport=httpx.MockTransport(handler)) as c:
        with pytest.raises(httpx.ConnectError):
            c.post().path("/x").body(b"{}").send()


def test_httpx_request_requires_path() -> None:
    with HttpxConnection(
        "https://api.example.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(201)),
    ) as connection:
        with pytest.raises(ValueError, match="path"):
            connection.post().body(b"{}").send()
