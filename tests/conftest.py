"""Pytest fixtures for appservices.

`MockAPI` plays the admin API: handlers are registered per (method, path) and
every request it sees is recorded, so tests can also assert that nothing was
sent.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from appservices.adapters.client import Client

BASE_URL = "http://test/api/admin/v3.0/"
API_PATH = "/api/admin/v3.0/"
LOGIN_PATH = API_PATH + "auth/providers/mongodb-cloud/login"

Handler = Callable[[httpx.Request], Any]


class MockAPI:
    """In-process stand-in for the admin API (an httpx MockTransport handler)."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method, API_PATH + path.lstrip("/"))] = handler

    def reply(self, method: str, path: str, status: int = 200, body: Any = None, text: str | None = None) -> None:
        """Register a canned response (JSON `body` or raw `text`)."""

        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            if body is None:
                return httpx.Response(status)
            return httpx.Response(status, json=body)

        self.add(method, path, handler)

    def echo(self, method: str, path: str, extra: dict[str, Any] | None = None) -> None:
        """Answer with the request body, merged with `extra`."""

        def handler(request: httpx.Request) -> httpx.Response:
            payload = json.loads(request.content)
            payload.update(extra or {})
            return httpx.Response(201 if method == "POST" else 200, json=payload)

        self.add(method, path, handler)

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(
                404,
                json={"error_code": "NotFound", "reason": "Not Found", "error": f"no route {request.url.path}"},
            )
        return handler(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def api() -> MockAPI:
    return MockAPI()


@pytest.fixture
def transport(api: MockAPI) -> httpx.MockTransport:
    return httpx.MockTransport(api)


@pytest.fixture
async def http(transport: httpx.MockTransport) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=transport) as ac:
        yield ac


@pytest.fixture
def client(http: httpx.AsyncClient) -> Client:
    """Client bound to the mock API."""
    return Client(http, base_url=BASE_URL)
