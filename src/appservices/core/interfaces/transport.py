"""Structural contracts between the services, the client and the auth layer.

- `RequestDoer`: what a resource service needs from the client.
- `TokenSource`: where the authorizing transport reads its token from.
- `ByteSink`: a destination that takes response bytes as they are.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx

from appservices.core.domain.models import Response, Token


@runtime_checkable
class RequestDoer(Protocol):
    """Minimal contract the resource services delegate to."""

    def new_request(self, method: str, url_str: str, body: Any = None) -> httpx.Request:
        """Build a request relative to the client's base URL."""

        ...

    async def do(self, request: httpx.Request, into: Any = None) -> tuple[Any, Response]:
        """Send `request` and decode the body into `into`."""

        ...


@runtime_checkable
class TokenSource(Protocol):
    """Anything able to hand out the current bearer token."""

    def token(self) -> Token:
        ...


@runtime_checkable
class ByteSink(Protocol):
    """Destination receiving a response body verbatim instead of JSON-decoding it."""

    def write(self, data: bytes, /) -> Any:
        ...
