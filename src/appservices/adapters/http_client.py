"""httpx transport builder.

Standardizes timeouts and redirects for every client this package
creates, and lets tests swap in a `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from appservices.core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    auth: httpx.Auth | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured defaults.

    Request-level headers (Accept, Content-Type, User-Agent) are set by
    `Client.new_request`, not here.
    """

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        auth=auth,
        transport=transport,
    )
