"""Login exchange and token-injecting transport.

Flow:
- `AuthConfig.new_token_from_credentials` POSTs the API key pair to the login
  URL and returns a `Token`.
- `TokenAuth` decorates an httpx client so every request carries the token's
  `Authorization` header.
- `BasicTokenSource` is the only token source provided; it never refreshes.
"""

from __future__ import annotations

import json
from collections.abc import Generator

import httpx
from pydantic import ValidationError

from appservices.adapters.http_client import build_async_client
from appservices.core.config import DEFAULT_AUTH_URL, JSON_MEDIA_TYPE, AppSettings
from appservices.core.domain.models import Response, Token
from appservices.core.errors import AuthError, DecodeError, RetrieveError
from appservices.core.interfaces.transport import TokenSource
from appservices.core.logging import get_logger

logger = get_logger(__name__)

MAX_BODY_SLURP_SIZE = 1 << 20


class BasicTokenSource:
    """A `TokenSource` that always returns the same token."""

    def __init__(self, token: Token) -> None:
        self._token = token

    def token(self) -> Token:
        return self._token


class TokenAuth(httpx.Auth):
    """Sets the current token's `Authorization` header on every request."""

    def __init__(self, source: TokenSource) -> None:
        self.source = source

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.source.token()
        request.headers["Authorization"] = token.authorization_header()
        yield request


def new_client(
    source: TokenSource | None = None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Return an httpx client authorized by `source`, or a plain one when None."""

    auth = TokenAuth(source) if source is not None else None
    return build_async_client(settings, auth=auth, transport=transport)


class AuthConfig:
    """Exchanges API credentials for a bearer token."""

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        auth_url: str = DEFAULT_AUTH_URL,
    ) -> None:
        self._http = http_client or build_async_client()
        self.auth_url = auth_url

    async def new_token_from_credentials(self, username: str, api_key: str) -> Token:
        """Log in with a public (`username`) and private (`api_key`) key pair."""

        payload = {"username": username, "apiKey": api_key}
        request = self._http.build_request(
            "POST",
            self.auth_url,
            content=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
            headers={"Content-Type": JSON_MEDIA_TYPE, "Accept": JSON_MEDIA_TYPE},
        )
        return await self._round_trip(request)

    async def _round_trip(self, request: httpx.Request) -> Token:
        http_response = await self._http.send(request, stream=True)
        try:
            body = b""
            async for chunk in http_response.aiter_bytes():
                body += chunk
                if len(body) >= MAX_BODY_SLURP_SIZE:
                    body = body[:MAX_BODY_SLURP_SIZE]
                    break
        finally:
            await http_response.aclose()

        logger.debug("%s %s -> %s", request.method, request.url, http_response.status_code)

        if not 200 <= http_response.status_code <= 299:
            raise RetrieveError(http_response, body)

        try:
            token = Token.model_validate_json(body)
        except ValidationError as exc:
            raise DecodeError(
                f"auth: cannot decode token: {exc}",
                response=Response(http_response, raw=body),
            ) from exc
        if not token.valid():
            raise AuthError("server response missing access_token")
        return token
