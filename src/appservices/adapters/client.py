"""Request/response plumbing shared by every resource service.

Responsibilities:
- Resolve relative paths against the base URL and JSON-encode bodies.
- Send one request, always read and close the body, and map non-2xx
  statuses to `ErrorResponse`.
- Decode the body into the caller's requested type, or copy it verbatim to
  a byte sink.

The client keeps no per-call state; one instance can be shared by concurrent
tasks. Nothing is retried.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from appservices.adapters.http_client import build_async_client
from appservices.adapters.services import AppsService, EventTriggersService
from appservices.core.config import (
    DEFAULT_BASE_URL,
    JSON_MEDIA_TYPE,
    USER_AGENT,
    AppSettings,
)
from appservices.core.domain.models import Response, WireModel
from appservices.core.errors import DecodeError, ErrorResponse
from appservices.core.interfaces.transport import ByteSink
from appservices.core.logging import get_logger

logger = get_logger(__name__)

RequestCompletionCallback = Callable[[httpx.Request, httpx.Response], None]


def _encode_body(body: Any) -> bytes:
    if isinstance(body, WireModel):
        payload = body.to_wire()
    elif isinstance(body, BaseModel):
        payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        payload = body
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


class Client:
    """Async client for the App Services admin API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str | None = None,
        with_raw: bool = False,
    ) -> None:
        self._owns_http = http_client is None
        self._http = http_client or build_async_client()
        self.base_url = base_url
        self.user_agent = f"{user_agent} {USER_AGENT}" if user_agent else USER_AGENT
        # copy raw server response to the Response object
        self.with_raw = with_raw
        self._on_request_completed: RequestCompletionCallback | None = None

        self.apps = AppsService(self)
        self.event_triggers = EventTriggersService(self)

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> Client:
        client = cls(
            http_client or build_async_client(settings),
            base_url=settings.base_url,
            user_agent=settings.user_agent,
            with_raw=settings.with_raw,
        )
        client._owns_http = http_client is None
        return client

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def on_request_completed(self, callback: RequestCompletionCallback | None) -> None:
        """Set the callback fired after each request; set it once, before use."""

        self._on_request_completed = callback

    def new_request(self, method: str, url_str: str, body: Any = None) -> httpx.Request:
        """Create an API request.

        `url_str` is resolved relative to the base URL and should be given
        without a leading slash. When `body` is not None it is JSON encoded
        and sent as the request body.
        """

        if not urlsplit(self.base_url).path.endswith("/"):
            raise ValueError(f"base URL must have a trailing slash, but {self.base_url!r} does not")
        try:
            url = httpx.URL(self.base_url).join(url_str)
        except httpx.InvalidURL as exc:
            raise ValueError(f"invalid request path {url_str!r}: {exc}") from exc

        headers = {"Accept": JSON_MEDIA_TYPE}
        content: bytes | None = None
        if body is not None:
            content = _encode_body(body)
            headers["Content-Type"] = JSON_MEDIA_TYPE
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        return self._http.build_request(method, url, content=content, headers=headers)

    async def do(self, request: httpx.Request, into: Any = None) -> tuple[Any, Response]:
        """Send an API request and decode the API response.

        `into` selects what happens to a successful body:
        - None: the body is read and discarded, the value is None;
        - an object with `write(bytes)`: the raw body is written to it and the
          value is that object;
        - otherwise a type understood by pydantic (`EventTrigger`,
          `list[Application]`, `dict`, ...) that the JSON body is validated into.

        An empty body yields None. Non-2xx responses raise `ErrorResponse`; a
        body that does not decode raises `DecodeError` carrying the `Response`.
        """

        http_response = await self._http.send(request, stream=True)
        try:
            body = await http_response.aread()
        finally:
            await http_response.aclose()

        logger.debug("%s %s -> %s", request.method, request.url, http_response.status_code)

        if self._on_request_completed is not None:
            self._on_request_completed(request, http_response)

        response = Response(http_response, raw=body if self.with_raw else None)

        check_response(http_response)

        if into is None:
            return None, response
        if isinstance(into, ByteSink):
            into.write(body)
            return into, response
        try:
            value = decode_body(body, into)
        except DecodeError as exc:
            exc.response = response
            raise
        return value, response


def decode_body(body: bytes, into: Any) -> Any:
    """Validate a JSON body into `into`; an empty body decodes to None."""

    if not body.strip():
        return None
    try:
        return TypeAdapter(into).validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"cannot decode response body: {exc}") from exc


def check_response(http_response: httpx.Response) -> None:
    """Raise `ErrorResponse` when the status is outside the 2xx range.

    Error bodies are expected to be empty or a JSON object with
    `error_code`, `reason` and `error` keys; JSON `null` counts as empty.
    Any other body is kept as the error's `reason`.
    """

    if 200 <= http_response.status_code <= 299:
        return

    fields: dict[str, Any] = {}
    data = http_response.content
    if data:
        try:
            parsed = json.loads(data)
            if parsed is None:
                parsed = {}
            elif not isinstance(parsed, dict):
                raise ValueError(f"error body is a {type(parsed).__name__}, not an object")
        except ValueError as exc:
            logger.debug("unmarshal error response: %s", exc)
            fields["reason"] = data.decode("utf-8", "replace")
        else:
            fields = {
                "error_code": _as_text(parsed.get("error_code")),
                "reason": _as_text(parsed.get("reason")),
                "detail": _as_text(parsed.get("error")),
            }

    raise ErrorResponse(http_response, **fields)


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


