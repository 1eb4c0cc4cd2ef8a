"""Exception hierarchy of the client.

Kinds:
- `ArgError`: a required identifier is missing; raised before any request.
- `ErrorResponse`: the API answered outside the 2xx range.
- `DecodeError`: a success body could not be decoded.
- `RetrieveError` / `AuthError`: the login exchange failed.

Transport failures are the `httpx` exceptions themselves and are not wrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from appservices.core.domain.models import Response


class AppServicesError(Exception):
    """Base class for every error raised by this package."""


class ArgError(AppServicesError, ValueError):
    """An argument required to build the request is missing or invalid."""

    def __init__(self, arg: str, reason: str) -> None:
        self.arg = arg
        self.reason = reason
        super().__init__(f"{arg} is invalid because {reason}")


class ErrorResponse(AppServicesError):
    """Error reported by the API for a non-2xx response.

    `error_code`, `reason` and `detail` map the `error_code`, `reason` and
    `error` keys of the JSON error body. When the body is not a JSON object,
    `reason` holds the raw body text.
    """

    def __init__(
        self,
        response: httpx.Response,
        *,
        error_code: str | None = None,
        reason: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.response = response
        self.error_code = error_code
        self.reason = reason
        self.detail = detail
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def method(self) -> str:
        return self.response.request.method

    @property
    def url(self) -> str:
        return str(self.response.request.url)

    def __str__(self) -> str:
        return (
            f"{self.method} {self.url}: {self.status_code} "
            f"(request {self.error_code or ''!r}) {self.detail or ''}"
        ).rstrip()


class DecodeError(AppServicesError):
    """A response body was not valid for the requested type.

    `response` is the `Response` of the call when one was received.
    """

    def __init__(self, message: str, response: Response | None = None) -> None:
        self.response = response
        super().__init__(message)



class RetrieveError(AppServicesError):
    """The login endpoint answered outside the 2xx range."""

    def __init__(self, response: httpx.Response, body: bytes) -> None:
        self.response = response
        self.body = body
        super().__init__(
            f"auth: cannot fetch token: {response.status_code}\nResponse: {body.decode('utf-8', 'replace')}"
        )


class AuthError(AppServicesError):
    """The login exchange succeeded but did not produce a usable token."""
