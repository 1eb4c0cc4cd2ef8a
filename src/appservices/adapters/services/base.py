"""Shared pieces of the resource services."""

from __future__ import annotations

from appservices.core.errors import ArgError
from appservices.core.interfaces.transport import RequestDoer


def require(**params: str) -> None:
    """Raise `ArgError` for the first empty path parameter."""

    for name, value in params.items():
        if not value:
            raise ArgError(name, "must be set")


class Service:
    """Base of every resource service: holds the request doer."""

    def __init__(self, client: RequestDoer) -> None:
        self.client = client
