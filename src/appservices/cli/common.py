"""Helpers shared by the CLI commands."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Coroutine
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from appservices.adapters.auth import AuthConfig, BasicTokenSource, new_client
from appservices.adapters.client import Client
from appservices.adapters.http_client import build_async_client
from appservices.core.config import AppSettings
from appservices.core.domain.models import Token
from appservices.core.errors import AppServicesError

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)


async def login(settings: AppSettings, transport: httpx.AsyncBaseTransport | None = None) -> Token:
    """Exchange the configured API key pair for a token."""

    if not settings.has_credentials:
        raise typer.BadParameter(
            "API keys are not configured: run `appservices doctor configure` "
            "or set APPSERVICES_PUBLIC_API_KEY / APPSERVICES_PRIVATE_API_KEY"
        )
    assert settings.public_api_key is not None and settings.private_api_key is not None
    async with build_async_client(settings, transport=transport) as http:
        auth = AuthConfig(http, auth_url=settings.auth_url)
        return await auth.new_token_from_credentials(
            settings.public_api_key,
            settings.private_api_key.get_secret_value(),
        )


@asynccontextmanager
async def open_client(
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[Client]:
    """Log in and yield an authorized `Client`; the transport is closed on exit."""

    token = await login(settings, transport)
    http = new_client(BasicTokenSource(token), settings=settings, transport=transport)
    async with http:
        yield Client.from_settings(settings, http_client=http)


def run_api(coro: Coroutine[Any, Any, T]) -> T:
    """Run an API coroutine, turning library and transport errors into exit code 1."""

    try:
        return asyncio.run(coro)
    except (AppServicesError, httpx.HTTPError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc


def print_json(data: Any) -> None:
    console.print_json(data=data)
