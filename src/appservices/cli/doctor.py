"""Doctor command for configuration and connectivity diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.table import Table

from appservices.cli import common
from appservices.core.config import AppSettings, get_user_env_file, write_user_env_vars
from appservices.core.errors import AppServicesError

app = typer.Typer(no_args_is_help=True, help="Configuration checks and credential setup.")


async def _check_login(settings: AppSettings) -> tuple[bool, str]:
    try:
        token = await common.login(settings)
    except (AppServicesError, typer.BadParameter) as exc:
        return False, str(exc)
    except Exception as exc:
        return False, f"{type(exc).__name__}: {exc}"
    return True, f"token for user {token.user_id or '?'}"


@app.command()
def run() -> None:
    """Show the effective configuration and try a login."""

    settings = AppSettings()

    table = Table(title="appservices doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.base_url.endswith("/"):
        table.add_row("Base URL", "OK", settings.base_url)
    else:
        table.add_row("Base URL", "FAIL", f"{settings.base_url} (missing trailing slash)")
    table.add_row("Auth URL", "OK", settings.auth_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User env file", "OK" if get_user_env_file().exists() else "MISSING", str(get_user_env_file()))

    if settings.has_credentials:
        table.add_row("API keys", "OK", f"public key {settings.public_api_key}")
        ok_login, detail_login = asyncio.run(_check_login(settings))
        table.add_row("Login", "OK" if ok_login else "FAIL", detail_login)
    else:
        table.add_row("API keys", "MISSING", "run `appservices doctor configure`")

    common.console.print(table)


@app.command()
def configure() -> None:
    """Interactive API key setup (stored in the user config .env)."""

    public_key = typer.prompt("Public API key").strip()
    private_key = typer.prompt("Private API key", hide_input=True, confirmation_prompt=False).strip()
    base_url = typer.prompt(
        "Admin API base URL",
        default=AppSettings().base_url,
        show_default=True,
    ).strip()

    if not public_key or not private_key:
        raise typer.BadParameter("public and private API keys are required")
    if not base_url.endswith("/"):
        raise typer.BadParameter("base URL must have a trailing slash")

    env_path = write_user_env_vars(
        {
            "APPSERVICES_PUBLIC_API_KEY": public_key,
            "APPSERVICES_PRIVATE_API_KEY": private_key,
            "APPSERVICES_BASE_URL": base_url,
        }
    )

    common.console.print(f"[green]Saved API config to:[/green] {env_path}")
