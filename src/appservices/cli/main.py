"""Command line entry point (`appservices`).

Commands are thin: parse arguments, call one service method through
`common.open_client`, render the result with Rich (or as JSON).
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from appservices.cli import common, doctor
from appservices.cli.ui_components import (
    build_apps_table,
    build_trigger_panel,
    build_triggers_table,
    print_banner,
)
from appservices.core.config import AppSettings
from appservices.core.domain.models import (
    Application,
    ApplicationListOptions,
    EventTrigger,
    EventTriggerRequest,
)
from appservices.core.logging import setup_logging

app = typer.Typer(no_args_is_help=True, help="Atlas App Services admin API client.")
apps_app = typer.Typer(no_args_is_help=True, help="Applications of a project.")
triggers_app = typer.Typer(no_args_is_help=True, help="Event triggers of an application.")

app.add_typer(apps_app, name="apps")
app.add_typer(triggers_app, name="triggers")
app.add_typer(doctor.app, name="doctor")

_JSON_OPTION = typer.Option(False, "--json", help="Print the raw payload as JSON.")


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Log HTTP exchanges at DEBUG level."),
) -> None:
    settings = AppSettings()
    setup_logging(debug or settings.debug)


@app.command()
def banner() -> None:
    """Print the banner and the configured API root."""

    print_banner(common.console)
    common.console.print(f"API root: {AppSettings().base_url}", style="dim")


def _load_trigger_request(path: Path) -> EventTriggerRequest:
    try:
        return EventTriggerRequest.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        raise typer.BadParameter(f"cannot read trigger request from {path}: {exc}") from exc


@apps_app.command("list")
def apps_list(
    group_id: str = typer.Argument(..., help="Project (group) ID."),
    product: str | None = typer.Option(None, "--product", help="Filter by product."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """List the applications of a project."""

    settings = AppSettings()
    options = ApplicationListOptions(product=product) if product else None

    async def _run() -> list[Application]:
        async with common.open_client(settings) as client:
            apps, _ = await client.apps.list(group_id, options)
            return apps

    apps = common.run_api(_run())
    if as_json:
        common.print_json([a.to_wire() for a in apps])
        return
    common.console.print(build_apps_table(apps))


@triggers_app.command("list")
def triggers_list(
    group_id: str = typer.Argument(..., help="Project (group) ID."),
    app_id: str = typer.Argument(..., help="Application ID."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """List the event triggers of an application."""

    settings = AppSettings()

    async def _run() -> list[EventTrigger]:
        async with common.open_client(settings) as client:
            triggers, _ = await client.event_triggers.list(group_id, app_id)
            return triggers

    triggers = common.run_api(_run())
    if as_json:
        common.print_json([t.to_wire() for t in triggers])
        return
    common.console.print(build_triggers_table(triggers))


@triggers_app.command("get")
def triggers_get(
    group_id: str = typer.Argument(..., help="Project (group) ID."),
    app_id: str = typer.Argument(..., help="Application ID."),
    trigger_id: str = typer.Argument(..., help="Trigger ID."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Show one event trigger."""

    settings = AppSettings()

    async def _run() -> EventTrigger:
        async with common.open_client(settings) as client:
            trigger, _ = await client.event_triggers.get(group_id, app_id, trigger_id)
            return trigger

    _print_trigger(common.run_api(_run()), as_json)


@triggers_app.command("create")
def triggers_create(
    group_id: str = typer.Argument(..., help="Project (group) ID."),
    app_id: str = typer.Argument(..., help="Application ID."),
    file: Path = typer.Option(..., "--file", "-f", help="JSON file with the trigger request."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Create an event trigger from a JSON request file."""

    settings = AppSettings()
    request = _load_trigger_request(file)

    async def _run() -> EventTrigger:
        async with common.open_client(settings) as client:
            trigger, _ = await client.event_triggers.create(group_id, app_id, request)
            return trigger

    _print_trigger(common.run_api(_run()), as_json)


@triggers_app.command("update")
def triggers_update(
    group_id: str = typer.Argument(..., help="Project (group) ID."),
    app_id: str = typer.Argument(..., help="Application ID."),
    trigger_id: str = typer.Argument(..., help="Trigger ID."),
    file: Path = typer.Option(..., "--file", "-f", help="JSON file with the trigger request."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Replace an event trigger from a JSON request file."""

    settings = AppSettings()
    request = _load_trigger_request(file)

    async def _run() -> EventTrigger:
        async with common.open_client(settings) as client:
            trigger, _ = await client.event_triggers.update(group_id, app_id, trigger_id, request)
            return trigger

    _print_trigger(common.run_api(_run()), as_json)


@triggers_app.command("delete")
def triggers_delete(
    group_id: str = typer.Argument(..., help="Project (group) ID."),
    app_id: str = typer.Argument(..., help="Application ID."),
    trigger_id: str = typer.Argument(..., help="Trigger ID."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    """Delete an event trigger."""

    if not yes:
        typer.confirm(f"Delete trigger {trigger_id}?", abort=True)

    settings = AppSettings()

    async def _run() -> int:
        async with common.open_client(settings) as client:
            response = await client.event_triggers.delete(group_id, app_id, trigger_id)
            return response.status_code

    status = common.run_api(_run())
    common.console.print(f"[green]Deleted[/green] trigger {trigger_id} (HTTP {status})")


def _print_trigger(trigger: EventTrigger, as_json: bool) -> None:
    if as_json:
        common.print_json(trigger.to_wire())
        return
    common.console.print(build_trigger_panel(trigger))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
