"""Rich components for the CLI.

Tables and panels live here so the commands only deal with API calls.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from appservices.core.domain.models import Application, EventTrigger


def print_banner(console: Console) -> None:
    """Print the welcome banner (interactive commands only)."""

    title = Text("appservices", style="bold green")
    subtitle = Text("Atlas App Services admin API", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(1, 4)))


def build_apps_table(apps: list[Application]) -> Table:
    table = Table(title="Applications")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Client App ID", style="white")
    table.add_column("Name", style="bright_green")
    table.add_column("Location", style="magenta")
    table.add_column("Deployment", style="dim")
    for app in apps:
        table.add_row(
            app.id or "",
            app.client_app_id or "",
            app.name or "",
            app.location or "",
            app.deployment_model or "",
        )
    return table


def _trigger_type(trigger: EventTrigger) -> str:
    value = trigger.type
    if value is None:
        return ""
    return getattr(value, "value", value)


def build_triggers_table(triggers: list[EventTrigger]) -> Table:
    table = Table(title="Event Triggers")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bright_green")
    table.add_column("Type", style="white")
    table.add_column("Function", style="magenta")
    table.add_column("Enabled", style="green")
    for trigger in triggers:
        table.add_row(
            trigger.id or "",
            trigger.name or "",
            _trigger_type(trigger),
            trigger.function_name or trigger.function_id or "",
            "no" if trigger.disabled else "yes",
        )
    return table


def build_trigger_panel(trigger: EventTrigger) -> Panel:
    """Detail panel for a single trigger."""

    body = Text()
    body.append(f"ID: {trigger.id or '-'}\n")
    body.append(f"Type: {_trigger_type(trigger) or '-'}\n")
    body.append(f"Function: {trigger.function_name or trigger.function_id or '-'}\n")
    body.append(f"Enabled: {'no' if trigger.disabled else 'yes'}\n")

    config = trigger.config
    if config is not None:
        body.append("\nConfig:\n", style="bold")
        for key, value in config.to_wire().items():
            body.append(f"- {key}: {value}\n")
    if trigger.event_processors:
        body.append("\nEvent processors: ", style="bold")
        body.append(", ".join(sorted(trigger.event_processors)))

    title = Text(trigger.name or "trigger", style="bold yellow")
    return Panel(body, title=title, border_style="yellow")
