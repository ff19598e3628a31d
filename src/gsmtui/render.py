"""Rich renderables for every gsmtui view."""

from __future__ import annotations

from datetime import datetime, timedelta

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gsmtui.editor import TextEditor
from gsmtui.models import ProjectInfo, SecretInfo, StatusMessage, VersionInfo, VersionState
from gsmtui.selection import SelectableList
from gsmtui.state import AppState
from gsmtui.views import (
    AuthRequired,
    Confirm,
    DeleteSecret,
    Input,
    InputMode,
    ProjectSelector,
    SecretDetail,
    SecretsList,
)

_MAX_VALUE_LEN = 60
_SELECTED_STYLE = "reverse"

_STATE_STYLES = {
    VersionState.ENABLED: "bold green",
    VersionState.DISABLED: "yellow",
    VersionState.DESTROYED: "dim red",
    VersionState.UNKNOWN: "dim",
}

HELP_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    ("NAVIGATION", [
        ("j / Down", "Move to next item"),
        ("k / Up", "Move to previous item"),
        ("g / Home", "Jump to first item"),
        ("G / End", "Jump to last item"),
        ("Enter", "Open / confirm"),
        ("Esc / b", "Go back"),
    ]),
    ("SECRETS", [
        ("n", "Create a new secret"),
        ("d", "Delete secret / destroy version"),
        ("r", "Refresh"),
        ("p", "Switch project"),
    ]),
    ("VERSIONS", [
        ("a", "Add a new version"),
        ("s", "Show / hide value"),
        ("c", "Copy value to clipboard"),
        ("e", "Enable version"),
        ("x", "Disable version"),
    ]),
    ("GENERAL", [
        ("? / F1", "Toggle this help"),
        ("q / Ctrl+C", "Quit"),
    ]),
]


def _truncate(value: str) -> str:
    if len(value) <= _MAX_VALUE_LEN:
        return value
    return value[:_MAX_VALUE_LEN] + "…"


def _format_time(value: datetime | None) -> str:
    if value is None:
        return "Unknown"
    return value.strftime("%Y-%m-%d %H:%M")


def _format_duration(value: timedelta) -> str:
    seconds = int(value.total_seconds())
    days, rem = divmod(seconds, 86400)
    if days and not rem:
        return f"{days}d"
    hours, rem = divmod(seconds, 3600)
    if hours and not rem:
        return f"{hours}h"
    return f"{seconds}s"


def _pairs(pairs: tuple[tuple[str, object], ...], sep: str = "=") -> str:
    return "  ".join(f"{k}{sep}{v}" for k, v in pairs)


def _row_style(items: SelectableList, index: int) -> str | None:
    return _SELECTED_STYLE if items.selected == index else None


def render_header(state: AppState) -> Text:
    header = Text()
    header.append("gsmtui", style="bold magenta")
    header.append("  project: ", style="dim")
    header.append(state.project_id or "(none)", style="bold cyan")
    if state.busy:
        header.append("  working…", style="italic yellow")
    return header


def render_status(status: StatusMessage | None) -> Text:
    if status is None:
        return Text("Press ? for help", style="dim")
    return Text(status.text, style="bold red" if status.is_error else "green")


def render_secrets_table(secrets: SelectableList[SecretInfo]) -> Table:
    """Render the secrets list with the cursor row highlighted."""
    table = Table(title="Secrets", expand=True)
    table.add_column("Name", style="bold")
    table.add_column("Created", style="dim", width=16)
    table.add_column("Replication")
    table.add_column("Labels", style="cyan")

    for index, secret in enumerate(secrets):
        table.add_row(
            secret.short_name,
            _format_time(secret.create_time),
            secret.replication.describe(),
            _truncate(_pairs(secret.labels)),
            style=_row_style(secrets, index),
        )
    if not len(secrets):
        table.add_row(Text("No secrets. Press n to create one.", style="dim"), "", "", "")
    return table


def render_versions_table(versions: SelectableList[VersionInfo]) -> Table:
    table = Table(title="Versions", expand=True)
    table.add_column("Version", style="bold", width=10)
    table.add_column("State", width=10)
    table.add_column("Created", style="dim", width=16)
    table.add_column("Destroyed / scheduled", style="dim")
    table.add_column("Checksum", width=8)

    for index, version in enumerate(versions):
        when = version.destroy_time or version.scheduled_destroy_time
        table.add_row(
            version.version,
            Text(version.state.value, style=_STATE_STYLES[version.state]),
            _format_time(version.create_time),
            _format_time(when) if when else "",
            "yes" if version.has_checksum else "",
            style=_row_style(versions, index),
        )
    if not len(versions):
        table.add_row(Text("No versions. Press a to add one.", style="dim"), "", "", "", "")
    return table


def render_secret_metadata(secret: SecretInfo) -> Panel:
    """Render every metadata field of *secret* as a two-column grid."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="dim")
    grid.add_column()
    grid.add_row("Name", Text(secret.short_name, style="bold"))
    grid.add_row("Created", _format_time(secret.create_time))
    grid.add_row("Replication", secret.replication.describe())
    if secret.labels:
        grid.add_row("Labels", _pairs(secret.labels))
    if secret.annotations:
        grid.add_row("Annotations", _truncate(_pairs(secret.annotations)))
    if secret.topics:
        grid.add_row("Pub/Sub", ", ".join(t.rsplit("/", 1)[-1] for t in secret.topics))
    if secret.version_aliases:
        grid.add_row("Aliases", _pairs(secret.version_aliases, sep="→v"))
    if secret.rotation is not None:
        parts = []
        if secret.rotation.rotation_period is not None:
            parts.append(f"every {_format_duration(secret.rotation.rotation_period)}")
        if secret.rotation.next_rotation_time is not None:
            parts.append(f"next: {_format_time(secret.rotation.next_rotation_time)}")
        grid.add_row("Rotation", "  ".join(parts) or "configured")
    if secret.version_destroy_ttl is not None:
        grid.add_row("Destroy TTL", _format_duration(secret.version_destroy_ttl))
    return Panel(grid, title="Secret", subtitle="Esc to go back", border_style="magenta")


def render_secret_detail(
    secret: SecretInfo,
    versions: SelectableList[VersionInfo],
    revealed_value: str | None,
) -> Group:
    parts: list[RenderableType] = [render_secret_metadata(secret), render_versions_table(versions)]
    if revealed_value is not None:
        parts.append(
            Panel(Text(revealed_value), title="Value", subtitle="press s to hide",
                  border_style="yellow")
        )
    return Group(*parts)


def render_projects_table(projects: SelectableList[ProjectInfo], active: str) -> Table:
    table = Table(title="Select a project", expand=True)
    table.add_column("", width=2)
    table.add_column("Project ID", style="bold")
    table.add_column("Name")
    for index, project in enumerate(projects):
        table.add_row(
            "●" if project.project_id == active else "",
            project.project_id,
            project.display_name,
            style=_row_style(projects, index),
        )
    if not len(projects):
        table.add_row("", Text("No projects found.", style="dim"), "")
    return table


def render_auth_required() -> Panel:
    body = Text()
    body.append("No valid Google Cloud credentials were found.\n\n")
    body.append("Press ")
    body.append("Enter", style="bold cyan")
    body.append(" to run ")
    body.append("gcloud auth application-default login", style="bold")
    body.append(", or ")
    body.append("q", style="bold cyan")
    body.append(" to quit.")
    return Panel(body, title="Authentication required", border_style="red")


def render_input(mode: InputMode, editor: TextEditor) -> Panel:
    """Render a text input with a block cursor at the editor's position."""
    if mode is InputMode.NEW_SECRET_NAME:
        title, prompt = "Create New Secret", "Enter a name for your secret:"
    else:
        title, prompt = "Add New Version", "Enter the secret value:"
    text, cursor = editor.text, editor.cursor
    field = Text()
    field.append(text[:cursor])
    field.append(text[cursor : cursor + 1] or " ", style="reverse")
    field.append(text[cursor + 1 :])
    body = Group(Text(prompt), field, Text("Enter to submit, Esc to cancel", style="dim"))
    return Panel(body, title=title, border_style="cyan")


def render_confirm(view: Confirm) -> Panel:
    action = view.action
    if isinstance(action, DeleteSecret):
        title = "Delete Secret"
        message = f"Delete secret '{action.secret_name}' and all of its versions?"
    else:
        title = "Destroy Version"
        message = (
            f"Destroy version {action.version_id} of '{action.secret_name}'? "
            "The value is permanently lost."
        )
    body = Group(
        Text(message),
        Text("This cannot be undone.", style="bold red"),
        Text("Enter to confirm, Esc to cancel", style="dim"),
    )
    return Panel(body, title=title, border_style="red")


def render_help() -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()
    for section, keys in HELP_SECTIONS:
        table.add_row(Text(section, style="bold magenta"), "")
        for key, description in keys:
            table.add_row(key, description)
        table.add_row("", "")
    return Panel(table, title="Help", subtitle="press any key to close", border_style="magenta")


def render_body(state: AppState) -> RenderableType:
    """Render the main area for the current view (or the help overlay)."""
    if state.show_help:
        return render_help()
    cache = state.cache
    view = state.current_view
    if isinstance(view, AuthRequired):
        return render_auth_required()
    if isinstance(view, SecretsList):
        return render_secrets_table(cache.secrets)
    if isinstance(view, SecretDetail):
        if cache.current_secret is None:
            return Text("No secret selected.", style="dim")
        return render_secret_detail(cache.current_secret, cache.versions, cache.revealed_value)
    if isinstance(view, ProjectSelector):
        return render_projects_table(cache.projects, state.project_id)
    if isinstance(view, Input):
        return render_input(view.mode, state.editor)
    if isinstance(view, Confirm):
        return render_confirm(view)
    raise TypeError(f"Unhandled view: {view!r}")
