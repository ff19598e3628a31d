"""CLI entry point for gsmtui."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console

from gsmtui import __version__
from gsmtui.controller import Controller
from gsmtui.tui import SecretManagerApp

console = Console(stderr=True)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _abort(msg: str) -> None:
    console.print(f"[bold red]Error:[/] {msg}")
    sys.exit(1)


class _StrictCommand(click.Command):
    """Click command whose usage errors (unknown flags, stray arguments) exit 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


def _configure_logging(log_file: str | None, debug: bool) -> None:
    # Without a log file the package NullHandler keeps the terminal clean.
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.INFO,
        format=_LOG_FORMAT,
    )


def run_app(controller: Controller) -> None:
    """Run the full-screen application until the user quits."""
    SecretManagerApp(controller).run()


@click.command(cls=_StrictCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--project",
    "-p",
    default=None,
    envvar="GSMTUI_PROJECT",
    metavar="ID",
    help="Google Cloud project to open (default: pick one interactively).",
)
@click.option(
    "--log-file",
    default=None,
    envvar="GSMTUI_LOG_FILE",
    type=click.Path(dir_okay=False, writable=True),
    help="Write diagnostic logs to this file.",
)
@click.option("--debug", is_flag=True, default=False, help="Log at DEBUG level.")
@click.version_option(__version__, "--version", "-V")
def main(project: str | None, log_file: str | None, debug: bool) -> None:
    """Browse and manage Google Cloud Secret Manager secrets in the terminal.

    Credentials come from Application Default Credentials; when they are
    missing or expired the app offers to run
    `gcloud auth application-default login`.

    \b
    Examples:
      gsmtui
      gsmtui --project my-project
      gsmtui -p my-project --log-file /tmp/gsmtui.log --debug
    """
    if project is not None and not project.strip():
        _abort("Project ID must not be empty.")
        return

    _configure_logging(log_file, debug)
    logging.getLogger(__name__).info("Starting gsmtui %s (project=%s)", __version__, project)

    run_app(Controller(project_id=project.strip() if project else None))
