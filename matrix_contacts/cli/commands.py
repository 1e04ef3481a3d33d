"""CLI commands for matrix-contacts."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from matrix_contacts import __logo__, __version__
from matrix_contacts.contacts import ContactReport

app = typer.Typer(
    name="matrix-contacts",
    help=f"{__logo__} matrix-contacts - list everyone a Matrix user shares rooms with",
    add_completion=False,
)

console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} matrix-contacts v{__version__}")
        raise typer.Exit()


@app.command()
def main(
    user_id: Optional[str] = typer.Argument(None, metavar="MATRIX_USERNAME", help="User to look up, e.g. @alice:example.org"),
    debug: bool = typer.Option(False, "--debug", help="Echo every synadm command and the raw room listing"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file (default: ~/.matrix-contacts/config.json)"),
    version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
):
    """List the distinct contacts of a Matrix user, based on shared room membership."""
    from matrix_contacts.admin.client import SynadmClient
    from matrix_contacts.config.loader import load_config
    from matrix_contacts.contacts import discover_contacts
    from matrix_contacts.errors import AdminCommandError, AdminLaunchError, ResponseParseError
    from matrix_contacts.utils.helpers import setup_logging

    if not user_id:
        err_console.print("Usage: matrix-contacts [--debug] <matrix_username>", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    config = load_config(config_file)
    log_file = Path(config.logging.file) if config.logging.file else None
    setup_logging(level="DEBUG" if debug else config.logging.level.upper(), log_file=log_file)

    client = SynadmClient.from_config(config.admin)
    try:
        report = discover_contacts(client, user_id)
    except AdminLaunchError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    except AdminCommandError as e:
        command = " ".join(e.argv)
        err_console.print(f"[red]Error executing {escape(command)}: {escape(e.stderr.strip())}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    except ResponseParseError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    _report(report, as_json)


def _report(report: ContactReport, as_json: bool = False) -> None:
    """Print the contact report to stdout."""
    if as_json:
        console.print(json.dumps(report.to_dict(), indent=2), markup=False, soft_wrap=True)
        return

    if not report.rooms:
        console.print(f"No rooms found for user {report.user}", markup=False, soft_wrap=True)
        return

    console.print(f"Contacts for user {report.user}:", markup=False, soft_wrap=True)
    for contact in report.contacts:
        console.print(contact, markup=False, soft_wrap=True)
