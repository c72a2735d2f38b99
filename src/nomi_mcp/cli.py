"""Nomi MCP CLI - typer application entry point."""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from nomi_mcp.config import API_BASE_ENV, API_KEY_ENV, get_api_base
from nomi_mcp.dispatcher import Dispatcher
from nomi_mcp.errors import NomiError
from nomi_mcp.observability import close_file_logging, configure_logging, get_logger

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="nomi-mcp",
    help="Nomi MCP Server: the Nomi AI API exposed as MCP tools.",
    invoke_without_command=True,
)
console = Console()
# stdout belongs to the MCP protocol while serving
err_console = Console(stderr=True)

log = get_logger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity: -v for INFO, -vv for DEBUG.",
        ),
    ] = 0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Also write all log events to this file as JSONL.",
            envvar="NOMI_MCP_LOG_FILE",
        ),
    ] = None,
) -> None:
    """Nomi MCP Server: the Nomi AI API exposed as MCP tools.

    Runs the stdio server when no command is given.
    """
    configure_logging(verbosity=verbose, log_file=log_file)
    ctx.call_on_close(close_file_logging)

    if ctx.invoked_subcommand is None:
        _serve()


@app.command()
def serve() -> None:
    """Run the MCP server on stdio."""
    _serve()


def _serve() -> None:
    from nomi_mcp.server import serve as run_server

    err_console.print("Nomi AI MCP Server running on stdio")
    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        log.info("server_interrupted")
    except Exception as e:
        log.exception("server_failed")
        err_console.print(f"[red]Fatal error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command()
def tools() -> None:
    """List the tools this server exposes."""
    table = Table(title="Nomi MCP Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required arguments", style="dim")

    for definition in Dispatcher().list_operations():
        table.add_row(
            definition.name,
            definition.description,
            ", ".join(definition.required) or "-",
        )

    console.print(table)


@app.command()
def call(
    name: Annotated[str, typer.Argument(help="Tool name, e.g. list_nomis.")],
    args: Annotated[
        str,
        typer.Option(
            "--args",
            "-a",
            help='Tool arguments as a JSON object, e.g. \'{"nomi_id": "..."}\'.',
        ),
    ] = "{}",
) -> None:
    """Invoke one tool and print its result.

    Exits with status 1 if the tool reports an error.
    """
    try:
        arguments: Any = json.loads(args)
    except json.JSONDecodeError as e:
        err_console.print(f"[red]Invalid --args JSON:[/red] {e}")
        raise typer.Exit(2) from e
    if not isinstance(arguments, dict):
        err_console.print("[red]--args must be a JSON object[/red]")
        raise typer.Exit(2)

    response = asyncio.run(Dispatcher().invoke(name, arguments))
    typer.echo(response.text)
    if response.is_error:
        raise typer.Exit(1)


@app.command()
def doctor() -> None:
    """Check configuration and Nomi API connectivity."""
    console.print("[bold]Nomi MCP Doctor[/bold]")
    console.print()

    all_ok = _check_configuration()
    if all_ok:
        all_ok &= asyncio.run(_check_api())

    console.print()
    if all_ok:
        console.print("[green]All checks passed![/green]")
    else:
        console.print("[yellow]Some checks failed or were skipped.[/yellow]")
        raise typer.Exit(1)


def _check_configuration() -> bool:
    """Check environment configuration."""
    console.print("[bold]Configuration[/bold]")

    api_key = os.getenv(API_KEY_ENV)
    if api_key:
        # Mask secrets
        display = f"{api_key[:4]}...{api_key[-3:]}" if len(api_key) > 10 else "(set)"
        console.print(f"  [green]✓[/green] {API_KEY_ENV}: {display}")
    else:
        console.print(f"  [red]✗[/red] {API_KEY_ENV}: not configured")

    base_note = "" if os.getenv(API_BASE_ENV) else " (default)"
    console.print(f"  [dim]○[/dim] {API_BASE_ENV}: {get_api_base()}{base_note}")

    console.print()
    return bool(api_key)


async def _check_api() -> bool:
    """Check the API key against the Nomi API by listing Nomis."""
    from nomi_mcp.client import NomiClient
    from nomi_mcp.config import get_api_key

    console.print("[bold]API Connectivity[/bold]")

    try:
        async with NomiClient(get_api_key()) as client:
            result = await client.list_nomis()
    except NomiError as e:
        console.print(f"  [red]✗[/red] nomi: {e.message}")
        return False

    nomis = result.get("nomis", []) if isinstance(result, dict) else []
    console.print(f"  [green]✓[/green] nomi: Connected ({len(nomis)} Nomis)")
    return True


@app.command()
def version() -> None:
    """Show version information."""
    from nomi_mcp import __version__

    console.print(f"Nomi MCP Server v{__version__}")
