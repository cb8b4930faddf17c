"""CLI entry point for integration-catalog.

Invoked as::

    integrations [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m integration_catalog.cli.main

Commands
--------
list        List integrations grouped by category
search      Search integrations by name or description
info        Show details and setup hints for one integration
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from integration_catalog.config import Config
    from integration_catalog.query.results import (
        IntegrationDetail,
        ListResult,
        SearchResult,
    )

console = Console()
err_console = Console(stderr=True)

_FORMAT_CHOICE = click.Choice(["text", "json", "yaml"], case_sensitive=False)


def _load_config_or_exit(ctx: click.Context) -> "Config":
    """Load the configuration named on the command line, exiting on error."""
    from integration_catalog.config import load_config
    from integration_catalog.errors import ConfigError

    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {escape(str(exc))}")
        sys.exit(1)


def _exit_with_error(exc: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    sys.exit(1)


def _enable_debug_logging() -> None:
    """Route the package's debug records to stderr through rich.

    The handler goes on the ``integration_catalog`` logger, not the root
    logger, so it works even when the host process already configured logging.
    """
    package_logger = logging.getLogger("integration_catalog")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(console=err_console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


def _emit_structured(result: object, output_format: str) -> None:
    """Print a query result as JSON or YAML."""
    from integration_catalog.query.serializer import ResultSerializer

    serializer = ResultSerializer()
    if output_format == "json":
        click.echo(serializer.to_json(result))  # type: ignore[arg-type]
    else:
        click.echo(serializer.to_yaml(result), nl=False)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _render_list(result: "ListResult") -> None:
    console.print()
    console.print("[bold white]ZeroClaw Integrations[/bold white]")
    console.print()

    if result.is_empty:
        console.print("  No integrations match the specified filters.")
        console.print()
        return

    for group in result.groups:
        console.print(f"  [bold cyan]{escape(group.category.label)}[/bold cyan]")
        for view in group.integrations:
            console.print(
                f"    {view.status.icon} [white]{escape(view.name)}[/white] — "
                f"[dim]{escape(view.description)}[/dim]"
            )
        console.print()

    console.print("  Legend:")
    console.print("    ✅ Active (configured)")
    console.print("    ⚪ Available")
    console.print("    🔜 Coming Soon")
    console.print()
    console.print("  Run `integrations info <name>` for setup details.")
    console.print()


def _render_search(result: "SearchResult") -> None:
    console.print()
    console.print(f"[bold white]Search results for '{escape(result.query)}'[/bold white]")
    console.print()

    if result.is_empty:
        console.print("  No integrations found matching your query.")
        console.print()
        console.print(
            "  Try a different search term or run `integrations list` to see all options."
        )
        console.print()
        return

    for view in result.matches:
        console.print(
            f"  {view.status.icon} [white]{escape(view.name)}[/white] — "
            f"[dim]{escape(view.description)}[/dim] "
            f"[cyan]{escape('[' + view.category.label + ']')}[/cyan]"
        )

    console.print()
    console.print("  Run `integrations info <name>` for setup details.")
    console.print()


def _render_info(detail: "IntegrationDetail") -> None:
    entry = detail.entry
    console.print()
    console.print(
        f"  {detail.status.icon} [bold white]{escape(entry.name)}[/bold white] — "
        f"{escape(entry.description)}"
    )
    console.print(f"  Category: {escape(entry.category.label)}")
    console.print(f"  Status:   {detail.status.label}")
    console.print()

    hint = detail.setup_hint
    if hint is not None:
        indent = "  "
        if hint.heading:
            console.print(f"  {escape(hint.heading)}")
            indent = "    "
        for line in hint.lines:
            console.print(f"{indent}{escape(line)}")
        console.print()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="integration-catalog")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="INTEGRATIONS_CONFIG",
    default=None,
    help="YAML configuration file used to evaluate integration status.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Browse the integrations zeroclaw can connect to."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if verbose:
        _enable_debug_logging()


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from integration_catalog import __version__
    from integration_catalog.registry import all_integrations

    table = Table(show_header=False, box=None)
    table.add_row("[bold]integration-catalog[/bold]", f"v{__version__}")
    table.add_row("Integrations", str(len(all_integrations())))
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# list command
# ---------------------------------------------------------------------------


@cli.command(name="list")
@click.option("--category", "-c", default=None, help="Filter by category (e.g. chat, ai, smart-home)")
@click.option("--status", "-s", default=None, help="Filter by status (active, available, coming-soon)")
@click.option("--format", "output_format", type=_FORMAT_CHOICE, default="text", help="Output format")
@click.pass_context
def list_command(
    ctx: click.Context, category: str | None, status: str | None, output_format: str
) -> None:
    """List all integrations grouped by category."""
    from integration_catalog.errors import InvalidFilterError
    from integration_catalog.query import QueryEngine

    config = _load_config_or_exit(ctx)
    try:
        result = QueryEngine(config).list(category=category, status=status)
    except InvalidFilterError as exc:
        _exit_with_error(exc)

    if output_format.lower() == "text":
        _render_list(result)
    else:
        _emit_structured(result, output_format.lower())


# ---------------------------------------------------------------------------
# search command
# ---------------------------------------------------------------------------


@cli.command(name="search")
@click.argument("query")
@click.option("--category", "-c", default=None, help="Filter by category (e.g. chat, ai, smart-home)")
@click.option("--status", "-s", default=None, help="Filter by status (active, available, coming-soon)")
@click.option("--format", "output_format", type=_FORMAT_CHOICE, default="text", help="Output format")
@click.pass_context
def search_command(
    ctx: click.Context,
    query: str,
    category: str | None,
    status: str | None,
    output_format: str,
) -> None:
    """Search integrations by name or description.

    QUERY is matched case-insensitively as a substring.

    Examples:

    \b
        integrations search tele
        integrations search models --status active
    """
    from integration_catalog.errors import InvalidFilterError
    from integration_catalog.query import QueryEngine

    config = _load_config_or_exit(ctx)
    try:
        result = QueryEngine(config).search(query, category=category, status=status)
    except InvalidFilterError as exc:
        _exit_with_error(exc)

    if output_format.lower() == "text":
        _render_search(result)
    else:
        _emit_structured(result, output_format.lower())


# ---------------------------------------------------------------------------
# info command
# ---------------------------------------------------------------------------


@cli.command(name="info")
@click.argument("name")
@click.option("--format", "output_format", type=_FORMAT_CHOICE, default="text", help="Output format")
@click.pass_context
def info_command(ctx: click.Context, name: str, output_format: str) -> None:
    """Show details and setup hints for one integration.

    NAME is matched case-insensitively against integration names.
    """
    from integration_catalog.errors import UnknownIntegrationError
    from integration_catalog.query import QueryEngine

    config = _load_config_or_exit(ctx)
    try:
        detail = QueryEngine(config).info(name)
    except UnknownIntegrationError as exc:
        _exit_with_error(exc)

    if output_format.lower() == "text":
        _render_info(detail)
    else:
        _emit_structured(detail, output_format.lower())


if __name__ == "__main__":
    cli()
