"""booster CLI — inspect and validate an application's configuration.

`booster check app.config:config` validates the configuration before a
deploy; `resources` and `versions` show what the deploy would derive.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from booster.cli.context import load_config
from booster.config import BoosterConfig
from booster.exceptions import BoosterError, TargetError
from booster.logger import Level, configure_logging
from booster.settings import BoosterSettings

console = Console()

_app = typer.Typer(
    name="booster",
    help="booster -- inspect and validate Booster application configurations.",
    no_args_is_help=True,
)

_TARGET_HELP = "Configuration to load, as module:attribute"


@_app.callback()
def _setup(
    ctx: typer.Context,
    log_level: Level | None = typer.Option(
        None, "--log-level", "-l", case_sensitive=False, help="Log level"
    ),
):
    try:
        env_level = BoosterSettings().log_level
    except ValidationError:
        raise typer.BadParameter(
            "BOOSTER_LOG_LEVEL must be one of: " + ", ".join(level.value for level in Level)
        )
    # An explicit level wins over the one declared by the loaded config
    ctx.obj = log_level or env_level
    configure_logging(ctx.obj or Level.INFO)


def _load(ctx: typer.Context, target: str) -> BoosterConfig:
    try:
        config = load_config(target)
    except TargetError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)
    except (BoosterError, ValidationError) as e:
        _print_invalid(e)
        raise typer.Exit(code=1)

    if ctx.obj is None:
        configure_logging(config.log_level)
    return config


def _print_invalid(error: Exception) -> None:
    console.print(Panel(
        f"[red]{escape(str(error))}[/red]", title="Invalid configuration", border_style="red",
    ))


@_app.command("check")
def check(ctx: typer.Context, target: str = typer.Argument(help=_TARGET_HELP)):
    """Validate the configuration (migrations must be consecutive)."""
    config = _load(ctx, target)
    try:
        config.validate()
    except BoosterError as e:
        _print_invalid(e)
        raise typer.Exit(code=1)

    console.print(Panel(
        f"[green]Configuration is valid[/green]\n\n"
        f"Environment:  {config.environment_name}\n"
        f"Application:  {config.app_name}\n"
        f"Migrated:     {len(config.migrations)} concepts\n"
        f"Roles:        {len(config.roles)}",
        title="booster",
        border_style="cyan",
    ))


@_app.command("resources")
def resources(ctx: typer.Context, target: str = typer.Argument(help=_TARGET_HELP)):
    """Show the resource names derived from the application name."""
    config = _load(ctx, target)
    try:
        names = config.resource_names
    except BoosterError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"Resources — {config.environment_name}")
    table.add_column("Resource", style="cyan")
    table.add_column("Name", style="white")
    table.add_row("Application stack", names.application_stack)
    table.add_row("Events store", names.events_store)
    table.add_row("Subscriptions store", names.subscriptions_store)
    table.add_row("Connections store", names.connections_store)
    for read_model_name in sorted(config.read_models):
        table.add_row(f"Read model {read_model_name}", names.for_read_model(read_model_name))

    console.print(table)


@_app.command("versions")
def versions(ctx: typer.Context, target: str = typer.Argument(help=_TARGET_HELP)):
    """Show the current schema version of every migrated concept."""
    config = _load(ctx, target)

    if not config.migrations:
        console.print("[dim]No migrations declared.[/dim]")
        return

    table = Table(title="Schema versions")
    table.add_column("Concept", style="cyan")
    table.add_column("Current version", justify="right")
    table.add_column("Declared migrations", style="dim")
    for concept_name in sorted(config.migrations):
        declared = sorted(config.migrations[concept_name])
        table.add_row(
            concept_name,
            str(config.current_version_for(concept_name)),
            ", ".join(str(v) for v in declared),
        )

    console.print(table)


@_app.command("version")
def version():
    """Show the booster version."""
    from booster import __version__
    console.print(f"booster v{__version__}")


app = _app


def main() -> None:
    _app()
