"""branchlog CLI main entry point.

Small tooling around the library: list the severity levels, validate
logger specification strings and push a test message through a
configuration.
"""

import logging
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ..config.settings import BranchlogSettings, apply_settings
from ..constants import OUTPUT_FORMATS
from ..exceptions import BranchlogError
from ..levels import Level, parse_level
from ..manager import LoggingManager
from . import __version__

console = Console()
logger = logging.getLogger(__name__)

LEVEL_NAMES = [level.name for level in Level if level != Level.UNSPECIFIED]


@click.group()
@click.version_option(version=__version__, prog_name="branchlog")
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity of the CLI's own diagnostics"
)
def cli(verbose: int) -> None:
    """branchlog: hierarchical module logging.

    \b
    Examples:
        branchlog levels
        branchlog check "<root>=INFO;app.db=DEBUG"
        branchlog emit --module app.db --level DEBUG --config "app=DEBUG" "hello"
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose > 1 else logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )


@cli.command()
def levels() -> None:
    """Show the severity levels."""
    table = Table(title="Severity levels")
    table.add_column("Level", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Short")

    for level in Level:
        table.add_row(level.name, str(int(level)), level.short.strip() or "-")

    console.print(table)


@cli.command()
@click.argument("specification")
def check(specification: str) -> None:
    """Validate a logger specification and print its normalized form."""
    manager = LoggingManager(writers={})
    try:
        manager.configure_loggers(specification)
    except BranchlogError as e:
        logger.debug("Rejected specification %r", specification)
        raise click.ClickException(str(e))

    normalized = manager.logger_info()
    if normalized:
        click.echo(normalized)
    else:
        click.echo("No levels configured (root stays at WARNING)")


@cli.command()
@click.argument("message")
@click.option("--module", "-m", default="", help="Module to log from (default: root)")
@click.option(
    "--level", "-l",
    type=click.Choice(LEVEL_NAMES, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Severity of the message",
)
@click.option("--config", "-c", "specification", help="Logger specification to apply first")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="default",
    show_default=True,
    help="Output format of the writer",
)
def emit(
    message: str,
    module: str,
    level: str,
    specification: Optional[str],
    output_format: str,
) -> None:
    """Emit MESSAGE through a freshly configured manager."""
    manager = LoggingManager(writers={})
    try:
        settings = BranchlogSettings(loggers=specification, format=output_format)
        apply_settings(settings, manager)
    except (BranchlogError, ValueError) as e:
        raise click.ClickException(str(e))

    log_level = parse_level(level)
    target = manager.get_logger(module)
    if not target.is_level_enabled(log_level):
        click.echo(
            f"{log_level} is disabled for {target.name} "
            f"(effective level {target.effective_log_level()})",
            err=True,
        )
        return
    target.log(log_level, message)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
