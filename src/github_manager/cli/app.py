"""Main CLI application for GitHub Manager."""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from github_manager import __version__
from github_manager.cli import actions as actions_cmd
from github_manager.cli import repos as repos_cmd
from github_manager.cli.common import FormatOption, console, render, run_command
from github_manager.config import get_settings
from github_manager.core.results import ReturnFormat
from github_manager.logging import LogContext, setup_logging
from github_manager.managers import GitHubRateLimitManager
from github_manager.schemas import RateLimit, RateLimitStatus

app = typer.Typer(
    name="ghmanager",
    help="Typed command-line access to the GitHub REST API.",
    add_completion=False,
)

STATUS_STYLES = {
    RateLimitStatus.HEALTHY: "green",
    RateLimitStatus.WARNING: "yellow",
    RateLimitStatus.CRITICAL: "red",
    RateLimitStatus.EXHAUSTED: "bold red",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ghmanager version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-error output (WARNING level).",
        ),
    ] = False,
) -> None:
    """GitHub Manager - inspect Actions, releases and quota from the terminal."""
    settings = get_settings()
    log_config = settings.logging

    setup_logging(
        level=settings.log_level,
        verbose=verbose,
        quiet=quiet,
        log_file=Path(log_config.log_file) if log_config.log_file else None,
        rotation=log_config.rotation,
        retention=log_config.retention,
        serialize=log_config.serialize,
    )


def _rate_limit_table(rate_limit: RateLimit) -> Table:
    table = Table(title="Rate limit")
    table.add_column("Pool", style="cyan")
    table.add_column("Remaining", justify="right")
    table.add_column("Limit", justify="right")
    table.add_column("Used %", justify="right")
    table.add_column("Resets")
    table.add_column("Status")

    for name, pool in sorted(rate_limit.resources.items()):
        status = pool.get_status()
        reset_at = pool.reset_at
        table.add_row(
            name,
            str(pool.remaining),
            str(pool.limit),
            f"{pool.usage_percent:.1f}",
            reset_at.strftime("%H:%M:%S UTC") if reset_at else "-",
            f"[{STATUS_STYLES[status]}]{status.value}[/]",
        )
    return table


@app.command("rate-limit")
def rate_limit(output_format: FormatOption = ReturnFormat.LIBRARY_OBJECT) -> None:
    """Show remaining API quota for the configured token.

    Examples:
        ghmanager rate-limit
        ghmanager rate-limit --format json
    """

    def _show() -> None:
        with LogContext(command="rate-limit"), GitHubRateLimitManager() as manager:
            value = manager.get_rate_limit(fmt=output_format)
        render(value, output_format, _rate_limit_table)

    run_command(_show, error_prefix="Rate limit check failed")


# Register subcommands
app.add_typer(actions_cmd.app, name="actions")
app.add_typer(repos_cmd.app, name="repos")


if __name__ == "__main__":
    app()
