"""Common CLI option factories and helpers.

This module centralizes reusable CLI options so the noqa for Typer's
function-call defaults lives in one place.

It also provides:
- `run_command`: unified error handling for CLI commands
- `parse_target` / `validate_repo`: OWNER and OWNER/REPO argument parsing
- `render`: output in the format selected with ``--format``
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from github_manager.core import paths
from github_manager.core.exceptions import GitHubClientError, GitHubRateLimitError
from github_manager.core.results import ReturnFormat

# Shared console instance for CLI output
console = Console()

T = TypeVar("T")


def run_command(
    func: Callable[[], T],
    *,
    error_prefix: str = "Error",
) -> T:
    """Run a command body with unified error handling.

    Prints a red, user-friendly message and exits with code 1 when the
    body raises.

    Args:
        func: Zero-argument callable doing the command's work
        error_prefix: Prefix for error messages (default: "Error")

    Returns:
        Whatever ``func`` returns

    Raises:
        typer.Exit: Re-raised from deliberate exits, or raised with code 1 on error

    Example:
        def _list() -> None:
            with GitHubRunnersManager() as manager:
                ...

        run_command(_list, error_prefix="Listing runners failed")
    """
    try:
        return func()
    except typer.Exit:
        raise
    except GitHubRateLimitError as e:
        console.print(f"[red]{error_prefix}:[/red] {e}")
        if e.reset_at:
            console.print(f"  Resets at: {e.reset_at.strftime('%H:%M:%S UTC')}")
        raise typer.Exit(1) from None
    except GitHubClientError as e:
        console.print(f"[red]{error_prefix}:[/red] {e}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        console.print(f"[red]{error_prefix}:[/red] unexpected response shape ({e.error_count()} errors)")
        raise typer.Exit(1) from None


# Typer requires function calls as default arguments, which triggers B008.
# Using Annotated with a centralized type alias keeps the noqa in one place.

FormatOption = Annotated[
    ReturnFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format: typed (table), json (parsed) or raw (response text)",
        case_sensitive=False,
    ),
]
"""Output format option type for CLI commands.

Usage:
    def command(output_format: FormatOption = ReturnFormat.LIBRARY_OBJECT):
"""

PerPageOption = Annotated[
    int | None,
    typer.Option(
        "--per-page",
        "-n",
        min=1,
        max=100,
        help="Items per page (GitHub default: 30)",
    ),
]
"""Page size option for list commands.

Usage:
    def command(per_page: PerPageOption = None):
"""

# -----------------------------------------------------------------------------
# Target Arguments
# -----------------------------------------------------------------------------

RepoArgument = Annotated[
    str,
    typer.Argument(
        help="Repository in owner/name format (e.g., octocat/hello-world)",
    ),
]
"""Required positional repository argument."""

TargetArgument = Annotated[
    str,
    typer.Argument(
        help="Organization (e.g., octo-org) or repository in owner/name format",
    ),
]
"""Positional argument accepting either an organization or a repository."""


def validate_repo(repo: str) -> tuple[str, str]:
    """Parse and validate a single repository string.

    Args:
        repo: Repository string in owner/name format

    Returns:
        Tuple of (owner, name)

    Raises:
        typer.Exit(1): If format is invalid
    """
    try:
        return paths.split_full_name(repo)
    except ValueError:
        console.print("[red]Error:[/red] Repository must be in owner/name format")
        raise typer.Exit(1) from None


def parse_target(target: str) -> tuple[str, str | None]:
    """Split an OWNER or OWNER/REPO argument.

    Returns:
        ``(owner, None)`` for an organization, ``(owner, name)`` for a repository

    Raises:
        typer.Exit(1): If the argument is empty or malformed
    """
    target = target.strip()
    if "/" in target:
        return validate_repo(target)
    if not target:
        console.print("[red]Error:[/red] Expected an organization or owner/name")
        raise typer.Exit(1)
    return target, None


# -----------------------------------------------------------------------------
# Output
# -----------------------------------------------------------------------------


def render(
    value: Any,
    output_format: ReturnFormat,
    table: Callable[[Any], Table],
) -> None:
    """Print a fetched value in the selected format.

    Args:
        value: Result of ``GitHubManager.fetch_as``
        output_format: Format the value was fetched in
        table: Builds a rich table from the typed record
    """
    if output_format is ReturnFormat.STRING:
        console.print(value, markup=False, highlight=False, soft_wrap=True)
    elif output_format is ReturnFormat.JSON:
        console.print_json(data=value)
    else:
        console.print(table(value))


def count_caption(shown: int, total: int) -> str | None:
    """Table caption when GitHub reports more items than one page holds."""
    if total > shown:
        return f"{shown} of {total} shown"
    return None
