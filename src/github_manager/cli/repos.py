"""Repository commands."""

import typer
from rich.table import Table

from github_manager.cli.common import (
    FormatOption,
    PerPageOption,
    RepoArgument,
    render,
    run_command,
    validate_repo,
)
from github_manager.core.params import Params
from github_manager.core.results import ReturnFormat
from github_manager.logging import LogContext
from github_manager.managers import GitHubReleasesManager
from github_manager.schemas import Release

app = typer.Typer(help="Repository commands")


def _releases_table(releases: list[Release]) -> Table:
    table = Table(title="Releases")
    table.add_column("Tag", style="cyan")
    table.add_column("Name", max_width=40)
    table.add_column("Published")
    table.add_column("Assets", justify="right")
    table.add_column("Reactions", justify="right")
    table.add_column("Flags")

    for release in releases:
        flags = [flag for flag, on in (("draft", release.draft), ("pre", release.prerelease)) if on]
        table.add_row(
            release.tag_name or "",
            release.name or "",
            (release.published_at or "")[:10],
            str(len(release.assets)),
            str(release.reactions.total_count) if release.reactions else "0",
            ", ".join(flags),
        )
    return table


@app.command("releases")
def list_releases(
    repo: RepoArgument,
    output_format: FormatOption = ReturnFormat.LIBRARY_OBJECT,
    per_page: PerPageOption = None,
) -> None:
    """List releases of a repository, newest first.

    Examples:
        ghmanager repos releases octocat/hello-world
        ghmanager repos releases octocat/hello-world --format json -n 5
    """
    owner, name = validate_repo(repo)

    def _list() -> None:
        with LogContext(command="repos releases", target=repo), GitHubReleasesManager() as manager:
            value = manager.list_releases(
                owner, name, Params(per_page=per_page), fmt=output_format
            )
        render(value, output_format, _releases_table)

    run_command(_list, error_prefix="Listing releases failed")
