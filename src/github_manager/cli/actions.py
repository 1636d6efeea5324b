"""GitHub Actions commands: runners, secrets and workflows."""

import typer
from rich.table import Table

from github_manager.cli.common import (
    FormatOption,
    PerPageOption,
    RepoArgument,
    TargetArgument,
    count_caption,
    parse_target,
    render,
    run_command,
    validate_repo,
)
from github_manager.core.params import Params
from github_manager.core.results import ReturnFormat
from github_manager.logging import LogContext, bind_org, bind_repo
from github_manager.managers import (
    GitHubRunnersManager,
    GitHubSecretsManager,
    GitHubWorkflowsManager,
)
from github_manager.schemas import RunnersList, SecretsList, WorkflowsList

app = typer.Typer(help="GitHub Actions commands")


def _log_scope(owner: str, repo: str | None) -> None:
    if repo is None:
        bind_org(owner).debug("Organization scope")
    else:
        bind_repo(owner, repo).debug("Repository scope")


def _runners_table(runners: RunnersList) -> Table:
    table = Table(title="Self-hosted runners", caption=count_caption(len(runners), runners.total_count))
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name")
    table.add_column("OS")
    table.add_column("Status")
    table.add_column("Busy")
    table.add_column("Labels")

    for runner in runners:
        table.add_row(
            str(runner.id),
            runner.name or "",
            runner.os or "",
            runner.status or "",
            "yes" if runner.busy else "no",
            ", ".join(label.name for label in runner.labels if label.name),
        )
    return table


def _secrets_table(secrets: SecretsList) -> Table:
    table = Table(title="Secrets", caption=count_caption(len(secrets), secrets.total_count))
    table.add_column("Name", style="cyan")
    table.add_column("Visibility")
    table.add_column("Updated")

    for secret in secrets:
        table.add_row(
            secret.name or "",
            secret.visibility.value if secret.visibility else "",
            secret.updated_at or "",
        )
    return table


def _workflows_table(workflows: WorkflowsList) -> Table:
    table = Table(title="Workflows", caption=count_caption(len(workflows), workflows.total_count))
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name")
    table.add_column("Path")
    table.add_column("State")

    for workflow in workflows:
        table.add_row(
            str(workflow.id),
            workflow.name or "",
            workflow.path or "",
            workflow.state.value if workflow.state else "",
        )
    return table


@app.command("runners")
def list_runners(
    target: TargetArgument,
    output_format: FormatOption = ReturnFormat.LIBRARY_OBJECT,
    per_page: PerPageOption = None,
) -> None:
    """List self-hosted runners of an organization or repository.

    Examples:
        ghmanager actions runners octo-org
        ghmanager actions runners octocat/hello-world --format json
    """
    owner, repo = parse_target(target)

    def _list() -> None:
        with LogContext(command="actions runners", target=target), GitHubRunnersManager() as manager:
            _log_scope(owner, repo)
            params = Params(per_page=per_page)
            if repo is None:
                value = manager.list_organization_runners(owner, params, fmt=output_format)
            else:
                value = manager.list_repository_runners(owner, repo, params, fmt=output_format)
        render(value, output_format, _runners_table)

    run_command(_list, error_prefix="Listing runners failed")


@app.command("secrets")
def list_secrets(
    target: TargetArgument,
    output_format: FormatOption = ReturnFormat.LIBRARY_OBJECT,
    per_page: PerPageOption = None,
) -> None:
    """List Actions secret names (values are never returned).

    Examples:
        ghmanager actions secrets octo-org
        ghmanager actions secrets octocat/hello-world -f raw
    """
    owner, repo = parse_target(target)

    def _list() -> None:
        with LogContext(command="actions secrets", target=target), GitHubSecretsManager() as manager:
            _log_scope(owner, repo)
            params = Params(per_page=per_page)
            if repo is None:
                value = manager.list_organization_secrets(owner, params, fmt=output_format)
            else:
                value = manager.list_repository_secrets(owner, repo, params, fmt=output_format)
        render(value, output_format, _secrets_table)

    run_command(_list, error_prefix="Listing secrets failed")


@app.command("workflows")
def list_workflows(
    repo: RepoArgument,
    output_format: FormatOption = ReturnFormat.LIBRARY_OBJECT,
    per_page: PerPageOption = None,
) -> None:
    """List the workflows defined in a repository.

    Examples:
        ghmanager actions workflows octocat/hello-world
    """
    owner, name = validate_repo(repo)

    def _list() -> None:
        with LogContext(command="actions workflows", target=repo), GitHubWorkflowsManager() as manager:
            _log_scope(owner, name)
            value = manager.list_workflows(
                owner, name, Params(per_page=per_page), fmt=output_format
            )
        render(value, output_format, _workflows_table)

    run_command(_list, error_prefix="Listing workflows failed")
