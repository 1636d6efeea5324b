"""Route segments and path builders for the GitHub REST API.

Every builder returns a path relative to the API base URL with a leading
slash. Caller-supplied identifiers are percent-encoded so a secret or tag
name can never inject extra path segments.

    >>> repo("octocat", "hello-world", ACTIONS, "runners")
    '/repos/octocat/hello-world/actions/runners'
"""

from urllib.parse import quote

ORGS = "orgs"
REPOS = "repos"
REPOSITORIES = "repositories"
USER = "user"
ACTIONS = "actions"
PERMISSIONS = "permissions"
SECRETS = "secrets"
PUBLIC_KEY = "public-key"
RUNNERS = "runners"
WORKFLOWS = "workflows"
RUNS = "runs"
ARTIFACTS = "artifacts"
CHECK_RUNS = "check-runs"
CHECK_SUITES = "check-suites"
COMMITS = "commits"
RELEASES = "releases"
ASSETS = "assets"
PACKAGES = "packages"
VERSIONS = "versions"
MIGRATIONS = "migrations"
REACTIONS = "reactions"
ISSUES = "issues"
COMMENTS = "comments"
HOOKS = "hooks"
ENVIRONMENTS = "environments"
RATE_LIMIT = "rate_limit"


def _segment(part: object) -> str:
    return quote(str(part), safe="")


def join(*parts: object) -> str:
    """Join segments into an absolute API path, encoding each one."""
    return "/" + "/".join(_segment(part) for part in parts)


def org(login: str, *parts: object) -> str:
    """Build ``/orgs/{org}/...``."""
    return join(ORGS, login, *parts)


def repo(owner: str, name: str, *parts: object) -> str:
    """Build ``/repos/{owner}/{repo}/...``."""
    return join(REPOS, owner, name, *parts)


def repository_id(repository_id: int, *parts: object) -> str:
    """Build ``/repositories/{repository_id}/...`` (environment-scoped routes)."""
    return join(REPOSITORIES, repository_id, *parts)


def user(*parts: object) -> str:
    """Build ``/user/...`` for the authenticated user."""
    return join(USER, *parts)


def split_full_name(full_name: str) -> tuple[str, str]:
    """
    Split an ``owner/name`` string.

    Args:
        full_name: Repository path like 'octocat/hello-world'

    Returns:
        Tuple of (owner, name)

    Raises:
        ValueError: If the string is not in owner/name format
    """
    owner, sep, name = full_name.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        raise ValueError(f"Expected owner/name, got {full_name!r}")
    return owner, name
