"""GitHub Actions secrets for organizations, repositories and environments.

Secret values are sealed client-side with the scope's public key
(libsodium sealed box) before they are sent.

See: https://docs.github.com/en/rest/actions/secrets
"""

from base64 import b64encode
from collections.abc import Iterable, Mapping
from typing import Any

from nacl import encoding, public
from nacl.exceptions import CryptoError

from github_manager.core import paths
from github_manager.core.exceptions import GitHubClientError, GitHubDecodeError
from github_manager.core.manager import CREATED_OR_NO_CONTENT, GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import ACTIONS, ENVIRONMENTS, PUBLIC_KEY, REPOSITORIES, SECRETS
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import PublicKey, RepositoriesList, Secret, SecretsList, Visibility


def seal_secret(public_key: str, value: str) -> str:
    """
    Encrypt a secret value for upload.

    Args:
        public_key: Base64-encoded public key from the ``public-key`` endpoint
        value: Plain-text secret

    Returns:
        Base64-encoded sealed box
    """
    key = public.PublicKey(public_key.encode("utf-8"), encoding.Base64Encoder())
    sealed = public.SealedBox(key).encrypt(value.encode("utf-8"))
    return b64encode(sealed).decode("utf-8")


class GitHubSecretsManager(GitHubManager):
    """Manage encrypted Actions secrets.

    Usage:
        with GitHubSecretsManager("ghp_...") as secrets:
            result = secrets.create_or_update_repository_secret(
                "octocat", "hello-world", "DEPLOY_KEY", "s3cr3t"
            )
            if not result:
                result.print_error_response()
    """

    # -------------------------------------------------------------------------
    # Organization
    # -------------------------------------------------------------------------
    def list_organization_secrets(
        self,
        org: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> SecretsList | Any:
        """GET /orgs/{org}/actions/secrets"""
        return self.fetch_as(paths.org(org, ACTIONS, SECRETS), SecretsList, fmt, params)

    def get_organization_public_key(
        self, org: str, *, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> PublicKey | Any:
        """GET /orgs/{org}/actions/secrets/public-key"""
        return self.fetch_as(paths.org(org, ACTIONS, SECRETS, PUBLIC_KEY), PublicKey, fmt)

    def get_organization_secret(
        self, org: str, secret_name: str, *, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> Secret | Any:
        """GET /orgs/{org}/actions/secrets/{secret_name}"""
        return self.fetch_as(paths.org(org, ACTIONS, SECRETS, secret_name), Secret, fmt)

    def create_or_update_organization_secret(
        self,
        org: str,
        secret_name: str,
        value: str,
        visibility: Visibility,
        selected_repository_ids: Iterable[int] | None = None,
        public_key: PublicKey | None = None,
    ) -> WriteResult:
        """
        PUT /orgs/{org}/actions/secrets/{secret_name}

        Args:
            org: Organization login
            secret_name: Secret name
            value: Plain-text value (sealed before sending)
            visibility: Which repositories can use the secret
            selected_repository_ids: Repositories with access when ``visibility`` is selected
            public_key: Key to seal with (fetched when omitted)

        Returns:
            WriteResult, successful on 201 (created) or 204 (updated)
        """
        extra: dict[str, Any] = {"visibility": visibility}
        if selected_repository_ids is not None:
            extra["selected_repository_ids"] = list(selected_repository_ids)
        return self._put_secret(
            paths.org(org, ACTIONS, SECRETS, secret_name),
            paths.org(org, ACTIONS, SECRETS, PUBLIC_KEY),
            value,
            public_key,
            extra,
        )

    def delete_organization_secret(self, org: str, secret_name: str) -> WriteResult:
        """DELETE /orgs/{org}/actions/secrets/{secret_name}"""
        return self._write("DELETE", paths.org(org, ACTIONS, SECRETS, secret_name))

    def list_selected_repositories(
        self,
        org: str,
        secret_name: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoriesList | Any:
        """GET /orgs/{org}/actions/secrets/{secret_name}/repositories"""
        return self.fetch_as(
            paths.org(org, ACTIONS, SECRETS, secret_name, REPOSITORIES),
            RepositoriesList,
            fmt,
            params,
        )

    def set_selected_repositories(
        self, org: str, secret_name: str, repository_ids: Iterable[int]
    ) -> WriteResult:
        """PUT /orgs/{org}/actions/secrets/{secret_name}/repositories"""
        return self._write(
            "PUT",
            paths.org(org, ACTIONS, SECRETS, secret_name, REPOSITORIES),
            body={"selected_repository_ids": list(repository_ids)},
        )

    def add_selected_repository(
        self, org: str, secret_name: str, repository_id: int
    ) -> WriteResult:
        """PUT /orgs/{org}/actions/secrets/{secret_name}/repositories/{repository_id}"""
        return self._write(
            "PUT", paths.org(org, ACTIONS, SECRETS, secret_name, REPOSITORIES, repository_id)
        )

    def remove_selected_repository(
        self, org: str, secret_name: str, repository_id: int
    ) -> WriteResult:
        """DELETE /orgs/{org}/actions/secrets/{secret_name}/repositories/{repository_id}"""
        return self._write(
            "DELETE", paths.org(org, ACTIONS, SECRETS, secret_name, REPOSITORIES, repository_id)
        )

    # -------------------------------------------------------------------------
    # Repository
    # -------------------------------------------------------------------------
    def list_repository_secrets(
        self,
        owner: str,
        repo: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> SecretsList | Any:
        """GET /repos/{owner}/{repo}/actions/secrets"""
        return self.fetch_as(paths.repo(owner, repo, ACTIONS, SECRETS), SecretsList, fmt, params)

    def get_repository_public_key(
        self, owner: str, repo: str, *, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> PublicKey | Any:
        """GET /repos/{owner}/{repo}/actions/secrets/public-key"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, SECRETS, PUBLIC_KEY), PublicKey, fmt
        )

    def get_repository_secret(
        self,
        owner: str,
        repo: str,
        secret_name: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Secret | Any:
        """GET /repos/{owner}/{repo}/actions/secrets/{secret_name}"""
        return self.fetch_as(paths.repo(owner, repo, ACTIONS, SECRETS, secret_name), Secret, fmt)

    def create_or_update_repository_secret(
        self,
        owner: str,
        repo: str,
        secret_name: str,
        value: str,
        public_key: PublicKey | None = None,
    ) -> WriteResult:
        """PUT /repos/{owner}/{repo}/actions/secrets/{secret_name} (201 or 204)"""
        return self._put_secret(
            paths.repo(owner, repo, ACTIONS, SECRETS, secret_name),
            paths.repo(owner, repo, ACTIONS, SECRETS, PUBLIC_KEY),
            value,
            public_key,
        )

    def delete_repository_secret(self, owner: str, repo: str, secret_name: str) -> WriteResult:
        """DELETE /repos/{owner}/{repo}/actions/secrets/{secret_name}"""
        return self._write("DELETE", paths.repo(owner, repo, ACTIONS, SECRETS, secret_name))

    # -------------------------------------------------------------------------
    # Environment
    # -------------------------------------------------------------------------
    def list_environment_secrets(
        self,
        repository_id: int,
        environment_name: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> SecretsList | Any:
        """GET /repositories/{repository_id}/environments/{environment_name}/secrets"""
        return self.fetch_as(
            paths.repository_id(repository_id, ENVIRONMENTS, environment_name, SECRETS),
            SecretsList,
            fmt,
            params,
        )

    def get_environment_public_key(
        self,
        repository_id: int,
        environment_name: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> PublicKey | Any:
        """GET /repositories/{repository_id}/environments/{environment_name}/secrets/public-key"""
        return self.fetch_as(
            paths.repository_id(repository_id, ENVIRONMENTS, environment_name, SECRETS, PUBLIC_KEY),
            PublicKey,
            fmt,
        )

    def get_environment_secret(
        self,
        repository_id: int,
        environment_name: str,
        secret_name: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Secret | Any:
        """GET /repositories/{repository_id}/environments/{environment_name}/secrets/{secret_name}"""
        return self.fetch_as(
            paths.repository_id(
                repository_id, ENVIRONMENTS, environment_name, SECRETS, secret_name
            ),
            Secret,
            fmt,
        )

    def create_or_update_environment_secret(
        self,
        repository_id: int,
        environment_name: str,
        secret_name: str,
        value: str,
        public_key: PublicKey | None = None,
    ) -> WriteResult:
        """PUT /repositories/{repository_id}/environments/{environment_name}/secrets/{secret_name}"""
        return self._put_secret(
            paths.repository_id(
                repository_id, ENVIRONMENTS, environment_name, SECRETS, secret_name
            ),
            paths.repository_id(repository_id, ENVIRONMENTS, environment_name, SECRETS, PUBLIC_KEY),
            value,
            public_key,
        )

    def delete_environment_secret(
        self, repository_id: int, environment_name: str, secret_name: str
    ) -> WriteResult:
        """DELETE /repositories/{repository_id}/environments/{environment_name}/secrets/{secret_name}"""
        return self._write(
            "DELETE",
            paths.repository_id(
                repository_id, ENVIRONMENTS, environment_name, SECRETS, secret_name
            ),
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _put_secret(
        self,
        path: str,
        key_path: str,
        value: str,
        public_key: PublicKey | None,
        extra: Mapping[str, Any] | None = None,
    ) -> WriteResult:
        """Seal ``value`` with the scope's public key and PUT it."""
        if public_key is None:
            try:
                public_key = self.fetch_typed(key_path, PublicKey)
            except GitHubClientError as e:
                return self._failure("GET", key_path, e)
        if not public_key.key or not public_key.key_id:
            return self._failure(
                "GET", key_path, GitHubDecodeError("Public key missing from response")
            )

        try:
            encrypted_value = seal_secret(public_key.key, value)
        except (ValueError, CryptoError) as e:
            return self._failure(
                "GET", key_path, GitHubDecodeError(f"Public key is not a valid sealing key: {e}")
            )

        body = Params(encrypted_value=encrypted_value, key_id=public_key.key_id).add_all(extra)
        return self._write("PUT", path, body=body, expected=CREATED_OR_NO_CONTENT)
