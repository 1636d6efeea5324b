"""GitHub Packages owned by organizations or the authenticated user.

See: https://docs.github.com/en/rest/packages/packages
"""

from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import PACKAGES, VERSIONS
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import Package, PackageType, PackageVersion, RepoVisibility

RESTORE = "restore"


def _org_packages(org: str, *parts: object) -> str:
    return paths.org(org, PACKAGES, *parts)


def _user_packages(*parts: object) -> str:
    return paths.user(PACKAGES, *parts)


class GitHubPackagesManager(GitHubManager):
    """List, inspect, delete and restore packages and package versions.

    Organization methods take the org login; ``*_for_user`` methods act on
    the packages of the token's own account.
    """

    # -------------------------------------------------------------------------
    # Organization
    # -------------------------------------------------------------------------
    def list_organization_packages(
        self,
        org: str,
        package_type: PackageType,
        visibility: RepoVisibility | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Package] | Any:
        """GET /orgs/{org}/packages (``package_type`` is required by GitHub)"""
        return self.fetch_as(
            _org_packages(org),
            list[Package],
            fmt,
            Params.of(params, package_type=package_type, visibility=visibility),
        )

    def get_organization_package(
        self,
        org: str,
        package_type: PackageType,
        package_name: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Package | Any:
        """GET /orgs/{org}/packages/{package_type}/{package_name}"""
        return self.fetch_as(_org_packages(org, package_type, package_name), Package, fmt)

    def delete_organization_package(
        self, org: str, package_type: PackageType, package_name: str
    ) -> WriteResult:
        """DELETE /orgs/{org}/packages/{package_type}/{package_name}"""
        return self._write("DELETE", _org_packages(org, package_type, package_name))

    def restore_organization_package(
        self, org: str, package_type: PackageType, package_name: str, token: str | None = None
    ) -> WriteResult:
        """POST /orgs/{org}/packages/{package_type}/{package_name}/restore"""
        return self._write(
            "POST",
            _org_packages(org, package_type, package_name, RESTORE),
            params=Params(token=token),
        )

    def list_organization_package_versions(
        self,
        org: str,
        package_type: PackageType,
        package_name: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[PackageVersion] | Any:
        """GET /orgs/{org}/packages/{package_type}/{package_name}/versions"""
        return self.fetch_as(
            _org_packages(org, package_type, package_name, VERSIONS),
            list[PackageVersion],
            fmt,
            params,
        )

    def get_organization_package_version(
        self,
        org: str,
        package_type: PackageType,
        package_name: str,
        version_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> PackageVersion | Any:
        """GET /orgs/{org}/packages/{package_type}/{package_name}/versions/{version_id}"""
        return self.fetch_as(
            _org_packages(org, package_type, package_name, VERSIONS, version_id),
            PackageVersion,
            fmt,
        )

    def delete_organization_package_version(
        self, org: str, package_type: PackageType, package_name: str, version_id: int
    ) -> WriteResult:
        """DELETE /orgs/{org}/packages/{package_type}/{package_name}/versions/{version_id}"""
        return self._write(
            "DELETE", _org_packages(org, package_type, package_name, VERSIONS, version_id)
        )

    def restore_organization_package_version(
        self, org: str, package_type: PackageType, package_name: str, version_id: int
    ) -> WriteResult:
        """POST .../versions/{version_id}/restore"""
        return self._write(
            "POST", _org_packages(org, package_type, package_name, VERSIONS, version_id, RESTORE)
        )

    # -------------------------------------------------------------------------
    # Authenticated user
    # -------------------------------------------------------------------------
    def list_packages_for_user(
        self,
        package_type: PackageType,
        visibility: RepoVisibility | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Package] | Any:
        """GET /user/packages"""
        return self.fetch_as(
            _user_packages(),
            list[Package],
            fmt,
            Params.of(params, package_type=package_type, visibility=visibility),
        )

    def get_package_for_user(
        self,
        package_type: PackageType,
        package_name: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Package | Any:
        """GET /user/packages/{package_type}/{package_name}"""
        return self.fetch_as(_user_packages(package_type, package_name), Package, fmt)

    def delete_package_for_user(
        self, package_type: PackageType, package_name: str
    ) -> WriteResult:
        """DELETE /user/packages/{package_type}/{package_name}"""
        return self._write("DELETE", _user_packages(package_type, package_name))

    def restore_package_for_user(
        self, package_type: PackageType, package_name: str, token: str | None = None
    ) -> WriteResult:
        """POST /user/packages/{package_type}/{package_name}/restore"""
        return self._write(
            "POST", _user_packages(package_type, package_name, RESTORE), params=Params(token=token)
        )

    def list_package_versions_for_user(
        self,
        package_type: PackageType,
        package_name: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[PackageVersion] | Any:
        """GET /user/packages/{package_type}/{package_name}/versions"""
        return self.fetch_as(
            _user_packages(package_type, package_name, VERSIONS), list[PackageVersion], fmt, params
        )

    def get_package_version_for_user(
        self,
        package_type: PackageType,
        package_name: str,
        version_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> PackageVersion | Any:
        """GET /user/packages/{package_type}/{package_name}/versions/{version_id}"""
        return self.fetch_as(
            _user_packages(package_type, package_name, VERSIONS, version_id), PackageVersion, fmt
        )

    def delete_package_version_for_user(
        self, package_type: PackageType, package_name: str, version_id: int
    ) -> WriteResult:
        """DELETE /user/packages/{package_type}/{package_name}/versions/{version_id}"""
        return self._write("DELETE", _user_packages(package_type, package_name, VERSIONS, version_id))

    def restore_package_version_for_user(
        self, package_type: PackageType, package_name: str, version_id: int
    ) -> WriteResult:
        """POST /user/packages/{package_type}/{package_name}/versions/{version_id}/restore"""
        return self._write(
            "POST", _user_packages(package_type, package_name, VERSIONS, version_id, RESTORE)
        )
