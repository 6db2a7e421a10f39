"""Library entry point — resolve unreleased commits without the HTTP server.

Example::

    async with CommitsSinceTag(user="octocat", token="ghp_...") as cst:
        result = await cst.resolve_one_repository("octocat/hello-world")
        results = await cst.resolve_account_repositories("octocat")
"""

from __future__ import annotations

from types import TracebackType

import httpx

from commits_since_tag.domain.entities import OwnerScanReport, PublishedResult
from commits_since_tag.domain.exceptions import ConfigurationError
from commits_since_tag.infrastructure.config import Settings
from commits_since_tag.infrastructure.github_rest_adapter import GITHUB_API, GitHubRestAdapter
from commits_since_tag.services.resolve_repo import ResolveRepoUseCase
from commits_since_tag.services.scan_owner import ScanOwnerUseCase


class CommitsSinceTag:
    """Owns an ``httpx.AsyncClient`` and exposes the two resolve operations."""

    def __init__(
        self,
        user: str,
        token: str,
        *,
        base_url: str = GITHUB_API,
        timeout: float = 30.0,
        isolate_repo_failures: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not user or not token:
            raise ConfigurationError("user or token missing")

        self._client = httpx.AsyncClient(timeout=httpx.Timeout(timeout), transport=transport)
        host = GitHubRestAdapter(client=self._client, user=user, token=token, base_url=base_url)
        self._resolve_repo = ResolveRepoUseCase(host)
        self._scan_owner = ScanOwnerUseCase(host, isolate_repo_failures=isolate_repo_failures)

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> CommitsSinceTag:
        return cls(
            user=settings.github_user,
            token=settings.github_token.get_secret_value(),
            base_url=settings.github_api_url,
            timeout=settings.request_timeout,
            isolate_repo_failures=settings.isolate_repo_failures,
            transport=transport,
        )

    async def resolve_one_repository(self, full_name: str) -> PublishedResult:
        """Commits since the latest release tag of ``owner/name``."""
        return await self._resolve_repo.execute(full_name)

    async def resolve_account_repositories(self, login: str) -> list[PublishedResult]:
        """Commits since the latest release tag of each of *login*'s repositories.

        Forks, untagged repositories and repositories with nothing new since
        their tag are left out.
        """
        report = await self._scan_owner.execute(login)
        return list(report.results)

    async def scan_account(self, login: str) -> OwnerScanReport:
        """Like :meth:`resolve_account_repositories`, with per-repo failures."""
        return await self._scan_owner.execute(login)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> CommitsSinceTag:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
