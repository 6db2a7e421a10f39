"""Scan-owner use case — commits since the last release, for every repo.

The pipeline runs stage by stage over the whole repository collection:

1. fetch the account and list all of its repositories
2. drop forks
3. select the release tag of every repository concurrently
4. drop repositories without a release tag
5. resolve the commit delta of every tagged repository concurrently
6. drop repositories with nothing new since their tag
7. project to published results

Results keep the repository order of step 2.  Per-repository failures in
steps 3 and 5 are collected as :class:`RepositoryFailure` entries unless
``isolate_repo_failures`` is off, in which case the first one aborts the
whole scan.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Sequence, TypeVar

from commits_since_tag.domain.entities import (
    OwnerScanReport,
    RepositoryFailure,
    RepositoryRef,
)
from commits_since_tag.domain.exceptions import CommitsSinceTagError
from commits_since_tag.domain.ports.git_host import GitHost
from commits_since_tag.services.commit_delta import CommitDeltaResolver
from commits_since_tag.services.repository_lister import RepositoryLister
from commits_since_tag.services.result_projector import project
from commits_since_tag.services.tag_selector import TagSelector

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class ScanOwnerUseCase:
    """Orchestrates the account → published results pipeline.

    Parameters
    ----------
    host:
        Adapter for the remote git-hosting API.
    isolate_repo_failures:
        Collect per-repository failures instead of failing the scan.
    """

    def __init__(self, host: GitHost, isolate_repo_failures: bool = True) -> None:
        self._host = host
        self._isolate = isolate_repo_failures
        self._lister = RepositoryLister(host)
        self._tags = TagSelector(host)
        self._delta = CommitDeltaResolver(host)

    # ── Public entry point ──────────────────────────────────────────────

    async def execute(self, login: str) -> OwnerScanReport:
        logger.info("Scanning repositories of %s", login)

        account = await self._host.fetch_account(login)
        repos = await self._lister.list_repositories(account)
        logger.debug("%d repos before filter", len(repos))

        repos = [repo for repo in repos if not repo.fork]

        resolutions, tag_failures = await self._fan_out(
            repos, self._tags.select, lambda repo: repo
        )
        tagged = [r for r in resolutions if r.tag is not None]
        logger.debug("%d repos after filter", len(tagged))

        deltas, delta_failures = await self._fan_out(
            tagged,
            lambda r: self._delta.resolve(r.repo, r.tag),  # type: ignore[arg-type]
            lambda r: r.repo,
        )

        results = tuple(project(d) for d in deltas if d.commits)

        order = {repo.full_name: i for i, repo in enumerate(repos)}
        failures = tuple(
            sorted(tag_failures + delta_failures, key=lambda f: order.get(f.repo, len(order)))
        )
        if failures:
            logger.warning("%d of %d repos of %s failed", len(failures), len(repos), login)

        return OwnerScanReport(login=account.login, results=results, failures=failures)

    # ── Concurrency ─────────────────────────────────────────────────────

    async def _fan_out(
        self,
        items: Sequence[T],
        call: Callable[[T], Awaitable[R]],
        repo_of: Callable[[T], RepositoryRef],
    ) -> tuple[list[R], list[RepositoryFailure]]:
        """Run *call* over *items* concurrently, preserving input order."""
        if not self._isolate:
            return list(await asyncio.gather(*(call(item) for item in items))), []

        async def _one(item: T) -> R | RepositoryFailure:
            try:
                return await call(item)
            except CommitsSinceTagError as exc:
                name = repo_of(item).full_name
                logger.warning("[%s] %s: %s", name, type(exc).__name__, exc)
                return RepositoryFailure(repo=name, error=str(exc))

        outcomes = await asyncio.gather(*(_one(item) for item in items))
        succeeded = [o for o in outcomes if not isinstance(o, RepositoryFailure)]
        failed = [o for o in outcomes if isinstance(o, RepositoryFailure)]
        return succeeded, failed  # type: ignore[return-value]
