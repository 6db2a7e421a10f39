"""Resolve-repository use case — commits since the last release of one repo."""

from __future__ import annotations

import logging

from commits_since_tag.domain.entities import PublishedResult
from commits_since_tag.domain.exceptions import ForkedRepositoryError, MissingVersionTagError
from commits_since_tag.domain.ports.git_host import GitHost
from commits_since_tag.domain.value_objects import RepoFullName
from commits_since_tag.services.commit_delta import CommitDeltaResolver
from commits_since_tag.services.result_projector import project
from commits_since_tag.services.tag_selector import TagSelector

logger = logging.getLogger(__name__)


class ResolveRepoUseCase:
    """Validate → fetch → reject forks → select tag → resolve delta → project."""

    def __init__(self, host: GitHost) -> None:
        self._host = host
        self._tags = TagSelector(host)
        self._delta = CommitDeltaResolver(host)

    async def execute(self, full_name: str) -> PublishedResult:
        name = RepoFullName.from_string(full_name)
        logger.info("Resolving commits since tag for %s", name)

        repo = await self._host.fetch_repository(str(name))
        if repo.fork:
            raise ForkedRepositoryError(f"ignoring forked repo {repo.full_name}")

        resolution = await self._tags.select(repo)
        if resolution.tag is None:
            raise MissingVersionTagError(f"repo {repo.full_name} has no version tag")

        delta = await self._delta.resolve(resolution.repo, resolution.tag)
        return project(delta)
