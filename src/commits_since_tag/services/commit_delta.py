"""Commit delta resolver — commits that landed after a release tag."""

from __future__ import annotations

import logging

from commits_since_tag.domain.entities import DeltaResult, RepositoryRef, Tag
from commits_since_tag.domain.ports.git_host import GitHost

logger = logging.getLogger(__name__)
data_logger = logging.getLogger("commits_since_tag.data")


class CommitDeltaResolver:
    """Resolve the commits on a repository that are newer than a tag.

    The tagged commit's author date is used as the host-side ``since``
    filter.  That filter is inclusive, so the tagged commit itself comes
    back as well; it is dropped by SHA rather than by position.
    """

    def __init__(self, host: GitHost) -> None:
        self._host = host

    async def resolve(self, repo: RepositoryRef, tag: Tag) -> DeltaResult:
        tagged = await self._host.fetch_commit(repo, tag.commit_sha)
        since = await self._host.fetch_commits_since(repo, tagged.author.date)

        excluded = {sha for sha in (tag.commit_sha, tagged.sha) if sha}
        commits = tuple(c for c in since if c.sha not in excluded)

        logger.debug(
            "[%s] %d commits after tag %s", repo.full_name, len(commits), tag.name
        )
        if commits:
            data_logger.debug(
                "[%s] commits: %s", repo.full_name, [(c.sha, c.message) for c in commits]
            )
        return DeltaResult(repo=repo, tag=tag, commits=commits)
