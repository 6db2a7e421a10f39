"""Tag selector — picks the latest official release tag of a repository."""

from __future__ import annotations

import logging
from typing import Sequence

from commits_since_tag.domain.entities import RepositoryRef, Tag, TagResolution
from commits_since_tag.domain.ports.git_host import GitHost
from commits_since_tag.domain.value_objects import is_version_tag

logger = logging.getLogger(__name__)
data_logger = logging.getLogger("commits_since_tag.data")


def select_version_tag(tags: Sequence[Tag]) -> Tag | None:
    """Return the first tag, in host order, that is an official release."""
    return next((tag for tag in tags if is_version_tag(tag.name)), None)


class TagSelector:
    """Fetch a repository's tags and select its latest release tag.

    A repository without a release tag yields a ``TagResolution`` whose
    ``tag`` is None; that is a normal outcome, not an error.
    """

    def __init__(self, host: GitHost) -> None:
        self._host = host

    async def select(self, repo: RepositoryRef) -> TagResolution:
        tags = await self._host.fetch_tags(repo)
        logger.debug("[%s] %d tags", repo.full_name, len(tags))
        if tags:
            data_logger.debug("[%s] tags: %s", repo.full_name, [t.name for t in tags])
        return TagResolution(repo=repo, tag=select_version_tag(tags))
