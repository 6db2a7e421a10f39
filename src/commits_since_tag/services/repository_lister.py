"""Repository lister — every repository of an account, all pages."""

from __future__ import annotations

import asyncio
import logging

from commits_since_tag.domain.entities import Account, RepositoryRef
from commits_since_tag.domain.exceptions import NoRepositoriesError
from commits_since_tag.domain.ports.git_host import GitHost

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


def page_count(total_repos: int) -> int:
    """Number of pages to request for *total_repos* repositories.

    Always one more than the number of full pages, so an exact multiple of
    ``PAGE_SIZE`` costs an extra (empty) request instead of a missing page.
    """
    return total_repos // PAGE_SIZE + 1


class RepositoryLister:
    """List an account's repositories by fetching all pages concurrently."""

    def __init__(self, host: GitHost) -> None:
        self._host = host

    async def list_repositories(self, account: Account) -> list[RepositoryRef]:
        total = account.total_repos
        if total == 0:
            raise NoRepositoriesError(f"{account.login} has no repos")

        pages = page_count(total)
        logger.debug("[%s] %d repos over %d pages", account.login, total, pages)

        # gather() keeps page order regardless of completion order
        results = await asyncio.gather(
            *(
                self._host.fetch_repository_page(account, page, PAGE_SIZE)
                for page in range(1, pages + 1)
            )
        )
        return [repo for page_repos in results for repo in page_repos]
