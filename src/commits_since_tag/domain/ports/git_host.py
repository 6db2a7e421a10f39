"""Port: git host — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from commits_since_tag.domain.entities import Account, Commit, RepositoryRef, Tag


class GitHost(Protocol):
    """Abstract contract for the remote git-hosting API."""

    async def fetch_repository(self, full_name: str) -> RepositoryRef:
        """Return the repository record for ``owner/name``."""
        ...

    async def fetch_tags(self, repo: RepositoryRef) -> list[Tag]:
        """Return the first page of tags, in host order."""
        ...

    async def fetch_commit(self, repo: RepositoryRef, sha: str) -> Commit:
        """Return a single commit by SHA."""
        ...

    async def fetch_commits_since(self, repo: RepositoryRef, since: str) -> list[Commit]:
        """Return commits at or after *since*, newest first (single page)."""
        ...

    async def fetch_account(self, login: str) -> Account:
        """Return the user or organization record."""
        ...

    async def fetch_repository_page(
        self, account: Account, page: int, per_page: int
    ) -> list[RepositoryRef]:
        """Return one page of the account's repositories."""
        ...
