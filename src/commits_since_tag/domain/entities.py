"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class AccountType(str, Enum):
    """Kind of account owning repositories."""

    USER = "User"
    ORGANIZATION = "Organization"


@dataclass(frozen=True, slots=True)
class Account:
    """A person or organization as returned by ``GET /users/{login}``."""

    login: str
    type: AccountType
    public_repos: int = 0
    total_private_repos: int | None = None  # only visible to the owner

    @property
    def total_repos(self) -> int:
        return self.public_repos + (self.total_private_repos or 0)


@dataclass(frozen=True, slots=True)
class RepositoryRef:
    """A remote repository record."""

    owner: str
    name: str
    full_name: str
    fork: bool = False


@dataclass(frozen=True, slots=True)
class Tag:
    """A tag name and the SHA of the commit it points at."""

    name: str
    commit_sha: str


@dataclass(frozen=True, slots=True)
class CommitAuthor:
    name: str | None
    email: str | None
    date: str  # ISO 8601, passed back verbatim as the ``since`` filter


@dataclass(frozen=True, slots=True)
class Commit:
    """Commit metadata embedded in a commit record."""

    sha: str
    author: CommitAuthor
    message: str


@dataclass(frozen=True, slots=True)
class TagResolution:
    """Outcome of tag selection; ``tag`` is None when no release tag exists."""

    repo: RepositoryRef
    tag: Tag | None = None


@dataclass(frozen=True, slots=True)
class DeltaResult:
    """Commits strictly newer than the tagged commit, newest first."""

    repo: RepositoryRef
    tag: Tag
    commits: tuple[Commit, ...] = ()


@dataclass(frozen=True, slots=True)
class PublishedCommit:
    author: dict[str, str | None]
    message: str


@dataclass(frozen=True, slots=True)
class PublishedResult:
    """The external result shape handed to callers."""

    repo: str
    tag: str
    num_commits: int
    commits: tuple[PublishedCommit, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {
            "repo": self.repo,
            "tag": self.tag,
            "numCommits": self.num_commits,
            "commits": [
                {"author": dict(c.author), "message": c.message} for c in self.commits
            ],
        }


@dataclass(frozen=True, slots=True)
class RepositoryFailure:
    """A repository whose scan failed, with the failure message."""

    repo: str
    error: str


@dataclass(frozen=True, slots=True)
class OwnerScanReport:
    """Everything an owner scan produced."""

    login: str
    results: tuple[PublishedResult, ...] = ()
    failures: tuple[RepositoryFailure, ...] = ()
