"""Result projector — DeltaResult to the published result shape."""

from __future__ import annotations

from commits_since_tag.domain.entities import DeltaResult, PublishedCommit, PublishedResult


def project(delta: DeltaResult) -> PublishedResult:
    """Collapse a DeltaResult; commit timestamps and SHAs are dropped."""
    return PublishedResult(
        repo=delta.repo.full_name,
        tag=delta.tag.name,
        num_commits=len(delta.commits),
        commits=tuple(
            PublishedCommit(
                author={"name": c.author.name, "email": c.author.email},
                message=c.message,
            )
            for c in delta.commits
        ),
    )
