"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from commits_since_tag.domain.entities import OwnerScanReport, PublishedResult


class AuthorSchema(BaseModel):
    name: str | None = None
    email: str | None = None


class CommitSchema(BaseModel):
    author: AuthorSchema
    message: str


class PublishedResultSchema(BaseModel):
    """Commits since the latest release tag of one repository."""

    model_config = ConfigDict(populate_by_name=True)

    repo: str
    tag: str
    num_commits: int = Field(alias="numCommits")
    commits: list[CommitSchema]

    @classmethod
    def from_result(cls, result: PublishedResult) -> PublishedResultSchema:
        return cls.model_validate(result.as_dict())


class RepositoryFailureSchema(BaseModel):
    repo: str
    error: str


class OwnerScanResponse(BaseModel):
    """Successful response from ``GET /owners/{login}/commits-since-tag``."""

    owner: str
    results: list[PublishedResultSchema]
    failures: list[RepositoryFailureSchema] = []

    @classmethod
    def from_report(cls, report: OwnerScanReport) -> OwnerScanResponse:
        return cls(
            owner=report.login,
            results=[PublishedResultSchema.from_result(r) for r in report.results],
            failures=[
                RepositoryFailureSchema(repo=f.repo, error=f.error) for f in report.failures
            ],
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
