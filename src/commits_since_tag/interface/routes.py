"""API routes — thin controllers that delegate to the use cases."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from commits_since_tag.interface.dependencies import (
    get_resolve_repo_use_case,
    get_scan_owner_use_case,
)
from commits_since_tag.interface.schemas import OwnerScanResponse, PublishedResultSchema
from commits_since_tag.services.resolve_repo import ResolveRepoUseCase
from commits_since_tag.services.scan_owner import ScanOwnerUseCase

router = APIRouter()


@router.get(
    "/repos/{owner}/{name}/commits-since-tag",
    response_model=PublishedResultSchema,
    responses={
        422: {"description": "Malformed repository name or forked repository"},
        404: {"description": "Repository not found or has no version tag"},
        502: {"description": "GitHub API error"},
    },
)
async def commits_for_repo(
    owner: str,
    name: str,
    use_case: ResolveRepoUseCase = Depends(get_resolve_repo_use_case),
) -> PublishedResultSchema:
    """Commits since the latest release tag of one repository."""
    result = await use_case.execute(f"{owner}/{name}")
    return PublishedResultSchema.from_result(result)


@router.get(
    "/owners/{login}/commits-since-tag",
    response_model=OwnerScanResponse,
    responses={
        404: {"description": "Account not found or has no repositories"},
        502: {"description": "GitHub API error"},
    },
)
async def commits_for_owner(
    login: str,
    use_case: ScanOwnerUseCase = Depends(get_scan_owner_use_case),
) -> OwnerScanResponse:
    """Commits since the latest release tag of each non-fork repository."""
    report = await use_case.execute(login)
    return OwnerScanResponse.from_report(report)
