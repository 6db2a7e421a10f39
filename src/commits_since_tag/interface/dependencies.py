"""FastAPI dependency injection wiring."""

from __future__ import annotations

from functools import lru_cache

import httpx

from commits_since_tag.infrastructure.config import Settings, get_settings
from commits_since_tag.infrastructure.github_rest_adapter import GitHubRestAdapter
from commits_since_tag.services.resolve_repo import ResolveRepoUseCase
from commits_since_tag.services.scan_owner import ScanOwnerUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = _settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


@lru_cache(maxsize=1)
def _settings() -> Settings:
    return get_settings()


def get_git_host() -> GitHubRestAdapter:
    """Build the GitHub adapter on the shared client."""
    settings = _settings()

    assert _http_client is not None, "startup() was not called"

    return GitHubRestAdapter(
        client=_http_client,
        user=settings.github_user,
        token=settings.github_token.get_secret_value(),
        base_url=settings.github_api_url,
    )


def get_resolve_repo_use_case() -> ResolveRepoUseCase:
    return ResolveRepoUseCase(get_git_host())


def get_scan_owner_use_case() -> ScanOwnerUseCase:
    return ScanOwnerUseCase(
        get_git_host(), isolate_repo_failures=_settings().isolate_repo_failures
    )
