"""Shared fixtures."""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from commits_since_tag.infrastructure.github_rest_adapter import GitHubRestAdapter
from fakes import API, FakeGitHub


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest_asyncio.fixture
async def host(fake_github: FakeGitHub):
    transport = httpx.MockTransport(fake_github.handler)
    async with httpx.AsyncClient(transport=transport) as client:
        yield GitHubRestAdapter(client=client, user="octocat", token="s3cret", base_url=API)
