"""Tests for release-tag selection."""

import pytest

from commits_since_tag.domain.entities import RepositoryRef, Tag
from commits_since_tag.domain.exceptions import ApiError
from commits_since_tag.services.tag_selector import TagSelector, select_version_tag

WIDGET = RepositoryRef(owner="acme", name="widget", full_name="acme/widget")


def test_select_skips_prerelease_even_when_newest():
    tags = [Tag("v2.0.0-beta", "a"), Tag("nightly", "b"), Tag("v1.4.0", "c"), Tag("v1.3.9", "d")]
    assert select_version_tag(tags) == Tag("v1.4.0", "c")


def test_select_keeps_host_order():
    # host order wins over version ordering
    tags = [Tag("1.0.0", "a"), Tag("v2.0.0", "b")]
    assert select_version_tag(tags).name == "1.0.0"


def test_select_none_when_no_release_tag():
    assert select_version_tag([Tag("release-1", "a"), Tag("v1.9.9-rc1", "b")]) is None
    assert select_version_tag([]) is None


@pytest.mark.asyncio
async def test_selector_returns_resolution(fake_github, host):
    fake_github.add_repository(
        "acme/widget", tags=[("v2.0.0", "t2"), ("v1.9.9-rc1", "t1")], tagged_sha="t2"
    )

    resolution = await TagSelector(host).select(WIDGET)

    assert resolution.repo == WIDGET
    assert resolution.tag == Tag("v2.0.0", "t2")


@pytest.mark.asyncio
async def test_selector_without_release_tag_is_not_an_error(fake_github, host):
    fake_github.add_repository("acme/widget", tags=[("v3.0.0-alpha", "x")])

    resolution = await TagSelector(host).select(WIDGET)

    assert resolution.tag is None


@pytest.mark.asyncio
async def test_selector_propagates_fetch_failure(fake_github, host):
    fake_github.add("/repos/acme/widget/tags", {"message": "Server Error"}, status=500)

    with pytest.raises(ApiError, match="Server Error"):
        await TagSelector(host).select(WIDGET)
