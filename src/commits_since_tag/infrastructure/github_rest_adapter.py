"""GitHub REST API adapter — implements the GitHost port."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from commits_since_tag.domain.entities import (
    Account,
    AccountType,
    Commit,
    CommitAuthor,
    RepositoryRef,
    Tag,
)
from commits_since_tag.domain.exceptions import ApiError, TransportError

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"

# Tags and since-filtered commits are read from a single page.
_SINGLE_PAGE_SIZE = 100


def normalize_response(resp: httpx.Response) -> Any:
    """Return the parsed JSON body of a 200 response, raise ApiError otherwise.

    The host's ``message`` field becomes the error text.  The request path
    (without scheme, host or credentials) is only logged and attached to the
    exception for diagnostics.
    """
    path = resp.request.url.raw_path.decode("ascii")

    if resp.status_code == 200:
        try:
            return resp.json()
        except ValueError as exc:
            raise ApiError("Invalid JSON in response body", 200, path) from exc

    try:
        message = resp.json().get("message")
    except (ValueError, AttributeError):
        message = None
    message = message or f"HTTP {resp.status_code}"

    logger.debug("%s: %s", message, path)
    raise ApiError(message, resp.status_code, path)


def _parse_repository(data: dict[str, Any]) -> RepositoryRef:
    full_name = data["full_name"]
    owner, _, name = full_name.partition("/")
    return RepositoryRef(
        owner=(data.get("owner") or {}).get("login", owner),
        name=data.get("name", name),
        full_name=full_name,
        fork=bool(data.get("fork", False)),
    )


def _parse_commit(data: dict[str, Any]) -> Commit:
    meta = data.get("commit") or {}
    author = meta.get("author") or {}
    return Commit(
        sha=data.get("sha", ""),
        author=CommitAuthor(
            name=author.get("name"),
            email=author.get("email"),
            date=author.get("date", ""),
        ),
        message=meta.get("message", ""),
    )


class GitHubRestAdapter:
    """Concrete GitHost backed by the GitHub v3 REST API.

    Credentials are sent as HTTP basic auth (user + personal access token)
    on every request; nothing is kept in module state.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        user: str,
        token: str,
        base_url: str = GITHUB_API,
    ) -> None:
        self._client = client
        self._auth = httpx.BasicAuth(user, token)
        self._base_url = base_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "commits-since-tag/1.0",
        }

    async def fetch_repository(self, full_name: str) -> RepositoryRef:
        """GET /repos/{owner}/{name} → RepositoryRef."""
        data = await self._api_get(f"/repos/{full_name}")
        return _parse_repository(data)

    async def fetch_tags(self, repo: RepositoryRef) -> list[Tag]:
        """GET /repos/{owner}/{name}/tags → [Tag]."""
        data = await self._api_get(
            f"/repos/{repo.full_name}/tags",
            params={"per_page": str(_SINGLE_PAGE_SIZE)},
        )
        return [
            Tag(name=item["name"], commit_sha=(item.get("commit") or {}).get("sha", ""))
            for item in data
        ]

    async def fetch_commit(self, repo: RepositoryRef, sha: str) -> Commit:
        """GET /repos/{owner}/{name}/commits/{sha} → Commit."""
        data = await self._api_get(f"/repos/{repo.full_name}/commits/{sha}")
        return _parse_commit(data)

    async def fetch_commits_since(self, repo: RepositoryRef, since: str) -> list[Commit]:
        """GET /repos/{owner}/{name}/commits?since=… → [Commit], newest first."""
        data = await self._api_get(
            f"/repos/{repo.full_name}/commits",
            params={"since": since, "per_page": str(_SINGLE_PAGE_SIZE)},
        )
        return [_parse_commit(item) for item in data]

    async def fetch_account(self, login: str) -> Account:
        """GET /users/{login} → Account."""
        data = await self._api_get(f"/users/{login}")
        account_type = (
            AccountType.USER if data.get("type") == AccountType.USER.value
            else AccountType.ORGANIZATION
        )
        return Account(
            login=data["login"],
            type=account_type,
            public_repos=data.get("public_repos") or 0,
            total_private_repos=data.get("total_private_repos"),
        )

    async def fetch_repository_page(
        self, account: Account, page: int, per_page: int
    ) -> list[RepositoryRef]:
        """GET /users|orgs/{login}/repos?per_page=N&page=P → [RepositoryRef]."""
        prefix = "users" if account.type is AccountType.USER else "orgs"
        data = await self._api_get(
            f"/{prefix}/{account.login}/repos",
            params={"per_page": str(per_page), "page": str(page)},
        )
        return [_parse_repository(item) for item in data]

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Perform a GitHub API GET request and normalize the response."""
        url = f"{self._base_url}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params, auth=self._auth
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"Network error fetching {endpoint}: {exc}") from exc

        return normalize_response(resp)
