"""GitHub repository listing via the REST API."""

import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ghdash.errors import ApiError
from ghdash.log import TRACE
from ghdash.models import Repository

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


class GitHubFetcher:
    """Lists a user's repositories from the GitHub REST API."""

    def __init__(
        self, token: Optional[str] = None, base_url: str = GITHUB_API_URL
    ) -> None:
        self.token = token
        self.base_url = base_url
        self._client: Optional[httpx.AsyncClient] = None

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    @property
    def headers(self) -> dict[str, str]:
        h: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h

    async def _client_instance(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
            )
        return self._client

    async def _get(self, path: str, **kwargs) -> httpx.Response:  # type: ignore[no-untyped-def]
        """GET that turns every failure into an :class:`ApiError`."""
        client = await self._client_instance()
        logger.debug("GET %s %s", path, kwargs.get("params", {}))
        try:
            resp = await client.get(path, **kwargs)
        except httpx.HTTPError as e:
            raise ApiError(f"Request to GitHub failed: {e}") from e

        if resp.status_code in (403, 429) and "rate limit" in resp.text.lower():
            remaining = resp.headers.get("x-ratelimit-remaining", "0")
            reset = resp.headers.get("x-ratelimit-reset", "unknown")
            raise ApiError(
                "GitHub API rate limit exceeded "
                f"(remaining: {remaining}, resets at: {reset}). "
                "Wait a few minutes and retry.",
                status_code=resp.status_code,
            )
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApiError(
                f"GitHub API returned {resp.status_code} for {path}",
                status_code=resp.status_code,
            ) from e
        logger.log(
            TRACE, "%s -> %d (%d bytes)", resp.request.url, resp.status_code, len(resp.content)
        )
        return resp

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GitHubFetcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ── Paginated helper ──────────────────────────────────────────────────

    async def _paginate(
        self,
        path: str,
        params: Optional[dict[str, str]] = None,
    ) -> list[dict]:
        """Fetch every page of a paginated GitHub endpoint, in order."""
        params = dict(params or {})
        params.setdefault("per_page", "100")

        results: list[dict] = []
        page = 1
        while True:
            params["page"] = str(page)
            resp = await self._get(path, params=params)
            try:
                data = resp.json()
            except ValueError as e:
                raise ApiError(f"Malformed response from GitHub for {path}") from e
            if not isinstance(data, list):
                raise ApiError(f"Expected a list from GitHub for {path}")
            if not data:
                break
            results.extend(data)
            if len(data) < int(params["per_page"]):
                break
            page += 1
        return results

    # ── Repositories ──────────────────────────────────────────────────────

    async def list_user_repos(
        self,
        user: str,
        type_: str = "owner",
        sort: str = "full_name",
        direction: str = "asc",
    ) -> list[Repository]:
        """List every repository of ``user`` in the order GitHub returns them."""
        raw = await self._paginate(
            f"/users/{quote(user, safe='')}/repos",
            params={"type": type_, "sort": sort, "direction": direction},
        )
        try:
            repos = [Repository.model_validate(item) for item in raw]
        except ValidationError as e:
            raise ApiError(f"Malformed repository record from GitHub: {e}") from e
        logger.debug("Fetched %d repositories for %s", len(repos), user)
        return repos
