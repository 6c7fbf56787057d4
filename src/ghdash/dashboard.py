"""The dashboard: a GitHub user and the repositories they own."""

import logging
from typing import Optional

from ghdash.errors import MustHaveToken, MustHaveUser
from ghdash.fetcher import GitHubFetcher
from ghdash.grid import Direction, Filling, Grid, bold

logger = logging.getLogger(__name__)


class Dashboard:
    """A user, their access token and the names of their own repositories.

    Build one with :meth:`create`, which fetches the repository list once.
    The setters only change local state and can be chained::

        dash.set_user("octocat").add_repo("scratch")
    """

    def __init__(self, user: str, token: str, repositories: list[str]) -> None:
        self._user = user
        self._token = token
        self._repositories = list(repositories)

    @classmethod
    async def create(
        cls,
        user: str,
        token: str,
        fetcher: Optional[GitHubFetcher] = None,
    ) -> "Dashboard":
        """Fetch ``user``'s repositories and build a dashboard from them.

        Repositories are requested sorted by full name, ascending, and forks
        are dropped. Raises :class:`MustHaveUser` or :class:`MustHaveToken`
        for empty credentials and :class:`~ghdash.errors.ApiError` if GitHub
        cannot be reached or rejects the request.
        """
        if not user:
            raise MustHaveUser()
        if not token:
            raise MustHaveToken()

        owns_fetcher = fetcher is None
        if fetcher is None:
            fetcher = GitHubFetcher(token=token)
        try:
            repos = await fetcher.list_user_repos(
                user, type_="owner", sort="full_name", direction="asc"
            )
        finally:
            if owns_fetcher:
                await fetcher.close()

        names = [repo.name for repo in repos if not repo.fork]
        logger.info(
            "Loaded %d repositories for %s (%d forks skipped)",
            len(names),
            user,
            len(repos) - len(names),
        )
        return cls(user, token, names)

    @property
    def user(self) -> str:
        return self._user

    @property
    def token(self) -> str:
        return self._token

    @property
    def repositories(self) -> tuple[str, ...]:
        return tuple(self._repositories)

    def set_user(self, user: str) -> "Dashboard":
        self._user = user
        return self

    def set_token(self, token: str) -> "Dashboard":
        self._token = token
        return self

    def add_repo(self, repo: str) -> "Dashboard":
        """Append ``repo`` to the end of the list, duplicates included."""
        self._repositories.append(repo)
        return self

    def render(self) -> str:
        """Render the dashboard as a one-column grid under a bold heading."""
        grid = Grid(direction=Direction.LEFT_TO_RIGHT, filling=Filling.spaces(1))
        grid.add(bold("Repository"))
        for repo in self._repositories:
            grid.add(repo)
        return grid.fit_into_columns(1)

    def __repr__(self) -> str:
        return (
            f"Dashboard(user={self._user!r}, "
            f"repositories={len(self._repositories)})"
        )
