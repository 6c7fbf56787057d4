"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep credentials from the developer's shell out of the tests."""
    monkeypatch.delenv("GHDASH_USER", raising=False)
    monkeypatch.delenv("GHDASH_TOKEN", raising=False)


def _repo(name, fork=False, owner="octocat"):
    return {
        "name": name,
        "full_name": f"{owner}/{name}",
        "fork": fork,
        "private": False,
        "html_url": f"https://github.com/{owner}/{name}",
        "description": None,
        "stargazers_count": 3,
    }


@pytest.fixture
def make_repo():
    """Build a GitHub API repository payload."""
    return _repo


@pytest.fixture
def repo_listing():
    """Five repositories, two of them forks, in full-name order."""
    return [
        _repo("alpha"),
        _repo("beta"),
        _repo("cpython", fork=True),
        _repo("delta"),
        _repo("linux", fork=True),
    ]
