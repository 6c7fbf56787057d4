"""Error types raised by ghdash."""

from pathlib import Path
from typing import Optional


class GhDashError(Exception):
    """Base class for all ghdash errors."""


class MustHaveUser(GhDashError):
    def __init__(self) -> None:
        super().__init__("A GitHub user name is required to build the dashboard")


class MustHaveToken(GhDashError):
    def __init__(self) -> None:
        super().__init__("A GitHub access token is required to build the dashboard")


class ApiError(GhDashError):
    """Failure reported by, or while talking to, the GitHub API."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigError(GhDashError):
    """The configuration file could not be read or understood."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid configuration file {path}: {reason}")
        self.path = path
        self.reason = reason
