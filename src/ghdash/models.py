"""Data models for ghdash."""

from typing import Optional

from pydantic import BaseModel


# ── GitHub data ───────────────────────────────────────────────────────────

class Repository(BaseModel):
    """A repository as returned by the GitHub REST API."""

    name: str
    full_name: str = ""
    fork: bool = False
    private: bool = False
    html_url: str = ""
    description: Optional[str] = None


# ── Configuration ─────────────────────────────────────────────────────────

class GhConfig(BaseModel):
    """Credentials used to reach GitHub.

    Both fields default to empty strings so a missing or partial file still
    loads; the dashboard rejects empty values when it is built.
    """

    user: str = ""
    token: str = ""
