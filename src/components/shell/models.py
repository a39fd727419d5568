"""
Shell component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CachedShell:
    html: str
    source_url: str
    fetched_at: float


@dataclass(frozen=True)
class ShellConfig:
    """
    Where the SPA root document lives and how long to keep it.

    ttl_seconds=None keeps the document for the life of the process.
    """

    path: str = "/index.html"
    ttl_seconds: float | None = None
    origin_override: str | None = None
