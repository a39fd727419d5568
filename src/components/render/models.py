"""
Render component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.components.metadata import Meta


@dataclass(frozen=True)
class MetaTag:
    """HTML meta tag representation."""

    name: str | None = None
    property: str | None = None
    content: str = ""


@dataclass(frozen=True)
class CachePolicy:
    """Shared-cache lifetime for a rendered response."""

    s_maxage_seconds: int
    stale_while_revalidate_seconds: int


@dataclass(frozen=True)
class RenderBotHtmlInput:
    meta: Meta
    cache_policy: CachePolicy | None = None


@dataclass(frozen=True)
class RenderBotHtmlOutput:
    html: str
    headers: dict[str, str]
    media_type: str = "text/html; charset=utf-8"
