"""
Metadata component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.domain.branding import HTML_DESCRIPTION_MAX


class RouteKind(str, Enum):
    POST = "post"
    BLOG = "blog"
    UNKNOWN = "unknown"


class ContentType(str, Enum):
    """Value of og:type."""

    ARTICLE = "article"
    WEBSITE = "website"


@dataclass(frozen=True)
class RouteIntent:
    """
    Semantic reference to the entity a request is about.

    Derived once per request from the path (or the image endpoint query).
    """

    kind: RouteKind
    blog_slug: str = ""
    post_id: str | None = None

    @property
    def is_resolvable(self) -> bool:
        if self.kind == RouteKind.POST:
            return bool(self.post_id)
        if self.kind == RouteKind.BLOG:
            return bool(self.blog_slug)
        return False


UNKNOWN_INTENT = RouteIntent(kind=RouteKind.UNKNOWN)


@dataclass(frozen=True)
class Meta:
    """
    Canonical preview metadata for one blog or post.

    Computed per request, never persisted.
    """

    title: str
    description: str
    image: str
    canonical_url: str
    content_type: ContentType
    preview_image_url: str | None = None
    publisher_name: str | None = None
    is_fallback: bool = False


@dataclass(frozen=True)
class ResolveInput:
    """Input for resolving metadata."""

    intent: RouteIntent
    origin: str
    description_limit: int = HTML_DESCRIPTION_MAX


@dataclass(frozen=True)
class ResolveOutput:
    meta: Meta
    intent: RouteIntent

    @property
    def should_serve_shell(self) -> bool:
        """Unknown routes are handed to the single-page application."""
        return self.intent.kind == RouteKind.UNKNOWN
