"""
Metadata resolution - pure helpers.

Route intent parsing, canonical URL building, text clean-up and the mapping
from data store projections to Meta. No I/O lives here.

Key behaviors:
- Identifiers are validated before they can reach a data store filter
- Canonical URLs always point at the human-facing route
- Truncation is exact-length and idempotent
"""

from __future__ import annotations

import html
import re
from urllib.parse import quote, unquote, urlencode, urlparse

from src.domain.branding import (
    ELLIPSIS,
    FALLBACK_IMAGE_URL,
    GENERIC_BLOG_DESCRIPTION,
    GENERIC_POST_DESCRIPTION,
    SITE_NAME,
    SITE_TAGLINE,
    TITLE_MAX,
)
from src.domain.entities import BlogSummary, PostSummary

from .models import UNKNOWN_INTENT, ContentType, Meta, RouteIntent, RouteKind

PREVIEW_IMAGE_PATH = "/api/og"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]{0,127}$")
_POST_PATH_RE = re.compile(r"^/blog/([^/]+)/post/([^/]+)")
_BLOG_PATH_RE = re.compile(r"^/blog/([^/]+)(?:/|$)")
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


# --- Text ---


def truncate(text: str, bound: int) -> str:
    """
    Truncate text to at most `bound` code points.

    Text that already fits is returned unchanged. Longer text is cut to
    exactly `bound` code points, the last of which is a single ellipsis.
    """
    if bound < 1:
        raise ValueError(f"Truncation bound must be positive, got {bound}")
    if len(text) <= bound:
        return text
    return text[: bound - 1] + ELLIPSIS


def strip_html(text: str) -> str:
    """Reduce an HTML fragment to plain text with collapsed whitespace."""
    without_tags = _TAG_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", html.unescape(without_tags)).strip()


# --- Route Intents ---


def is_valid_identifier(value: str | None) -> bool:
    if not value:
        return False
    return _IDENTIFIER_RE.match(value) is not None


def parse_route_intent(path: str) -> RouteIntent:
    """
    Parse a human-facing path into a RouteIntent.

    /blog/{slug}/post/{id}[/...] -> POST
    /blog/{slug}[/...]           -> BLOG
    anything else                -> UNKNOWN
    """
    post_match = _POST_PATH_RE.match(path)
    if post_match:
        slug, post_id = unquote(post_match.group(1)), unquote(post_match.group(2))
        if is_valid_identifier(slug) and is_valid_identifier(post_id):
            return RouteIntent(kind=RouteKind.POST, blog_slug=slug, post_id=post_id)
        return UNKNOWN_INTENT

    blog_match = _BLOG_PATH_RE.match(path)
    if blog_match:
        slug = unquote(blog_match.group(1))
        if is_valid_identifier(slug):
            return RouteIntent(kind=RouteKind.BLOG, blog_slug=slug)

    return UNKNOWN_INTENT


def intent_from_query(
    entity_type: str | None,
    post_id: str | None = None,
    slug: str | None = None,
) -> RouteIntent:
    """Build a RouteIntent from the image endpoint's query parameters."""
    if entity_type == RouteKind.POST.value and post_id and is_valid_identifier(post_id):
        blog_slug = slug if slug and is_valid_identifier(slug) else ""
        return RouteIntent(kind=RouteKind.POST, blog_slug=blog_slug, post_id=post_id)
    if entity_type == RouteKind.BLOG.value and slug and is_valid_identifier(slug):
        return RouteIntent(kind=RouteKind.BLOG, blog_slug=slug)
    return UNKNOWN_INTENT


# --- URLs ---


def normalize_origin(origin: str) -> str:
    """
    Reduce an origin to scheme://host[:port].

    Raises ValueError if the origin is not an absolute http(s) URL.
    """
    parsed = urlparse(origin.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Origin must be an absolute http(s) URL: {origin!r}")
    return f"{parsed.scheme}://{parsed.netloc}"


def canonical_url_for(intent: RouteIntent, origin: str, blog_slug: str | None = None) -> str:
    """
    Build the human-facing canonical URL for an intent.

    `blog_slug` overrides the slug carried by the intent (the data store is
    authoritative about which blog owns a post).
    """
    slug = blog_slug or intent.blog_slug

    if intent.kind == RouteKind.POST and intent.post_id and slug:
        return f"{origin}/blog/{quote(slug, safe='')}/post/{quote(intent.post_id, safe='')}"
    if intent.kind == RouteKind.BLOG and slug:
        return f"{origin}/blog/{quote(slug, safe='')}"
    return f"{origin}/"


def preview_image_url_for(intent: RouteIntent, origin: str) -> str:
    """
    URL of the dynamically rendered preview image for an intent.

    Unresolvable intents get the generic site card.
    """
    if intent.kind == RouteKind.POST and intent.post_id:
        query = urlencode({"type": "post", "id": intent.post_id})
    elif intent.kind == RouteKind.BLOG and intent.blog_slug:
        query = urlencode({"type": "blog", "slug": intent.blog_slug})
    else:
        return f"{origin}{PREVIEW_IMAGE_PATH}"
    return f"{origin}{PREVIEW_IMAGE_PATH}?{query}"


# --- Meta Builders ---


def generic_description(kind: RouteKind) -> str:
    if kind == RouteKind.POST:
        return GENERIC_POST_DESCRIPTION
    if kind == RouteKind.BLOG:
        return GENERIC_BLOG_DESCRIPTION
    return SITE_TAGLINE


def fallback_meta(intent: RouteIntent, origin: str) -> Meta:
    """Generic site-level metadata used whenever resolution cannot succeed."""
    return Meta(
        title=SITE_NAME,
        description=generic_description(intent.kind),
        image=FALLBACK_IMAGE_URL,
        canonical_url=canonical_url_for(intent, origin),
        content_type=ContentType.WEBSITE,
        preview_image_url=f"{origin}{PREVIEW_IMAGE_PATH}",
        is_fallback=True,
    )


def _first_text(*candidates: str | None) -> str:
    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate.strip()
    return ""


def build_post_meta(
    intent: RouteIntent,
    origin: str,
    post: PostSummary,
    description_limit: int,
) -> Meta:
    """
    Map a published post to Meta.

    Description chain: subtitle > plain-text content > generic sentence.
    Image chain: owning blog's image > fallback logo.
    """
    description = _first_text(
        post.subtitle,
        strip_html(post.content) if post.content else None,
        GENERIC_POST_DESCRIPTION,
    )

    return Meta(
        title=truncate(_first_text(post.headline, SITE_NAME), TITLE_MAX),
        description=truncate(description, description_limit),
        image=_first_text(post.publisher_image, FALLBACK_IMAGE_URL),
        canonical_url=canonical_url_for(intent, origin, blog_slug=post.publisher_slug),
        content_type=ContentType.ARTICLE,
        preview_image_url=preview_image_url_for(intent, origin),
        publisher_name=_first_text(post.publisher_name) or None,
    )


def build_blog_meta(
    intent: RouteIntent,
    origin: str,
    blog: BlogSummary,
    description_limit: int,
) -> Meta:
    """Map an active blog to Meta."""
    description = _first_text(blog.description, GENERIC_BLOG_DESCRIPTION)

    return Meta(
        title=truncate(_first_text(blog.name, SITE_NAME), TITLE_MAX),
        description=truncate(description, description_limit),
        image=_first_text(blog.profile_image, FALLBACK_IMAGE_URL),
        canonical_url=canonical_url_for(intent, origin, blog_slug=blog.slug),
        content_type=ContentType.WEBSITE,
        preview_image_url=preview_image_url_for(intent, origin),
    )
