"""
Metadata component - Resolve canonical preview metadata for a blog or post.

One resolver serves every surface (bot HTML, preview image, JSON debug
endpoint); callers differ only in the description bound they ask for.

Invariants:
- Resolution never raises because of the data store: any failure,
  including zero rows, yields generic fallback metadata
- Only published posts and active blogs are ever read
- canonical_url is always the human-facing route
"""

from __future__ import annotations

import logging

from src.domain.branding import HTML_DESCRIPTION_MAX

from ._impl import (
    build_blog_meta,
    build_post_meta,
    fallback_meta,
    normalize_origin,
)
from .models import UNKNOWN_INTENT, Meta, ResolveInput, ResolveOutput, RouteIntent, RouteKind
from .ports import SummaryRepoPort

logger = logging.getLogger(__name__)


async def resolve(
    intent: RouteIntent,
    origin: str,
    repo: SummaryRepoPort,
    *,
    description_limit: int = HTML_DESCRIPTION_MAX,
) -> Meta:
    """
    Resolve Meta for a route intent.

    Args:
        intent: Parsed route intent
        origin: Request origin (scheme://host[:port]) used for absolute URLs
        repo: Read-only summary repository
        description_limit: Description bound of the rendering surface

    Returns:
        Meta for the entity, or generic fallback Meta on any miss.

    Raises:
        ValueError: If origin is not an absolute http(s) URL.
    """
    origin = normalize_origin(origin)

    if not intent.is_resolvable:
        return fallback_meta(UNKNOWN_INTENT, origin)

    try:
        if intent.kind == RouteKind.POST:
            post = await repo.get_published_post(intent.post_id or "")
            if post is None:
                logger.warning("No published post %s; serving generic metadata", intent.post_id)
                return fallback_meta(intent, origin)
            return build_post_meta(intent, origin, post, description_limit)

        blog = await repo.get_active_blog(intent.blog_slug)
        if blog is None:
            logger.warning("No active blog %r; serving generic metadata", intent.blog_slug)
            return fallback_meta(intent, origin)
        return build_blog_meta(intent, origin, blog, description_limit)
    except Exception:
        logger.warning(
            "Metadata resolution failed for %s %s; serving generic metadata",
            intent.kind.value,
            intent.post_id or intent.blog_slug,
            exc_info=True,
        )
        return fallback_meta(intent, origin)


async def run(inp: ResolveInput, *, repo: SummaryRepoPort) -> ResolveOutput:
    """Main entry point for the metadata component."""
    meta = await resolve(
        inp.intent,
        inp.origin,
        repo,
        description_limit=inp.description_limit,
    )
    return ResolveOutput(meta=meta, intent=inp.intent)
